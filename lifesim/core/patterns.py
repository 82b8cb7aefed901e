"""Seed pattern registry and factory.

Provides discovery and instantiation of starting boards by name. Fixed
patterns are stored as plaintext and centered on the requested board;
the ``random`` pattern seeds every cell independently.

Patterns registered here are available to the GUI and the console example
through create_board().
"""

from __future__ import annotations

import random
from typing import Callable, Optional

from lifesim.core.board import Board
from lifesim.core.exceptions import PatternError
from lifesim.core.plaintext import parse_plaintext

PatternFactory = Callable[[int, int, Optional[random.Random]], Board]


def plaintext_pattern(name: str, text: str) -> PatternFactory:
    """Build a factory that centers a plaintext pattern on the board."""
    pattern_width, pattern_height, alive = parse_plaintext(text, name=name)

    def factory(
        width: int, height: int, rng: Optional[random.Random] = None
    ) -> Board:
        if pattern_width > width or pattern_height > height:
            raise PatternError(
                f"Pattern is {pattern_width}x{pattern_height}, "
                f"board is only {width}x{height}",
                pattern=name,
            )
        left = (width - pattern_width) // 2
        top = (height - pattern_height) // 2
        return Board.from_cells(
            width, height, ((col + left, row + top) for col, row in alive)
        )

    return factory


def _random_board(
    width: int, height: int, rng: Optional[random.Random] = None
) -> Board:
    return Board.random(width, height, rng=rng)


def _empty_board(
    width: int, height: int, rng: Optional[random.Random] = None
) -> Board:
    return Board(width, height)


class PatternRegistry:
    """Registry of named seed patterns.

    THREAD SAFETY: Not thread-safe. All registration should happen during
    module initialization before any threads are spawned.
    """

    def __init__(self) -> None:
        self._patterns: dict[str, PatternFactory] = {}

    def register(self, name: str, factory: PatternFactory) -> None:
        """Register a pattern factory."""
        if name in self._patterns:
            raise ValueError(f"Pattern '{name}' already registered")
        self._patterns[name] = factory

    def get(self, name: str) -> PatternFactory:
        """Get a pattern factory by name."""
        if name not in self._patterns:
            raise ValueError(
                f"Unknown pattern '{name}'. Available: {list(self._patterns.keys())}"
            )
        return self._patterns[name]

    def list_patterns(self) -> list[str]:
        """List all registered pattern names."""
        return list(self._patterns.keys())

    def create(
        self,
        name: str,
        width: int,
        height: int,
        rng: Optional[random.Random] = None,
    ) -> Board:
        """Build a board of the given size seeded with the named pattern."""
        return self.get(name)(width, height, rng)


BUILTIN_PATTERNS: dict[str, str] = {
    "blinker": "XXX",
    "block": """
        XX
        XX
    """,
    "glider": """
        _X_
        __X
        XXX
    """,
    "toad": """
        _XXX
        XXX_
    """,
    "beacon": """
        XX__
        XX__
        __XX
        __XX
    """,
    "r-pentomino": """
        _XX
        XX_
        _X_
    """,
}


# Global registry
_REGISTRY = PatternRegistry()
_REGISTRY.register("random", _random_board)
_REGISTRY.register("empty", _empty_board)
for _name, _text in BUILTIN_PATTERNS.items():
    _REGISTRY.register(_name, plaintext_pattern(_name, _text))


def register_pattern(name: str, factory: PatternFactory) -> None:
    """Register a pattern globally."""
    _REGISTRY.register(name, factory)


def get_pattern(name: str) -> PatternFactory:
    """Get a pattern factory by name."""
    return _REGISTRY.get(name)


def create_board(
    name: str,
    width: int,
    height: int,
    rng: Optional[random.Random] = None,
) -> Board:
    """Create a seeded board by pattern name."""
    return _REGISTRY.create(name, width, height, rng)


def list_available_patterns() -> list[str]:
    """List all registered patterns."""
    return _REGISTRY.list_patterns()
