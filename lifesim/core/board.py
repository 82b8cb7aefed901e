"""Bounded Life grid and the generation update.

The grid has hard edges: positions outside ``[0, width) x [0, height)``
contribute no neighbors. Each call to next() reads only the current grid
and writes a fresh one, so no cell ever sees a neighbor's new state during
the same generation.
"""

from __future__ import annotations

import random
from dataclasses import replace
from typing import Iterable, Iterator, Optional

from lifesim.core.cell import Cell
from lifesim.core.exceptions import ConfigurationError, GridBoundsError
from lifesim.core.plaintext import format_plaintext, parse_plaintext
from lifesim.interfaces.board import CellState, IBoard
from lifesim.utils.consts import RANDOM_ALIVE_PROBABILITY, ConstUtils

# (dcol, drow) for the 8 surrounding positions
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dcol, drow)
    for drow in (-1, 0, 1)
    for dcol in (-1, 0, 1)
    if (dcol, drow) != (0, 0)
)


def _validate_dimension(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigurationError(name, f"must be a positive integer, got {value!r}")


def _build_grid(width: int, height: int) -> list[list[Cell]]:
    return [[Cell(False, col, row) for col in range(width)] for row in range(height)]


class Board(IBoard):
    """Fixed-size grid of cells, indexed ``[row][col]`` internally."""

    def __init__(self, width: int, height: int):
        _validate_dimension("width", width)
        _validate_dimension("height", height)
        self._width = width
        self._height = height
        self._grid = _build_grid(width, height)

    @classmethod
    def random(
        cls, width: int, height: int, rng: Optional[random.Random] = None
    ) -> Board:
        """Seed every cell alive or dead with equal probability.

        Args:
            width: Number of columns
            height: Number of rows
            rng: Random source. Pass a seeded ``random.Random`` for a
                reproducible board; a fresh entropy-seeded one is used
                otherwise.
        """
        if rng is None:
            rng = random.Random()
        board = cls(width, height)
        for row in board._grid:
            for cell in row:
                cell.alive = rng.random() < RANDOM_ALIVE_PROBABILITY
        return board

    @classmethod
    def from_cells(
        cls, width: int, height: int, alive: Iterable[tuple[int, int]]
    ) -> Board:
        """Build a board whose live cells are the given (col, row) pairs."""
        board = cls(width, height)
        for col, row in alive:
            board._write(col, row, True)
        return board

    @classmethod
    def from_text(cls, text: str) -> Board:
        """Build a board sized to fit a plaintext pattern."""
        width, height, alive = parse_plaintext(text)
        return cls.from_cells(width, height, alive)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def population(self) -> int:
        return sum(cell.alive for row in self._grid for cell in row)

    def contains(self, col: int, row: int) -> bool:
        return 0 <= col < self._width and 0 <= row < self._height

    def _check_position(self, col: int, row: int) -> None:
        if not self.contains(col, row):
            raise GridBoundsError(col, row, self._width, self._height)

    def _alive_at(self, col: int, row: int) -> bool:
        # Off-grid reads are dead. Checked explicitly since a negative
        # index would otherwise wrap to the far edge.
        if not self.contains(col, row):
            return False
        return self._grid[row][col].alive

    def _write(self, col: int, row: int, alive: bool) -> None:
        self._check_position(col, row)
        self._grid[row][col].alive = alive

    def is_alive(self, col: int, row: int) -> bool:
        self._check_position(col, row)
        return self._grid[row][col].alive

    def cell(self, col: int, row: int) -> Cell:
        """Return a copy of the cell at (col, row)."""
        self._check_position(col, row)
        return replace(self._grid[row][col])

    def live_neighbors(self, col: int, row: int) -> int:
        """Number of live cells among the in-grid neighbors of (col, row)."""
        self._check_position(col, row)
        return self._tally(col, row)

    def _tally(self, col: int, row: int) -> int:
        tally = 0
        for dcol, drow in NEIGHBOR_OFFSETS:
            if self._alive_at(col + dcol, row + drow):
                tally += 1
        return tally

    def next(self) -> Board:
        """Compute the next generation.

        The current board is left untouched; the result has the same
        dimensions and the same cell coordinates.
        """
        successor = type(self)(self._width, self._height)
        for row in self._grid:
            for cell in row:
                tally = self._tally(cell.col, cell.row)
                if cell.alive:
                    alive = tally in ConstUtils.SURVIVAL_COUNTS
                else:
                    alive = tally in ConstUtils.BIRTH_COUNTS
                successor._write(cell.col, cell.row, alive)
        return successor

    def cells(self) -> Iterator[CellState]:
        """Yield (col, row, alive) for every cell, row by row."""
        for row in self._grid:
            for cell in row:
                yield CellState(cell.col, cell.row, cell.alive)

    def live_positions(self) -> frozenset[tuple[int, int]]:
        """(col, row) of every live cell."""
        return frozenset(
            (cell.col, cell.row) for row in self._grid for cell in row if cell.alive
        )

    def to_text(
        self,
        live: str = ConstUtils.DEFAULT_LIVE_GLYPH,
        dead: str = ConstUtils.DEFAULT_DEAD_GLYPH,
    ) -> str:
        return format_plaintext(
            ([cell.alive for cell in row] for row in self._grid), live=live, dead=dead
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self.live_positions() == other.live_positions()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Board(width={self._width}, height={self._height}, "
            f"population={self.population})"
        )
