"""Plaintext (``.cells`` style) pattern reading and writing.

One text line per grid row. ``X``, ``O`` and ``*`` mark live cells, ``_``
and ``.`` mark dead ones, spaces are ignored and lines starting with ``!``
are comments. Rows shorter than the widest row are padded with dead cells.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from lifesim.core.exceptions import PatternError
from lifesim.utils.consts import ConstUtils


def _strip_blank_edges(rows: list[str]) -> list[str]:
    start = 0
    end = len(rows)
    while start < end and not rows[start]:
        start += 1
    while end > start and not rows[end - 1]:
        end -= 1
    return rows[start:end]


def parse_plaintext(
    text: str, name: Optional[str] = None
) -> tuple[int, int, list[tuple[int, int]]]:
    """Parse plaintext rows.

    Args:
        text: Pattern text.
        name: Pattern name, only used in error details.

    Returns:
        (width, height, live positions as (col, row) pairs)

    Raises:
        PatternError: on unknown glyphs or when the text holds no rows
    """
    rows = []
    for line in text.splitlines():
        stripped = line.strip()
        if stripped.startswith(ConstUtils.COMMENT_PREFIX):
            continue
        rows.append("".join(stripped.split()))

    rows = _strip_blank_edges(rows)
    width = max((len(r) for r in rows), default=0)
    if not rows or width == 0:
        raise PatternError("Pattern contains no cells", pattern=name)

    alive: list[tuple[int, int]] = []
    for row, glyphs in enumerate(rows):
        for col, glyph in enumerate(glyphs):
            if glyph in ConstUtils.LIVE_GLYPHS:
                alive.append((col, row))
            elif glyph not in ConstUtils.DEAD_GLYPHS:
                raise PatternError(
                    f"Unknown glyph {glyph!r} at col={col}, row={row}",
                    pattern=name,
                )

    return width, len(rows), alive


def format_plaintext(
    rows: Iterable[Sequence[bool]],
    live: str = ConstUtils.DEFAULT_LIVE_GLYPH,
    dead: str = ConstUtils.DEFAULT_DEAD_GLYPH,
) -> str:
    """Render rows of life states, one space between glyphs."""
    return "\n".join(
        " ".join(live if alive else dead for alive in row) for row in rows
    )
