"""Single grid position."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Cell:
    """Life state of one position plus its coordinates.

    The coordinates duplicate the cell's index in the owning grid so that
    renderers can iterate cells without re-deriving positions. They are set
    when the grid is built and never change; only ``alive`` is written, and
    only while a board fills in its successor grid.
    """

    alive: bool
    col: int
    row: int
