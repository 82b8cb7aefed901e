"""Board abstraction - behavioral contract.

A Board is one complete generation of a bounded Life grid. Renderers and
backends depend on this interface only; the concrete grid lives in
lifesim.core.board.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, NamedTuple


class CellState(NamedTuple):
    """Read-only view of one cell, as handed to renderers."""

    col: int
    row: int
    alive: bool


class IBoard(ABC):
    """Base class for boards.

    A board never changes once built: advancing the simulation produces a
    new board through next().
    """

    @property
    @abstractmethod
    def width(self) -> int:
        """Number of columns."""
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        """Number of rows."""
        ...

    @property
    @abstractmethod
    def population(self) -> int:
        """Number of live cells."""
        ...

    @abstractmethod
    def is_alive(self, col: int, row: int) -> bool:
        """Whether the cell at (col, row) is alive."""
        ...

    @abstractmethod
    def cells(self) -> Iterator[CellState]:
        """Yield every cell exactly once without modifying the board."""
        ...

    @abstractmethod
    def next(self) -> IBoard:
        """Compute the following generation as a new board."""
        ...

    def __iter__(self) -> Iterator[CellState]:
        return self.cells()
