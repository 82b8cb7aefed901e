"""Simulation controller: turns elapsed time into generations."""

from __future__ import annotations

import logging
from typing import Optional

from lifesim.core.board import Board
from lifesim.core.clock import Clock
from lifesim.interfaces.clock import IClock
from lifesim.utils.consts import DEFAULT_TICK_INTERVAL

logger = logging.getLogger(__name__)


class SimulationController:
    """Owns the current board and advances it on a fixed time interval.

    The host loop reports elapsed seconds through update(). Once the
    accumulated time exceeds the tick interval the board is replaced by its
    next generation and the interval is subtracted from the accumulator, so
    surplus time carries over to the following call. At most one generation
    is advanced per update() call.
    """

    def __init__(
        self,
        board: Board,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
        clock: Optional[IClock] = None,
    ):
        if tick_interval <= 0:
            raise ValueError("tick_interval must be positive")
        self._board = board
        self._tick_interval = float(tick_interval)
        self._accumulator = 0.0
        self._clock = clock if clock is not None else Clock()

    @property
    def board(self) -> Board:
        return self._board

    @property
    def tick_interval(self) -> float:
        return self._tick_interval

    @property
    def accumulator(self) -> float:
        return self._accumulator

    @property
    def clock(self) -> IClock:
        return self._clock

    @property
    def generation(self) -> int:
        return self._clock.generation

    def update(self, elapsed: float) -> bool:
        """Account for ``elapsed`` seconds.

        Returns:
            True if a generation was advanced during this call.
        """
        if elapsed < 0:
            raise ValueError("elapsed must be >= 0")

        self._accumulator += elapsed
        if self._accumulator <= self._tick_interval:
            return False

        self._accumulator -= self._tick_interval
        self._advance()
        return True

    def step(self) -> None:
        """Advance one generation immediately, leaving the accumulator alone."""
        self._advance()

    def _advance(self) -> None:
        self._board = self._board.next()
        self._clock.tick(1)
        logger.debug(
            "generation %d: population %d",
            self._clock.generation,
            self._board.population,
        )

    def reset(self, board: Optional[Board] = None) -> None:
        """Restart timing and generation counting, optionally on a new board."""
        if board is not None:
            self._board = board
        self._accumulator = 0.0
        self._clock.reset()
        logger.info(
            "simulation reset on %dx%d board", self._board.width, self._board.height
        )
