"""Simulation engine for driving a controller without a window."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lifesim.core.board import Board
    from lifesim.core.controller import SimulationController


class SimulationEngine:
    """Minimal host loop.

    Feeds fixed-size frames of elapsed time to a controller, the way a
    render loop would, and delegates stepping and resets to it.
    """

    def __init__(self, frame_seconds: float = 1 / 60):
        if frame_seconds <= 0:
            raise ValueError("frame_seconds must be positive")
        self._frame_seconds = frame_seconds

    @property
    def frame_seconds(self) -> float:
        return self._frame_seconds

    def run(self, controller: "SimulationController", duration: float) -> int:
        """Deliver ``duration`` seconds in frames; return generations advanced.

        The final frame carries whatever remains of ``duration``.
        """
        if duration < 0:
            raise ValueError("duration must be >= 0")

        advanced = 0
        remaining = duration
        while remaining > 0:
            frame = min(self._frame_seconds, remaining)
            if controller.update(frame):
                advanced += 1
            remaining -= frame
        return advanced

    def step(self, controller: "SimulationController", generations: int = 1) -> None:
        """Advance the controller by a number of generations."""
        if generations < 0:
            raise ValueError("generations must be >= 0")
        for _ in range(generations):
            controller.step()

    def reset(self, controller: "SimulationController", board: "Board") -> None:
        """Restart the controller on the given board."""
        controller.reset(board)
