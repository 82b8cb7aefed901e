"""GUI backend interfaces and adapters."""

from __future__ import annotations

from contextlib import nullcontext
from dataclasses import dataclass
from typing import ContextManager, Protocol

from lifesim.core.board import Board
from lifesim.core.controller import SimulationController
from lifesim.interfaces.board import IBoard


class SimulatorBackend(Protocol):
    """Minimal simulator backend required by the GUI."""

    @property
    def generation(self) -> int:
        ...

    def update(self, elapsed: float) -> bool:
        ...

    def step(self) -> None:
        ...

    def reset(self, board: Board | None = None) -> None:
        ...

    def snapshot(self) -> IBoard:
        ...


@dataclass
class ControllerBackend(SimulatorBackend):
    """Adapter that exposes a SimulationController through SimulatorBackend.

    The optional lock lets another thread drive the same controller.
    """

    controller: SimulationController
    lock: ContextManager | None = None

    def __post_init__(self) -> None:
        if self.lock is None:
            self.lock = nullcontext()

    @property
    def generation(self) -> int:
        assert self.lock is not None
        with self.lock:
            return self.controller.generation

    def update(self, elapsed: float) -> bool:
        assert self.lock is not None
        with self.lock:
            return self.controller.update(elapsed)

    def step(self) -> None:
        assert self.lock is not None
        with self.lock:
            self.controller.step()

    def reset(self, board: Board | None = None) -> None:
        assert self.lock is not None
        with self.lock:
            self.controller.reset(board)

    def snapshot(self) -> IBoard:
        # Boards are replaced, never mutated, so the reference is a stable
        # snapshot once the lock is released.
        assert self.lock is not None
        with self.lock:
            return self.controller.board
