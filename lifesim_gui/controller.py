"""Simulation presenter (framework-agnostic)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable

import psutil  # type: ignore[import-untyped]

from lifesim.core.board import Board
from lifesim.interfaces.board import IBoard
from lifesim_gui.backend import SimulatorBackend


class SimulationState(Enum):
    RUNNING = auto()
    PAUSED = auto()
    EXTERNAL = auto()


@dataclass
class StatusSample:
    generation: int
    population: int
    cpu_percent: float
    memory_percent: float


class SystemMonitor:
    """Process-level CPU/memory monitoring."""

    def __init__(self) -> None:
        self._proc = psutil.Process()
        # First call primes the counter and always reports 0.0
        self._proc.cpu_percent(interval=None)

    def sample(self) -> tuple[float, float]:
        return (
            float(self._proc.cpu_percent(interval=None)),
            float(self._proc.memory_percent()),
        )


class SimulationPresenter:
    """Coordinator between the host loop, the backend and the views.

    While RUNNING, elapsed frame time is forwarded to the backend. While
    PAUSED, time is dropped so resuming does not burst generations. In
    EXTERNAL mode another thread drives the backend and the presenter only
    reads snapshots.
    """

    def __init__(
        self,
        backend: SimulatorBackend,
        board_factory: Callable[[], Board],
        monitor: SystemMonitor | None = None,
    ):
        self._backend = backend
        self._board_factory = board_factory
        self._state = SimulationState.PAUSED
        self._monitor = monitor if monitor is not None else SystemMonitor()

    @property
    def state(self) -> SimulationState:
        return self._state

    def set_running(self, running: bool) -> None:
        self._state = SimulationState.RUNNING if running else SimulationState.PAUSED

    def set_external(self, external: bool) -> None:
        if external:
            self._state = SimulationState.EXTERNAL
        elif self._state == SimulationState.EXTERNAL:
            self._state = SimulationState.PAUSED

    def toggle_running(self) -> None:
        if self._state == SimulationState.EXTERNAL:
            return
        self.set_running(self._state != SimulationState.RUNNING)

    def advance(self, elapsed: float) -> bool:
        if self._state != SimulationState.RUNNING:
            return False
        return self._backend.update(elapsed)

    def step(self) -> None:
        if self._state == SimulationState.PAUSED:
            self._backend.step()

    def reseed(self) -> None:
        if self._state != SimulationState.EXTERNAL:
            self._backend.reset(self._board_factory())

    def snapshot(self) -> IBoard:
        return self._backend.snapshot()

    def status(self) -> StatusSample:
        cpu, mem = self._monitor.sample()
        return StatusSample(
            generation=self._backend.generation,
            population=self._backend.snapshot().population,
            cpu_percent=cpu,
            memory_percent=mem,
        )
