"""Clock interface for generation counting and pub/sub tick propagation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol


class ClockSubscriber(Protocol):
    """Anything that wants to hear about completed generations."""

    def tick(self, generations: int = 1) -> None:
        """React to the given number of generations having elapsed."""
        ...


class IClock(ABC):
    """Clock interface used by the simulation controller."""

    @property
    @abstractmethod
    def generation(self) -> int:
        """Total number of generations elapsed since the last reset."""
        ...

    @abstractmethod
    def subscribe(self, subscriber: ClockSubscriber) -> None:
        """Subscribe a component to generation ticks."""
        ...

    @abstractmethod
    def unsubscribe(self, subscriber: ClockSubscriber) -> None:
        """Unsubscribe a component from generation ticks."""
        ...

    @abstractmethod
    def tick(self, generations: int = 1) -> None:
        """Advance the generation count and notify subscribers."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Reset the generation count to zero."""
        ...
