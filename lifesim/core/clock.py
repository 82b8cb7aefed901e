"""Generation clock with pub/sub notification."""

from __future__ import annotations

import inspect
from typing import Callable, List

from lifesim.interfaces.clock import ClockSubscriber, IClock


class Clock(IClock):
    """Counts generations and notifies subscribers on tick()."""

    def __init__(self) -> None:
        self._generation = 0
        self._subscribers: List[ClockSubscriber] = []

    @property
    def generation(self) -> int:
        return self._generation

    def subscribe(self, subscriber: ClockSubscriber) -> None:
        if subscriber not in self._subscribers:
            self._subscribers.append(subscriber)

    def unsubscribe(self, subscriber: ClockSubscriber) -> None:
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)

    def _validate_generations(self, generations: int) -> None:
        if generations < 0:
            raise ValueError("generations must be >= 0")

    def _repeat_call(self, fn: Callable[[], None], generations: int) -> None:
        for _ in range(generations):
            fn()

    def _accepts_generations(self, tick_fn: Callable[..., None]) -> bool:
        try:
            signature = inspect.signature(tick_fn)
        except ValueError:
            # No introspectable signature (some builtins); pass the count
            return True
        try:
            signature.bind(1)
        except TypeError:
            return False
        return True

    def _notify_subscriber(self, subscriber: ClockSubscriber, generations: int) -> None:
        tick_fn = getattr(subscriber, "tick", None)
        if not callable(tick_fn):
            return
        # Decided up front so errors raised by the subscriber propagate
        if self._accepts_generations(tick_fn):
            tick_fn(generations)
        else:
            self._repeat_call(tick_fn, generations)

    def tick(self, generations: int = 1) -> None:
        self._validate_generations(generations)
        if generations == 0:
            return

        self._generation += generations

        # Notify subscribers once per tick batch
        for subscriber in list(self._subscribers):
            self._notify_subscriber(subscriber, generations)

    def reset(self) -> None:
        self._generation = 0
