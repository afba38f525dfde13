from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from botbrain.brain import Brain
from botbrain.events import BrainEvent, EventEmitter


class FakeTimerHandle:
    def __init__(self, when: float, callback: Callable[[], None]) -> None:
        self.when = when
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeLoop:
    """Just enough of an event loop for ``call_later`` with a manual clock."""

    def __init__(self) -> None:
        self.now = 0.0
        self.handles: list[FakeTimerHandle] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> FakeTimerHandle:
        handle = FakeTimerHandle(self.now + delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> list[FakeTimerHandle]:
        return [h for h in self.handles if not h.cancelled and not h.fired]

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            due = [h for h in self.pending if h.when <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.when)
            self.now = handle.when
            handle.fired = True
            handle.callback()
        self.now = target


@pytest.fixture
def fake_loop() -> FakeLoop:
    return FakeLoop()


@pytest.fixture
def host() -> EventEmitter:
    return EventEmitter()


@pytest.fixture
def brain(host: EventEmitter, fake_loop: FakeLoop) -> Brain:
    return Brain(host, loop=fake_loop)  # type: ignore[arg-type]


@pytest.fixture
def saves(brain: Brain) -> list[Any]:
    """Snapshots passed to ``save`` handlers, in order."""
    received: list[Any] = []
    brain.on(BrainEvent.SAVE, received.append)
    return received
