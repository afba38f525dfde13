"""Repeating timer driven by an asyncio event loop."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

_logger = logging.getLogger(__name__)


class SaveTimer:
    """Call *callback* every *interval* seconds until cancelled.

    Built from a ``loop.call_later`` chain, so ticks run on the loop thread.
    The next tick is scheduled before *callback* runs: an exception raised
    by the callback goes to the loop's exception handler and the timer
    keeps firing.
    """

    def __init__(
        self,
        callback: Callable[[], None],
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._callback = callback
        self._explicit_loop = loop
        self._loop: asyncio.AbstractEventLoop | None = loop
        self._handle: asyncio.TimerHandle | None = None
        self._interval: float | None = None

    @property
    def is_active(self) -> bool:
        return self._handle is not None

    @property
    def interval(self) -> float | None:
        """Period of the active timer in seconds, ``None`` when stopped."""
        return self._interval

    def start(self, interval: float) -> None:
        """(Re)start the timer; any previously scheduled tick is dropped.

        Without an explicit loop this must be called from a running loop,
        which is looked up again on every start.
        """
        if interval <= 0:
            raise ValueError(f"Save interval must be positive, got {interval!r}")
        self.cancel()
        if self._explicit_loop is not None:
            self._loop = self._explicit_loop
        else:
            self._loop = asyncio.get_running_loop()
        self._interval = float(interval)
        self._handle = self._loop.call_later(self._interval, self._tick)
        _logger.debug("Save timer started interval=%ss", self._interval)

    def cancel(self) -> None:
        handle = self._handle
        self._handle = None
        self._interval = None
        if handle is None:
            return
        handle.cancel()
        _logger.debug("Save timer cancelled")

    def _tick(self) -> None:
        if self._interval is None or self._loop is None:
            return
        self._handle = self._loop.call_later(self._interval, self._tick)
        self._callback()
