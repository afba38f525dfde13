"""Minimal chat runtime host for a brain."""

from __future__ import annotations

import asyncio
import logging

from botbrain.brain import Brain
from botbrain.config import BrainConfig
from botbrain.events import EventEmitter, RobotEvent

_logger = logging.getLogger(__name__)


class Robot(EventEmitter):
    """Owns a :class:`Brain` and tells it when the runtime is up.

    ``run()`` emits ``running``, which starts the brain's autosave timer, so
    it has to be called with an event loop available.  ``shutdown()`` closes
    the brain (final save, then ``close``).
    """

    def __init__(
        self,
        name: str = "robot",
        *,
        config: BrainConfig | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        super().__init__()
        self.name = name
        self.brain = Brain(self, config=config, loop=loop)

    def run(self) -> None:
        _logger.debug("Robot %s running", self.name)
        self.emit(RobotEvent.RUNNING)

    def shutdown(self) -> None:
        _logger.debug("Robot %s shutting down", self.name)
        self.brain.close()
