"""botbrain - event-driven in-memory state store for chat bots."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("botbrain")
except PackageNotFoundError:
    __version__ = "0+local"
from botbrain.brain import Brain
from botbrain.config import BrainConfig
from botbrain.events import BrainEvent, EventEmitter, EventSource, RobotEvent
from botbrain.exceptions import BrainConfigError, BrainError, BrainSnapshotError
from botbrain.models import BrainData, User, dump_snapshot, load_snapshot
from botbrain.robot import Robot

__all__ = [
    "__version__",
    "Brain",
    "BrainConfig",
    "BrainConfigError",
    "BrainData",
    "BrainError",
    "BrainEvent",
    "BrainSnapshotError",
    "EventEmitter",
    "EventSource",
    "Robot",
    "RobotEvent",
    "User",
    "dump_snapshot",
    "load_snapshot",
]
