"""Pydantic models for the brain snapshot."""

from botbrain.models.store import BrainData, dump_snapshot, load_snapshot
from botbrain.models.user import User

__all__ = [
    "BrainData",
    "User",
    "dump_snapshot",
    "load_snapshot",
]
