"""Custom exception hierarchy for botbrain."""

from __future__ import annotations


class BrainError(Exception):
    """Base exception for all botbrain errors."""


class BrainConfigError(BrainError):
    """Invalid or missing configuration."""


class BrainSnapshotError(BrainError):
    """A persisted payload could not be decoded into a brain snapshot.

    Raised by :func:`botbrain.models.load_snapshot` when the stored data does
    not fit the ``{"users": ..., "_private": ...}`` shape.  The underlying
    pydantic ``ValidationError`` is chained as ``__cause__``.
    """
