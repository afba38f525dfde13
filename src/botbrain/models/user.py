"""Chat user record."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """A user known to the brain.

    Besides ``id``, ``name`` and ``room`` any caller-supplied field is kept
    as an extra attribute (``user.email``, ``user.roles``...).  Instances are
    mutable and owned by the brain that created them.
    """

    model_config = ConfigDict(extra="allow")

    id: str | int
    name: str | None = None
    room: str | None = None
