"""Brain snapshot model and its serialized form.

The dumped shape, ``{"users": {id: {...}}, "_private": {...}}``, is what
persistence adapters write and later hand back through ``Brain.merge_data``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from botbrain.exceptions import BrainSnapshotError
from botbrain.models.user import User


def _with_ids(users: Mapping[Any, Any]) -> dict[str, Any]:
    """Key users by ``str(key)``; a record without ``id`` takes its key."""
    filled: dict[str, Any] = {}
    for key, value in users.items():
        if isinstance(value, Mapping) and "id" not in value:
            value = {**value, "id": key}
        filled[str(key)] = value
    return filled


class BrainData(BaseModel):
    """Root store: user records plus a free-form private namespace.

    Top-level keys other than ``users`` and ``_private`` are accepted and
    kept as extra attributes.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    users: dict[str, User] = Field(default_factory=dict)
    private: dict[str, Any] = Field(default_factory=dict, alias="_private")

    @field_validator("users", mode="before")
    @classmethod
    def _fill_user_ids(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, Mapping):
            return _with_ids(value)
        return value


def field_name_for(key: str) -> str:
    """Map a serialized top-level key (``_private``) to its attribute name."""
    for name, info in BrainData.model_fields.items():
        if key in (name, info.alias):
            return name
    return key


def coerce_users(users: Mapping[Any, Any] | None) -> dict[str, User]:
    """Build a ``users`` namespace, keeping existing ``User`` instances as-is.

    Raises
    ------
    BrainSnapshotError
        If a record cannot be turned into a :class:`User`.
    """
    if not users:
        return {}
    coerced: dict[str, User] = {}
    try:
        for key, value in _with_ids(users).items():
            coerced[key] = value if isinstance(value, User) else User.model_validate(value)
    except ValidationError as exc:
        raise BrainSnapshotError(f"Invalid user record: {exc.error_count()} error(s)") from exc
    return coerced


def dump_snapshot(data: BrainData) -> dict[str, Any]:
    """Serialize a snapshot to plain JSON-compatible data."""
    return data.model_dump(mode="json", by_alias=True)


def load_snapshot(raw: Mapping[str, Any] | str | bytes) -> BrainData:
    """Decode persisted data (a mapping or a JSON document) into a snapshot.

    Raises
    ------
    BrainSnapshotError
        If *raw* does not match the snapshot shape.
    """
    try:
        if isinstance(raw, (str, bytes)):
            return BrainData.model_validate_json(raw)
        return BrainData.model_validate(raw)
    except ValidationError as exc:
        raise BrainSnapshotError(f"Invalid brain snapshot: {exc.error_count()} error(s)") from exc
