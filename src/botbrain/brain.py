"""In-memory brain: user records, private key/value data and autosave."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any, overload

from botbrain._timer import SaveTimer
from botbrain.config import BrainConfig
from botbrain.events import BrainEvent, EventEmitter, EventSource, RobotEvent
from botbrain.models.store import BrainData, coerce_users, field_name_for
from botbrain.models.user import User

_logger = logging.getLogger(__name__)


class Brain(EventEmitter):
    """Event-emitting state container for a chat runtime.

    The brain never persists anything itself.  Adapters subscribe to
    ``save`` and ``close`` to write the snapshot somewhere, and push stored
    state back in with :meth:`merge_data` (which emits ``loaded``).

    Handlers receive the live :class:`BrainData` snapshot, not a copy, and
    must treat it as read-only.

    Usage::

        brain = Brain(robot)
        brain.on(BrainEvent.SAVE, adapter.write)
        brain.set("greeting", "hello").set({"counter": 1})
        user = brain.user_for_id("42", {"name": "Alice", "room": "general"})
    """

    def __init__(
        self,
        host: EventSource,
        *,
        config: BrainConfig | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        super().__init__()
        self._config = config or BrainConfig()
        self._data = BrainData()
        self.auto_save = self._config.auto_save
        self._timer = SaveTimer(self._on_save_tick, loop=loop)

        host.on(RobotEvent.RUNNING, self._on_host_running)

    @property
    def data(self) -> BrainData:
        """The live snapshot."""
        return self._data

    @property
    def save_interval(self) -> float | None:
        """Period of the active autosave timer, ``None`` when no timer runs."""
        return self._timer.interval

    # ------------------------------------------------------------------
    # Private namespace
    # ------------------------------------------------------------------

    @overload
    def set(self, key: str, value: Any) -> Brain: ...

    @overload
    def set(self, key: Mapping[str, Any]) -> Brain: ...

    def set(self, key: Any, value: Any = None) -> Brain:
        """Store one pair, or a mapping of pairs, in the private namespace.

        Existing keys are overwritten, others are left alone.  When *key* is
        a mapping *value* is ignored.  Emits ``loaded`` and returns the brain
        for chaining.
        """
        pairs = dict(key) if isinstance(key, Mapping) else {key: value}
        self._data.private.update(pairs)
        self.emit(BrainEvent.LOADED, self._data)
        return self

    def get(self, key: str) -> Any:
        """Value stored under *key*, or ``None``.

        Falsy values (``0``, ``""``, ``False``...) also come back as ``None``.
        """
        return self._data.private.get(key) or None

    def remove(self, key: str) -> Brain:
        self._data.private.pop(key, None)
        return self

    def merge_data(self, incoming: BrainData | Mapping[str, Any] | None) -> None:
        """Replace top-level entries with the ones found in *incoming*.

        Only one level deep: ``users`` and ``_private`` are swapped out whole,
        nested structures are not merged.  Emits ``loaded`` once.

        Every entry is converted before any is applied, so a record that
        cannot become a :class:`User` leaves the brain untouched.

        Raises
        ------
        BrainSnapshotError
            If a ``users`` entry is not a valid user record.
        """
        if isinstance(incoming, BrainData):
            entries: dict[str, Any] = {name: getattr(incoming, name) for name in BrainData.model_fields}
            entries.update(incoming.model_extra or {})
        else:
            entries = dict(incoming or {})

        updates: dict[str, Any] = {}
        for key, value in entries.items():
            name = field_name_for(key)
            if name == "users":
                value = coerce_users(value)
            elif name == "private" and value is None:
                value = {}
            updates[name] = value

        for name, value in updates.items():
            setattr(self._data, name, value)
        _logger.debug("Merged brain data keys=%s", sorted(entries))
        self.emit(BrainEvent.LOADED, self._data)

    # ------------------------------------------------------------------
    # Saving and lifecycle
    # ------------------------------------------------------------------

    def save(self) -> None:
        """Emit ``save`` so persistence adapters can write the snapshot."""
        self.emit(BrainEvent.SAVE, self._data)

    def close(self) -> None:
        """Stop autosaving, save one last time and emit ``close``."""
        self._timer.cancel()
        self.save()
        _logger.debug("Brain closed")
        self.emit(BrainEvent.CLOSE)

    def set_auto_save(self, enabled: bool) -> None:
        """Enable or disable saving on timer ticks; the timer keeps running."""
        self.auto_save = enabled

    def reset_save_interval(self, seconds: float) -> None:
        """Replace the autosave timer with one firing every *seconds*."""
        self._timer.start(seconds)

    def _on_host_running(self, *_args: Any) -> None:
        self.reset_save_interval(self._config.save_interval)

    def _on_save_tick(self) -> None:
        if self.auto_save:
            self.save()

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def users(self) -> dict[str, User]:
        """The live ``users`` mapping, keyed by ``str(user.id)``."""
        return self._data.users

    def user_for_id(
        self,
        user_id: str | int,
        options: Mapping[str, Any] | None = None,
        **fields: Any,
    ) -> User:
        """Return the user for *user_id*, creating it on first lookup.

        When ``room`` is given and differs from the stored user's room the
        stored user is replaced by a new one built from the options; other
        attributes of the old user are dropped.
        """
        attrs = {**(options or {}), **fields}
        key = str(user_id)
        users = self._data.users

        user = users.get(key)
        if user is None:
            user = User.model_validate({**attrs, "id": user_id})
            users[key] = user

        room = attrs.get("room")
        if room and user.room != room:
            _logger.debug("Replacing user id=%s on room change %s -> %s", key, user.room, room)
            user = User.model_validate({**attrs, "id": user_id})
            users[key] = user
        return user

    def user_for_name(self, name: str) -> User | None:
        """Case-insensitive exact name lookup; the last match in order wins."""
        lower_name = name.lower()
        result: User | None = None
        for user in self._data.users.values():
            if user.name is not None and str(user.name).lower() == lower_name:
                result = user
        return result

    def users_for_raw_fuzzy_name(self, fuzzy_name: str) -> list[User]:
        """Users whose name starts with *fuzzy_name*, ignoring case.

        Every stored user must have a name; a nameless user makes this raise
        ``AttributeError``.
        """
        lower_fuzzy_name = fuzzy_name.lower()
        return [
            user
            for user in self._data.users.values()
            if user.name.lower().startswith(lower_fuzzy_name)  # type: ignore[union-attr]
        ]

    def users_for_fuzzy_name(self, fuzzy_name: str) -> list[User]:
        """Only the exact (case-insensitive) match if there is one, else all prefix matches."""
        matched = self.users_for_raw_fuzzy_name(fuzzy_name)
        lower_fuzzy_name = fuzzy_name.lower()
        for user in matched:
            if user.name.lower() == lower_fuzzy_name:  # type: ignore[union-attr]
                return [user]
        return matched
