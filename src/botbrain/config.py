"""Brain configuration."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from botbrain.exceptions import BrainConfigError

#: Autosave period used when the host signals ``running``.
DEFAULT_SAVE_INTERVAL: float = 5.0


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_interval(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError as exc:
        raise BrainConfigError(f"BRAIN_SAVE_INTERVAL must be a number, got {value!r}") from exc
    if seconds <= 0:
        raise BrainConfigError(f"BRAIN_SAVE_INTERVAL must be positive, got {value!r}")
    return seconds


@dataclasses.dataclass(frozen=True)
class BrainConfig:
    """Brain configuration.

    Parameters
    ----------
    save_interval : float
        Seconds between autosave ticks once the host is running.
        Defaults to 5 seconds.
    auto_save : bool
        Whether autosave ticks emit ``save`` initially.  Can be toggled
        later with :meth:`botbrain.brain.Brain.set_auto_save`.
    """

    save_interval: float = DEFAULT_SAVE_INTERVAL
    auto_save: bool = True

    @classmethod
    def from_env(cls, **overrides: Any) -> BrainConfig:
        """Create configuration from environment variables.

        Reads ``BRAIN_SAVE_INTERVAL`` and ``BRAIN_AUTOSAVE``.  Explicit
        keyword arguments override environment values.

        Raises
        ------
        BrainConfigError
            If ``BRAIN_SAVE_INTERVAL`` is not a positive number.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        interval_env = env.get("BRAIN_SAVE_INTERVAL")
        if interval_env is not None and "save_interval" not in overrides:
            config_kwargs["save_interval"] = _env_interval(interval_env)

        if "auto_save" not in overrides:
            config_kwargs["auto_save"] = _env_bool(env.get("BRAIN_AUTOSAVE"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
