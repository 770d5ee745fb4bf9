"""Configuration: a frozen pydantic schema plus scoped overrides.

Resolution precedence, highest first:

1. The innermost active ``settings_override(...)`` scope.
2. ``RESULTKIT_*`` environment variables (a ``.env`` file is honored).
3. Field defaults on ``Settings``.

Environment resolution is cached after the first lookup. Call
``reload_settings()`` after changing the environment at runtime.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from functools import cache
import logging
import os
from typing import TYPE_CHECKING, Any

import dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from resultkit.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

__all__ = [
    "ENV_PREFIX",
    "Settings",
    "get_settings",
    "reload_settings",
    "settings_override",
]

log = logging.getLogger(__name__)

ENV_PREFIX = "RESULTKIT_"

_override_var: contextvars.ContextVar[Settings | None] = contextvars.ContextVar(
    "resultkit_settings_override", default=None
)


class Settings(BaseModel):
    """Validated, immutable library settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    #: When False, ``Success(None)`` and ``Failure(None)`` raise
    #: ``NonePayloadError``. ``NOTHING`` is the payload for "no data".
    allow_none_payloads: bool = Field(default=False)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``RESULTKIT_*`` variables in *environ*."""
        env = os.environ if environ is None else environ
        raw: dict[str, Any] = {}
        for name in cls.model_fields:
            key = f"{ENV_PREFIX}{name.upper()}"
            value = env.get(key)
            if value is not None and value.strip():
                raw[name] = value.strip()
        try:
            return cls(**raw)
        except ValidationError as exc:
            keys = ", ".join(
                f"{ENV_PREFIX}{str(err['loc'][0]).upper()}"
                for err in exc.errors()
                if err["loc"]
            )
            raise ConfigurationError(
                f"Invalid resultkit settings in environment: {keys or 'unknown'}",
                hint="Boolean flags accept 1/0, true/false, yes/no, on/off",
            ) from exc


@cache
def _env_settings() -> Settings:
    dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True))
    settings = Settings.from_env()
    log.debug("Resolved resultkit settings from environment: %s", settings)
    return settings


def get_settings() -> Settings:
    """Return the settings in effect for the current context."""
    override = _override_var.get()
    if override is not None:
        return override
    return _env_settings()


def reload_settings() -> None:
    """Drop cached environment settings so the next lookup re-reads them."""
    _env_settings.cache_clear()


@contextmanager
def settings_override(**changes: Any) -> Iterator[Settings]:
    """Temporarily replace settings for the current thread or task.

    Fields not named in *changes* keep their currently effective value, so
    scopes nest naturally.

    Example:
        with settings_override(allow_none_payloads=True):
            Result.success(None)
    """
    base = get_settings()
    try:
        scoped = Settings(**{**base.model_dump(), **changes})
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid settings override: {sorted(changes)}",
            hint=f"Known fields: {', '.join(Settings.model_fields)}",
        ) from exc
    token = _override_var.set(scoped)
    try:
        yield scoped
    finally:
        _override_var.reset(token)
