"""Unit marker used when a variant carries no meaningful payload."""

from __future__ import annotations

from typing import ClassVar, Final

from resultkit.errors import SingletonError

__all__ = ["NOTHING", "Nothing"]


class Nothing:
    """The single value of the unit type.

    ``Result.success()`` and ``Result.failure()`` wrap ``NOTHING`` so a result
    can signal an outcome without data. The instance is created once at import
    time; asking for another one raises ``SingletonError``. Copying and
    pickling hand back the canonical instance.
    """

    __slots__ = ()

    _instance: ClassVar[Nothing | None] = None

    def __new__(cls) -> Nothing:
        if cls._instance is not None:
            raise SingletonError(
                "Nothing cannot be instantiated more than once",
                hint="Use resultkit.NOTHING",
            )
        instance = super().__new__(cls)
        cls._instance = instance
        return instance

    def __repr__(self) -> str:
        return "Nothing"

    def __reduce__(self) -> str:
        # Resolved by name against this module on unpickle/copy.
        return "NOTHING"


NOTHING: Final[Nothing] = Nothing()
