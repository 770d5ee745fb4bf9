"""Exception hierarchy for resultkit.

Domain failures travel as ``Failure`` payloads and are never raised. The
exceptions below signal configuration problems or API misuse, both of which
are programmer errors that should surface immediately.
"""

from __future__ import annotations

from typing import Any, Literal

Variant = Literal["success", "failure"]


class ResultkitError(Exception):
    """Base exception for all resultkit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        """Return the message, followed by the hint when one is attached."""
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class ConfigurationError(ResultkitError):
    """Settings could not be resolved or failed validation."""


class MisuseError(ResultkitError):
    """The API was called in a way that is only valid for the other variant.

    These indicate a logic bug in the caller, not a domain outcome.
    """


class UnwrapError(MisuseError):
    """A variant-specific accessor was called on the wrong variant."""

    def __init__(self, operation: str, variant: Variant) -> None:
        self.operation = operation
        self.variant = variant
        super().__init__(
            f"Attempted to call `Result.{operation}` on a {variant} value",
            hint="Check is_success() or is_failure() first, or use match()",
        )


class ExpectError(MisuseError):
    """An ``expect_*`` assertion did not hold.

    The rendered message is ``"<message>: <payload>"`` where ``payload`` is
    the value of the variant that was actually present.
    """

    def __init__(
        self, message: str, payload: Any, *, operation: str, variant: Variant
    ) -> None:
        self.message = message
        self.payload = payload
        self.operation = operation
        self.variant = variant
        super().__init__(f"{message}: {payload}")


class SingletonError(MisuseError):
    """A second instance of a singleton marker was requested."""


class NonePayloadError(MisuseError):
    """A ``Success`` or ``Failure`` was built around ``None``."""
