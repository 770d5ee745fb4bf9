"""The ``Result`` type: an immutable success-or-failure container.

A ``Result[V, E]`` is always exactly one of two variants:

* ``Success(value)`` - a computed outcome of type ``V``.
* ``Failure(error)`` - a rejected outcome of type ``E``.

Each variant is a frozen, slotted dataclass with a single payload slot, so
"both populated" and "neither populated" cannot be represented. ``Result``
itself is abstract and closed: it cannot be instantiated and cannot be
subclassed outside this module, which keeps ``match`` statements over the two
variants exhaustive.

Example:
    def parse_port(raw: str) -> Result[int, str]:
        return Result.resolve(lambda: int(raw), lambda exc: f"bad port: {raw}")

    match parse_port("8080").map(lambda p: p + 1):
        case Success(port):
            serve(port)
        case Failure(reason):
            print(reason)
"""

from __future__ import annotations

import dataclasses
import functools
import logging
from typing import TYPE_CHECKING, Any, overload

from resultkit.config import get_settings
from resultkit.errors import ExpectError, NonePayloadError, UnwrapError
from resultkit.nothing import NOTHING, Nothing

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["Failure", "Result", "Success", "resolving"]

log = logging.getLogger(__name__)


def _ignore(_: object) -> None:
    return None


def _none_as_nothing(payload: object) -> object:
    if payload is None and not get_settings().allow_none_payloads:
        return NOTHING
    return payload


def _check_payload(payload: object, variant: str) -> None:
    if payload is None and not get_settings().allow_none_payloads:
        raise NonePayloadError(
            f"{variant} payload cannot be None",
            hint=(
                "Use NOTHING for an empty payload, Result.from_nullable() for "
                "values that may be None, or set RESULTKIT_ALLOW_NONE_PAYLOADS=1"
            ),
        )


class Result[V, E]:
    """Base type of ``Success`` and ``Failure``.

    Construct instances through the static factories (``Result.success``,
    ``Result.failure``, ``Result.from_nullable``, ``Result.resolve``...) or the
    variant classes directly. Every operation is read-only; combinators return
    new results or plain values and never mutate the receiver.
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> Result[V, E]:
        if cls is Result:
            raise TypeError(
                "Result cannot be instantiated directly; "
                "use Result.success() or Result.failure()"
            )
        return super().__new__(cls)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                f"{cls.__qualname__} cannot subclass Result; "
                "Success and Failure are its only variants"
            )

    # --- Construction ---

    @overload
    @staticmethod
    def success() -> Result[Nothing, Any]: ...
    @overload
    @staticmethod
    def success[T](value: T) -> Result[T, Any]: ...
    @staticmethod
    def success(value: Any = NOTHING) -> Result[Any, Any]:
        """Return a success holding *value*, or ``NOTHING`` when omitted."""
        return Success(value)

    @overload
    @staticmethod
    def failure() -> Result[Any, Nothing]: ...
    @overload
    @staticmethod
    def failure[F](error: F) -> Result[Any, F]: ...
    @staticmethod
    def failure(error: Any = NOTHING) -> Result[Any, Any]:
        """Return a failure holding *error*, or ``NOTHING`` when omitted."""
        return Failure(error)

    @staticmethod
    def from_nullable[T, F](value: T | None, error: F) -> Result[T, F]:
        """Return ``success(value)`` unless *value* is None, else ``failure(error)``."""
        if value is None:
            return Failure(error)
        return Success(value)

    @staticmethod
    def from_optional[T](optional: T | None) -> Result[T, Nothing]:
        """Wrap an optional value; an absent value becomes ``failure(NOTHING)``."""
        if optional is None:
            return Failure(NOTHING)
        return Success(optional)

    @staticmethod
    def from_failure_optional[F](optional: F | None) -> Result[Nothing, F]:
        """Wrap an optional error; an absent error becomes ``success(NOTHING)``."""
        if optional is None:
            return Success(NOTHING)
        return Failure(optional)

    @overload
    @staticmethod
    def resolve[T](thunk: Callable[[], T]) -> Result[T, Nothing]: ...
    @overload
    @staticmethod
    def resolve[T, F](
        thunk: Callable[[], T], error_mapper: Callable[[Exception], F]
    ) -> Result[T, F]: ...
    @staticmethod
    def resolve(
        thunk: Callable[[], Any],
        error_mapper: Callable[[Exception], Any] | None = None,
    ) -> Result[Any, Any]:
        """Run *thunk* once and capture its outcome as a result.

        A normal return becomes a success. Any ``Exception`` raised by the
        thunk becomes a failure whose payload is ``error_mapper(exc)``, or
        ``NOTHING`` when no mapper is given. Interpreter control signals
        (``KeyboardInterrupt``, ``SystemExit``) are not errors and propagate.
        The mapper is caller code: if it raises, that exception propagates.

        A thunk or mapper that returns None yields a ``NOTHING`` payload
        unless None payloads are allowed, so a normal return always produces
        a result.
        """
        try:
            value = thunk()
        except Exception as exc:
            log.debug("resolve() captured %s: %s", type(exc).__name__, exc)
            if error_mapper is None:
                return Failure(NOTHING)
            return Failure(_none_as_nothing(error_mapper(exc)))
        return Success(_none_as_nothing(value))

    # --- Introspection ---

    def is_success(self) -> bool:
        """Return True if this is a ``Success``."""
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        """Return True if this is a ``Failure``."""
        return isinstance(self, Failure)

    # --- Dispatch ---

    def match_result[T](
        self, on_success: Callable[[V], T], on_failure: Callable[[E], T]
    ) -> T:
        """Apply the callback for the present variant and return its value.

        ``Success`` and ``Failure`` each override this; it is the dispatch
        point the other operations build on.
        """
        raise NotImplementedError

    def match(
        self, on_success: Callable[[V], object], on_failure: Callable[[E], object]
    ) -> None:
        """Invoke exactly one of the two actions depending on the variant."""
        self.match_result(on_success, on_failure)

    def on_success(self, action: Callable[[V], object]) -> None:
        """Invoke *action* with the success payload; no-op on failure."""
        self.match(action, _ignore)

    def on_failure(self, action: Callable[[E], object]) -> None:
        """Invoke *action* with the failure payload; no-op on success."""
        self.match(_ignore, action)

    # --- Unwrapping ---

    def unwrap_success(self) -> V:
        """Return the success payload.

        Raises:
            UnwrapError: If this is a failure.
        """
        if isinstance(self, Success):
            return self.value
        raise UnwrapError("unwrap_success", "failure")

    def unwrap_failure(self) -> E:
        """Return the failure payload.

        Raises:
            UnwrapError: If this is a success.
        """
        if isinstance(self, Failure):
            return self.error
        raise UnwrapError("unwrap_failure", "success")

    def unwrap_success_or(self, default: V) -> V:
        """Return the success payload, or *default* on failure."""
        return self.match_result(lambda value: value, lambda _: default)

    def unwrap_success_or_raise(
        self, exception: BaseException | Callable[[E], BaseException]
    ) -> V:
        """Return the success payload, or raise a caller-chosen exception.

        *exception* is either an exception instance, raised as is, or a
        factory (an exception class works) called with the failure payload.
        """
        if isinstance(self, Success):
            return self.value
        error = self.unwrap_failure()
        exc = exception if isinstance(exception, BaseException) else exception(error)
        if not isinstance(exc, BaseException):
            raise TypeError(
                f"Exception factory returned {type(exc).__name__}, "
                "expected an exception instance"
            )
        raise exc

    def expect_success(self, message: str) -> V:
        """Return the success payload or raise ``ExpectError`` with *message*."""
        if isinstance(self, Failure):
            raise ExpectError(
                message, self.error, operation="expect_success", variant="failure"
            )
        return self.unwrap_success()

    def expect_failure(self, message: str) -> E:
        """Return the failure payload or raise ``ExpectError`` with *message*."""
        if isinstance(self, Success):
            raise ExpectError(
                message, self.value, operation="expect_failure", variant="success"
            )
        return self.unwrap_failure()

    def to_optional(self) -> V | None:
        """Return the success payload, or None on failure."""
        return self.match_result(lambda value: value, lambda _: None)

    def to_failure_optional(self) -> E | None:
        """Return the failure payload, or None on success."""
        return self.match_result(lambda _: None, lambda error: error)

    # --- Combinators ---
    # A variant that is passed through is returned as the same instance; its
    # payload type is unchanged, only the unused type parameter differs.

    def and_[N](self, other: Result[N, E]) -> Result[N, E]:
        """Return *other* if this is a success, else this failure unchanged.

        *other* is evaluated by the caller before the call; use ``and_then``
        when it is expensive to build.
        """
        if isinstance(self, Success):
            return other
        return self

    def and_then[N](self, fn: Callable[[V], Result[N, E]]) -> Result[N, E]:
        """Chain *fn* on the success payload; failures pass through."""
        if isinstance(self, Success):
            return fn(self.value)
        return self

    def or_[N](self, other: Result[V, N]) -> Result[V, N]:
        """Return this success unchanged, or *other* if this is a failure."""
        if isinstance(self, Failure):
            return other
        return self

    def or_else[N](self, fn: Callable[[E], Result[V, N]]) -> Result[V, N]:
        """Recover from a failure with *fn*; successes pass through."""
        if isinstance(self, Failure):
            return fn(self.error)
        return self

    def map[N](self, fn: Callable[[V], N]) -> Result[N, E]:
        """Transform the success payload; failures pass through."""
        if isinstance(self, Success):
            return Success(fn(self.value))
        return self

    def map_or[N](self, fn: Callable[[V], N], default: N) -> N:
        """Return ``fn(value)`` on success, else *default*."""
        return self.match_result(fn, lambda _: default)

    def map_failure[N](self, fn: Callable[[E], N]) -> Result[V, N]:
        """Transform the failure payload; successes pass through."""
        if isinstance(self, Failure):
            return Failure(fn(self.error))
        return self

    def __str__(self) -> str:
        return self.match_result(
            lambda value: f"Result(Success) = {value}",
            lambda error: f"Result(Failure) = {error}",
        )


@dataclasses.dataclass(frozen=True, slots=True)
class Success[V](Result[V, Any]):
    """A computed outcome."""

    value: V

    def __post_init__(self) -> None:
        _check_payload(self.value, "Success")

    def match_result[T](
        self, on_success: Callable[[V], T], on_failure: Callable[[Any], T]
    ) -> T:
        return on_success(self.value)


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[E](Result[Any, E]):
    """A rejected or erroneous outcome."""

    error: E

    def __post_init__(self) -> None:
        _check_payload(self.error, "Failure")

    def match_result[T](
        self, on_success: Callable[[Any], T], on_failure: Callable[[E], T]
    ) -> T:
        return on_failure(self.error)


@overload
def resolving[**P, T](
    func: Callable[P, T], /
) -> Callable[P, Result[T, Nothing]]: ...
@overload
def resolving[**P, T, F](
    func: None = None, /, *, error_mapper: Callable[[Exception], F]
) -> Callable[[Callable[P, T]], Callable[P, Result[T, F]]]: ...
def resolving(
    func: Callable[..., Any] | None = None,
    /,
    *,
    error_mapper: Callable[[Exception], Any] | None = None,
) -> Any:
    """Decorate a function so its calls return results instead of raising.

    Each call is routed through ``Result.resolve`` with the call's arguments.

    Example:
        @resolving(error_mapper=str)
        def load(path: str) -> bytes:
            return Path(path).read_bytes()

        load("missing.bin")  # Failure(error="[Errno 2] No such file ...")
    """

    def decorate(fn: Callable[..., Any]) -> Callable[..., Result[Any, Any]]:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Result[Any, Any]:
            thunk = functools.partial(fn, *args, **kwargs)
            if error_mapper is None:
                return Result.resolve(thunk)
            return Result.resolve(thunk, error_mapper)

        return wrapper

    if func is not None:
        return decorate(func)
    return decorate
