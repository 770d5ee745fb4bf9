"""Batch helpers for pulling payloads out of many results at once.

Every helper accepts either a single iterable of results or the results as
positional arguments, and preserves input order in its output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from resultkit.result import Failure, Result, Success

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = ["collect_failures", "collect_successes", "partition"]


def _iter_results(
    args: tuple[Result[Any, Any] | Iterable[Result[Any, Any]], ...],
) -> Iterable[Result[Any, Any]]:
    items: Iterable[Any]
    if len(args) == 1 and not isinstance(args[0], Result):
        items = args[0]
    else:
        items = args
    for item in items:
        if not isinstance(item, Result):
            raise TypeError(f"Expected a Result, got {type(item).__name__}")
        yield item


def collect_successes[V](
    *results: Result[V, Any] | Iterable[Result[V, Any]],
) -> list[V]:
    """Return every success payload, in order, skipping failures.

    Example:
        collect_successes(Result.success(1), Result.failure("x"), Result.success(2))
        # [1, 2]
    """
    return [r.value for r in _iter_results(results) if isinstance(r, Success)]


def collect_failures[E](
    *results: Result[Any, E] | Iterable[Result[Any, E]],
) -> list[E]:
    """Return every failure payload, in order, skipping successes."""
    return [r.error for r in _iter_results(results) if isinstance(r, Failure)]


def partition[V, E](
    *results: Result[V, E] | Iterable[Result[V, E]],
) -> tuple[list[V], list[E]]:
    """Split results into ``(success_payloads, failure_payloads)`` in one pass.

    Works with one-shot iterables such as generators.
    """
    successes: list[V] = []
    failures: list[E] = []
    for r in _iter_results(results):
        match r:
            case Success(value):
                successes.append(value)
            case Failure(error):
                failures.append(error)
    return successes, failures
