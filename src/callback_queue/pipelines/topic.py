"""Topicalizer and decorator built on extraction plus the yield fold."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, TypeVar

from ..errors import ensure_callable
from ..filters.base import Values
from .extract import extract

F = TypeVar("F", bound=Callable[..., Any])


def topicalize(producer: Callable[..., Values], *args: Any) -> Values:
    """Call ``producer`` with the leading ``args`` and yield its result through the trailing ones.

    ``topicalize(produce, 1, 2, first, second)`` is ``second(first(produce(1, 2)))``.
    """

    ensure_callable(producer, "producer")
    queue, residual = extract(args, name=getattr(producer, "__name__", "topic"))
    return queue.yield_values(producer(*residual))


run_with_topic = topicalize


def accepts_callbacks(func: F | None = None, *, name: str | None = None) -> Any:
    """Decorator letting ``func`` take a trailing run of callbacks.

    Callbacks at the end of the positional arguments are removed before
    ``func`` is called, and ``func``'s result is folded through them.
    Keyword arguments are always passed to ``func``.
    """

    def _decorate(target: F) -> F:
        ensure_callable(target, "decorated function")
        label = name or getattr(target, "__name__", "callbacks")

        @wraps(target)
        def _wrapper(*args: Any, **kwargs: Any) -> Values:
            queue, residual = extract(args, name=label)
            return queue.yield_values(target(*residual, **kwargs))

        return _wrapper  # type: ignore[return-value]

    if func is None:
        return _decorate
    return _decorate(func)


__all__ = ["accepts_callbacks", "run_with_topic", "topicalize"]
