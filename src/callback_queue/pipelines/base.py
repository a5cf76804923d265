"""Callback queue implementation and the yield fold."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator

from ..errors import ensure_callable
from ..filters.base import Callback, Values, compose

LOGGER = logging.getLogger(__name__)

_UNSET: Any = object()


@dataclass(frozen=True, slots=True)
class CallbackQueue:
    """Ordered, immutable queue of callbacks built for a single invocation.

    ``name`` and ``logger`` only affect debug output and are ignored when
    comparing queues.
    """

    callbacks: tuple[Callback, ...] = ()
    name: str = field(default="callbacks", compare=False)
    logger: logging.Logger | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        callbacks = tuple(self.callbacks)
        for callback in callbacks:
            ensure_callable(callback)
        object.__setattr__(self, "callbacks", callbacks)

    def __len__(self) -> int:
        return len(self.callbacks)

    def __iter__(self) -> Iterator[Callback]:
        return iter(self.callbacks)

    def __add__(self, other: object) -> "CallbackQueue":
        if not isinstance(other, CallbackQueue):
            return NotImplemented
        return self._replace(self.callbacks + other.callbacks)

    def __call__(self, values: Values, /) -> Values:
        return self.yield_values(values)

    def then(self, *stages: Callback) -> "CallbackQueue":
        """Return a new queue with ``stages`` appended after the current ones."""

        return self._replace(self.callbacks + stages)

    def yield_values(self, values: Values = (), *, default: Any = _UNSET) -> Values:
        """Thread ``values`` through every callback and return the final result.

        An empty queue returns ``values`` untouched. When ``default`` is given
        and ``values`` is empty, the fold starts from ``[default]`` instead.
        """

        if default is not _UNSET and len(values) == 0:
            values = [default]
        if not self.callbacks:
            return values
        composed = compose(*self.callbacks, name=self.name, logger=self.logger or LOGGER)
        return composed(values)

    filter = yield_values

    def _replace(self, callbacks: Iterable[Callback]) -> "CallbackQueue":
        return CallbackQueue(tuple(callbacks), name=self.name, logger=self.logger)


def yield_values(queue: CallbackQueue | None, values: Values = (), *, default: Any = _UNSET) -> Values:
    """Fold ``values`` through ``queue``; a missing queue behaves as an empty one."""

    if queue is None:
        queue = CallbackQueue()
    return queue.yield_values(values, default=default)


__all__ = ["CallbackQueue", "yield_values"]
