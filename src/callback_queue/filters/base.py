"""Core callback protocol and the fold that threads values through it."""

from __future__ import annotations

import logging
from typing import Any, Protocol, Sequence

Values = Sequence[Any]

LOGGER = logging.getLogger(__name__)


class Callback(Protocol):
    """A stage that maps the whole current sequence to a replacement sequence."""

    def __call__(self, values: Values, /) -> Values:
        ...


def stage_name(callback: object) -> str:
    return getattr(callback, "__name__", callback.__class__.__name__)


def compose(*callbacks: Callback, name: str = "callbacks", logger: logging.Logger | None = None) -> Callback:
    """Compose ``callbacks`` into a single callback applied left to right.

    Exceptions raised by a stage propagate unchanged and the stages after it
    do not run.
    """

    log = logger or LOGGER

    def _composed(values: Values, /) -> Values:
        log.debug("[%s] Folding values through %d stage(s)", name, len(callbacks))
        current = values
        for callback in callbacks:
            log.debug("[%s] Running stage %s", name, stage_name(callback))
            current = callback(current)
        log.debug("[%s] Completed fold", name)
        return current

    _composed.__name__ = name
    return _composed


def apply_filters(values: Values, *callbacks: Callback) -> Values:
    """Apply an ordered chain of callbacks to ``values``."""

    composed = compose(*callbacks)
    return composed(values)


__all__ = ["Callback", "Values", "apply_filters", "compose", "stage_name"]
