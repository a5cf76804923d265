"""Item-wise and list-wise stage combinators."""

from __future__ import annotations

from typing import Any, Callable

from ..config import DEFAULT_CONFIG, StageConfig
from ..errors import ensure_callable
from .base import Callback, Values, stage_name


def item_wise(fn: Callable[[Any], Any], *, config: StageConfig | None = None) -> Callback:
    """Return a stage that applies ``fn`` to each element and flattens the results.

    ``fn`` receives exactly one element per call, in order. When it returns
    one of the configured splice types (by default a list, tuple or
    generator) the elements are spliced into the output, so an empty list
    drops the element and a longer one expands it. Any other return value
    replaces the element one to one.
    """

    ensure_callable(fn, "item-wise stage function")
    settings = config or DEFAULT_CONFIG

    def _filter(values: Values, /) -> list[Any]:
        result: list[Any] = []
        for value in values:
            replacement = fn(value)
            if settings.splices(replacement):
                result.extend(replacement)
            else:
                result.append(replacement)
        return result

    _filter.__name__ = f"item_wise({stage_name(fn)})"
    return _filter


def list_wise(fn: Callable[[Values], Values]) -> Callback:
    """Return a stage that hands the whole sequence to ``fn`` in one call."""

    ensure_callable(fn, "list-wise stage function")

    def _filter(values: Values, /) -> Values:
        return fn(values)

    _filter.__name__ = f"list_wise({stage_name(fn)})"
    return _filter


__all__ = ["item_wise", "list_wise"]
