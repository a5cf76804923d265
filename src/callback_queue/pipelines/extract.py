"""Splitting trailing callbacks from positional arguments."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from .base import CallbackQueue

LOGGER = logging.getLogger(__name__)


def extract(
    args: Sequence[Any],
    *,
    name: str = "callbacks",
    logger: logging.Logger | None = None,
) -> tuple[CallbackQueue, list[Any]]:
    """Split the trailing run of callables off ``args``.

    Returns the callbacks as a :class:`CallbackQueue`, in the order they
    appeared, together with a new list holding the remaining arguments.
    Only a contiguous run at the end counts: a callable followed by a plain
    value stays among the residual arguments. ``args`` is left untouched.
    """

    boundary = len(args)
    while boundary > 0 and callable(args[boundary - 1]):
        boundary -= 1
    residual = list(args[:boundary])
    queue = CallbackQueue(tuple(args[boundary:]), name=name, logger=logger)
    LOGGER.debug("Extracted %d callback(s) and %d argument(s) for %s", len(queue), len(residual), name)
    return queue, residual


def callbacks(*args: Any) -> tuple[CallbackQueue, list[Any]]:
    """Same as :func:`extract` with the arguments passed spread out."""

    return extract(args)


__all__ = ["callbacks", "extract"]
