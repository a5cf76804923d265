"""Configuration helpers for callback-queue."""

from __future__ import annotations

from dataclasses import dataclass
from types import GeneratorType
from typing import Any, Iterable, Mapping

_KNOWN_KEYS = frozenset({"splice_types"})


@dataclass(frozen=True, slots=True)
class StageConfig:
    """Settings shared by item-wise stages.

    ``splice_types`` lists the return types of an item function whose
    elements are flattened into the stage output. Any other return value is
    kept as a single element.
    """

    splice_types: tuple[type, ...] = (list, tuple, GeneratorType)

    def splices(self, value: object) -> bool:
        return isinstance(value, self.splice_types)


DEFAULT_CONFIG = StageConfig()


def _coerce_splice_types(value: Any) -> tuple[type, ...]:
    if isinstance(value, type):
        return (value,)
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise ValueError(f"splice_types must be a class or an iterable of classes, got {value!r}")
    classes = tuple(value)
    for item in classes:
        if not isinstance(item, type):
            raise ValueError(f"splice_types entries must be classes, got {item!r}")
    return classes


def load_config(overrides: Mapping[str, Any] | None = None) -> StageConfig:
    """Build a :class:`StageConfig` from ``overrides``.

    Missing keys keep their defaults. Unknown keys are rejected so typos do
    not silently fall back to the default behaviour.
    """

    if overrides is None:
        return DEFAULT_CONFIG
    unknown = set(overrides) - _KNOWN_KEYS
    if unknown:
        raise ValueError(f"Unsupported configuration keys: {', '.join(sorted(unknown))}")
    if "splice_types" not in overrides:
        return DEFAULT_CONFIG
    return StageConfig(splice_types=_coerce_splice_types(overrides["splice_types"]))


__all__ = ["DEFAULT_CONFIG", "StageConfig", "load_config"]
