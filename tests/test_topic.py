from __future__ import annotations

import pytest

from callback_queue import (
    CallbackConfigurationError,
    accepts_callbacks,
    item_wise,
    list_wise,
    run_with_topic,
    topicalize,
)


def _letters() -> list[str]:
    return ["A", "B", "C"]


def test_topicalize_without_stages_returns_producer_result() -> None:
    assert topicalize(_letters) == ["A", "B", "C"]


def test_topicalize_passes_residual_arguments_to_producer() -> None:
    seen: list[tuple] = []

    def produce(*args):
        seen.append(args)
        return list(args)

    result = topicalize(produce, 1, 2, item_wise(lambda value: value * 10))
    assert seen == [(1, 2)]
    assert result == [10, 20]


def test_topicalize_mixes_item_and_list_stages() -> None:
    printed: list[str] = []

    def show(value: str) -> str:
        printed.append(f"> {value}")
        return value

    result = topicalize(_letters, item_wise(show), list_wise(lambda values: [f"{len(values)} items"]))
    assert printed == ["> A", "> B", "> C"]
    assert result == ["3 items"]


def test_run_with_topic_is_synonym() -> None:
    assert run_with_topic is topicalize


def test_topicalize_rejects_non_callable_producer() -> None:
    with pytest.raises(CallbackConfigurationError):
        topicalize(["A"], list_wise(len))


def test_accepts_callbacks_decorator() -> None:
    @accepts_callbacks
    def counted(*args, scale: int = 1):
        return [value * scale for value in args]

    assert counted(1, 2, 3) == [1, 2, 3]
    assert counted(1, 2, 3, lambda values: [len(values)]) == [3]
    assert counted(1, 2, item_wise(lambda value: value + 1), scale=10) == [11, 21]
    assert counted.__name__ == "counted"


def test_accepts_callbacks_with_name_keeps_leading_callables() -> None:
    @accepts_callbacks(name="apply")
    def apply(func, *values):
        return [func(value) for value in values]

    assert apply(str, 1, 2) == ["1", "2"]
    assert apply(str, 1, 2, lambda values: values[::-1]) == ["2", "1"]


def test_accepts_callbacks_propagates_faults() -> None:
    @accepts_callbacks
    def produce():
        return [1]

    def fail(values):
        raise ValueError("bad stage")

    with pytest.raises(ValueError, match="bad stage"):
        produce(fail)


def test_accepts_callbacks_rejects_non_callable() -> None:
    with pytest.raises(CallbackConfigurationError):
        accepts_callbacks(5)
