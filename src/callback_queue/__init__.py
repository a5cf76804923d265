"""Let functions pass their results through a caller-supplied callback queue."""

from .config import DEFAULT_CONFIG, StageConfig, load_config
from .errors import CallbackConfigurationError, CallbackQueueError
from .filters import Callback, apply_filters, compose, item_wise, list_wise
from .pipelines import (
    CallbackQueue,
    accepts_callbacks,
    callbacks,
    extract,
    run_with_topic,
    topicalize,
    yield_values,
)

__all__ = [
    "DEFAULT_CONFIG",
    "Callback",
    "CallbackConfigurationError",
    "CallbackQueue",
    "CallbackQueueError",
    "StageConfig",
    "accepts_callbacks",
    "apply_filters",
    "callbacks",
    "compose",
    "extract",
    "item_wise",
    "list_wise",
    "load_config",
    "run_with_topic",
    "topicalize",
    "yield_values",
]
