"""Callback queue, extraction and topicalizer utilities."""

from .base import CallbackQueue, yield_values
from .extract import callbacks, extract
from .topic import accepts_callbacks, run_with_topic, topicalize

__all__ = [
    "CallbackQueue",
    "accepts_callbacks",
    "callbacks",
    "extract",
    "run_with_topic",
    "topicalize",
    "yield_values",
]
