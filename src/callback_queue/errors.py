"""Exceptions raised by callback-queue."""

from __future__ import annotations


class CallbackQueueError(Exception):
    """Base class for errors raised by this package."""


class CallbackConfigurationError(CallbackQueueError, TypeError):
    """Raised when a stage or producer is built from a non-callable value."""

    def __init__(self, role: str, value: object) -> None:
        self.role = role
        self.value = value
        super().__init__(f"{role} must be callable, got {type(value).__name__}: {value!r}")


def ensure_callable(value: object, role: str = "callback") -> None:
    if not callable(value):
        raise CallbackConfigurationError(role, value)


__all__ = ["CallbackQueueError", "CallbackConfigurationError", "ensure_callable"]
