"""Stage building blocks for callback queues."""

from .base import Callback, Values, apply_filters, compose, stage_name
from .stages import item_wise, list_wise

__all__ = ["Callback", "Values", "apply_filters", "compose", "item_wise", "list_wise", "stage_name"]
