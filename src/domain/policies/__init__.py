"""Domain policies package."""

from .history_filters import HistoryFilter, is_event_visible

__all__ = ["HistoryFilter", "is_event_visible"]
