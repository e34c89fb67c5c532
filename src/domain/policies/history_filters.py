"""Visibility rules for rendering account history."""

from enum import Enum

from src.domain.models.history import (
    AccountHistoryEvent,
    ReceivedCoin,
    ReceivedToken,
    SentCoin,
    SentToken,
)


class HistoryFilter(Enum):
    """Which event kinds a presentation layer should render."""

    ALL = "all"
    RECEIVED_ONLY = "received"
    SENT_ONLY = "sent"

    @classmethod
    def parse(cls, value: str | None) -> "HistoryFilter":
        """Parse a filter name, defaulting to ALL when empty.

        Raises:
            ValueError: If the value names no known filter.
        """
        if not value:
            return cls.ALL
        cleaned = value.strip().lower()
        for option in cls:
            if cleaned in (option.value, option.name.lower()):
                return option
        raise ValueError(
            f"Unsupported history filter: {value}. "
            "Expected all, received or sent."
        )


_RECEIVED_KINDS = (ReceivedCoin, ReceivedToken)
_SENT_KINDS = (SentCoin, SentToken)


def is_event_visible(
    event: AccountHistoryEvent,
    history_filter: HistoryFilter,
) -> bool:
    """Return True when the event should be rendered under the filter.

    Args:
        event: Classified history event.
        history_filter: Selected filter mode.

    Returns:
        bool: Staking, swaps and unclassified events only show under ALL.
    """
    if history_filter is HistoryFilter.ALL:
        return True
    if history_filter is HistoryFilter.RECEIVED_ONLY:
        return isinstance(event, _RECEIVED_KINDS)
    return isinstance(event, _SENT_KINDS)


__all__ = ["HistoryFilter", "is_event_visible"]
