"""Text rendering of account history events."""

from src.domain.models.history import (
    AccountHistoryEvent,
    ReceivedCoin,
    ReceivedToken,
    SentCoin,
    SentToken,
    Staked,
    Swapped,
    Unclassified,
)
from src.domain.policies.history_filters import HistoryFilter, is_event_visible


def format_event_line(event: AccountHistoryEvent) -> str:
    """Render one event as a single line of text.

    Args:
        event: Classified history event.

    Returns:
        str: Human-readable line for the event.
    """
    if isinstance(event, (ReceivedCoin, ReceivedToken)):
        return (
            f"Received {event.formatted_volume} {event.currency} "
            f"=> {event.receiver}"
        )
    if isinstance(event, (SentCoin, SentToken)):
        return (
            f"Sent To {event.formatted_volume} {event.currency} "
            f"=> {event.receiver}"
        )
    if isinstance(event, Staked):
        return f"Staked {event.formatted_volume} {event.currency}"
    if isinstance(event, Swapped):
        return (
            f"Swap : {event.output_formatted_volume} {event.output_currency}"
            f" >> {event.input_formatted_volume} {event.input_currency}"
        )
    if isinstance(event, Unclassified):
        return f"Complex Tx Digest : {event.digest}"
    raise TypeError(f"Unsupported history event: {type(event).__name__}")


def format_history_lines(
    events: list[AccountHistoryEvent],
    history_filter: HistoryFilter = HistoryFilter.ALL,
) -> list[str]:
    """Render the events visible under a filter, keeping their order."""
    return [
        format_event_line(event)
        for event in events
        if is_event_visible(event, history_filter)
    ]


__all__ = ["format_event_line", "format_history_lines"]
