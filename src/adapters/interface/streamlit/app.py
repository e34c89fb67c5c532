"""Streamlit dashboard entry point."""

from collections import Counter
from collections.abc import Sequence
from datetime import datetime, timezone

import altair as alt
import streamlit as st

from src.application.use_cases.format_account_history import format_event_line
from src.application.use_cases.get_account_history import AccountHistoryResult
from src.domain.models.history import AccountHistoryEvent, sort_chronologically
from src.domain.models.wallet import WalletBalanceDTO
from src.domain.policies.history_filters import HistoryFilter, is_event_visible
from src.domain.services.volumes import volume_to_decimal
from src.infrastructure.container import (
    build_account_history_use_case,
    build_wallet_balances_use_case,
)
from src.infrastructure.logging.logger import get_usage_logger

_FILTER_LABELS = {
    "All": HistoryFilter.ALL,
    "Received": HistoryFilter.RECEIVED_ONLY,
    "Sent": HistoryFilter.SENT_ONLY,
}


def _fetch_history(address: str) -> AccountHistoryResult:
    """Walk the wallet history through the ledger client."""
    use_case = build_account_history_use_case()
    return use_case.execute(address)


@st.cache_data(show_spinner=False)
def _load_history(address: str) -> AccountHistoryResult:
    """Cached wrapper around _fetch_history for Streamlit sessions."""
    return _fetch_history(address)


def _fetch_balances(address: str) -> list[WalletBalanceDTO]:
    """Fetch the coin balances of the wallet."""
    use_case = build_wallet_balances_use_case()
    return use_case.execute(address)


@st.cache_data(show_spinner=False)
def _load_balances(address: str) -> list[WalletBalanceDTO]:
    """Cached wrapper around _fetch_balances."""
    return _fetch_balances(address)


def _event_kind(event: AccountHistoryEvent) -> str:
    """Return a display label for the event type."""
    return type(event).__name__


def _format_timestamp(timestamp_ms: int) -> str:
    """Format a ledger timestamp in UTC, or a dash when unknown."""
    if not timestamp_ms:
        return "-"
    moment = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
    return moment.strftime("%Y-%m-%d %H:%M:%S")


def _history_rows(
    events: Sequence[AccountHistoryEvent],
    history_filter: HistoryFilter,
    chronological: bool = False,
) -> list[dict[str, str | int]]:
    """Build table rows for the visible events."""
    ordered = sort_chronologically(list(events)) if chronological else events
    return [
        {
            "Kind": _event_kind(event),
            "Checkpoint": event.checkpoint_seq,
            "Time (UTC)": _format_timestamp(event.timestamp_ms),
            "Activity": format_event_line(event),
            "Digest": event.digest,
        }
        for event in ordered
        if is_event_visible(event, history_filter)
    ]


def _kind_counts(
    events: Sequence[AccountHistoryEvent],
) -> list[dict[str, str | int]]:
    """Count events per kind for the chart."""
    counts = Counter(_event_kind(event) for event in events)
    return [
        {"kind": kind, "count": count}
        for kind, count in sorted(counts.items())
    ]


def _render_kind_chart(events: Sequence[AccountHistoryEvent]) -> None:
    """Render a bar chart of events per kind."""
    data = _kind_counts(events)
    if not data:
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
        color="#1b9aaa",
    ).encode(
        x=alt.X("kind:N", title=None, sort="-y"),
        y=alt.Y("count:Q", title="Events"),
        tooltip=[alt.Tooltip("kind:N"), alt.Tooltip("count:Q")],
    )
    st.subheader("Events by kind")
    st.altair_chart(chart, width="stretch")


def _render_history(address: str) -> None:
    """Render the history page for a wallet."""
    label = st.sidebar.selectbox("Show", list(_FILTER_LABELS), index=0)
    chronological = st.sidebar.checkbox("Chronological order", value=False)
    result = _load_history(address)
    if not result.complete:
        st.warning(
            "The node stopped answering; the history below is partial."
        )
    if result.failures:
        st.caption(
            f"{len(result.failures)} transactions could not be classified."
        )
    rows = _history_rows(
        result.events,
        _FILTER_LABELS[label],
        chronological=chronological,
    )
    st.caption(f"{len(rows)} events shown")
    if not rows:
        st.info("No activity found for this wallet.")
        return
    st.dataframe(rows, width="stretch", hide_index=True)
    _render_kind_chart(result.events)


def _render_balances(address: str) -> None:
    """Render the balances page for a wallet."""
    balances = _load_balances(address)
    if not balances:
        st.info("This wallet holds no coins.")
        return
    data = [
        {
            "Currency": balance.currency,
            "Balance": float(
                volume_to_decimal(balance.raw_balance, balance.currency)
            ),
            "Formatted": balance.formatted_balance,
            "Coins": balance.coin_object_count,
            "Coin type": balance.coin_type,
        }
        for balance in balances
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Sui Account History", layout="wide")
    st.title("Sui Account History")

    page = st.sidebar.selectbox("Page", ["History", "Balances"])
    address = st.text_input("Wallet address", placeholder="0x...").strip()
    if not address:
        st.info("Enter a wallet address to load its activity.")
        return
    get_usage_logger().info(f"Loaded {page.lower()} for {address}")

    if page == "History":
        _render_history(address)
    else:
        _render_balances(address)


if __name__ == "__main__":  # pragma: no cover
    main()
