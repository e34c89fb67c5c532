"""Tests for history visibility filters."""

import pytest

from src.domain.models.balances import BalanceChangeSet
from src.domain.models.history import (
    CoinTransfer,
    ReceivedCoin,
    ReceivedToken,
    SentCoin,
    SentToken,
    Staked,
    Swapped,
    Unclassified,
    sort_chronologically,
)
from src.domain.policies.history_filters import HistoryFilter, is_event_visible

_HEADER = {"digest": "d", "timestamp_ms": 0, "checkpoint_seq": 0}
_TRANSFER = {
    "sender": "0xa",
    "receiver": "0xb",
    "currency": "sui::SUI",
    "volume": 1,
    "formatted_volume": "0.000000001",
}

RECEIVED = [ReceivedCoin(**_HEADER, **_TRANSFER), ReceivedToken(**_HEADER, **_TRANSFER)]
SENT = [
    SentCoin(**_HEADER, **_TRANSFER),
    SentToken(**_HEADER, **_TRANSFER, gas=0, formatted_gas="0.000000000"),
]
OTHERS = [
    Staked(**_HEADER, currency="sui::SUI", volume=1, formatted_volume="0.000000001"),
    Swapped(
        **_HEADER,
        input_currency="a",
        output_currency="b",
        input_volume=1,
        output_volume=1,
        input_formatted_volume="x",
        output_formatted_volume="y",
        gas=0,
        formatted_gas="0.000000000",
    ),
    Unclassified(
        **_HEADER,
        received_currencies=(),
        sent_currencies=(),
        addresses=(),
        currencies=(),
        balance_changes=BalanceChangeSet(),
    ),
]


def test_all_shows_every_event() -> None:
    for event in RECEIVED + SENT + OTHERS:
        assert is_event_visible(event, HistoryFilter.ALL)


def test_received_only_shows_received_events() -> None:
    visible = [
        event
        for event in RECEIVED + SENT + OTHERS
        if is_event_visible(event, HistoryFilter.RECEIVED_ONLY)
    ]
    assert visible == RECEIVED


def test_sent_only_shows_sent_events() -> None:
    visible = [
        event
        for event in RECEIVED + SENT + OTHERS
        if is_event_visible(event, HistoryFilter.SENT_ONLY)
    ]
    assert visible == SENT


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, HistoryFilter.ALL),
        ("", HistoryFilter.ALL),
        ("All", HistoryFilter.ALL),
        (" received ", HistoryFilter.RECEIVED_ONLY),
        ("sent_only", HistoryFilter.SENT_ONLY),
    ],
)
def test_parse_filter(raw, expected) -> None:
    assert HistoryFilter.parse(raw) is expected


def test_parse_rejects_unknown_filter() -> None:
    with pytest.raises(ValueError):
        HistoryFilter.parse("staked")


def test_sort_chronologically_orders_by_checkpoint_then_time() -> None:
    late = Staked(
        digest="late",
        timestamp_ms=5,
        checkpoint_seq=2,
        currency="sui::SUI",
        volume=1,
        formatted_volume="0.000000001",
    )
    early = Staked(
        digest="early",
        timestamp_ms=9,
        checkpoint_seq=1,
        currency="sui::SUI",
        volume=1,
        formatted_volume="0.000000001",
    )
    same_checkpoint = Staked(
        digest="same",
        timestamp_ms=1,
        checkpoint_seq=2,
        currency="sui::SUI",
        volume=1,
        formatted_volume="0.000000001",
    )

    ordered = sort_chronologically([late, early, same_checkpoint])

    assert [event.digest for event in ordered] == ["early", "same", "late"]


def test_transfer_events_share_transfer_fields() -> None:
    assert all(isinstance(event, CoinTransfer) for event in RECEIVED + SENT)
    assert SENT[1].receiver == "0xb"
    assert SENT[1].formatted_gas == "0.000000000"
