"""Tests for BalanceChangeSet derived views."""

import pytest

from src.domain.errors import MissingOwnerError
from src.domain.models.balances import BalanceChangeRecord, BalanceChangeSet

ME = "0xme"
OTHER = "0xother"
SUI = "0x2::sui::SUI"
TOKEN = "0xabc::tok::TOK"


def _changes(*records: tuple[str | None, str, int]) -> BalanceChangeSet:
    return BalanceChangeSet(
        tuple(BalanceChangeRecord(owner, coin, amount) for owner, coin, amount in records)
    )


def test_distinct_views_keep_first_seen_order() -> None:
    changes = _changes(
        (OTHER, TOKEN, 10),
        (ME, SUI, -3),
        (ME, TOKEN, -10),
        (OTHER, SUI, 1),
    )

    assert changes.distinct_addresses() == [OTHER, ME]
    assert changes.distinct_currencies() == ["[tok::TOK]", "sui::SUI"]


def test_received_and_sent_currencies_are_relative_to_address() -> None:
    changes = _changes(
        (ME, SUI, -3),
        (ME, SUI, -4),
        (ME, TOKEN, 10),
        (OTHER, SUI, 7),
    )

    assert changes.currencies_received_by(ME) == ["[tok::TOK]"]
    assert changes.currencies_sent_by(ME) == ["sui::SUI"]
    assert changes.currencies_received_by(OTHER) == ["sui::SUI"]
    assert changes.currencies_sent_by(OTHER) == []


def test_zero_amounts_count_as_neither_received_nor_sent() -> None:
    changes = _changes((ME, SUI, 0))

    assert changes.touches(ME)
    assert changes.currencies_received_by(ME) == []
    assert changes.currencies_sent_by(ME) == []


def test_touches() -> None:
    changes = _changes((OTHER, SUI, -1))

    assert changes.touches(OTHER)
    assert not changes.touches(ME)
    assert not BalanceChangeSet().touches(ME)


def test_views_are_recomputed_deterministically() -> None:
    changes = _changes((ME, SUI, -1), (OTHER, SUI, 1))

    assert changes.distinct_addresses() == changes.distinct_addresses()
    assert changes.currencies_sent_by(ME) == changes.currencies_sent_by(ME)


def test_owned_by_returns_new_set_without_mutating_input() -> None:
    changes = _changes((ME, SUI, -1), (OTHER, SUI, 1), (ME, TOKEN, 5))

    mine = changes.owned_by(ME)

    assert [record.owner for record in mine] == [ME, ME]
    assert len(changes) == 3
    assert mine is not changes


def test_missing_owner_is_reported() -> None:
    changes = _changes((None, SUI, -1))

    with pytest.raises(MissingOwnerError):
        changes.distinct_addresses()


def test_records_are_normalized_to_tuple() -> None:
    changes = BalanceChangeSet([BalanceChangeRecord(ME, SUI, 1)])

    assert isinstance(changes.records, tuple)
