"""Domain models for reconstructed account history events."""

from dataclasses import dataclass
from typing import Union

from src.domain.models.balances import BalanceChangeSet


@dataclass(frozen=True)
class CoinTransfer:
    """Value moved between two addresses."""

    digest: str
    timestamp_ms: int
    checkpoint_seq: int
    sender: str
    receiver: str
    currency: str
    volume: int
    formatted_volume: str


@dataclass(frozen=True)
class ReceivedCoin(CoinTransfer):
    """Native coin received by the wallet."""


@dataclass(frozen=True)
class SentCoin(CoinTransfer):
    """Native coin sent by the wallet."""


@dataclass(frozen=True)
class ReceivedToken(CoinTransfer):
    """Non-native token received by the wallet."""


@dataclass(frozen=True)
class SentToken(CoinTransfer):
    """Non-native token sent by the wallet, with the gas it paid."""

    gas: int
    formatted_gas: str


@dataclass(frozen=True)
class Staked:
    """Value moved by the wallet into a staked position."""

    digest: str
    timestamp_ms: int
    checkpoint_seq: int
    currency: str
    volume: int
    formatted_volume: str


@dataclass(frozen=True)
class SwapCommission:
    """Native coin fee skimmed by an intermediary during a swap."""

    recipient: str
    volume: int
    formatted_volume: str


@dataclass(frozen=True)
class Swapped:
    """Exchange of one currency for another.

    Attributes:
        input_currency: Currency gained by the wallet.
        output_currency: Currency given up by the wallet.
        commission: Intermediary fee, None for direct swaps.
    """

    digest: str
    timestamp_ms: int
    checkpoint_seq: int
    input_currency: str
    output_currency: str
    input_volume: int
    output_volume: int
    input_formatted_volume: str
    output_formatted_volume: str
    gas: int
    formatted_gas: str
    commission: SwapCommission | None = None


@dataclass(frozen=True)
class Unclassified:
    """Transaction touching the wallet that matched no known shape."""

    digest: str
    timestamp_ms: int
    checkpoint_seq: int
    received_currencies: tuple[str, ...]
    sent_currencies: tuple[str, ...]
    addresses: tuple[str, ...]
    currencies: tuple[str, ...]
    balance_changes: BalanceChangeSet


AccountHistoryEvent = Union[
    ReceivedCoin,
    SentCoin,
    ReceivedToken,
    SentToken,
    Staked,
    Swapped,
    Unclassified,
]


def sort_chronologically(
    events: list[AccountHistoryEvent],
) -> list[AccountHistoryEvent]:
    """Return events ordered by checkpoint then timestamp.

    Events are produced in object discovery order; this helper is for
    callers that need ledger order instead.
    """
    return sorted(
        events,
        key=lambda event: (event.checkpoint_seq, event.timestamp_ms),
    )


__all__ = [
    "AccountHistoryEvent",
    "CoinTransfer",
    "ReceivedCoin",
    "SentCoin",
    "ReceivedToken",
    "SentToken",
    "Staked",
    "SwapCommission",
    "Swapped",
    "Unclassified",
    "sort_chronologically",
]
