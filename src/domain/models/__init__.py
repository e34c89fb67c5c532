"""Domain models package."""

from .balances import BalanceChangeRecord, BalanceChangeSet, TransactionContext
from .history import (
    AccountHistoryEvent,
    ReceivedCoin,
    ReceivedToken,
    SentCoin,
    SentToken,
    Staked,
    SwapCommission,
    Swapped,
    Unclassified,
    sort_chronologically,
)
from .wallet import WalletBalanceDTO

__all__ = [
    "BalanceChangeRecord",
    "BalanceChangeSet",
    "TransactionContext",
    "AccountHistoryEvent",
    "ReceivedCoin",
    "ReceivedToken",
    "SentCoin",
    "SentToken",
    "Staked",
    "SwapCommission",
    "Swapped",
    "Unclassified",
    "WalletBalanceDTO",
    "sort_chronologically",
]
