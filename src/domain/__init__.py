"""Domain package for balance reconstruction rules and core models."""

from .constants import KNOWN_COIN_TYPES, NATIVE_CURRENCY, SIX_DECIMAL_CURRENCY
from .errors import (
    ClassificationError,
    InvariantViolationError,
    MalformedCoinTypeError,
    MissingOwnerError,
)
from .models import (
    AccountHistoryEvent,
    BalanceChangeRecord,
    BalanceChangeSet,
    ReceivedCoin,
    ReceivedToken,
    SentCoin,
    SentToken,
    Staked,
    SwapCommission,
    Swapped,
    TransactionContext,
    Unclassified,
    WalletBalanceDTO,
    sort_chronologically,
)
from .policies import HistoryFilter, is_event_visible
from .services import format_volume, resolve_currency_name
from .services.classification import TransactionClassifier

__all__ = [
    "KNOWN_COIN_TYPES",
    "NATIVE_CURRENCY",
    "SIX_DECIMAL_CURRENCY",
    "ClassificationError",
    "InvariantViolationError",
    "MalformedCoinTypeError",
    "MissingOwnerError",
    "AccountHistoryEvent",
    "BalanceChangeRecord",
    "BalanceChangeSet",
    "ReceivedCoin",
    "ReceivedToken",
    "SentCoin",
    "SentToken",
    "Staked",
    "SwapCommission",
    "Swapped",
    "TransactionContext",
    "Unclassified",
    "WalletBalanceDTO",
    "sort_chronologically",
    "HistoryFilter",
    "is_event_visible",
    "format_volume",
    "resolve_currency_name",
    "TransactionClassifier",
]
