"""Application use cases package."""

from .format_account_history import format_event_line, format_history_lines
from .get_account_history import (
    AccountHistoryResult,
    GetAccountHistoryUseCase,
    TransactionFailure,
)
from .get_wallet_balances import GetWalletBalancesUseCase, WalletBalanceDTO

__all__ = [
    "format_event_line",
    "format_history_lines",
    "AccountHistoryResult",
    "GetAccountHistoryUseCase",
    "TransactionFailure",
    "GetWalletBalancesUseCase",
    "WalletBalanceDTO",
]
