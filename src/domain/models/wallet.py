"""Domain models for wallet balances."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WalletBalanceDTO:
    """Serializable wallet balance for one currency."""

    currency: str
    coin_type: str
    raw_balance: int
    formatted_balance: str
    coin_object_count: int


__all__ = ["WalletBalanceDTO"]
