"""Application ports package."""

from .ledger_client import (
    CoinBalance,
    LedgerClientError,
    LedgerClientPort,
    ObjectSummary,
    OwnedObjectsPage,
)

__all__ = [
    "CoinBalance",
    "LedgerClientError",
    "LedgerClientPort",
    "ObjectSummary",
    "OwnedObjectsPage",
]
