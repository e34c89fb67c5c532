"""Application port for read access to a Sui ledger node."""

from dataclasses import dataclass, field
from typing import Protocol

from src.domain.models.balances import TransactionContext


class LedgerClientError(RuntimeError):
    """Raised on transport, not-found or malformed-response failures."""


@dataclass(frozen=True)
class ObjectSummary:
    """Identifier and version of an object owned by a wallet."""

    object_id: str
    version: int


@dataclass(frozen=True)
class OwnedObjectsPage:
    """One page of owned objects and the cursor reported by the node.

    Attributes:
        items: Objects readable on this page.
        next_cursor: Cursor reported by the node for the following page.
        has_next_page: Whether the node reported more pages.
        skipped_count: Entries the node returned as errors instead of data.
    """

    items: list[ObjectSummary] = field(default_factory=list)
    next_cursor: str | None = None
    has_next_page: bool = False
    skipped_count: int = 0

    @property
    def is_empty(self) -> bool:
        """Return True when the node returned no entries at all."""
        return not self.items and not self.skipped_count


@dataclass(frozen=True)
class CoinBalance:
    """Total balance of one coin type held by a wallet."""

    coin_type: str
    total_balance: int
    coin_object_count: int


class LedgerClientPort(Protocol):
    """Port exposing the ledger reads needed to rebuild account history."""

    def fetch_owned_objects_page(
        self,
        address: str,
        cursor: str | None,
        page_size: int,
    ) -> OwnedObjectsPage:
        """Return a page of objects owned by ``address`` after ``cursor``."""

    def fetch_object_prior_transaction(
        self,
        object_id: str,
        version: int,
    ) -> str | None:
        """Return the digest of the transaction that produced the object."""

    def fetch_transaction(self, digest: str) -> TransactionContext:
        """Return the transaction context for a digest."""

    def fetch_all_balances(self, address: str) -> list[CoinBalance]:
        """Return the balance of every coin type held by ``address``."""

    def fetch_latest_checkpoint(self) -> int:
        """Return the latest checkpoint sequence number."""


__all__ = [
    "CoinBalance",
    "LedgerClientError",
    "LedgerClientPort",
    "ObjectSummary",
    "OwnedObjectsPage",
]
