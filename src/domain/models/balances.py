"""Domain models for ledger balance changes."""

from dataclasses import dataclass, field

from src.domain.errors import MissingOwnerError
from src.domain.services.coin_identity import resolve_currency_name


@dataclass(frozen=True)
class BalanceChangeRecord:
    """Signed balance delta reported for one owner and coin type.

    Attributes:
        owner_address: Address owning the balance, None for shared or
            immutable owners.
        coin_type: Raw coin type identifier.
        amount: Signed amount in base units, positive for inflows.
    """

    owner_address: str | None
    coin_type: str
    amount: int

    @property
    def owner(self) -> str:
        """Return the owner address or raise when it cannot be resolved."""
        if self.owner_address is None:
            raise MissingOwnerError(
                f"Balance change for {self.coin_type} has no owner address"
            )
        return self.owner_address

    @property
    def currency(self) -> str:
        """Return the canonical currency name of the record."""
        return resolve_currency_name(self.coin_type)

    @property
    def volume(self) -> int:
        """Return the absolute amount."""
        return abs(self.amount)


def _unique(values) -> list[str]:
    seen: list[str] = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen


@dataclass(frozen=True)
class BalanceChangeSet:
    """Ordered balance changes reported for a single transaction.

    Derived views are recomputed on every call and keep first-seen order.
    """

    records: tuple[BalanceChangeRecord, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "records", tuple(self.records))

    def __iter__(self):
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def distinct_addresses(self) -> list[str]:
        """Return the unique owner addresses across all records."""
        return _unique(record.owner for record in self.records)

    def distinct_currencies(self) -> list[str]:
        """Return the unique canonical currency names across all records."""
        return _unique(record.currency for record in self.records)

    def currencies_received_by(self, address: str) -> list[str]:
        """Return currencies with at least one inflow to ``address``."""
        return _unique(
            record.currency
            for record in self.records
            if record.owner == address and record.amount > 0
        )

    def currencies_sent_by(self, address: str) -> list[str]:
        """Return currencies with at least one outflow from ``address``."""
        return _unique(
            record.currency
            for record in self.records
            if record.owner == address and record.amount < 0
        )

    def touches(self, address: str) -> bool:
        """Return True when ``address`` owns at least one record."""
        return any(record.owner == address for record in self.records)

    def owned_by(self, address: str) -> "BalanceChangeSet":
        """Return a new set holding only the records owned by ``address``."""
        return BalanceChangeSet(
            tuple(record for record in self.records if record.owner == address)
        )


@dataclass(frozen=True)
class TransactionContext:
    """Ledger view of one transaction needed for classification.

    Attributes:
        digest: Transaction digest.
        timestamp_ms: Block time in milliseconds, 0 when absent.
        checkpoint_seq: Checkpoint sequence number, 0 when absent.
        balance_changes: Reported balance changes, None when absent.
        succeeded: Whether the transaction executed successfully.
        gas_owner: Address that paid for gas, when reported.
    """

    digest: str
    timestamp_ms: int = 0
    checkpoint_seq: int = 0
    balance_changes: BalanceChangeSet | None = None
    succeeded: bool = True
    gas_owner: str | None = None


__all__ = ["BalanceChangeRecord", "BalanceChangeSet", "TransactionContext"]
