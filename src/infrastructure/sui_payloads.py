"""Translation of Sui JSON-RPC payloads into domain and port models."""

from typing import Any

from src.application.ports.ledger_client import (
    CoinBalance,
    LedgerClientError,
    ObjectSummary,
    OwnedObjectsPage,
)
from src.domain.models.balances import (
    BalanceChangeRecord,
    BalanceChangeSet,
    TransactionContext,
)
from src.domain.services.coin_identity import canonicalize_coin_type

SUCCESS_STATUS = "success"
VERSION_FOUND = "VersionFound"

_ADDRESS_OWNER_KEYS = ("AddressOwner", "ObjectOwner")


def parse_owner_address(owner: Any) -> str | None:
    """Return the address of an owner payload.

    Shared and immutable owners have no address and map to None.

    Args:
        owner: ``owner`` value of a balance change or object.

    Returns:
        str | None: Owning address when the owner is address-like.
    """
    if not isinstance(owner, dict):
        return None
    for key in _ADDRESS_OWNER_KEYS:
        if key in owner:
            return str(owner[key])
    consensus = owner.get("ConsensusAddressOwner")
    if isinstance(consensus, dict) and "owner" in consensus:
        return str(consensus["owner"])
    return None


def _to_int(value: Any, field_name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise LedgerClientError(
            f"Invalid integer for {field_name}: {value!r}"
        ) from exc


def _member(payload: dict[str, Any], key: str, context: str) -> dict[str, Any]:
    """Return a nested object member, empty when absent.

    Raises:
        LedgerClientError: If the member is present but not an object.
    """
    value = payload.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise LedgerClientError(
            f"Expected an object for {context}.{key}, got {value!r}"
        )
    return value


def parse_balance_change(payload: dict[str, Any]) -> BalanceChangeRecord:
    """Build a balance change record from a ``balanceChanges`` entry."""
    if not isinstance(payload, dict):
        raise LedgerClientError(
            f"Malformed balance change payload: {payload!r}"
        )
    try:
        coin_type = payload["coinType"]
        amount = payload["amount"]
    except KeyError as exc:
        raise LedgerClientError(
            f"Malformed balance change payload: {payload!r}"
        ) from exc
    return BalanceChangeRecord(
        owner_address=parse_owner_address(payload.get("owner")),
        coin_type=canonicalize_coin_type(str(coin_type)),
        amount=_to_int(amount, "amount"),
    )


def parse_transaction(payload: dict[str, Any]) -> TransactionContext:
    """Build a transaction context from a ``sui_getTransactionBlock`` result.

    Args:
        payload: JSON-RPC result of the transaction query.

    Returns:
        TransactionContext: Digest, timing, status and balance changes.

    Raises:
        LedgerClientError: If the payload lacks a digest, holds malformed
            numbers or nests a non-object where an object is expected.
    """
    if not isinstance(payload, dict) or "digest" not in payload:
        raise LedgerClientError(f"Malformed transaction payload: {payload!r}")
    raw_changes = payload.get("balanceChanges")
    balance_changes = None
    if raw_changes is not None:
        if not isinstance(raw_changes, list):
            raise LedgerClientError(
                f"Malformed balanceChanges: {raw_changes!r}"
            )
        balance_changes = BalanceChangeSet(
            tuple(parse_balance_change(item) for item in raw_changes)
        )
    timestamp = payload.get("timestampMs")
    checkpoint = payload.get("checkpoint")
    status = _member(_member(payload, "effects", "result"), "status", "effects")
    transaction_data = _member(
        _member(payload, "transaction", "result"),
        "data",
        "transaction",
    )
    gas_owner = _member(transaction_data, "gasData", "transaction.data").get(
        "owner"
    )
    return TransactionContext(
        digest=str(payload["digest"]),
        timestamp_ms=_to_int(timestamp, "timestampMs") if timestamp else 0,
        checkpoint_seq=_to_int(checkpoint, "checkpoint") if checkpoint else 0,
        balance_changes=balance_changes,
        succeeded=status.get("status") == SUCCESS_STATUS,
        gas_owner=str(gas_owner) if gas_owner else None,
    )


def parse_owned_objects_page(payload: dict[str, Any]) -> OwnedObjectsPage:
    """Build a page of object summaries from ``suix_getOwnedObjects``.

    Entries that carry an error instead of object data are skipped and
    counted, so callers can tell a page of errors from an empty page.
    """
    if not isinstance(payload, dict):
        raise LedgerClientError(f"Malformed owned objects page: {payload!r}")
    entries = payload.get("data") or []
    if not isinstance(entries, list):
        raise LedgerClientError(f"Malformed owned objects data: {entries!r}")
    items = []
    skipped = 0
    for entry in entries:
        if not isinstance(entry, dict):
            raise LedgerClientError(f"Malformed owned object entry: {entry!r}")
        data = _member(entry, "data", "entry")
        if not data:
            skipped += 1
            continue
        if "objectId" not in data:
            raise LedgerClientError(f"Owned object without objectId: {data!r}")
        items.append(
            ObjectSummary(
                object_id=str(data["objectId"]),
                version=_to_int(data.get("version"), "version"),
            )
        )
    next_cursor = payload.get("nextCursor")
    return OwnedObjectsPage(
        items=items,
        next_cursor=str(next_cursor) if next_cursor else None,
        has_next_page=bool(payload.get("hasNextPage")),
        skipped_count=skipped,
    )


def parse_prior_transaction(payload: dict[str, Any]) -> str | None:
    """Return the previous transaction digest of a past object response.

    Statuses other than ``VersionFound`` (deleted, missing or unknown
    versions) yield None.
    """
    if not isinstance(payload, dict):
        raise LedgerClientError(f"Malformed past object payload: {payload!r}")
    if payload.get("status") != VERSION_FOUND:
        return None
    digest = _member(payload, "details", "result").get("previousTransaction")
    return str(digest) if digest else None


def parse_coin_balance(payload: dict[str, Any]) -> CoinBalance:
    """Build a coin balance from a ``suix_getAllBalances`` entry."""
    if not isinstance(payload, dict) or "coinType" not in payload:
        raise LedgerClientError(f"Malformed balance payload: {payload!r}")
    return CoinBalance(
        coin_type=canonicalize_coin_type(str(payload["coinType"])),
        total_balance=_to_int(payload.get("totalBalance"), "totalBalance"),
        coin_object_count=_to_int(
            payload.get("coinObjectCount", 0),
            "coinObjectCount",
        ),
    )


__all__ = [
    "parse_owner_address",
    "parse_balance_change",
    "parse_transaction",
    "parse_owned_objects_page",
    "parse_prior_transaction",
    "parse_coin_balance",
]
