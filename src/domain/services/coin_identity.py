"""Coin type identity resolution."""

from src.domain.constants import (
    COIN_TYPE_SEPARATOR,
    KNOWN_COIN_TYPES,
    NATIVE_CURRENCY,
)
from src.domain.errors import MalformedCoinTypeError

_ADDRESS_HEX_LENGTH = 64


def resolve_currency_name(raw_coin_type: str) -> str:
    """Map a raw coin type identifier to its canonical currency name.

    Known identifiers are matched exactly (case-sensitive). Unknown ones are
    rendered as ``[<module>::<symbol>]``.

    Args:
        raw_coin_type: Coin type as reported by the ledger.

    Returns:
        str: Canonical currency name.

    Raises:
        MalformedCoinTypeError: If the identifier has fewer than three
            ``::`` separated segments.
    """
    known = KNOWN_COIN_TYPES.get(raw_coin_type)
    if known is not None:
        return known
    segments = raw_coin_type.split(COIN_TYPE_SEPARATOR)
    if len(segments) < 3:
        raise MalformedCoinTypeError(
            f"Malformed coin type identifier: {raw_coin_type!r}"
        )
    return f"[{segments[1]}{COIN_TYPE_SEPARATOR}{segments[2]}]"


def canonicalize_coin_type(raw_coin_type: str) -> str:
    """Pad the package address of a coin type to its full 64 hex digits.

    ``0x2::sui::SUI`` becomes ``0x000...0002::sui::SUI``. Identifiers whose
    first segment is not a hex address are returned unchanged.

    Args:
        raw_coin_type: Coin type as reported by the JSON-RPC API.

    Returns:
        str: Coin type with a long-form package address.
    """
    address, separator, rest = raw_coin_type.partition(COIN_TYPE_SEPARATOR)
    if not separator:
        return raw_coin_type
    digits = address[2:] if address.lower().startswith("0x") else address
    if not digits or len(digits) > _ADDRESS_HEX_LENGTH:
        return raw_coin_type
    try:
        int(digits, 16)
    except ValueError:
        return raw_coin_type
    padded = digits.lower().rjust(_ADDRESS_HEX_LENGTH, "0")
    return f"0x{padded}{separator}{rest}"


def is_native_currency(currency: str) -> bool:
    """Return True when the canonical name denotes the native SUI coin."""
    return currency == NATIVE_CURRENCY


__all__ = [
    "resolve_currency_name",
    "canonicalize_coin_type",
    "is_native_currency",
]
