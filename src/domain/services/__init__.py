"""Domain services package."""

from .coin_identity import (
    canonicalize_coin_type,
    is_native_currency,
    resolve_currency_name,
)
from .volumes import currency_decimals, format_volume, volume_to_decimal

__all__ = [
    "canonicalize_coin_type",
    "is_native_currency",
    "resolve_currency_name",
    "currency_decimals",
    "format_volume",
    "volume_to_decimal",
]
