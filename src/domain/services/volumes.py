"""Fixed-point formatting of raw coin amounts."""

from decimal import Decimal

from src.domain.constants import (
    NATIVE_DECIMALS,
    SIX_DECIMAL_CURRENCY,
    SIX_DECIMALS,
)


def currency_decimals(currency: str) -> int:
    """Return the number of decimal places used by a currency.

    Args:
        currency: Canonical currency name.

    Returns:
        int: 6 for the USDC stablecoin, 9 for everything else.
    """
    if currency == SIX_DECIMAL_CURRENCY:
        return SIX_DECIMALS
    return NATIVE_DECIMALS


def format_volume(raw_amount: int, currency: str) -> str:
    """Render a raw amount as ``<integer>.<fraction>``.

    The fraction is zero-padded to the currency's decimal places. No
    rounding, grouping or sign is applied.

    Args:
        raw_amount: Non-negative amount in base units.
        currency: Canonical currency name.

    Returns:
        str: Fixed-point representation of the amount.

    Raises:
        ValueError: If the amount is negative.
    """
    if raw_amount < 0:
        raise ValueError(f"Volume must be non-negative, got {raw_amount}")
    decimals = currency_decimals(currency)
    unit = 10**decimals
    whole, fraction = divmod(raw_amount, unit)
    return f"{whole}.{fraction:0{decimals}d}"


def volume_to_decimal(raw_amount: int, currency: str) -> Decimal:
    """Convert a raw amount into a Decimal expressed in whole units."""
    return Decimal(format_volume(raw_amount, currency))


__all__ = ["currency_decimals", "format_volume", "volume_to_decimal"]
