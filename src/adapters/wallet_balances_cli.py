"""CLI adapter printing the coin balances of a Sui wallet."""

import os

from src.application.ports.ledger_client import LedgerClientError
from src.infrastructure.container import build_wallet_balances_use_case
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Print one line per coin type held by ``SUI_WALLET_ADDRESS``."""
    logger = get_app_logger()
    address = os.getenv("SUI_WALLET_ADDRESS", "").strip()
    if not address:
        logger.warning("SUI_WALLET_ADDRESS is required to read balances.")
        return

    use_case = build_wallet_balances_use_case()
    try:
        balances = use_case.execute(address)
    except LedgerClientError as exc:
        logger.error(f"Could not read balances for {address}: {exc}")
        return

    print(f"Balances for {address}")
    for balance in balances:
        print(
            f"{balance.formatted_balance} {balance.currency} "
            f"({balance.coin_object_count} coins)"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
