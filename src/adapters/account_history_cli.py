"""CLI adapter printing the reconstructed history of a Sui wallet.

The wallet is read from ``SUI_WALLET_ADDRESS`` and the optional
``HISTORY_FILTER`` (all, received or sent) selects which events to print.
"""

import os

from src.application.use_cases.format_account_history import (
    format_history_lines,
)
from src.domain.policies.history_filters import HistoryFilter
from src.infrastructure.container import build_account_history_use_case
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Walk the wallet history and print one line per visible event."""
    logger = get_app_logger()
    address = os.getenv("SUI_WALLET_ADDRESS", "").strip()
    if not address:
        logger.warning("SUI_WALLET_ADDRESS is required to read a history.")
        return
    try:
        history_filter = HistoryFilter.parse(os.getenv("HISTORY_FILTER"))
    except ValueError as exc:
        logger.warning(str(exc))
        return

    use_case = build_account_history_use_case()
    result = use_case.execute(address)

    for line in format_history_lines(result.events, history_filter):
        print(line)
    if not result.complete:
        print(
            "History is incomplete: the node stopped answering after "
            f"{result.page_count} pages."
        )
    if result.failures:
        print(f"{len(result.failures)} transactions could not be classified.")


if __name__ == "__main__":  # pragma: no cover
    main()
