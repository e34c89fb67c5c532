"""Composition root for wiring infrastructure adapters."""

from src.application.ports.ledger_client import LedgerClientPort
from src.application.use_cases.get_account_history import (
    GetAccountHistoryUseCase,
)
from src.application.use_cases.get_wallet_balances import (
    GetWalletBalancesUseCase,
)
from src.domain.services.classification import TransactionClassifier
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings
from src.infrastructure.sui_json_rpc_client import SuiJsonRpcLedgerClient


def build_ledger_client(
    settings: LedgerSettings | None = None,
) -> LedgerClientPort:
    """Return the Sui JSON-RPC ledger client."""
    resolved = settings or LedgerSettings.from_env()
    return SuiJsonRpcLedgerClient(resolved, logger=get_app_logger())


def build_account_history_use_case(
    ledger_client: LedgerClientPort | None = None,
    settings: LedgerSettings | None = None,
) -> GetAccountHistoryUseCase:
    """Return the account history use case wired to the ledger client."""
    resolved = settings or LedgerSettings.from_env()
    logger = get_app_logger()
    return GetAccountHistoryUseCase(
        ledger_client=ledger_client or build_ledger_client(resolved),
        classifier=TransactionClassifier(logger=logger),
        page_size=resolved.page_size,
        max_workers=resolved.max_workers,
        logger=logger,
    )


def build_wallet_balances_use_case(
    ledger_client: LedgerClientPort | None = None,
) -> GetWalletBalancesUseCase:
    """Return the wallet balances use case wired to the ledger client."""
    return GetWalletBalancesUseCase(
        ledger_client=ledger_client or build_ledger_client(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_ledger_client",
    "build_account_history_use_case",
    "build_wallet_balances_use_case",
]
