"""Use case to list the coin balances held by a wallet."""

from src.application.ports.ledger_client import LedgerClientPort
from src.domain.errors import MalformedCoinTypeError
from src.domain.models.wallet import WalletBalanceDTO
from src.domain.services.coin_identity import resolve_currency_name
from src.domain.services.volumes import format_volume
from src.infrastructure.logging.logger import get_app_logger


class GetWalletBalancesUseCase:
    """Resolve and format every coin balance of a wallet."""

    def __init__(self, ledger_client: LedgerClientPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            ledger_client: Port providing read access to the ledger.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_client = ledger_client
        self._logger = logger or get_app_logger()

    def execute(self, address: str) -> list[WalletBalanceDTO]:
        """Return the balances of ``address`` sorted by currency name.

        Coin types that cannot be resolved are skipped with a warning.
        """
        balances = []
        for row in self._ledger_client.fetch_all_balances(address):
            try:
                currency = resolve_currency_name(row.coin_type)
            except MalformedCoinTypeError as exc:
                self._logger.warning(f"Skipping balance row: {exc}")
                continue
            balances.append(
                WalletBalanceDTO(
                    currency=currency,
                    coin_type=row.coin_type,
                    raw_balance=row.total_balance,
                    formatted_balance=format_volume(
                        row.total_balance,
                        currency,
                    ),
                    coin_object_count=row.coin_object_count,
                )
            )
        balances = sorted(
            balances,
            key=lambda item: (item.currency.lower(), item.coin_type),
        )
        self._logger.info(f"Fetched {len(balances)} balances for {address}")
        return balances


__all__ = ["GetWalletBalancesUseCase", "WalletBalanceDTO"]
