"""Tests for the wallet balances CLI adapter."""

from unittest.mock import MagicMock

from src.adapters import wallet_balances_cli
from src.application.ports.ledger_client import LedgerClientError
from src.domain.models.wallet import WalletBalanceDTO


def _patch(monkeypatch) -> tuple[MagicMock, MagicMock]:
    use_case = MagicMock()
    logger = MagicMock()
    monkeypatch.setattr(
        wallet_balances_cli,
        "build_wallet_balances_use_case",
        lambda: use_case,
    )
    monkeypatch.setattr(wallet_balances_cli, "get_app_logger", lambda: logger)
    monkeypatch.setenv("SUI_WALLET_ADDRESS", "0xme")
    return use_case, logger


def test_main_prints_balances(monkeypatch, capsys):
    use_case, _ = _patch(monkeypatch)
    use_case.execute.return_value = [
        WalletBalanceDTO(
            currency="sui::SUI",
            coin_type="0x2::sui::SUI",
            raw_balance=1_500_000_000,
            formatted_balance="1.500000000",
            coin_object_count=2,
        )
    ]

    wallet_balances_cli.main()

    assert capsys.readouterr().out.splitlines() == [
        "Balances for 0xme",
        "1.500000000 sui::SUI (2 coins)",
    ]


def test_main_logs_ledger_errors(monkeypatch, capsys):
    use_case, logger = _patch(monkeypatch)
    use_case.execute.side_effect = LedgerClientError("node down")

    wallet_balances_cli.main()

    logger.error.assert_called_once()
    assert capsys.readouterr().out == ""
