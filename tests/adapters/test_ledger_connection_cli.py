"""Tests for the test_ledger_connection adapter."""

from src.adapters import test_ledger_connection
from src.infrastructure.settings import LedgerSettings


class _DummyClient:
    def __init__(self) -> None:
        self.calls = 0

    def fetch_latest_checkpoint(self) -> int:
        self.calls += 1
        return 123456


def test_main_logs_node_and_checkpoint(monkeypatch):
    """The CLI should log the node URL and the latest checkpoint."""
    client = _DummyClient()
    settings = LedgerSettings(node_url="http://node.test")
    log_messages: list[str] = []

    class _Logger:
        def info(self, msg: str) -> None:
            log_messages.append(msg)

    class _Settings:
        @staticmethod
        def from_env():
            return settings

    monkeypatch.setattr(test_ledger_connection, "LedgerSettings", _Settings)
    monkeypatch.setattr(
        test_ledger_connection,
        "build_ledger_client",
        lambda resolved: client,
    )
    monkeypatch.setattr(
        test_ledger_connection,
        "get_app_logger",
        lambda: _Logger(),
    )

    test_ledger_connection.main()

    assert client.calls == 1
    assert "http://node.test" in log_messages[0]
    assert "123456" in log_messages[1]
