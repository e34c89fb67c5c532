"""Tests for the Sui JSON-RPC ledger client."""

from unittest.mock import MagicMock

import pytest
import requests

from src.application.ports.ledger_client import LedgerClientError, ObjectSummary
from src.application.use_cases.get_account_history import GetAccountHistoryUseCase
from src.infrastructure.settings import LedgerSettings
from src.infrastructure.sui_json_rpc_client import (
    SuiJsonRpcLedgerClient,
    create_session,
)

NODE_URL = "http://node.test"


def _client(*bodies) -> tuple[SuiJsonRpcLedgerClient, MagicMock]:
    session = MagicMock()
    responses = []
    for body in bodies:
        response = MagicMock()
        response.json.return_value = body
        responses.append(response)
    session.post.side_effect = responses
    client = SuiJsonRpcLedgerClient(
        LedgerSettings(node_url=NODE_URL, request_timeout=3.0),
        session=session,
        logger=MagicMock(),
    )
    return client, session


def _sent_payload(session: MagicMock, index: int = 0) -> dict:
    return session.post.call_args_list[index].kwargs["json"]


def test_fetch_owned_objects_page_sends_cursor_and_limit() -> None:
    client, session = _client(
        {
            "jsonrpc": "2.0",
            "id": 1,
            "result": {
                "data": [{"data": {"objectId": "0x1", "version": "4"}}],
                "nextCursor": "0x1",
            },
        }
    )

    page = client.fetch_owned_objects_page("0xme", "0x0", 20)

    assert page.items == [ObjectSummary("0x1", 4)]
    payload = _sent_payload(session)
    assert payload["method"] == "suix_getOwnedObjects"
    assert payload["params"][0] == "0xme"
    assert payload["params"][2:] == ["0x0", 20]
    assert session.post.call_args.args == (NODE_URL,)
    assert session.post.call_args.kwargs["timeout"] == 3.0


def test_request_ids_increase() -> None:
    client, session = _client({"result": 1}, {"result": "2"})

    client.fetch_latest_checkpoint()
    assert client.fetch_latest_checkpoint() == 2

    assert [_sent_payload(session, i)["id"] for i in range(2)] == [1, 2]


def test_fetch_object_prior_transaction() -> None:
    client, session = _client(
        {"result": {"status": "VersionFound", "details": {"previousTransaction": "D1"}}},
        {"result": {"status": "ObjectDeleted"}},
    )

    assert client.fetch_object_prior_transaction("0x1", 3) == "D1"
    assert client.fetch_object_prior_transaction("0x1", 4) is None
    assert _sent_payload(session)["method"] == "sui_tryGetPastObject"
    assert _sent_payload(session)["params"][:2] == ["0x1", 3]


def test_fetch_transaction_requests_balance_changes() -> None:
    client, session = _client(
        {
            "result": {
                "digest": "D1",
                "effects": {"status": {"status": "success"}},
                "balanceChanges": [],
            }
        }
    )

    context = client.fetch_transaction("D1")

    assert context.digest == "D1"
    params = _sent_payload(session)["params"]
    assert params[0] == "D1"
    assert params[1]["showBalanceChanges"] is True


def test_fetch_all_balances() -> None:
    client, _ = _client(
        {
            "result": [
                {"coinType": "0x2::sui::SUI", "coinObjectCount": 1, "totalBalance": "5"},
            ]
        }
    )

    [balance] = client.fetch_all_balances("0xme")

    assert balance.total_balance == 5


def test_json_rpc_error_raises() -> None:
    client, _ = _client({"error": {"code": -32602, "message": "Invalid params"}})

    with pytest.raises(LedgerClientError, match="Invalid params"):
        client.fetch_transaction("bad")


def test_missing_result_raises() -> None:
    client, _ = _client({"jsonrpc": "2.0", "id": 1})

    with pytest.raises(LedgerClientError):
        client.fetch_latest_checkpoint()


def test_transport_error_raises() -> None:
    session = MagicMock()
    session.post.side_effect = requests.ConnectionError("refused")
    client = SuiJsonRpcLedgerClient(
        LedgerSettings(node_url=NODE_URL),
        session=session,
        logger=MagicMock(),
    )

    with pytest.raises(LedgerClientError, match="refused"):
        client.fetch_all_balances("0xme")


def test_invalid_json_raises() -> None:
    session = MagicMock()
    session.post.return_value.json.side_effect = ValueError("no json")
    client = SuiJsonRpcLedgerClient(
        LedgerSettings(node_url=NODE_URL),
        session=session,
        logger=MagicMock(),
    )

    with pytest.raises(LedgerClientError):
        client.fetch_latest_checkpoint()


def test_create_session_mounts_retrying_adapter() -> None:
    session = create_session(max_retries=2)

    adapter = session.get_adapter("https://fullnode.mainnet.sui.io")

    assert adapter.max_retries.total == 2
    assert 503 in adapter.max_retries.status_forcelist
    assert session.headers["Content-Type"] == "application/json"


def test_malformed_transaction_is_recorded_and_walk_continues() -> None:
    """A misshapen node payload should fail one object, not the walk."""
    client, _ = _client(
        {
            "result": {
                "data": [
                    {"data": {"objectId": "0x1", "version": "1"}},
                    {"data": {"objectId": "0x2", "version": "1"}},
                ],
            }
        },
        {"result": {"status": "VersionFound", "details": {"previousTransaction": "D1"}}},
        {"result": {"digest": "D1", "effects": {"status": "success"}, "balanceChanges": []}},
        {"result": {"status": "VersionFound", "details": {"previousTransaction": "D2"}}},
        {
            "result": {
                "digest": "D2",
                "effects": {"status": {"status": "success"}},
                "balanceChanges": [
                    {"owner": {"AddressOwner": "0xme"}, "coinType": "0x2::sui::SUI", "amount": "5"},
                    {"owner": {"AddressOwner": "0xother"}, "coinType": "0x2::sui::SUI", "amount": "-5"},
                ],
            }
        },
        {"result": {"data": [], "nextCursor": None}},
    )
    use_case = GetAccountHistoryUseCase(client, logger=MagicMock())

    result = use_case.execute("0xme")

    assert [event.digest for event in result.events] == ["D2"]
    assert [failure.digest for failure in result.failures] == ["D1"]
    assert result.complete is True


def test_page_of_error_entries_fetches_following_page() -> None:
    client, session = _client(
        {
            "result": {
                "data": [{"error": {"code": "displayError"}}],
                "nextCursor": "0x9",
                "hasNextPage": True,
            }
        },
        {"result": {"data": [], "nextCursor": None}},
    )
    use_case = GetAccountHistoryUseCase(client, logger=MagicMock())

    result = use_case.execute("0xme")

    assert session.post.call_count == 2
    assert _sent_payload(session, 1)["params"][2] == "0x9"
    assert result.complete is True
