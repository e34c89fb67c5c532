"""Sui full node adapter speaking JSON-RPC over HTTP."""

from itertools import count
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from src.application.ports.ledger_client import (
    CoinBalance,
    LedgerClientError,
    LedgerClientPort,
    OwnedObjectsPage,
)
from src.domain.models.balances import TransactionContext
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings
from src.infrastructure.sui_payloads import (
    parse_coin_balance,
    parse_owned_objects_page,
    parse_prior_transaction,
    parse_transaction,
)

RETRY_BACKOFF_FACTOR = 0.5
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)

TRANSACTION_OPTIONS = {
    "showInput": True,
    "showEffects": True,
    "showBalanceChanges": True,
}
PAST_OBJECT_OPTIONS = {
    "showOwner": True,
    "showPreviousTransaction": True,
}
OWNED_OBJECTS_QUERY = {
    "filter": None,
    "options": {"showType": True},
}


def create_session(max_retries: int) -> requests.Session:
    """Create an HTTP session with a retry strategy.

    JSON-RPC reads are idempotent, so POST requests are retried too.

    Args:
        max_retries: Total retries on connection errors and retryable
            status codes.

    Returns:
        requests.Session: Session ready for JSON-RPC calls.
    """
    session = requests.Session()
    retry_strategy = Retry(
        total=max_retries,
        backoff_factor=RETRY_BACKOFF_FACTOR,
        status_forcelist=RETRY_STATUS_CODES,
        allowed_methods=frozenset({"POST"}),
    )
    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers.update(
        {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
    )
    return session


class SuiJsonRpcLedgerClient(LedgerClientPort):
    """LedgerClientPort implementation backed by a Sui full node."""

    def __init__(
        self,
        settings: LedgerSettings | None = None,
        session: requests.Session | None = None,
        logger=None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Node URL, timeout and retry settings.
            session: Optional preconfigured HTTP session.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._settings = settings or LedgerSettings()
        self._session = session or create_session(self._settings.max_retries)
        self._logger = logger or get_app_logger()
        self._request_ids = count(1)

    @property
    def node_url(self) -> str:
        return self._settings.node_url

    def fetch_owned_objects_page(
        self,
        address: str,
        cursor: str | None,
        page_size: int,
    ) -> OwnedObjectsPage:
        result = self._call(
            "suix_getOwnedObjects",
            [address, OWNED_OBJECTS_QUERY, cursor, page_size],
        )
        return parse_owned_objects_page(result)

    def fetch_object_prior_transaction(
        self,
        object_id: str,
        version: int,
    ) -> str | None:
        result = self._call(
            "sui_tryGetPastObject",
            [object_id, version, PAST_OBJECT_OPTIONS],
        )
        digest = parse_prior_transaction(result)
        if digest is None:
            self._logger.debug(
                f"No previous transaction for {object_id}@{version}: "
                f"{result.get('status')}"
            )
        return digest

    def fetch_transaction(self, digest: str) -> TransactionContext:
        result = self._call(
            "sui_getTransactionBlock",
            [digest, TRANSACTION_OPTIONS],
        )
        return parse_transaction(result)

    def fetch_all_balances(self, address: str) -> list[CoinBalance]:
        result = self._call("suix_getAllBalances", [address])
        if not isinstance(result, list):
            raise LedgerClientError(f"Malformed balances payload: {result!r}")
        return [parse_coin_balance(item) for item in result]

    def fetch_latest_checkpoint(self) -> int:
        result = self._call("sui_getLatestCheckpointSequenceNumber", [])
        try:
            return int(result)
        except (TypeError, ValueError) as exc:
            raise LedgerClientError(
                f"Malformed checkpoint sequence number: {result!r}"
            ) from exc

    def _call(self, method: str, params: list[Any]) -> Any:
        """Send a JSON-RPC request and return its ``result`` member.

        Raises:
            LedgerClientError: On transport errors, HTTP errors, invalid
                JSON or a JSON-RPC error object.
        """
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._request_ids),
            "method": method,
            "params": params,
        }
        try:
            response = self._session.post(
                self._settings.node_url,
                json=payload,
                timeout=self._settings.request_timeout,
            )
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as exc:
            raise LedgerClientError(f"{method} request failed: {exc}") from exc
        except ValueError as exc:
            raise LedgerClientError(
                f"{method} returned invalid JSON: {exc}"
            ) from exc

        if not isinstance(body, dict):
            raise LedgerClientError(f"{method} returned {body!r}")
        if body.get("error"):
            error = body["error"]
            message = error.get("message") if isinstance(error, dict) else error
            raise LedgerClientError(f"{method} failed: {message}")
        if "result" not in body:
            raise LedgerClientError(f"{method} response has no result")
        return body["result"]


__all__ = ["SuiJsonRpcLedgerClient", "create_session"]
