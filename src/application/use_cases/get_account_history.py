"""Use case to rebuild the activity history of a Sui wallet.

The walk pages through the objects owned by the wallet, resolves the
transaction that last touched each object and classifies it. Fetching is
best-effort: when a page cannot be fetched the walk stops and returns what
it accumulated so far, flagged as incomplete. Per-object failures are
recorded and the walk moves on. A page holding only unreadable entries is
stepped over with the cursor reported by the node.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from src.application.ports.ledger_client import (
    LedgerClientError,
    LedgerClientPort,
    ObjectSummary,
)
from src.domain.errors import ClassificationError
from src.domain.models.history import AccountHistoryEvent
from src.domain.services.classification import TransactionClassifier
from src.infrastructure.logging.logger import get_app_logger

DEFAULT_PAGE_SIZE = 20


@dataclass(frozen=True)
class TransactionFailure:
    """Object whose previous transaction could not be classified."""

    object_id: str
    digest: str | None
    reason: str


@dataclass(frozen=True)
class AccountHistoryResult:
    """Result of an account history walk.

    Attributes:
        address: Wallet address the history belongs to.
        events: Events in object discovery order.
        failures: Objects skipped because of per-object errors.
        complete: False when the walk stopped before the last page.
        page_count: Number of non-empty pages processed.
    """

    address: str
    events: list[AccountHistoryEvent] = field(default_factory=list)
    failures: list[TransactionFailure] = field(default_factory=list)
    complete: bool = True
    page_count: int = 0


@dataclass(frozen=True)
class _ObjectOutcome:
    events: list[AccountHistoryEvent]
    failure: TransactionFailure | None = None


class GetAccountHistoryUseCase:
    """Walk owned objects and classify their previous transactions."""

    def __init__(
        self,
        ledger_client: LedgerClientPort,
        classifier: TransactionClassifier | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_workers: int = 1,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_client: Port providing read access to the ledger.
            classifier: Classifier applied to each transaction.
            page_size: Number of owned objects requested per page.
            max_workers: Worker threads per page; 1 keeps it sequential.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        if max_workers < 1:
            raise ValueError(
                f"max_workers must be positive, got {max_workers}"
            )
        self._ledger_client = ledger_client
        self._logger = logger or get_app_logger()
        self._classifier = classifier or TransactionClassifier(
            logger=self._logger
        )
        self._page_size = page_size
        self._max_workers = max_workers

    def walk(self, address: str) -> list[AccountHistoryEvent]:
        """Return the events of an account history walk.

        The result may be partial; use ``execute`` to know whether the walk
        reached the last page.
        """
        return self.execute(address).events

    def execute(self, address: str) -> AccountHistoryResult:
        """Rebuild the account history of ``address``.

        Args:
            address: Wallet address to walk.

        Returns:
            AccountHistoryResult: Events, per-object failures and whether the
            walk reached the end of the owned objects.
        """
        events: list[AccountHistoryEvent] = []
        failures: list[TransactionFailure] = []
        cursor: str | None = None
        complete = True
        page_count = 0

        executor = None
        if self._max_workers > 1:
            executor = ThreadPoolExecutor(max_workers=self._max_workers)
        try:
            while True:
                try:
                    page = self._ledger_client.fetch_owned_objects_page(
                        address,
                        cursor,
                        self._page_size,
                    )
                except LedgerClientError as exc:
                    self._logger.error(
                        f"Stopping history walk for {address} "
                        f"after cursor={cursor}: {exc}"
                    )
                    complete = False
                    break
                if page.is_empty:
                    break
                page_count += 1
                if page.skipped_count:
                    self._logger.warning(
                        f"Node returned {page.skipped_count} unreadable "
                        f"objects for {address} after cursor={cursor}"
                    )
                if not page.items:
                    if not page.next_cursor or page.next_cursor == cursor:
                        self._logger.error(
                            f"Stopping history walk for {address}: no "
                            f"cursor to move past cursor={cursor}"
                        )
                        complete = False
                        break
                    cursor = page.next_cursor
                    continue
                for outcome in self._process_page(address, page.items, executor):
                    events.extend(outcome.events)
                    if outcome.failure is not None:
                        failures.append(outcome.failure)
                cursor = page.items[-1].object_id
        finally:
            if executor is not None:
                executor.shutdown(wait=True)

        self._logger.info(
            f"Rebuilt {len(events)} history events for {address} "
            f"from {page_count} pages ({len(failures)} failures)"
        )
        return AccountHistoryResult(
            address=address,
            events=events,
            failures=failures,
            complete=complete,
            page_count=page_count,
        )

    def _process_page(
        self,
        address: str,
        items: list[ObjectSummary],
        executor: ThreadPoolExecutor | None,
    ) -> list[_ObjectOutcome]:
        """Process every object of a page, keeping page order."""
        if executor is None:
            return [self._process_object(address, item) for item in items]
        return list(
            executor.map(lambda item: self._process_object(address, item), items)
        )

    def _process_object(
        self,
        address: str,
        item: ObjectSummary,
    ) -> _ObjectOutcome:
        """Fetch and classify the previous transaction of one object."""
        digest = None
        try:
            digest = self._ledger_client.fetch_object_prior_transaction(
                item.object_id,
                item.version,
            )
            if digest is None:
                self._logger.debug(
                    f"Object {item.object_id} has no previous transaction"
                )
                return _ObjectOutcome(events=[])
            context = self._ledger_client.fetch_transaction(digest)
            if not context.succeeded:
                self._logger.info(f"Skipping failed transaction {digest}")
                return _ObjectOutcome(events=[])
            return _ObjectOutcome(
                events=self._classifier.classify(context, address)
            )
        except LedgerClientError as exc:
            self._logger.warning(
                f"Ledger read failed for object {item.object_id}: {exc}"
            )
            return _ObjectOutcome(
                events=[],
                failure=TransactionFailure(item.object_id, digest, str(exc)),
            )
        except ClassificationError as exc:
            self._logger.error(
                f"Could not classify transaction {exc.digest or digest}: {exc}"
            )
            return _ObjectOutcome(
                events=[],
                failure=TransactionFailure(item.object_id, digest, str(exc)),
            )


__all__ = [
    "AccountHistoryResult",
    "GetAccountHistoryUseCase",
    "TransactionFailure",
]
