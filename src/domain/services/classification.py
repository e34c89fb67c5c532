"""Classification of a transaction's balance changes into history events.

Each rule pairs a shape guard, evaluated on the number of distinct
addresses and on the currencies received and sent by the wallet, with a
matcher that searches the records. Rules are evaluated in order; the first
matcher that returns an event wins. A matcher returning None lets evaluation
fall through to the next rule, and an ``Unclassified`` event is emitted when
no rule commits.
"""

from collections.abc import Callable
from dataclasses import dataclass

from src.domain.constants import NATIVE_CURRENCY
from src.domain.errors import ClassificationError, InvariantViolationError
from src.domain.models.balances import (
    BalanceChangeRecord,
    BalanceChangeSet,
    TransactionContext,
)
from src.domain.models.history import (
    AccountHistoryEvent,
    ReceivedCoin,
    ReceivedToken,
    SentCoin,
    SentToken,
    Staked,
    SwapCommission,
    Swapped,
    Unclassified,
)
from src.domain.services.coin_identity import is_native_currency
from src.domain.services.volumes import format_volume


@dataclass(frozen=True)
class ChangeShape:
    """Aggregates of a change set relative to the wallet address."""

    addresses: tuple[str, ...]
    received: tuple[str, ...]
    sent: tuple[str, ...]

    @classmethod
    def of(cls, changes: BalanceChangeSet, address: str) -> "ChangeShape":
        return cls(
            addresses=tuple(changes.distinct_addresses()),
            received=tuple(changes.currencies_received_by(address)),
            sent=tuple(changes.currencies_sent_by(address)),
        )

    def counts(self) -> tuple[int, int, int]:
        """Return ``(address_count, received_count, sent_count)``."""
        return len(self.addresses), len(self.received), len(self.sent)


@dataclass(frozen=True)
class ClassificationInput:
    """Everything a rule matcher may look at."""

    context: TransactionContext
    changes: BalanceChangeSet
    address: str
    shape: ChangeShape
    legacy_compatible: bool = False

    @property
    def gas_payer(self) -> str:
        return self.context.gas_owner or self.address


Guard = Callable[[ChangeShape], bool]
Matcher = Callable[[ClassificationInput], AccountHistoryEvent | None]


@dataclass(frozen=True)
class ClassificationRule:
    """Named shape guard and matcher pair."""

    name: str
    guard: Guard
    matcher: Matcher


def _header(data: ClassificationInput) -> dict:
    context = data.context
    return {
        "digest": context.digest,
        "timestamp_ms": context.timestamp_ms,
        "checkpoint_seq": context.checkpoint_seq,
    }


def _swap_gas(data: ClassificationInput) -> int:
    gas = 0
    for record in data.changes:
        if data.legacy_compatible:
            # Observed behaviour keys gas on the owner string, which never
            # equals a currency name on a real ledger.
            if record.owner == NATIVE_CURRENCY and record.amount < 0:
                gas = record.volume
            continue
        if (
            record.owner == data.gas_payer
            and is_native_currency(record.currency)
            and record.amount < 0
        ):
            gas += record.volume
    return gas


def _swap_legs(
    changes: BalanceChangeSet,
) -> tuple[BalanceChangeRecord, BalanceChangeRecord] | None:
    """Return the first gained and first given-up non-native records."""
    gained = None
    given = None
    for record in changes:
        if is_native_currency(record.currency):
            continue
        if record.amount > 0 and gained is None:
            gained = record
        elif record.amount < 0 and given is None:
            given = record
    if gained is None or given is None:
        return None
    return gained, given


def _build_swap(
    data: ClassificationInput,
    input_currency: str,
    input_volume: int,
    output_currency: str,
    output_volume: int,
    gas: int,
    commission: SwapCommission | None = None,
) -> Swapped:
    return Swapped(
        **_header(data),
        input_currency=input_currency,
        output_currency=output_currency,
        input_volume=input_volume,
        output_volume=output_volume,
        input_formatted_volume=format_volume(input_volume, input_currency),
        output_formatted_volume=format_volume(output_volume, output_currency),
        gas=gas,
        formatted_gas=format_volume(gas, NATIVE_CURRENCY),
        commission=commission,
    )


def match_staked(data: ClassificationInput) -> Staked | None:
    """Report value moved into a staked position."""
    selected = NATIVE_CURRENCY
    currencies = data.changes.distinct_currencies()
    if len(currencies) > 1:
        for currency in currencies:
            if not is_native_currency(currency):
                selected = currency
    for record in data.changes:
        currency = record.currency
        if data.legacy_compatible:
            matched = currency != selected
        else:
            matched = currency == selected
        if matched:
            return Staked(
                **_header(data),
                currency=currency,
                volume=record.volume,
                formatted_volume=format_volume(record.volume, currency),
            )
    return None


def match_swap_with_commission(data: ClassificationInput) -> Swapped | None:
    """Report a swap routed through an intermediary that took a fee."""
    commission_record = None
    for record in data.changes:
        if (
            record.owner != data.address
            and is_native_currency(record.currency)
            and record.amount > 0
        ):
            commission_record = record
            break
    if commission_record is None:
        return None
    legs = _swap_legs(data.changes)
    if legs is None:
        return None
    gained, given = legs
    commission = SwapCommission(
        recipient=commission_record.owner,
        volume=commission_record.volume,
        formatted_volume=format_volume(
            commission_record.volume,
            NATIVE_CURRENCY,
        ),
    )
    return _build_swap(
        data,
        gained.currency,
        gained.volume,
        given.currency,
        given.volume,
        _swap_gas(data),
        commission,
    )


def match_token_swap(data: ClassificationInput) -> Swapped | None:
    """Report a direct token-for-token swap."""
    legs = _swap_legs(data.changes)
    if legs is None:
        return None
    gained, given = legs
    return _build_swap(
        data,
        gained.currency,
        gained.volume,
        given.currency,
        given.volume,
        _swap_gas(data),
    )


def match_coin_swap(data: ClassificationInput) -> Swapped | None:
    """Report a swap where one currency came in and one went out."""
    gained = next((r for r in data.changes if r.amount > 0), None)
    given = next((r for r in data.changes if r.amount < 0), None)
    if gained is None or given is None:
        return None
    return _build_swap(
        data,
        data.shape.received[0],
        gained.volume,
        data.shape.sent[0],
        given.volume,
        0,
    )


def match_received(
    data: ClassificationInput,
) -> ReceivedCoin | ReceivedToken | None:
    """Report a native coin or token received from another address."""
    income_currency = data.shape.received[0]
    if is_native_currency(income_currency):
        for record in data.changes:
            if record.amount > 0 and record.owner == data.address:
                sender = next(
                    (r.owner for r in data.changes if r.amount < 0),
                    "",
                )
                currency = record.currency
                return ReceivedCoin(
                    **_header(data),
                    sender=sender,
                    receiver=record.owner,
                    currency=currency,
                    volume=record.volume,
                    formatted_volume=format_volume(record.volume, currency),
                )
        return None

    for record in data.changes:
        if record.owner != data.address:
            continue
        if record.amount <= 0:
            raise InvariantViolationError(
                f"Expected an inflow for {data.address}, "
                f"found amount {record.amount} of {record.coin_type}",
                digest=data.context.digest,
            )
        sender = next(
            (r.owner for r in data.changes if r.owner != data.address),
            None,
        )
        if sender is None:
            continue
        currency = record.currency
        return ReceivedToken(
            **_header(data),
            sender=sender,
            receiver=record.owner,
            currency=currency,
            volume=record.volume,
            formatted_volume=format_volume(record.volume, currency),
        )
    return None


def match_sent_coin(data: ClassificationInput) -> SentCoin | None:
    """Report native coin sent to another address."""
    receiver = next((r.owner for r in data.changes if r.amount > 0), None)
    if receiver is None:
        return None
    volume = max(record.volume for record in data.changes)
    return SentCoin(
        **_header(data),
        sender=data.address,
        receiver=receiver,
        currency=NATIVE_CURRENCY,
        volume=volume,
        formatted_volume=format_volume(volume, NATIVE_CURRENCY),
    )


def match_sent_token(data: ClassificationInput) -> SentToken | None:
    """Report a token sent to another address, paying gas in SUI."""
    gas = 0
    sent = None
    delivered = None
    for record in data.changes:
        if is_native_currency(record.currency):
            gas = record.volume
        elif record.amount < 0 and sent is None:
            sent = record
        elif record.amount > 0 and delivered is None:
            delivered = record
    if sent is None or delivered is None:
        return None
    currency = delivered.currency
    return SentToken(
        **_header(data),
        sender=data.address,
        receiver=delivered.owner,
        currency=currency,
        volume=sent.volume,
        formatted_volume=format_volume(sent.volume, currency),
        gas=gas,
        formatted_gas=format_volume(gas, NATIVE_CURRENCY),
    )


DEFAULT_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(
        "staked",
        lambda s: s.counts()[:2] == (1, 0) and s.counts()[2] >= 1,
        match_staked,
    ),
    ClassificationRule(
        "swap_with_commission",
        lambda s: s.counts() == (2, 1, 2),
        match_swap_with_commission,
    ),
    ClassificationRule(
        "token_swap",
        lambda s: s.counts() == (1, 1, 2),
        match_token_swap,
    ),
    ClassificationRule(
        "coin_swap",
        lambda s: s.counts() == (1, 1, 1),
        match_coin_swap,
    ),
    ClassificationRule(
        "received",
        lambda s: s.counts() == (2, 1, 0),
        match_received,
    ),
    ClassificationRule(
        "sent_coin",
        lambda s: s.counts() == (2, 0, 1),
        match_sent_coin,
    ),
    ClassificationRule(
        "sent_token",
        lambda s: s.counts() == (2, 0, 2),
        match_sent_token,
    ),
)


def build_unclassified(data: ClassificationInput) -> Unclassified:
    """Wrap a change set that no rule could explain."""
    return Unclassified(
        **_header(data),
        received_currencies=data.shape.received,
        sent_currencies=data.shape.sent,
        addresses=data.shape.addresses,
        currencies=tuple(data.changes.distinct_currencies()),
        balance_changes=data.changes,
    )


class TransactionClassifier:
    """Turn one transaction's balance changes into at most one event."""

    def __init__(
        self,
        rules: tuple[ClassificationRule, ...] = DEFAULT_RULES,
        legacy_compatible: bool = False,
        logger=None,
    ) -> None:
        """Initialize the classifier.

        Args:
            rules: Ordered rules; the first committing matcher wins.
            legacy_compatible: Reproduce the historical Staked record
                selection and owner-keyed swap gas instead of the corrected
                behaviour.
            logger: Optional logger for rule tracing.
        """
        self._rules = tuple(rules)
        self._legacy_compatible = legacy_compatible
        self._logger = logger

    @property
    def rules(self) -> tuple[ClassificationRule, ...]:
        return self._rules

    def classify(
        self,
        context: TransactionContext,
        my_address: str,
    ) -> list[AccountHistoryEvent]:
        """Classify a transaction relative to a wallet address.

        Args:
            context: Transaction digest, timing and balance changes.
            my_address: Wallet whose point of view is used.

        Returns:
            list[AccountHistoryEvent]: Empty when the transaction does not
            touch the wallet, otherwise exactly one event.

        Raises:
            ClassificationError: If the change set is malformed or violates
                the invariants of the shape it matched.
        """
        changes = context.balance_changes
        if changes is None:
            return []
        try:
            if not changes.touches(my_address):
                return []
            data = ClassificationInput(
                context=context,
                changes=changes,
                address=my_address,
                shape=ChangeShape.of(changes, my_address),
                legacy_compatible=self._legacy_compatible,
            )
            for rule in self._rules:
                if not rule.guard(data.shape):
                    continue
                event = rule.matcher(data)
                if event is not None:
                    self._trace(f"{context.digest} matched rule {rule.name}")
                    return [event]
                self._trace(
                    f"{context.digest} fell through rule {rule.name}"
                )
            return [build_unclassified(data)]
        except ClassificationError as exc:
            exc.with_digest(context.digest)
            raise

    def _trace(self, message: str) -> None:
        if self._logger is not None:
            self._logger.debug(message)


__all__ = [
    "ChangeShape",
    "ClassificationInput",
    "ClassificationRule",
    "DEFAULT_RULES",
    "TransactionClassifier",
    "build_unclassified",
    "match_staked",
    "match_swap_with_commission",
    "match_token_swap",
    "match_coin_swap",
    "match_received",
    "match_sent_coin",
    "match_sent_token",
]
