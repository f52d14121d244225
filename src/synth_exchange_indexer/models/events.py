"""Decoded on-chain events consumed by the event handlers.

Each event carries EventMeta (transaction/block metadata) plus the decoded
parameters of its kind. Records arrive as camelCase dicts; from_dict() validates
them and raises MalformedEventError instead of guessing missing values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, NamedTuple

from synth_exchange_indexer.exceptions import MalformedEventError
from synth_exchange_indexer.utils.keys import event_record_id
from synth_exchange_indexer.utils.validation import is_hex_address, is_tx_hash


class ChainPosition(NamedTuple):
    """Canonical order of an event: block number, then log index within the block."""

    block_number: int
    log_index: int


# ---------------------------------------------------------------------------
# Field parsing
# ---------------------------------------------------------------------------


def _field(data: dict[str, Any], name: str) -> Any:
    if name not in data or data[name] is None:
        raise MalformedEventError(f"Missing field {name!r}", field=name)
    return data[name]


def _uint(data: dict[str, Any], name: str) -> int:
    """Non-negative integer; accepts ints and decimal or 0x-prefixed strings."""
    value = _field(data, name)
    if isinstance(value, bool):
        raise MalformedEventError(f"Field {name!r} must be an integer", field=name)
    if isinstance(value, str):
        try:
            value = int(value.strip(), 0)
        except ValueError as e:
            raise MalformedEventError(f"Field {name!r} is not an integer: {value!r}", field=name) from e
    if not isinstance(value, int):
        raise MalformedEventError(f"Field {name!r} must be an integer", field=name)
    if value < 0:
        raise MalformedEventError(f"Field {name!r} must be non-negative", field=name)
    return value


def _text(data: dict[str, Any], name: str) -> str:
    value = _field(data, name)
    if not isinstance(value, str) or not value.strip():
        raise MalformedEventError(f"Field {name!r} must be a non-empty string", field=name)
    return value.strip()


def _address(data: dict[str, Any], name: str) -> str:
    value = _field(data, name)
    if not is_hex_address(value):
        raise MalformedEventError(f"Field {name!r} is not an address: {value!r}", field=name)
    return str(value).strip().lower()


def _params(data: dict[str, Any]) -> dict[str, Any]:
    params = _field(data, "params")
    if not isinstance(params, dict):
        raise MalformedEventError("Field 'params' must be an object", field="params")
    return params


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class EventMeta:
    """Transaction and block metadata shared by every event."""

    tx_hash: str
    log_index: int
    block_number: int
    block_timestamp: int
    """Unix timestamp (seconds) of the block."""
    tx_from: str
    """Transaction sender."""
    gas_price: int
    network: str

    @property
    def position(self) -> ChainPosition:
        return ChainPosition(self.block_number, self.log_index)

    @property
    def record_id(self) -> str:
        """Key of the per-event record: {txHash}-{logIndex}."""
        return event_record_id(self.tx_hash, self.log_index)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EventMeta:
        """Build from a raw event record (camelCase keys)."""
        tx_hash = _field(data, "transactionHash")
        if not is_tx_hash(tx_hash):
            raise MalformedEventError(
                f"Field 'transactionHash' is not a transaction hash: {tx_hash!r}",
                field="transactionHash",
            )
        return cls(
            tx_hash=str(tx_hash).strip().lower(),
            log_index=_uint(data, "logIndex"),
            block_number=_uint(data, "blockNumber"),
            block_timestamp=_uint(data, "blockTimestamp"),
            tx_from=_address(data, "from"),
            gas_price=_uint(data, "gasPrice"),
            network=_text(data, "network"),
        )


@dataclass(frozen=True, slots=True)
class SynthExchangeEvent:
    """SynthExchange(account, fromCurrencyKey, fromAmount, toCurrencyKey, toAmount, toAddress)."""

    kind: ClassVar[str] = "SynthExchange"

    meta: EventMeta
    account: str
    from_currency_key: str
    from_amount: int
    """Raw fixed-point amount (18 decimals)."""
    to_currency_key: str
    to_amount: int
    to_address: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SynthExchangeEvent:
        params = _params(data)
        return cls(
            meta=EventMeta.from_dict(data),
            account=_address(params, "account"),
            from_currency_key=_text(params, "fromCurrencyKey"),
            from_amount=_uint(params, "fromAmount"),
            to_currency_key=_text(params, "toCurrencyKey"),
            to_amount=_uint(params, "toAmount"),
            to_address=_address(params, "toAddress"),
        )


@dataclass(frozen=True, slots=True)
class SettlementEvent:
    """Shared shape of ExchangeReclaim and ExchangeRebate(account, currencyKey, amount)."""

    kind: ClassVar[str] = ""

    meta: EventMeta
    account: str
    currency_key: str
    amount: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SettlementEvent:
        params = _params(data)
        return cls(
            meta=EventMeta.from_dict(data),
            account=_address(params, "account"),
            currency_key=_text(params, "currencyKey"),
            amount=_uint(params, "amount"),
        )


@dataclass(frozen=True, slots=True)
class ExchangeReclaimEvent(SettlementEvent):
    kind: ClassVar[str] = "ExchangeReclaim"


@dataclass(frozen=True, slots=True)
class ExchangeRebateEvent(SettlementEvent):
    kind: ClassVar[str] = "ExchangeRebate"


@dataclass(frozen=True, slots=True)
class ExchangeFeeUpdatedEvent:
    """ExchangeFeeUpdated(synthKey, newExchangeFeeRate)."""

    kind: ClassVar[str] = "ExchangeFeeUpdated"

    meta: EventMeta
    synth_key: str
    new_exchange_fee_rate: int
    """Raw fixed-point fraction (18 decimals)."""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ExchangeFeeUpdatedEvent:
        params = _params(data)
        return cls(
            meta=EventMeta.from_dict(data),
            synth_key=_text(params, "synthKey"),
            new_exchange_fee_rate=_uint(params, "newExchangeFeeRate"),
        )


@dataclass(frozen=True, slots=True)
class RatesUpdatedEvent:
    """RatesUpdated(currencyKeys[], newRates[]): oracle price update, rates in 18 decimals."""

    kind: ClassVar[str] = "RatesUpdated"

    meta: EventMeta
    currency_keys: tuple[str, ...]
    new_rates: tuple[int, ...]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RatesUpdatedEvent:
        params = _params(data)
        keys = _field(params, "currencyKeys")
        rates = _field(params, "newRates")
        if not isinstance(keys, list) or not isinstance(rates, list):
            raise MalformedEventError("currencyKeys and newRates must be lists", field="currencyKeys")
        if len(keys) != len(rates):
            raise MalformedEventError(
                f"currencyKeys ({len(keys)}) and newRates ({len(rates)}) differ in length",
                field="newRates",
            )
        return cls(
            meta=EventMeta.from_dict(data),
            currency_keys=tuple(_text({"currencyKey": k}, "currencyKey") for k in keys),
            new_rates=tuple(_uint({"newRate": r}, "newRate") for r in rates),
        )


DecodedEvent = (
    SynthExchangeEvent
    | ExchangeReclaimEvent
    | ExchangeRebateEvent
    | ExchangeFeeUpdatedEvent
    | RatesUpdatedEvent
)

_EVENT_TYPES: dict[str, Any] = {
    SynthExchangeEvent.kind: SynthExchangeEvent,
    ExchangeReclaimEvent.kind: ExchangeReclaimEvent,
    ExchangeRebateEvent.kind: ExchangeRebateEvent,
    ExchangeFeeUpdatedEvent.kind: ExchangeFeeUpdatedEvent,
    RatesUpdatedEvent.kind: RatesUpdatedEvent,
}


def decode_event(payload: dict[str, Any]) -> DecodedEvent:
    """Build the typed event for payload['kind'].

    Raises:
        MalformedEventError: Unknown kind, or missing/invalid fields.
    """
    if not isinstance(payload, dict):
        raise MalformedEventError("Event record must be an object")
    kind = payload.get("kind")
    event_type = _EVENT_TYPES.get(kind) if isinstance(kind, str) else None
    if event_type is None:
        raise MalformedEventError(f"Unknown event kind: {kind!r}", field="kind")
    return event_type.from_dict(payload)
