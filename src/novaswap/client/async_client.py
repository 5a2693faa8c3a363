from __future__ import annotations

import base64
import json
import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import NamedTuple, Optional, TypeVar, Union

from terra_sdk.core import AccAddress, Coin, Coins
from terra_sdk.core.fee import Fee

log = logging.getLogger(__name__)

_CosmWasmClientT = TypeVar("_CosmWasmClientT", bound="CosmWasmClient")


def calculate_fee(gas_limit: int, gas_price: Union[Decimal, str], denom: str) -> Fee:
    amount = math.ceil(Decimal(gas_limit) * Decimal(gas_price))
    return Fee(gas_limit, Coins([Coin(denom, amount)]))


class Event(NamedTuple):
    type: str
    attributes: list[tuple[str, str]]

    @classmethod
    def from_data(cls, data: dict) -> Event:
        attributes = [(attr["key"], attr["value"]) for attr in data.get("attributes") or []]
        return cls(data["type"], attributes)

    def get(self, key: str, default: str = None) -> Optional[str]:
        for attr_key, value in self.attributes:
            if attr_key == key:
                return value
        return default


@dataclass(frozen=True)
class ExecuteResult:
    txhash: str
    logs: list[list[Event]] = field(default_factory=list)
    height: int = 0
    gas_used: int = 0

    @property
    def events(self) -> list[Event]:
        """Events of the first message in the transaction"""
        return self.logs[0] if self.logs else []

    def find_attribute(self, key: str, event_type: str = None) -> Optional[str]:
        for events in self.logs:
            for event in events:
                if event_type is not None and event.type != event_type:
                    continue
                if (value := event.get(key)) is not None:
                    return value
        return None


@dataclass(frozen=True)
class InstantiateResult(ExecuteResult):
    contract_addr: AccAddress = AccAddress("")


class CosmWasmClient(ABC):
    """Signing transport used by the contract clients.

    Implementations only submit, query and decode. Retries, batching and gas estimation
    are out of their scope; errors propagate to the caller unmodified.
    """

    address: AccAddress
    default_fee: Fee
    started: bool = False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(address={getattr(self, 'address', None)})"

    @classmethod
    async def new(cls: type[_CosmWasmClientT], *args, **kwargs) -> _CosmWasmClientT:
        self = cls(*args, **kwargs)
        await self.start()
        return self

    async def __aenter__(self):
        if not self.started:
            await self.start()
        return self

    async def __aexit__(self, *args):
        return await self.close()

    async def start(self):
        self.started = True
        log.info(f"Started {self}")

    async def close(self):
        self.started = False

    @abstractmethod
    async def instantiate(
        self,
        sender: AccAddress,
        code_id: int,
        msg: dict,
        label: str,
        fee: Fee = None,
        funds: Coins = None,
        admin: AccAddress = None,
    ) -> InstantiateResult:
        ...

    @abstractmethod
    async def execute(
        self,
        sender: AccAddress,
        contract_addr: AccAddress,
        msg: dict,
        fee: Fee = None,
        funds: Coins = None,
        memo: str = "",
    ) -> ExecuteResult:
        ...

    @abstractmethod
    async def contract_query(self, contract_addr: AccAddress, query_msg: dict) -> dict:
        ...

    @abstractmethod
    async def get_balance(self, address: AccAddress, denom: str) -> Coin:
        ...

    @abstractmethod
    async def upload(self, sender: AccAddress, wasm_path: str, fee: Fee = None) -> int:
        ...

    @staticmethod
    def encode_msg(msg: dict) -> str:
        bytes_json = json.dumps(msg, separators=(",", ":")).encode("utf-8")
        return base64.b64encode(bytes_json).decode("ascii")

    @staticmethod
    def decode_msg(raw_msg: Union[str, bytes, dict]) -> dict:
        if isinstance(raw_msg, dict):
            return raw_msg
        return json.loads(base64.b64decode(raw_msg))

    @staticmethod
    def extract_log_events(logs: Optional[list]) -> list[list[Event]]:
        """Convert raw tx logs (objects with an ``events`` attribute or dicts with an
        ``events`` key) into one list of events per message"""
        if not logs:
            return []
        parsed_logs = []
        for tx_log in logs:
            events = tx_log["events"] if isinstance(tx_log, dict) else tx_log.events
            parsed_logs.append([Event.from_data(event) for event in events or []])
        return parsed_logs
