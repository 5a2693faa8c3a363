from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable, NamedTuple, Optional, Union

import pytest
from terra_sdk.core import AccAddress, Coin, Coins
from terra_sdk.core.fee import Fee

from novaswap.client import CosmWasmClient, Event, ExecuteResult, InstantiateResult, calculate_fee

SIGNER = AccAddress("cosmos1signer")
TOKEN_ADDR = AccAddress("cosmos1token")
PAIR_ADDR = AccAddress("cosmos1pair")
LP_TOKEN_ADDR = AccAddress("cosmos1lptoken")
FACTORY_ADDR = AccAddress("cosmos1factory")
DENOM = "uatom"


class Call(NamedTuple):
    method: str
    contract: Optional[AccAddress]
    msg: Any
    funds: Optional[Coins] = None
    fee: Optional[Fee] = None


class FakeClient(CosmWasmClient):
    """In-memory transport recording every call"""

    def __init__(self, address: AccAddress = SIGNER):
        self.address = address
        self.default_fee = calculate_fee(10_000_000, Decimal("0.01"), DENOM)
        self.calls: list[Call] = []
        self.queries: dict[tuple[str, str], Union[dict, list, Callable[[dict], Any]]] = {}
        self.execute_results: list[ExecuteResult] = []
        self.balances: dict[tuple[str, str], int] = {}
        self._n_instances = 0

    @property
    def executes(self) -> list[Call]:
        return [call for call in self.calls if call.method == "execute"]

    def set_query(self, contract: str, name: str, response):
        self.queries[(contract, name)] = response

    async def instantiate(
        self, sender, code_id, msg, label, fee=None, funds=None, admin=None
    ) -> InstantiateResult:
        self.calls.append(Call("instantiate", None, msg, funds, fee))
        self._n_instances += 1
        contract_addr = AccAddress(f"cosmos1contract{self._n_instances}")
        events = [[Event("instantiate", [("_contract_address", contract_addr), ("code_id", "1")])]]
        return InstantiateResult(f"TX{len(self.calls)}", events, contract_addr=contract_addr)

    async def execute(self, sender, contract_addr, msg, fee=None, funds=None, memo=""):
        self.calls.append(Call("execute", contract_addr, msg, funds, fee))
        if self.execute_results:
            return self.execute_results.pop(0)
        return ExecuteResult(f"TX{len(self.calls)}")

    async def contract_query(self, contract_addr, query_msg):
        self.calls.append(Call("query", contract_addr, query_msg))
        (name,) = query_msg
        response = self.queries[(contract_addr, name)]
        return response(query_msg) if callable(response) else response

    async def get_balance(self, address, denom) -> Coin:
        self.calls.append(Call("balance", address, denom))
        return Coin(denom, self.balances.get((address, denom), 0))

    async def upload(self, sender, wasm_path, fee=None) -> int:
        self.calls.append(Call("upload", None, wasm_path, None, fee))
        return 1


@pytest.fixture
def client() -> FakeClient:
    return FakeClient()
