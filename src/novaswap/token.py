from __future__ import annotations

import logging
from typing import TypeVar

from terra_sdk.core import AccAddress
from terra_sdk.core.fee import Fee

from .asset import AmountInput, validate_amount
from .client import CosmWasmClient, ExecuteResult, InstantiateResult
from .contract import BaseContract

log = logging.getLogger(__name__)

DECIMALS = 6
INITIAL_SUPPLY = 1_000_000_000 * 10 ** DECIMALS

_TokenT = TypeVar("_TokenT", bound="Token")


class Token(BaseContract):
    """CW20 token contract"""

    @classmethod
    async def new(
        cls: type[_TokenT],
        client: CosmWasmClient,
        signer: AccAddress,
        code_id: int,
        owner: AccAddress,
        name: str,
        symbol: str,
        fee: Fee = None,
    ) -> _TokenT:
        self = cls(client, signer, code_id, fee=fee)
        await self.initialize(owner, name, symbol)
        return self

    async def initialize(self, owner: AccAddress, name: str, symbol: str) -> InstantiateResult:
        msg = {
            "name": name,
            "symbol": symbol,
            "decimals": DECIMALS,
            "initial_balances": [{"address": owner, "amount": str(INITIAL_SUPPLY)}],
            "mint": {"minter": owner},
        }
        return await self._instantiate(msg, "init token")

    async def transfer(self, recipient: AccAddress, amount: AmountInput) -> ExecuteResult:
        msg = {"transfer": {"recipient": recipient, "amount": validate_amount(amount)}}
        return await self._execute(msg)

    async def send(
        self,
        contract: AccAddress,
        amount: AmountInput,
        message: dict,
    ) -> ExecuteResult:
        """Transfer ``amount`` to ``contract`` and trigger its receive hook with ``message``"""
        msg = {
            "send": {
                "contract": contract,
                "amount": validate_amount(amount),
                "msg": self.client.encode_msg(message),
            }
        }
        return await self._execute(msg)

    async def approve(self, spender: AccAddress, amount: AmountInput) -> ExecuteResult:
        # increase_allowance adds to the current allowance, it does not replace it
        msg = {"increase_allowance": {"spender": spender, "amount": validate_amount(amount)}}
        return await self._execute(msg)

    async def mint(self, recipient: AccAddress, amount: AmountInput) -> ExecuteResult:
        msg = {"mint": {"recipient": recipient, "amount": validate_amount(amount)}}
        return await self._execute(msg)

    async def balance_of(self, address: AccAddress) -> dict:
        return await self._query({"balance": {"address": address}})

    async def allowance(self, owner: AccAddress, spender: AccAddress) -> dict:
        return await self._query({"allowance": {"owner": owner, "spender": spender}})

    async def token_info(self) -> dict:
        return await self._query({"token_info": {}})

    async def minter(self) -> dict | None:
        return await self._query({"minter": {}})

    async def get_balance(self, address: AccAddress) -> int:
        res = await self.balance_of(address)
        return int(res["balance"])

    async def get_allowance(self, owner: AccAddress, spender: AccAddress) -> int:
        res = await self.allowance(owner, spender)
        return int(res["allowance"])
