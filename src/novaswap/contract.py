from __future__ import annotations

import logging
from typing import Optional

from terra_sdk.core import AccAddress, Coins
from terra_sdk.core.fee import Fee

from .client import CosmWasmClient, ExecuteResult, InstantiateResult
from .exceptions import ContractAlreadyInstantiated, ContractNotInstantiated

log = logging.getLogger(__name__)


class BaseContract:
    """A contract identified by its code id and, once deployed, by its address.

    The address is bound at most once, either on construction or by ``_instantiate``.
    Every execute or query requires it.
    """

    client: CosmWasmClient
    signer: AccAddress
    code_id: Optional[int]
    fee: Optional[Fee]

    def __init__(
        self,
        client: CosmWasmClient,
        signer: AccAddress,
        code_id: Optional[int],
        contract_addr: AccAddress = None,
        fee: Fee = None,
    ):
        self.client = client
        self.signer = signer
        self.code_id = code_id
        self.fee = fee
        self._contract_addr: Optional[AccAddress] = contract_addr or None

    def __repr__(self) -> str:
        if self._contract_addr is None:
            return f"{self.__class__.__name__}(code_id={self.code_id}, unbound)"
        return f"{self.__class__.__name__}({self._contract_addr})"

    @property
    def contract_addr(self) -> AccAddress:
        if self._contract_addr is None:
            raise ContractNotInstantiated(f"{self} has no contract address")
        return self._contract_addr

    @property
    def is_bound(self) -> bool:
        return self._contract_addr is not None

    async def _instantiate(self, msg: dict, label: str) -> InstantiateResult:
        if self._contract_addr is not None:
            raise ContractAlreadyInstantiated(f"{self} already bound to {self._contract_addr}")
        if self.code_id is None:
            raise ValueError(f"{self} has no code_id to instantiate from")
        result = await self.client.instantiate(self.signer, self.code_id, msg, label, self.fee)
        self._contract_addr = result.contract_addr
        log.info(f"Instantiated {self} with {label=}")
        return result

    async def _execute(self, msg: dict, funds: Coins = None) -> ExecuteResult:
        return await self.client.execute(self.signer, self.contract_addr, msg, self.fee, funds)

    async def _query(self, query_msg: dict) -> dict:
        return await self.client.contract_query(self.contract_addr, query_msg)
