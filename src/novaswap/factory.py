from __future__ import annotations

import logging
from enum import Enum
from typing import Any, NamedTuple, Optional, TypeVar

from terra_sdk.core import AccAddress
from terra_sdk.core.fee import Fee

from .asset import Asset
from .client import CosmWasmClient, ExecuteResult, InstantiateResult
from .contract import BaseContract

log = logging.getLogger(__name__)

_FactoryT = TypeVar("_FactoryT", bound="Factory")


class PairType(str, Enum):
    xyk = "xyk"
    stable = "stable"

    def to_data(self) -> dict[str, dict]:
        return {self.value: {}}


class PairConfig(NamedTuple):
    code_id: int
    pair_type: PairType = PairType.stable
    is_disabled: bool = False

    def to_data(self) -> dict[str, Any]:
        return {
            "code_id": self.code_id,
            "pair_type": self.pair_type.to_data(),
            "is_disabled": self.is_disabled,
        }

    @classmethod
    def from_data(cls, data: dict) -> PairConfig:
        (pair_type,) = data["pair_type"]
        return cls(int(data["code_id"]), PairType(pair_type), data["is_disabled"])


class Factory(BaseContract):
    @classmethod
    async def new(
        cls: type[_FactoryT],
        client: CosmWasmClient,
        signer: AccAddress,
        code_id: int,
        owner: AccAddress,
        token_code_id: int,
        pair_code_id: int,
        fee: Fee = None,
    ) -> _FactoryT:
        self = cls(client, signer, code_id, fee=fee)
        await self.initialize(owner, token_code_id, pair_code_id)
        return self

    async def initialize(
        self,
        owner: AccAddress,
        token_code_id: int,
        pair_code_id: int,
    ) -> InstantiateResult:
        msg = {
            "owner": owner,
            "token_code_id": token_code_id,
            "pair_configs": [PairConfig(pair_code_id, PairType.stable).to_data()],
        }
        return await self._instantiate(msg, "instantiate_factory")

    async def get_config(self) -> dict:
        return await self._query({"config": {}})

    async def get_pair_configs(self) -> list[PairConfig]:
        config = await self.get_config()
        return [PairConfig.from_data(data) for data in config["pair_configs"]]

    async def create_pair(self, asset_a: Asset, asset_b: Asset, amp: int) -> ExecuteResult:
        msg = {
            "create_pair": {
                "asset_infos": [asset_a.get_info(), asset_b.get_info()],
                "pair_type": PairType.stable.to_data(),
                "init_params": self.client.encode_msg({"amp": amp}),
            }
        }
        result = await self._execute(msg)

        log.info(f"Events from create_pair of {asset_a}-{asset_b} ({result.txhash})")
        for event in result.events:
            log.info(event.type)
            for key, value in event.attributes:
                log.info(f"{key} = {value}")
        return result

    @staticmethod
    def get_pair_address(result: ExecuteResult) -> Optional[AccAddress]:
        """Address of the pair registered by a create_pair transaction"""
        pair_addr = result.find_attribute("pair_contract_addr")
        return None if pair_addr is None else AccAddress(pair_addr)

    async def query_pair(self, asset_a: Asset, asset_b: Asset) -> dict:
        query = {"pair": {"asset_infos": [asset_a.get_info(), asset_b.get_info()]}}
        return await self._query(query)

    async def query_pairs(self, start_after: list[dict] = None, limit: int = None) -> list[dict]:
        query_params: dict[str, Any] = {}
        if start_after is not None:
            query_params["start_after"] = start_after
        if limit is not None:
            query_params["limit"] = limit
        page = await self._query({"pairs": query_params})
        return page["pairs"]

    async def fetch_all_pairs(self, limit: int = None) -> list[dict]:
        infos: list[dict] = []
        start_after = None
        while True:
            data = await self.query_pairs(start_after, limit)
            if not data:
                return infos
            infos.extend(data)
            start_after = data[-1]["asset_infos"]

    async def update_config(self, token_code_id: int = None) -> ExecuteResult:
        return await self._execute({"update_config": {"token_code_id": token_code_id}})

    async def update_pair_config(self, config: PairConfig) -> ExecuteResult:
        return await self._execute({"update_pair_config": {"config": config.to_data()}})

    async def update_owner(self, new_owner: AccAddress) -> ExecuteResult:
        return await self._execute({"update_owner": {"new_owner": new_owner}})
