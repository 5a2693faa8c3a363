from __future__ import annotations

import logging
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from terra_sdk.core import AccAddress, Coins
from terra_sdk.core.fee import Fee

from .asset import AmountInput, Asset, NativeAsset, TokenAsset, assets_to_coins, validate_amount
from .client import CosmWasmClient, ExecuteResult
from .contract import BaseContract
from .token import Token

log = logging.getLogger(__name__)

SWAP_LOG_KEYS = ("offer_amount", "return_amount", "commission_amount", "spread_amount")


class Action(str, Enum):
    swap = "swap"
    withdraw_liquidity = "withdraw_liquidity"
    provide_liquidity = "provide_liquidity"


def _swap_params(
    belief_price: Decimal = None,
    max_spread: Decimal = None,
    to: AccAddress = None,
) -> dict[str, str]:
    params = {}
    if belief_price is not None:
        params["belief_price"] = f"{Decimal(belief_price):f}"
    if max_spread is not None:
        params["max_spread"] = f"{Decimal(max_spread):f}"
    if to is not None:
        params["to"] = to
    return params


class LiquidityPair(BaseContract):
    """Stableswap pair contract.

    Token funded actions (``swap_token``, ``withdraw_liquidity``) are sent to the token
    contract as a CW20 ``send`` carrying the pair action as hook message. Native funded
    actions are executed on the pair with the coins attached.
    """

    def __init__(
        self,
        client: CosmWasmClient,
        signer: AccAddress,
        code_id: Optional[int],
        contract_addr: AccAddress = None,
        fee: Fee = None,
        token_code_id: int = None,
    ):
        super().__init__(client, signer, code_id, contract_addr, fee)
        self.token_code_id = token_code_id

    def _token(self, contract_addr: AccAddress) -> Token:
        return Token(self.client, self.signer, self.token_code_id, contract_addr, self.fee)

    async def query_pair_info(self) -> dict:
        return await self._query({"pair": {}})

    async def get_lp_token_address(self) -> AccAddress:
        info = await self.query_pair_info()
        return AccAddress(info["liquidity_token"])

    async def query_pool(self) -> dict:
        return await self._query({"pool": {}})

    async def query_config(self) -> dict:
        return await self._query({"config": {}})

    async def get_amp(self) -> Decimal:
        config = await self.query_config()
        params = self.client.decode_msg(config["params"])
        return Decimal(params["amp"])

    async def query_share(self, amount: AmountInput) -> list[dict]:
        return await self._query({"share": {"amount": validate_amount(amount)}})

    async def simulate_swap(self, offer_asset: Asset) -> dict:
        return await self._query({"simulation": {"offer_asset": offer_asset.with_amount()}})

    async def reverse_simulate_swap(self, ask_asset: Asset) -> dict:
        return await self._query({"reverse_simulation": {"ask_asset": ask_asset.with_amount()}})

    async def query_cumulative_prices(self) -> dict:
        return await self._query({"cumulative_prices": {}})

    async def provide_liquidity(
        self,
        asset_a: Asset,
        asset_b: Asset,
        receiver: AccAddress = None,
    ) -> ExecuteResult:
        provide_msg: dict[str, Any] = {"assets": [asset_a.with_amount(), asset_b.with_amount()]}
        if receiver is not None:
            provide_msg["receiver"] = receiver
        funds = assets_to_coins([asset_a, asset_b])
        log.debug(f"{self}: providing liquidity {asset_a}, {asset_b}")
        return await self._execute({Action.provide_liquidity.value: provide_msg}, funds)

    async def withdraw_liquidity(
        self,
        lp_token_addr: AccAddress,
        amount: AmountInput,
    ) -> ExecuteResult:
        lp_token = self._token(lp_token_addr)
        hook_msg = {Action.withdraw_liquidity.value: {}}
        return await lp_token.send(self.contract_addr, amount, hook_msg)

    async def swap_native(
        self,
        offer_asset: NativeAsset,
        belief_price: Decimal = None,
        max_spread: Decimal = None,
        to: AccAddress = None,
    ) -> ExecuteResult:
        if not isinstance(offer_asset, NativeAsset):
            raise TypeError(f"swap_native expects a NativeAsset, got {offer_asset!r}")
        to = self.signer if to is None else to
        msg = {
            Action.swap.value: {
                "offer_asset": offer_asset.with_amount(),
                **_swap_params(belief_price, max_spread, to),
            }
        }
        return await self._execute(msg, Coins([offer_asset.to_coin()]))

    async def swap_token(
        self,
        offer_asset: TokenAsset,
        belief_price: Decimal = None,
        max_spread: Decimal = None,
        to: AccAddress = None,
    ) -> ExecuteResult:
        if not isinstance(offer_asset, TokenAsset):
            raise TypeError(f"swap_token expects a TokenAsset, got {offer_asset!r}")
        hook_msg = {
            Action.swap.value: {
                "offer_asset": offer_asset.with_amount(),
                **_swap_params(belief_price, max_spread, to),
            }
        }
        token = self._token(offer_asset.contract_addr)
        return await token.send(self.contract_addr, offer_asset.amount, hook_msg)

    async def _update_config(self, params: dict) -> ExecuteResult:
        msg = {"update_config": {"params": self.client.encode_msg(params)}}
        return await self._execute(msg)

    async def start_changing_amp(self, next_amp: int, next_amp_time: int) -> ExecuteResult:
        """Ramp the amplification to ``next_amp`` until unix time ``next_amp_time``.

        Only the factory owner may call it. The contract enforces the ramp limits.
        """
        if isinstance(next_amp, bool) or not isinstance(next_amp, int) or next_amp <= 0:
            raise ValueError(f"next_amp must be a positive integer, got {next_amp!r}")
        params = {
            "start_changing_amp": {"next_amp": next_amp, "next_amp_time": int(next_amp_time)}
        }
        log.info(f"{self}: changing amp to {next_amp} until {next_amp_time}")
        return await self._update_config(params)

    async def stop_changing_amp(self) -> ExecuteResult:
        log.info(f"{self}: stopping amp change")
        return await self._update_config({"stop_changing_amp": {}})

    def debug_swap_log(self, result: ExecuteResult) -> dict[str, str]:
        log.info(f"[swap transaction logs] {result.txhash}")
        fields = {}
        for event in result.events:
            for key, value in event.attributes:
                if key in SWAP_LOG_KEYS:
                    fields[key] = value
                    log.info(f"{key} = {value}")
        return fields
