"""End-to-end scenarios over the factory, pair and token clients.

Each step takes a ``WorkflowContext`` and, when it learns something new (a deployed
address, the LP token), returns an updated copy instead of mutating shared state.
Steps run strictly one after the other.
"""
from __future__ import annotations

import dataclasses
import logging
from typing import Iterable, NamedTuple, Optional

from terra_sdk.core import AccAddress

from .asset import AmountInput, Asset, NativeAsset, TokenAsset, validate_amount
from .client import CosmWasmClient, ExecuteResult
from .exceptions import ContractNotInstantiated
from .factory import Factory
from .liquidity_pair import LiquidityPair
from .token import Token

log = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class WorkflowContext:
    client: CosmWasmClient
    signer: AccAddress
    base_denom: str
    token: Token
    pair: LiquidityPair
    factory: Optional[Factory] = None
    lp_token: Optional[Token] = None

    def replace(self, **changes) -> WorkflowContext:
        return dataclasses.replace(self, **changes)


class Balances(NamedTuple):
    signer_token: int
    signer_native: int
    signer_lp: int
    pool_token: int
    pool_native: int


async def ensure_allowance(
    token: Token,
    owner: AccAddress,
    spender: AccAddress,
    amount: AmountInput,
) -> Optional[ExecuteResult]:
    """Approve ``spender`` for the shortfall between its current allowance and ``amount``.

    ``increase_allowance`` is additive, so approving unconditionally would grow the
    allowance on every run. Returns the approval result, or None if nothing was sent.
    """
    required = int(validate_amount(amount))
    current = await token.get_allowance(owner, spender)
    if current >= required:
        log.debug(f"{token}: allowance of {spender} is sufficient ({current} >= {required})")
        return None
    shortfall = required - current
    log.info(f"{token}: increasing allowance of {spender} by {shortfall} (current={current})")
    return await token.approve(spender, shortfall)


async def deploy_tokens(
    client: CosmWasmClient,
    signer: AccAddress,
    token_code_id: int,
    names: Iterable[tuple[str, str]],
) -> list[Token]:
    tokens = []
    for name, symbol in names:
        token = await Token.new(client, signer, token_code_id, signer, name, symbol)
        log.info(f"Token {symbol} contract addr: {token.contract_addr}")
        tokens.append(token)
    return tokens


async def deploy_factory_and_pair(
    client: CosmWasmClient,
    signer: AccAddress,
    factory_code_id: int,
    token_code_id: int,
    pair_code_id: int,
    asset_a: Asset,
    asset_b: Asset,
    amp: int,
) -> tuple[Factory, Optional[AccAddress]]:
    factory = await Factory.new(
        client, signer, factory_code_id, signer, token_code_id, pair_code_id
    )
    log.info(f"Factory instantiated at {factory.contract_addr}")
    result = await factory.create_pair(asset_a, asset_b, amp)
    pair_addr = factory.get_pair_address(result)
    log.info(f"Pair {asset_a}-{asset_b} created at {pair_addr}")
    return factory, pair_addr


async def load_lp_token(ctx: WorkflowContext) -> WorkflowContext:
    if ctx.lp_token is not None:
        return ctx
    lp_token_addr = await ctx.pair.get_lp_token_address()
    lp_token = Token(ctx.client, ctx.signer, ctx.token.code_id, lp_token_addr, ctx.token.fee)
    return ctx.replace(lp_token=lp_token)


def _require_lp_token(ctx: WorkflowContext) -> Token:
    if ctx.lp_token is None:
        raise ContractNotInstantiated("LP token not loaded, call load_lp_token first")
    return ctx.lp_token


async def fetch_balances(ctx: WorkflowContext) -> Balances:
    """Balances of the signer and the pool, with asset a = CW20 token and asset b = native"""
    lp_token = _require_lp_token(ctx)
    pool_addr = ctx.pair.contract_addr
    balances = Balances(
        signer_token=await ctx.token.get_balance(ctx.signer),
        signer_native=int((await ctx.client.get_balance(ctx.signer, ctx.base_denom)).amount),
        signer_lp=await lp_token.get_balance(ctx.signer),
        pool_token=await ctx.token.get_balance(pool_addr),
        pool_native=int((await ctx.client.get_balance(pool_addr, ctx.base_denom)).amount),
    )
    log.info(
        f"[signer balance] asset a: {balances.signer_token}, "
        f"asset b: {balances.signer_native}, lp_token: {balances.signer_lp}"
    )
    log.info(f"[pool balance] asset a: {balances.pool_token}, asset b: {balances.pool_native}")
    return balances


async def provide_liquidity(
    ctx: WorkflowContext,
    token_amount: AmountInput,
    native_amount: AmountInput,
) -> ExecuteResult:
    await ensure_allowance(ctx.token, ctx.signer, ctx.pair.contract_addr, token_amount)
    result = await ctx.pair.provide_liquidity(
        TokenAsset(ctx.token.contract_addr, token_amount),
        NativeAsset(ctx.base_denom, native_amount),
    )
    log.info(f"Provided liquidity to {ctx.pair.contract_addr}")
    return result


async def swap_token(ctx: WorkflowContext, amount: AmountInput) -> ExecuteResult:
    await ensure_allowance(ctx.token, ctx.signer, ctx.pair.contract_addr, amount)
    result = await ctx.pair.swap_token(TokenAsset(ctx.token.contract_addr, amount))
    ctx.pair.debug_swap_log(result)
    return result


async def swap_native(ctx: WorkflowContext, amount: AmountInput) -> ExecuteResult:
    result = await ctx.pair.swap_native(NativeAsset(ctx.base_denom, amount))
    ctx.pair.debug_swap_log(result)
    return result


async def withdraw_liquidity(
    ctx: WorkflowContext,
    amount: AmountInput = None,
) -> ExecuteResult:
    """Withdraw ``amount`` LP tokens, or the signer's whole LP balance if not given"""
    lp_token = _require_lp_token(ctx)
    if amount is None:
        amount = await lp_token.get_balance(ctx.signer)
    return await ctx.pair.withdraw_liquidity(lp_token.contract_addr, amount)


async def run_pair_workflow(
    ctx: WorkflowContext,
    provide_amount: AmountInput,
    swap_amount: AmountInput,
) -> WorkflowContext:
    log.info("1. query pair info")
    pair_info = await ctx.pair.query_pair_info()
    log.info(f"Pair info: {pair_info}")
    ctx = await load_lp_token(ctx)

    log.info("2. provide liquidity")
    await fetch_balances(ctx)
    await provide_liquidity(ctx, provide_amount, provide_amount)
    await fetch_balances(ctx)

    log.info("3. swap token")
    await swap_token(ctx, swap_amount)
    await fetch_balances(ctx)

    log.info("4. swap native")
    await swap_native(ctx, swap_amount)
    await fetch_balances(ctx)

    log.info("5. withdraw liquidity")
    await withdraw_liquidity(ctx)
    await fetch_balances(ctx)
    return ctx
