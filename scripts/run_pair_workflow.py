#! /usr/bin/env python

import asyncio
import logging
import sys

from novaswap import Factory, LiquidityPair, Token, configs
from novaswap.startup import get_client, setup
from novaswap.workflows import WorkflowContext, run_pair_workflow

log = logging.getLogger(__name__)


async def main():
    async with get_client() as client:
        signer = client.address
        lp_token = None
        if configs.LP_TOKEN_CONTRACT:
            lp_token = Token(client, signer, configs.TOKEN_CODE_ID, configs.LP_TOKEN_CONTRACT)
        ctx = WorkflowContext(
            client=client,
            signer=signer,
            base_denom=configs.BASE_DENOM,
            token=Token(client, signer, configs.TOKEN_CODE_ID, configs.TOKEN_A_CONTRACT),
            pair=LiquidityPair(
                client,
                signer,
                configs.PAIR_CODE_ID,
                configs.POOL_CONTRACT,
                token_code_id=configs.TOKEN_CODE_ID,
            ),
            factory=Factory(client, signer, configs.FACTORY_CODE_ID, configs.FACTORY_CONTRACT),
            lp_token=lp_token,
        )
        await run_pair_workflow(ctx, configs.PROVIDE_AMOUNT, configs.SWAP_AMOUNT)


if __name__ == "__main__":
    setup()
    try:
        asyncio.run(main())
    except Exception:
        log.error("Error during pair workflow", exc_info=True)
        sys.exit(1)
