#! /usr/bin/env python

import asyncio
import logging
import sys

from novaswap import NativeAsset, TokenAsset, configs
from novaswap.startup import get_client, setup
from novaswap.workflows import deploy_factory_and_pair

log = logging.getLogger(__name__)


async def main():
    async with get_client() as client:
        factory, pair_addr = await deploy_factory_and_pair(
            client,
            client.address,
            configs.FACTORY_CODE_ID,
            configs.TOKEN_CODE_ID,
            configs.PAIR_CODE_ID,
            TokenAsset(configs.TOKEN_A_CONTRACT),
            NativeAsset(configs.BASE_DENOM),
            configs.AMP,
        )
        log.info(f"Factory: {factory.contract_addr}, pair: {pair_addr}")


if __name__ == "__main__":
    setup()
    try:
        asyncio.run(main())
    except Exception:
        log.error("Failed to run create pair script", exc_info=True)
        sys.exit(1)
