#! /usr/bin/env python

import asyncio
import logging
import sys

from novaswap import configs
from novaswap.client import calculate_fee
from novaswap.startup import get_client, setup

log = logging.getLogger(__name__)


async def main():
    upload_fee = calculate_fee(configs.UPLOAD_GAS_LIMIT, configs.GAS_PRICE, configs.BASE_DENOM)
    async with get_client() as client:
        log.info(f"Uploading cosmwasm contracts to {configs.LCD_URI}")
        log.info(f"Uploader address: {client.address}")

        token_code_id = await client.upload(client.address, configs.WASM_TOKEN, upload_fee)
        pair_code_id = await client.upload(client.address, configs.WASM_PAIR_STABLE, upload_fee)
        factory_code_id = await client.upload(client.address, configs.WASM_FACTORY, upload_fee)

        log.info(f"Uploaded token code id: {token_code_id}")
        log.info(f"Uploaded pair code id: {pair_code_id}")
        log.info(f"Uploaded factory code id: {factory_code_id}")


if __name__ == "__main__":
    setup()
    try:
        asyncio.run(main())
    except Exception:
        log.error("Failed to upload wasm files", exc_info=True)
        sys.exit(1)
