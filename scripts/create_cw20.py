#! /usr/bin/env python

import asyncio
import logging
import sys

from novaswap import configs
from novaswap.startup import get_client, setup
from novaswap.workflows import deploy_tokens

log = logging.getLogger(__name__)

_TOKENS = [("SUPER", "SUPER"), ("NOVA", "NOVA")]
_TRANSFER_AMOUNT = "1000000000"


async def main():
    async with get_client() as client, get_client(configs.ALICE_MNEMONIC) as alice:
        token_a, token_b = await deploy_tokens(
            client, client.address, configs.TOKEN_CODE_ID, _TOKENS
        )
        for token in (token_a, token_b):
            log.info(f"{token} balance of sender: {await token.balance_of(client.address)}")

        await token_a.transfer(alice.address, _TRANSFER_AMOUNT)
        log.info(f"{token_a} transferred to {alice.address}, amount: {_TRANSFER_AMOUNT}")

        for token in (token_a, token_b):
            log.info(f"{token} balance of sender: {await token.balance_of(client.address)}")


if __name__ == "__main__":
    setup()
    try:
        asyncio.run(main())
    except Exception:
        log.error("Failed to create cw20 tokens", exc_info=True)
        sys.exit(1)
