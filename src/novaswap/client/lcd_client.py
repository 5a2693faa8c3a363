from __future__ import annotations

import base64
import logging
import re
from decimal import Decimal
from typing import Any

from bech32 import bech32_encode, convertbits
from terra_sdk.client.lcd import AsyncLCDClient
from terra_sdk.client.lcd.api.tx import CreateTxOptions
from terra_sdk.core import AccAddress, Coin, Coins
from terra_sdk.core.fee import Fee
from terra_sdk.core.msg import Msg
from terra_sdk.core.wasm import MsgExecuteContract, MsgInstantiateContract, MsgStoreCode
from terra_sdk.exceptions import LCDResponseError
from terra_sdk.key.mnemonic import MnemonicKey

from ..exceptions import CodeUploadError, NotContract, TxExecutionError
from .async_client import CosmWasmClient, ExecuteResult, InstantiateResult, calculate_fee

log = logging.getLogger(__name__)

_PAT_MISSING_CONTRACT = re.compile(r"contract (\w+): not found")


class PrefixedMnemonicKey(MnemonicKey):
    """MnemonicKey deriving bech32 account addresses with a custom prefix"""

    def __init__(
        self,
        mnemonic: str,
        prefix: str = "cosmos",
        coin_type: int = 118,
        account: int = 0,
        index: int = 0,
    ):
        self.prefix = prefix
        super().__init__(mnemonic=mnemonic, account=account, index=index, coin_type=coin_type)

    @property
    def acc_address(self) -> AccAddress:
        raw_address: Any = self.raw_address
        if isinstance(raw_address, str):
            raw_address = bytes.fromhex(raw_address)
        return AccAddress(bech32_encode(self.prefix, convertbits(raw_address, 8, 5)))


class LCDClient(CosmWasmClient):
    def __init__(
        self,
        lcd_uri: str,
        chain_id: str,
        mnemonic: str,
        fee_denom: str,
        gas_price: Decimal,
        default_gas_limit: int,
        address_prefix: str = "cosmos",
        coin_type: int = 118,
    ):
        self.lcd_uri = lcd_uri
        self.chain_id = chain_id
        self.fee_denom = fee_denom
        self.gas_price = gas_price
        self.default_fee = calculate_fee(default_gas_limit, gas_price, fee_denom)

        self.key = PrefixedMnemonicKey(mnemonic, address_prefix, coin_type)
        self.address = self.key.acc_address

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(account={self.address}, chain_id={self.chain_id})"

    async def start(self):
        self.lcd = AsyncLCDClient(
            self.lcd_uri,
            self.chain_id,
            gas_prices=Coins([Coin(self.fee_denom, self.gas_price)]),
        )
        self.wallet = self.lcd.wallet(self.key)
        await super().start()

    async def close(self):
        log.debug(f"Closing {self=}")
        await self.lcd.session.close()
        await super().close()

    async def _broadcast(self, msg: Msg, fee: Fee = None, memo: str = ""):
        fee = self.default_fee if fee is None else fee
        log.debug(f"Sending tx: {msg}")
        tx = await self.wallet.create_and_sign_tx(
            CreateTxOptions(msgs=[msg], fee=fee, memo=memo)
        )
        res = await self.lcd.tx.broadcast(tx)
        if res.code:
            raise TxExecutionError(res.code, res.raw_log)
        log.debug(f"Tx executed: {res.txhash}")
        return res

    async def instantiate(
        self,
        sender: AccAddress,
        code_id: int,
        msg: dict,
        label: str,
        fee: Fee = None,
        funds: Coins = None,
        admin: AccAddress = None,
    ) -> InstantiateResult:
        instantiate_msg = MsgInstantiateContract(
            sender=sender,
            admin=admin or "",
            code_id=code_id,
            label=label,
            msg=msg,
            funds=Coins() if funds is None else funds,
        )
        res = await self._broadcast(instantiate_msg, fee)
        logs = self.extract_log_events(res.logs)
        result = InstantiateResult(res.txhash, logs, int(res.height), int(res.gas_used))
        contract_addr = result.find_attribute("_contract_address", "instantiate")
        if contract_addr is None:
            raise NotContract(f"No contract address in instantiate tx {res.txhash}")
        return InstantiateResult(
            result.txhash, result.logs, result.height, result.gas_used, AccAddress(contract_addr)
        )

    async def execute(
        self,
        sender: AccAddress,
        contract_addr: AccAddress,
        msg: dict,
        fee: Fee = None,
        funds: Coins = None,
        memo: str = "",
    ) -> ExecuteResult:
        execute_msg = MsgExecuteContract(
            sender=sender,
            contract=contract_addr,
            msg=msg,
            coins=Coins() if funds is None else funds,
        )
        res = await self._broadcast(execute_msg, fee, memo)
        return ExecuteResult(
            res.txhash, self.extract_log_events(res.logs), int(res.height), int(res.gas_used)
        )

    async def contract_query(self, contract_addr: AccAddress, query_msg: dict) -> dict:
        try:
            return await self.lcd.wasm.contract_query(contract_addr, query_msg)
        except LCDResponseError as e:
            if match := _PAT_MISSING_CONTRACT.search(e.message or ""):
                raise NotContract(match.group(1))
            raise e

    async def get_balance(self, address: AccAddress, denom: str) -> Coin:
        coins, _ = await self.lcd.bank.balance(address)
        coin = coins.get(denom)
        return Coin(denom, 0) if coin is None else coin

    async def upload(self, sender: AccAddress, wasm_path: str, fee: Fee = None) -> int:
        with open(wasm_path, "rb") as f:
            wasm_byte_code = base64.b64encode(f.read()).decode("ascii")
        res = await self._broadcast(MsgStoreCode(sender, wasm_byte_code), fee)
        result = ExecuteResult(res.txhash, self.extract_log_events(res.logs))
        code_id = result.find_attribute("code_id", "store_code")
        if code_id is None:
            raise CodeUploadError(f"No code_id in store_code tx {res.txhash}")
        log.info(f"Uploaded {wasm_path} with {code_id=}")
        return int(code_id)
