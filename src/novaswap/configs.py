import os
from decimal import Decimal

# Logs
LOG_STDOUT = os.getenv("LOG_STDOUT", "true").lower() == "true"
LOG_FILE = os.getenv("LOG_FILE", "logs/novaswap.log")
MIN_LOG_LEVEL = os.getenv("MIN_LOG_LEVEL", "DEBUG")

# Secrets
MNEMONIC = os.getenv("NOVASWAP_MNEMONIC", "")
ALICE_MNEMONIC = os.getenv("NOVASWAP_ALICE_MNEMONIC", "")

# Chain
LCD_URI = os.getenv("NOVASWAP_LCD_URI", "http://localhost:1317")
CHAIN_ID = os.getenv("NOVASWAP_CHAIN_ID", "novaswap-1")
ADDRESS_PREFIX = os.getenv("NOVASWAP_ADDRESS_PREFIX", "cosmos")
COIN_TYPE = int(os.getenv("NOVASWAP_COIN_TYPE", "118"))
BASE_DENOM = os.getenv("NOVASWAP_BASE_DENOM", "uatom")

# Fees
GAS_PRICE = Decimal(os.getenv("NOVASWAP_GAS_PRICE", "0.01"))
DEFAULT_GAS_LIMIT = int(os.getenv("NOVASWAP_DEFAULT_GAS_LIMIT", "10000000"))
UPLOAD_GAS_LIMIT = int(os.getenv("NOVASWAP_UPLOAD_GAS_LIMIT", "50000000"))

# Wasm artifacts
WASM_TOKEN = os.getenv("NOVASWAP_WASM_TOKEN", "artifacts/novaswap_token.wasm")
WASM_FACTORY = os.getenv("NOVASWAP_WASM_FACTORY", "artifacts/novaswap_factory.wasm")
WASM_PAIR_STABLE = os.getenv("NOVASWAP_WASM_PAIR_STABLE", "artifacts/novaswap_pair.wasm")

# Code ids, set after running scripts/upload_contracts.py
TOKEN_CODE_ID = int(os.getenv("NOVASWAP_TOKEN_CODE_ID", "1"))
FACTORY_CODE_ID = int(os.getenv("NOVASWAP_FACTORY_CODE_ID", "2"))
PAIR_CODE_ID = int(os.getenv("NOVASWAP_PAIR_CODE_ID", "3"))

# Deployed contracts, set after running scripts/create_cw20.py and scripts/create_pair.py
TOKEN_A_CONTRACT = os.getenv("NOVASWAP_TOKEN_A_CONTRACT", "")
TOKEN_B_CONTRACT = os.getenv("NOVASWAP_TOKEN_B_CONTRACT", "")
FACTORY_CONTRACT = os.getenv("NOVASWAP_FACTORY_CONTRACT", "")
POOL_CONTRACT = os.getenv("NOVASWAP_POOL_CONTRACT", "")
LP_TOKEN_CONTRACT = os.getenv("NOVASWAP_LP_TOKEN_CONTRACT", "")

# Workflow params
AMP = int(os.getenv("NOVASWAP_AMP", "50"))
PROVIDE_AMOUNT = os.getenv("NOVASWAP_PROVIDE_AMOUNT", "1000000000")
SWAP_AMOUNT = os.getenv("NOVASWAP_SWAP_AMOUNT", "100000000")
