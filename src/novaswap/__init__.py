from .asset import Asset, NativeAsset, TokenAsset, asset_from_data, assets_to_coins
from .client import CosmWasmClient, ExecuteResult, InstantiateResult, LCDClient
from .factory import Factory, PairConfig, PairType
from .liquidity_pair import Action, LiquidityPair
from .token import Token

__all__ = [
    "Action",
    "Asset",
    "CosmWasmClient",
    "ExecuteResult",
    "Factory",
    "InstantiateResult",
    "LCDClient",
    "LiquidityPair",
    "NativeAsset",
    "PairConfig",
    "PairType",
    "Token",
    "TokenAsset",
    "asset_from_data",
    "assets_to_coins",
]
