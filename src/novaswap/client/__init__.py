from .async_client import CosmWasmClient, Event, ExecuteResult, InstantiateResult, calculate_fee
from .lcd_client import LCDClient, PrefixedMnemonicKey

__all__ = [
    "CosmWasmClient",
    "Event",
    "ExecuteResult",
    "InstantiateResult",
    "LCDClient",
    "PrefixedMnemonicKey",
    "calculate_fee",
]
