from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from terra_sdk.core import AccAddress, Coin, Coins

from .exceptions import InvalidAmount, MissingAssetAmount

AmountInput = Union[str, int]
AssetInfoData = dict[str, dict[str, str]]
AssetData = dict[str, Union[AssetInfoData, str]]

# Uint256 is the widest integer the contracts encode
MAX_AMOUNT_BITS = 256
_MAX_AMOUNT_DIGITS = len(str(2 ** MAX_AMOUNT_BITS - 1))


def validate_amount(amount: AmountInput) -> str:
    """Normalize a base-unit amount to its decimal string form.

    Amounts are never converted to floats; ints are only accepted as arbitrary precision
    integers and bools are rejected. Anything wider than ``MAX_AMOUNT_BITS`` is rejected.
    """
    if isinstance(amount, bool) or not isinstance(amount, (str, int)):
        raise InvalidAmount(f"Expected str or int amount, got {amount!r}")
    if isinstance(amount, str):
        if not amount.isdigit() or not amount.isascii():
            raise InvalidAmount(f"Amount must be a non-negative integer string, got {amount!r}")
        digits = amount.lstrip("0")
        if len(digits) > _MAX_AMOUNT_DIGITS:
            raise InvalidAmount(f"Amount too large: {len(digits)} digits")
        amount = int(digits or "0")
    if amount < 0:
        raise InvalidAmount(f"Negative amount: {amount}")
    if amount.bit_length() > MAX_AMOUNT_BITS:
        raise InvalidAmount(f"Amount too large: {amount.bit_length()} bits")
    return str(amount)


@dataclass(frozen=True)
class NativeAsset:
    denom: str
    amount: Optional[str] = None

    def __post_init__(self):
        if self.amount is not None:
            object.__setattr__(self, "amount", validate_amount(self.amount))

    def __str__(self) -> str:
        return self.denom if self.amount is None else f"{self.amount}{self.denom}"

    def get_info(self) -> AssetInfoData:
        return {"native_token": {"denom": self.denom}}

    def with_amount(self) -> AssetData:
        return {"info": self.get_info(), "amount": require_amount(self)}

    def get_denom(self) -> str:
        return self.denom

    def to_coin(self) -> Coin:
        return Coin(self.denom, int(require_amount(self)))


@dataclass(frozen=True)
class TokenAsset:
    contract_addr: AccAddress
    amount: Optional[str] = None

    def __post_init__(self):
        if self.amount is not None:
            object.__setattr__(self, "amount", validate_amount(self.amount))

    def __str__(self) -> str:
        return self.contract_addr if self.amount is None else f"{self.amount}{self.contract_addr}"

    def get_info(self) -> AssetInfoData:
        return {"token": {"contract_addr": self.contract_addr}}

    def with_amount(self) -> AssetData:
        return {"info": self.get_info(), "amount": require_amount(self)}

    def get_denom(self) -> str:
        return self.contract_addr

    def to_coin(self) -> None:
        """Token value moves through contract calls, never as attached funds."""
        return None


Asset = Union[NativeAsset, TokenAsset]


def require_amount(asset: Asset) -> str:
    if asset.amount is None:
        raise MissingAssetAmount(f"{asset!r} has no amount and cannot be used to move value")
    return asset.amount


def asset_from_data(asset_info: dict, amount: AmountInput = None) -> Asset:
    if "native_token" in asset_info:
        return NativeAsset(asset_info["native_token"]["denom"], amount)
    if "token" in asset_info:
        return TokenAsset(asset_info["token"]["contract_addr"], amount)
    raise TypeError(f"Unexpected data format: {asset_info}")


def assets_to_coins(assets: Iterable[Asset]) -> Coins:
    coins = []
    for asset in assets:
        if isinstance(asset, NativeAsset):
            coins.append(asset.to_coin())
        elif isinstance(asset, TokenAsset):
            continue
        else:
            raise TypeError(f"Unexpected asset type: {asset!r}")
    return Coins(coins)
