import pytest
from terra_sdk.core import Coin

from novaswap.asset import (
    NativeAsset,
    TokenAsset,
    asset_from_data,
    assets_to_coins,
    validate_amount,
)
from novaswap.exceptions import InvalidAmount, MissingAssetAmount

U128_MAX = "340282366920938463463374607431768211455"


class TestNativeAsset:
    def test_get_info(self):
        assert NativeAsset("uatom").get_info() == {"native_token": {"denom": "uatom"}}

    def test_with_amount(self):
        asset = NativeAsset("uatom", "1000")
        assert asset.with_amount() == {
            "info": {"native_token": {"denom": "uatom"}},
            "amount": "1000",
        }

    def test_to_coin(self):
        coin = NativeAsset("uatom", "1000000000").to_coin()
        assert isinstance(coin, Coin)
        assert coin.to_data() == {"denom": "uatom", "amount": "1000000000"}

    def test_get_denom(self):
        assert NativeAsset("uatom", "1").get_denom() == "uatom"

    def test_amount_beyond_64_bits_is_kept_exact(self):
        asset = NativeAsset("uatom", U128_MAX)
        assert asset.with_amount()["amount"] == U128_MAX
        assert asset.to_coin().to_data()["amount"] == U128_MAX

    def test_value_moving_without_amount_fails(self):
        asset = NativeAsset("uatom")
        with pytest.raises(MissingAssetAmount):
            asset.with_amount()
        with pytest.raises(MissingAssetAmount):
            asset.to_coin()


class TestTokenAsset:
    def test_get_info(self):
        assert TokenAsset("cosmos1token").get_info() == {
            "token": {"contract_addr": "cosmos1token"}
        }

    def test_with_amount(self):
        assert TokenAsset("cosmos1token", 5).with_amount() == {
            "info": {"token": {"contract_addr": "cosmos1token"}},
            "amount": "5",
        }

    def test_to_coin_is_none(self):
        assert TokenAsset("cosmos1token", "5").to_coin() is None

    def test_get_denom_is_address(self):
        assert TokenAsset("cosmos1token").get_denom() == "cosmos1token"

    def test_with_amount_requires_amount(self):
        with pytest.raises(MissingAssetAmount):
            TokenAsset("cosmos1token").with_amount()


def test_assets_are_immutable():
    asset = NativeAsset("uatom", "1")
    with pytest.raises(AttributeError):
        asset.amount = "2"  # type: ignore[misc]


@pytest.mark.parametrize(
    "amount, expected",
    [("0", "0"), ("001", "1"), (42, "42"), (10 ** 30, "1" + "0" * 30)],
)
def test_validate_amount(amount, expected):
    assert validate_amount(amount) == expected


@pytest.mark.parametrize("amount", ["-1", -1, "1.5", "", "1e6", " 1", 1.0, True, None, "١٢"])
def test_validate_amount_rejects(amount):
    with pytest.raises(InvalidAmount):
        validate_amount(amount)


def test_validate_amount_accepts_uint256_max():
    u256_max = 2 ** 256 - 1
    assert validate_amount(str(u256_max)) == str(u256_max)
    assert validate_amount("0" * 100 + "7") == "7"


@pytest.mark.parametrize("amount", ["9" * 5000, 2 ** 256, str(2 ** 256)])
def test_validate_amount_rejects_oversized(amount):
    with pytest.raises(InvalidAmount):
        validate_amount(amount)


def test_invalid_amount_rejected_on_construction():
    with pytest.raises(InvalidAmount):
        NativeAsset("uatom", "-5")


def test_asset_from_data():
    assert asset_from_data({"native_token": {"denom": "uatom"}}) == NativeAsset("uatom")
    assert asset_from_data({"token": {"contract_addr": "cosmos1token"}}, "7") == TokenAsset(
        "cosmos1token", "7"
    )
    with pytest.raises(TypeError):
        asset_from_data({"cw20": "cosmos1token"})


def test_asset_from_data_inverts_get_info():
    for asset in (NativeAsset("uatom"), TokenAsset("cosmos1token")):
        assert asset_from_data(asset.get_info()) == asset


def test_assets_to_coins_skips_tokens():
    coins = assets_to_coins([TokenAsset("cosmos1token", "1000000000"), NativeAsset("uatom", "7")])
    assert [coin.to_data() for coin in coins.to_list()] == [{"denom": "uatom", "amount": "7"}]


def test_assets_to_coins_rejects_unknown_kind():
    with pytest.raises(TypeError):
        assets_to_coins([object()])  # type: ignore[list-item]
