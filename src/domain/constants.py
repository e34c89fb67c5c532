"""Domain constants for Sui account history."""

from types import MappingProxyType

NATIVE_CURRENCY = "sui::SUI"
SIX_DECIMAL_CURRENCY = "usdc::USDC"

NATIVE_DECIMALS = 9
SIX_DECIMALS = 6

COIN_TYPE_SEPARATOR = "::"

KNOWN_COIN_TYPES = MappingProxyType(
    {
        "0x2::sui::SUI": NATIVE_CURRENCY,
        "0x0000000000000000000000000000000000000000000000000000000000000002"
        "::sui::SUI": NATIVE_CURRENCY,
        "0xfa7ac3951fdca92c5200d468d31a365eb03b2be9936fde615e69f0c1274ad3a0"
        "::blub::BLUB": "blub::BLUB",
        "0xdba34672e30cb065b1f93e3ab55318768fd6fef66c15942c9f7cb846e2f900e7"
        "::usdc::USDC": SIX_DECIMAL_CURRENCY,
        "0xdeeb7a4662eec9f2f3def03fb937a663dddaa2e215b8078a284d026b7946c270"
        "::deep::DEEP": "deep::DEEP",
        "0x1fc50c2a9edf1497011c793cb5c88fd5f257fd7009e85a489392f388b1118f82"
        "::tusk::TUSK": "tusk::TUSK",
        "0x5d4b302506645c37ff133b98c4b50a5ae14841659738d6d733d59d0d217a93bf"
        "::coin::COIN": "wUSDC::wUSDC",
        "0xf325ce1300e8dac124071d3152c5c5ee6174914f8bc2161e88329cf579246efc"
        "::afsui::AFSUI": "afsui::AFSUI",
        "0xb2040456be6b1b16835cc32b2fe2b1dc4b55c8a9b3cab6fb962f06b570f4645c"
        "::SuiReward::SUIREWARD": "SuiReward::SUIREWARD",
    }
)


__all__ = [
    "NATIVE_CURRENCY",
    "SIX_DECIMAL_CURRENCY",
    "NATIVE_DECIMALS",
    "SIX_DECIMALS",
    "COIN_TYPE_SEPARATOR",
    "KNOWN_COIN_TYPES",
]
