from decimal import Decimal

import pytest

from core.exceptions import InvalidAmountError
from core.token import LINK, USDC, Token

from .support import TOKEN_IN, TOKEN_OUT


def test_to_wei_uses_token_decimals():
    assert USDC.to_wei(100) == 100_000_000
    assert LINK.to_wei(100) == 100 * 10**18


def test_to_wei_has_no_float_rounding():
    assert LINK.to_wei(0.1) == 10**17
    assert USDC.to_wei("1.000001") == 1_000_001
    assert USDC.to_wei("1.000001000") == 1_000_001


@pytest.mark.parametrize("value", ["1.0000019", Decimal("0.0000001"), 1e-7])
def test_to_wei_rejects_digits_below_token_precision(value):
    with pytest.raises(InvalidAmountError):
        USDC.to_wei(value)


@pytest.mark.parametrize("value", ["ten", "", None, "NaN", "Infinity"])
def test_to_wei_rejects_non_numbers(value):
    with pytest.raises(InvalidAmountError):
        LINK.to_wei(value)


def test_from_wei():
    assert USDC.from_wei(1_500_000) == Decimal("1.5")
    assert LINK.from_wei(10**18) == Decimal(1)


def test_tokens_are_equal_by_chain_and_address():
    same_address = Token(
        symbol="USDC.e",
        name="Bridged USDC",
        decimals=6,
        chain_id=TOKEN_IN.chain_id,
        contract_address=TOKEN_IN.contract_address.lower(),
    )
    assert same_address == TOKEN_IN
    assert len({TOKEN_IN, same_address, TOKEN_OUT}) == 2
    assert str(TOKEN_OUT) == "LINK"
