from unittest.mock import AsyncMock, patch

import pytest

from core.dapps import Compound
from core.exceptions import InvalidAmountError, NothingToWithdrawError, SupplyNotConfirmedError

from .support import CTOKEN_ADDRESS, TOKEN_OUT, tx_hash


@pytest.fixture
def compound(client) -> Compound:
    return Compound(client=client, ctoken_address=CTOKEN_ADDRESS, post_approve_delay_range=(0, 0))


@pytest.mark.asyncio
async def test_supply_approves_before_mint_with_exact_amount(compound, client):
    calls = []

    async def approve(**kwargs):
        calls.append(("approve", kwargs))
        return tx_hash(3)

    async def send_transaction(**kwargs):
        calls.append(("send", kwargs))
        return tx_hash(4)

    with patch.object(client, "approve", approve), patch.object(client, "send_transaction", send_transaction), \
            patch.object(compound, "get_supplied_amount", AsyncMock(side_effect=[0, 6_000])), \
            patch.object(client, "verify_tx", AsyncMock(return_value={"status": 1})):
        result = await compound.supply(token=TOKEN_OUT, value=123_456)

    assert result == tx_hash(4)
    assert [name for name, _ in calls] == ["approve", "send"]

    approve_kwargs = calls[0][1]
    assert approve_kwargs["spender"] == CTOKEN_ADDRESS
    assert approve_kwargs["token"] == TOKEN_OUT
    assert approve_kwargs["value"] == 123_456

    send_kwargs = calls[1][1]
    assert send_kwargs["to"] == CTOKEN_ADDRESS
    func, args = compound.contract.decode_function_input(send_kwargs["data"])
    assert func.fn_name == "mint"
    assert args == {"mintAmount": 123_456}


@pytest.mark.asyncio
async def test_mint_rejects_zero(compound):
    with pytest.raises(InvalidAmountError):
        await compound.mint(token=TOKEN_OUT, value=0)


@pytest.mark.asyncio
async def test_mint_fails_when_no_ctokens_are_minted(compound, client):
    send = AsyncMock(return_value=tx_hash(4))

    with patch.object(compound, "get_supplied_amount", AsyncMock(side_effect=[700, 700])), \
            patch.object(client, "send_transaction", send), \
            patch.object(client, "verify_tx", AsyncMock(return_value={"status": 1, "logs": []})):
        with pytest.raises(SupplyNotConfirmedError):
            await compound.mint(token=TOKEN_OUT, value=123_456)

    send.assert_awaited_once()


@pytest.mark.asyncio
async def test_withdraw_redeems_whole_balance(compound, client):
    send = AsyncMock(return_value=tx_hash(5))

    with patch.object(compound, "get_supplied_amount", AsyncMock(return_value=4_900)), \
            patch.object(client, "send_transaction", send), \
            patch.object(client, "verify_tx", AsyncMock(return_value={"status": 1})):
        assert await compound.withdraw() == tx_hash(5)

    func, args = compound.contract.decode_function_input(send.await_args.kwargs["data"])
    assert func.fn_name == "redeem"
    assert args == {"redeemTokens": 4_900}


@pytest.mark.asyncio
async def test_withdraw_with_nothing_supplied(compound, client):
    send = AsyncMock()

    with patch.object(compound, "get_supplied_amount", AsyncMock(return_value=0)), \
            patch.object(client, "send_transaction", send):
        with pytest.raises(NothingToWithdrawError):
            await compound.withdraw()

    send.assert_not_awaited()
