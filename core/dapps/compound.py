from typing import Sequence

from hexbytes import HexBytes
from web3 import AsyncWeb3
from web3.contract.async_contract import AsyncContract

from config import POST_APPROVE_DELAY_RANGE
from core.client import Client
from core.constants import COMPOUND_CTOKEN_CONTRACT_ABI
from core.exceptions import InvalidAmountError, NothingToWithdrawError, SupplyNotConfirmedError
from core.token import Token
from logger import logger

from .interfaces import Lending


class Compound(Lending):
    def __init__(
        self,
        client: Client,
        ctoken_address: str,
        post_approve_delay_range: Sequence[int] = POST_APPROVE_DELAY_RANGE,
    ) -> None:
        self.client: Client = client
        self.post_approve_delay_range = post_approve_delay_range
        self.contract: AsyncContract = self.client.w3.eth.contract(
            address=AsyncWeb3.to_checksum_address(ctoken_address), abi=COMPOUND_CTOKEN_CONTRACT_ABI
        )

    async def get_supplied_amount(self) -> int:
        return await self.contract.functions.balanceOf(self.client.address).call()

    async def approve(self, token: Token, value: int) -> HexBytes:
        return await self.client.approve(
            spender=self.contract.address,
            token=token,
            value=value,
            post_approve_delay_range=self.post_approve_delay_range,
            label="Compound",
        )

    async def mint(self, token: Token, value: int) -> HexBytes:
        """Succeeds only if the cToken balance grew. cTokens report most mint failures through a return code."""
        if value <= 0:
            raise InvalidAmountError(f"Supply amount must be positive, got {value}")

        supplied_before = await self.get_supplied_amount()

        data = self.contract.encode_abi("mint", args=[value])
        logger.info(f"[Compound] Supplying {token.from_wei(value=value)} {token.symbol}")
        tx_hash = await self.client.send_transaction(to=self.contract.address, data=data)
        await self.client.verify_tx(tx_hash=tx_hash)

        minted = await self.get_supplied_amount() - supplied_before
        if minted <= 0:
            raise SupplyNotConfirmedError(
                f"No cTokens minted for {token.from_wei(value=value)} {token.symbol}: {self.client.tx_url(tx_hash)}"
            )
        logger.info(f"[Compound] Received {minted} cTokens")
        return tx_hash

    async def withdraw(self) -> HexBytes:
        supplied_amount = await self.get_supplied_amount()
        if supplied_amount == 0:
            raise NothingToWithdrawError(f"Nothing supplied to {self.contract.address}")

        data = self.contract.encode_abi("redeem", args=[supplied_amount])
        logger.info(f"[Compound] Withdrawing {supplied_amount} cTokens")
        tx_hash = await self.client.send_transaction(to=self.contract.address, data=data)
        await self.client.verify_tx(tx_hash=tx_hash)
        return tx_hash
