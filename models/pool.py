from dataclasses import dataclass

from eth_typing import ChecksumAddress
from web3.contract.async_contract import AsyncContract

from core.token import Token


@dataclass
class PoolInfo:
    address: ChecksumAddress
    contract: AsyncContract
    token0: ChecksumAddress
    token1: ChecksumAddress
    fee: int

    def is_zero_for_one(self, token_in: Token) -> bool:
        return token_in.contract_address.lower() == self.token0.lower()

    def __str__(self) -> str:
        return f"{self.address[:6]}...{self.address[-4:]} ({self.fee / 10000}%)"
