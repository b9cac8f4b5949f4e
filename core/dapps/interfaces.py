from abc import ABC, abstractmethod

from hexbytes import HexBytes

from core.token import Token
from models.pool import PoolInfo
from models.swap import SwapParams, SwapResult


class Dex(ABC):
    @property
    @abstractmethod
    def spender(self) -> str:
        """Address that pulls the input token during a swap."""

    @abstractmethod
    async def get_pool_info(self, token_in: Token, token_out: Token, fee: int) -> PoolInfo:
        pass

    @abstractmethod
    def prepare_swap_params(self, pool_info: PoolInfo, token_in: Token, token_out: Token, amount_in: int,
                            **kwargs) -> SwapParams:
        pass

    @abstractmethod
    async def swap(self, params: SwapParams) -> SwapResult:
        pass


class Lending(ABC):
    @abstractmethod
    async def approve(self, token: Token, value: int) -> HexBytes:
        pass

    @abstractmethod
    async def mint(self, token: Token, value: int) -> HexBytes:
        pass

    async def supply(self, token: Token, value: int) -> HexBytes:
        await self.approve(token=token, value=value)
        return await self.mint(token=token, value=value)

    @abstractmethod
    async def withdraw(self) -> HexBytes:
        pass

    @abstractmethod
    async def get_supplied_amount(self) -> int:
        pass
