import asyncio
from typing import Optional

from eth_typing import ChecksumAddress
from hexbytes import HexBytes
from web3 import AsyncWeb3
from web3.constants import ADDRESS_ZERO
from web3.contract.async_contract import AsyncContract
from web3.logs import DISCARD
from web3.types import TxReceipt

from core.client import Client
from core.constants import (
    ERC20_CONTRACT_ABI,
    MAX_SQRT_RATIO,
    MIN_SQRT_RATIO,
    UNISWAP_V3_FACTORY_CONTRACT_ABI,
    UNISWAP_V3_POOL_CONTRACT_ABI,
    UNISWAP_V3_SWAP_ROUTER_CONTRACT_ABI,
)
from core.exceptions import InvalidAmountError, PoolNotFoundError, SwapOutputNotFoundError
from core.token import Token
from logger import logger
from models.pool import PoolInfo
from models.swap import SwapParams, SwapResult

from .interfaces import Dex


class UniswapV3(Dex):
    def __init__(self, client: Client, factory_address: str, router_address: str) -> None:
        self.client: Client = client
        self.factory: AsyncContract = self.client.w3.eth.contract(
            address=AsyncWeb3.to_checksum_address(factory_address), abi=UNISWAP_V3_FACTORY_CONTRACT_ABI
        )
        self.router: AsyncContract = self.client.w3.eth.contract(
            address=AsyncWeb3.to_checksum_address(router_address), abi=UNISWAP_V3_SWAP_ROUTER_CONTRACT_ABI
        )

    @property
    def spender(self) -> str:
        return self.router.address

    def _pool_contract(self, pool_address: ChecksumAddress) -> AsyncContract:
        return self.client.w3.eth.contract(address=pool_address, abi=UNISWAP_V3_POOL_CONTRACT_ABI)

    async def get_pool_info(self, token_in: Token, token_out: Token, fee: int) -> PoolInfo:
        pool_address = await self.factory.functions.getPool(
            token_in.contract_address, token_out.contract_address, fee
        ).call()
        if not pool_address or int(pool_address, 16) == int(ADDRESS_ZERO, 16):
            raise PoolNotFoundError(token_a=token_in.symbol, token_b=token_out.symbol, fee=fee)

        pool_address = AsyncWeb3.to_checksum_address(pool_address)
        pool_contract = self._pool_contract(pool_address)
        token0, token1, pool_fee = await asyncio.gather(
            pool_contract.functions.token0().call(),
            pool_contract.functions.token1().call(),
            pool_contract.functions.fee().call(),
        )
        pool_info = PoolInfo(
            address=pool_address,
            contract=pool_contract,
            token0=AsyncWeb3.to_checksum_address(token0),
            token1=AsyncWeb3.to_checksum_address(token1),
            fee=pool_fee,
        )
        logger.info(f"[Uniswap] Found {token_in.symbol}/{token_out.symbol} pool {pool_info}")
        return pool_info

    def prepare_swap_params(
        self,
        pool_info: PoolInfo,
        token_in: Token,
        token_out: Token,
        amount_in: int,
        deadline_seconds: int = 1800,
        amount_out_minimum: int = 1,
        sqrt_price_limit_x96: Optional[int] = None,
    ) -> SwapParams:
        if amount_in <= 0:
            raise InvalidAmountError(f"Swap amount must be positive, got {amount_in}")
        if amount_out_minimum < 1:
            raise InvalidAmountError("Minimum output amount must be at least 1")

        if sqrt_price_limit_x96 is None:
            # widest limit allowed in the swap direction
            if pool_info.is_zero_for_one(token_in):
                sqrt_price_limit_x96 = MIN_SQRT_RATIO + 1
            else:
                sqrt_price_limit_x96 = MAX_SQRT_RATIO - 1

        return SwapParams(
            token_in=token_in.contract_address,
            token_out=token_out.contract_address,
            fee=pool_info.fee,
            recipient=self.client.address,
            amount_in=amount_in,
            amount_out_minimum=amount_out_minimum,
            sqrt_price_limit_x96=sqrt_price_limit_x96,
            deadline=self.client.get_deadline(seconds=deadline_seconds),
        )

    def _get_amount_out_from_receipt(self, receipt: TxReceipt, params: SwapParams) -> int:
        token_out_contract = self.client.w3.eth.contract(address=params.token_out, abi=ERC20_CONTRACT_ABI)
        transfers = token_out_contract.events.Transfer().process_receipt(receipt, errors=DISCARD)

        amount_out = sum(
            transfer["args"]["value"]
            for transfer in transfers
            if transfer["address"].lower() == params.token_out.lower()
            and transfer["args"]["to"].lower() == params.recipient.lower()
        )
        if amount_out == 0:
            raise SwapOutputNotFoundError(
                f"No transfer of {params.token_out} to {params.recipient} in swap receipt"
            )
        return amount_out

    async def swap(self, params: SwapParams) -> SwapResult:
        swap_data = self.router.encode_abi("exactInputSingle", args=[params.as_struct()])
        data = self.router.encode_abi("multicall", args=[params.deadline, [HexBytes(swap_data)]])

        logger.info(f"[Uniswap] Swapping {params.amount_in} of {params.token_in} to {params.token_out}")
        tx_hash = await self.client.send_transaction(to=self.router.address, data=data)
        receipt = await self.client.verify_tx(tx_hash=tx_hash)

        amount_out = self._get_amount_out_from_receipt(receipt=receipt, params=params)
        logger.info(f"[Uniswap] Received {amount_out} of {params.token_out}")
        return SwapResult(tx_hash=tx_hash, amount_out=amount_out)
