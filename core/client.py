import binascii
import re
import sys
from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, Optional, Sequence, Union

from eth_account import Account
from eth_typing import ChecksumAddress
from hexbytes import HexBytes
from web3 import AsyncWeb3
from web3.contract.async_contract import AsyncContract
from web3.types import TxReceipt

from config import POST_APPROVE_DELAY_RANGE, VERIFY_TX_TIMEOUT
from core.token import Token
from logger import logger
from utils import short_address, sleep

from . import Chain
from .constants import ERC20_CONTRACT_ABI, GAS_LIMIT_MULTIPLIER, PROXY_PATTERN
from .exceptions import NoRPCEndpointSpecifiedError, TransactionRevertedError, TransactionSendError


class Client:
    def __init__(self, private_key: str, chain: Chain, proxy: Optional[str] = None) -> None:
        self.private_key: str = self._set_private_key(private_key=private_key)
        self.chain: Chain = chain
        self.proxy: Optional[str] = self._set_proxy(proxy=proxy)
        self.w3: AsyncWeb3 = self._init_w3(chain=chain)
        self.address: ChecksumAddress = AsyncWeb3.to_checksum_address(
            value=Account.from_key(private_key).address
        )

    def __str__(self):
        return short_address(self.address)

    def _set_proxy(self, proxy: Optional[str]) -> Optional[str]:
        if proxy is None:
            return proxy
        pattern = re.compile(pattern=PROXY_PATTERN)
        if pattern.match(proxy):
            return proxy
        logger.error("Invalid proxy format. The correct format is 'username:password@ip_address:port'.")
        sys.exit(1)

    def _set_private_key(self, private_key: str) -> str:
        try:
            Account.from_key(private_key)
            return private_key
        except binascii.Error:
            logger.error("Private key is not a valid hex string.")
            sys.exit(1)
        except ValueError as e:
            logger.error(f"Invalid private key: {e}")
            sys.exit(1)

    def _init_w3(self, chain: Chain) -> AsyncWeb3:
        if self.proxy:
            request_kwargs = {"proxy": f"http://{self.proxy}"}
        else:
            request_kwargs = {}

        try:
            if not chain.rpc:
                raise NoRPCEndpointSpecifiedError(chain=chain)
            return AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(endpoint_uri=chain.rpc, request_kwargs=request_kwargs))
        except Exception as e:
            logger.error(e)
            sys.exit(1)

    def token_contract(self, token: Token) -> AsyncContract:
        return self.w3.eth.contract(address=token.contract_address, abi=token.abi or ERC20_CONTRACT_ABI)

    def tx_url(self, tx_hash: Union[HexBytes, str]) -> str:
        return self.chain.tx_url(AsyncWeb3.to_hex(tx_hash))

    def get_deadline(self, seconds: int = 1800) -> int:
        return int(datetime.now(timezone.utc).timestamp()) + seconds

    async def get_gas_estimate(self, tx_params: Dict[str, Union[str, int]]) -> int:
        try:
            return await self.w3.eth.estimate_gas(tx_params)
        except Exception as e:
            logger.error(f"Transaction estimate failed: {e}")
            raise TransactionSendError(f"Transaction estimate failed: {e}") from e

    async def get_tx_params(
        self,
        to: str,
        data: Optional[str] = None,
        from_: Optional[str] = None,
        value: Optional[int] = None,
    ) -> Dict[str, Union[str, int]]:
        if not from_:
            from_ = self.address

        tx_params: Dict[str, Union[str, int]] = {
            "chainId": self.chain.chain_id,
            "nonce": await self.w3.eth.get_transaction_count(self.address),
            "from": AsyncWeb3.to_checksum_address(from_),
            "to": AsyncWeb3.to_checksum_address(to),
            "gasPrice": await self.w3.eth.gas_price,
        }

        if data:
            tx_params["data"] = data
        if value is not None:
            tx_params["value"] = value

        return tx_params

    async def send_transaction(
        self,
        to: str,
        data: Optional[str] = None,
        from_: Optional[str] = None,
        value: Optional[int] = None,
        gas_limit_multiplier: float = GAS_LIMIT_MULTIPLIER,
    ) -> HexBytes:
        """
        Signs and broadcasts a transaction on the client's chain.

        Parameters:
        - to (str): The address of the contract (or account) being called.
        - data (str, optional): ABI-encoded call data.
        - from_ (str, optional): The sender's address. Defaults to the client's address.
        - value (int, optional): The amount of native coin (in wei) sent along.
        - gas_limit_multiplier (float): Headroom applied to the gas estimate.

        Returns:
        - HexBytes: The transaction hash. Once this returns the transaction can't be taken back.

        Raises:
        - TransactionSendError: if estimation, signing or broadcasting fails.
        """
        try:
            tx_params = await self.get_tx_params(to=to, data=data, from_=from_, value=value)
        except Exception as e:
            logger.error(f"Couldn't build transaction params: {e}")
            raise TransactionSendError(f"Couldn't build transaction params: {e}") from e

        gas = await self.get_gas_estimate(tx_params=tx_params)
        tx_params["gas"] = int(gas * gas_limit_multiplier)

        try:
            signed_tx = self.w3.eth.account.sign_transaction(tx_params, self.private_key)
            tx_hash = await self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        except Exception as e:
            logger.error(f"Error while sending transaction: {e}")
            raise TransactionSendError(f"Error while sending transaction: {e}") from e

        logger.info(f"Transaction sent: {AsyncWeb3.to_hex(tx_hash)}")
        return HexBytes(tx_hash)

    async def verify_tx(self, tx_hash: HexBytes, timeout: int = VERIFY_TX_TIMEOUT) -> TxReceipt:
        """
        Blocks until the transaction is mined and returns its receipt.

        Raises TransactionRevertedError if the receipt status isn't 1 and
        TransactionSendError if the receipt couldn't be fetched in time.
        """
        try:
            receipt = await self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=timeout)
        except Exception as e:
            logger.error(f"Couldn't get receipt of {self.tx_url(tx_hash)}: {e}")
            raise TransactionSendError(f"Couldn't get transaction receipt: {e}") from e

        if receipt.get("status") == 1:
            logger.success(f"Transaction was successful: {self.tx_url(tx_hash)}")
            return receipt

        logger.error(f"Transaction failed: {self.tx_url(tx_hash)}")
        raise TransactionRevertedError(tx_hash=AsyncWeb3.to_hex(tx_hash), url=self.tx_url(tx_hash))

    async def get_allowance(
        self,
        token: Token,
        spender: ChecksumAddress,
        owner: Optional[ChecksumAddress] = None,
    ) -> int:
        if owner is None:
            owner = self.address
        return await self.token_contract(token).functions.allowance(owner, spender).call()

    async def approve(
        self,
        spender: ChecksumAddress,
        token: Token,
        value: int,
        post_approve_delay_range: Sequence[int] = POST_APPROVE_DELAY_RANGE,
        label: str = "Client",
    ) -> HexBytes:
        """Grants `spender` an allowance of exactly `value` and waits for it to be mined."""
        token_contract = self.token_contract(token)

        logger.info(f"[{label}] Approving {token.from_wei(value)} {token.symbol} for spender: {spender}")
        data = token_contract.encode_abi("approve", args=(spender, value))
        tx_hash = await self.send_transaction(to=token_contract.address, data=data)
        await self.verify_tx(tx_hash=tx_hash)

        await sleep(delay_range=post_approve_delay_range, send_message=False)
        return tx_hash

    async def get_token_balance(self, token: Token, wei: bool = True) -> Union[int, Decimal]:
        balance = await self.token_contract(token).functions.balanceOf(self.address).call()
        return balance if wei else token.from_wei(value=balance)

    async def get_native_balance(self) -> int:
        return await self.w3.eth.get_balance(self.address)
