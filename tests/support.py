from unittest.mock import AsyncMock, MagicMock

from hexbytes import HexBytes
from web3 import AsyncWeb3

from core.chain import Chain
from core.constants import ERC20_CONTRACT_ABI
from core.token import Token

# well-known throwaway key, never funded
PRIVATE_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"

TEST_CHAIN = Chain(
    name="TESTNET",
    chain_id=11155111,
    coin_symbol="ETH",
    explorer="https://sepolia.etherscan.io/",
    rpc="http://127.0.0.1:8545",
)

TRANSFER_TOPIC = AsyncWeb3.keccak(text="Transfer(address,address,uint256)")


def address(byte: int) -> str:
    return AsyncWeb3.to_checksum_address("0x" + f"{byte:02x}" * 20)


def tx_hash(n: int) -> HexBytes:
    return HexBytes(bytes([n]) * 32)


TOKEN_IN = Token(
    symbol="USDC",
    name="USD//C",
    decimals=6,
    chain_id=TEST_CHAIN.chain_id,
    contract_address=address(0x1A),
    abi=ERC20_CONTRACT_ABI,
)
TOKEN_OUT = Token(
    symbol="LINK",
    name="Chainlink",
    decimals=18,
    chain_id=TEST_CHAIN.chain_id,
    contract_address=address(0x2B),
    abi=ERC20_CONTRACT_ABI,
)

FACTORY_ADDRESS = address(0xFA)
ROUTER_ADDRESS = address(0xEE)
CTOKEN_ADDRESS = address(0xCC)
POOL_ADDRESS = address(0x9F)


def mock_factory(pool_address: str) -> MagicMock:
    factory = MagicMock()
    factory.functions.getPool.return_value.call = AsyncMock(return_value=pool_address)
    return factory


def mock_pool(token0: str, token1: str, fee: int) -> MagicMock:
    pool = MagicMock()
    pool.functions.token0.return_value.call = AsyncMock(return_value=token0)
    pool.functions.token1.return_value.call = AsyncMock(return_value=token1)
    pool.functions.fee.return_value.call = AsyncMock(return_value=fee)
    return pool


def _topic(addr: str) -> HexBytes:
    return HexBytes(b"\x00" * 12 + HexBytes(addr))


def transfer_log(token: str, sender: str, recipient: str, value: int, log_index: int = 0) -> dict:
    return {
        "address": token,
        "topics": [HexBytes(TRANSFER_TOPIC), _topic(sender), _topic(recipient)],
        "data": HexBytes(value.to_bytes(32, "big")),
        "logIndex": log_index,
        "transactionIndex": 0,
        "transactionHash": tx_hash(2),
        "blockHash": HexBytes(b"\x00" * 32),
        "blockNumber": 1,
    }
