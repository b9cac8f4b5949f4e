import os

from web3 import AsyncWeb3

from utils import read_from_json

ABI_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "abi")

# Sepolia deployments
UNISWAP_V3_FACTORY_CONTRACT_ADDRESS = AsyncWeb3.to_checksum_address("0x0227628f3F023bb0B980b67D528571c95c6DaC1c")
UNISWAP_V3_SWAP_ROUTER_CONTRACT_ADDRESS = AsyncWeb3.to_checksum_address("0x3bFA4769FB09eefC5a80d6E87c3B9C650f7Ae48E")
COMPOUND_CTOKEN_CONTRACT_ADDRESS = AsyncWeb3.to_checksum_address("0x5d3a536E4D6DbD6114cc1Ead35777bAB948E3643")

USDC_CONTRACT_ADDRESS = AsyncWeb3.to_checksum_address("0x1c7D4B196Cb0C7B01d743Fbc6116a902379C7238")
LINK_CONTRACT_ADDRESS = AsyncWeb3.to_checksum_address("0x779877A7B0D9E8603169DdbD7836e478b4624789")

ERC20_CONTRACT_ABI = read_from_json(os.path.join(ABI_DIR, "erc20.json"))
UNISWAP_V3_FACTORY_CONTRACT_ABI = read_from_json(os.path.join(ABI_DIR, "uniswap_v3_factory.json"))
UNISWAP_V3_POOL_CONTRACT_ABI = read_from_json(os.path.join(ABI_DIR, "uniswap_v3_pool.json"))
UNISWAP_V3_SWAP_ROUTER_CONTRACT_ABI = read_from_json(os.path.join(ABI_DIR, "uniswap_v3_swap_router.json"))
COMPOUND_CTOKEN_CONTRACT_ABI = read_from_json(os.path.join(ABI_DIR, "compound_ctoken.json"))

# TickMath bounds, exclusive
MIN_SQRT_RATIO = 4295128739
MAX_SQRT_RATIO = 1461446703485210103287273052203988822378723970342

GAS_LIMIT_MULTIPLIER = 1.2

PROXY_PATTERN = r"^[^:@\s]+:[^:@\s]+@[\w.-]+:\d+$"
