from .compound import Compound
from .interfaces import Dex, Lending
from .uniswap_v3 import UniswapV3
