from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional, Union

from .constants import ERC20_CONTRACT_ABI, LINK_CONTRACT_ADDRESS, USDC_CONTRACT_ADDRESS
from .exceptions import InvalidAmountError


@dataclass(frozen=True)
class Token:
    symbol: str
    name: str
    decimals: int
    chain_id: int
    contract_address: str
    abi: Optional[List[Dict]] = field(default=None, compare=False, repr=False)

    def to_wei(self, value: Union[int, float, str, Decimal]) -> int:
        """Raises InvalidAmountError for non-numbers and for digits below the token's precision."""
        try:
            scaled = Decimal(str(value)).scaleb(self.decimals)
        except InvalidOperation:
            raise InvalidAmountError(f"Not a valid {self.symbol} amount: {value!r}") from None

        if not scaled.is_finite() or scaled != scaled.to_integral_value():
            raise InvalidAmountError(f"{value} {self.symbol} doesn't fit into {self.decimals} decimals")
        return int(scaled)

    def from_wei(self, value: int) -> Decimal:
        return Decimal(value) / pow(10, self.decimals)

    def __repr__(self) -> str:
        return self.symbol

    def __str__(self) -> str:
        return self.symbol

    def __hash__(self):
        return hash((self.chain_id, self.contract_address.lower()))

    def __eq__(self, other):
        if isinstance(other, Token):
            return (self.chain_id, self.contract_address.lower()) == (
                other.chain_id,
                other.contract_address.lower(),
            )
        return False


USDC = Token(
    symbol="USDC",
    name="USD//C",
    decimals=6,
    chain_id=11155111,
    contract_address=USDC_CONTRACT_ADDRESS,
    abi=ERC20_CONTRACT_ABI,
)

LINK = Token(
    symbol="LINK",
    name="Chainlink",
    decimals=18,
    chain_id=11155111,
    contract_address=LINK_CONTRACT_ADDRESS,
    abi=ERC20_CONTRACT_ABI,
)
