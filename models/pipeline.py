from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from hexbytes import HexBytes

from config import (
    AMOUNT_OUT_MINIMUM,
    POOL_FEE_TIER,
    POST_APPROVE_DELAY_RANGE,
    SQRT_PRICE_LIMIT_X96,
    SWAP_DEADLINE_SECONDS,
)
from core.chain import SEPOLIA, Chain
from core.constants import (
    COMPOUND_CTOKEN_CONTRACT_ADDRESS,
    UNISWAP_V3_FACTORY_CONTRACT_ADDRESS,
    UNISWAP_V3_SWAP_ROUTER_CONTRACT_ADDRESS,
)
from core.token import LINK, USDC, Token


class PipelineState(Enum):
    IDLE = "idle"
    APPROVING = "approving"
    SWAPPING = "swapping"
    APPROVING_SUPPLY = "approving-supply"
    SUPPLYING = "supplying"
    DONE = "done"
    FAILED = "failed"


@dataclass
class PipelineConfig:
    chain: Chain
    token_in: Token
    token_out: Token
    factory_address: str
    router_address: str
    lending_address: str
    fee_tier: int = 3000
    deadline_seconds: int = 1800
    amount_out_minimum: int = 1
    sqrt_price_limit_x96: Optional[int] = None
    post_approve_delay_range: Tuple[int, int] = (0, 0)

    def __post_init__(self) -> None:
        if self.fee_tier <= 0:
            raise ValueError(f"Fee tier must be positive, got {self.fee_tier}")
        if self.deadline_seconds <= 0:
            raise ValueError(f"Deadline offset must be positive, got {self.deadline_seconds}")
        if self.amount_out_minimum < 1:
            raise ValueError("Minimum output amount must be at least 1")
        if self.token_in == self.token_out:
            raise ValueError(f"Input and output token are the same: {self.token_in}")
        for token in (self.token_in, self.token_out):
            if token.chain_id != self.chain.chain_id:
                raise ValueError(f"{token} belongs to chain {token.chain_id}, not {self.chain.name}")

    @classmethod
    def sepolia(cls) -> "PipelineConfig":
        return cls(
            chain=SEPOLIA,
            token_in=USDC,
            token_out=LINK,
            factory_address=UNISWAP_V3_FACTORY_CONTRACT_ADDRESS,
            router_address=UNISWAP_V3_SWAP_ROUTER_CONTRACT_ADDRESS,
            lending_address=COMPOUND_CTOKEN_CONTRACT_ADDRESS,
            fee_tier=POOL_FEE_TIER,
            deadline_seconds=SWAP_DEADLINE_SECONDS,
            amount_out_minimum=AMOUNT_OUT_MINIMUM,
            sqrt_price_limit_x96=SQRT_PRICE_LIMIT_X96,
            post_approve_delay_range=tuple(POST_APPROVE_DELAY_RANGE),
        )


@dataclass(frozen=True)
class StepRecord:
    name: str
    tx_hash: HexBytes


@dataclass
class PipelineResult:
    state: PipelineState
    amount_in: int
    amount_out: Optional[int] = None
    steps: List[StepRecord] = field(default_factory=list)

    @property
    def tx_hashes(self) -> List[HexBytes]:
        return [step.tx_hash for step in self.steps]
