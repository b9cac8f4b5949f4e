from dataclasses import dataclass
from typing import Tuple

from eth_typing import ChecksumAddress
from hexbytes import HexBytes


@dataclass(frozen=True)
class SwapParams:
    token_in: ChecksumAddress
    token_out: ChecksumAddress
    fee: int
    recipient: ChecksumAddress
    amount_in: int
    amount_out_minimum: int
    sqrt_price_limit_x96: int
    deadline: int

    def as_struct(self) -> Tuple[str, str, int, str, int, int, int]:
        """`ExactInputSingleParams` of SwapRouter02. The deadline goes to the wrapping multicall."""
        return (
            self.token_in,
            self.token_out,
            self.fee,
            self.recipient,
            self.amount_in,
            self.amount_out_minimum,
            self.sqrt_price_limit_x96,
        )


@dataclass(frozen=True)
class SwapResult:
    tx_hash: HexBytes
    amount_out: int
