from dataclasses import dataclass

from config import RPC_URL


@dataclass(frozen=True)
class Chain:
    name: str
    chain_id: int
    coin_symbol: str
    explorer: str
    rpc: str

    def tx_url(self, tx_hash: str) -> str:
        return f"{self.explorer}tx/{tx_hash}"


SEPOLIA = Chain(
    name="SEPOLIA",
    chain_id=11155111,
    coin_symbol="ETH",
    explorer="https://sepolia.etherscan.io/",
    rpc=RPC_URL,
)
