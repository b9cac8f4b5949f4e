from config import PRIVATE_KEY, PROXY
from core import Client
from core.dapps import Compound
from core.exceptions import PipelineError
from logger import logger
from models.pipeline import PipelineConfig


async def withdraw() -> bool:
    config = PipelineConfig.sepolia()
    client = Client(private_key=PRIVATE_KEY, chain=config.chain, proxy=PROXY)
    compound = Compound(client=client, ctoken_address=config.lending_address)

    try:
        await compound.withdraw()
    except PipelineError as e:
        logger.error(f"[Compound] Couldn't withdraw: {e}")
        return False
    return True
