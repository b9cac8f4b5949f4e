from config import PRIVATE_KEY, PROXY, SWAP_AMOUNT
from core import Client
from core.exceptions import PipelineError
from core.pipeline import SwapAndSupplyPipeline
from logger import logger
from models.pipeline import PipelineConfig


async def swap_and_supply(amount=SWAP_AMOUNT) -> bool:
    config = PipelineConfig.sepolia()
    client = Client(private_key=PRIVATE_KEY, chain=config.chain, proxy=PROXY)
    pipeline = SwapAndSupplyPipeline(client=client, config=config)

    logger.info(f"Working with wallet {client}")
    try:
        await pipeline.run(amount=amount)
    except PipelineError as e:
        logger.error(f"Swap and supply failed in state `{pipeline.state.value}`: {e}")
        return False
    return True
