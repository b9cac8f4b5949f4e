from config import PRIVATE_KEY, PROXY
from core import Client
from core.dapps import Compound
from logger import logger
from models.pipeline import PipelineConfig


async def show_balances() -> None:
    config = PipelineConfig.sepolia()
    client = Client(private_key=PRIVATE_KEY, chain=config.chain, proxy=PROXY)
    compound = Compound(client=client, ctoken_address=config.lending_address)

    native_balance = await client.get_native_balance()
    logger.info(f"{client}: {client.w3.from_wei(native_balance, 'ether')} {config.chain.coin_symbol}")

    for token in (config.token_in, config.token_out):
        balance = await client.get_token_balance(token, wei=False)
        logger.info(f"{client}: {balance} {token.symbol}")

    router_allowance = await client.get_allowance(token=config.token_in, spender=config.router_address)
    lending_allowance = await client.get_allowance(token=config.token_out, spender=compound.contract.address)
    logger.info(f"Router allowance: {config.token_in.from_wei(router_allowance)} {config.token_in.symbol}")
    logger.info(f"Lending allowance: {config.token_out.from_wei(lending_allowance)} {config.token_out.symbol}")

    supplied = await compound.get_supplied_amount()
    logger.info(f"Supplied: {supplied} cTokens")
