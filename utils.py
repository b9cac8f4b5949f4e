import asyncio
import json
import random
import sys
from typing import Sequence

from tqdm import tqdm

from logger import logger


def read_from_json(file_path: str):
    try:
        with open(file_path) as json_file:
            return json.load(json_file)
    except FileNotFoundError:
        logger.error(f"File '{file_path}' not found.")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Encountered an unexpected error while reading a JSON file '{file_path}': {e}.")
        sys.exit(1)


async def sleep(delay_range: Sequence[int], send_message: bool = True, pr_bar: bool = True) -> None:
    delay = random.randint(*delay_range)
    if delay <= 0:
        return

    if send_message:
        logger.info(f"Sleeping for {delay} seconds...")

    if pr_bar:
        with tqdm(total=delay, desc="Waiting", unit="s", dynamic_ncols=True, colour="blue") as pbar:
            for _ in range(delay):
                await asyncio.sleep(delay=1)
                pbar.update(1)
    else:
        await asyncio.sleep(delay=delay)


def short_address(address: str) -> str:
    return f"{address[:6]}...{address[-4:]}"

