import asyncio
import sys

from logger import logger
from modules.module_manager import menu


async def main(module_num=None):
    await menu(module_num=module_num)


if __name__ == "__main__":
    # `python main.py 1` skips the interactive prompt
    try:
        asyncio.run(main=main(module_num=sys.argv[1] if len(sys.argv) > 1 else None))
    except KeyboardInterrupt:
        logger.info("User keyboard interrupt. Aborting...")
