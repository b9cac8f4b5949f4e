from typing import Optional

from logger import logger
from modules.balances import show_balances
from modules.swap_and_supply import swap_and_supply
from modules.withdraw import withdraw


async def menu(module_num: Optional[str] = None) -> None:
    await greeting()
    if module_num is None:
        module_num = input("Enter a module number: ")
    module_num = module_num.strip()
    if module_num == "1":
        await swap_and_supply()
    elif module_num == "2":
        await show_balances()
    elif module_num == "3":
        await withdraw()
    else:
        logger.warning(f"Unknown module `{module_num}`")


async def greeting() -> None:
    logger.debug(
        r"""
   _____                          ___     _____                   __     
  / ___/_      ______ _____     _( _ )   / ___/__  ______  ____  / /_  __
  \__ \| | /| / / __ `/ __ \   / __ \/|  \__ \/ / / / __ \/ __ \/ / / / /
 ___/ /| |/ |/ / /_/ / /_/ /  / /_/  <  ___/ / /_/ / /_/ / /_/ / / /_/ / 
/____/ |__/|__/\__,_/ .___/   \____/\/ /____/\__,_/ .___/ .___/_/\__, /  
                   /_/                           /_/   /_/      /____/   

1. [SWAP & SUPPLY] Свап USDC в LINK и депозит в Compound | Swap USDC to LINK and supply it to Compound
2. [BALANCES] Балансы, аппрувы и депозит | Balances, allowances and supplied amount
3. [WITHDRAW] Вывод всего депозита из Compound | Withdraw everything from Compound
"""
    )
