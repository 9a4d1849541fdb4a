from random import uniform
from loguru import logger
from time import sleep
import sys
import re

from dubhe_bot.errors import InputValidationError


MIN_CYCLES = 1
MAX_CYCLES = 100
NUMBER_RE = re.compile(r"-?[0-9]+")


def setup_logger(log_file: str = "logs/dubhe.log"):
    logger.remove()
    logger.add(
        sys.stdout,
        format="<white>{time:HH:mm:ss}</white> | <level>{message}</level>",
        level="DEBUG",
        colorize=True,
    )
    if log_file:
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}",
            level="DEBUG",
            rotation="5 MB",
            encoding="utf-8",
        )


def sleeping(delay):
    " delay: seconds or [min, max] seconds "
    if isinstance(delay, (list, tuple)):
        delay = uniform(*delay)
    if delay and delay > 0:
        sleep(delay)


def parse_cycles(answer: str):
    answer = str(answer).strip()
    if not NUMBER_RE.fullmatch(answer):
        raise InputValidationError(f'`{answer}` is not a number')
    count = int(answer)

    if not MIN_CYCLES <= count <= MAX_CYCLES:
        raise InputValidationError(f'{count} is out of range {MIN_CYCLES}-{MAX_CYCLES}')
    return count


def ask_cycles(ask=input):
    while True:
        answer = ask(f'\nEnter the number of transactions per wallet for this cycle ({MIN_CYCLES}-{MAX_CYCLES}): ')
        try:
            count = parse_cycles(answer)
        except InputValidationError as err:
            logger.debug(f'[-] Soft | Bad cycles input: {err}')
            logger.error(f'[-] Soft | Invalid input. Please enter a number between {MIN_CYCLES} and {MAX_CYCLES}.')
            continue

        logger.info(f'[•] Soft | Set {count} transactions per wallet for this cycle')
        return count
