from dotenv import load_dotenv
import sys
import os

from dubhe_bot.utils import logger, setup_logger, sleeping
from dubhe_bot.errors import SoftError
from dubhe_bot.config import RPCS
from dubhe_bot import *
import settings


def main(env=None, cycles=None, client=None, sleeper=sleeping):
    if env is None:
        load_dotenv(settings.ENV_FILE)
        env = os.environ

    identities = load_identities(env)
    logger.info(f'[•] Soft | Loaded {len(identities)} wallet(s)')

    if client is None:
        client = SuiClient(rpc=settings.RPC or RPCS[settings.NETWORK], gas_budget=settings.GAS_BUDGET)

    Orchestrator(
        identities=identities,
        plan=build_plan(settings),
        client=client,
        cycles=cycles or InteractiveCycles(),
        sleeper=sleeper,
    ).run()


def run(**kwargs):
    try:
        main(**kwargs)
        return 0

    except SoftError as e:
        logger.error(f'[-] Soft | {e}')

    except KeyboardInterrupt:
        return 0

    except Exception as e:
        logger.exception(f'[-] Soft | Fatal error: {e}')

    finally:
        logger.info('[•] Soft | Closed')

    return 1


if __name__ == '__main__':
    setup_logger()
    sys.exit(run())
