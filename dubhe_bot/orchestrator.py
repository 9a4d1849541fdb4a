from typing import Iterable, List, Optional
from loguru import logger

from dubhe_bot.plan import OrchestrationPlan
from dubhe_bot.keys import SigningIdentity
from dubhe_bot.client import ChainClient
from dubhe_bot.utils import ask_cycles, sleeping
from dubhe_bot.replayer import Replayer
from dubhe_bot.wallet import Wallet


class InteractiveCycles:
    " asks operator for every new round, never runs out "

    def __init__(self, ask=input):
        self.ask = ask

    def next_count(self) -> Optional[int]:
        return ask_cycles(ask=self.ask)


class FixedCycles:
    " bounded mode: runs the given counts one by one and stops "

    def __init__(self, counts: Iterable[int]):
        self.counts = iter(counts)

    def next_count(self) -> Optional[int]:
        return next(self.counts, None)


class Orchestrator:
    def __init__(
            self,
            identities: List[SigningIdentity],
            plan: OrchestrationPlan,
            client: ChainClient,
            cycles,
            sleeper=sleeping,
    ):
        self.identities = list(identities)
        self.plan = plan
        self.client = client
        self.cycles = cycles
        self.sleeper = sleeper


    def run(self):
        while True:
            count = self.cycles.next_count()
            if count is None:
                return
            self.run_cycles(count)


    def run_cycles(self, count: int):
        for cycle_i in range(count):
            logger.info(f'[•] Soft | Starting transaction cycle {cycle_i + 1}/{count}')
            for identity in self.identities:
                print('')
                try:
                    wallet = Wallet(identity=identity, client=self.client, sleeper=self.sleeper)
                    Replayer(wallet=wallet, plan=self.plan).run()
                except Exception as err:
                    logger.error(f'[-] Soft | Error processing wallet {identity.address}: {err}')

                self.sleeper(self.plan.delay)

        logger.success(f'[+] Soft | All {count} transaction cycles completed')
