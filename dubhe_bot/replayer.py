from loguru import logger

from dubhe_bot.plan import OrchestrationPlan, WrapAction, SwapAction, AddLiquidityAction
from dubhe_bot.errors import TxError
from dubhe_bot.wallet import Wallet
from dubhe_bot.dubhe import Dubhe


class Replayer(Wallet):
    " wrap failure ends the wallet pass, other failures are only logged "

    def __init__(self, wallet: Wallet, plan: OrchestrationPlan):
        super().__init__(
            identity=wallet.identity,
            client=wallet.client,
            sleeper=wallet.sleeper,
        )
        self.plan = plan
        self.dubhe = Dubhe(wallet=self, delay=plan.delay)


    def run(self):
        logger.info(f'[•] Web3 | Processing wallet {self.address}')

        for action in self.plan.actions:
            if not action.enabled:
                continue

            if isinstance(action, WrapAction):
                try:
                    self.dubhe.wrap(action)
                except TxError as err:
                    logger.warning(f'[-] Web3 | Skipping other actions of {self.address}: {err}')
                    return False

            elif isinstance(action, SwapAction):
                if action.repeat <= 0:
                    continue
                self.dubhe.swap(action)

            elif isinstance(action, AddLiquidityAction):
                self.dubhe.add_liquidity(action)

            else:
                raise TypeError(f'unknown action {action!r}')

            self.sleeper(self.plan.delay)

        return True
