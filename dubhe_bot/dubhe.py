from loguru import logger

from dubhe_bot.client import MoveCall, Pure, Address, Object, SplitGas
from dubhe_bot.plan import WrapAction, SwapAction, AddLiquidityAction
from dubhe_bot.errors import TxError
from dubhe_bot.config import CONTRACTS
from dubhe_bot.wallet import Wallet


class Dubhe(Wallet):

    def __init__(self, wallet: Wallet, delay=0):
        super().__init__(
            identity=wallet.identity,
            client=wallet.client,
            sleeper=wallet.sleeper,
        )
        self.delay = delay


    def wrap(self, action: WrapAction):
        logger.info(f'[•] Dubhe | {action.label} for {self.address}')
        call = MoveCall(
            target=CONTRACTS["wrap"],
            arguments=(
                Object(CONTRACTS["shared_object"]),
                SplitGas(action.amount),
                Address(self.address),
            ),
            type_arguments=(CONTRACTS["sui_type"],),
        )
        outcome = self.sent_tx(call=call, tx_label=action.label)
        if not outcome.ok:
            raise TxError(f'{action.label} failed: {outcome.error}')
        return outcome


    def swap(self, action: SwapAction):
        outcomes = []
        for run_i in range(action.repeat):
            tx_label = f'{action.label} (Run {run_i + 1}/{action.repeat})'
            logger.info(f'[•] Dubhe | {tx_label} for {self.address}')
            call = MoveCall(
                target=CONTRACTS["swap"],
                arguments=(
                    Object(CONTRACTS["shared_object"]),
                    Pure(action.amount, "u256"),
                    Pure(action.min_out, "u256"),
                    Pure(action.path, "vector<u256>"),
                    Address(self.address),
                ),
            )
            outcomes.append(self.sent_tx(call=call, tx_label=tx_label))

            if run_i + 1 < action.repeat:
                self.sleeper(self.delay)

        return outcomes


    def add_liquidity(self, action: AddLiquidityAction):
        logger.info(f'[•] Dubhe | {action.label} for {self.address}')
        call = MoveCall(
            target=CONTRACTS["add_liquidity"],
            arguments=(
                Object(CONTRACTS["shared_object"]),
                Pure(action.asset0, "u256"),
                Pure(action.asset1, "u256"),
                Pure(action.amount0, "u256"),
                Pure(action.amount1, "u256"),
                Pure(action.min0, "u256"),
                Pure(action.min1, "u256"),
                Address(self.address),
            ),
        )
        return self.sent_tx(call=call, tx_label=action.label)
