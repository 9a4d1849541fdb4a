import pytest
from loguru import logger

from dubhe_bot.client import ChainClient
from dubhe_bot.errors import TxError
from dubhe_bot.keys import SigningIdentity
from dubhe_bot.plan import OrchestrationPlan, WrapAction, SwapAction, AddLiquidityAction


WRAP = "wrap"
SWAP = "swap_exact_tokens_for_tokens"
ADD_LIQUIDITY = "add_liquidity"


class FakeClient(ChainClient):
    """In-memory chain: records every submitted call and fails the scripted ones.

    `fail` is a set of move functions that always fail, or a callable
    `(identity, call, call_number) -> bool`.
    """

    def __init__(self, fail=()):
        self.fail = fail
        self.calls = []

    def submit(self, identity, call):
        self.calls.append((identity.address, call.function, call))
        call_number = len(self.calls)

        if callable(self.fail):
            failed = self.fail(identity, call, call_number)
        else:
            failed = call.function in self.fail
        if failed:
            raise TxError(f'{call.function} rejected')
        return f'digest{call_number}'

    @property
    def functions(self):
        return [function for _, function, _ in self.calls]

    def functions_of(self, address):
        return [function for call_address, function, _ in self.calls if call_address == address]


class Sleeps(list):
    def __call__(self, delay):
        self.append(delay)


def make_plan(wrap=True, swaps=(True, True, True, True), liquidity=(True, True, True), repeat=1, delay=5):
    actions = [WrapAction(amount=100_000_000, enabled=wrap)]
    paths = [(0, 1), (1, 0), (0, 3), (3, 0)]
    for swap_i, enabled in enumerate(swaps):
        actions.append(SwapAction(
            amount=100_000, path=paths[swap_i], repeat=repeat, enabled=enabled, label=f'Swap {swap_i}'
        ))
    pools = [(0, 3), (0, 1), (1, 3)]
    for pool_i, enabled in enumerate(liquidity):
        asset0, asset1 = pools[pool_i]
        actions.append(AddLiquidityAction(
            asset0=asset0, asset1=asset1, amount0=1_000_000, amount1=5765,
            enabled=enabled, label=f'Add Liquidity {pool_i}'
        ))
    return OrchestrationPlan(actions=tuple(actions), delay=delay)


@pytest.fixture
def identities():
    return [
        SigningIdentity.from_private_key("01" * 32, source="PRIVATE_KEY_1"),
        SigningIdentity.from_private_key("02" * 32, source="PRIVATE_KEY_2"),
    ]


@pytest.fixture
def identity(identities):
    return identities[0]


@pytest.fixture
def sleeps():
    return Sleeps()


@pytest.fixture
def logs():
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


def messages(records, level=None):
    return [
        record["message"]
        for record in records
        if level is None or record["level"].name == level
    ]
