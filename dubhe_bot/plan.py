from dataclasses import dataclass, field
from typing import Tuple, Union

from dubhe_bot.config import ASSETS, PATHS


def _check_uint(name: str, value):
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f'{name} must be a non-negative integer, got {value!r}')


@dataclass(frozen=True)
class WrapAction:
    amount: int
    enabled: bool = True
    label: str = "Wrap wSUI"

    def __post_init__(self):
        _check_uint("amount", self.amount)


@dataclass(frozen=True)
class SwapAction:
    amount: int
    path: Tuple[int, ...]
    repeat: int = 1
    min_out: int = 1
    enabled: bool = True
    label: str = "Swap"

    def __post_init__(self):
        object.__setattr__(self, "path", tuple(self.path))
        _check_uint("amount", self.amount)
        _check_uint("min_out", self.min_out)
        _check_uint("repeat", self.repeat)
        if len(self.path) < 2:
            raise ValueError(f'swap path needs at least 2 assets, got {self.path}')
        for asset in self.path:
            _check_uint("path asset", asset)


@dataclass(frozen=True)
class AddLiquidityAction:
    asset0: int
    asset1: int
    amount0: int
    amount1: int
    min0: int = 1
    min1: int = 1
    enabled: bool = True
    label: str = "Add Liquidity"

    def __post_init__(self):
        for name in ("asset0", "asset1", "amount0", "amount1", "min0", "min1"):
            _check_uint(name, getattr(self, name))


ActionConfig = Union[WrapAction, SwapAction, AddLiquidityAction]


@dataclass(frozen=True)
class OrchestrationPlan:
    actions: Tuple[ActionConfig, ...] = field(default_factory=tuple)
    delay: Union[float, Tuple[float, float]] = 0

    def __post_init__(self):
        object.__setattr__(self, "actions", tuple(self.actions))
        delay = self.delay
        if isinstance(delay, (list, tuple)):
            if len(delay) != 2 or min(delay) < 0 or delay[0] > delay[1]:
                raise ValueError(f'bad delay range {delay}')
            object.__setattr__(self, "delay", tuple(delay))
        elif delay < 0:
            raise ValueError(f'delay must be non-negative, got {delay}')


def _asset_id(asset):
    if isinstance(asset, str):
        return ASSETS[asset]
    return asset


def build_plan(settings) -> OrchestrationPlan:
    actions = [WrapAction(**settings.WRAP)]

    for swap in settings.SWAPS:
        swap = dict(swap)
        path = swap.pop("path")
        if isinstance(path, str):
            path = PATHS[path]
        actions.append(SwapAction(path=tuple(_asset_id(asset) for asset in path), **swap))

    for liquidity in settings.ADD_LIQUIDITY:
        liquidity = dict(liquidity)
        liquidity["asset0"] = _asset_id(liquidity["asset0"])
        liquidity["asset1"] = _asset_id(liquidity["asset1"])
        actions.append(AddLiquidityAction(**liquidity))

    return OrchestrationPlan(actions=tuple(actions), delay=settings.DELAY_BETWEEN_TX)
