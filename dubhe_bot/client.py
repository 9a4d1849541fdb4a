from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Tuple, Any
from loguru import logger
import requests

from dubhe_bot.errors import TxError, RpcError, have_json
from dubhe_bot.config import CONTRACTS


@dataclass(frozen=True)
class Pure:
    value: Any
    type: str = "u256"


@dataclass(frozen=True)
class Address:
    value: str


@dataclass(frozen=True)
class Object:
    object_id: str


@dataclass(frozen=True)
class SplitGas:
    " coin of `amount` split off the sender's SUI balance "
    amount: int


@dataclass(frozen=True)
class MoveCall:
    target: str
    arguments: Tuple[Any, ...] = field(default_factory=tuple)
    type_arguments: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def package(self):
        return self.target.split("::")[0]

    @property
    def module(self):
        return self.target.split("::")[1]

    @property
    def function(self):
        return self.target.split("::")[2]


class ChainClient(ABC):
    @abstractmethod
    def submit(self, identity, call: MoveCall) -> str:
        " signs and executes `call`, returns tx digest or raises TxError "


class SuiClient(ChainClient):
    def __init__(self, rpc: str, gas_budget: int, timeout: int = 60):
        self.rpc = rpc
        self.gas_budget = gas_budget
        self.timeout = timeout
        self.request_id = 0

        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})


    @have_json
    def send_request(self, method: str, params: list):
        self.request_id += 1
        return self.session.post(
            self.rpc,
            json={"jsonrpc": "2.0", "id": self.request_id, "method": method, "params": params},
            timeout=self.timeout,
        )


    def call(self, method: str, params: list):
        r = self.send_request(method=method, params=params)
        if r.json().get("error"):
            raise RpcError(method=method, error=r.json()["error"])
        if "result" not in r.json():
            raise RpcError(method=method, error=f'no result in response: {r.json()}')
        return r.json()["result"]


    def get_gas_coin(self, address: str):
        coins = self.call("suix_getCoins", [address, CONTRACTS["sui_type"], None, None])["data"]
        if not coins:
            raise TxError(f'no SUI coins on {address}')
        return max(coins, key=lambda coin: int(coin["balance"]))


    def execute(self, identity, tx_bytes: str):
        result = self.call(
            "sui_executeTransactionBlock",
            [
                tx_bytes,
                [identity.sign_transaction(tx_bytes)],
                {"showEffects": True},
                "WaitForLocalExecution",
            ]
        )
        status = result.get("effects", {}).get("status", {})
        if status.get("status") != "success":
            raise TxError(f'tx {result.get("digest")} failed: {status.get("error", status)}')
        return result


    def split_gas(self, identity, amount: int, gas_coin: dict):
        tx_bytes = self.call(
            "unsafe_paySui",
            [identity.address, [gas_coin["coinObjectId"]], [identity.address], [str(amount)], str(self.gas_budget)]
        )["txBytes"]
        result = self.execute(identity, tx_bytes)

        for created in result["effects"].get("created", []):
            owner = created.get("owner")
            if isinstance(owner, dict) and owner.get("AddressOwner") == identity.address:
                coin_id = created["reference"]["objectId"]
                logger.debug(f'[•] Sui | Split {amount} MIST into {coin_id}')
                return coin_id

        raise TxError(f'split of {amount} MIST did not create a coin ({result.get("digest")})')


    def encode_argument(self, identity, argument, gas_coin: dict):
        if isinstance(argument, SplitGas):
            return self.split_gas(identity, argument.amount, gas_coin)
        elif isinstance(argument, Pure):
            if argument.type.startswith("vector<"):
                return [str(value) for value in argument.value]
            return str(argument.value)
        elif isinstance(argument, Address):
            return argument.value
        elif isinstance(argument, Object):
            return argument.object_id
        raise TypeError(f'unsupported move call argument {argument!r}')


    def submit(self, identity, call: MoveCall) -> str:
        gas_coin = None
        if any(isinstance(argument, SplitGas) for argument in call.arguments):
            gas_coin = self.get_gas_coin(identity.address)

        arguments = [self.encode_argument(identity, argument, gas_coin) for argument in call.arguments]
        tx_bytes = self.call(
            "unsafe_moveCall",
            [
                identity.address,
                call.package,
                call.module,
                call.function,
                list(call.type_arguments),
                arguments,
                gas_coin["coinObjectId"] if gas_coin else None,
                str(self.gas_budget),
            ]
        )["txBytes"]

        return self.execute(identity, tx_bytes).get("digest")
