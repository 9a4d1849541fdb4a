from dataclasses import dataclass
from typing import Optional
from loguru import logger

from dubhe_bot.client import ChainClient, MoveCall
from dubhe_bot.keys import SigningIdentity
from dubhe_bot.utils import sleeping
from dubhe_bot.config import EXPLORER


@dataclass(frozen=True)
class TxOutcome:
    label: str
    address: str
    digest: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self):
        return self.error is None

    @property
    def link(self):
        return f'{EXPLORER}{self.digest}' if self.digest else None


class Wallet:
    def __init__(
            self,
            identity: SigningIdentity,
            client: ChainClient,
            sleeper=sleeping,
    ):
        self.identity = identity
        self.client = client
        self.sleeper = sleeper
        self.address = identity.address


    def sent_tx(self, call: MoveCall, tx_label: str):
        try:
            digest = self.client.submit(self.identity, call)
        except Exception as err:
            logger.error(f'[-] Web3 | {tx_label} failed for {self.address}: {err}')
            return TxOutcome(label=tx_label, address=self.address, error=str(err) or type(err).__name__)

        outcome = TxOutcome(label=tx_label, address=self.address, digest=digest)
        logger.debug(f'[•] Web3 | {tx_label} for {self.address}')
        if outcome.link:
            logger.debug(f'[•] Web3 | {tx_label} tx sent: {outcome.link}')
        else:
            logger.error(f'[-] Web3 | {tx_label} | Failed to retrieve transaction digest!')
        logger.success(f'[+] Web3 | {tx_label} completed for {self.address}')
        return outcome
