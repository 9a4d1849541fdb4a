from dubhe_bot.orchestrator import Orchestrator, InteractiveCycles, FixedCycles
from dubhe_bot.keys import SigningIdentity, load_identities
from dubhe_bot.client import ChainClient, SuiClient, MoveCall
from dubhe_bot.plan import OrchestrationPlan, build_plan
from dubhe_bot.replayer import Replayer
from dubhe_bot.dubhe import Dubhe
from dubhe_bot.wallet import Wallet, TxOutcome

__all__ = [
    "Orchestrator",
    "InteractiveCycles",
    "FixedCycles",
    "SigningIdentity",
    "load_identities",
    "ChainClient",
    "SuiClient",
    "MoveCall",
    "OrchestrationPlan",
    "build_plan",
    "Replayer",
    "Dubhe",
    "Wallet",
    "TxOutcome",
]
