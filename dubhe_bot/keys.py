from eth_account.hdaccount import seed_from_mnemonic
from eth_utils import ValidationError
from nacl.signing import SigningKey
from base64 import b64encode, b64decode
from typing import Mapping, List
from loguru import logger
import hashlib
import hmac

import bech32

from dubhe_bot.config import PRIVATE_KEY_PREFIX, MNEMONIC_PREFIX, SUI_DERIVATION_PATH
from dubhe_bot.errors import CredentialError, NoWalletsError


ED25519_FLAG = 0x00
SUI_PRIVATE_KEY_HRP = "suiprivkey"
INTENT_PREFIX = bytes([0, 0, 0])  # TransactionData intent, version 0, app Sui


class SigningIdentity:
    __slots__ = ("_signing_key", "_public_key", "_address", "source")

    def __init__(self, secret_key: bytes, source: str = None):
        if len(secret_key) != 32:
            raise CredentialError(f'ed25519 secret key must be 32 bytes, got {len(secret_key)}')
        self._signing_key = SigningKey(bytes(secret_key))
        self._public_key = bytes(self._signing_key.verify_key)
        self._address = "0x" + hashlib.blake2b(bytes([ED25519_FLAG]) + self._public_key, digest_size=32).hexdigest()
        self.source = source

    def __setattr__(self, name, value):
        if hasattr(self, name):
            raise AttributeError(f'SigningIdentity.{name} is read-only')
        super().__setattr__(name, value)

    def __repr__(self):
        return f'SigningIdentity({self._address})'

    @property
    def address(self) -> str:
        return self._address

    @property
    def public_key(self) -> bytes:
        return self._public_key

    def sign_transaction(self, tx_bytes: str) -> str:
        " tx_bytes: base64 BCS TransactionData, returns base64 serialized signature "
        digest = hashlib.blake2b(INTENT_PREFIX + b64decode(tx_bytes), digest_size=32).digest()
        signature = self._signing_key.sign(digest).signature
        return b64encode(bytes([ED25519_FLAG]) + signature + self._public_key).decode()

    @classmethod
    def from_private_key(cls, private_key: str, source: str = None):
        private_key = private_key.strip()
        if private_key.startswith(SUI_PRIVATE_KEY_HRP):
            hrp, data = bech32.bech32_decode(private_key)
            if hrp != SUI_PRIVATE_KEY_HRP or data is None:
                raise CredentialError('bad bech32 checksum or prefix')
            raw = bech32.convertbits(data, 5, 8, False)
            if raw is None or len(raw) != 33:
                raise CredentialError('bad bech32 payload length')
            if raw[0] != ED25519_FLAG:
                raise CredentialError(f'unsupported key scheme flag {raw[0]}, only ed25519 is supported')
            return cls(bytes(raw[1:]), source=source)

        try:
            raw = bytes.fromhex(private_key.removeprefix("0x"))
        except ValueError:
            raise CredentialError('not a suiprivkey or hex key') from None
        return cls(raw, source=source)

    @classmethod
    def from_mnemonic(cls, mnemonic: str, source: str = None, path: str = SUI_DERIVATION_PATH):
        try:
            seed = seed_from_mnemonic(" ".join(mnemonic.lower().split()), "")
        except ValidationError as err:
            raise CredentialError(str(err)) from None
        return cls(derive_ed25519(seed, path), source=source)


def derive_ed25519(seed: bytes, path: str) -> bytes:
    " SLIP-0010 ed25519 derivation, every level is hardened "
    digest = hmac.new(b"ed25519 seed", seed, hashlib.sha512).digest()
    key, chain_code = digest[:32], digest[32:]

    levels = path.split("/")
    if levels[0] != "m":
        raise CredentialError(f'bad derivation path {path}')
    for level in levels[1:]:
        index = int(level.rstrip("'")) | 0x80000000
        digest = hmac.new(chain_code, b"\x00" + key + index.to_bytes(4, "big"), hashlib.sha512).digest()
        key, chain_code = digest[:32], digest[32:]

    return key


def load_identities(env: Mapping[str, str]) -> List[SigningIdentity]:
    identities = []
    addresses = set()

    for prefix, kind, loader in [
        (PRIVATE_KEY_PREFIX, "private key", SigningIdentity.from_private_key),
        (MNEMONIC_PREFIX, "mnemonic", SigningIdentity.from_mnemonic),
    ]:
        for name, value in env.items():
            if not name.startswith(prefix):
                continue
            value = (value or "").strip()
            if not value:
                continue

            try:
                identity = loader(value, source=name)
            except Exception as err:
                logger.error(f'[-] Soft | Invalid {kind} for {name}: {err}')
                continue

            if identity.address in addresses:
                logger.warning(f'[-] Soft | {name} duplicates already loaded wallet {identity.address}, skipping')
                continue

            addresses.add(identity.address)
            identities.append(identity)

    if not identities:
        raise NoWalletsError('No valid private keys or mnemonics found in .env')

    return identities
