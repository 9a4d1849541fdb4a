import base64
import hashlib

import bech32
import pytest
from nacl.signing import VerifyKey

from dubhe_bot.errors import CredentialError, NoWalletsError
from dubhe_bot.keys import SigningIdentity, derive_ed25519, load_identities

from tests.conftest import messages


RFC8032_SECRET = "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
RFC8032_PUBLIC = "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"

VALID_MNEMONIC = "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about"


def suiprivkey(secret_hex, flag=0):
    data = bech32.convertbits([flag] + list(bytes.fromhex(secret_hex)), 8, 5)
    return bech32.bech32_encode("suiprivkey", data)


def broken_checksum(value):
    return value[:-1] + ("p" if value[-1] != "p" else "q")


def test_address_is_blake2b_of_flag_and_public_key():
    identity = SigningIdentity.from_private_key(RFC8032_SECRET)

    assert identity.public_key.hex() == RFC8032_PUBLIC
    expected = hashlib.blake2b(bytes([0]) + bytes.fromhex(RFC8032_PUBLIC), digest_size=32).hexdigest()
    assert identity.address == "0x" + expected


def test_hex_and_bech32_keys_give_same_wallet():
    hex_identity = SigningIdentity.from_private_key("0x" + RFC8032_SECRET)
    bech_identity = SigningIdentity.from_private_key(suiprivkey(RFC8032_SECRET))

    assert bech_identity.address == hex_identity.address


@pytest.mark.parametrize(
    "value",
    [
        "not a key",
        "abcd",
        broken_checksum(suiprivkey(RFC8032_SECRET)),
        suiprivkey(RFC8032_SECRET, flag=1),
    ],
)
def test_bad_private_keys_are_rejected(value):
    with pytest.raises(CredentialError):
        SigningIdentity.from_private_key(value)


def test_identity_is_read_only():
    identity = SigningIdentity.from_private_key(RFC8032_SECRET)
    with pytest.raises(AttributeError):
        identity._address = "0x0"


def test_sign_transaction_signs_intent_digest():
    identity = SigningIdentity.from_private_key(RFC8032_SECRET)
    tx_bytes = base64.b64encode(b"transaction data").decode()

    serialized = base64.b64decode(identity.sign_transaction(tx_bytes))

    assert len(serialized) == 1 + 64 + 32
    assert serialized[0] == 0
    assert serialized[65:] == identity.public_key
    digest = hashlib.blake2b(bytes([0, 0, 0]) + b"transaction data", digest_size=32).digest()
    VerifyKey(identity.public_key).verify(digest, serialized[1:65])


def test_slip10_master_and_hardened_child():
    seed = bytes.fromhex("000102030405060708090a0b0c0d0e0f")

    assert derive_ed25519(seed, "m").hex() == "2b4be7f19ee27bbf30c667b642d5f4aa69fd169872f8fc3059c08ebae2eb19e7"
    assert derive_ed25519(seed, "m/0'").hex() == "68e0fe46dfb67e368c75379acec591dad19df3cde26e63b93a8e704f1dade7a3"


def test_mnemonic_gives_deterministic_sui_wallet():
    first = SigningIdentity.from_mnemonic(VALID_MNEMONIC)
    second = SigningIdentity.from_mnemonic("  " + VALID_MNEMONIC.replace(" ", "   ") + "\n")
    shouted = SigningIdentity.from_mnemonic(VALID_MNEMONIC.upper())
    capitalized = SigningIdentity.from_mnemonic(VALID_MNEMONIC.capitalize())

    assert first.address == second.address == shouted.address == capitalized.address
    assert first.address.startswith("0x") and len(first.address) == 66


def test_bad_mnemonic_is_rejected():
    with pytest.raises(CredentialError):
        SigningIdentity.from_mnemonic("abandon " * 11 + "abandon")


def test_load_skips_malformed_entries(logs):
    env = {
        "PRIVATE_KEY_1": "01" * 32,
        "PATH": "/usr/bin",
        "MNEMONIC_1": "this is not a valid mnemonic at all",
        "PRIVATE_KEY_2": "02" * 32,
    }

    identities = load_identities(env)

    assert [identity.source for identity in identities] == ["PRIVATE_KEY_1", "PRIVATE_KEY_2"]
    errors = messages(logs, "ERROR")
    assert len(errors) == 1
    assert "Invalid mnemonic for MNEMONIC_1" in errors[0]


def test_load_private_keys_before_mnemonics():
    env = {
        "MNEMONIC_A": VALID_MNEMONIC,
        "PRIVATE_KEY_B": "03" * 32,
    }

    identities = load_identities(env)

    assert [identity.source for identity in identities] == ["PRIVATE_KEY_B", "MNEMONIC_A"]


def test_load_skips_empty_and_duplicate_keys(logs):
    env = {
        "PRIVATE_KEY_1": "01" * 32,
        "PRIVATE_KEY_2": "   ",
        "PRIVATE_KEY_3": "0x" + "01" * 32,
    }

    identities = load_identities(env)

    assert len(identities) == 1
    assert any("duplicates" in message for message in messages(logs, "WARNING"))


def test_load_without_wallets_fails():
    with pytest.raises(NoWalletsError):
        load_identities({"PRIVATE_KEY_1": "garbage", "OTHER": "01" * 32})
