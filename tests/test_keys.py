import pytest
import nacl.pwhash

from session_keys import keys, config, errors

ID = "user@example.com"


def test_sha256():
    assert keys.sha256(b"abc").hex() == \
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    assert keys.sha256(ID.encode("utf-8")).hex() == \
        "b4c9a289323b21a01c3e940f150eb9b8c542587f1abfd8f0e1cc1ffc5e475514"

def test_peppered():
    bytes_ = keys.peppered("ab", config.PEPPER)
    assert isinstance(bytes_, bytes)
    assert bytes_ == b"ab2" + config.PEPPER.encode("ascii") + b"64"
    assert keys.peppered("é", "p") == "é1p1".encode("utf-8")

def test_pick_params():
    assert keys.pick_params(config.SCRYPT_OPSLIMIT_INTERACTIVE,
                            config.SCRYPT_MEMLIMIT_INTERACTIVE) == (1 << 14, 8, 1)
    assert keys.pick_params(config.SCRYPT_OPSLIMIT_SENSITIVE,
                            config.SCRYPT_MEMLIMIT_SENSITIVE) == (1 << 20, 8, 1)
    # opslimit is clamped to 32768 and is the binding limit here
    assert keys.pick_params(1, 2**24) == (1 << 10, 8, 1)

@pytest.mark.skipif(not nacl.pwhash.scrypt.AVAILABLE,
                    reason="libsodium built without scryptsalsa208sha256")
def test_scrypt_hash_matches_libsodium():
    password, salt = keys.sha256(b"password"), keys.sha256(b"salt")
    expected = nacl.pwhash.scrypt.kdf(
        64, password, salt,
        opslimit=config.SCRYPT_OPSLIMIT_INTERACTIVE,
        memlimit=config.SCRYPT_MEMLIMIT_INTERACTIVE)
    assert keys.scrypt_hash(password, salt, config.INTERACTIVE, 64) == expected

def test_scrypt_failure(monkeypatch):
    def out_of_memory(*args, **kwargs):
        raise MemoryError()
    monkeypatch.setattr(keys.scrypt, "hash", out_of_memory)
    with pytest.raises(errors.DerivationFailed) as excinfo:
        keys.scrypt_hash(b"\x00" * 32, b"\x00" * 32, config.SENSITIVE, 32)
    assert "sensitive" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, MemoryError)

def test_derive_identity_simple():
    token = keys.derive_identity(ID, config.MULTI_KEYPAIR)
    assert token == \
        "b4c9a289323b21a01c3e940f150eb9b8c542587f1abfd8f0e1cc1ffc5e475514"

def test_derive_identity_hardened():
    token = keys.derive_identity(ID, config.HARDENED)
    assert token == \
        "f8ace21f75792cf9b73e0211b4f0cf4a0a131cfb7c30f8ae37c1fa7d42f67b16"
    assert keys.derive_identity(ID, config.HARDENED, pepper="00" * 32) != token
    assert keys.derive_identity("user@example.org", config.HARDENED) != token

def test_expand_secret():
    token = keys.derive_identity(ID, config.MULTI_KEYPAIR)
    block = keys.expand_secret("my secret password", token, config.INTERACTIVE)
    assert isinstance(block, bytes)
    assert len(block) == config.SCRYPT_DIGEST_SIZE_PASSWORD
    assert block == keys.expand_secret(
        "my secret password", token, config.INTERACTIVE)

    other_token = keys.derive_identity("someone@example.com", config.MULTI_KEYPAIR)
    assert keys.expand_secret(
        "my secret password", other_token, config.INTERACTIVE) != block
    assert keys.expand_secret(
        "my secret passworD", token, config.INTERACTIVE) != block

    short = keys.expand_secret("my secret password", token, config.INTERACTIVE,
                               digest_size=32)
    assert len(short) == 32

def test_split_seeds():
    block = bytes(range(256))
    seeds = keys.split_seeds(block)
    assert isinstance(seeds, tuple)
    assert len(seeds) == 8
    for i, seed in enumerate(seeds):
        assert seed == block[i * 32:(i + 1) * 32]
    assert b"".join(seeds) == block
    with pytest.raises(ValueError):
        keys.split_seeds(b"\x00" * 33)
