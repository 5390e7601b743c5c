from typing import Dict, List, Tuple, Any

from nacl.secret import SecretBox

from .keypairs import EncryptionKeyPair, SigningKeyPair

# Seed roles in the hardened construction. Seeds 3 to 7 are reserved
# for future use and are never read.
SIMPLE_BOX_SEED = 0  # type: int
ENCRYPTION_SEED = 1  # type: int
SIGNING_SEED = 2  # type: int


class SessionKeys:
    """ Key material from the hardened construction: a symmetric
    SecretBox, one encryption keypair and one signing keypair.
    """

    def __init__(self,
                 id_: str,
                 simple_box_key: bytes,
                 enc_keypair: EncryptionKeyPair,
                 sig_keypair: SigningKeyPair,
                 process_time: float) -> None:
        """ SessionKeys object constructor.

        :param id_: the hex identity token
        :param simple_box_key: a 32 byte key for SecretBox
        :param enc_keypair: the Curve25519 keypair
        :param sig_keypair: the Ed25519 keypair
        :param process_time: elapsed milliseconds, diagnostic only
        """
        self.id = id_  # type: str
        self.simple_box_key = simple_box_key  # type: bytes
        self.enc_keypair = enc_keypair  # type: EncryptionKeyPair
        self.sig_keypair = sig_keypair  # type: SigningKeyPair
        self.process_time = process_time  # type: float

    @property
    def simple_box(self) -> SecretBox:
        """ SecretBox on seed 0. Its encrypt() picks a random nonce and
        prepends it to the ciphertext, so decrypt() needs nothing else.
        """
        return SecretBox(self.simple_box_key)

    @property
    def enc_pub_key_b64(self) -> str:
        return self.enc_keypair.public_b64

    @property
    def sig_pub_key_b64(self) -> str:
        return self.sig_keypair.public_b64

    def fingerprint(self) -> Tuple:
        """ Every derived value, excluding process_time. """
        return (self.id, self.simple_box_key,
                self.enc_keypair.secret_bytes, self.enc_keypair.public_bytes,
                self.sig_keypair.secret_bytes, self.sig_keypair.public_bytes)

    def as_dict(self) -> Dict[str, Any]:
        """ Transforms this object into a dictionary of its public,
        transportable values.
        """
        return {
            "id": self.id,
            "enc_pub_key_b64": self.enc_pub_key_b64,
            "sig_pub_key_b64": self.sig_pub_key_b64,
            "process_time": self.process_time
        }

    def __str__(self) -> str:
        return ("<SessionKeys: id:{} enc_pub_key:{} " +
                "sig_pub_key:{} process_time:{}ms>").format(
                    self.id, self.enc_pub_key_b64,
                    self.sig_pub_key_b64, self.process_time)

    def __repr__(self) -> str:
        return str(self)


class MultiSessionKeys:
    """ Key material from the multi-keypair construction: every seed
    yields an encryption keypair and a signing keypair.
    """

    def __init__(self,
                 id_: str,
                 byte_keys: Tuple[bytes, ...],
                 keypairs: Tuple[Tuple[EncryptionKeyPair, SigningKeyPair], ...],
                 process_time: float) -> None:
        self.id = id_  # type: str
        self.byte_keys = byte_keys  # type: Tuple[bytes, ...]
        self.keypairs = keypairs
        self.process_time = process_time  # type: float

    @property
    def hex_keys(self) -> Tuple[str, ...]:
        return tuple(key.hex() for key in self.byte_keys)

    @property
    def enc_keypairs(self) -> Tuple[EncryptionKeyPair, ...]:
        return tuple(enc for enc, _ in self.keypairs)

    @property
    def sig_keypairs(self) -> Tuple[SigningKeyPair, ...]:
        return tuple(sig for _, sig in self.keypairs)

    @property
    def enc_keypairs_b64(self) -> Tuple[Dict[str, str], ...]:
        return tuple(enc.as_dict(secret=True) for enc in self.enc_keypairs)

    @property
    def sig_keypairs_b64(self) -> Tuple[Dict[str, str], ...]:
        return tuple(sig.as_dict(secret=True) for sig in self.sig_keypairs)

    def fingerprint(self) -> Tuple:
        return (self.id, self.byte_keys) + tuple(
            (enc.public_bytes, sig.public_bytes) for enc, sig in self.keypairs)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "hex_keys": list(self.hex_keys),
            "enc_keypairs_b64": list(self.enc_keypairs_b64),
            "sig_keypairs_b64": list(self.sig_keypairs_b64),
            "process_time": self.process_time
        }

    def __str__(self) -> str:
        return "<MultiSessionKeys: id:{} keypairs:{} process_time:{}ms>".format(
            self.id, len(self.keypairs), self.process_time)

    def __repr__(self) -> str:
        return str(self)


def assemble_hardened(id_: str, seeds: Tuple[bytes, ...],
                      process_time: float) -> SessionKeys:
    """ Builds a SessionKeys from seeds 0, 1 and 2. """
    return SessionKeys(
        id_,
        seeds[SIMPLE_BOX_SEED],
        EncryptionKeyPair.from_seed(seeds[ENCRYPTION_SEED]),
        SigningKeyPair.from_seed(seeds[SIGNING_SEED]),
        process_time)


def assemble_multi(id_: str, seeds: Tuple[bytes, ...],
                   process_time: float) -> MultiSessionKeys:
    """ Builds a MultiSessionKeys. The same seed value goes into both
    keypairs of a pair; the two derivations are unrelated.
    """
    keypairs = []  # type: List[Tuple[EncryptionKeyPair, SigningKeyPair]]
    for seed in seeds:
        keypairs.append((EncryptionKeyPair.from_seed(seed),
                         SigningKeyPair.from_seed(seed)))
    return MultiSessionKeys(id_, tuple(seeds), tuple(keypairs), process_time)
