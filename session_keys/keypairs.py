import base64
from typing import Optional

from nacl.public import PrivateKey, PublicKey, Box
from nacl.signing import SigningKey, VerifyKey
from nacl.exceptions import BadSignatureError


def b64(bytes_: bytes) -> str:
    """ Standard alphabet, padded, no newline. """
    return base64.b64encode(bytes_).decode("ascii")


class KeyPair:
    """ Base class for a keypair built deterministically from a 32 byte
    seed. Subclasses set secret_key and public_key.
    """

    def __init__(self, secret_key, public_key) -> None:
        self.secret_key = secret_key
        self.public_key = public_key

    @property
    def public_bytes(self) -> bytes:
        return bytes(self.public_key)

    @property
    def secret_bytes(self) -> bytes:
        return bytes(self.secret_key)

    @property
    def public_b64(self) -> str:
        return b64(self.public_bytes)

    @property
    def secret_b64(self) -> str:
        return b64(self.secret_bytes)

    def as_dict(self, secret: bool = False) -> dict:
        result = {"public_key": self.public_b64}
        if secret:
            result["secret_key"] = self.secret_b64
        return result

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and \
            self.secret_bytes == other.secret_bytes

    def __hash__(self) -> int:
        return hash(self.public_bytes)

    def __repr__(self) -> str:
        return "<{}: public_key:{}>".format(type(self).__name__, self.public_b64)


class EncryptionKeyPair(KeyPair):
    """ Curve25519 key agreement keypair. The seed is the private scalar. """

    @classmethod
    def from_seed(cls, seed: bytes) -> "EncryptionKeyPair":
        secret_key = PrivateKey(seed)  # type: PrivateKey
        return cls(secret_key, secret_key.public_key)

    def box(self, peer_public) -> Box:
        """ Returns a NaCl Box between this keypair's secret key and a
        peer's public key.

        :param peer_public: a PublicKey, an EncryptionKeyPair or 32 raw bytes
        :returns: a nacl.public.Box
        """
        if isinstance(peer_public, EncryptionKeyPair):
            peer_public = peer_public.public_key
        elif not isinstance(peer_public, PublicKey):
            peer_public = PublicKey(peer_public)
        return Box(self.secret_key, peer_public)

    def encrypt(self, plaintext: bytes, peer_public) -> bytes:
        return bytes(self.box(peer_public).encrypt(plaintext))

    def decrypt(self, ciphertext: bytes, peer_public) -> bytes:
        return self.box(peer_public).decrypt(ciphertext)


class SigningKeyPair(KeyPair):
    """ Ed25519 signing keypair. The secret form is the 64 byte
    seed + public key encoding used by libsodium.
    """

    @classmethod
    def from_seed(cls, seed: bytes) -> "SigningKeyPair":
        secret_key = SigningKey(seed)  # type: SigningKey
        return cls(secret_key, secret_key.verify_key)

    @property
    def seed(self) -> bytes:
        return bytes(self.secret_key)

    @property
    def secret_bytes(self) -> bytes:
        return self.seed + self.public_bytes

    def sign(self, message: bytes) -> bytes:
        """ Returns the 64 byte detached signature of message. """
        return self.secret_key.sign(message).signature

    def verify(self, message: bytes, signature: bytes,
               verify_key: Optional[VerifyKey] = None) -> bool:
        """ Checks a detached signature, against this keypair's public key
        unless another verify_key is given.

        :returns: True if the signature is valid, otherwise False
        """
        key = verify_key or self.public_key  # type: VerifyKey
        try:
            key.verify(message, signature)
        except BadSignatureError:
            return False
        return True
