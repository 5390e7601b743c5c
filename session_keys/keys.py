from typing import Tuple

from Crypto.Hash import SHA256
import scrypt

from . import config
from .errors import DerivationFailed


def sha256(bytes_: bytes) -> bytes:
    h = SHA256.new()
    h.update(bytes_)
    return h.digest()


def peppered(value: str, pepper: str) -> bytes:
    """ UTF-8 bytes of value, its length, the pepper and the pepper's
    length, concatenated. Lengths are decimal character counts.
    """
    joined = "{}{}{}{}".format(
        value, len(value), pepper, len(pepper))  # type: str
    return joined.encode("utf-8")


def pick_params(opslimit: int, memlimit: int) -> Tuple[int, int, int]:
    """ Translates libsodium opslimit/memlimit into scrypt (N, r, p)
    using the same rule as libsodium's pickparams(), so that output
    matches crypto_pwhash_scryptsalsa208sha256 byte for byte.

    :param opslimit: maximum number of computations
    :param memlimit: maximum RAM in bytes
    :returns: a tuple of scrypt's N, r and p
    """
    opslimit = max(opslimit, 32768)
    r = 8  # type: int
    memory_bound = opslimit >= memlimit // 32  # type: bool

    if memory_bound:
        max_n = memlimit // (r * 128)  # type: int
    else:
        max_n = opslimit // (r * 4)

    n_log2 = 1  # type: int
    while n_log2 < 63 and (1 << n_log2) <= max_n // 2:
        n_log2 += 1

    p = 1  # type: int
    if memory_bound:
        max_rp = min((opslimit // 4) // (1 << n_log2), 0x3fffffff)  # type: int
        p = max_rp // r
    return 1 << n_log2, r, p


def scrypt_hash(password: bytes, salt: bytes,
                profile: config.Profile, buflen: int) -> bytes:
    """ Runs scrypt with the cost parameters of a named profile.

    :raises DerivationFailed: if scrypt reports an error or runs out of memory
    """
    t = pick_params(profile.opslimit, profile.memlimit)  # type: Tuple[int, int, int]
    n, r, p = t
    try:
        return scrypt.hash(password, salt, N=n, r=r, p=p, buflen=buflen)
    except (scrypt.error, MemoryError) as ex:
        raise DerivationFailed(
            "scrypt failed for the {} profile: {}".format(
                profile.name, type(ex).__name__)) from ex


def derive_identity(id_: str, construction: config.Construction,
                    pepper: str = config.PEPPER) -> str:
    """ Collapses an identifier into a 64 character hex identity token.

    The hardened form runs the identifier and the pepper through scrypt
    so that a list of known identifiers can not be matched against
    tokens quickly, even with a local copy of the tokens.

    :param id_: a validated text identifier
    :param construction: HARDENED or MULTI_KEYPAIR
    :param pepper: the site-wide pepper
    :returns: the hex encoded identity token
    """
    id_sha256 = sha256(id_.encode("utf-8"))  # type: bytes
    if not construction.hardened_id:
        return id_sha256.hex()

    id_sha256_pepper = sha256(peppered(id_, pepper))  # type: bytes
    return scrypt_hash(id_sha256, id_sha256_pepper,
                       config.INTERACTIVE, config.SCRYPT_DIGEST_SIZE_ID).hex()


def expand_secret(password: str, identity: str, profile: config.Profile,
                  digest_size: int = config.SCRYPT_DIGEST_SIZE_PASSWORD,
                  pepper: str = config.PEPPER) -> bytes:
    """ Derives the secret block every seed is cut from.

    The password is pre-hashed with SHA256 since scrypt implementations
    silently reduce long passwords to SHA256(password) anyway.

    :param password: a validated text password
    :param identity: the hex identity token for this id
    :param profile: INTERACTIVE or SENSITIVE
    :param digest_size: block size in bytes
    :param pepper: the site-wide pepper
    :returns: digest_size secret bytes
    """
    password_sha256 = sha256(password.encode("utf-8"))  # type: bytes
    salt = sha256(peppered(identity, pepper))  # type: bytes
    return scrypt_hash(password_sha256, salt, profile, digest_size)


def split_seeds(block: bytes, size: int = config.SEED_SIZE) -> Tuple[bytes, ...]:
    """ Cuts a secret block into consecutive, non-overlapping seeds,
    seed 0 first.
    """
    if len(block) % size:
        raise ValueError("Block length is not a multiple of the seed size")
    return tuple(block[i:i + size] for i in range(0, len(block), size))
