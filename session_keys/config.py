import collections
from typing import Dict

# libsodium style cost limits. Opslimit is the maximum number of
# computations to perform, memlimit the maximum RAM in bytes. They are
# turned into scrypt's N, r and p by keys.pick_params().
#
# See : https://download.libsodium.org/doc/password_hashing/scrypt.html
SCRYPT_OPSLIMIT_INTERACTIVE = 2**19  # type: int
SCRYPT_MEMLIMIT_INTERACTIVE = 2**24  # type: int

# About 2 seconds on a 2.8 Ghz Core i7 and up to 1 gigabyte of RAM.
SCRYPT_OPSLIMIT_SENSITIVE = 2**25  # type: int
SCRYPT_MEMLIMIT_SENSITIVE = 2**30  # type: int

SCRYPT_DIGEST_SIZE_ID = 32  # type: int
SCRYPT_DIGEST_SIZE_PASSWORD = 256  # type: int
SEED_SIZE = 32  # type: int

# Site-wide common value concatenated with whatever is being hashed, as
# a measure against dictionary style attacks. It is public, and it must
# be identical across implementations.
PEPPER = "f01f0a0c44a2d1e7e5b00d7dc78941d404474a90ce7f4ae9d1432bf76fa169e7"  # type: str

MIN_TEXT_LENGTH = 1  # type: int
MAX_TEXT_LENGTH = 256  # type: int
MIN_ENTROPY = 1  # type: int
MAX_ENTROPY = 512  # type: int
DEFAULT_MIN_ENTROPY = 75  # type: int

Profile = collections.namedtuple("Profile", ["name", "opslimit", "memlimit"])
INTERACTIVE = Profile(name="interactive",
                      opslimit=SCRYPT_OPSLIMIT_INTERACTIVE,
                      memlimit=SCRYPT_MEMLIMIT_INTERACTIVE)
SENSITIVE = Profile(name="sensitive",
                    opslimit=SCRYPT_OPSLIMIT_SENSITIVE,
                    memlimit=SCRYPT_MEMLIMIT_SENSITIVE)
PROFILES = {p.name: p for p in (INTERACTIVE, SENSITIVE)}  # type: Dict[str, Profile]

# The two constructions are not bit-compatible with each other. A
# deployment picks one and sticks with it.
Construction = collections.namedtuple(
    "Construction", ["name", "hardened_id", "digest_size"])
HARDENED = Construction(name="hardened",
                        hardened_id=True,
                        digest_size=SCRYPT_DIGEST_SIZE_PASSWORD)
MULTI_KEYPAIR = Construction(name="multi_keypair",
                             hardened_id=False,
                             digest_size=SCRYPT_DIGEST_SIZE_PASSWORD)
CONSTRUCTIONS = {c.name: c for c in (HARDENED, MULTI_KEYPAIR)}  # type: Dict[str, Construction]

Config = collections.namedtuple(
    "Config", ["construction", "pepper", "estimator"])
