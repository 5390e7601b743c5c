import collections
import logging
import time
from functools import wraps
from typing import Any, Callable, Dict, Tuple, Union

from . import config
from .config import Config, Profile, HARDENED, MULTI_KEYPAIR, SENSITIVE
from .bundle import SessionKeys, MultiSessionKeys, assemble_hardened, assemble_multi
from .errors import SessionKeysError
from .keys import derive_identity, expand_secret, split_seeds
from .validation import validate_inputs, check_entropy, zxcvbn_entropy

DEFAULT_CONFIG = Config(construction=HARDENED,
                        pepper=config.PEPPER,
                        estimator=zxcvbn_entropy)  # type: Config

_ASSEMBLERS = {
    HARDENED.name: assemble_hardened,
    MULTI_KEYPAIR.name: assemble_multi
}  # type: Dict[str, Callable]


class Outcome(collections.namedtuple("Outcome", ["bundle", "error"])):
    __slots__ = ()

    @property
    def ok(self) -> bool:
        return self.error is None


def log_time_elapsed(func: Callable) -> Callable:
    """ Decorator. Times completion of function and logs at level INFO. """

    @wraps(func)
    def inner(*args, **kwargs) -> Any:
        """ Decorator inner function. """
        start_time = time.time()  # type: float
        result = func(*args, **kwargs)
        end_time = time.time()  # type: float
        seconds = end_time - start_time  # type: float
        logging.info("Derivation completed in {0:.3f} seconds".format(seconds))
        return result

    return inner


def default_config(**kwargs) -> Config:
    """ Returns DEFAULT_CONFIG with the given fields replaced, e.g.
    default_config(construction=MULTI_KEYPAIR).
    """
    return DEFAULT_CONFIG._replace(**kwargs)


@log_time_elapsed
def derive(id_: str,
           password: str,
           strength: Profile = SENSITIVE,
           min_entropy: int = config.DEFAULT_MIN_ENTROPY,
           cfg: Config = DEFAULT_CONFIG) -> Union[SessionKeys, MultiSessionKeys]:
    """ Deterministically derives key material from an id and a password.
    Nothing is stored; the same arguments always give the same keys.

    :param id_: a unique US-ASCII or UTF-8 text identifier such as a
        username or email address, 1 to 256 characters
    :param password: a strong US-ASCII or UTF-8 password or passphrase,
        1 to 256 characters
    :param strength: INTERACTIVE or SENSITIVE scrypt cost profile
    :param min_entropy: the minimum estimated password entropy in bits,
        between 1 and 512
    :param cfg: construction, pepper and entropy estimator to use
    :returns: a SessionKeys or MultiSessionKeys, per cfg.construction
    :raises SessionKeysError: if the arguments are invalid, the password
        is too weak or scrypt fails
    """
    validate_inputs(id_, password, strength, min_entropy)
    check_entropy(password, min_entropy, cfg.estimator)

    construction = cfg.construction  # type: config.Construction
    logging.info("Deriving keys (%s, %s)...", construction.name, strength.name)
    start_time = time.time()  # type: float

    identity = derive_identity(id_, construction, cfg.pepper)  # type: str
    logging.debug("Derived identity token: %s", identity)

    secret_block = expand_secret(password, identity, strength,
                                 construction.digest_size, cfg.pepper)  # type: bytes
    seeds = split_seeds(secret_block)  # type: Tuple[bytes, ...]
    del secret_block

    process_time = round((time.time() - start_time) * 1000, 2)  # type: float
    return _ASSEMBLERS[construction.name](identity, seeds, process_time)


def try_derive(*args, **kwargs) -> Outcome:
    """ Same as derive(), but returns an Outcome instead of raising.
    Outcome.bundle is None when Outcome.error is set.
    """
    try:
        return Outcome(derive(*args, **kwargs), None)
    except SessionKeysError as ex:
        return Outcome(None, ex)
