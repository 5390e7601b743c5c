import math
import logging
from typing import Any, Callable

from zxcvbn import zxcvbn

from . import config
from .errors import (
    NOT_TEXT, BAD_LENGTH,
    InvalidId, InvalidPassword, InvalidEntropyThreshold,
    InvalidStrength, WeakPassword
)


def is_text(value: Any) -> bool:
    """ True for a str that can be encoded as UTF-8. Lone surrogates
    can not, so they are rejected along with bytes and non-strings.
    """
    if not isinstance(value, str):
        return False
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def has_valid_length(value: str) -> bool:
    return config.MIN_TEXT_LENGTH <= len(value) <= config.MAX_TEXT_LENGTH


def validate_inputs(id_: Any, password: Any, strength: Any, min_entropy: Any) -> None:
    """ Structural checks on all arguments, in a fixed order, before any
    password scoring or hashing is done.

    :param id_: a unique text identifier such as a username or email
    :param password: a text password or passphrase
    :param strength: one of the named scrypt profiles
    :param min_entropy: minimum estimated password entropy, in bits
    :raises InvalidId: if id_ is not text, or has a bad length
    :raises InvalidPassword: if password is not text, or has a bad length
    :raises InvalidEntropyThreshold: if min_entropy is not an int in range
    :raises InvalidStrength: if strength is not a known profile
    """
    if not is_text(id_):
        raise InvalidId(NOT_TEXT)
    if not has_valid_length(id_):
        raise InvalidId(BAD_LENGTH)

    if not is_text(password):
        raise InvalidPassword(NOT_TEXT)
    # Zxcvbn takes a *long* time on long strings, hence the upper bound.
    if not has_valid_length(password):
        raise InvalidPassword(BAD_LENGTH)

    if isinstance(min_entropy, bool) or not isinstance(min_entropy, int) \
            or not config.MIN_ENTROPY <= min_entropy <= config.MAX_ENTROPY:
        raise InvalidEntropyThreshold()

    if not isinstance(strength, config.Profile) \
            or strength not in config.PROFILES.values():
        raise InvalidStrength()


def zxcvbn_entropy(password: str) -> float:
    """ Estimates password entropy in bits as log2 of zxcvbn's guess count. """
    result = zxcvbn(password, max_length=config.MAX_TEXT_LENGTH)
    return float(result["guesses_log10"]) / math.log10(2)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def check_entropy(password: str, min_entropy: int,
                  estimator: Callable[[str], float] = zxcvbn_entropy) -> int:
    """ Rejects passwords whose rounded estimated entropy is below
    min_entropy.

    :param password: an already validated password
    :param min_entropy: minimum estimated entropy in bits
    :param estimator: a callable returning estimated bits for a password
    :returns: the measured entropy, rounded to the nearest integer
    :raises WeakPassword: if the measured entropy is too low
    """
    measured = round_half_up(estimator(password))  # type: int
    if measured < min_entropy:
        logging.info("Password rejected: %d bits estimated, %d required",
                     measured, min_entropy)
        raise WeakPassword(measured, min_entropy)
    return measured
