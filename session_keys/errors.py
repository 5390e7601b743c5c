NOT_TEXT = "not_text"
BAD_LENGTH = "bad_length"


class SessionKeysError(Exception):
    pass


class InvalidId(SessionKeysError, ValueError):
    def __init__(self, reason: str) -> None:
        self.reason = reason  # type: str
        if reason == NOT_TEXT:
            message = "invalid id, not a US-ASCII or UTF-8 string"
        else:
            message = "invalid id, must be between 1 and 256 characters in length"
        super().__init__(message)


class InvalidPassword(SessionKeysError, ValueError):
    def __init__(self, reason: str) -> None:
        self.reason = reason  # type: str
        if reason == NOT_TEXT:
            message = "invalid password, not a US-ASCII or UTF-8 string"
        else:
            message = ("invalid password, must be between 1 and 256 " +
                       "characters in length")
        super().__init__(message)


class InvalidEntropyThreshold(SessionKeysError, ValueError):
    def __init__(self) -> None:
        super().__init__("invalid min_entropy, must be an Integer between 1 and 512")


class InvalidStrength(SessionKeysError, ValueError):
    def __init__(self) -> None:
        super().__init__(
            "invalid strength, must be INTERACTIVE (min), or SENSITIVE (strong)")


class WeakPassword(SessionKeysError, ValueError):
    def __init__(self, measured: int, required: int) -> None:
        self.measured = measured  # type: int
        self.required = required  # type: int
        super().__init__(
            "invalid password, must be at least {} bits of estimated entropy".format(
                required))


class DerivationFailed(SessionKeysError):
    """ The key derivation function itself reported an error, usually
    because it could not allocate its memory. Not retried.
    """
