import logging
import sys
import os
import getpass

from . import config
from .errors import SessionKeysError
from .session_keys import derive, default_config

FORMAT = "%(asctime)s %(levelname)s: %(message)s"  # type: str


def setup_logging() -> None:
    stdout_hdlr = logging.StreamHandler(sys.stdout)  # type: logging.StreamHandler
    stdout_hdlr.setFormatter(logging.Formatter(FORMAT))
    stdout_hdlr.setLevel(
        logging.ERROR if os.environ.get("SK_LOG") == "ERR" else logging.INFO)
    logging.basicConfig(level=logging.INFO, handlers=[stdout_hdlr])


def main() -> None:
    """ Prompts for an id and passphrase, derives the keys and prints
    the public parts. Usage: python -m session_keys [interactive|sensitive] [multi]
    """
    setup_logging()

    args = [arg.lower() for arg in sys.argv[1:]]
    strength = config.SENSITIVE  # type: config.Profile
    for arg in args:
        if arg in config.PROFILES:
            strength = config.PROFILES[arg]
    construction = config.MULTI_KEYPAIR if "multi" in args \
        else config.HARDENED  # type: config.Construction

    id_ = input("Enter id: ")  # type: str
    passphrase = getpass.getpass("Enter passphrase: ")  # type: str
    confirm = getpass.getpass("Confirm your passphrase: ")  # type: str
    if passphrase != confirm:
        print("Passphrase and confirmation did not match")
        sys.exit(1)

    try:
        keys = derive(id_, passphrase, strength,
                      cfg=default_config(construction=construction))
    except SessionKeysError as ex:
        print(ex)
        sys.exit(1)

    for name, value in keys.as_dict().items():
        if name == "hex_keys":
            continue
        if name.endswith("keypairs_b64"):
            value = [pair["public_key"] for pair in value]
        print("{}: {}".format(name, value))


if __name__ == "__main__":
    main()
