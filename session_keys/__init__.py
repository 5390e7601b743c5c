from importlib.metadata import version

__version__ = version("session-keys")  # type: str

from . import config
from . import errors
from . import keys
from . import keypairs
from . import validation
from . import bundle
from .config import INTERACTIVE, SENSITIVE, HARDENED, MULTI_KEYPAIR, PEPPER, Config
from .errors import *
from .bundle import SessionKeys, MultiSessionKeys
from .session_keys import *
