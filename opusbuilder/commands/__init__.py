from .link import link
from .probe import probe
from .init import init
from .config import config
from .log import log
from .version import version

__all__ = ["link", "probe", "init", "config", "log", "version"]
