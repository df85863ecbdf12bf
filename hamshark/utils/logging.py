# hamshark/utils/logging.py
import logging
import sys

from hamshark.utils.settings import LOG_LEVEL

_ROOT = "hamshark"
_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s - %(message)s"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(_ROOT)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
        root.setLevel(LOG_LEVEL.upper())
        root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    """Namespaced logger; the stdout handler is attached on first use."""
    _configure_root()
    if not name.startswith(_ROOT):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
