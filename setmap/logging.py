"""Package logger for setmap.

All modules log through children of the ``setmap`` logger. The first call to
``get_logger`` attaches one stderr handler to that root; container mutations
are only logged at DEBUG and only when ``SetMapConfig.log_operations`` is on.
"""

import logging
import sys

ROOT_LOGGER_NAME = "setmap"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _configure_root() -> logging.Logger:
    global _configured

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _configured:
        return root

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(logging.INFO)
    _configured = True
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``setmap`` root.

    Args:
        name: Logger name, typically ``__name__`` of the calling module.

    Returns:
        Logger inheriting level and handler from the package root.
    """
    _configure_root()
    return logging.getLogger(name)


def enable_debug_logging() -> None:
    """Show DEBUG records, such as the per-operation records of a ``SetMap``."""
    _configure_root().setLevel(logging.DEBUG)
