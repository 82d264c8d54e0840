"""Logging utility for geodesic_destination"""

__all__ = ['LOGGER', 'warn_once']

import logging
from typing import Set

LOGGER = logging.getLogger('geodesic_destination')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_LOG_HANDLER)

_WARNED: Set[str] = set()


def warn_once(msg: str, *args):
    """
    Logs a warning through LOGGER the first time a given message template is seen.
    Later calls with the same template are dropped, regardless of args.
    """
    if msg in _WARNED:
        return

    LOGGER.warning(msg, *args)
    _WARNED.add(msg)
