"""Logging utility for coordtransform"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('coordtransform')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS: set = set()


def warn_once(warning: str):
    """Logs a warning the first time a given message is seen; repeats are dropped"""
    if warning not in _WARNINGS:
        LOGGER.warning(warning)
        _WARNINGS.add(warning)
