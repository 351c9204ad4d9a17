"""Loggers under the cidshell namespace."""
import logging
from typing import List

NAMESPACE = 'cidshell'


def get_logger(name: str) -> logging.Logger:
    """
    Logger for one area of cidshell, e.g. get_logger('cidshell.store').

    Until the root logger is configured (``--verbose`` or basicConfig), only
    warnings and errors get through, so debug lines never break up the live
    progress line.
    """
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        logger.setLevel(logging.WARNING)
    return logger


def namespace_loggers() -> List[logging.Logger]:
    """Every logger created so far under the cidshell namespace, top level first."""
    names = sorted(
        name for name in logging.root.manager.loggerDict
        if name == NAMESPACE or name.startswith(NAMESPACE + '.')
    )
    if NAMESPACE not in names:
        names.insert(0, NAMESPACE)
    return [logging.getLogger(name) for name in names]
