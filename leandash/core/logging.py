"""Logging utilities for leandash modules."""

import logging

PACKAGE_LOGGER = 'leandash'

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Module logger under the leandash namespace.

    Call it once per module with ``__name__``. Names outside the package
    are nested under ``leandash`` so a single level set on the package
    logger (see ``leandash.setup_logging``) reaches every module. Levels
    are left unset here; records propagate to whatever handlers the
    application configured on the root logger.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + '.'):
        name = f'{PACKAGE_LOGGER}.{name}'
    logger = logging.getLogger(name)
    logger.propagate = True
    return logger
