"""
leandash - Python client for the LeanCloud dashboard API.

Usage:
    >>> from leandash import DashboardClient, Region
    >>>
    >>> client = DashboardClient.by_region(Region.CN)
    >>> client.get('/1.1/clients/self').json()
"""
import logging

from .version import __version__
from .core.api import (
    DashboardClient,
    DashboardConfig,
    Region,
    RegionResolver,
    RequestOptions,
)
from .core.cookies import CookieStore
from .core.exceptions import (
    LeanException,
    DashboardError,
    APIError,
    HTTPStatusError,
    CookieStoreError,
    TwoFactorError,
    TwoFactorChallengeError,
    InvalidTwoFactorCodeError,
    TwoFactorExchangeError,
    FatalConfigurationError,
    RegionResolutionError,
    UnknownRegionError,
    InvalidMethodError,
)


def setup_logging(level=logging.INFO):
    """
    Configure logging for leandash modules.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'leandash',
        'leandash.core.api.client.dashboard_client',
        'leandash.core.api.two_factor.handler',
        'leandash.core.cookies.cookie_store',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'DashboardClient',
    'DashboardConfig',
    'Region',
    'RegionResolver',
    'RequestOptions',
    'CookieStore',
    'LeanException',
    'DashboardError',
    'APIError',
    'HTTPStatusError',
    'CookieStoreError',
    'TwoFactorError',
    'TwoFactorChallengeError',
    'InvalidTwoFactorCodeError',
    'TwoFactorExchangeError',
    'FatalConfigurationError',
    'RegionResolutionError',
    'UnknownRegionError',
    'InvalidMethodError',
    'setup_logging',
    '__version__',
]
