"""LeanCloud dashboard API module."""
from .config import DashboardConfig, DASHBOARD_ENV_VAR, DEFAULT_ORIGINS
from .regions import Region, RegionResolver
from .request import RequestOptions, RequestBuilder, ResponseHandler
from .session import SessionFactory
from .two_factor import TwoFactorHandler, prompt_two_factor_code, validate_code
from .client import DashboardClient

__all__ = [
    # Client
    'DashboardClient',

    # Configuration
    'DashboardConfig',
    'DASHBOARD_ENV_VAR',
    'DEFAULT_ORIGINS',
    'Region',
    'RegionResolver',

    # Requests
    'RequestOptions',
    'RequestBuilder',
    'ResponseHandler',
    'SessionFactory',

    # Two-factor authentication
    'TwoFactorHandler',
    'prompt_two_factor_code',
    'validate_code',
]
