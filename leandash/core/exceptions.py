"""
Exceptions raised by the dashboard client.

Two families exist. DashboardError covers failures of a single call
(API errors, HTTP errors, 2FA problems, cookie persistence) and is safe to
handle per request. FatalConfigurationError covers misconfiguration that
no retry can fix and is meant to reach the top-level handler.
"""
from typing import Optional


class LeanException(Exception):
    """Base exception for all leandash errors."""

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class DashboardError(LeanException):
    """A single dashboard call failed."""
    pass


class APIError(DashboardError):
    """Structured error returned by the dashboard as a JSON body."""

    def __init__(
        self,
        code: int,
        message: str,
        status_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            code: Dashboard error code from the body
            message: Dashboard error message from the body
            status_code: HTTP status of the response
        """
        self.code = code
        self.status_code = status_code
        super().__init__(message, code)

    def __str__(self) -> str:
        return f"LeanCloud API error {self.code}: {self.message}"


class HTTPStatusError(DashboardError):
    """Non-2xx response without a usable JSON error body."""

    def __init__(self, status_code: int, method: str, path: str) -> None:
        self.status_code = status_code
        self.method = method
        self.path = path
        super().__init__(f"HTTP Error: {status_code}, {method} {path}")


class CookieStoreError(DashboardError):
    """The cookie file could not be read or written."""
    pass


class TwoFactorError(DashboardError):
    """Base class for two-factor authentication failures."""
    pass


class TwoFactorChallengeError(TwoFactorError):
    """The 401 challenge body did not carry a usable token."""
    pass


class InvalidTwoFactorCodeError(TwoFactorError):
    """The one-time code is not numeric."""
    pass


class TwoFactorExchangeError(TwoFactorError):
    """The dashboard rejected the token/code exchange."""

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        status_code: Optional[int] = None
    ) -> None:
        self.status_code = status_code
        super().__init__(message, error_code)


class FatalConfigurationError(LeanException):
    """Misconfiguration that must propagate to the top level."""
    pass


class RegionResolutionError(FatalConfigurationError):
    """An application ID could not be mapped to a region."""

    def __init__(self, app_id: str, reason: str) -> None:
        self.app_id = app_id
        super().__init__(f"Cannot resolve region of app {app_id}: {reason}")


class UnknownRegionError(FatalConfigurationError):
    """Region identifier missing from the origin table."""

    def __init__(self, region: object) -> None:
        self.region = region
        super().__init__(f"Invalid region: {region}")


class InvalidMethodError(FatalConfigurationError):
    """HTTP verb the client does not dispatch."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Invalid method: {method}")
