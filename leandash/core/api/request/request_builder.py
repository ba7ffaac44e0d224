"""Request options for dashboard calls."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ...cookies import CookieStore
from ..config import DashboardConfig

XSRF_COOKIE = 'XSRF-TOKEN'
XSRF_HEADER = 'X-XSRF-TOKEN'


@dataclass
class RequestOptions:
    """
    Per-call request settings.

    Rebuilt for every call unless a caller supplies its own.

    Attributes:
        headers: Extra request headers
        cookie_store: Store whose jar is sent and updated by the call
        user_agent: Client identifier
        json: JSON body
        timeout: Transport timeout in seconds
    """
    headers: Dict[str, str] = field(default_factory=dict)
    cookie_store: Optional[CookieStore] = None
    user_agent: Optional[str] = None
    json: Any = None
    timeout: Optional[float] = None


class RequestBuilder:
    """Builds default request options for a base URL."""

    def __init__(
        self,
        base_url: str,
        cookie_store: CookieStore,
        config: DashboardConfig
    ):
        """Initializes request builder."""
        self.base_url = base_url
        self.cookie_store = cookie_store
        self.config = config

    def build_url(self, path: str) -> str:
        """Builds request URL."""
        return f"{self.base_url}{path}"

    def build_headers(self) -> Dict[str, str]:
        """Builds headers, echoing the XSRF cookie into X-XSRF-TOKEN."""
        xsrf = self.cookie_store.get(XSRF_COOKIE, self.base_url)
        return {XSRF_HEADER: xsrf}

    def build_options(self) -> RequestOptions:
        """Builds the default options of a call."""
        return RequestOptions(
            headers=self.build_headers(),
            cookie_store=self.cookie_store,
            user_agent=self.config.user_agent,
            timeout=self.config.timeout,
        )
