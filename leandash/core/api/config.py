"""
Dashboard client configuration.

Loaded once when a client is built and never mutated afterwards.
"""
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from ...version import __version__
from ..exceptions import UnknownRegionError
from .regions import Region

DASHBOARD_ENV_VAR = 'LEANCLOUD_DASHBOARD'

DEFAULT_ORIGINS: Mapping[Region, str] = MappingProxyType({
    Region.CN: 'https://leancloud.cn',
    Region.US: 'https://us.leancloud.cn',
    Region.TAB: 'https://tab.leancloud.cn',
})

DEFAULT_USER_AGENT = f'LeanCloud-CLI/{__version__}'


@dataclass(frozen=True)
class DashboardConfig:
    """
    Complete dashboard client configuration.

    Attributes:
        origins: Region to dashboard origin table
        override: Origin that replaces region lookup (LEANCLOUD_DASHBOARD)
        user_agent: Client identifier sent with every request
        timeout: Transport timeout in seconds (None keeps the requests default)
        verify: Whether TLS certificates are verified
    """
    origins: Mapping[Region, str] = field(default_factory=lambda: DEFAULT_ORIGINS)
    override: Optional[str] = None
    user_agent: str = DEFAULT_USER_AGENT
    timeout: Optional[float] = None
    verify: bool = True
    extra_headers: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self):
        # Freeze caller-supplied tables too.
        if not isinstance(self.origins, MappingProxyType):
            object.__setattr__(self, 'origins', MappingProxyType(dict(self.origins)))
        if not isinstance(self.extra_headers, MappingProxyType):
            object.__setattr__(
                self, 'extra_headers', MappingProxyType(dict(self.extra_headers))
            )

    @classmethod
    def default(cls) -> 'DashboardConfig':
        """Create default configuration, ignoring the environment."""
        return cls()

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        **kwargs
    ) -> 'DashboardConfig':
        """Create configuration, honoring the LEANCLOUD_DASHBOARD override."""
        environ = os.environ if environ is None else environ
        override = environ.get(DASHBOARD_ENV_VAR) or None
        return cls(override=override, **kwargs)

    def origin_for(self, region: Union[Region, str]) -> str:
        """
        Look up the dashboard origin of a region.

        Raises:
            UnknownRegionError: If the region is not in the table
        """
        try:
            return self.origins[region]
        except (KeyError, TypeError):
            raise UnknownRegionError(region) from None

    def get_session_headers(self) -> Dict[str, str]:
        """Headers every session starts with."""
        return {
            'User-Agent': self.user_agent,
            **self.extra_headers
        }
