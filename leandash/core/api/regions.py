"""Deployment regions and the resolver interface for app-scoped clients."""
from enum import Enum
from typing import Protocol, Union, runtime_checkable

from ..exceptions import UnknownRegionError


class Region(str, Enum):
    """Known LeanCloud deployment regions."""

    CN = 'cn-n1'
    US = 'us-w1'
    TAB = 'cn-e1'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union['Region', str]) -> 'Region':
        """
        Map a region identifier to a Region.

        Raises:
            UnknownRegionError: If the identifier is not a known region
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownRegionError(value) from None


@runtime_checkable
class RegionResolver(Protocol):
    """
    Maps an application ID to the region it is deployed in.

    Implemented outside this package (for example by the app linking
    layer of a CLI).
    """

    def get_app_region(self, app_id: str) -> Union[Region, str]:
        """Return the region of the given application."""
        ...
