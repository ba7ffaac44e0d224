"""Dashboard client."""
from .dashboard_client import DashboardClient, METHODS

__all__ = [
    'DashboardClient',
    'METHODS',
]
