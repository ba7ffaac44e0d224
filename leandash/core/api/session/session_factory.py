"""Session factory using Factory Pattern."""
import requests
from requests.adapters import HTTPAdapter

from ..config import DashboardConfig
from ..request import RequestOptions


class SessionFactory:
    """Factory for creating HTTP sessions."""

    @staticmethod
    def create_session(
        options: RequestOptions,
        config: DashboardConfig
    ) -> requests.Session:
        """
        Creates a synchronous HTTP session for one call.

        The session shares the jar of `options.cookie_store`, so cookies
        set by the response land in the store. No transport retries.
        """
        session = requests.Session()
        adapter = HTTPAdapter(max_retries=0)
        session.mount('http://', adapter)
        session.mount('https://', adapter)

        session.headers.update(config.get_session_headers())
        if options.user_agent:
            session.headers['User-Agent'] = options.user_agent
        session.headers.update(options.headers)

        if options.cookie_store is not None:
            session.cookies = options.cookie_store.jar
        session.verify = config.verify
        return session
