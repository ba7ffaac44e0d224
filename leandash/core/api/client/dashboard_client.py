"""LeanCloud dashboard client using composition."""
from dataclasses import replace
from typing import Any, Callable, Dict, Optional, Union

import requests

from ...cookies import CookieStore
from ...exceptions import InvalidMethodError, RegionResolutionError
from ...logging import get_logger
from ..config import DashboardConfig
from ..regions import Region, RegionResolver
from ..request import RequestBuilder, RequestOptions, ResponseHandler
from ..session import SessionFactory
from ..two_factor import CodeProvider, TwoFactorHandler

SessionFactoryFn = Callable[[RequestOptions, DashboardConfig], requests.Session]

METHODS = ('GET', 'POST', 'PUT', 'DELETE', 'PATCH')

logger = get_logger(__name__)


class DashboardClient:
    """
    Authenticated client for the LeanCloud dashboard API.

    A client is scoped either to a fixed region or to an application ID,
    which is resolved to a region on every base URL lookup. Session
    cookies are read from the shared cookie file at construction and
    written back after every successful call.

    Example:
        >>> client = DashboardClient.by_region(Region.US)
        >>> client.get('/1.1/clients/self').json()
    """

    def __init__(
        self,
        region: Optional[Union[Region, str]] = None,
        app_id: Optional[str] = None,
        *,
        cookie_store: Optional[CookieStore] = None,
        config: Optional[DashboardConfig] = None,
        region_resolver: Optional[RegionResolver] = None,
        code_provider: Optional[CodeProvider] = None,
        session_factory: Optional[SessionFactoryFn] = None
    ):
        """
        Initialize dashboard client.

        Args:
            region: Fixed region (ignored when app_id is set)
            app_id: Application whose region picks the dashboard
            cookie_store: Cookie storage (defaults to the per-user file)
            config: Client configuration (defaults to DashboardConfig.from_env())
            region_resolver: Maps app_id to a region
            code_provider: Supplies 2FA codes (defaults to a terminal prompt)
            session_factory: Builds the requests session of each call
        """
        self.region = region
        self.app_id = app_id
        self.config = config or DashboardConfig.from_env()
        self.cookie_store = cookie_store if cookie_store is not None else CookieStore()
        self.region_resolver = region_resolver
        self.session_factory = session_factory or SessionFactory.create_session
        self._two_factor = TwoFactorHandler(code_provider)

    @classmethod
    def by_region(cls, region: Union[Region, str], **kwargs) -> 'DashboardClient':
        """Client bound to a fixed region."""
        return cls(region=region, **kwargs)

    @classmethod
    def by_app(cls, app_id: str, **kwargs) -> 'DashboardClient':
        """Client bound to the region of an application."""
        return cls(app_id=app_id, **kwargs)

    @property
    def code_provider(self) -> CodeProvider:
        """Function that supplies 2FA codes."""
        return self._two_factor.code_provider

    @code_provider.setter
    def code_provider(self, value: CodeProvider):
        self._two_factor.code_provider = value

    def get_base_url(self) -> str:
        """
        Dashboard origin for this client.

        Raises:
            RegionResolutionError: The app ID cannot be resolved
            UnknownRegionError: The region is not in the origin table
        """
        if self.config.override:
            return self.config.override

        region = self.region
        if self.app_id:
            region = self._resolve_app_region(self.app_id)

        return self.config.origin_for(region)

    def _resolve_app_region(self, app_id: str) -> Union[Region, str]:
        if self.region_resolver is None:
            raise RegionResolutionError(app_id, 'no region resolver configured')
        try:
            return self.region_resolver.get_app_region(app_id)
        except Exception as e:
            raise RegionResolutionError(app_id, str(e)) from e

    def options(self) -> RequestOptions:
        """Default options: XSRF header, cookie store and user agent."""
        builder = RequestBuilder(self.get_base_url(), self.cookie_store, self.config)
        return builder.build_options()

    def do_request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        options: Optional[RequestOptions] = None
    ) -> requests.Response:
        """
        Execute one logical dashboard call.

        A 401 is resolved through the 2FA handler before classification,
        so callers never see it. On success the cookie store is saved.

        Raises:
            InvalidMethodError: Unsupported HTTP verb
            APIError: Non-2xx response with a JSON error body
            HTTPStatusError: Any other non-2xx response
            TwoFactorError: The 2FA challenge could not be completed
            CookieStoreError: The session could not be persisted
            requests.RequestException: Transport failure
        """
        if options is None:
            options = self.options()
        if params is not None:
            options = replace(options, json=params)

        verb = method.upper()
        if verb not in METHODS:
            raise InvalidMethodError(method)

        url = self.get_base_url() + path
        session = self.session_factory(options, self.config)
        try:
            logger.debug(f"{verb} {url}")
            response = session.request(
                verb, url, json=options.json, timeout=options.timeout
            )
        finally:
            session.close()
        logger.debug(f"{verb} {path} -> {response.status_code}")

        response = self._two_factor.handle(self, response)
        ResponseHandler.raise_for_response(response, verb, path)

        self.cookie_store.save()
        return response

    def get(self, path: str, options: Optional[RequestOptions] = None) -> requests.Response:
        return self.do_request('GET', path, None, options)

    def post(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        options: Optional[RequestOptions] = None
    ) -> requests.Response:
        return self.do_request('POST', path, params, options)

    def put(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        options: Optional[RequestOptions] = None
    ) -> requests.Response:
        return self.do_request('PUT', path, params, options)

    def patch(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        options: Optional[RequestOptions] = None
    ) -> requests.Response:
        return self.do_request('PATCH', path, params, options)

    def delete(self, path: str, options: Optional[RequestOptions] = None) -> requests.Response:
        return self.do_request('DELETE', path, None, options)

    def get_user_info(self) -> Dict[str, Any]:
        """Account of the logged-in user."""
        return self.get('/1.1/clients/self').json()
