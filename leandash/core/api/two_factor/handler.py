"""
Two-factor authentication challenge handling.

A 401 from the dashboard carries a short-lived token. The handler pairs it
with a one-time code, exchanges both at /1.1/do2fa for an upgraded session
and hands the exchange response back in place of the 401. The original
request is not reissued.
"""
from typing import TYPE_CHECKING, Optional

import requests

from ...cookies import CookieStore
from ...exceptions import DashboardError, TwoFactorChallengeError, TwoFactorExchangeError
from ...logging import get_logger
from ..request import RequestOptions, ResponseHandler
from .code_provider import CodeProvider, prompt_two_factor_code, validate_code

if TYPE_CHECKING:
    from ..client import DashboardClient

CHALLENGE_STATUS = 401
EXCHANGE_PATH = '/1.1/do2fa'

logger = get_logger(__name__)


class TwoFactorHandler:
    """Resolves 2FA challenges for a dashboard client."""

    def __init__(self, code_provider: Optional[CodeProvider] = None):
        """
        Args:
            code_provider: Returns the one-time code (defaults to a prompt)
        """
        self.code_provider = code_provider or prompt_two_factor_code

    @staticmethod
    def is_challenge(response: requests.Response) -> bool:
        return response.status_code == CHALLENGE_STATUS

    @staticmethod
    def extract_token(response: requests.Response) -> str:
        """
        Reads the challenge token from a 401 body.

        Raises:
            TwoFactorChallengeError: If the body has no string token
        """
        try:
            body = response.json()
        except ValueError as e:
            raise TwoFactorChallengeError(f"Malformed 2FA challenge: {e}") from e

        token = body.get('token') if isinstance(body, dict) else None
        if not isinstance(token, str) or not token:
            raise TwoFactorChallengeError('Malformed 2FA challenge: missing token')
        return token

    def handle(
        self,
        client: 'DashboardClient',
        response: requests.Response
    ) -> requests.Response:
        """
        Pass non-401 responses through; complete the exchange otherwise.

        Raises:
            TwoFactorChallengeError: Malformed challenge body
            InvalidTwoFactorCodeError: Non-numeric code, nothing sent
            TwoFactorExchangeError: The exchange call failed
            CookieStoreError: The upgraded session could not be saved
        """
        if not self.is_challenge(response):
            return response

        logger.info('Dashboard requested two-factor authentication')
        token = self.extract_token(response)
        code = validate_code(self.code_provider())

        # Fresh instance on the same file; the client's store is reloaded
        # once the exchange has been written.
        exchange_store = CookieStore(
            client.cookie_store.path, policy=client.cookie_store.policy
        )
        options = RequestOptions(
            cookie_store=exchange_store,
            user_agent=client.config.user_agent,
            json={'token': token, 'code': code},
            timeout=client.config.timeout,
        )
        session = client.session_factory(options, client.config)
        try:
            exchange = session.post(
                client.get_base_url() + EXCHANGE_PATH,
                json=options.json,
                timeout=options.timeout,
            )
        finally:
            session.close()

        try:
            ResponseHandler.raise_for_response(exchange, 'POST', EXCHANGE_PATH)
        except DashboardError as e:
            logger.warning(f"2FA exchange failed with status {exchange.status_code}")
            raise TwoFactorExchangeError(
                f"2FA exchange failed: {e}",
                error_code=e.error_code,
                status_code=exchange.status_code,
            ) from e

        exchange_store.save()
        client.cookie_store.reload()
        logger.info('Two-factor authentication completed')
        return exchange
