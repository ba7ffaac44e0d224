"""Response handler for dashboard responses."""
from typing import Optional

import requests

from ...exceptions import APIError, HTTPStatusError


class ResponseHandler:
    """Classifies dashboard responses."""

    @staticmethod
    def is_success(response: requests.Response) -> bool:
        """2xx only; requests' `ok` also accepts 3xx."""
        return 200 <= response.status_code < 300

    @staticmethod
    def is_json(response: requests.Response) -> bool:
        """Checks the declared content type."""
        content_type = response.headers.get('Content-Type', '')
        return content_type.strip().startswith('application/json')

    @staticmethod
    def parse_error(response: requests.Response) -> Optional[APIError]:
        """Parses a JSON error body, or returns None if it is unusable."""
        try:
            body = response.json()
        except ValueError:
            return None
        if not isinstance(body, dict):
            return None

        code = body.get('code')
        if not isinstance(code, int) or isinstance(code, bool):
            code = response.status_code
        message = body.get('error') or body.get('message') or response.text
        return APIError(code, str(message), status_code=response.status_code)

    @staticmethod
    def raise_for_response(
        response: requests.Response,
        method: str,
        path: str
    ) -> None:
        """
        Raises unless the response is a success.

        Raises:
            APIError: For non-2xx responses with a JSON error body
            HTTPStatusError: For any other non-2xx response
        """
        if ResponseHandler.is_success(response):
            return

        if ResponseHandler.is_json(response):
            error = ResponseHandler.parse_error(response)
            if error is not None:
                raise error

        raise HTTPStatusError(response.status_code, method, path)
