"""Request construction and response classification."""
from .request_builder import RequestBuilder, RequestOptions, XSRF_COOKIE, XSRF_HEADER
from .response_handler import ResponseHandler

__all__ = [
    'RequestBuilder',
    'RequestOptions',
    'ResponseHandler',
    'XSRF_COOKIE',
    'XSRF_HEADER',
]
