"""Pytest fixtures for leandash tests."""
import json
from http.client import HTTPMessage
from types import SimpleNamespace

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from leandash.core.api import DashboardClient, DashboardConfig, SessionFactory
from leandash.core.cookies import CookieStore


class StubAdapter(BaseAdapter):
    """
    Transport adapter that answers from a queue of canned responses.

    Every prepared request is recorded, so tests can inspect headers,
    cookies and bodies exactly as requests produced them.
    """

    def __init__(self):
        super().__init__()
        self.queue = []
        self.requests = []

    def add(self, status=200, json_body=None, text=None, headers=None, set_cookies=()):
        """Queue a response."""
        response_headers = dict(headers or {})
        if json_body is not None:
            content = json.dumps(json_body).encode('utf-8')
            response_headers.setdefault('Content-Type', 'application/json; charset=utf-8')
        else:
            content = (text or '').encode('utf-8')
            response_headers.setdefault('Content-Type', 'text/plain')
        self.queue.append((status, content, response_headers, list(set_cookies)))

    def add_error(self, error):
        """Queue a transport failure."""
        self.queue.append(error)

    def send(self, request, **kwargs):
        self.requests.append(request)
        item = self.queue.pop(0)
        if isinstance(item, Exception):
            raise item

        status, content, headers, set_cookies = item
        msg = HTTPMessage()
        for value in set_cookies:
            msg.add_header('Set-Cookie', value)

        response = requests.Response()
        response.status_code = status
        response._content = content
        response._content_consumed = True
        response.headers = CaseInsensitiveDict(headers)
        response.encoding = 'utf-8'
        response.url = request.url
        response.request = request
        response.connection = self
        response.raw = SimpleNamespace(_original_response=SimpleNamespace(msg=msg))
        return response

    def close(self):
        pass


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep tests away from the real environment and config directory."""
    monkeypatch.delenv('LEANCLOUD_DASHBOARD', raising=False)
    monkeypatch.setattr(
        'leandash.core.cookies.cookie_store.default_cookie_path',
        lambda: tmp_path / 'config' / 'leancloud' / 'cookies'
    )


@pytest.fixture
def cookie_path(tmp_path):
    """Cookie file inside the test directory."""
    return tmp_path / 'leancloud' / 'cookies'


@pytest.fixture
def adapter():
    """Stub transport."""
    return StubAdapter()


@pytest.fixture
def session_factory(adapter):
    """Session factory that routes every request through the stub."""
    def create(options, config):
        session = SessionFactory.create_session(options, config)
        session.mount('https://', adapter)
        session.mount('http://', adapter)
        return session
    return create


@pytest.fixture
def config():
    """Configuration without environment overrides."""
    return DashboardConfig.default()


@pytest.fixture
def make_client(cookie_path, session_factory, config):
    """Build clients that share the test cookie file."""
    def build(region='cn-n1', **kwargs):
        kwargs.setdefault('cookie_store', CookieStore(cookie_path))
        kwargs.setdefault('config', config)
        kwargs.setdefault('session_factory', session_factory)
        kwargs.setdefault('code_provider', lambda: 123456)
        return DashboardClient(region=region, **kwargs)
    return build
