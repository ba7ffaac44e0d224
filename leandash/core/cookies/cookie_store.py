"""
File-backed cookie storage.

Keeps dashboard session cookies across separate process invocations.
The store is read fully on construction and written fully on save().
"""
import os
import tempfile
import time
from http.cookiejar import Cookie, DefaultCookiePolicy, LoadError, LWPCookieJar
from pathlib import Path
from typing import Iterator, List, Optional, Union
from urllib.request import Request

from ..exceptions import CookieStoreError
from ..logging import get_logger
from .paths import default_cookie_path

logger = get_logger(__name__)


class CookieStore:
    """
    Persistent cookie jar keyed by URL.

    Wraps an LWPCookieJar, which requests sessions accept as their
    cookie jar, so responses update the store in place.

    Example:
        >>> store = CookieStore()
        >>> store.get('XSRF-TOKEN', 'https://leancloud.cn')
        ''
        >>> store.save()
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        policy: Optional[DefaultCookiePolicy] = None
    ):
        """
        Initialize cookie storage.

        Args:
            path: Cookie file (defaults to <config-dir>/leancloud/cookies)
            policy: Cookie acceptance and matching policy

        Raises:
            CookieStoreError: If the directory cannot be created or the
                existing file cannot be parsed
        """
        self._path = Path(path) if path is not None else default_cookie_path()
        self._policy = policy or DefaultCookiePolicy()
        self._jar = LWPCookieJar(str(self._path), policy=self._policy)

        try:
            self._path.parent.mkdir(mode=0o775, parents=True, exist_ok=True)
        except OSError as e:
            raise CookieStoreError(
                f"Cannot create cookie directory {self._path.parent}: {e}"
            ) from e

        self._load()

    @property
    def path(self) -> Path:
        """Cookie file path."""
        return self._path

    @property
    def policy(self) -> DefaultCookiePolicy:
        """Cookie acceptance and matching policy."""
        return self._policy

    @property
    def jar(self) -> LWPCookieJar:
        """Underlying cookie jar (shared with HTTP sessions)."""
        return self._jar

    def _load(self) -> None:
        if not self._path.exists():
            logger.debug(f"No cookie file at {self._path}, starting empty")
            return
        try:
            self._jar.load(ignore_discard=True, ignore_expires=False)
        except (LoadError, OSError) as e:
            raise CookieStoreError(f"Cannot load cookies from {self._path}: {e}") from e
        logger.debug(f"Loaded {len(self._jar)} cookies from {self._path}")

    def reload(self) -> None:
        """Merge the on-disk cookies into memory (disk wins)."""
        self._load()

    def cookies_for(self, url: str) -> List[Cookie]:
        """
        Cookies applicable to a URL.

        Uses standard domain, path, secure and expiry matching.
        """
        request = Request(url)
        now = int(time.time())
        return [
            cookie for cookie in self._jar
            if not cookie.is_expired(now)
            and self._policy.domain_return_ok(cookie.domain, request)
            and self._policy.path_return_ok(cookie.path, request)
            and self._policy.return_ok_domain(cookie, request)
            and self._policy.return_ok_secure(cookie, request)
        ]

    def get(self, name: str, url: str, default: str = '') -> str:
        """Value of the first cookie named `name` sent to `url`."""
        for cookie in self.cookies_for(url):
            if cookie.name == name:
                return cookie.value or ''
        return default

    def save(self) -> None:
        """
        Write all cookies to disk.

        The file is replaced atomically, so a reader sees either the old
        or the new contents. A missing parent directory is created again.

        Raises:
            CookieStoreError: If writing fails
        """
        tmp_path = None
        try:
            self._path.parent.mkdir(mode=0o775, parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=f'.{self._path.name}.', dir=str(self._path.parent)
            )
            os.close(fd)
            self._jar.save(tmp_path, ignore_discard=True, ignore_expires=False)
            os.replace(tmp_path, self._path)
        except OSError as e:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise CookieStoreError(f"Cannot save cookies to {self._path}: {e}") from e
        logger.debug(f"Saved {len(self._jar)} cookies to {self._path}")

    def clear(self) -> None:
        """Drop all cookies from memory."""
        self._jar.clear()

    def delete(self) -> None:
        """Drop all cookies and remove the cookie file."""
        self._jar.clear()
        try:
            self._path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            raise CookieStoreError(f"Cannot delete {self._path}: {e}") from e

    def exists(self) -> bool:
        """Check if the cookie file exists."""
        return self._path.exists()

    def __len__(self) -> int:
        return len(self._jar)

    def __iter__(self) -> Iterator[Cookie]:
        return iter(self._jar)

    def __repr__(self) -> str:
        return f"CookieStore(path={str(self._path)!r}, cookies={len(self._jar)})"
