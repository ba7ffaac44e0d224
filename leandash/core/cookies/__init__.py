"""
Cookie persistence module.

Provides the file-backed cookie jar shared by every invocation of the CLI.
"""
from .cookie_store import CookieStore
from .paths import default_cookie_path, get_user_config_dir

__all__ = [
    'CookieStore',
    'default_cookie_path',
    'get_user_config_dir',
]
