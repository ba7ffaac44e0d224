"""Per-user locations of leandash state files."""
import os
import sys
from pathlib import Path

COOKIE_DIR_NAME = 'leancloud'
COOKIE_FILE_NAME = 'cookies'


def get_user_config_dir() -> Path:
    """Per-user configuration root (cross-platform, no dependencies)."""
    if sys.platform.startswith('win'):
        return Path(os.environ.get('APPDATA', str(Path.home())))
    if sys.platform == 'darwin':
        return Path.home() / 'Library' / 'Application Support'

    xdg = os.environ.get('XDG_CONFIG_HOME')
    if xdg:
        return Path(xdg)
    return Path.home() / '.config'


def default_cookie_path() -> Path:
    """Cookie file shared by every invocation of the same user."""
    return get_user_config_dir() / COOKIE_DIR_NAME / COOKIE_FILE_NAME
