"""
Platform configuration directory lookup for ClipTrans.
"""
import os
import sys
from typing import Optional

from cliptrans.constants import CONFIG_DIR_NAME


def _base_config_dir() -> Optional[str]:
    """Per-user configuration root for the current platform, or None."""
    if sys.platform == 'win32':
        appdata = os.environ.get('APPDATA')
        if appdata:
            return appdata

    home = os.path.expanduser('~')
    if home == '~':
        home = None

    if sys.platform == 'darwin' and home:
        return os.path.join(home, 'Library', 'Application Support')

    xdg = os.environ.get('XDG_CONFIG_HOME')
    if xdg and os.path.isabs(xdg):
        return xdg
    if home:
        return os.path.join(home, '.config')
    return None


def get_config_dir() -> Optional[str]:
    """Return the ClipTrans configuration directory (not created).

    Returns None when no per-user location can be determined.
    """
    base = _base_config_dir()
    if not base:
        return None
    return os.path.join(base, CONFIG_DIR_NAME)
