import os
import sys
from typing import Dict, Optional

from config import SEARCH_ROOT_NAMES

_DEFAULT_FOLDERS = {
    "documents": "Documents",
    "pictures": "Pictures",
    "videos": "Videos",
    "desktop": "Desktop",
    "downloads": "Downloads",
}

_XDG_KEYS = {
    "documents": "XDG_DOCUMENTS_DIR",
    "pictures": "XDG_PICTURES_DIR",
    "videos": "XDG_VIDEOS_DIR",
    "desktop": "XDG_DESKTOP_DIR",
    "downloads": "XDG_DOWNLOAD_DIR",
}


def _load_xdg_dirs(home: str) -> Dict[str, str]:
    """Parse ``~/.config/user-dirs.dirs`` (lines like XDG_X_DIR="$HOME/X")."""
    path = os.path.join(home, ".config", "user-dirs.dirs")
    pairs: Dict[str, str] = {}
    try:
        with open(path, encoding="utf-8") as f:
            lines = f.read().splitlines()
    except OSError:
        return pairs
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = map(str.strip, line.split("=", 1))
        value = value.strip('"')
        value = value.replace("$HOME", home)
        if not value.rstrip("/") or value.rstrip("/") == home.rstrip("/"):
            continue
        pairs[key] = value
    return pairs


def resolve_search_roots(
    home: Optional[str] = None, platform: Optional[str] = None
) -> Dict[str, str]:
    """Map each search-root name to an absolute directory for this user."""
    platform = platform or sys.platform
    if home is None:
        if platform.startswith("win"):
            home = os.getenv("USERPROFILE") or os.path.expanduser("~")
        else:
            home = os.path.expanduser("~")

    folders = dict(_DEFAULT_FOLDERS)
    if platform == "darwin":
        folders["videos"] = "Movies"

    roots = {name: os.path.join(home, folders[name]) for name in SEARCH_ROOT_NAMES}

    if platform.startswith("linux"):
        xdg = _load_xdg_dirs(home)
        for name in SEARCH_ROOT_NAMES:
            if _XDG_KEYS[name] in xdg:
                roots[name] = xdg[_XDG_KEYS[name]]
    return roots


def same_device(a: str, b: str) -> bool:
    """True if both paths live on the same filesystem device."""
    try:
        return os.stat(a).st_dev == os.stat(b).st_dev
    except OSError:
        return False


def is_within(path: str, parent: str) -> bool:
    """True if ``path`` is ``parent`` or lies below it."""
    path = os.path.abspath(path)
    parent = os.path.abspath(parent)
    try:
        return os.path.commonpath([path, parent]) == parent
    except ValueError:
        # different drives on Windows
        return False
