from config import CLOUD_PATH_MARKERS, EXCLUDED_FOLDERS

_EXCLUDED_LOWER = tuple(name.lower() for name in EXCLUDED_FOLDERS)
_MARKERS_LOWER = tuple(m.lower() for m in CLOUD_PATH_MARKERS)


def _norm(p: str) -> str:
    return p.replace("\\", "/").lower()


def _leaf(p: str) -> str:
    return p.rstrip("/").rsplit("/", 1)[-1]


def is_excluded_name(name: str) -> bool:
    """True if a folder name contains any excluded token (case-insensitive)."""
    low = name.lower()
    return any(token in low for token in _EXCLUDED_LOWER)


def should_skip(path: str) -> bool:
    """Decide whether a directory is pruned from traversal.

    Matching is by substring, not by path component: a folder called
    ``MyOneDriveNotes`` or ``Inbox`` is skipped as well.
    """
    p = _norm(path)
    if any(marker in p for marker in _MARKERS_LOWER):
        return True
    return is_excluded_name(_leaf(p))
