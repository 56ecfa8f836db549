from __future__ import annotations

import fnmatch
import os
from typing import List

from config import MAX_SCAN_DEPTH, logger
from core.discovery_filters import should_skip


def matches_pattern(name: str, pattern: str) -> bool:
    """Case-insensitive glob match on a file name."""
    return fnmatch.fnmatchcase(name.lower(), pattern.lower())


def scan(root_path: str, pattern: str, depth: int = 0) -> List[str]:
    """Return files under ``root_path`` matching ``pattern``.

    Depth 0 is ``root_path`` itself; folders deeper than ``MAX_SCAN_DEPTH``
    are never listed. Excluded folders are pruned, and any folder that cannot
    be read simply contributes nothing.
    """
    if depth > MAX_SCAN_DEPTH:
        return []

    try:
        with os.scandir(root_path) as it:
            entries = list(it)
    except OSError as e:
        logger.debug("Cannot list %s: %s", root_path, e)
        return []

    found: List[str] = []
    subdirs: List[str] = []
    for entry in entries:
        try:
            if entry.is_file():
                if matches_pattern(entry.name, pattern):
                    found.append(entry.path)
            elif entry.is_dir(follow_symlinks=False):
                subdirs.append(entry.path)
        except OSError as e:
            logger.debug("Cannot inspect %s: %s", entry.path, e)

    if depth < MAX_SCAN_DEPTH:
        for sub in subdirs:
            if should_skip(sub):
                continue
            found.extend(scan(sub, pattern, depth + 1))

    return found
