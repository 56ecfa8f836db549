from __future__ import annotations

import os
import shutil
from dataclasses import asdict, dataclass, field
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from config import CATEGORIES, logger
from core.paths import is_within
from core.scanner import scan
from utils.file_utils import get_file_size
from utils.timing import timed_block


@dataclass(frozen=True)
class CopyRecord:
    source: str
    destination: str
    size: int
    category: str


@dataclass(frozen=True)
class FailureRecord:
    source: str
    category: str = ""
    error: str = ""


@dataclass
class CollectionResult:
    """Append-only outcome of one or more copy invocations."""

    copied: List[CopyRecord] = field(default_factory=list)
    failed: List[FailureRecord] = field(default_factory=list)

    @property
    def total_bytes(self) -> int:
        return sum(r.size for r in self.copied)

    def merge(self, other: "CollectionResult") -> "CollectionResult":
        self.copied.extend(other.copied)
        self.failed.extend(other.failed)
        return self

    def as_dict(self) -> Dict[str, object]:
        return {
            "copied": [asdict(r) for r in self.copied],
            "failed": [asdict(r) for r in self.failed],
            "total_bytes": self.total_bytes,
        }


ProgressFn = Callable[[str, int], None]


def copy_matching(
    source_root: str,
    dest_root: str,
    pattern: str,
    category: str,
    result: Optional[CollectionResult] = None,
) -> int:
    """Copy every file under ``source_root`` matching ``pattern`` into
    ``<dest_root>/<category>/``, overwriting same-named files.

    Files already under ``dest_root`` are left alone, so a destination inside
    a search folder never feeds on its own output. Successes and failures are
    appended to ``result``. Returns how many files were copied by this call.
    """
    if not os.path.exists(source_root):
        return 0
    if result is None:
        result = CollectionResult()

    dest_dir = os.path.join(dest_root, category)
    copied = 0
    for src in scan(source_root, pattern):
        if is_within(src, dest_root):
            continue
        dest_path = os.path.join(dest_dir, os.path.basename(src))
        try:
            os.makedirs(dest_dir, exist_ok=True)
            size = os.path.getsize(src)
            shutil.copy2(src, dest_path)
        except OSError as exc:
            logger.warning("Copy failed %s: %s", src, exc)
            result.failed.append(FailureRecord(source=src, category=category, error=str(exc)))
            continue
        result.copied.append(
            CopyRecord(source=src, destination=dest_path, size=size, category=category)
        )
        copied += 1
    return copied


def iter_jobs(
    search_roots: Iterable[str],
    categories: Mapping[str, List[str]] = CATEGORIES,
) -> Iterator[Tuple[str, str, str]]:
    for root in search_roots:
        for category, patterns in categories.items():
            for pattern in patterns:
                yield root, category, pattern


def measure(
    search_roots: Iterable[str],
    categories: Mapping[str, List[str]] = CATEGORIES,
    exclude_root: Optional[str] = None,
) -> List[Dict[str, object]]:
    """Count-only pass: one row per (root, category, pattern) with hits.

    Files under ``exclude_root`` (normally the destination) are not counted.
    """
    rows: List[Dict[str, object]] = []
    with timed_block("step.files.measure", logger=logger) as outcome:
        for root, category, pattern in iter_jobs(search_roots, categories):
            if not os.path.exists(root):
                continue
            files = scan(root, pattern)
            if exclude_root:
                files = [f for f in files if not is_within(f, exclude_root)]
            if not files:
                continue
            rows.append(
                {
                    "root": root,
                    "category": category,
                    "pattern": pattern,
                    "files": len(files),
                    "bytes": sum(get_file_size(f) for f in files),
                }
            )
        outcome["files"] = sum(r["files"] for r in rows)
    return rows


def collect(
    search_roots: Iterable[str],
    dest_root: str,
    categories: Mapping[str, List[str]] = CATEGORIES,
    result: Optional[CollectionResult] = None,
    progress: Optional[ProgressFn] = None,
) -> CollectionResult:
    """Copy pass over every root, category by category."""
    if result is None:
        result = CollectionResult()
    roots = list(search_roots)
    with timed_block("action.collect", logger=logger) as outcome:
        for category, patterns in categories.items():
            count = 0
            for root in roots:
                for pattern in patterns:
                    count += copy_matching(root, dest_root, pattern, category, result)
            logger.info("Category %s: %d file(s) copied", category, count)
            if progress is not None:
                progress(category, count)
        outcome["copied"] = len(result.copied)
        outcome["failed"] = len(result.failed)
    return result
