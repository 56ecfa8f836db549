from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List

import pandas as pd

from config import MAX_FAILURES_SHOWN
from core.collector import CollectionResult
from utils.file_utils import format_file_size
from utils.time_utils import format_duration

ESTIMATE_COLUMNS = ["root", "category", "pattern", "files", "bytes"]
RECORD_COLUMNS = ["status", "category", "source", "destination", "size", "error"]


def estimate_frame(rows: List[Dict[str, Any]]) -> pd.DataFrame:
    """Rows from the count-only pass as a DataFrame."""
    return pd.DataFrame(rows, columns=ESTIMATE_COLUMNS)


def category_totals(df: pd.DataFrame) -> pd.DataFrame:
    """Files and bytes per category, in first-seen category order."""
    if df.empty:
        return pd.DataFrame(columns=["category", "files", "bytes"])
    totals = (
        df.groupby("category", sort=False)[["files", "bytes"]]
        .sum()
        .reset_index()
    )
    totals["files"] = totals["files"].astype(int)
    totals["bytes"] = totals["bytes"].astype(int)
    return totals


def records_frame(result: CollectionResult) -> pd.DataFrame:
    rows: List[Dict[str, Any]] = []
    for r in result.copied:
        rows.append({"status": "copied", **asdict(r), "error": ""})
    for f in result.failed:
        rows.append(
            {
                "status": "failed",
                "category": f.category,
                "source": f.source,
                "destination": "",
                "size": 0,
                "error": f.error,
            }
        )
    return pd.DataFrame(rows, columns=RECORD_COLUMNS)


def write_manifest(result: CollectionResult, path: str) -> str:
    records_frame(result).to_csv(path, index=False)
    return path


def format_estimate(totals: pd.DataFrame) -> str:
    lines = []
    for row in totals.itertuples(index=False):
        lines.append(f"  {row.category:<14} {row.files:>7} file(s)  {format_file_size(row.bytes)}")
    total_files = int(totals["files"].sum()) if not totals.empty else 0
    total_bytes = int(totals["bytes"].sum()) if not totals.empty else 0
    lines.append(f"  {'Total':<14} {total_files:>7} file(s)  {format_file_size(total_bytes)}")
    return "\n".join(lines)


def format_summary(
    result: CollectionResult,
    elapsed: float,
    destination: str,
    max_failures: int = MAX_FAILURES_SHOWN,
) -> str:
    lines = [
        "Recovery summary",
        f"  Files copied : {len(result.copied)}",
        f"  Files failed : {len(result.failed)}",
        f"  Total size   : {format_file_size(result.total_bytes)}",
        f"  Duration     : {format_duration(elapsed)}",
        f"  Destination  : {destination}",
    ]
    if result.failed and max_failures > 0:
        lines.append("  Failed files:")
        for f in result.failed[:max_failures]:
            lines.append(f"    - {f.source}")
        hidden = len(result.failed) - max_failures
        if hidden > 0:
            lines.append(f"    ... and {hidden} more")
    return "\n".join(lines)
