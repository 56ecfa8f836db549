#!/usr/bin/env python
from __future__ import annotations

import argparse
import os
import sys
import time
from typing import Callable, List, Optional

from config import CATEGORIES, MANIFEST_NAME, WRITE_MANIFEST, logger
from core.collector import collect, measure
from core.paths import is_within, resolve_search_roots, same_device
from utils.report import (
    category_totals,
    estimate_frame,
    format_estimate,
    format_summary,
    write_manifest,
)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Copy documents, images, videos, spreadsheets, audio and archives "
        "from the usual user folders into a categorized recovery folder."
    )
    ap.add_argument("destination", nargs="?", default=None, help="Destination folder (e.g., E:/Recovery)")
    ap.add_argument("--skip-drive-check", action="store_true", help="Do not warn when the destination shares a drive with the profile")
    ap.add_argument("--skip-verification", action="store_true", help="Reserved; copied files are never verified")
    ap.add_argument("--yes", action="store_true", help="Do not ask for confirmation before copying")
    ap.add_argument("--dry-run", action="store_true", help="Only count matching files, copy nothing")
    return ap


def _ask(input_fn: Callable[[str], str], prompt: str) -> str:
    """Prompt once; a closed stdin or Ctrl+C counts as an empty answer."""
    try:
        return input_fn(prompt).strip()
    except (EOFError, KeyboardInterrupt):
        print()
        return ""


def main(argv: Optional[List[str]] = None, input_fn: Callable[[str], str] = input) -> int:
    args = build_parser().parse_args(argv)

    destination = args.destination
    if not destination:
        destination = _ask(input_fn, "Destination folder for recovered files: ")
    if not destination:
        print("No destination given. Nothing was copied.")
        return 1
    destination = os.path.abspath(os.path.expanduser(destination))

    try:
        os.makedirs(destination, exist_ok=True)
    except OSError as e:
        logger.error("Cannot create destination %s: %s", destination, e)
        print(f"Cannot create destination folder: {destination}")
        return 1

    roots = resolve_search_roots()
    home = os.path.expanduser("~")
    if not args.skip_drive_check and same_device(destination, home):
        logger.warning("Destination %s is on the same drive as %s", destination, home)
        print("Warning: destination is on the same drive as your user folders.")
    for path in roots.values():
        if is_within(destination, path):
            logger.warning("Destination %s is inside search folder %s", destination, path)
            print(f"Warning: destination is inside {path}; files already there are not copied again.")
    if args.skip_verification:
        logger.info("Verification skipped (no verification is performed)")

    print("Scanning:")
    for name, path in roots.items():
        state = "" if os.path.isdir(path) else " (missing)"
        print(f"  {name:<10} {path}{state}")

    totals = category_totals(estimate_frame(measure(roots.values(), CATEGORIES, exclude_root=destination)))
    print("Found:")
    print(format_estimate(totals))

    if args.dry_run:
        return 0

    if not args.yes:
        answer = _ask(input_fn, f"Copy these files to {destination}? (y/n): ").lower()
        if answer not in {"y", "yes"}:
            print("Cancelled. Nothing was copied.")
            return 0

    def _progress(category: str, count: int) -> None:
        print(f"  {category:<14} {count} file(s) copied")

    start = time.monotonic()
    print("Copying:")
    result = collect(roots.values(), destination, CATEGORIES, progress=_progress)
    elapsed = time.monotonic() - start

    if WRITE_MANIFEST:
        manifest = os.path.join(destination, MANIFEST_NAME)
        try:
            write_manifest(result, manifest)
            logger.info("Manifest written to %s", manifest)
        except OSError as e:
            logger.error("Could not write manifest %s: %s", manifest, e)

    print(format_summary(result, elapsed, destination))
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
