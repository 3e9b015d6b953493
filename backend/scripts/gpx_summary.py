#!/usr/bin/env python3
"""Print the stored GPX record for local files.

Usage:
    # Metadata for one file
    python backend/scripts/gpx_summary.py route.gpx

    # Several files, with key points every 20 km and a storage URL prefix
    python backend/scripts/gpx_summary.py day1.gpx day2.gpx \
        --key-points --interval 20 --url-prefix https://cdn.example.com/gpx/
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tripgpx.config import setup_logging
from tripgpx.features.gpx import (
    GPXParserService,
    GpxError,
    extract_key_points,
    is_gpx_file,
    is_within_size_limit,
    summarize,
    to_stored_record,
)

logger = logging.getLogger(__name__)


def summarize_file(path: Path, url_prefix: str, key_points: bool, interval: float | None) -> dict:
    """Stored record (plus preview counts) for one file."""
    if not is_gpx_file(path.name):
        raise GpxError(f"{path.name}: not a .gpx file")
    if not is_within_size_limit(path.stat().st_size):
        raise GpxError(f"{path.name}: file too large")

    result = GPXParserService.parse(path.read_bytes(), path.name)
    points = extract_key_points(result.tracks, result.routes, interval) if key_points else None

    record = to_stored_record(
        result.metadata,
        url=f"{url_prefix}{path.name}",
        is_valid=bool(result.tracks or result.routes),
        key_points=points,
    ).to_record()
    record["summary"] = summarize(result).to_record()
    return record


def main():
    parser = argparse.ArgumentParser(description="GPX metadata summary")
    parser.add_argument("files", nargs="+", type=Path, help="GPX files to read")
    parser.add_argument("--url-prefix", default="file://", help="Prefix for the stored URL")
    parser.add_argument("--key-points", action="store_true", help="Include key points")
    parser.add_argument("--interval", type=float, help="Key point spacing in km")
    parser.add_argument("--log-level", help="Override configured log level")
    args = parser.parse_args()

    setup_logging(args.log_level)

    exit_code = 0
    for path in args.files:
        try:
            record = summarize_file(path, args.url_prefix, args.key_points, args.interval)
        except (GpxError, OSError) as e:
            logger.error(f"Skipping {path}: {e}")
            exit_code = 1
            continue
        print(json.dumps(record, indent=2, ensure_ascii=False))

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
