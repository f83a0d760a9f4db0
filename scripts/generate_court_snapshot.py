#!/usr/bin/env python3
"""Generate the court directory snapshot.

Fetches every court from the CourtListener API, categorizes them, and writes
the JSON snapshot read by SnapshotCourtStore. Without an API key a small
sample directory is written instead, which is enough for development and
tests.

Usage:
    python -m scripts.generate_court_snapshot [output_dir]

Environment:
    COURTLISTENER_API_KEY - API token (optional, see above)
    COURT_SNAPSHOT_DIR    - Output directory when none is given

Output:
    <output_dir>/courts/*.json, courts/states/*.json,
    jurisdictions/court-mappings.json
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from jurisresolver.directory.categorizer import categorize  # noqa: E402
from jurisresolver.directory.common.config import DirectoryConfig  # noqa: E402
from jurisresolver.directory.data_types import CourtDirectory  # noqa: E402
from jurisresolver.directory.store.live_store import LiveCourtStore  # noqa: E402
from jurisresolver.directory.store.snapshot_writer import (  # noqa: E402
    validate_snapshot,
    write_snapshot,
)

logger = logging.getLogger("generate_court_snapshot")

# A minimal set of US courts covering every category
SAMPLE_COURTS: list[dict[str, str]] = [
    # Federal
    {"id": "scotus", "short_name": "U.S.", "full_name": "Supreme Court of the United States", "jurisdiction": "F"},
    {"id": "ca9", "short_name": "9th Cir.", "full_name": "United States Court of Appeals for the Ninth Circuit", "jurisdiction": "F"},
    {"id": "ca2", "short_name": "2nd Cir.", "full_name": "United States Court of Appeals for the Second Circuit", "jurisdiction": "F"},
    {"id": "cacd", "short_name": "C.D. Cal.", "full_name": "United States District Court for the Central District of California", "jurisdiction": "FD"},
    {"id": "nysd", "short_name": "S.D.N.Y.", "full_name": "United States District Court for the Southern District of New York", "jurisdiction": "FD"},
    # State
    {"id": "cal", "short_name": "Cal.", "full_name": "Supreme Court of California", "jurisdiction": "S"},
    {"id": "ny", "short_name": "N.Y.", "full_name": "New York Court of Appeals", "jurisdiction": "S"},
    {"id": "tex", "short_name": "Tex.", "full_name": "Supreme Court of Texas", "jurisdiction": "S"},
    {"id": "fla", "short_name": "Fla.", "full_name": "Supreme Court of Florida", "jurisdiction": "S"},
    {"id": "sc", "short_name": "S.C.", "full_name": "Supreme Court of South Carolina", "jurisdiction": "S"},
    # Bankruptcy
    {"id": "cacb", "short_name": "Bankr. C.D. Cal.", "full_name": "United States Bankruptcy Court for the Central District of California", "jurisdiction": "FB"},
    {"id": "nysb", "short_name": "Bankr. S.D.N.Y.", "full_name": "United States Bankruptcy Court for the Southern District of New York", "jurisdiction": "FB"},
    # Military
    {"id": "asbca", "short_name": "A.S.B.C.A.", "full_name": "Armed Services Board of Contract Appeals", "jurisdiction": "MA"},
    # Special
    {"id": "tax", "short_name": "T.C.", "full_name": "United States Tax Court", "jurisdiction": "FS"},
]


def build_directory(config: DirectoryConfig) -> CourtDirectory:
    """Fetch and categorize courts, or categorize the sample set."""
    if not config.api_key:
        print("No COURTLISTENER_API_KEY found - writing sample courts")
        return categorize(SAMPLE_COURTS)

    print(f"Fetching courts from {config.api_base}...")
    with LiveCourtStore(
        api_base=config.api_base,
        api_key=config.api_key,
        page_size=config.page_size,
        max_records=config.max_records,
        requests_per_second=config.requests_per_second,
    ) as store:
        records = store.fetch_records()
    print(f"  Fetched {len(records)} courts")
    return categorize(records)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    argv = sys.argv[1:] if argv is None else argv

    try:
        config = DirectoryConfig.from_env()
        output_dir = Path(argv[0]) if argv else config.snapshot_dir

        directory = build_directory(config)
        if directory.is_empty:
            print("Error: no courts discovered. Check your API key and connection.")
            return 1

        write_snapshot(directory, output_dir)

        problems = validate_snapshot(output_dir)
        for problem in problems:
            print(f"  {problem}")
        if problems:
            print(f"Found {len(problems)} validation errors")
            return 1

        print("\nCourts by category:")
        for category, count in directory.category_counts().items():
            print(f"  {category.value}: {count}")
        print(f"Wrote snapshot to {output_dir}")
        return 0

    except Exception as e:
        logger.exception(f"Snapshot generation failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
