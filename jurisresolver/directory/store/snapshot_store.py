"""Snapshot court record store.

Reads the JSON files written by the offline generation step
(scripts/generate_court_snapshot.py). This is the store to use wherever the
resolution path must not reach the network.
"""

import logging
from pathlib import Path

from jurisresolver.directory.common.snapshot_models import (
    ALL_COURTS_FILE,
    CATEGORY_FILES,
    CourtResourceFile,
)
from jurisresolver.directory.data_types import CourtRecord

logger = logging.getLogger(__name__)


class SnapshotCourtStore:
    """Court record store that reads a generated snapshot.

    Records come from ``courts/all.json``. If that file is missing, they are
    rebuilt from the five category files in the order federal, state,
    bankruptcy, military, special. A missing or malformed file makes the whole
    acquisition fail.
    """

    name = "snapshot"

    def __init__(self, resources_dir: Path | str) -> None:
        """Initialize the store.

        Args:
            resources_dir: Root of the snapshot (the directory containing
                ``courts/`` and ``jurisdictions/``).
        """
        self.resources_dir = Path(resources_dir)

    @property
    def courts_dir(self) -> Path:
        return self.resources_dir / "courts"

    def fetch_records(self) -> list[CourtRecord]:
        """Load every court from the snapshot.

        Returns:
            Records in snapshot order, or an empty list if the snapshot is
            missing or malformed.
        """
        all_path = self.courts_dir / ALL_COURTS_FILE
        try:
            if all_path.exists():
                records = self._read_courts(all_path)
            else:
                logger.info(
                    f"{all_path} not found, rebuilding from category files"
                )
                records = self._read_category_files()
        except (OSError, ValueError) as e:
            # ValueError covers pydantic ValidationError and UnicodeDecodeError
            logger.error(
                f"Failed to load court snapshot from {self.resources_dir}: {e}",
                extra={"resources_dir": str(self.resources_dir)},
            )
            return []

        logger.info(
            f"Loaded {len(records)} courts from snapshot {self.resources_dir}"
        )
        return records

    def _read_courts(self, path: Path) -> list[CourtRecord]:
        resource = CourtResourceFile.model_validate_json(
            path.read_text(encoding="utf-8")
        )
        if resource.total_courts != len(resource.courts):
            logger.warning(
                f"{path.name} declares {resource.total_courts} courts "
                f"but lists {len(resource.courts)}"
            )
        return resource.courts

    def _read_category_files(self) -> list[CourtRecord]:
        records: list[CourtRecord] = []
        seen: set[str] = set()
        for filename in CATEGORY_FILES.values():
            for court in self._read_courts(self.courts_dir / filename):
                if court.id not in seen:
                    seen.add(court.id)
                    records.append(court)
        return records
