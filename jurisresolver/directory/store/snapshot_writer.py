"""Write a court directory out as snapshot files.

Produces the layout SnapshotCourtStore reads:

    <root>/courts/all.json
    <root>/courts/{federal,state,bankruptcy,military,special}.json
    <root>/courts/states/<state>.json
    <root>/jurisdictions/court-mappings.json
"""

import logging
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, ValidationError

from jurisresolver.directory.common.keywords import jurisdiction_mappings
from jurisresolver.directory.common.snapshot_models import (
    ALL_COURTS_FILE,
    CATEGORY_FILES,
    COURT_MAPPINGS_FILE,
    CategoryCounts,
    CourtMappingsFile,
    CourtResourceFile,
    StateCourtResourceFile,
    StateCourtTypes,
)
from jurisresolver.directory.common.state_codes import STATES
from jurisresolver.directory.data_types import (
    CourtDirectory,
    JurisdictionCategory,
)

logger = logging.getLogger(__name__)


def write_snapshot(directory: CourtDirectory, root: Path) -> list[Path]:
    """Write every snapshot file for ``directory`` under ``root``.

    Returns:
        Paths of the files written.
    """
    timestamp = datetime.now(timezone.utc)
    courts_dir = root / "courts"
    written: list[Path] = []

    counts = directory.category_counts()
    all_file = CourtResourceFile(
        generated_at=timestamp,
        total_courts=len(directory),
        categories=CategoryCounts(
            federal=counts[JurisdictionCategory.FEDERAL],
            state=counts[JurisdictionCategory.STATE],
            bankruptcy=counts[JurisdictionCategory.FEDERAL_BANKRUPTCY],
            military=counts[JurisdictionCategory.MILITARY],
            special=counts[JurisdictionCategory.SPECIAL],
        ),
        courts=list(directory.courts),
    )
    written.append(_write_json(courts_dir / ALL_COURTS_FILE, all_file))

    for category, filename in CATEGORY_FILES.items():
        courts = list(directory.by_category.get(category, ()))
        category_file = CourtResourceFile(
            generated_at=timestamp, total_courts=len(courts), courts=courts
        )
        written.append(_write_json(courts_dir / filename, category_file))

    for state in STATES:
        state_ids = directory.state_index.get(state.key)
        if not state_ids:
            logger.info(f"No courts found for {state.key}")
            continue
        state_courts = [directory.get(court_id) for court_id in state_ids]
        courts = [court for court in state_courts if court is not None]
        state_file = StateCourtResourceFile(
            state=state.key,
            generated_at=timestamp,
            total_courts=len(courts),
            court_types=StateCourtTypes(
                federal=[c.id for c in courts if c.category is JurisdictionCategory.FEDERAL],
                state=[c.id for c in courts if c.category is JurisdictionCategory.STATE],
                bankruptcy=[
                    c.id
                    for c in courts
                    if c.category is JurisdictionCategory.FEDERAL_BANKRUPTCY
                ],
                local=[
                    c.id
                    for c in courts
                    if c.category
                    in (JurisdictionCategory.MILITARY, JurisdictionCategory.SPECIAL)
                ],
            ),
            courts=courts,
        )
        written.append(
            _write_json(courts_dir / "states" / f"{state.key}.json", state_file)
        )

    mappings_file = CourtMappingsFile(
        generated_at=timestamp, mappings=jurisdiction_mappings(directory)
    )
    written.append(
        _write_json(root / "jurisdictions" / COURT_MAPPINGS_FILE, mappings_file)
    )

    logger.info(f"Wrote {len(written)} snapshot files to {root}")
    return written


def validate_snapshot(root: Path) -> list[str]:
    """Check that every expected snapshot file exists and parses.

    Returns:
        One message per problem found; empty when the snapshot is valid.
    """
    courts_dir = root / "courts"
    expected: list[tuple[Path, type[BaseModel]]] = [
        (courts_dir / ALL_COURTS_FILE, CourtResourceFile),
        *((courts_dir / name, CourtResourceFile) for name in CATEGORY_FILES.values()),
        (root / "jurisdictions" / COURT_MAPPINGS_FILE, CourtMappingsFile),
    ]
    states_dir = courts_dir / "states"
    if states_dir.is_dir():
        expected.extend(
            (path, StateCourtResourceFile)
            for path in sorted(states_dir.glob("*.json"))
        )

    problems = []
    for path, model in expected:
        if not path.exists():
            problems.append(f"Missing file: {path.relative_to(root)}")
            continue
        try:
            model.model_validate_json(path.read_text(encoding="utf-8"))
        except ValidationError as e:
            problems.append(
                f"Invalid {path.relative_to(root)}: {e.error_count()} error(s)"
            )
    return problems


def _write_json(path: Path, model: BaseModel) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(model.model_dump_json(indent=2), encoding="utf-8")
    logger.debug(f"Created {path}")
    return path
