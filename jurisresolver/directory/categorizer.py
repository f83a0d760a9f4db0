"""Build a CourtDirectory from a flat sequence of court records."""

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from typing_extensions import assert_never

from jurisresolver.directory.common.state_codes import (
    STATES,
    court_ids_for_state,
)
from jurisresolver.directory.data_types import (
    CourtDirectory,
    CourtRecord,
    JurisdictionCategory,
)

logger = logging.getLogger(__name__)


def categorize(
    records: Iterable[CourtRecord | Mapping[str, Any]],
) -> CourtDirectory:
    """Partition records into categories and build the state index.

    Raw mappings are normalized through CourtRecord.from_api; anything that
    cannot be normalized is skipped. Only the first record for a given id is
    kept.

    Args:
        records: Court records in acquisition order.

    Returns:
        A new CourtDirectory. Empty input gives an empty directory.
    """
    courts: list[CourtRecord] = []
    buckets: dict[JurisdictionCategory, list[CourtRecord]] = {
        category: [] for category in JurisdictionCategory
    }
    seen: set[str] = set()

    for item in records:
        match item:
            case CourtRecord():
                court: CourtRecord | None = item
            case Mapping():
                court = CourtRecord.from_api(item)
            case _:
                assert_never(item)  # ty: ignore[type-assertion-failure]

        if court is None:
            continue
        if court.id in seen:
            logger.debug(f"Dropping duplicate court id {court.id!r}")
            continue
        seen.add(court.id)
        courts.append(court)
        buckets[court.category].append(court)

    directory = CourtDirectory(
        courts=tuple(courts),
        by_category=MappingProxyType(
            {category: tuple(bucket) for category, bucket in buckets.items()}
        ),
        state_index=MappingProxyType(build_state_index(courts)),
    )

    counts = directory.category_counts()
    logger.info(
        f"Categorized {len(directory)} courts: "
        + ", ".join(f"{cat.value}={n}" for cat, n in counts.items()),
        extra={"total": len(directory), **{c.value: n for c, n in counts.items()}},
    )
    return directory


def build_state_index(
    courts: Iterable[CourtRecord],
) -> dict[str, tuple[str, ...]]:
    """Map every state name and synonym to the ids of that state's courts.

    States with no matching court are left out so a lookup hit is always
    non-empty.
    """
    court_ids = [court.id for court in courts]
    index: dict[str, tuple[str, ...]] = {}
    for state in STATES:
        state_ids = tuple(court_ids_for_state(state, court_ids))
        if not state_ids:
            continue
        for name in state.names:
            index.setdefault(name, state_ids)
    return index
