"""Data types for the court directory.

This module defines the types shared by the record stores, the categorizer,
the cache and the resolver:

1. JurisdictionCategory - the closed set of coarse court categories
2. CourtRecord - one court as reported by CourtListener, validated
3. CourtDirectory - an immutable, categorized and indexed snapshot of courts
4. CourtLevel - coarse court level used to narrow a resolved id list
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    field_validator,
    model_validator,
)

logger = logging.getLogger(__name__)


class JurisdictionCategory(Enum):
    """Coarse classification of a court.

    Values double as the sentinel keywords a caller can type to select the
    whole category.
    """

    FEDERAL = "federal"
    STATE = "state"
    FEDERAL_BANKRUPTCY = "federal-bankruptcy"
    MILITARY = "military"
    SPECIAL = "special"

    @classmethod
    def from_code(cls, code: str | None) -> JurisdictionCategory:
        """Map a raw CourtListener jurisdiction code to a category.

        Unknown codes land in SPECIAL rather than being dropped.
        """
        return JURISDICTION_CODE_MAP.get((code or "").upper(), cls.SPECIAL)


# CourtListener jurisdiction codes. FS (federal special) and anything not
# listed here (tribal, territorial, international, committee) are SPECIAL.
JURISDICTION_CODE_MAP: dict[str, JurisdictionCategory] = {
    "F": JurisdictionCategory.FEDERAL,
    "FD": JurisdictionCategory.FEDERAL,
    "FB": JurisdictionCategory.FEDERAL_BANKRUPTCY,
    "FBP": JurisdictionCategory.FEDERAL_BANKRUPTCY,
    "MA": JurisdictionCategory.MILITARY,
    "MT": JurisdictionCategory.MILITARY,
    "S": JurisdictionCategory.STATE,
    "SA": JurisdictionCategory.STATE,
    "ST": JurisdictionCategory.STATE,
    "SS": JurisdictionCategory.STATE,
}


class CourtLevel(Enum):
    """Court level used to narrow resolved ids."""

    ALL = "all"
    TRIAL = "trial"
    APPELLATE = "appellate"
    SUPREME = "supreme"


class CourtRecord(BaseModel):
    """A single court known to CourtListener.

    Missing display names fall back to the id, so every record has a usable
    short and full name. The raw jurisdiction code is kept as reported so a
    snapshot written from a directory reads back identically.

    Example:
        record = CourtRecord(id="ca9", short_name="9th Cir.", jurisdiction="F")
        record.full_name  # "9th Cir."
        record.category   # JurisdictionCategory.FEDERAL
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    short_name: str = ""
    full_name: str = ""
    jurisdiction: str
    start_date: date | None = None
    end_date: date | None = None

    @model_validator(mode="before")
    @classmethod
    def _fill_defaults(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        data = dict(data)
        court_id = str(data.get("id") or "").strip().lower()
        data["id"] = court_id
        data["short_name"] = data.get("short_name") or court_id
        data["full_name"] = data.get("full_name") or data["short_name"]
        for key in ("start_date", "end_date"):
            value = data.get(key)
            # The API sometimes reports full timestamps; keep the date part.
            if isinstance(value, str):
                data[key] = value[:10] or None
        return data

    @field_validator("id", "jurisdiction")
    @classmethod
    def _require_value(cls, value: str) -> str:
        # A court with no id cannot be addressed, one with no code cannot be
        # categorized
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @property
    def category(self) -> JurisdictionCategory:
        return JurisdictionCategory.from_code(self.jurisdiction)

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> CourtRecord | None:
        """Build a record from a raw API object.

        Returns:
            The record, or None when the object has no id or no
            jurisdiction (it can be neither addressed nor categorized) or
            fails validation.
        """
        if not raw.get("id") or not raw.get("jurisdiction"):
            return None
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            logger.warning(
                f"Skipping invalid court record {raw.get('id')!r}: "
                f"{e.error_count()} validation error(s)",
                extra={"court_id": raw.get("id"), "errors": e.errors()},
            )
            return None


@dataclass(frozen=True)
class CourtDirectory:
    """Immutable snapshot of every known court.

    Built once by the categorizer and replaced wholesale on refresh, so a
    resolution running against an old snapshot is never affected by a new
    one being built.

    Attributes:
        courts: Every record in acquisition order.
        by_category: One stable subsequence of ``courts`` per category. The
            subsequences partition ``courts``.
        state_index: Lookup key (state key, collapsed key, or synonym) to the
            ids of that state's courts, in directory order.
        built_at: When the snapshot was built (UTC).
    """

    courts: tuple[CourtRecord, ...] = ()
    by_category: Mapping[JurisdictionCategory, tuple[CourtRecord, ...]] = (
        field(default_factory=lambda: MappingProxyType({}))
    )
    state_index: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    built_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    _by_id: Mapping[str, CourtRecord] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "_by_id",
            MappingProxyType({court.id: court for court in self.courts}),
        )

    def __len__(self) -> int:
        return len(self.courts)

    def __iter__(self) -> Iterator[CourtRecord]:
        return iter(self.courts)

    def __contains__(self, court_id: object) -> bool:
        return court_id in self._by_id

    def get(self, court_id: str) -> CourtRecord | None:
        return self._by_id.get(court_id)

    @property
    def ids(self) -> list[str]:
        return [court.id for court in self.courts]

    def ids_for(self, category: JurisdictionCategory) -> list[str]:
        return [court.id for court in self.by_category.get(category, ())]

    def category_counts(self) -> dict[JurisdictionCategory, int]:
        return {
            category: len(self.by_category.get(category, ()))
            for category in JurisdictionCategory
        }

    @property
    def is_empty(self) -> bool:
        return not self.courts
