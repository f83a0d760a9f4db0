"""Pydantic models for the snapshot files.

The offline generation step writes, under one resources directory:

- courts/all.json and one file per category (CourtResourceFile)
- courts/states/<state>.json (StateCourtResourceFile)
- jurisdictions/court-mappings.json (CourtMappingsFile)

SnapshotCourtStore validates what it reads against the same models.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from jurisresolver.directory.data_types import CourtRecord, JurisdictionCategory

API_VERSION = "v4"

# Category -> file name under courts/. Order is the reconstruction order used
# when all.json is missing.
CATEGORY_FILES: dict[JurisdictionCategory, str] = {
    JurisdictionCategory.FEDERAL: "federal.json",
    JurisdictionCategory.STATE: "state.json",
    JurisdictionCategory.FEDERAL_BANKRUPTCY: "bankruptcy.json",
    JurisdictionCategory.MILITARY: "military.json",
    JurisdictionCategory.SPECIAL: "special.json",
}

ALL_COURTS_FILE = "all.json"
COURT_MAPPINGS_FILE = "court-mappings.json"


class CategoryCounts(BaseModel):
    federal: int = 0
    state: int = 0
    bankruptcy: int = 0
    military: int = 0
    special: int = 0


class CourtResourceFile(BaseModel):
    """courts/all.json and the per-category files."""

    generated_at: datetime
    total_courts: int
    api_version: str = API_VERSION
    categories: CategoryCounts | None = None
    courts: list[CourtRecord] = Field(default_factory=list)


class StateCourtTypes(BaseModel):
    federal: list[str] = Field(default_factory=list)
    state: list[str] = Field(default_factory=list)
    bankruptcy: list[str] = Field(default_factory=list)
    local: list[str] = Field(default_factory=list)


class StateCourtResourceFile(BaseModel):
    """courts/states/<state>.json."""

    state: str
    generated_at: datetime
    total_courts: int
    court_types: StateCourtTypes
    courts: list[CourtRecord] = Field(default_factory=list)


class CourtMappingsFile(BaseModel):
    """jurisdictions/court-mappings.json: token to court ids."""

    generated_at: datetime
    description: str = "Maps jurisdiction input strings to court ID arrays"
    mappings: dict[str, list[str]] = Field(default_factory=dict)
