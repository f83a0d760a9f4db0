"""Fixtures shared by the court directory tests."""

from typing import Any

import pytest

from jurisresolver.directory.categorizer import categorize
from jurisresolver.directory.data_types import CourtDirectory, CourtRecord
from tests.directory.utils import to_records

SAMPLE_COURTS: list[dict[str, Any]] = [
    # Federal appellate and district
    {"id": "scotus", "short_name": "U.S.", "full_name": "Supreme Court of the United States", "jurisdiction": "F", "start_date": "1789-09-24"},
    {"id": "ca1", "short_name": "1st Cir.", "full_name": "Court of Appeals for the First Circuit", "jurisdiction": "F"},
    {"id": "ca2", "short_name": "2d Cir.", "full_name": "Court of Appeals for the Second Circuit", "jurisdiction": "F"},
    {"id": "ca9", "short_name": "9th Cir.", "full_name": "Court of Appeals for the Ninth Circuit", "jurisdiction": "F"},
    {"id": "cadc", "short_name": "D.C. Cir.", "full_name": "Court of Appeals for the D.C. Circuit", "jurisdiction": "F"},
    {"id": "cacd", "short_name": "C.D. Cal.", "full_name": "District Court, C.D. California", "jurisdiction": "FD"},
    {"id": "nysd", "short_name": "S.D.N.Y.", "full_name": "District Court, S.D. New York", "jurisdiction": "FD"},
    {"id": "txsd", "short_name": "S.D. Tex.", "full_name": "District Court, S.D. Texas", "jurisdiction": "FD"},
    # State
    {"id": "cal", "short_name": "Cal.", "full_name": "California Supreme Court", "jurisdiction": "S"},
    {"id": "calctapp", "short_name": "Cal. Ct. App.", "full_name": "California Court of Appeal", "jurisdiction": "SA"},
    {"id": "ny", "short_name": "N.Y.", "full_name": "New York Court of Appeals", "jurisdiction": "S"},
    {"id": "nyappdiv", "short_name": "N.Y. App. Div.", "full_name": "Appellate Division of the Supreme Court of the State of New York", "jurisdiction": "SA"},
    {"id": "tex", "short_name": "Tex.", "full_name": "Texas Supreme Court", "jurisdiction": "S"},
    {"id": "texapp", "short_name": "Tex. App.", "full_name": "Court of Appeals of Texas", "jurisdiction": "SA"},
    {"id": "scctapp", "short_name": "S.C. Ct. App.", "full_name": "Court of Appeals of South Carolina", "jurisdiction": "SA"},
    # Bankruptcy
    {"id": "cacb", "short_name": "Bankr. C.D. Cal.", "full_name": "United States Bankruptcy Court, C.D. California", "jurisdiction": "FB"},
    {"id": "nysb", "short_name": "Bankr. S.D.N.Y.", "full_name": "United States Bankruptcy Court, S.D. New York", "jurisdiction": "FB"},
    # Military
    {"id": "asbca", "short_name": "A.S.B.C.A.", "full_name": "Armed Services Board of Contract Appeals", "jurisdiction": "MA"},
    {"id": "cma", "short_name": "C.M.A.", "full_name": "Court of Military Appeals", "jurisdiction": "MA"},
    # Special, including an unknown code
    {"id": "tax", "short_name": "T.C.", "full_name": "United States Tax Court", "jurisdiction": "FS"},
    {"id": "uscfc", "short_name": "Fed. Cl.", "full_name": "United States Court of Federal Claims", "jurisdiction": "FS"},
    {"id": "icj", "short_name": "", "full_name": "", "jurisdiction": "I"},
]


@pytest.fixture
def sample_courts() -> list[dict[str, Any]]:
    return [dict(court) for court in SAMPLE_COURTS]


@pytest.fixture
def sample_records(sample_courts: list[dict[str, Any]]) -> list[CourtRecord]:
    return to_records(sample_courts)


@pytest.fixture
def directory(sample_records: list[CourtRecord]) -> CourtDirectory:
    return categorize(sample_records)
