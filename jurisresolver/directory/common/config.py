"""Configuration for the court directory.

Settings come from the environment (optionally a ``.env`` file):

    COURTLISTENER_API_KEY               API token for the live store
    COURTLISTENER_API_BASE              REST API base URL
    COURT_DIRECTORY_SOURCE              "live" or "snapshot"
    COURT_SNAPSHOT_DIR                  Root of the generated snapshot
    COURT_DIRECTORY_TTL_DAYS            Directory lifetime in days
    COURT_PAGE_SIZE                     Courts per listing page
    COURT_MAX_RECORDS                   Safety ceiling on the listing
    COURTLISTENER_REQUESTS_PER_SECOND   Listing throttle, 0 disables it
"""

import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

from jurisresolver.directory.common.exceptions import ConfigurationException
from jurisresolver.directory.common.stores import CourtRecordStore
from jurisresolver.directory.store.live_store import (
    COURTLISTENER_API_BASE,
    DEFAULT_MAX_RECORDS,
    DEFAULT_PAGE_SIZE,
    LiveCourtStore,
)
from jurisresolver.directory.store.snapshot_store import SnapshotCourtStore

SOURCES = ("live", "snapshot")


@dataclass(frozen=True)
class DirectoryConfig:
    """Deployment settings for building a court directory."""

    api_key: str = ""
    api_base: str = COURTLISTENER_API_BASE
    source: str = "snapshot"
    snapshot_dir: Path = Path("resources")
    ttl: timedelta = timedelta(days=15)
    failure_backoff: timedelta = timedelta(minutes=1)
    page_size: int = DEFAULT_PAGE_SIZE
    max_records: int = DEFAULT_MAX_RECORDS
    requests_per_second: float | None = 5.0

    def __post_init__(self) -> None:
        if self.source not in SOURCES:
            raise ConfigurationException(
                "COURT_DIRECTORY_SOURCE", self.source, f"expected one of {SOURCES}"
            )
        if self.page_size < 1:
            raise ConfigurationException(
                "COURT_PAGE_SIZE", self.page_size, "must be positive"
            )
        if self.max_records < 1:
            raise ConfigurationException(
                "COURT_MAX_RECORDS", self.max_records, "must be positive"
            )
        if self.ttl <= timedelta(0):
            raise ConfigurationException(
                "COURT_DIRECTORY_TTL_DAYS", self.ttl.days, "must be positive"
            )

    @classmethod
    def from_env(cls, dotenv_path: Path | str | None = None) -> "DirectoryConfig":
        """Build a config from environment variables.

        Args:
            dotenv_path: Optional .env file to load first. Variables already
                set in the environment win.

        Raises:
            ConfigurationException: If a value is malformed.
        """
        load_dotenv(dotenv_path)

        rps = _env_float("COURTLISTENER_REQUESTS_PER_SECOND", 5.0)
        return cls(
            api_key=os.getenv("COURTLISTENER_API_KEY", "").strip(),
            api_base=os.getenv("COURTLISTENER_API_BASE", COURTLISTENER_API_BASE),
            source=os.getenv("COURT_DIRECTORY_SOURCE", "snapshot").strip().lower(),
            snapshot_dir=Path(os.getenv("COURT_SNAPSHOT_DIR", "resources")),
            ttl=timedelta(days=_env_float("COURT_DIRECTORY_TTL_DAYS", 15)),
            page_size=_env_int("COURT_PAGE_SIZE", DEFAULT_PAGE_SIZE),
            max_records=_env_int("COURT_MAX_RECORDS", DEFAULT_MAX_RECORDS),
            requests_per_second=rps if rps > 0 else None,
        )


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationException(name, value, "not an integer") from e


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as e:
        raise ConfigurationException(name, value, "not a number") from e


def build_store(config: DirectoryConfig) -> CourtRecordStore:
    """Pick the record store variant the config asks for."""
    if config.source == "live":
        return LiveCourtStore(
            api_base=config.api_base,
            api_key=config.api_key,
            page_size=config.page_size,
            max_records=config.max_records,
            requests_per_second=config.requests_per_second,
        )
    return SnapshotCourtStore(config.snapshot_dir)
