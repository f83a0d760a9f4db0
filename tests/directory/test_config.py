"""Tests for DirectoryConfig and store selection."""

from datetime import timedelta
from pathlib import Path

import pytest

from jurisresolver.directory.common.config import DirectoryConfig, build_store
from jurisresolver.directory.common.exceptions import ConfigurationException
from jurisresolver.directory.resolver import JurisdictionResolver
from jurisresolver.directory.store.live_store import (
    COURTLISTENER_API_BASE,
    DEFAULT_PAGE_SIZE,
    LiveCourtStore,
)
from jurisresolver.directory.store.snapshot_store import SnapshotCourtStore

ENV_VARS = [
    "COURTLISTENER_API_KEY",
    "COURTLISTENER_API_BASE",
    "COURT_DIRECTORY_SOURCE",
    "COURT_SNAPSHOT_DIR",
    "COURT_DIRECTORY_TTL_DAYS",
    "COURT_PAGE_SIZE",
    "COURT_MAX_RECORDS",
    "COURTLISTENER_REQUESTS_PER_SECOND",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Clear every setting and return a .env path that does not exist."""
    for name in ENV_VARS:
        # set first so teardown also removes values loaded from .env files
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return tmp_path / "missing.env"


class TestFromEnv:
    """Tests for DirectoryConfig.from_env."""

    def test_defaults(self, clean_env: Path) -> None:
        """With nothing set the defaults shall apply."""
        config = DirectoryConfig.from_env(clean_env)
        assert config.api_key == ""
        assert config.api_base == COURTLISTENER_API_BASE
        assert config.source == "snapshot"
        assert config.snapshot_dir == Path("resources")
        assert config.ttl == timedelta(days=15)
        assert config.page_size == DEFAULT_PAGE_SIZE
        assert config.requests_per_second == 5.0

    def test_values_from_environment(
        self, clean_env: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Environment variables shall override the defaults."""
        monkeypatch.setenv("COURTLISTENER_API_KEY", " secret ")
        monkeypatch.setenv("COURT_DIRECTORY_SOURCE", "LIVE")
        monkeypatch.setenv("COURT_DIRECTORY_TTL_DAYS", "0.5")
        monkeypatch.setenv("COURT_PAGE_SIZE", "50")
        monkeypatch.setenv("COURTLISTENER_REQUESTS_PER_SECOND", "0")

        config = DirectoryConfig.from_env(clean_env)

        assert config.api_key == "secret"
        assert config.source == "live"
        assert config.ttl == timedelta(hours=12)
        assert config.page_size == 50
        assert config.requests_per_second is None

    def test_values_from_dotenv_file(
        self, clean_env: Path, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """A .env file shall fill in unset variables only."""
        dotenv = tmp_path / ".env"
        dotenv.write_text("COURT_SNAPSHOT_DIR=/data/courts\nCOURT_PAGE_SIZE=25\n")
        monkeypatch.setenv("COURT_PAGE_SIZE", "100")

        config = DirectoryConfig.from_env(dotenv)

        assert config.snapshot_dir == Path("/data/courts")
        assert config.page_size == 100

    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("COURT_PAGE_SIZE", "many"),
            ("COURT_PAGE_SIZE", "0"),
            ("COURT_MAX_RECORDS", "-1"),
            ("COURT_DIRECTORY_TTL_DAYS", "soon"),
            ("COURT_DIRECTORY_TTL_DAYS", "0"),
            ("COURT_DIRECTORY_SOURCE", "database"),
        ],
    )
    def test_invalid_values(
        self,
        clean_env: Path,
        monkeypatch: pytest.MonkeyPatch,
        name: str,
        value: str,
    ) -> None:
        """Malformed settings shall raise ConfigurationException."""
        monkeypatch.setenv(name, value)
        with pytest.raises(ConfigurationException) as exc_info:
            DirectoryConfig.from_env(clean_env)
        assert exc_info.value.setting == name


class TestBuildStore:
    """Tests for choosing a record store."""

    def test_snapshot_store(self, tmp_path: Path) -> None:
        """The default source shall be the snapshot store."""
        store = build_store(DirectoryConfig(snapshot_dir=tmp_path))
        assert isinstance(store, SnapshotCourtStore)
        assert store.resources_dir == tmp_path

    def test_live_store(self) -> None:
        """source='live' shall build a throttled live store."""
        store = build_store(DirectoryConfig(source="live", page_size=10))
        assert isinstance(store, LiveCourtStore)
        assert store.page_size == 10
        assert store.limiter is not None
        store.close()

    def test_resolver_from_config(self, tmp_path: Path) -> None:
        """from_config shall wire the configured store and TTL into the cache."""
        config = DirectoryConfig(snapshot_dir=tmp_path, ttl=timedelta(days=2))
        resolver = JurisdictionResolver.from_config(config)
        assert isinstance(resolver.cache.store, SnapshotCourtStore)
        assert resolver.cache.ttl == timedelta(days=2)
