"""Jurisdiction resolution.

Turns a free-form jurisdiction token into an ordered, deduplicated list of
court ids, trying these strategies in order:

1. Sentinel keywords ("all", "federal", "state", "bankruptcy", ...)
2. Comma-separated court ids ("ca9,ca11,scotus")
3. An exact court id ("ca9")
4. A state name, hyphenated or collapsed, or a state synonym ("new-york",
   "newyork", "calif")
5. A substring of court names ("ninth circuit")

The first strategy with a non-empty result wins. "all" is the one successful
empty result: it means "no court filter". When nothing matches,
UnrecognizedJurisdictionException is raised and the caller can ask for
suggestions.

Resolution is a pure function of the directory and the token. Results follow
directory order and are never re-sorted.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from jurisresolver.directory.cache import DirectoryCache
from jurisresolver.directory.common.config import DirectoryConfig, build_store
from jurisresolver.directory.common.exceptions import (
    NoCourtsAtLevelException,
    UnrecognizedJurisdictionException,
)
from jurisresolver.directory.common.keywords import (
    available_jurisdictions,
    collapse,
    normalize,
    sentinel_category,
)
from jurisresolver.directory.data_types import (
    CourtDirectory,
    CourtLevel,
    CourtRecord,
)
from jurisresolver.directory.suggestions import suggest_jurisdictions

logger = logging.getLogger(__name__)

MAX_PARTIAL_MATCHES = 50
MIN_PARTIAL_LENGTH = 3


def resolve_jurisdiction(directory: CourtDirectory, token: str) -> list[str]:
    """Resolve a jurisdiction token against a directory.

    Args:
        directory: The directory to search.
        token: The raw jurisdiction string.

    Returns:
        Court ids in directory order. An empty list means "all courts" (the
        token was "all" or blank).

    Raises:
        UnrecognizedJurisdictionException: If no strategy matched.
    """
    lowered, collapsed = normalize(token)
    if not lowered:
        return []

    matched, category = sentinel_category(lowered, collapsed)
    if matched:
        if category is None:
            return []
        ids = directory.ids_for(category)
        if ids:
            return ids

    if "," in token:
        ids = _match_id_list(directory, token)
        if ids:
            return ids

    if lowered in directory:
        return [lowered]

    for key in (lowered, collapsed):
        state_ids = directory.state_index.get(key)
        if state_ids:
            return list(state_ids)

    if len(collapsed) >= MIN_PARTIAL_LENGTH:
        ids = _match_names(directory, collapsed)
        if ids:
            return ids

    raise UnrecognizedJurisdictionException(token)


def _match_id_list(directory: CourtDirectory, token: str) -> list[str]:
    parts = (part.strip().lower() for part in token.split(","))
    # Unknown ids are dropped, not reported
    return list(dict.fromkeys(part for part in parts if part in directory))


def _match_names(directory: CourtDirectory, collapsed: str) -> list[str]:
    ids: list[str] = []
    for court in directory.courts:
        if collapsed in collapse(court.short_name) or collapsed in collapse(
            court.full_name
        ):
            ids.append(court.id)
            if len(ids) >= MAX_PARTIAL_MATCHES:
                break
    return ids


# Raw jurisdiction code -> level. Codes not listed fall through to the
# id/name heuristics in classify_court_level.
LEVEL_BY_CODE: dict[str, CourtLevel] = {
    "S": CourtLevel.SUPREME,
    "F": CourtLevel.APPELLATE,
    "SA": CourtLevel.APPELLATE,
    "FBP": CourtLevel.APPELLATE,
    "MA": CourtLevel.APPELLATE,
    "FD": CourtLevel.TRIAL,
    "ST": CourtLevel.TRIAL,
    "FB": CourtLevel.TRIAL,
    "MT": CourtLevel.TRIAL,
}


def classify_court_level(
    court_id: str, court: CourtRecord | None = None
) -> CourtLevel | None:
    """Best-effort level of a court, or None if it cannot be told."""
    court_id = court_id.lower()
    if court_id == "scotus":
        return CourtLevel.SUPREME

    if court is not None:
        level = LEVEL_BY_CODE.get(court.jurisdiction.upper())
        if level is not None:
            return level
        if "supreme" in court.full_name.lower():
            return CourtLevel.SUPREME

    if "ca" in court_id or "app" in court_id:
        return CourtLevel.APPELLATE
    if "d" in court_id:
        return CourtLevel.TRIAL
    return None


def filter_by_court_level(
    directory: CourtDirectory, court_ids: Iterable[str], level: CourtLevel
) -> list[str]:
    """Keep only the ids whose court is at ``level``.

    CourtLevel.ALL keeps everything, and an empty ("all courts") list is
    returned unchanged for every level.
    """
    court_ids = list(court_ids)
    if level is CourtLevel.ALL or not court_ids:
        return court_ids
    return [
        court_id
        for court_id in court_ids
        if classify_court_level(court_id, directory.get(court_id)) is level
    ]


class JurisdictionResolver:
    """Resolves jurisdiction tokens against a cached court directory.

    Owns its DirectoryCache; the directory is built on first use and rebuilt
    when the cache expires.

    Example:
        resolver = JurisdictionResolver.from_config(DirectoryConfig.from_env())
        try:
            court_ids = resolver.resolve("california")
        except UnrecognizedJurisdictionException as e:
            suggestions = resolver.suggest(e.token)
    """

    def __init__(self, cache: DirectoryCache) -> None:
        self.cache = cache

    @classmethod
    def from_config(cls, config: DirectoryConfig) -> JurisdictionResolver:
        cache = DirectoryCache(
            build_store(config),
            ttl=config.ttl,
            failure_backoff=config.failure_backoff,
        )
        return cls(cache)

    def resolve(
        self, token: str, court_level: CourtLevel = CourtLevel.ALL
    ) -> list[str]:
        """Resolve a token to court ids, optionally narrowed by court level.

        Raises:
            UnrecognizedJurisdictionException: If no strategy matched.
            NoCourtsAtLevelException: If the token matched courts but none
                at ``court_level``.
            AcquisitionException: If no directory could be built.
        """
        directory = self.cache.ensure_fresh()
        try:
            court_ids = resolve_jurisdiction(directory, token)
        except UnrecognizedJurisdictionException:
            logger.info(f"Unrecognized jurisdiction {token!r}")
            raise

        filtered = filter_by_court_level(directory, court_ids, court_level)
        # [] means "all courts"; a real jurisdiction must never widen to it
        if court_ids and not filtered:
            logger.info(
                f"No {court_level.value} courts in jurisdiction {token!r}",
                extra={"token": token, "level": court_level.value},
            )
            raise NoCourtsAtLevelException(token, court_level.value)
        return filtered

    def suggest(self, token: str) -> list[str]:
        """Up to five alternatives for a token that failed to resolve."""
        return suggest_jurisdictions(self.cache.ensure_fresh(), token)

    def available_jurisdictions(self) -> list[str]:
        return available_jurisdictions(self.cache.ensure_fresh())
