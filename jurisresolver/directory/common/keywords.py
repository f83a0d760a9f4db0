"""Token normalization and the fixed jurisdiction vocabulary."""

import re

from jurisresolver.directory.data_types import CourtDirectory, JurisdictionCategory

# Keyword -> category. "all" maps to None: no court filter at all.
SENTINEL_KEYWORDS: dict[str, JurisdictionCategory | None] = {
    "all": None,
    "federal": JurisdictionCategory.FEDERAL,
    "state": JurisdictionCategory.STATE,
    "bankruptcy": JurisdictionCategory.FEDERAL_BANKRUPTCY,
    "federal-bankruptcy": JurisdictionCategory.FEDERAL_BANKRUPTCY,
    "federalbankruptcy": JurisdictionCategory.FEDERAL_BANKRUPTCY,
    "military": JurisdictionCategory.MILITARY,
    "special": JurisdictionCategory.SPECIAL,
}

_SEPARATORS = re.compile(r"[-_\s]+")


def collapse(text: str) -> str:
    """Lower-case and drop hyphens, underscores and whitespace."""
    return _SEPARATORS.sub("", text.lower())


def normalize(token: str) -> tuple[str, str]:
    """Return (lowered, collapsed) forms of a jurisdiction token.

    ``lowered`` keeps hyphens so keys like "new-york" still match;
    ``collapsed`` is the separator-free form ("newyork").
    """
    lowered = token.strip().lower()
    return lowered, collapse(lowered)


def sentinel_category(
    lowered: str, collapsed: str
) -> tuple[bool, JurisdictionCategory | None]:
    """Look a normalized token up in the sentinel vocabulary.

    Returns:
        (matched, category). ``category`` is None for "all".
    """
    for key in (lowered, collapsed):
        if key in SENTINEL_KEYWORDS:
            return True, SENTINEL_KEYWORDS[key]
    return False, None


def available_jurisdictions(directory: CourtDirectory) -> list[str]:
    """Sentinel keywords followed by every state key the directory knows."""
    return list(SENTINEL_KEYWORDS) + sorted(directory.state_index)


def jurisdiction_mappings(directory: CourtDirectory) -> dict[str, list[str]]:
    """Every fixed keyword and state name mapped to its court ids.

    This is the content of jurisdictions/court-mappings.json.
    """
    mappings: dict[str, list[str]] = {}
    for keyword, category in SENTINEL_KEYWORDS.items():
        mappings[keyword] = [] if category is None else directory.ids_for(category)
    for name, ids in directory.state_index.items():
        mappings.setdefault(name, list(ids))
    return mappings
