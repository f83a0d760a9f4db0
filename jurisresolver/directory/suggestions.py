"""Suggestion engine for jurisdiction tokens that failed to resolve.

Best effort only. Candidates come from three places, in this order:

1. Courts near the start of the directory whose name contains the token
2. Fixed keyword heuristics ("fed" -> "federal", "south" + "carolina" ->
   "south-carolina", ...)
3. Close spellings of known jurisdiction keys ("calfornia" -> "california")

The list is deduplicated and capped; it is not ranked beyond that order.
"""

import difflib

from jurisresolver.directory.common.keywords import (
    available_jurisdictions,
    collapse,
    normalize,
)
from jurisresolver.directory.common.state_codes import STATES
from jurisresolver.directory.data_types import CourtDirectory

MAX_SUGGESTIONS = 5
DIRECTORY_SCAN_LIMIT = 100
CLOSE_MATCH_CUTOFF = 0.75

# Offered by callers when suggest() comes back empty
FALLBACK_SUGGESTIONS = ["all", "federal", "state", "california", "new-york", "texas"]

# (words that must all appear in the token, suggestion)
KEYWORD_HEURISTICS: list[tuple[tuple[str, ...], str]] = [
    (("fed",), "federal"),
    (("supreme",), "scotus"),
    (("bankrupt",), "bankruptcy"),
    (("military",), "military"),
    (("armed",), "military"),
] + [(state.words, state.key) for state in STATES if state.is_compound]


def suggest_jurisdictions(
    directory: CourtDirectory, token: str, limit: int = MAX_SUGGESTIONS
) -> list[str]:
    """Propose up to ``limit`` jurisdiction keys or court ids for a token."""
    lowered, collapsed = normalize(token)
    candidates: list[str] = []

    if collapsed:
        for court in directory.courts[:DIRECTORY_SCAN_LIMIT]:
            if collapsed in collapse(court.short_name) or collapsed in collapse(
                court.full_name
            ):
                candidates.append(court.id)

    for words, suggestion in KEYWORD_HEURISTICS:
        if all(word in lowered for word in words):
            candidates.append(suggestion)

    if lowered:
        known = [key for key in available_jurisdictions(directory) if len(key) >= 3]
        for form in dict.fromkeys((lowered, collapsed)):
            candidates.extend(
                difflib.get_close_matches(
                    form, known, n=limit, cutoff=CLOSE_MATCH_CUTOFF
                )
            )

    return list(dict.fromkeys(candidates))[:limit]
