"""State name and court-id prefix table.

Each entry maps one US state to the names a caller might type for it and to
the prefixes CourtListener uses at the start of that state's court ids
(California courts are "cal", "calctapp", "cacd", "cacb", ...).

This is the only copy of the table. The categorizer builds the state index
from it and the suggestion engine derives its compound-name heuristics from
it.

Matching is a plain prefix test on court ids, so the table trades precision
for recall: "ca" also claims the federal circuit courts ("ca9", "cadc"), and
a court whose id does not follow the convention is missed.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class StateCodes:
    """One row of the state table.

    Attributes:
        key: Canonical hyphenated key (e.g. "new-york").
        codes: Court id prefixes belonging to the state.
        synonyms: Extra names that resolve to the state (abbreviations).
    """

    key: str
    codes: tuple[str, ...]
    synonyms: tuple[str, ...] = ()

    @property
    def collapsed_key(self) -> str:
        return self.key.replace("-", "")

    @property
    def names(self) -> tuple[str, ...]:
        """Every lookup key for this state, canonical key first."""
        names = [self.key]
        for name in (self.collapsed_key, *self.synonyms):
            if name not in names:
                names.append(name)
        return tuple(names)

    @property
    def is_compound(self) -> bool:
        return "-" in self.key

    @property
    def words(self) -> tuple[str, ...]:
        return tuple(self.key.split("-"))


STATES: tuple[StateCodes, ...] = (
    StateCodes("alabama", ("al",), ("al",)),
    StateCodes("alaska", ("ak",), ("ak",)),
    StateCodes("arizona", ("az",), ("az",)),
    StateCodes("arkansas", ("ar",), ("ar",)),
    StateCodes("california", ("ca", "cal"), ("ca", "calif")),
    StateCodes("colorado", ("co",), ("co",)),
    StateCodes("connecticut", ("ct", "conn"), ("ct", "conn")),
    StateCodes("delaware", ("de",), ("de",)),
    StateCodes("florida", ("fl", "fla"), ("fl", "fla")),
    StateCodes("georgia", ("ga",), ("ga",)),
    StateCodes("hawaii", ("hi",), ("hi",)),
    StateCodes("idaho", ("id",), ("id",)),
    StateCodes("illinois", ("il", "ill"), ("il", "ill")),
    StateCodes("indiana", ("in",), ("in",)),
    StateCodes("iowa", ("ia",), ("ia",)),
    StateCodes("kansas", ("ks",), ("ks",)),
    StateCodes("kentucky", ("ky",), ("ky",)),
    StateCodes("louisiana", ("la",), ("la",)),
    StateCodes("maine", ("me",), ("me",)),
    StateCodes("maryland", ("md",), ("md",)),
    StateCodes("massachusetts", ("ma",), ("ma",)),
    StateCodes("michigan", ("mi",), ("mi",)),
    StateCodes("minnesota", ("mn",), ("mn",)),
    StateCodes("mississippi", ("ms",), ("ms",)),
    StateCodes("missouri", ("mo",), ("mo",)),
    StateCodes("montana", ("mt",), ("mt",)),
    StateCodes("nebraska", ("ne",), ("ne",)),
    StateCodes("nevada", ("nv",), ("nv",)),
    StateCodes("new-hampshire", ("nh",), ("nh",)),
    StateCodes("new-jersey", ("nj",), ("nj",)),
    StateCodes("new-mexico", ("nm",), ("nm",)),
    StateCodes("new-york", ("ny",), ("ny",)),
    StateCodes("north-carolina", ("nc",), ("nc",)),
    StateCodes("north-dakota", ("nd",), ("nd",)),
    StateCodes("ohio", ("oh",), ("oh",)),
    StateCodes("oklahoma", ("ok",), ("ok",)),
    StateCodes("oregon", ("or",), ("or",)),
    StateCodes("pennsylvania", ("pa",), ("pa",)),
    StateCodes("rhode-island", ("ri",), ("ri",)),
    StateCodes("south-carolina", ("sc",), ("sc",)),
    StateCodes("south-dakota", ("sd",), ("sd",)),
    StateCodes("tennessee", ("tn", "tenn"), ("tn", "tenn")),
    StateCodes("texas", ("tx", "tex"), ("tx", "tex")),
    StateCodes("utah", ("ut",), ("ut",)),
    StateCodes("vermont", ("vt",), ("vt",)),
    StateCodes("virginia", ("va",), ("va",)),
    StateCodes("washington", ("wa",), ("wa",)),
    StateCodes("west-virginia", ("wv",), ("wv",)),
    StateCodes("wisconsin", ("wi",), ("wi",)),
    StateCodes("wyoming", ("wy",), ("wy",)),
)


def court_ids_for_state(state: StateCodes, court_ids: list[str]) -> list[str]:
    """Return the ids (in the given order) that start with one of the state's codes."""
    return [
        court_id
        for court_id in court_ids
        if any(court_id.lower().startswith(code) for code in state.codes)
    ]
