"""Court record store protocol.

A store produces the full, current list of courts. Two variants satisfy the
protocol:

- LiveCourtStore pages through the CourtListener courts endpoint.
- SnapshotCourtStore reads previously generated JSON files and never touches
  the network.

The cache only ever talks to this protocol, so the variant is a deployment
choice (see build_store in config.py).

Failure contract:
- fetch_records() does not raise for network, HTTP, parse or file errors.
  It logs the failure and returns an empty list.
- An empty list always means failure to the caller. The cache turns it into
  EmptyDirectoryException and never caches it.
"""

from typing import Protocol

from jurisresolver.directory.data_types import CourtRecord


class CourtRecordStore(Protocol):
    """Protocol for court record stores."""

    name: str

    def fetch_records(self) -> list[CourtRecord]:
        """Return every known court in acquisition order.

        Returns:
            The records, or an empty list if acquisition failed.
        """
        ...
