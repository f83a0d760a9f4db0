"""Live court record store backed by the CourtListener courts endpoint.

Pages through ``/courts/`` following the ``next`` link until the API stops
returning one. A hard ceiling on the number of records bounds runaway
pagination: once reached, the listing is truncated rather than followed
forever.

Requests can be throttled with pyrate_limiter so a refresh does not hammer
the API.
"""

import logging
from collections.abc import Mapping
from threading import Lock
from typing import Any

import httpx
from pyrate_limiter import Duration, Limiter, Rate

from jurisresolver.directory.data_types import CourtRecord

logger = logging.getLogger(__name__)

COURTLISTENER_API_BASE = "https://www.courtlistener.com/api/rest/v4"
DEFAULT_PAGE_SIZE = 200
DEFAULT_MAX_RECORDS = 4000


class MalformedPageError(ValueError):
    """A listing page did not have the expected shape."""


def throttle_rate(requests_per_second: float) -> Rate:
    """Build the limiter rate for a requests-per-second setting.

    Whole rates are N per second. Fractional rates become one request per
    interval (0.5 -> one request every 2000 ms) so they are never rounded up.

    Raises:
        ValueError: If the rate is not positive.
    """
    if requests_per_second <= 0:
        raise ValueError(
            f"requests_per_second must be positive, got {requests_per_second}"
        )
    if float(requests_per_second).is_integer():
        return Rate(int(requests_per_second), Duration.SECOND)
    return Rate(1, round(1000 / requests_per_second))


class LiveCourtStore:
    """Court record store that fetches every court from the API.

    Example:
        store = LiveCourtStore(api_key="...", requests_per_second=5)
        records = store.fetch_records()
        if not records:
            ...  # acquisition failed, see logs

    Records without an ``id`` or ``jurisdiction`` are skipped. Any network
    error, non-2xx status or malformed page makes the whole acquisition fail:
    a partial listing is never returned.
    """

    name = "live"

    def __init__(
        self,
        api_base: str = COURTLISTENER_API_BASE,
        api_key: str = "",
        page_size: int = DEFAULT_PAGE_SIZE,
        max_records: int = DEFAULT_MAX_RECORDS,
        requests_per_second: float | None = None,
        client: httpx.Client | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize the store.

        Args:
            api_base: Base URL of the REST API, without trailing slash.
            api_key: CourtListener API token. Sent as ``Token <key>`` when set.
            page_size: Records requested per page.
            max_records: Safety ceiling on the total number of records.
            requests_per_second: Throttle for page requests. None disables
                throttling.
            client: httpx client to use. If None, one is created and owned by
                the store.
            timeout: Request timeout in seconds for an owned client.
        """
        self.api_base = api_base.rstrip("/")
        self.page_size = page_size
        self.max_records = max_records

        headers = {"User-Agent": "jurisresolver"}
        if api_key:
            headers["Authorization"] = f"Token {api_key}"

        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)
        self._headers = headers

        self._lock = Lock()
        self.rate: Rate | None = None
        self.limiter: Limiter | None = None
        if requests_per_second is not None:
            self.rate = throttle_rate(requests_per_second)
            # max_delay makes the limiter sleep instead of raising
            self.limiter = Limiter(self.rate, max_delay=Duration.HOUR)

        self.pages_fetched = 0

    def fetch_records(self) -> list[CourtRecord]:
        """Fetch every court from the API.

        Returns:
            Records in API order, or an empty list if acquisition failed.
        """
        try:
            raw_courts = self._fetch_raw_courts()
        except httpx.HTTPError as e:
            logger.error(
                f"Failed to fetch courts from {self.api_base}: {e}",
                extra={"api_base": self.api_base, "error": str(e)},
            )
            return []
        except ValueError as e:
            # Covers invalid JSON as well as MalformedPageError
            logger.error(
                f"Malformed court listing from {self.api_base}: {e}",
                extra={"api_base": self.api_base, "error": str(e)},
            )
            return []

        records = []
        for raw in raw_courts:
            record = CourtRecord.from_api(raw)
            if record is not None:
                records.append(record)

        skipped = len(raw_courts) - len(records)
        logger.info(
            f"Fetched {len(records)} courts in {self.pages_fetched} page(s)"
            + (f", skipped {skipped}" if skipped else ""),
            extra={"courts": len(records), "skipped": skipped},
        )
        return records

    def _fetch_raw_courts(self) -> list[Mapping[str, Any]]:
        url: str | None = f"{self.api_base}/courts/"
        params: dict[str, Any] | None = {"page_size": self.page_size}
        raw_courts: list[Mapping[str, Any]] = []
        self.pages_fetched = 0

        while url and len(raw_courts) < self.max_records:
            data = self._get_page(url, params)
            results = _page_results(data)
            if not results:
                break
            raw_courts.extend(results)
            self.pages_fetched += 1
            logger.debug(
                f"Page {self.pages_fetched}: {len(raw_courts)} courts so far"
            )
            # The next link already carries the query string
            url = data.get("next")
            params = None

        if len(raw_courts) >= self.max_records and (
            url or len(raw_courts) > self.max_records
        ):
            logger.warning(
                f"Court listing reached the {self.max_records} record ceiling; "
                "truncating",
                extra={"max_records": self.max_records},
            )
            raw_courts = raw_courts[: self.max_records]

        return raw_courts

    def _get_page(
        self, url: str, params: dict[str, Any] | None
    ) -> Mapping[str, Any]:
        if self.limiter is not None:
            with self._lock:
                self.limiter.try_acquire("courts")

        response = self._client.get(url, params=params, headers=self._headers)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, Mapping):
            raise MalformedPageError(
                f"expected a JSON object, got {type(data).__name__}"
            )
        return data

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "LiveCourtStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _page_results(data: Mapping[str, Any]) -> list[Mapping[str, Any]]:
    results = data.get("results")
    if not isinstance(results, list):
        raise MalformedPageError("page has no 'results' list")
    for item in results:
        if not isinstance(item, Mapping):
            raise MalformedPageError(
                f"court entry is {type(item).__name__}, not an object"
            )
    return results
