"""HTTP client with retries and exponential backoff."""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from tp_ranker.domain.errors import SnapshotUnavailableError

logger = logging.getLogger(__name__)


class HttpClient:
    """Fetches JSON documents, retrying rate limits and server errors."""

    def __init__(
        self,
        timeout: float = 20.0,
        max_retries: int = 3,
        backoff_factor: float = 0.5,
        retry_statuses: tuple = (429, 500, 502, 503, 504),
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize HTTP client.

        Args:
            timeout: Request timeout in seconds
            max_retries: Maximum number of retry attempts
            backoff_factor: Multiplier for exponential backoff
            retry_statuses: HTTP status codes that trigger a retry
            session: Preconfigured session, mostly for tests
        """
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.retry_statuses = retry_statuses

        self.session = session if session is not None else self._create_session()

    def _create_session(self) -> requests.Session:
        """Create a requests session with retry configuration."""
        session = requests.Session()

        retry_strategy = Retry(
            total=self.max_retries,
            backoff_factor=self.backoff_factor,
            status_forcelist=list(self.retry_statuses),
            allowed_methods=["GET"],
            raise_on_status=False,
        )

        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def get_json(self, url: str, params: Optional[dict] = None) -> Any:
        """
        GET ``url`` and decode the body as JSON.

        Numbers with a fractional part are decoded as ``Decimal``.

        Raises:
            SnapshotUnavailableError: On transport failure, a non-200 status
                or a body that is not valid JSON
        """
        logger.debug(f"Fetching {url} params={params}")
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise SnapshotUnavailableError(url, f"Request failed for {url}: {e}") from e

        if response.status_code != 200:
            raise SnapshotUnavailableError(url, f"HTTP {response.status_code} for {url}")

        try:
            return response.json(parse_float=Decimal)
        except ValueError as e:
            raise SnapshotUnavailableError(url, f"Invalid JSON from {url}: {e}") from e
