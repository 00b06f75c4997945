"""HTTP client for the antiblog API.

The API has three endpoints, all authenticated with an ``api_key``
parameter:

- ``GET /api/index``: list of ``{"id": ..., "signature": ...}`` for every
  published entry
- ``POST /api/create``: form field ``payload`` with the entry map as JSON,
  answers ``{"id": ...}``
- ``POST /api/update``: same form, for entries that already have an id
"""

import json
from typing import Any, Optional

import httpx

from antisync_markup import Entry
from antisync.models.config import TargetConfig
from antisync.services.exceptions import ApiError, ApiForbiddenError
from antisync.utils.logging import get_logger


logger = get_logger(__name__)


class AntiblogClient:
    """
    Synchronous client for one antiblog target.

    Example:
        >>> with AntiblogClient(config.get_target("dev")) as client:
        ...     remote = client.index()
        ...     new_id = client.create(entry)
    """

    def __init__(self, target: TargetConfig, timeout: float = 30.0):
        """
        Initialize client.

        Args:
            target: Target configuration (base URL, API key)
            timeout: Request timeout in seconds (default: 30s)
        """
        self.target = target
        self.timeout = timeout
        self.client = httpx.Client(timeout=timeout)
        self._index: Optional[dict[int, str]] = None

    def __enter__(self) -> "AntiblogClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self.client.close()

    @property
    def base_url(self) -> str:
        return self.target.base_url

    def entry_url(self, public_id: int) -> str:
        """Public URL of a published entry."""
        return f"{self.base_url}/entry/{public_id}"

    def index(self) -> dict[int, str]:
        """
        Fetch signatures of all remote entries.

        The result is cached for the lifetime of the client.

        Returns:
            Mapping of entry id to signature

        Raises:
            ApiError: On network errors or non-success responses
        """
        if self._index is None:
            data = self._get("/api/index")
            self._index = {int(item["id"]): item["signature"] for item in data}
            logger.info("index_fetched", target=self.target.name, count=len(self._index))
        return self._index

    def create(self, entry: Entry) -> int:
        """
        Publish a new entry.

        Returns:
            Id assigned by the remote

        Raises:
            ApiError: On network errors or non-success responses
        """
        data = self._post("/api/create", entry)
        try:
            return int(data["id"])
        except (KeyError, TypeError, ValueError) as e:
            raise ApiError(f"Response missing 'id' field: {data!r}") from e

    def update(self, entry: Entry) -> None:
        """
        Replace an already published entry.

        Raises:
            ApiError: On network errors or non-success responses
        """
        self._post("/api/update", entry)

    def _get(self, endpoint: str) -> Any:
        url = self.base_url + endpoint
        logger.debug("api_request", method="GET", url=url)
        try:
            response = self.client.get(url, params={"api_key": self.target.api_key})
        except httpx.RequestError as e:
            logger.error("api_request_failed", url=url, error=str(e))
            raise ApiError(f"Network error: {e}") from e
        return self._handle_response(response)

    def _post(self, endpoint: str, entry: Entry) -> Any:
        url = self.base_url + endpoint
        payload = entry.to_map()
        logger.debug("api_request", method="POST", url=url, payload=payload)
        try:
            response = self.client.post(
                url,
                data={"payload": json.dumps(payload), "api_key": self.target.api_key},
            )
        except httpx.RequestError as e:
            logger.error("api_request_failed", url=url, error=str(e))
            raise ApiError(f"Network error: {e}") from e
        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> Any:
        if response.is_success:
            try:
                return response.json()
            except ValueError as e:
                raise ApiError(f"Invalid JSON in response: {e}", status_code=response.status_code) from e
        logger.error("api_error_response", status_code=response.status_code, body=response.text)
        if response.status_code == 403:
            raise ApiForbiddenError(response.text)
        raise ApiError(
            f"Bad response: {response.status_code} | {response.text}",
            status_code=response.status_code,
        )
