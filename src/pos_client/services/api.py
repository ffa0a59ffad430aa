"""HTTP access layer for the backend collections (REST over JSON)."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, List, Optional, Tuple, Type

import requests

from pos_client.config.constants import API_URL, REQUEST_TIMEOUT, SAVE_RETRIES, SAVE_RETRY_DELAY
from pos_client.services.errors import ApiError, DeleteError, FetchError, SaveError, UpdateError
from pos_client.services.retry import RetryPolicy, call_with_retry

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}

# Failures of a single request: transport errors, non-2xx (HTTPError) and unparseable bodies
REQUEST_FAILURES: Tuple[Type[BaseException], ...] = (requests.RequestException, ValueError)


def _error_from(error_cls: Type[ApiError], table: str, exc: BaseException) -> ApiError:
    """Build an ApiError subclass from a requests/JSON exception."""
    response = getattr(exc, "response", None)
    if response is not None:
        return error_cls(table, status=response.status_code, message=response.reason or "")
    return error_cls(table, message=str(exc))


class ApiClient:
    """
    Client for the collections exposed under base_url.

    get_all, update and delete make a single attempt; save retries with
    linear backoff. Every failure is logged with its collection and
    re-raised as the matching ApiError subclass.
    """

    def __init__(
        self,
        base_url: str = API_URL,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
        retry_delay: float = SAVE_RETRY_DELAY,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.sleep = sleep
        self.retry_delay = retry_delay

    def _url(self, table: str, item_id: Optional[str] = None) -> str:
        if item_id is None:
            return f"{self.base_url}/{table}"
        return f"{self.base_url}/{table}/{item_id}"

    def _send(self, method: str, url: str, body: Any = None, allow_empty: bool = False) -> Any:
        """Issue one request and return the parsed JSON body.

        An empty body returns None only when allow_empty is set; otherwise it
        is a failure like any other non-JSON body. Raises
        requests.RequestException on transport errors or non-2xx status,
        ValueError on a body that is not JSON.
        """
        kwargs: dict = {"timeout": self.timeout}
        if body is not None:
            kwargs["json"] = body
            kwargs["headers"] = JSON_HEADERS
        response = self.session.request(method, url, **kwargs)
        response.raise_for_status()
        if allow_empty and not response.content:
            return None
        return response.json()

    def get_all(self, table: str) -> List[Any]:
        """Fetch a whole collection. Returns the parsed body unmodified."""
        try:
            return self._send("GET", self._url(table))
        except REQUEST_FAILURES as exc:
            error = _error_from(FetchError, table, exc)
            logger.error("Error fetching %s: %s", table, error)
            raise error from exc

    def save(self, table: str, items: List[Any], retries: int = SAVE_RETRIES) -> Any:
        """
        Bulk-create the collection contents with a POST of the full item list.

        Retries up to `retries` extra times, waiting retry_delay * attempt
        seconds between attempts. Raises SaveError once every attempt failed.
        """
        policy = RetryPolicy(retries=retries, delay=self.retry_delay)
        url = self._url(table)
        try:
            return call_with_retry(
                lambda: self._send("POST", url, items),
                policy,
                retry_on=REQUEST_FAILURES,
                sleep=self.sleep,
                description=f"save {table}",
            )
        except REQUEST_FAILURES as exc:
            error = _error_from(SaveError, table, exc)
            logger.error("Error saving %s after %d attempts: %s", table, policy.attempts, error)
            raise error from exc

    def update(self, table: str, item_id: str, item: Any) -> Any:
        """Replace one record by id. No retry."""
        try:
            return self._send("PUT", self._url(table, item_id), item)
        except REQUEST_FAILURES as exc:
            error = _error_from(UpdateError, table, exc)
            logger.error("Error updating %s/%s: %s", table, item_id, error)
            raise error from exc

    def delete(self, table: str, item_id: str) -> Any:
        """Delete one record by id. No retry. Returns None for an empty response body."""
        try:
            return self._send("DELETE", self._url(table, item_id), allow_empty=True)
        except REQUEST_FAILURES as exc:
            error = _error_from(DeleteError, table, exc)
            logger.error("Error deleting %s/%s: %s", table, item_id, error)
            raise error from exc
