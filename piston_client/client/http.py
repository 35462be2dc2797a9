# piston_client/client/http.py
"""Request executor - one HTTP call with exponential backoff on 429."""

import time
import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Union

import requests

from piston_client.core.errors import (
    DecodeError,
    PistonConnectionError,
    RateLimitExhaustedError,
    TransportError,
)

logger = logging.getLogger(__name__)

JsonPayload = Union[Dict[str, Any], List[Any]]

HTTP_OK = 200
HTTP_TOO_MANY_REQUESTS = 429


class HttpMethod(Enum):
    """HTTP methods used by the Piston API."""

    GET = "GET"
    POST = "POST"


class RequestExecutor:
    """
    Performs requests against the Piston API.

    Behaviour:
    - 200 returns the parsed JSON body
    - 429 sleeps 2**attempt seconds (1s, 2s, 4s, ...) and tries again
    - Any other status raises TransportError without retrying
    - After `retries` rate-limited attempts, raises RateLimitExhaustedError
    """

    def __init__(
        self,
        base_url: str,
        retries: int = 3,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize executor.

        Args:
            base_url: API base URL (e.g., "https://emkc.org/api/v2/piston")
            retries: Number of attempts made while rate limited
            timeout: Per-request timeout in seconds, None to wait indefinitely
            session: Session to send requests with; one is created if omitted
        """
        self.base_url = base_url.rstrip("/")
        self.retries = retries
        self.timeout = timeout
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    def request(
        self,
        method: HttpMethod = HttpMethod.GET,
        path: str = "",
        body: Optional[Dict[str, Any]] = None,
    ) -> JsonPayload:
        """
        Send a request, retrying while rate limited.

        Args:
            method: HTTP method
            path: Path appended to the base URL (e.g., "/runtimes")
            body: Optional JSON request body

        Returns:
            Parsed JSON response (object or array)

        Raises:
            TransportError: Non-200, non-429 response
            RateLimitExhaustedError: Every attempt was rate limited
            PistonConnectionError: No response received
            DecodeError: Response body is not JSON
        """
        url = f"{self.base_url}{path}"

        for attempt in range(self.retries):
            logger.debug(
                f"[piston] {method.value} {url} (attempt {attempt + 1}/{self.retries})"
            )

            response = self._send(method, url, body)

            if response.status_code == HTTP_OK:
                return self._parse(response)

            if response.status_code == HTTP_TOO_MANY_REQUESTS:
                delay = 2 ** attempt
                logger.warning(
                    f"[retry] {method.value} {url} rate limited, retrying in {delay}s "
                    f"(attempt {attempt + 1}/{self.retries})"
                )
                time.sleep(delay)
                continue

            logger.error(
                f"[piston] {method.value} {url} failed with status {response.status_code}"
            )
            raise TransportError(response.status_code, response.text)

        logger.error(
            f"[retry] {method.value} {url} still rate limited after {self.retries} attempt(s)"
        )
        raise RateLimitExhaustedError(self.retries)

    def close(self) -> None:
        """Close the session if this executor created it."""
        if self._owns_session:
            self._session.close()

    def _send(
        self,
        method: HttpMethod,
        url: str,
        body: Optional[Dict[str, Any]],
    ) -> requests.Response:
        try:
            if method is HttpMethod.POST:
                # json= sets Content-Type: application/json
                return self._session.post(url, json=body, timeout=self.timeout)
            return self._session.get(url, json=body, timeout=self.timeout)

        except requests.exceptions.Timeout as e:
            raise PistonConnectionError(
                f"Request to {url} timed out after {self.timeout}s"
            ) from e
        except requests.exceptions.ConnectionError as e:
            raise PistonConnectionError(f"Cannot connect to Piston API at {url}") from e
        except requests.exceptions.RequestException as e:
            raise PistonConnectionError(f"Request to {url} failed: {e}") from e

    @staticmethod
    def _parse(response: requests.Response) -> JsonPayload:
        if not response.text:
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"Response is not valid JSON: {response.text[:200]}") from e
