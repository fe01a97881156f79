"""
transport.py

HTTP transport for the SDK. A ``Transport`` owns one ``requests.Session`` so
connections are pooled and reused across calls; the session may be shared by
several threads issuing GET requests at the same time.

Each call performs exactly one GET. Failures are never retried here.
"""

from typing import Optional

import requests

from kaiascan.api.errors import TransportError
from kaiascan.utils.config import get_config
from kaiascan.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
}


class Transport:
    """
    Sends GET requests and returns raw response bodies.
    """

    def __init__(self, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        """
        :param timeout: Default request timeout in seconds. Falls back to the
            configured ``KAIASCAN_REQUEST_TIMEOUT`` (10 seconds by default).
        :param session: Session to use instead of creating a new one.
        :raises ValueError: If the timeout is not positive.
        """
        self.timeout = timeout if timeout is not None else get_config().REQUEST_TIMEOUT
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def send(self, url: str, timeout: Optional[float] = None) -> bytes:
        """
        Issues a single GET request.

        :param url: Fully encoded request URL.
        :param timeout: Per-call timeout overriding the transport default.
        :return: The raw response body.
        :raises TransportError: On connection failure, timeout, or a non-2xx status.
        """
        effective_timeout = timeout if timeout is not None else self.timeout
        logger.debug(f"GET {url}")

        try:
            response = self.session.get(url, headers=DEFAULT_HEADERS, timeout=effective_timeout)
        except requests.Timeout as err:
            logger.error(f"Request timed out after {effective_timeout} seconds: {url}")
            raise TransportError(f"Request timed out after {effective_timeout} seconds",
                                 url=url) from err
        except requests.ConnectionError as err:
            logger.error(f"Connection error for {url}: {err}")
            raise TransportError(f"Error making request: {err}", url=url) from err
        except requests.RequestException as err:
            logger.error(f"Request failed for {url}: {err}")
            raise TransportError(f"Error making request: {err}", url=url) from err

        if not 200 <= response.status_code < 300:
            logger.error(f"HTTP error {response.status_code} for {url}")
            raise TransportError(f"HTTP error! status: {response.status_code}",
                                 status_code=response.status_code, url=url)

        return response.content

    def close(self) -> None:
        """Closes the session if this transport created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
