"""Public IP address lookup."""

from abc import ABC, abstractmethod

import httpx

from namedyn._logging import get_logger
from namedyn.exceptions import IpLookupError

logger = get_logger(__name__)


class IpLookupService(ABC):
    """Abstract interface for services reporting the caller's public IP."""

    @abstractmethod
    def lookup(self) -> str:
        """Return the caller's public IP address.

        Raises:
            IpLookupError: If the service cannot be queried.
        """
        ...


class IpifyService(IpLookupService):
    """Look up the public IP with a plain-text endpoint such as ipify.

    The response body is returned verbatim; it is not validated.

    Args:
        url: Endpoint returning the IP as text.
        timeout: HTTP request timeout in seconds (default: 10).
    """

    def __init__(self, url: str = "https://api.ipify.org?format=text", timeout: float = 10):
        self.url = url
        self.timeout = timeout

    def lookup(self) -> str:
        try:
            response = httpx.get(self.url, timeout=self.timeout)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise IpLookupError(str(e) or type(e).__name__) from e

        if response.status_code != 200:
            raise IpLookupError(response.text or "Unknown error", status_code=response.status_code)

        logger.debug("Public IP looked up", extra={"url": self.url, "ip": response.text})
        return response.text
