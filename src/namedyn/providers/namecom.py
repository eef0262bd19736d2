"""name.com v4 API provider."""

import httpx
from pydantic import ValidationError

from namedyn._logging import get_logger
from namedyn.exceptions import ProviderError
from namedyn.models import DnsRecord, ListRecordsReply
from namedyn.providers.base import RecordProvider

logger = get_logger(__name__)


class NameComProvider(RecordProvider):
    """DNS provider for the name.com v4 core API.

    Every request carries HTTP basic auth built from the account
    username and API token. Each call uses a one-shot connection.

    Args:
        username: name.com account username.
        token: name.com API token.
        api_url: Base URL of the API (default: "https://api.name.com").
        timeout: HTTP request timeout in seconds (default: 30).
    """

    def __init__(
        self,
        username: str,
        token: str,
        api_url: str = "https://api.name.com",
        timeout: float = 30,
    ):
        self.username = username
        self.token = token
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    def _records_url(self, domain: str) -> str:
        return f"{self.api_url}/v4/domains/{domain}/records"

    def _request(
        self,
        operation: str,
        method: str,
        url: str,
        payload: dict | None = None,
    ) -> httpx.Response:
        """Send an authenticated request and check for a 200 reply.

        Args:
            operation: Operation name for error reporting.
            method: HTTP method.
            url: Full request URL.
            payload: JSON body, if any.

        Returns:
            The successful response.

        Raises:
            ProviderError: On transport errors, an unusable URL or a non-200 status.
        """
        try:
            response = httpx.request(
                method,
                url,
                json=payload,
                headers={"Content-Type": "application/json"},
                auth=(self.username, self.token),
                timeout=self.timeout,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ProviderError(operation, str(e) or type(e).__name__) from e

        if response.status_code != 200:
            error = ProviderError.from_response(operation, response)
            logger.debug(
                "name.com API error",
                extra={
                    "operation": operation,
                    "status_code": response.status_code,
                    "detail": error.detail,
                },
            )
            raise error

        logger.debug(
            "name.com API request successful",
            extra={"operation": operation, "status_code": response.status_code},
        )
        return response

    def list_records(self, domain: str) -> list[DnsRecord]:
        """List all records of a zone.

        Raises:
            ProviderError: On transport errors, a non-200 status or a
                reply that cannot be decoded.
        """
        response = self._request("list", "GET", self._records_url(domain))
        try:
            reply = ListRecordsReply.model_validate_json(response.content)
        except ValidationError as e:
            raise ProviderError("list", f"could not decode reply: {e}") from e
        return reply.records

    def create_record(self, domain: str, record: DnsRecord) -> None:
        """Create a record via POST /v4/domains/{domain}/records."""
        self._request("create", "POST", self._records_url(domain), record.to_payload())

    def update_record(self, domain: str, record: DnsRecord) -> None:
        """Update a record via PUT /v4/domains/{domain}/records/{id}.

        Raises:
            ProviderError: If the record has no id or the update fails.
        """
        if record.id is None:
            raise ProviderError("update", "record has no id")
        self._request(
            "update",
            "PUT",
            f"{self._records_url(domain)}/{record.id}",
            record.to_payload(),
        )
