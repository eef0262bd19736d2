"""Dynamic DNS updater exceptions."""

import httpx


class NamedynError(Exception):
    """Base exception for namedyn errors."""

    pass


class ConfigError(NamedynError):
    """Required configuration is missing or invalid.

    Raised once at startup; fatal to the process.
    """

    pass


class ProviderError(NamedynError):
    """A call to the DNS record provider failed.

    Covers transport failures, unexpected status codes and response
    bodies that cannot be decoded.
    """

    def __init__(
        self,
        operation: str,
        detail: str,
        status_code: int | None = None,
    ):
        self.operation = operation
        self.detail = detail
        self.status_code = status_code
        if status_code is None:
            message = f"{operation} records: {detail}"
        else:
            message = f"{operation} records: unexpected status code {status_code}: {detail}"
        super().__init__(message)

    @classmethod
    def from_response(cls, operation: str, response: httpx.Response) -> "ProviderError":
        """Create a ProviderError from an unsuccessful provider response.

        name.com reports errors as ``{"message": ..., "details": ...}``;
        anything else falls back to the raw body.

        Args:
            operation: Provider operation that failed ("list", "create", "update").
            response: The httpx Response object.

        Returns:
            ProviderError instance.
        """
        try:
            data = response.json()
        except ValueError:
            data = None

        if isinstance(data, dict) and "message" in data:
            detail = str(data["message"])
            if data.get("details"):
                detail = f"{detail} ({data['details']})"
        else:
            detail = response.text or "Unknown error"

        return cls(operation, detail, status_code=response.status_code)


class IpLookupError(NamedynError):
    """The public IP lookup service could not be queried."""

    def __init__(self, detail: str, status_code: int | None = None):
        self.detail = detail
        self.status_code = status_code
        if status_code is None:
            message = f"public ip lookup failed: {detail}"
        else:
            message = f"public ip lookup failed with status code {status_code}: {detail}"
        super().__init__(message)
