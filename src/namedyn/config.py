"""Process configuration read from the environment."""

import os
from collections.abc import Mapping

import httpx
from pydantic import BaseModel, Field, ValidationError, field_validator

from namedyn.exceptions import ConfigError

# Required variables, in the order they are checked
REQUIRED_VARIABLES = {
    "username": "USERNAME",
    "token": "TOKEN",
    "host": "HOST",
    "domain": "DOMAIN",
}

# Optional overrides
OPTIONAL_VARIABLES = {
    "api_url": "NAMEDYN_API_URL",
    "ip_lookup_url": "NAMEDYN_IP_LOOKUP_URL",
    "interval": "NAMEDYN_INTERVAL",
}

DEFAULT_API_URL = "https://api.name.com"
DEFAULT_IP_LOOKUP_URL = "https://api.ipify.org?format=text"
DEFAULT_INTERVAL = 10.0


class Settings(BaseModel):
    """Immutable configuration for one managed A record.

    Args:
        username: name.com account username.
        token: name.com API token.
        host: Host label of the managed record (e.g. "home").
        domain: Zone the record lives in (e.g. "example.com").
        api_url: Base URL of the name.com API.
        ip_lookup_url: Endpoint returning the caller's public IP as text.
        interval: Seconds to sleep between reconciliation ticks.
    """

    username: str
    token: str = Field(repr=False)
    host: str
    domain: str
    api_url: str = DEFAULT_API_URL
    ip_lookup_url: str = DEFAULT_IP_LOOKUP_URL
    interval: float = DEFAULT_INTERVAL

    model_config = {"frozen": True}

    @field_validator("api_url", "ip_lookup_url")
    @classmethod
    def _url_usable(cls, value: str) -> str:
        try:
            url = httpx.URL(value)
        except httpx.InvalidURL as e:
            raise ValueError(f"invalid URL {value!r}: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError(f"URL must be absolute http(s), got {value!r}")
        return value

    @field_validator("interval")
    @classmethod
    def _interval_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("interval must be greater than 0")
        return value

    @property
    def hostname(self) -> str:
        """Fully-qualified hostname, e.g. "home.example.com"."""
        return f"{self.host}.{self.domain}"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read settings from the environment.

    A variable counts as missing only when it is not defined at all;
    an empty value is accepted as-is.

    Args:
        environ: Mapping to read from (defaults to os.environ).

    Returns:
        The loaded Settings.

    Raises:
        ConfigError: If a required variable is undefined or an
            optional one is invalid.
    """
    if environ is None:
        environ = os.environ

    values: dict[str, str] = {}
    for field, name in REQUIRED_VARIABLES.items():
        if name not in environ:
            raise ConfigError(f"environment variable {name} is undefined, aborting...")
        values[field] = environ[name]

    for field, name in OPTIONAL_VARIABLES.items():
        if name in environ:
            values[field] = environ[name]

    try:
        return Settings.model_validate(values)
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e
