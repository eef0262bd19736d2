"""Pytest fixtures for namedyn test suite."""

import logging
import logging.handlers
from collections.abc import Generator

import pytest

from namedyn.config import Settings
from namedyn.exceptions import IpLookupError, ProviderError
from namedyn.ip import IpLookupService
from namedyn.models import DnsRecord
from namedyn.providers.base import RecordProvider

API_URL = "https://api.name.test"
IP_URL = "https://ip.test/"


@pytest.fixture
def settings() -> Settings:
    """Settings for host "home" in zone "example.com" against fake endpoints."""
    return Settings(
        username="user",
        token="secret-token",
        host="home",
        domain="example.com",
        api_url=API_URL,
        ip_lookup_url=IP_URL,
    )


class FakeProvider(RecordProvider):
    """In-memory provider recording every call.

    Args:
        records: Records returned by list_records().
        fail_on: Operation names ("list", "create", "update") that raise.
    """

    def __init__(
        self,
        records: list[DnsRecord] | None = None,
        fail_on: set[str] | None = None,
    ) -> None:
        self.records = list(records or [])
        self.fail_on = fail_on or set()
        self.calls: list[tuple[str, str, DnsRecord | None]] = []

    def _check(self, operation: str) -> None:
        if operation in self.fail_on:
            raise ProviderError(operation, "injected failure", status_code=500)

    def list_records(self, domain: str) -> list[DnsRecord]:
        self.calls.append(("list", domain, None))
        self._check("list")
        return list(self.records)

    def create_record(self, domain: str, record: DnsRecord) -> None:
        self.calls.append(("create", domain, record))
        self._check("create")

    def update_record(self, domain: str, record: DnsRecord) -> None:
        self.calls.append(("update", domain, record))
        self._check("update")

    @property
    def writes(self) -> list[tuple[str, str, DnsRecord | None]]:
        """Create and update calls only."""
        return [c for c in self.calls if c[0] in ("create", "update")]


class FakeIpService(IpLookupService):
    """IP lookup returning a fixed address, or failing."""

    def __init__(self, ip: str = "203.0.113.7", fail: bool = False) -> None:
        self.ip = ip
        self.fail = fail
        self.calls = 0

    def lookup(self) -> str:
        self.calls += 1
        if self.fail:
            raise IpLookupError("injected failure", status_code=503)
        return self.ip


class LogCapture:
    """Helper class to capture and inspect log records."""

    def __init__(self, handler: logging.handlers.MemoryHandler) -> None:
        self._handler = handler

    @property
    def records(self) -> list[logging.LogRecord]:
        """Get all captured log records."""
        return self._handler.buffer

    def get_records(
        self, level: int | None = None, name: str | None = None
    ) -> list[logging.LogRecord]:
        """Get log records filtered by level and/or logger name.

        Args:
            level: Filter by log level (e.g., logging.INFO).
            name: Filter by logger name prefix (e.g., "namedyn.reconciler").

        Returns:
            List of matching log records.
        """
        records = self.records
        if level is not None:
            records = [r for r in records if r.levelno == level]
        if name is not None:
            records = [r for r in records if r.name.startswith(name)]
        return records

    def get_messages(self, level: int | None = None, name: str | None = None) -> list[str]:
        """Get log messages filtered by level and/or logger name."""
        return [r.getMessage() for r in self.get_records(level, name)]

    def clear(self) -> None:
        """Clear all captured log records."""
        self._handler.buffer.clear()


@pytest.fixture
def log_capture() -> Generator[LogCapture]:
    """Capture logs from the namedyn package during a test.

    Usage:
        def test_something(log_capture):
            # do something that logs
            assert "Created host A record" in log_capture.get_messages(logging.INFO)[0]
    """
    handler = logging.handlers.MemoryHandler(capacity=1000)
    handler.setLevel(logging.DEBUG)

    namedyn_logger = logging.getLogger("namedyn")
    original_level = namedyn_logger.level
    namedyn_logger.setLevel(logging.DEBUG)
    namedyn_logger.addHandler(handler)

    try:
        yield LogCapture(handler)
    finally:
        namedyn_logger.removeHandler(handler)
        namedyn_logger.setLevel(original_level)
        handler.close()


@pytest.fixture
def fake_provider() -> FakeProvider:
    """Empty in-memory provider; tests set .records and .fail_on."""
    return FakeProvider()


@pytest.fixture
def fake_ip_service() -> FakeIpService:
    """IP service returning 203.0.113.7; tests may set .ip or .fail."""
    return FakeIpService()
