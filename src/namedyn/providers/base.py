"""Abstract base class for DNS record providers."""

from abc import ABC, abstractmethod

from namedyn.models import DnsRecord


class RecordProvider(ABC):
    """Abstract interface for DNS record providers.

    Providers list, create and update resource records in a single
    zone. Records are never deleted.
    """

    @abstractmethod
    def list_records(self, domain: str) -> list[DnsRecord]:
        """List the records of a zone.

        Args:
            domain: The zone name (e.g. "example.com").

        Returns:
            Records in the order the provider returned them.

        Raises:
            ProviderError: If the records cannot be listed.
        """
        ...

    @abstractmethod
    def create_record(self, domain: str, record: DnsRecord) -> None:
        """Create a record in a zone.

        Args:
            domain: The zone name.
            record: The record to create (without id).

        Raises:
            ProviderError: If record creation fails.
        """
        ...

    @abstractmethod
    def update_record(self, domain: str, record: DnsRecord) -> None:
        """Replace an existing record, addressed by its id.

        Args:
            domain: The zone name.
            record: The full record with its new values.

        Raises:
            ProviderError: If the update fails.
        """
        ...
