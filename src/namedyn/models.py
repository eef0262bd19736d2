"""Pydantic models for name.com DNS resources."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

# Lowest TTL name.com accepts
MIN_TTL = 300


class RecordType(StrEnum):
    """DNS record types managed by namedyn."""

    A = "A"


class DnsRecord(BaseModel):
    """name.com record resource (https://www.name.com/api-docs/types/record)."""

    id: int | None = None
    host: str = ""
    record_type: str = Field(alias="type")
    answer: str
    ttl: int = MIN_TTL

    model_config = {"populate_by_name": True}

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON body expected by create/update calls."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ListRecordsReply(BaseModel):
    """Reply to the list records call.

    name.com leaves out ``records`` entirely for an empty zone.
    """

    records: list[DnsRecord] = []

    def find(self, host: str, record_type: str = RecordType.A) -> DnsRecord | None:
        """Return the first record matching host and type, in response order."""
        for record in self.records:
            if record.host == host and record.record_type == record_type:
                return record
        return None
