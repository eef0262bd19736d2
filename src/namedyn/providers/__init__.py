"""DNS record providers."""

from namedyn.providers.base import RecordProvider
from namedyn.providers.namecom import NameComProvider

__all__ = ["NameComProvider", "RecordProvider"]
