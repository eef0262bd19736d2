"""Reconciliation of the managed A record with the observed public IP."""

import time
from collections.abc import Callable

from namedyn._logging import Timer, get_hostname_extra, get_logger, reset_hostname, set_hostname
from namedyn.config import DEFAULT_INTERVAL, Settings
from namedyn.exceptions import IpLookupError, ProviderError
from namedyn.ip import IpifyService, IpLookupService
from namedyn.models import MIN_TTL, DnsRecord, ListRecordsReply, RecordType
from namedyn.providers.base import RecordProvider
from namedyn.providers.namecom import NameComProvider

logger = get_logger(__name__)


class Reconciler:
    """Converge one provider-side A record with the caller's public IP.

    Each tick looks up the existing record, observes the current public
    IP and then creates or updates the record as needed. A tick never
    raises: every failure is logged and ends the tick, leaving the next
    tick to try again.

    Args:
        settings: The process configuration.
        provider: DNS record provider (default: name.com with the
                  configured credentials).
        ip_service: Public IP lookup service (default: ipify at the
                    configured URL).
    """

    def __init__(
        self,
        settings: Settings,
        provider: RecordProvider | None = None,
        ip_service: IpLookupService | None = None,
    ):
        self.settings = settings
        self.provider = provider or NameComProvider(
            username=settings.username,
            token=settings.token,
            api_url=settings.api_url,
        )
        self.ip_service = ip_service or IpifyService(url=settings.ip_lookup_url)

    def reconcile_once(self) -> None:
        """Run a single tick: lookup, observe, converge."""
        token = set_hostname(self.settings.hostname)
        try:
            with Timer() as t:
                self._reconcile()
            logger.debug(
                "Reconciliation tick finished",
                extra={**get_hostname_extra(), "elapsed_ms": t.elapsed_ms},
            )
        finally:
            reset_hostname(token)

    def _find_record(self) -> DnsRecord | None:
        records = self.provider.list_records(self.settings.domain)
        return ListRecordsReply(records=records).find(self.settings.host, RecordType.A)

    def _reconcile(self) -> None:
        settings = self.settings
        hostname = settings.hostname

        try:
            record = self._find_record()
        except ProviderError as e:
            logger.error(
                "Error while looking for existing record: %s",
                e,
                extra={**get_hostname_extra(), "status_code": e.status_code},
            )
            return

        try:
            ip = self.ip_service.lookup()
        except IpLookupError as e:
            logger.error(
                "Error while looking up own public IP: %s",
                e,
                extra={**get_hostname_extra(), "status_code": e.status_code},
            )
            return

        if record is None:
            self._create(hostname, ip)
        elif record.answer != ip:
            self._update(hostname, record, ip)
        else:
            logger.debug(
                "A record is up to date",
                extra={**get_hostname_extra(), "ip": ip, "record_id": record.id},
            )

    def _create(self, hostname: str, ip: str) -> None:
        record = DnsRecord(
            host=self.settings.host,
            record_type=RecordType.A,
            answer=ip,
            ttl=MIN_TTL,
        )
        try:
            self.provider.create_record(self.settings.domain, record)
        except ProviderError as e:
            logger.error(
                "Error while creating A record %s: %s",
                hostname,
                e,
                extra={**get_hostname_extra(), "status_code": e.status_code},
            )
            return

        logger.info(
            "Created host A record %s with ip %s",
            hostname,
            ip,
            extra={**get_hostname_extra(), "ip": ip},
        )

    def _update(self, hostname: str, record: DnsRecord, ip: str) -> None:
        old_ip = record.answer
        updated = record.model_copy(update={"answer": ip})
        try:
            self.provider.update_record(self.settings.domain, updated)
        except ProviderError as e:
            logger.error(
                "Error while updating A record %s: %s",
                hostname,
                e,
                extra={
                    **get_hostname_extra(),
                    "status_code": e.status_code,
                    "record_id": record.id,
                },
            )
            return

        logger.info(
            "Updated host A record %s, changed ip from %s to %s",
            hostname,
            old_ip,
            ip,
            extra={
                **get_hostname_extra(),
                "old_ip": old_ip,
                "new_ip": ip,
                "record_id": record.id,
            },
        )


def reconcile_once(
    settings: Settings,
    provider: RecordProvider | None = None,
    ip_service: IpLookupService | None = None,
) -> None:
    """Run one reconciliation tick with the given settings.

    Args:
        settings: The process configuration.
        provider: Optional provider override (e.g. a fake in tests).
        ip_service: Optional IP lookup override.
    """
    Reconciler(settings, provider=provider, ip_service=ip_service).reconcile_once()


def run_forever(
    reconciler: Reconciler,
    interval: float = DEFAULT_INTERVAL,
    sleep: Callable[[float], None] = time.sleep,
    max_ticks: int | None = None,
) -> None:
    """Run ticks back to back with a fixed sleep in between.

    Args:
        reconciler: The reconciler to tick.
        interval: Seconds to sleep between ticks.
        sleep: Sleep function (swappable in tests).
        max_ticks: Stop after this many ticks (None runs forever).
    """
    ticks = 0
    while True:
        reconciler.reconcile_once()
        ticks += 1
        if max_ticks is not None and ticks >= max_ticks:
            return
        sleep(interval)
