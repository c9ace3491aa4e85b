"""
Pingdom API - typed operations for simple checks and TMS checks.

Every mutating operation honours dry-run: it returns its input unchanged and
makes no remote call. Listing always hits Pingdom, the diff needs the real
observed state.

Endpoints:
    https://docs.pingdom.com/api/#tag/Checks
    https://docs.pingdom.com/api/#tag/TMS-Checks
"""

from __future__ import annotations

import logging
import re
from typing import Any

from pingsync.api.transport import PingdomTransport
from pingsync.core.config import SyncConfig
from pingsync.schemas.checks import CheckBase, TmsCheckDeclaration
from pingsync.sync.executor import PINGDOM_CONCURRENCY, bounded_gather
from pingsync.sync.models import ObservedCheck, ObservedTmsCheck

logger = logging.getLogger(__name__)


class PingdomApi:
    """
    Pingdom operations used by the reconciler.

    Usage:
        async with PingdomTransport(token) as transport:
            api = PingdomApi(config, transport)
            checks = await api.get_checks()
    """

    def __init__(
        self,
        config: SyncConfig,
        transport: PingdomTransport,
        concurrency: int = PINGDOM_CONCURRENCY,
    ) -> None:
        """
        Args:
            config: Run configuration (dry-run flag and list filters)
            transport: HTTP transport
            concurrency: In-flight calls for per-id TMS operations
        """
        self.transport = transport
        self.dry_run = config.dry_run
        self.concurrency = concurrency

        self.filter_tags = config.filter_tags
        self.filter_regex = re.compile(config.filter_regex)

    def _tags_param(self) -> dict[str, str]:
        return {"tags": ",".join(self.filter_tags)} if self.filter_tags else {}

    # ----------------------------- CHECKS -----------------------------

    async def get_checks(self) -> list[ObservedCheck]:
        """List checks matching the name regex and carrying every filter tag."""
        body = await self.transport.get(
            "checks",
            params={
                **self._tags_param(),
                "showencryption": True,
                "include_tags": True,
                "include_severity": True,
            },
        )
        checks = [ObservedCheck.model_validate(c) for c in body.get("checks") or []]

        checks = [c for c in checks if self.filter_regex.search(c.name)]
        # Pingdom's tags filter matches ANY tag, keep checks having ALL of them
        if self.filter_tags:
            checks = [c for c in checks if all(tag in c.tag_names for tag in self.filter_tags)]

        logger.debug(f"Fetched {len(checks)} checks")
        return checks

    async def add_check(self, check: CheckBase) -> Any:
        if self.dry_run:
            logger.debug(f"[DRY RUN] Would create check {check.name}")
            return check
        return await self.transport.post("checks", json=check.to_payload())

    async def update_check(self, check_id: int, check: CheckBase) -> Any:
        """Replace a check. The type cannot change on update, so it is not sent."""
        if self.dry_run:
            logger.debug(f"[DRY RUN] Would update check {check.name} ({check_id})")
            return check
        payload = check.to_payload()
        payload.pop("type", None)
        payload["paused"] = "false"
        return await self.transport.put(f"checks/{check_id}", json=payload)

    async def delete_checks(self, check_ids: list[int]) -> Any:
        if self.dry_run:
            logger.debug(f"[DRY RUN] Would delete checks {check_ids}")
            return check_ids
        return await self.transport.delete(
            "checks", params={"delcheckids": ",".join(str(i) for i in check_ids)}
        )

    async def pause_checks(self, check_ids: list[int]) -> Any:
        if self.dry_run:
            logger.debug(f"[DRY RUN] Would pause checks {check_ids}")
            return check_ids
        return await self.transport.put(
            "checks",
            json={"checkids": ",".join(str(i) for i in check_ids), "paused": "true"},
        )

    # --------------------------- TMS CHECKS ---------------------------

    async def get_tms_checks(self) -> list[ObservedTmsCheck]:
        """List TMS checks matching the name regex and carrying every filter tag."""
        body = await self.transport.get("tms/check", params=self._tags_param())
        tms_checks = [ObservedTmsCheck.model_validate(c) for c in body.get("checks") or []]

        tms_checks = [c for c in tms_checks if self.filter_regex.search(c.name)]
        if self.filter_tags:
            tms_checks = [c for c in tms_checks if all(tag in c.tags for tag in self.filter_tags)]

        logger.debug(f"Fetched {len(tms_checks)} TMS checks")
        return tms_checks

    async def add_tms_check(self, tms_check: TmsCheckDeclaration) -> Any:
        if self.dry_run:
            logger.debug(f"[DRY RUN] Would create TMS check {tms_check.name}")
            return tms_check
        return await self.transport.post("tms/check", json=tms_check.to_payload())

    async def update_tms_check(self, tms_check_id: int, tms_check: TmsCheckDeclaration) -> Any:
        """Replace a TMS check and make sure it is active."""
        if self.dry_run:
            logger.debug(f"[DRY RUN] Would update TMS check {tms_check.name} ({tms_check_id})")
            return tms_check
        payload = {**tms_check.to_payload(), "active": True}
        return await self.transport.put(f"tms/check/{tms_check_id}", json=payload)

    async def delete_tms_checks(self, tms_check_ids: list[int]) -> Any:
        """Delete TMS checks, one call per id."""
        if self.dry_run:
            logger.debug(f"[DRY RUN] Would delete TMS checks {tms_check_ids}")
            return tms_check_ids

        async def _delete(tms_check_id: int) -> Any:
            return await self.transport.delete(f"tms/check/{tms_check_id}")

        return await bounded_gather(_delete, tms_check_ids, self.concurrency)

    async def pause_tms_checks(self, tms_check_ids: list[int]) -> Any:
        """Deactivate TMS checks, one call per id."""
        if self.dry_run:
            logger.debug(f"[DRY RUN] Would pause TMS checks {tms_check_ids}")
            return tms_check_ids

        async def _pause(tms_check_id: int) -> Any:
            return await self.transport.put(f"tms/check/{tms_check_id}", json={"active": False})

        return await bounded_gather(_pause, tms_check_ids, self.concurrency)
