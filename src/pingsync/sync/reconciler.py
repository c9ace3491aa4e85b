"""
Check Reconciler - converge Pingdom to the declared checks.

Each entity kind goes through four sequential phases:

1. Fetch: list observed checks (real read, even in dry-run)
2. Diff: name-match declared vs observed
3. Apply: create/update concurrently, then delete (or pause in soft mode)
4. Report: ReconciliationResult built from the declarations and the
   observed entities removed

Simple checks run first, TMS checks second, never concurrently.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from pingsync.api.protocol import PingdomApiProtocol
from pingsync.core.config import SyncConfig
from pingsync.schemas.checks import CheckBase, TmsCheckDeclaration
from pingsync.sync.diff import diff_by_name
from pingsync.sync.executor import PINGDOM_CONCURRENCY, bounded_gather
from pingsync.sync.models import D, EntityKind, O, ReconcilePlan, ReconciliationResult
from pingsync.sync.validation import prepare_declarations

logger = logging.getLogger(__name__)


class CheckReconciler:
    """
    Reconciler for Pingdom checks and TMS checks.

    Any failed remote call aborts the run: the error propagates unchanged and
    no result is returned for the kind being applied.

    Usage:
        reconciler = CheckReconciler(config, api)
        results = await reconciler.run()
    """

    def __init__(
        self,
        config: SyncConfig,
        api: PingdomApiProtocol,
        concurrency: int = PINGDOM_CONCURRENCY,
    ) -> None:
        """
        Args:
            config: Validated run configuration
            api: Pingdom operations (PingdomApi or a test double)
            concurrency: In-flight create/update calls
        """
        self.config = config
        self.api = api
        self.concurrency = concurrency
        self.soft = config.soft

    async def run(self) -> list[ReconciliationResult]:
        """Validate both kinds, then reconcile checks and TMS checks in turn."""
        desired = prepare_declarations(self.config)

        results = []
        if desired.checks is not None:
            results.append(await self.reconcile_checks(desired.checks))
        if desired.tms_checks is not None:
            results.append(await self.reconcile_tms_checks(desired.tms_checks))
        return results

    async def reconcile_checks(self, checks: list[CheckBase]) -> ReconciliationResult:
        """Add/update/remove simple checks."""
        observed = await self.api.get_checks()
        plan = diff_by_name(checks, observed)
        self._log_plan(EntityKind.CHECK, len(observed), plan)

        await self._apply_upserts(plan, self.api.add_check, self.api.update_check)

        if plan.to_delete:
            ids = [check.id for check in plan.to_delete]
            if self.soft:
                await self.api.pause_checks(ids)
            else:
                await self.api.delete_checks(ids)

        return self._report(EntityKind.CHECK, plan)

    async def reconcile_tms_checks(self, tms_checks: list[TmsCheckDeclaration]) -> ReconciliationResult:
        """Add/update/remove TMS checks."""
        observed = await self.api.get_tms_checks()
        plan = diff_by_name(tms_checks, observed)
        self._log_plan(EntityKind.TMS, len(observed), plan)

        await self._apply_upserts(plan, self.api.add_tms_check, self.api.update_tms_check)

        if plan.to_delete:
            ids = [tms_check.id for tms_check in plan.to_delete]
            if self.soft:
                await self.api.pause_tms_checks(ids)
            else:
                await self.api.delete_tms_checks(ids)

        return self._report(EntityKind.TMS, plan)

    async def _apply_upserts(
        self,
        plan: ReconcilePlan[D, O],
        create: Callable[[D], Awaitable[Any]],
        update: Callable[[int, D], Awaitable[Any]],
    ) -> None:
        """Run creates and updates as one bounded batch."""
        work: list[tuple[O | None, D]] = [(None, d) for d in plan.to_create] + plan.to_update

        async def _upsert(item: tuple[O | None, D]) -> Any:
            observed, declaration = item
            if observed is None:
                logger.debug(f"Creating {declaration.name}")
                return await create(declaration)
            logger.debug(f"Updating {declaration.name} ({observed.id})")
            return await update(observed.id, declaration)

        await bounded_gather(_upsert, work, self.concurrency)

    def _report(self, kind: EntityKind, plan: ReconcilePlan) -> ReconciliationResult:
        result = ReconciliationResult(
            type=kind,
            added=list(plan.to_create),
            updated=[declaration for _, declaration in plan.to_update],
            deleted=list(plan.to_delete),
        )
        logger.info(f"{kind.value} reconciliation complete: {result.counts}")
        return result

    def _log_plan(self, kind: EntityKind, observed_count: int, plan: ReconcilePlan) -> None:
        action = "pause" if self.soft else "delete"
        logger.info(
            f"{kind.value}: {observed_count} observed, "
            f"{len(plan.to_create)} to create, {len(plan.to_update)} to update, "
            f"{len(plan.to_delete)} to {action}"
        )
