"""
Pingdom Reconciliation Module.

This module provides:
- Validation: schema-check declared checks before any remote call
- diff_by_name: partition declared vs observed checks by name
- CheckReconciler: apply the diff with bounded concurrency

Architecture:
    Config file -> Validation -> Fetch -> Diff -> Apply -> ReconciliationResult

Usage:
    from pingsync.sync import CheckReconciler

    reconciler = CheckReconciler(config, api)
    results = await reconciler.run()
"""

from pingsync.sync.models import (
    DesiredState,
    EntityKind,
    ObservedCheck,
    ObservedTmsCheck,
    ReconcilePlan,
    ReconciliationResult,
)
from pingsync.sync.diff import diff_by_name
from pingsync.sync.executor import PINGDOM_CONCURRENCY, bounded_gather
from pingsync.sync.reconciler import CheckReconciler

__all__ = [
    "CheckReconciler",
    "DesiredState",
    "EntityKind",
    "ObservedCheck",
    "ObservedTmsCheck",
    "PINGDOM_CONCURRENCY",
    "ReconcilePlan",
    "ReconciliationResult",
    "bounded_gather",
    "diff_by_name",
]
