"""Remote API protocol consumed by the reconciler."""

from typing import Any, Protocol

from pingsync.schemas.checks import CheckBase, TmsCheckDeclaration
from pingsync.sync.models import ObservedCheck, ObservedTmsCheck


class ChecksApiProtocol(Protocol):
    """Simple-check operations. Delete and pause take a batch of ids."""

    async def get_checks(self) -> list[ObservedCheck]:
        """List observed checks, already narrowed by the name/tag filters."""
        ...

    async def add_check(self, check: CheckBase) -> Any:
        """Create a check.

        Args:
            check: Validated declaration

        Returns:
            Pingdom response (the declaration itself in dry-run)
        """
        ...

    async def update_check(self, check_id: int, check: CheckBase) -> Any:
        """Replace check `check_id` with the declaration and unpause it."""
        ...

    async def delete_checks(self, check_ids: list[int]) -> Any:
        """Delete several checks in one call."""
        ...

    async def pause_checks(self, check_ids: list[int]) -> Any:
        """Pause several checks in one call."""
        ...


class TmsChecksApiProtocol(Protocol):
    """TMS-check operations. Delete and pause take one id per remote call."""

    async def get_tms_checks(self) -> list[ObservedTmsCheck]:
        ...

    async def add_tms_check(self, tms_check: TmsCheckDeclaration) -> Any:
        ...

    async def update_tms_check(self, tms_check_id: int, tms_check: TmsCheckDeclaration) -> Any:
        ...

    async def delete_tms_checks(self, tms_check_ids: list[int]) -> Any:
        ...

    async def pause_tms_checks(self, tms_check_ids: list[int]) -> Any:
        ...


class PingdomApiProtocol(ChecksApiProtocol, TmsChecksApiProtocol, Protocol):
    """Full API surface used by CheckReconciler."""
