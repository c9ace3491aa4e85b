"""
Reconciliation data models.

Observed entities are parsed from Pingdom list responses. Simple checks carry
tags as objects (``{"name": "x", "type": "u", "count": 3}``) while TMS checks
carry them as plain strings; both shapes are kept as Pingdom returns them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pingsync.schemas.checks import CheckBase, TmsCheckDeclaration


class EntityKind(str, Enum):
    """Reconciled entity kinds."""

    CHECK = "CHECK"
    TMS = "TMS"


class ObservedCheck(BaseModel):
    """A simple check as listed by GET /checks."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    type: str | None = None
    hostname: str | None = None
    status: str | None = None
    tags: list[dict[str, Any]] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def null_tags_to_list(cls, v: Any) -> Any:
        """Pingdom may send "tags": null."""
        return [] if v is None else v

    @property
    def tag_names(self) -> list[str]:
        return [tag.get("name") for tag in self.tags]


class ObservedTmsCheck(BaseModel):
    """A transaction check as listed by GET /tms/check."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    active: bool | None = None
    region: str | None = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def null_tags_to_list(cls, v: Any) -> Any:
        return [] if v is None else v


D = TypeVar("D", CheckBase, TmsCheckDeclaration)
O = TypeVar("O", ObservedCheck, ObservedTmsCheck)


@dataclass
class ReconcilePlan(Generic[D, O]):
    """Name-matched partition of desired vs observed entities.

    Every desired entity is in exactly one of to_create / to_update; every
    observed entity whose name is not declared is in to_delete.
    """

    to_create: list[D] = field(default_factory=list)
    to_update: list[tuple[O, D]] = field(default_factory=list)
    to_delete: list[O] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.to_create or self.to_update or self.to_delete)


@dataclass
class ReconciliationResult:
    """Outcome of one reconciliation pass for one entity kind.

    added / updated hold the declarations that were applied, deleted holds
    the observed entities that were deleted (or paused in soft mode).
    """

    type: EntityKind
    added: list[Any] = field(default_factory=list)
    updated: list[Any] = field(default_factory=list)
    deleted: list[Any] = field(default_factory=list)

    @property
    def counts(self) -> dict[str, int]:
        return {
            "added": len(self.added),
            "updated": len(self.updated),
            "deleted": len(self.deleted),
        }

    @property
    def is_empty(self) -> bool:
        return not (self.added or self.updated or self.deleted)


@dataclass
class DesiredState:
    """Validated declarations for both kinds; None when a kind is not declared."""

    checks: list[CheckBase] | None = None
    tms_checks: list[TmsCheckDeclaration] | None = None
