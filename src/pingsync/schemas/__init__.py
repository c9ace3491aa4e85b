"""Pydantic schemas for declared (desired-state) checks."""

from pingsync.schemas.checks import (
    CHECK_TYPES,
    CheckBase,
    CheckDeclaration,
    TmsCheckDeclaration,
    TmsStep,
    check_adapter,
)

__all__ = [
    "CHECK_TYPES",
    "CheckBase",
    "CheckDeclaration",
    "TmsCheckDeclaration",
    "TmsStep",
    "check_adapter",
]
