"""
Desired-state validation.

Runs before any remote call. Both entity kinds are validated up front so a
bad TMS declaration never leaves the simple checks half-applied.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from pingsync.core.config import SyncConfig
from pingsync.core.exceptions import ValidationError
from pingsync.schemas.checks import CheckBase, TmsCheckDeclaration, check_adapter
from pingsync.sync.models import DesiredState

logger = logging.getLogger(__name__)


def _first_violation(exc: PydanticValidationError) -> str:
    """Render the first pydantic error as 'loc: message'."""
    error = exc.errors()[0]
    loc = ".".join(str(part) for part in error["loc"])
    return f"{loc}: {error['msg']}" if loc else error["msg"]


def _ensure_unique_names(key: str, declarations: list[Any]) -> None:
    seen: set[str] = set()
    for index, declaration in enumerate(declarations):
        name = declaration.get("name")
        if name is None:
            continue
        if not isinstance(name, str):
            raise ValidationError("CONFIG", f"{key}.{index}.name: must be a string")
        if name in seen:
            raise ValidationError("CONFIG", f"{key}.{index}: duplicate name '{name}'", name=name)
        seen.add(name)


def validate_config(data: Mapping[str, Any]) -> SyncConfig:
    """Validate the top-level config mapping.

    Args:
        data: Raw mapping loaded from the config file

    Returns:
        Immutable SyncConfig

    Raises:
        ValidationError: Unknown keys, bad filter settings, no declarations,
            or duplicate names within a kind
    """
    try:
        config = SyncConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError("CONFIG", _first_violation(e)) from e

    if config.checks is None and config.tms_checks is None:
        raise ValidationError("CONFIG", "Please provide checks and/or TMS checks in config!")

    if config.checks is not None:
        _ensure_unique_names("checks", config.checks)
    if config.tms_checks is not None:
        _ensure_unique_names("tmsChecks", config.tms_checks)

    return config


def merge_common(common: Mapping[str, Any], declarations: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Apply the common config under each declaration (declaration keys win)."""
    return [{**common, **declaration} for declaration in declarations]


def validate_checks(declarations: Iterable[Mapping[str, Any]]) -> list[CheckBase]:
    """Validate simple check declarations against their type schema.

    Raises:
        ValidationError: On the first declaration that does not validate
    """
    validated = []
    for declaration in declarations:
        try:
            validated.append(check_adapter.validate_python(declaration))
        except PydanticValidationError as e:
            raise ValidationError("CHECK", _first_violation(e), name=declaration.get("name")) from e
    return validated


def validate_tms_checks(declarations: Iterable[Mapping[str, Any]]) -> list[TmsCheckDeclaration]:
    """Validate TMS check declarations.

    Raises:
        ValidationError: On the first declaration that does not validate
    """
    validated = []
    for declaration in declarations:
        try:
            validated.append(TmsCheckDeclaration.model_validate(declaration))
        except PydanticValidationError as e:
            raise ValidationError("TMS", _first_violation(e), name=declaration.get("name")) from e
    return validated


def prepare_declarations(config: SyncConfig) -> DesiredState:
    """Merge common config into every declaration and validate both kinds."""
    state = DesiredState()

    if config.checks is not None:
        state.checks = validate_checks(merge_common(config.checks_common_config, config.checks))
        logger.debug(f"Validated {len(state.checks)} check declarations")

    if config.tms_checks is not None:
        state.tms_checks = validate_tms_checks(
            merge_common(config.tms_checks_common_config, config.tms_checks)
        )
        logger.debug(f"Validated {len(state.tms_checks)} TMS check declarations")

    return state
