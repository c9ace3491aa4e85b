"""Desired-state configuration file.

The config file (YAML or JSON) declares the Pingdom checks that should exist:

```yaml
apiToken: xxxxxxxx
filterTags: [managed]
filterRegex: "^prod-"
checksCommonConfig:
  tags: managed
  resolution: 5
checks:
  - name: prod-api
    type: http
    host: api.example.com
    url: /health
tmsChecks:
  - name: prod-login
    steps:
      - fn: go_to
        args: {url: "https://example.com/login"}
```

The file is read once at startup into an immutable SyncConfig which is then
passed explicitly to the API client and the reconciler.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from pingsync.core.exceptions import ConfigLoadError

logger = logging.getLogger(__name__)

DEFAULT_FILTER_REGEX = "^.*$"

YAML_SUFFIXES = (".yaml", ".yml")


class SyncConfig(BaseModel):
    """Immutable run configuration.

    Field aliases are the camelCase keys of the config file. The run flags
    (dry_run, soft) come from the command line.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    api_token: str = Field(default="", alias="apiToken")
    filter_tags: list[str] | None = Field(default=None, alias="filterTags")
    filter_regex: str = Field(default=DEFAULT_FILTER_REGEX, alias="filterRegex")
    checks_common_config: dict[str, Any] = Field(default_factory=dict, alias="checksCommonConfig")
    tms_checks_common_config: dict[str, Any] = Field(default_factory=dict, alias="tmsChecksCommonConfig")
    checks: list[dict[str, Any]] | None = None
    tms_checks: list[dict[str, Any]] | None = Field(default=None, alias="tmsChecks")
    dry_run: bool = Field(default=False, alias="dryRun")
    soft: bool = False

    @field_validator("filter_tags")
    @classmethod
    def validate_filter_tags(cls, v: list[str] | None) -> list[str] | None:
        """Reject empty tag names."""
        if v is not None and not all(tag.strip() for tag in v):
            raise ValueError("filter tags must be non-empty strings")
        return v

    @field_validator("filter_regex")
    @classmethod
    def validate_filter_regex(cls, v: str) -> str:
        """Ensure the name filter compiles."""
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid regular expression: {e}") from e
        return v

    def with_flags(self, *, dry_run: bool, soft: bool) -> SyncConfig:
        """Return a copy carrying the command-line run flags."""
        return self.model_copy(update={"dry_run": dry_run, "soft": soft})


def load_config(path: str | Path) -> dict[str, Any]:
    """Load the raw config mapping from a YAML or JSON file.

    Args:
        path: Config file location

    Returns:
        Parsed top-level mapping

    Raises:
        ConfigLoadError: If the file is missing, unreadable, not parseable,
            empty, or not a mapping
    """
    config_path = Path(path)

    if not config_path.is_file():
        raise ConfigLoadError(f"Config file not found: {config_path}")

    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigLoadError(f"Cannot read config file {config_path}: {e}") from e

    try:
        if config_path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigLoadError(f"Failed to parse config file {config_path}: {e}") from e

    if not data:
        raise ConfigLoadError(f"Empty config file: {config_path}")

    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"Config file {config_path} must contain a mapping, got {type(data).__name__}"
        )

    logger.debug(f"Loaded config from {config_path} ({len(data)} top-level keys)")
    return data
