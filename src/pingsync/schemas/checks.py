"""
Check Declaration Schema - Pydantic models for the desired state.

Two entity kinds are declared in the config file:

- Simple checks (``checks``): one model per check ``type``. Every model
  shares the common attribute set of CheckBase and adds its type-specific
  attributes. The models form a discriminated union on ``type`` so an
  unknown or missing type is rejected up front.
- TMS checks (``tmsChecks``): multi-step transaction checks.

Attribute names are the Pingdom API field names, so a validated declaration
dumps straight into a request payload.

Example:
```yaml
checks:
  - name: shop-tcp
    type: tcp
    host: shop.example.com
    port: 443
    resolution: 5
    tags: shop,managed
tmsChecks:
  - name: shop-checkout
    interval: 10
    region: eu
    steps:
      - fn: go_to
        args: {url: "https://shop.example.com"}
      - fn: click
        args: {element: "#checkout"}
```
"""

import ipaddress
import re
from typing import Annotated, Any, Literal, Union
from urllib.parse import urlparse

from pydantic import (
    AfterValidator,
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    TypeAdapter,
    model_validator,
)

CHECK_TYPES = ("http", "httpcustom", "tcp", "ping", "dns", "udp", "smtp", "pop3", "imap")

_HOSTNAME_LABEL = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")


def _check_hostname(value: str) -> str:
    """Accept a DNS hostname or a literal IP address."""
    try:
        ipaddress.ip_address(value)
        return value
    except ValueError:
        pass

    name = value[:-1] if value.endswith(".") else value
    if not name or len(name) > 253 or not all(_HOSTNAME_LABEL.match(label) for label in name.split(".")):
        raise ValueError(f"'{value}' is not a valid hostname")
    return value


def _check_ip(value: str) -> str:
    try:
        ipaddress.ip_address(value)
    except ValueError as e:
        raise ValueError(f"'{value}' is not a valid IP address") from e
    return value


def _check_uri(value: str) -> str:
    parsed = urlparse(value)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f"'{value}' is not an absolute URI")
    return value


Hostname = Annotated[str, AfterValidator(_check_hostname)]
IpAddress = Annotated[str, AfterValidator(_check_ip)]
Uri = Annotated[str, AfterValidator(_check_uri)]

# Pingdom encodes booleans as strings on the checks endpoints
BoolString = Literal["true", "false"]

TagString = Annotated[str, StringConstraints(pattern=r"^(?:\w,?)+$")]  # "a,b,c"
IdString = Annotated[str, StringConstraints(pattern=r"^(?:\d,?)+$")]  # "11,22,33"
ProbeFilters = Annotated[str, StringConstraints(pattern=r"^(?:\w+:\w+,?)+$")]  # "region:EU"
Credentials = Annotated[str, StringConstraints(pattern=r"^\w+:\w+$")]  # "user:password"
UrlPath = Annotated[str, StringConstraints(pattern=r"^/")]

Resolution = Literal[1, 5, 15, 30, 60]


# =============================================================================
# Simple checks
# =============================================================================

class CheckBase(BaseModel):
    """Attributes shared by every simple check type."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(description="Check name, unique key for reconciliation")
    host: Hostname = Field(description="Target host")
    ipv6: BoolString | None = None
    paused: BoolString | None = None
    tags: TagString | None = Field(default=None, description="Comma separated tags")
    probe_filters: ProbeFilters | None = None
    resolution: Resolution | None = Field(default=None, description="Test interval in minutes")
    responsetime_threshold: int | None = Field(default=None, description="Down alert threshold in ms")
    sendnotificationwhendown: int | None = None
    notifyagainevery: int | None = None
    notifywhenbackup: BoolString | None = None
    userids: IdString | None = None
    teamids: IdString | None = None
    integrationids: IdString | None = None
    custom_message: str | None = None

    def to_payload(self) -> dict[str, Any]:
        """Request body for the checks endpoints."""
        return self.model_dump(exclude_none=True)


class HttpCheck(CheckBase):
    type: Literal["http"]
    auth: Credentials | None = None
    url: UrlPath | None = None
    encryption: BoolString | None = None
    port: int | None = None
    shouldcontain: str | None = None
    shouldnotcontain: str | None = None
    postdata: str | None = None
    requestheaders: dict[str, Any] | None = None
    verify_certificate: BoolString | None = None
    ssl_down_days_before: int | None = None

    @model_validator(mode="after")
    def validate_content_match(self) -> "HttpCheck":
        """shouldcontain and shouldnotcontain cannot be combined."""
        if self.shouldcontain is not None and self.shouldnotcontain is not None:
            raise ValueError("'shouldcontain' and 'shouldnotcontain' cannot be used together")
        return self


class HttpCustomCheck(CheckBase):
    type: Literal["httpcustom"]
    url: UrlPath
    encryption: BoolString | None = None
    port: int | None = None
    additionalurls: Uri | None = None
    verify_certificate: BoolString | None = None
    ssl_down_days_before: int | None = None


class TcpCheck(CheckBase):
    type: Literal["tcp"]
    port: int
    stringtosend: str | None = None
    stringtoexpect: str | None = None


class PingCheck(CheckBase):
    type: Literal["ping"]


class DnsCheck(CheckBase):
    type: Literal["dns"]
    nameserver: Hostname
    expectedip: IpAddress


class UdpCheck(CheckBase):
    """UDP is the only type where both strings are mandatory."""

    type: Literal["udp"]
    port: int
    stringtosend: str
    stringtoexpect: str


class SmtpCheck(CheckBase):
    type: Literal["smtp"]
    auth: Credentials | None = None
    port: int | None = None
    encryption: BoolString | None = None
    stringtoexpect: str | None = None


class Pop3Check(CheckBase):
    type: Literal["pop3"]
    port: int | None = None
    stringtoexpect: str | None = None


class ImapCheck(CheckBase):
    type: Literal["imap"]
    port: int | None = None
    stringtoexpect: str | None = None


CheckDeclaration = Annotated[
    Union[
        HttpCheck,
        HttpCustomCheck,
        TcpCheck,
        PingCheck,
        DnsCheck,
        UdpCheck,
        SmtpCheck,
        Pop3Check,
        ImapCheck,
    ],
    Field(discriminator="type"),
]

check_adapter: TypeAdapter[CheckDeclaration] = TypeAdapter(CheckDeclaration)


# =============================================================================
# TMS (transaction) checks
# =============================================================================

# Ids may arrive as strings when shared with tag-style config. The TMS
# endpoints only accept integers, see TmsCheckDeclaration.to_payload.
IntLike = Union[int, Annotated[str, StringConstraints(pattern=r"^\d+$")]]
TmsTag = Annotated[str, StringConstraints(pattern=r"^\w+$")]


class TmsStep(BaseModel):
    """One scripted step: an operation name and its arguments."""

    model_config = ConfigDict(extra="forbid")

    fn: str = Field(
        min_length=1,
        validation_alias=AliasChoices("fn", "operation"),
        description="Operation to run (e.g. go_to, click, fill)",
    )
    args: dict[str, Any] = Field(description="Operation parameters")


class TmsCheckDeclaration(BaseModel):
    """A transaction check."""

    model_config = ConfigDict(extra="forbid")

    name: str
    steps: list[TmsStep] = Field(min_length=1)
    interval: Literal[5, 10, 20, 60, 720, 1440] | None = Field(default=None, description="Minutes")
    region: Literal["us-east", "us-west", "eu", "au"] | None = None
    severity_level: Literal["high", "low"] | None = None
    send_notification_when_down: int | None = None
    contact_ids: list[IntLike] | None = None
    team_ids: list[IntLike] | None = None
    integration_ids: list[IntLike] | None = None
    tags: list[TmsTag] | None = None
    custom_message: str | None = None

    def to_payload(self) -> dict[str, Any]:
        """Request body for the tms/check endpoints, ids as integers."""
        payload = self.model_dump(exclude_none=True)
        payload["integration_ids"] = [int(i) for i in self.integration_ids or []]
        for key in ("contact_ids", "team_ids"):
            if key in payload:
                payload[key] = [int(i) for i in payload[key]]
        return payload
