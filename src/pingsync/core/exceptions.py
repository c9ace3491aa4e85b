"""Error taxonomy.

All errors are fatal for a run: they propagate unwrapped to the CLI, which
logs them and exits with code 1.
"""

from typing import Any


class PingsyncError(Exception):
    """Base class for every pingsync error."""


class ConfigLoadError(PingsyncError):
    """The configuration file could not be read or parsed."""


class ValidationError(PingsyncError):
    """Desired state does not satisfy its schema.

    Attributes:
        kind: "CONFIG", "CHECK" or "TMS"
        detail: First structural violation found
        name: Name of the offending declaration, when known
    """

    def __init__(self, kind: str, detail: str, name: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        self.name = name
        where = f" '{name}'" if name else ""
        super().__init__(f"Invalid {kind}{where}: {detail}")


class RemoteOperationError(PingsyncError):
    """A call to the Pingdom API failed.

    Attributes:
        operation: Operation label, e.g. "PUT checks/42"
        status_code: HTTP status, None for transport failures
        body: Decoded error body (or raw text) returned by Pingdom
    """

    def __init__(
        self,
        operation: str,
        message: str,
        status_code: int | None = None,
        body: Any = None,
    ) -> None:
        self.operation = operation
        self.status_code = status_code
        self.body = body
        status = f" (HTTP {status_code})" if status_code is not None else ""
        super().__init__(f"{operation} failed{status}: {message}")
