"""Test doubles: an in-memory Pingdom API and an httpx request recorder."""

from __future__ import annotations

import json
from typing import Any

import httpx

from pingsync.core.config import SyncConfig
from pingsync.core.exceptions import RemoteOperationError
from pingsync.sync.models import ObservedCheck, ObservedTmsCheck


class FakePingdomApi:
    """In-memory stand-in for PingdomApi.

    Keeps observed checks in dicts, applies every mutation to them and
    records each call as (operation, argument) in `calls`.
    """

    MUTATIONS = {
        "add_check",
        "update_check",
        "delete_checks",
        "pause_checks",
        "add_tms_check",
        "update_tms_check",
        "delete_tms_checks",
        "pause_tms_checks",
    }

    def __init__(
        self,
        checks: list[ObservedCheck] | None = None,
        tms_checks: list[ObservedTmsCheck] | None = None,
        fail_on: set[str] | None = None,
    ) -> None:
        self.checks = {c.id: c for c in checks or []}
        self.tms_checks = {c.id: c for c in tms_checks or []}
        self.fail_on = fail_on or set()
        self.calls: list[tuple[str, Any]] = []
        self._next_id = 1000

    @property
    def mutations(self) -> list[tuple[str, Any]]:
        return [call for call in self.calls if call[0] in self.MUTATIONS]

    def _record(self, operation: str, arg: Any = None) -> None:
        self.calls.append((operation, arg))
        if operation in self.fail_on:
            raise RemoteOperationError(operation, "simulated failure", status_code=500)

    def _new_id(self) -> int:
        self._next_id += 1
        return self._next_id

    async def get_checks(self) -> list[ObservedCheck]:
        self._record("get_checks")
        return list(self.checks.values())

    async def add_check(self, check):
        self._record("add_check", check.name)
        new = ObservedCheck(id=self._new_id(), name=check.name, type=check.type)
        self.checks[new.id] = new
        return {"check": {"id": new.id, "name": new.name}}

    async def update_check(self, check_id, check):
        self._record("update_check", check_id)
        return {"message": "Modification of check was successful!"}

    async def delete_checks(self, check_ids):
        self._record("delete_checks", list(check_ids))
        for check_id in check_ids:
            self.checks.pop(check_id, None)
        return {"message": "Deletion of checks was successful!"}

    async def pause_checks(self, check_ids):
        self._record("pause_checks", list(check_ids))
        return {"message": "Modification of checks was successful!"}

    async def get_tms_checks(self) -> list[ObservedTmsCheck]:
        self._record("get_tms_checks")
        return list(self.tms_checks.values())

    async def add_tms_check(self, tms_check):
        self._record("add_tms_check", tms_check.name)
        new = ObservedTmsCheck(id=self._new_id(), name=tms_check.name, active=True)
        self.tms_checks[new.id] = new
        return {"id": new.id, "name": new.name}

    async def update_tms_check(self, tms_check_id, tms_check):
        self._record("update_tms_check", tms_check_id)
        return {"id": tms_check_id, "name": tms_check.name}

    async def delete_tms_checks(self, tms_check_ids):
        self._record("delete_tms_checks", list(tms_check_ids))
        for tms_check_id in tms_check_ids:
            self.tms_checks.pop(tms_check_id, None)
        return [{"message": "Deletion of check was successful!"} for _ in tms_check_ids]

    async def pause_tms_checks(self, tms_check_ids):
        self._record("pause_tms_checks", list(tms_check_ids))
        return [{"id": i, "active": False} for i in tms_check_ids]


class RecordingHandler:
    """httpx.MockTransport handler that records requests and serves canned JSON.

    Routes are keyed by (method, path relative to the API root).
    """

    def __init__(self, routes: dict[tuple[str, str], Any] | None = None, status_code: int = 200) -> None:
        self.routes = routes or {}
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.split("/api/3.1/", 1)[-1]
        body = self.routes.get((request.method, path), {})
        return httpx.Response(self.status_code, json=body)

    @property
    def methods(self) -> list[str]:
        return [request.method for request in self.requests]

    def json_body(self, index: int) -> Any:
        return json.loads(self.requests[index].content)


def make_config(**overrides: Any) -> SyncConfig:
    """SyncConfig from camelCase keys, defaulting to an empty checks list."""
    data: dict[str, Any] = {"apiToken": "test-token"}
    data.update(overrides)
    if "checks" not in data and "tmsChecks" not in data:
        data["checks"] = []
    return SyncConfig.model_validate(data)

