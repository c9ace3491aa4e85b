"""Unit tests for name-based diffing."""

from pingsync.sync.diff import diff_by_name
from pingsync.sync.models import ObservedCheck, ObservedTmsCheck
from pingsync.sync.validation import validate_checks, validate_tms_checks


def _checks(*names: str):
    return validate_checks([{"name": n, "type": "ping", "host": "h"} for n in names])


def _observed(*pairs: tuple[int, str]) -> list[ObservedCheck]:
    return [ObservedCheck(id=i, name=n) for i, n in pairs]


class TestDiffByName:
    """Tests for diff_by_name."""

    def test_new_declaration_is_created(self):
        """Desired A, observed nothing -> create A."""
        plan = diff_by_name(_checks("A"), [])

        assert [c.name for c in plan.to_create] == ["A"]
        assert plan.to_update == []
        assert plan.to_delete == []

    def test_existing_declaration_is_updated(self):
        """Desired A, observed A -> update A with the observed id."""
        plan = diff_by_name(_checks("A"), _observed((1, "A")))

        assert plan.to_create == []
        [(observed, declaration)] = plan.to_update
        assert observed.id == 1
        assert declaration.name == "A"
        assert plan.to_delete == []

    def test_undeclared_observed_is_deleted(self):
        """Desired nothing, observed B -> delete B."""
        plan = diff_by_name([], _observed((1, "B")))

        assert plan.to_create == []
        assert plan.to_update == []
        assert [c.id for c in plan.to_delete] == [1]

    def test_partition_is_exhaustive_and_disjoint(self):
        """Every desired name lands in exactly one bucket; shared names are never deleted."""
        desired = _checks("A", "B", "C")
        observed = _observed((1, "B"), (2, "C"), (3, "D"), (4, "E"))

        plan = diff_by_name(desired, observed)

        created = {c.name for c in plan.to_create}
        updated = {d.name for _, d in plan.to_update}
        deleted = {o.name for o in plan.to_delete}

        assert created == {"A"}
        assert updated == {"B", "C"}
        assert deleted == {"D", "E"}
        assert created | updated == {"A", "B", "C"}
        assert not created & updated
        assert not deleted & (created | updated)

    def test_matches_on_name_only(self):
        """Type and other attributes do not affect matching."""
        observed = [ObservedCheck(id=7, name="A", type="http", hostname="other")]

        plan = diff_by_name(_checks("A"), observed)

        assert [o.id for o, _ in plan.to_update] == [7]

    def test_duplicate_observed_names_pair_with_first(self):
        """When Pingdom holds two checks of the same name, the first is updated and neither is deleted."""
        plan = diff_by_name(_checks("A"), _observed((1, "A"), (2, "A")))

        assert [o.id for o, _ in plan.to_update] == [1]
        assert plan.to_delete == []

    def test_tms_checks(self):
        """TMS entities diff the same way."""
        desired = validate_tms_checks([
            {"name": "flow", "steps": [{"fn": "go_to", "args": {"url": "https://example.com"}}]},
        ])
        observed = [ObservedTmsCheck(id=9, name="old-flow", tags=["x"])]

        plan = diff_by_name(desired, observed)

        assert [d.name for d in plan.to_create] == ["flow"]
        assert [o.id for o in plan.to_delete] == [9]

    def test_empty_plan(self):
        """Nothing declared, nothing observed."""
        assert diff_by_name([], []).is_empty
