"""Name-based diff between declared and observed checks."""

from collections.abc import Sequence

from pingsync.sync.models import D, O, ReconcilePlan


def diff_by_name(desired: Sequence[D], observed: Sequence[O]) -> ReconcilePlan[D, O]:
    """Partition desired and observed entities by name.

    - desired name not observed -> to_create
    - desired name observed -> to_update, paired with the first observed entity of that name
    - observed name not desired -> to_delete

    Only `name` is compared; ids, types and attributes are ignored.
    """
    observed_by_name: dict[str, O] = {}
    for entity in observed:
        observed_by_name.setdefault(entity.name, entity)

    plan: ReconcilePlan[D, O] = ReconcilePlan()
    for declaration in desired:
        match = observed_by_name.get(declaration.name)
        if match is None:
            plan.to_create.append(declaration)
        else:
            plan.to_update.append((match, declaration))

    desired_names = {declaration.name for declaration in desired}
    plan.to_delete = [entity for entity in observed if entity.name not in desired_names]

    return plan
