"""Default branch config builder."""

from __future__ import annotations

from typing import List, Sequence

from branchify.types import BranchConfig, UpdateRecord


def _title(upgrades: Sequence[UpdateRecord]) -> str:
    dep_names: List[str] = []
    for u in upgrades:
        name = u.dep_name or u.package_file
        if name not in dep_names:
            dep_names.append(name)
    if len(dep_names) == 1:
        first = upgrades[0]
        target = first.new_version or first.new_value
        if target:
            return f"Update dependency {dep_names[0]} to {target}"
        return f"Update dependency {dep_names[0]}"
    return f"Update {len(dep_names)} dependencies"


def generate_branch_config(upgrades: Sequence[UpdateRecord]) -> BranchConfig:
    """Build a branch config from deduplicated upgrades.

    Branch-level fields are taken from the first upgrade. ``branch_name`` is
    pre-filled from it too, but the engine overwrites it along with
    ``package_files``.

    Raises:
        ValueError: If ``upgrades`` is empty.
    """
    if not upgrades:
        raise ValueError("Cannot build a branch config without upgrades")
    first = upgrades[0]
    return BranchConfig(
        branch_name=first.branch_name,
        upgrades=list(upgrades),
        dep_name=first.dep_name,
        manager=first.manager,
        new_value=first.new_value,
        new_version=first.new_version,
        source_url=first.source_url,
        title=_title(upgrades),
    )
