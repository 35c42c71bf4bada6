"""Partition update records by branch name."""

from __future__ import annotations

import copy
from typing import Dict, Iterable, List

from branchify.types import UpdateRecord


def group_updates(updates: Iterable[UpdateRecord]) -> Dict[str, List[UpdateRecord]]:
    """Group records by ``branch_name``.

    Branch keys keep first-appearance order. Within a branch the newest record
    is placed first: a record for an existing branch is prepended, so the last
    record seen in the input becomes the first candidate for deduplication.
    Records are deep-copied; no record is dropped.

    Args:
        updates: Flattened update records, in detection order.

    Returns:
        Mapping of branch name to its records, newest first.
    """
    groups: Dict[str, List[UpdateRecord]] = {}
    for update in updates:
        record = copy.deepcopy(update)
        groups[record.branch_name] = [record] + groups.get(record.branch_name, [])
    return groups
