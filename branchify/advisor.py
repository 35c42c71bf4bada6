"""Cross-source consolidation advisory.

Detects the same upstream release (``source_url`` + ``new_version``) landing
in more than one branch. Such branches could probably be combined into a
group. The scan is advisory: it never changes branches and never raises.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from branchify.config import ENGINE_CONFIG, EngineConfig
from branchify.dedup import LoggerLike
from branchify.logging import get_logger
from branchify.types import AdvisoryOutcome, BranchConfig, CrossSourceSplit

logger = get_logger(__name__)

SPLIT_MESSAGE = (
    "Found sourceUrl with multiple branches that should probably be combined "
    "into a group"
)


def find_cross_source_splits(branches: Iterable[BranchConfig]) -> AdvisoryOutcome:
    """Scan branches for upstream releases split across branch names.

    Branches without both ``source_url`` and ``new_version`` are skipped.
    For each branch name only the first ``dep_name`` is recorded.

    Returns:
        Outcome with the splits found, in first-seen order. Any exception
        raised while reading a branch stops the scan and is returned in
        ``error``; it is never raised.
    """
    seen: Dict[Tuple[str, str], Dict[str, Optional[str]]] = {}
    try:
        for branch in branches:
            source_url = branch.source_url
            new_version = branch.new_version
            if not source_url or not new_version:
                continue
            key = (str(source_url), str(new_version))
            names = seen.setdefault(key, {})
            names.setdefault(branch.branch_name, branch.dep_name)
    except Exception as exc:
        return AdvisoryOutcome(splits=_splits(seen), error=exc)
    return AdvisoryOutcome(splits=_splits(seen))


def _splits(
    seen: Dict[Tuple[str, str], Dict[str, Optional[str]]],
) -> list[CrossSourceSplit]:
    return [
        CrossSourceSplit(source_url=url, new_version=version, branches=dict(names))
        for (url, version), names in seen.items()
        if len(names) > 1
    ]


def report_cross_source_splits(
    branches: Iterable[BranchConfig],
    log: Optional[LoggerLike] = None,
    engine_config: EngineConfig = ENGINE_CONFIG,
) -> AdvisoryOutcome:
    """Log one advisory per split and any scan error; return the outcome."""
    log = log if log is not None else logger
    outcome = find_cross_source_splits(branches)
    for split in outcome.splits:
        log.log(
            engine_config.advisory_log_level,
            f"{SPLIT_MESSAGE}: sourceUrl={split.source_url} "
            f"newVersion={split.new_version} branches={split.branches}",
            extra={
                "source_url": split.source_url,
                "new_version": split.new_version,
                "branches": dict(split.branches),
            },
        )
    if outcome.error is not None:
        log.log(
            engine_config.advisory_log_level,
            f"Error checking branch duplicates: {outcome.error!r}",
            extra={"err": outcome.error},
        )
    return outcome
