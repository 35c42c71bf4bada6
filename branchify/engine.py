"""Branch consolidation pass.

Turns a flat list of update records into branch proposals:

1. group records by branch name (newest first within a branch),
2. optionally embed changelogs (the only await point),
3. deduplicate each group and build its branch config,
4. log advisories for upstream releases split across branches,
5. assemble ``errors``/``warnings``/``branches``/``branch_list``.
"""

from __future__ import annotations

import asyncio
import inspect
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    List,
    Mapping,
    Optional,
    Sequence,
    Union,
)

from branchify.advisor import report_cross_source_splits
from branchify.config import ENGINE_CONFIG, EngineConfig, RepoConfig
from branchify.dedup import dedupe_upgrades
from branchify.flatten import flatten_updates
from branchify.generate import generate_branch_config
from branchify.group import group_updates
from branchify.logging import branch_log_context, get_logger
from branchify.types import BranchConfig, BranchifyResult, UpdateRecord

logger = get_logger(__name__)

BranchUpgrades = Dict[str, List[UpdateRecord]]

#: Changelog embedding collaborator. May mutate the mapping in place and
#: return None, or return a replacement mapping.
EmbedChangelogs = Callable[[BranchUpgrades], Awaitable[Optional[BranchUpgrades]]]

BuildBranchConfig = Callable[[Sequence[UpdateRecord]], BranchConfig]

Flatten = Callable[[RepoConfig, Mapping[str, Any]], Sequence[UpdateRecord]]


async def consolidate_updates(
    updates: Sequence[UpdateRecord],
    package_files: Mapping[str, Any],
    config: RepoConfig,
    *,
    embed_changelogs: Optional[EmbedChangelogs] = None,
    build_branch_config: BuildBranchConfig = generate_branch_config,
    engine_config: EngineConfig = ENGINE_CONFIG,
) -> BranchifyResult:
    """Consolidate flattened updates into branch configs.

    Args:
        updates: Flattened update records. Not mutated.
        package_files: All package files scanned in the repository. Attached
            to every branch unchanged.
        config: Repository configuration.
        embed_changelogs: Awaited once with the full branch -> upgrades
            mapping when ``config.fetch_release_notes`` is set.
        build_branch_config: Builds a branch config from deduplicated
            upgrades.
        engine_config: Log levels.

    Returns:
        The consolidated result.
    """
    errors: List[Any] = []
    warnings: List[Any] = []
    branches: List[BranchConfig] = []

    branch_upgrades = group_updates(updates)
    logger.debug(f"Returning {len(branch_upgrades)} branch(es)")

    if config.fetch_release_notes:
        if embed_changelogs is None:
            logger.debug("fetchReleaseNotes is set but no changelog embedder given")
        else:
            replacement = await embed_changelogs(branch_upgrades)
            if replacement is not None:
                branch_upgrades = replacement

    for branch_name, upgrades in branch_upgrades.items():
        with branch_log_context(logger, branch_name) as log:
            deduped = dedupe_upgrades(upgrades, log=log, engine_config=engine_config)
            branch_upgrades[branch_name] = deduped
            branch = build_branch_config(deduped)
            branch.branch_name = branch_name
            branch.package_files = package_files
            branches.append(branch)
            log.debug(f"Built branch with {len(deduped)} upgrade(s)")

    logger.debug(f"config.repoIsOnboarded={config.repo_is_onboarded}")
    if config.repo_is_onboarded:
        branch_list = [b.branch_name for b in branches]
    else:
        branch_list = list(config.branch_list)

    report_cross_source_splits(branches, engine_config=engine_config)

    return BranchifyResult(
        errors=list(config.errors) + errors,
        warnings=list(config.warnings) + warnings,
        branches=branches,
        branch_list=branch_list,
    )


async def branchify_upgrades(
    config: RepoConfig,
    package_files: Mapping[str, Any],
    *,
    flatten: Union[Flatten, Callable[..., Awaitable[Sequence[UpdateRecord]]]] = (
        flatten_updates
    ),
    embed_changelogs: Optional[EmbedChangelogs] = None,
    build_branch_config: BuildBranchConfig = generate_branch_config,
    engine_config: EngineConfig = ENGINE_CONFIG,
) -> BranchifyResult:
    """Flatten ``package_files`` and consolidate the resulting updates.

    ``flatten`` may be a plain function or a coroutine function.
    """
    logger.debug("branchifyUpgrades")
    flattened = flatten(config, package_files)
    if inspect.isawaitable(flattened):
        flattened = await flattened
    updates = list(flattened)
    dep_names = [u.dep_name for u in updates if u.dep_name]
    logger.debug(
        f"{len(updates)} flattened updates found: {', '.join(dep_names)}"
    )
    return await consolidate_updates(
        updates,
        package_files,
        config,
        embed_changelogs=embed_changelogs,
        build_branch_config=build_branch_config,
        engine_config=engine_config,
    )


def branchify(
    config: RepoConfig, package_files: Mapping[str, Any], **kwargs: Any
) -> BranchifyResult:
    """Synchronous wrapper around :func:`branchify_upgrades`.

    Must not be called from a running event loop.
    """
    return asyncio.run(branchify_upgrades(config, package_files, **kwargs))
