"""branchify: consolidate dependency updates into branch proposals.

Takes the flat list of updates detected by manager plugins, groups them by
branch name, drops duplicate detections within each branch, and reports
upstream releases that were split across several branches.

Primary API:
    branchify() - Synchronous end-to-end pass over package files
    branchify_upgrades() - Async end-to-end pass (flatten + consolidate)
    consolidate_updates() - Async pass over already-flattened updates
    UpdateRecord, BranchConfig, BranchifyResult - Data model

Example:
    from branchify import RepoConfig, branchify

    result = branchify(
        RepoConfig(repo_is_onboarded=True),
        {"pyenv": [{"packageFile": ".python-version", "deps": [...]}]},
    )
    print(result.branch_list)
"""

from __future__ import annotations

from branchify import cli, logging
from branchify._version import __version__
from branchify.advisor import find_cross_source_splits, report_cross_source_splits
from branchify.config import ENGINE_CONFIG, EngineConfig, RepoConfig
from branchify.dedup import dedupe_upgrades
from branchify.engine import branchify, branchify_upgrades, consolidate_updates
from branchify.flatten import flatten_updates
from branchify.generate import generate_branch_config
from branchify.group import group_updates
from branchify.loader import BranchifyInput, load_input_yaml
from branchify.managers import (
    ManagerDefaultConfig,
    ManagerDescriptor,
    ManagerRegistry,
    default_registry,
)
from branchify.types import (
    AdvisoryOutcome,
    BranchConfig,
    BranchifyResult,
    CrossSourceSplit,
    UpdateRecord,
)

__all__ = [
    # Version
    "__version__",
    # Engine (primary API)
    "branchify",
    "branchify_upgrades",
    "consolidate_updates",
    # Steps
    "flatten_updates",
    "group_updates",
    "dedupe_upgrades",
    "generate_branch_config",
    "find_cross_source_splits",
    "report_cross_source_splits",
    # Types
    "UpdateRecord",
    "BranchConfig",
    "BranchifyResult",
    "CrossSourceSplit",
    "AdvisoryOutcome",
    # Configuration
    "RepoConfig",
    "EngineConfig",
    "ENGINE_CONFIG",
    "BranchifyInput",
    "load_input_yaml",
    # Managers
    "ManagerDescriptor",
    "ManagerDefaultConfig",
    "ManagerRegistry",
    "default_registry",
    # Utilities
    "cli",
    "logging",
]
