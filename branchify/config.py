"""Configuration classes for branchify components."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping


@dataclass
class EngineConfig:
    """Log levels used by the consolidation pass."""

    # Level for "Ignoring upgrade collision" entries
    collision_log_level: int = logging.INFO

    # Level for cross-source split advisories and advisory scan errors
    advisory_log_level: int = logging.DEBUG


# Global configuration instance
ENGINE_CONFIG = EngineConfig()


@dataclass
class RepoConfig:
    """Repository-level settings consumed by the engine.

    Attributes:
        errors: Validation errors accumulated upstream. Passed through.
        warnings: Validation warnings accumulated upstream. Passed through.
        branch_list: Static branch list returned while the repository is not
            onboarded.
        repo_is_onboarded: Whether computed branch names are authoritative.
        fetch_release_notes: Whether to run changelog embedding before
            grouping.
    """

    errors: List[Any] = field(default_factory=list)
    warnings: List[Any] = field(default_factory=list)
    branch_list: List[str] = field(default_factory=list)
    repo_is_onboarded: bool = False
    fetch_release_notes: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RepoConfig":
        """Build from the camelCase mapping used in input files.

        Unknown keys are ignored.
        """
        return cls(
            errors=list(data.get("errors") or []),
            warnings=list(data.get("warnings") or []),
            branch_list=list(data.get("branchList") or []),
            repo_is_onboarded=bool(data.get("repoIsOnboarded", False)),
            fetch_release_notes=bool(data.get("fetchReleaseNotes", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "branchList": list(self.branch_list),
            "repoIsOnboarded": self.repo_is_onboarded,
            "fetchReleaseNotes": self.fetch_release_notes,
        }
