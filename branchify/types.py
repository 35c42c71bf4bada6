"""Data types shared across the consolidation pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

#: Composite key used to detect collisions inside one branch:
#: ``(package_file, dep_name, current_value)``.
DedupKey = Tuple[str, Optional[str], Optional[str]]

# Wire (camelCase) name -> attribute name for UpdateRecord.
_UPDATE_FIELDS: Dict[str, str] = {
    "branchName": "branch_name",
    "manager": "manager",
    "packageFile": "package_file",
    "depName": "dep_name",
    "currentValue": "current_value",
    "newValue": "new_value",
    "sourceUrl": "source_url",
    "newVersion": "new_version",
    "logJSON": "log_json",
    "datasource": "datasource",
    "versioning": "versioning",
}


@dataclass
class UpdateRecord:
    """One detected change to one dependency reference in one file.

    Attributes:
        branch_name: Grouping key assigned upstream. Opaque here.
        manager: Identifier of the manager plugin that found the update.
        package_file: Path of the manifest the update was found in.
        dep_name: Dependency identifier. May be None or empty.
        current_value: Version string being replaced.
        new_value: Replacement version string.
        source_url: Upstream repository URL, used only for advisories.
        new_version: Resolved target version, used only for advisories.
        log_json: Rendered changelog content, when embedded.
        datasource: Datasource id governing the dependency.
        versioning: Versioning scheme id governing the dependency.
        extra: Any other fields, carried through unchanged.
    """

    branch_name: str
    manager: str = ""
    package_file: str = ""
    dep_name: Optional[str] = None
    current_value: Optional[str] = None
    new_value: Optional[str] = None
    source_url: Optional[str] = None
    new_version: Optional[str] = None
    log_json: Optional[Dict[str, Any]] = None
    datasource: Optional[str] = None
    versioning: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def dedup_key(self) -> DedupKey:
        return (self.package_file, self.dep_name, self.current_value)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UpdateRecord":
        """Build a record from its camelCase mapping.

        Raises:
            ValueError: If ``branchName`` is missing or not a string.
        """
        branch_name = data.get("branchName")
        if not isinstance(branch_name, str) or not branch_name:
            raise ValueError(
                f"Update for '{data.get('depName')}' is missing 'branchName'"
            )
        kwargs: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, value in data.items():
            attr = _UPDATE_FIELDS.get(key)
            if attr is None:
                extra[key] = value
            else:
                kwargs[attr] = value
        kwargs.setdefault("manager", "")
        kwargs.setdefault("package_file", "")
        if kwargs["manager"] is None:
            kwargs["manager"] = ""
        if kwargs["package_file"] is None:
            kwargs["package_file"] = ""
        return cls(extra=extra, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase mapping, omitting unset optional fields."""
        out: Dict[str, Any] = dict(self.extra)
        for key, attr in _UPDATE_FIELDS.items():
            value = getattr(self, attr)
            if value is None:
                continue
            out[key] = value
        return out


@dataclass
class BranchConfig:
    """One finalized branch proposal.

    ``branch_name`` and ``package_files`` are set by the engine after the
    builder returns; the remaining fields come from the builder.
    """

    branch_name: str = ""
    upgrades: List[UpdateRecord] = field(default_factory=list)
    package_files: Mapping[str, Any] = field(default_factory=dict)
    dep_name: Optional[str] = None
    manager: Optional[str] = None
    new_value: Optional[str] = None
    new_version: Optional[str] = None
    source_url: Optional[str] = None
    title: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self, include_package_files: bool = True) -> Dict[str, Any]:
        out: Dict[str, Any] = dict(self.extra)
        out.update(
            {
                "branchName": self.branch_name,
                "title": self.title,
                "depName": self.dep_name,
                "manager": self.manager,
                "newValue": self.new_value,
                "newVersion": self.new_version,
                "sourceUrl": self.source_url,
                "upgrades": [u.to_dict() for u in self.upgrades],
            }
        )
        if include_package_files:
            out["packageFiles"] = self.package_files
        return out


@dataclass
class BranchifyResult:
    """Output of one consolidation pass."""

    errors: List[Any] = field(default_factory=list)
    warnings: List[Any] = field(default_factory=list)
    branches: List[BranchConfig] = field(default_factory=list)
    branch_list: List[str] = field(default_factory=list)

    def to_dict(self, include_package_files: bool = True) -> Dict[str, Any]:
        return {
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "branches": [
                b.to_dict(include_package_files=include_package_files)
                for b in self.branches
            ],
            "branchList": list(self.branch_list),
        }


@dataclass
class CrossSourceSplit:
    """One upstream release whose updates landed in several branches.

    Attributes:
        source_url: Shared upstream repository URL.
        new_version: Shared target version.
        branches: Branch name -> dep name, in first-seen order.
    """

    source_url: str
    new_version: str
    branches: Dict[str, Optional[str]] = field(default_factory=dict)


@dataclass
class AdvisoryOutcome:
    """Result of the cross-source scan.

    ``error`` holds the exception that stopped the scan, if any. Splits found
    before the failure are kept.
    """

    splits: List[CrossSourceSplit] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None
