"""Default update flattener.

Expands the manager -> package files mapping into one ``UpdateRecord`` per
concrete update. Input shape::

    {
        "<manager>": [
            {
                "packageFile": "path/to/manifest",
                "deps": [
                    {
                        "depName": "...",
                        "currentValue": "...",
                        "updates": [{"branchName": "...", "newValue": "..."}],
                    }
                ],
            }
        ]
    }

Fields merge package file -> dependency -> update, later levels winning.
"""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
from typing import Any, Dict, List, Mapping, Optional

from branchify.config import RepoConfig
from branchify.logging import get_logger
from branchify.managers import ManagerRegistry, default_registry
from branchify.types import UpdateRecord

logger = get_logger(__name__)

# Keys that describe nesting rather than update content.
_STRUCTURAL_KEYS = frozenset({"deps", "updates"})


def _require_mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, MappingABC):
        raise ValueError(f"{what} must be a mapping, got {type(value).__name__}")
    return value


def _content(entry: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in entry.items() if k not in _STRUCTURAL_KEYS}


def flatten_updates(
    config: RepoConfig,
    package_files: Mapping[str, Any],
    registry: Optional[ManagerRegistry] = None,
) -> List[UpdateRecord]:
    """Return one update record per update, in input order.

    Args:
        config: Repository configuration. Accepted for interface parity with
            custom flatteners; the default flattener does not read it.
        package_files: Manager id -> list of package file entries.
        registry: Manager descriptors used for ``datasource``/``versioning``
            defaults. Defaults to the built-in registry.

    Returns:
        Flattened update records.

    Raises:
        ValueError: If an entry is not a mapping, a nested collection is not
            a list, or an update has no ``branchName``.
    """
    registry = registry if registry is not None else default_registry()
    updates: List[UpdateRecord] = []

    for manager, files in package_files.items():
        if not isinstance(files, list):
            raise ValueError(f"Package files for manager '{manager}' must be a list")
        descriptor = registry.get(manager)
        if descriptor is None:
            logger.debug(f"No descriptor registered for manager '{manager}'")

        for pf in files:
            pf = _require_mapping(pf, f"Package file entry for '{manager}'")
            package_file = pf.get("packageFile", "")
            deps = pf.get("deps") or []
            if not isinstance(deps, list):
                raise ValueError(f"'deps' in '{package_file}' must be a list")

            for dep in deps:
                dep = _require_mapping(dep, f"Dependency in '{package_file}'")
                dep_updates = dep.get("updates") or []
                if not isinstance(dep_updates, list):
                    raise ValueError(
                        f"'updates' for '{dep.get('depName')}' must be a list"
                    )
                for upd in dep_updates:
                    upd = _require_mapping(upd, f"Update for '{dep.get('depName')}'")
                    merged: Dict[str, Any] = {}
                    merged.update(_content(pf))
                    merged.update(_content(dep))
                    merged.update(_content(upd))
                    merged["manager"] = manager
                    merged["packageFile"] = package_file
                    if descriptor is not None:
                        if merged.get("datasource") is None:
                            merged["datasource"] = descriptor.default_datasource
                        if merged.get("versioning") is None:
                            merged["versioning"] = (
                                descriptor.default_config.versioning
                            )
                    updates.append(UpdateRecord.from_dict(merged))

    return updates
