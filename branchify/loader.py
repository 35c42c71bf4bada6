"""YAML loader + schema validation for branchify input files.

An input file holds the repository config and the package files detected by
the managers::

    config:
      repoIsOnboarded: true
    packageFiles:
      pyenv:
        - packageFile: .python-version
          deps:
            - depName: python
              currentValue: "3.11"
              updates:
                - branchName: renovate/python-3.x
                  newValue: "3.12"

JSON is accepted as well since it parses as YAML.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from importlib import resources
from typing import Any, Dict

import jsonschema
import yaml

from branchify.config import RepoConfig
from branchify.utils.yaml_utils import normalize_yaml_dict_keys

RECOGNIZED_KEYS = frozenset({"config", "packageFiles"})


@dataclass
class BranchifyInput:
    """Parsed input file."""

    config: RepoConfig = field(default_factory=RepoConfig)
    package_files: Dict[str, Any] = field(default_factory=dict)


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("branchify.schemas")
        .joinpath("input.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_input_yaml(yaml_str: str) -> BranchifyInput:
    """Load, normalize, and validate an input YAML string.

    Raises:
        ValueError: If the document is not a mapping or has unknown top-level
            keys.
        jsonschema.ValidationError: If the document does not match the
            packaged schema.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    extra = set(map(str, data.keys())) - RECOGNIZED_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s) in input: {', '.join(sorted(extra))}. "
            f"Allowed keys are {sorted(RECOGNIZED_KEYS)}"
        )

    # Boolean-like manager ids (on, yes) load as bools; force string keys
    if isinstance(data.get("packageFiles"), dict):
        data["packageFiles"] = normalize_yaml_dict_keys(data["packageFiles"])

    jsonschema.validate(data, _load_schema())

    return BranchifyInput(
        config=RepoConfig.from_dict(data.get("config") or {}),
        package_files=data.get("packageFiles") or {},
    )
