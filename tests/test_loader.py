"""Tests for loading and validating input files."""

import jsonschema
import pytest

from branchify.loader import load_input_yaml

VALID = """
config:
  repoIsOnboarded: true
  branchList: [renovate/configure]
packageFiles:
  pyenv:
    - packageFile: .python-version
      deps:
        - depName: python
          currentValue: "3.11"
          updates:
            - branchName: renovate/python-3.x
              newValue: "3.12"
"""


def test_valid_input():
    parsed = load_input_yaml(VALID)
    assert parsed.config.repo_is_onboarded is True
    assert parsed.config.branch_list == ["renovate/configure"]
    assert list(parsed.package_files) == ["pyenv"]


def test_empty_document():
    parsed = load_input_yaml("")
    assert parsed.config.repo_is_onboarded is False
    assert parsed.package_files == {}


def test_json_is_accepted():
    parsed = load_input_yaml('{"config": {"repoIsOnboarded": true}, "packageFiles": {}}')
    assert parsed.config.repo_is_onboarded is True


def test_boolean_like_manager_keys_become_strings():
    parsed = load_input_yaml("packageFiles:\n  on: []\n")
    assert list(parsed.package_files) == ["True"]


def test_top_level_must_be_mapping():
    with pytest.raises(ValueError, match="dictionary at top-level"):
        load_input_yaml("- a\n- b\n")


def test_unknown_top_level_key():
    with pytest.raises(ValueError, match="Unrecognized top-level key"):
        load_input_yaml("config: {}\nbranches: []\n")


def test_missing_branch_name_fails_schema():
    text = """
packageFiles:
  pyenv:
    - packageFile: .python-version
      deps:
        - depName: python
          updates:
            - newValue: "3.12"
"""
    with pytest.raises(jsonschema.ValidationError):
        load_input_yaml(text)


def test_wrong_config_type_fails_schema():
    with pytest.raises(jsonschema.ValidationError):
        load_input_yaml("config:\n  repoIsOnboarded: maybe\n")
