"""Test the configuration module functionality."""

import logging

from branchify.config import ENGINE_CONFIG, EngineConfig, RepoConfig


def test_engine_config_defaults():
    """Collisions log at INFO, advisories at DEBUG."""
    config = EngineConfig()
    assert config.collision_log_level == logging.INFO
    assert config.advisory_log_level == logging.DEBUG


def test_global_config_instance():
    assert ENGINE_CONFIG == EngineConfig()


def test_repo_config_defaults():
    config = RepoConfig()
    assert config.errors == []
    assert config.warnings == []
    assert config.branch_list == []
    assert config.repo_is_onboarded is False
    assert config.fetch_release_notes is False


def test_repo_config_from_dict():
    config = RepoConfig.from_dict(
        {
            "repoIsOnboarded": True,
            "branchList": ["renovate/configure"],
            "fetchReleaseNotes": True,
            "errors": [{"message": "e"}],
            "warnings": None,
            "ignored": 1,
        }
    )
    assert config.repo_is_onboarded is True
    assert config.branch_list == ["renovate/configure"]
    assert config.fetch_release_notes is True
    assert config.errors == [{"message": "e"}]
    assert config.warnings == []


def test_repo_config_round_trip():
    config = RepoConfig(repo_is_onboarded=True, branch_list=["a"])
    assert RepoConfig.from_dict(config.to_dict()) == config
