"""Global pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
from typing import Any, Callable

import pytest

from branchify.logging import set_global_log_level
from branchify.types import UpdateRecord


@pytest.fixture(autouse=True)
def _restore_log_level():
    """Tests may change the package log level; put it back afterwards."""
    yield
    set_global_log_level(logging.INFO)


@pytest.fixture
def make_update() -> Callable[..., UpdateRecord]:
    """Factory for update records with lodash-flavoured defaults."""

    def _make(**overrides: Any) -> UpdateRecord:
        fields: dict[str, Any] = {
            "branch_name": "update-lodash",
            "manager": "npm",
            "package_file": "pkg.json",
            "dep_name": "lodash",
            "current_value": "4.0.0",
            "new_value": "4.17.21",
        }
        fields.update(overrides)
        return UpdateRecord(**fields)

    return _make
