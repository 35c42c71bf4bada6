"""Tests for the data model."""

import pytest

from branchify.types import (
    AdvisoryOutcome,
    BranchConfig,
    BranchifyResult,
    UpdateRecord,
)


class TestUpdateRecord:
    """Test cases for UpdateRecord."""

    def test_from_dict_maps_camel_case(self):
        record = UpdateRecord.from_dict(
            {
                "branchName": "renovate/lodash",
                "manager": "npm",
                "packageFile": "package.json",
                "depName": "lodash",
                "currentValue": "4.0.0",
                "newValue": "4.17.21",
                "sourceUrl": "https://github.com/lodash/lodash",
                "newVersion": "4.17.21",
                "logJSON": {"hasReleaseNotes": True},
                "updateType": "minor",
            }
        )
        assert record.branch_name == "renovate/lodash"
        assert record.package_file == "package.json"
        assert record.log_json == {"hasReleaseNotes": True}
        assert record.extra == {"updateType": "minor"}
        assert record.dedup_key == ("package.json", "lodash", "4.0.0")

    def test_to_dict_omits_unset_fields(self):
        record = UpdateRecord(branch_name="b", manager="npm", package_file="p")
        assert record.to_dict() == {
            "branchName": "b",
            "manager": "npm",
            "packageFile": "p",
        }

    def test_extra_fields_round_trip(self):
        data = {"branchName": "b", "manager": "m", "packageFile": "p", "x": [1]}
        assert UpdateRecord.from_dict(data).to_dict() == data

    @pytest.mark.parametrize("data", [{}, {"branchName": ""}, {"branchName": 3}])
    def test_branch_name_required(self, data):
        with pytest.raises(ValueError, match="branchName"):
            UpdateRecord.from_dict(data)

    def test_null_manager_and_package_file(self):
        record = UpdateRecord.from_dict(
            {"branchName": "b", "manager": None, "packageFile": None}
        )
        assert record.manager == ""
        assert record.package_file == ""


class TestBranchConfig:
    """Test cases for BranchConfig and BranchifyResult serialisation."""

    def test_to_dict(self):
        branch = BranchConfig(
            branch_name="b",
            upgrades=[UpdateRecord(branch_name="b", dep_name="d")],
            package_files={"npm": []},
            dep_name="d",
            title="Update dependency d",
        )
        data = branch.to_dict()
        assert data["branchName"] == "b"
        assert data["title"] == "Update dependency d"
        assert data["upgrades"] == [
            {"branchName": "b", "manager": "", "packageFile": "", "depName": "d"}
        ]
        assert data["packageFiles"] == {"npm": []}
        assert "packageFiles" not in branch.to_dict(include_package_files=False)

    def test_result_to_dict(self):
        result = BranchifyResult(
            errors=["e"], branches=[BranchConfig(branch_name="b")], branch_list=["b"]
        )
        data = result.to_dict(include_package_files=False)
        assert data["errors"] == ["e"]
        assert data["warnings"] == []
        assert data["branchList"] == ["b"]
        assert [b["branchName"] for b in data["branches"]] == ["b"]


def test_advisory_outcome_ok():
    assert AdvisoryOutcome().ok
    assert not AdvisoryOutcome(error=TypeError("x")).ok
