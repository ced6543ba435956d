"""Tests for version-gated capability checks."""

import pytest

from gradle_versions.core.capabilities import (
    Capability,
    MINIMUM_VERSIONS,
    capability_report,
    minimum_version,
    supports,
)
from gradle_versions.models.version import parse_version


class TestSupports:
    """Threshold lookups against the minimum-version table."""

    def test_composite_builds_threshold(self):
        assert not supports("composite builds", parse_version("3.2"))
        assert supports("composite builds", parse_version("3.3"))
        assert supports("composite builds", parse_version("4.0-rc-1"))

    def test_prerelease_of_minimum_counts(self):
        assert supports(Capability.COMPOSITE_BUILDS, parse_version("3.3-rc-1"))
        assert supports(Capability.COMPOSITE_BUILDS, parse_version("3.3-20161201000000+0000"))

    def test_enum_and_name_are_equivalent(self):
        version = parse_version("5.5")
        for cap in Capability:
            assert supports(cap, version) == supports(cap.value, version)

    @pytest.mark.parametrize("cap,below,at", [
        (Capability.DASH_DASH_SCAN, "3.4.1", "3.5"),
        (Capability.SYNC_TASKS_IN_ECLIPSE_PLUGIN_CONFIG, "5.3.1", "5.4"),
        (Capability.SENDING_RESERVED_PROJECTS, "5.4.1", "5.5"),
        (Capability.TEST_ATTRIBUTES, "5.5.1", "5.6"),
        (Capability.CLOSED_PROJECT_DEPENDENCY_SUBSTITUTION, "5.5", "5.6-milestone-1"),
        (Capability.TEST_DEBUGGING, "5.5", "5.6.4"),
        (Capability.TASK_EXECUTION_IN_INCLUDED_BUILD, "6.7.1", "6.8"),
    ])
    def test_each_threshold(self, cap, below, at):
        assert not supports(cap, parse_version(below))
        assert supports(cap, parse_version(at))

    def test_method_on_version(self):
        assert parse_version("6.8").supports("task execution in included build")
        assert not parse_version("6.7").supports(Capability.TASK_EXECUTION_IN_INCLUDED_BUILD)

    def test_unknown_capability(self):
        with pytest.raises(ValueError):
            supports("time travel", parse_version("8.0"))


class TestTable:
    """The static table itself."""

    def test_every_capability_has_a_minimum(self):
        assert set(MINIMUM_VERSIONS) == set(Capability)

    def test_minimums_are_final_versions(self):
        for cap in Capability:
            assert minimum_version(cap).is_final

    def test_report_covers_all(self):
        report = capability_report(parse_version("5.6"))
        assert len(report) == len(Capability)
        assert report[Capability.TEST_DEBUGGING] is True
        assert report[Capability.TASK_EXECUTION_IN_INCLUDED_BUILD] is False
