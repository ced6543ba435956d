"""Tests for catalog record decoding and filtering."""

import json

import pytest

from gradle_versions.core.version_catalog import filter_versions
from gradle_versions.errors import MalformedCatalogError
from gradle_versions.models.catalog import CatalogEntry, parse_catalog
from gradle_versions.models.version import parse_version

MINIMUM = parse_version("2.6")


def entry(version, **fields):
    return CatalogEntry.from_dict({"version": version, **fields})


class TestCatalogEntry:
    """Decoding individual records."""

    def test_string_booleans(self):
        e = CatalogEntry.from_dict({
            "version": "7.0-rc-1", "snapshot": "false", "activeRc": "true", "rcFor": "7.0", "broken": "false",
        })
        assert e.version == "7.0-rc-1"
        assert e.is_snapshot is False
        assert e.is_active_rc is True
        assert e.rc_for == "7.0"
        assert e.is_broken is False

    def test_json_booleans(self):
        e = CatalogEntry.from_dict({"version": "7.0", "snapshot": True, "broken": False})
        assert e.is_snapshot is True
        assert e.is_broken is False

    def test_missing_fields_default_to_false(self):
        e = CatalogEntry.from_dict({"version": "7.0"})
        assert not e.is_snapshot
        assert not e.is_active_rc
        assert not e.is_broken
        assert e.rc_for == ""
        assert not e.is_candidate_for_other_version

    def test_empty_dict(self):
        assert CatalogEntry.from_dict({}) == CatalogEntry()

    def test_null_rc_for(self):
        assert CatalogEntry.from_dict({"version": "7.0", "rcFor": None}).rc_for == ""


class TestParseCatalog:
    """Decoding a whole payload."""

    def test_array_of_objects(self):
        payload = json.dumps([{"version": "7.0"}, {"version": "6.9"}])
        assert [e.version for e in parse_catalog(payload)] == ["7.0", "6.9"]

    @pytest.mark.parametrize("payload", ["not json", "{}", "[1, 2]", '["7.0"]', ""])
    def test_rejects_other_shapes(self, payload):
        with pytest.raises(ValueError):
            parse_catalog(payload)


class TestFilterVersions:
    """The eligibility pipeline."""

    def test_broken_always_excluded(self):
        entries = [entry("7.0", broken="true", activeRc="true")]
        assert filter_versions(entries, MINIMUM) == []

    def test_snapshot_always_excluded(self):
        entries = [entry("7.1-20210601000000+0000", snapshot="true")]
        assert filter_versions(entries, MINIMUM) == []

    def test_inactive_release_candidate_excluded(self):
        entries = [entry("7.0-rc-1", rcFor="7.0", activeRc="false")]
        assert filter_versions(entries, MINIMUM) == []

    def test_active_release_candidate_kept(self):
        entries = [entry("7.0-rc-2", rcFor="7.0", activeRc="true")]
        assert [v.raw for v in filter_versions(entries, MINIMUM)] == ["7.0-rc-2"]

    def test_below_minimum_excluded(self):
        entries = [entry("2.5"), entry("2.6-rc-1", rcFor="2.6", activeRc="true"), entry("2.6"), entry("1.12")]
        assert [v.raw for v in filter_versions(entries, MINIMUM)] == ["2.6", "2.6-rc-1"]

    def test_sorted_descending(self):
        entries = [entry("6.9"), entry("7.0"), entry("6.10"), entry("7.0.1"), entry("7.1-rc-1", activeRc="true")]
        assert [v.raw for v in filter_versions(entries, MINIMUM)] == ["7.1-rc-1", "7.0.1", "7.0", "6.10", "6.9"]

    def test_invalid_version_is_hard_error(self):
        entries = [entry("7.0"), entry("seven")]
        with pytest.raises(MalformedCatalogError) as excinfo:
            filter_versions(entries, MINIMUM)
        assert excinfo.value.__cause__ is not None

    def test_invalid_version_in_excluded_entry_is_ignored(self):
        entries = [entry("7.0"), entry("nightly", snapshot="true")]
        assert [v.raw for v in filter_versions(entries, MINIMUM)] == ["7.0"]

    def test_oversized_version_number_is_hard_error(self):
        entries = [entry("7.0"), entry("1." + "9" * 5000)]
        with pytest.raises(MalformedCatalogError):
            filter_versions(entries, MINIMUM)
