"""Tests for the on-disk catalog cache."""

import os
import time
from datetime import timedelta
from unittest.mock import patch

import pytest

from gradle_versions.core.version_cache import VersionCache
from gradle_versions.errors import CachePersistError
from gradle_versions.models import CacheState


@pytest.fixture
def cache_file(tmp_path):
    return tmp_path / "tooling" / "gradle" / "versions.json"


@pytest.fixture
def cache(cache_file):
    return VersionCache(path=cache_file, max_age=timedelta(days=1))


def _age(path, seconds):
    stamp = time.time() - seconds
    os.utime(path, (stamp, stamp))


class TestState:
    """Freshness classification by modification time."""

    def test_absent(self, cache):
        assert cache.state() == CacheState.ABSENT

    def test_directory_is_absent(self, cache, cache_file):
        cache_file.mkdir(parents=True)
        assert cache.state() == CacheState.ABSENT

    def test_fresh(self, cache, cache_file):
        cache.write("[]")
        _age(cache_file, 60)
        assert cache.state() == CacheState.FRESH

    def test_stale(self, cache, cache_file):
        cache.write("[]")
        _age(cache_file, 2 * 24 * 3600)
        assert cache.state() == CacheState.STALE

    def test_explicit_now(self, cache, cache_file):
        cache.write("[]")
        mtime = cache_file.stat().st_mtime
        assert cache.state(now=mtime + 3600) == CacheState.FRESH
        assert cache.state(now=mtime + 25 * 3600) == CacheState.STALE


class TestReadWrite:
    """Payload persistence."""

    def test_round_trip_is_verbatim(self, cache):
        payload = '[{"version": "8.2.1", "snapshot": false}]\n'
        cache.write(payload)
        assert cache.read() == payload

    def test_creates_parent_directories(self, cache, cache_file):
        cache.write("[]")
        assert cache_file.is_file()

    def test_overwrite_leaves_no_temp_files(self, cache, cache_file):
        cache.write("[1]")
        cache.write("[2]")
        assert cache.read() == "[2]"
        assert sorted(p.name for p in cache_file.parent.iterdir()) == ["versions.json"]

    def test_read_missing_returns_none(self, cache):
        assert cache.read() is None

    def test_write_failure_raises_persist_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        cache = VersionCache(path=blocker / "versions.json")
        with pytest.raises(CachePersistError):
            cache.write("[]")

    def test_failed_replace_cleans_up(self, cache, cache_file):
        with patch("gradle_versions.core.version_cache.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(CachePersistError):
                cache.write("[]")
        assert list(cache_file.parent.iterdir()) == []

    def test_defaults_come_from_settings(self, monkeypatch, tmp_path):
        from gradle_versions.config.settings import settings

        monkeypatch.setattr(settings, "cache_dir", tmp_path)
        cache = VersionCache()
        assert cache.path == tmp_path / "versions.json"
        assert cache.max_age == timedelta(days=1)
