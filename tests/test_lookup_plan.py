"""Tests for the strategy x cache-state decision table."""

import pytest

from gradle_versions.core.version_catalog import CacheAction, plan_lookup
from gradle_versions.models import CacheState, LookupStrategy


class TestPlanLookup:
    """Pure decision function, no I/O involved."""

    @pytest.mark.parametrize("state", list(CacheState))
    def test_remote_always_downloads(self, state):
        assert plan_lookup(LookupStrategy.REMOTE, state) == CacheAction.DOWNLOAD

    def test_cached_only_without_cache_fails(self):
        assert plan_lookup(LookupStrategy.CACHED_ONLY, CacheState.ABSENT) == CacheAction.FAIL_NO_CACHE

    @pytest.mark.parametrize("state", [CacheState.FRESH, CacheState.STALE])
    def test_cached_only_ignores_staleness(self, state):
        assert plan_lookup(LookupStrategy.CACHED_ONLY, state) == CacheAction.READ_CACHE

    @pytest.mark.parametrize("state,action", [
        (CacheState.ABSENT, CacheAction.DOWNLOAD_AND_CACHE),
        (CacheState.FRESH, CacheAction.READ_CACHE_ELSE_DOWNLOAD),
        (CacheState.STALE, CacheAction.DOWNLOAD_ELSE_READ_CACHE),
    ])
    def test_remote_if_not_cached(self, state, action):
        assert plan_lookup(LookupStrategy.REMOTE_IF_NOT_CACHED, state) == action

    def test_table_is_complete(self):
        for strategy in LookupStrategy:
            for state in CacheState:
                assert isinstance(plan_lookup(strategy, state), CacheAction)
