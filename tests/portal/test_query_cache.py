# This test file verifies staleness, prefix invalidation, and failure handling of the query cache.
# It exists so pages sharing an endpoint keep reusing one snapshot until it is invalidated.
# A manual clock keeps expiry checks deterministic.

from __future__ import annotations

import pytest

from src.portal.query_cache import QueryCache


class _ManualClock:
    def __init__(self) -> None:
        self.now = 1_000.0

    def __call__(self) -> float:
        return self.now


def test_fetch_reuses_value_until_stale() -> None:
    clock = _ManualClock()
    cache = QueryCache(stale_seconds=300, clock=clock)
    calls: list[int] = []

    def loader() -> list[int]:
        calls.append(1)
        return [len(calls)]

    assert cache.fetch(("/api/members", None), loader) == [1]
    clock.now += 299
    assert cache.fetch(("/api/members", None), loader) == [1]
    clock.now += 2
    assert cache.fetch(("/api/members", None), loader) == [2]
    assert len(calls) == 2


def test_invalidate_by_prefix_only_drops_matching_keys() -> None:
    cache = QueryCache(stale_seconds=300)
    cache.set(("/api/members", None), "all")
    cache.set(("/api/members", "agent-1"), "scoped")
    cache.set(("/api/deposits", None), "deposits")

    dropped = cache.invalidate(("/api/members",))

    assert dropped == 2
    assert cache.keys() == [("/api/deposits", None)]


def test_invalidate_without_prefix_clears_everything() -> None:
    cache = QueryCache(stale_seconds=300)
    cache.set(("/api/users",), "users")
    cache.set(("/api/activities",), "activities")

    assert cache.invalidate() == 2
    assert cache.keys() == []


def test_loader_failure_is_not_cached() -> None:
    cache = QueryCache(stale_seconds=300)

    def failing_loader() -> str:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        cache.fetch(("/api/products/active",), failing_loader)

    assert cache.keys() == []
    assert cache.fetch(("/api/products/active",), lambda: "ok") == "ok"
