"""Tests for the transformation result cache."""

import asyncio

import pytest

from dsforge.cache import TransformationCache, make_cache_key
from dsforge.core import ir
from dsforge.core.schema_loader import parse_schema


def result(schema_id: str = "acme-ds", platform: str = "react") -> ir.TransformationResult:
    return ir.TransformationResult(platform=platform, schema_id=schema_id)


class CountingFactory:
    """Factory that records how often it ran."""

    def __init__(self, value: ir.TransformationResult | None = None, gate: asyncio.Event | None = None):
        self.value = value or result()
        self.gate = gate
        self.calls = 0

    async def __call__(self) -> ir.TransformationResult:
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        return self.value


class TestCacheKey:
    def test_stable(self, schema):
        options = ir.TransformationOptions()
        assert make_cache_key(schema, "react", options) == make_cache_key(schema, "react", options)

    def test_platform_and_options_change_the_key(self, schema):
        options = ir.TransformationOptions()
        base = make_cache_key(schema, "react", options)
        assert make_cache_key(schema, "vue", options) != base
        assert make_cache_key(schema, "react", ir.TransformationOptions(target="production")) != base

    def test_feature_order_does_not_matter(self, schema):
        a = ir.TransformationOptions(features=["dark-mode", "rtl"])
        b = ir.TransformationOptions(features=["rtl", "dark-mode"])
        assert make_cache_key(schema, "react", a) == make_cache_key(schema, "react", b)

    def test_token_edit_changes_the_key(self, schema, schema_data):
        schema_data["tokens"]["primitive"]["spacing"]["md"] = "1.25rem"
        edited = parse_schema(schema_data)
        options = ir.TransformationOptions()
        assert make_cache_key(edited, "react", options) != make_cache_key(schema, "react", options)


class TestGetOrCompute:
    async def test_second_call_is_a_hit(self):
        cache = TransformationCache()
        factory = CountingFactory()
        first = await cache.get_or_compute("k", "acme-ds", "1.0.0", factory)
        second = await cache.get_or_compute("k", "acme-ds", "1.0.0", factory)
        assert first is second
        assert factory.calls == 1
        assert cache.stats.hits == 1
        assert cache.stats.misses == 1

    async def test_concurrent_requests_share_one_computation(self):
        cache = TransformationCache()
        gate = asyncio.Event()
        factory = CountingFactory(gate=gate)

        first = asyncio.ensure_future(cache.get_or_compute("k", "acme-ds", "1.0.0", factory))
        second = asyncio.ensure_future(cache.get_or_compute("k", "acme-ds", "1.0.0", factory))
        await asyncio.sleep(0)
        gate.set()
        a, b = await asyncio.gather(first, second)

        assert a is b
        assert factory.calls == 1
        assert cache.stats.coalesced == 1

    async def test_failures_are_not_cached(self):
        cache = TransformationCache()
        calls = 0

        async def failing():
            nonlocal calls
            calls += 1
            raise RuntimeError("boom")

        for _ in range(2):
            with pytest.raises(RuntimeError, match="boom"):
                await cache.get_or_compute("k", "acme-ds", "1.0.0", failing)
        assert calls == 2
        assert len(cache) == 0

    async def test_cancelled_waiter_does_not_cancel_computation(self):
        cache = TransformationCache()
        gate = asyncio.Event()
        factory = CountingFactory(gate=gate)

        cancelled = asyncio.ensure_future(cache.get_or_compute("k", "acme-ds", "1.0.0", factory))
        survivor = asyncio.ensure_future(cache.get_or_compute("k", "acme-ds", "1.0.0", factory))
        await asyncio.sleep(0)
        cancelled.cancel()
        gate.set()

        assert await survivor is factory.value
        assert cancelled.cancelled()
        assert "k" in cache


class TestEviction:
    async def test_lru_bound(self):
        cache = TransformationCache(max_entries=2)
        for key in ("a", "b"):
            await cache.get_or_compute(key, key, "1", CountingFactory(result(key)))
        cache.get("a")
        await cache.get_or_compute("c", "c", "1", CountingFactory(result("c")))

        assert len(cache) == 2
        assert "a" in cache
        assert "b" not in cache
        assert cache.stats.evictions == 1

    async def test_new_version_drops_old_versions(self):
        cache = TransformationCache()
        await cache.get_or_compute("v1-react", "acme-ds", "1.0.0", CountingFactory())
        await cache.get_or_compute("v1-vue", "acme-ds", "1.0.0", CountingFactory())
        await cache.get_or_compute("other", "other-ds", "1.0.0", CountingFactory(result("other-ds")))
        await cache.get_or_compute("v2-react", "acme-ds", "2.0.0", CountingFactory())

        assert "v1-react" not in cache
        assert "v1-vue" not in cache
        assert "v2-react" in cache
        assert "other" in cache

    def test_size_must_be_positive(self):
        with pytest.raises(ValueError):
            TransformationCache(max_entries=0)


class TestInvalidate:
    async def test_by_schema_id(self):
        cache = TransformationCache()
        await cache.get_or_compute("a", "acme-ds", "1", CountingFactory())
        await cache.get_or_compute("b", "other-ds", "1", CountingFactory(result("other-ds")))
        assert cache.invalidate("acme-ds") == 1
        assert "b" in cache

    async def test_everything(self):
        cache = TransformationCache()
        await cache.get_or_compute("a", "acme-ds", "1", CountingFactory())
        await cache.get_or_compute("b", "other-ds", "1", CountingFactory(result("other-ds")))
        assert cache.invalidate() == 2
        assert len(cache) == 0

    async def test_in_flight_result_is_not_stored_after_invalidate(self):
        cache = TransformationCache()
        gate = asyncio.Event()
        stale = CountingFactory(result("stale"), gate=gate)

        pending = asyncio.ensure_future(cache.get_or_compute("k", "acme-ds", "1", stale))
        await asyncio.sleep(0)
        cache.invalidate()
        gate.set()

        assert (await pending).schema_id == "stale"
        assert "k" not in cache
        fresh = CountingFactory(result("fresh"))
        assert (await cache.get_or_compute("k", "acme-ds", "1", fresh)).schema_id == "fresh"
        assert fresh.calls == 1

    async def test_callers_after_invalidate_do_not_join_stale_work(self):
        cache = TransformationCache()
        gate = asyncio.Event()
        stale = CountingFactory(result("stale"), gate=gate)

        pending = asyncio.ensure_future(cache.get_or_compute("k", "acme-ds", "1", stale))
        await asyncio.sleep(0)
        cache.invalidate("acme-ds")
        fresh = CountingFactory(result("fresh"))
        assert (await cache.get_or_compute("k", "acme-ds", "1", fresh)).schema_id == "fresh"
        gate.set()
        await pending

        assert cache.get("k").schema_id == "fresh"
        assert cache.stats.coalesced == 0
