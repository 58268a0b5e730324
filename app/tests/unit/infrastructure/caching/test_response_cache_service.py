"""Unit tests for ResponseCacheService."""

from unittest.mock import AsyncMock

import pytest

from infrastructure.caching import CacheKeyBuilder, InMemoryResponseCache, ResponseCacheService

pytestmark = pytest.mark.unit


class TestResponseCacheService:
    """Tests for TTL policy and get_or_set."""

    def test_ttls_come_from_settings(self, settings):
        service = ResponseCacheService(settings)

        assert service.content_ttl_seconds == 900
        assert service.languages_ttl_seconds == 3600
        assert isinstance(service.cache, InMemoryResponseCache)

    def test_set_defaults_to_content_ttl(self, cache_service, clock):
        cache_service.set("k", "v")

        clock.advance(899)
        assert cache_service.get("k") == "v"
        clock.advance(1)
        assert cache_service.get("k") is None

    @pytest.mark.asyncio
    async def test_get_or_set_computes_once(self, cache_service):
        compute = AsyncMock(return_value={"languages": []})

        first = await cache_service.get_or_set("languages:all", compute)
        second = await cache_service.get_or_set("languages:all", compute)

        assert first == second == {"languages": []}
        compute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_get_or_set_uses_given_ttl(self, cache_service, clock):
        compute = AsyncMock(return_value=["en"])

        await cache_service.get_or_set(
            "languages:all", compute, ttl_seconds=cache_service.languages_ttl_seconds
        )
        clock.advance(3599)

        assert cache_service.get("languages:all") == ["en"]

    @pytest.mark.asyncio
    async def test_none_results_are_not_cached(self, cache_service):
        compute = AsyncMock(return_value=None)

        assert await cache_service.get_or_set("heritage:x:en", compute) is None
        assert await cache_service.get_or_set("heritage:x:en", compute) is None
        assert compute.await_count == 2

    @pytest.mark.asyncio
    async def test_state_filters_cache_independently(self, cache_service):
        maharashtra = CacheKeyBuilder.cities("en", state="Maharashtra")
        karnataka = CacheKeyBuilder.cities("en", state="Karnataka")

        await cache_service.get_or_set(maharashtra, AsyncMock(return_value=["Mumbai"]))
        await cache_service.get_or_set(karnataka, AsyncMock(return_value=["Bengaluru"]))

        assert cache_service.get(maharashtra) == ["Mumbai"]
        assert cache_service.get(karnataka) == ["Bengaluru"]

    @pytest.mark.asyncio
    async def test_forged_search_does_not_hit_other_filters(self, cache_service):
        search_only = CacheKeyBuilder.cities("en", search="x:state=Goa")
        state_and_search = CacheKeyBuilder.cities("en", state="Goa", search="x")

        await cache_service.get_or_set(search_only, AsyncMock(return_value=[]))

        assert cache_service.get(state_and_search) is None

    @pytest.mark.asyncio
    async def test_compute_errors_propagate_and_cache_nothing(self, cache_service):
        compute = AsyncMock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError):
            await cache_service.get_or_set("k", compute)

        assert cache_service.get("k") is None

    def test_delete_and_flush(self, cache_service):
        cache_service.set("a", 1)
        cache_service.set("b", 2)

        assert cache_service.delete("a") is True
        cache_service.flush()

        assert cache_service.get_stats()["entries"] == 0
