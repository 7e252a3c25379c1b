"""
プリフェッチキャッシュのテスト
"""

import asyncio

import pytest
from unittest.mock import AsyncMock, patch

from vibe_finder.models.location import CURRENT_LOCATION_KEY
from vibe_finder.models.vibe import Vibe
from vibe_finder.services.location_catalog import LocationCatalog
from vibe_finder.services.prefetch_cache import PrefetchCache
from vibe_finder.services.weather_provider import LocationNotAvailableError


@pytest.fixture
def make_cache(clock):
    def build(provider, catalog, **kwargs):
        kwargs.setdefault('ttl_seconds', 300)
        kwargs.setdefault('prefetch_delay', 0)
        kwargs.setdefault('fallback_prefetch_delay', 0)
        return PrefetchCache(provider, catalog, clock=clock, **kwargs)
    return build


class TestCacheOperations:
    """キャッシュ操作のテスト"""

    def test_put_and_get(self, make_cache, fake_provider, catalog_factory, sunny_observation):
        cache = make_cache(fake_provider, catalog_factory())

        cache.put("1.0,2.0", sunny_observation)

        assert cache.get("1.0,2.0") == sunny_observation
        assert cache.get("3.0,4.0") is None

    def test_entry_expires_after_ttl(self, make_cache, fake_provider, catalog_factory, clock, sunny_observation):
        cache = make_cache(fake_provider, catalog_factory())
        cache.put("1.0,2.0", sunny_observation)

        clock.advance(300)
        assert cache.get("1.0,2.0") == sunny_observation

        clock.advance(1)
        assert cache.get("1.0,2.0") is None
        # 期限切れは取得時に削除される
        assert len(cache) == 0

    def test_put_overwrites_and_refreshes(self, make_cache, fake_provider, catalog_factory, clock,
                                          sunny_observation, rainy_observation):
        cache = make_cache(fake_provider, catalog_factory())
        cache.put("k", sunny_observation)
        clock.advance(200)
        cache.put("k", rainy_observation)
        clock.advance(200)

        assert cache.get("k") == rainy_observation

    def test_location_and_current_location_helpers(self, make_cache, fake_provider, catalog_factory,
                                                   location_factory, sunny_observation, rainy_observation):
        cache = make_cache(fake_provider, catalog_factory())
        location = location_factory(lat=-24.5, lon=-69.25)

        cache.put_for_location(location, sunny_observation)
        cache.put_current_location(rainy_observation)

        assert cache.get("-24.5,-69.25") == sunny_observation
        assert cache.get_for_location(location) == sunny_observation
        assert cache.get(CURRENT_LOCATION_KEY) == rainy_observation
        assert cache.get_current_location() == rainy_observation

    def test_cleanup_removes_only_expired(self, make_cache, fake_provider, catalog_factory, clock,
                                          sunny_observation):
        cache = make_cache(fake_provider, catalog_factory())
        cache.put("old-1", sunny_observation)
        cache.put("old-2", sunny_observation)
        clock.advance(250)
        cache.put("new", sunny_observation)
        clock.advance(100)

        assert cache.cleanup() == 2
        assert len(cache) == 1
        assert cache.get("new") == sunny_observation


@pytest.mark.asyncio
class TestCurrentLocationWeather:

    async def test_fetches_then_caches(self, make_cache, provider_factory, catalog_factory, sunny_observation):
        provider = provider_factory(default=sunny_observation, current_location=(35.68, 139.69))
        cache = make_cache(provider, catalog_factory())

        assert await cache.get_current_location_weather() == sunny_observation
        assert await cache.get_current_location_weather() == sunny_observation
        assert provider.calls == ["35.68,139.69"]

    async def test_location_not_available(self, make_cache, fake_provider, catalog_factory):
        cache = make_cache(fake_provider, catalog_factory())

        with pytest.raises(LocationNotAvailableError):
            await cache.get_current_location_weather()


@pytest.fixture
def two_vibe_catalog(location_factory):
    """primary・secondaryでSunnyとBreezyが同じ地点を共有するカタログ"""
    shared = location_factory(name="Shared", lat=1.0, lon=1.0, priority=9)
    sunny_only = [location_factory(name=f"Sunny{i}", lat=10.0 + i, lon=0.0) for i in range(4)]
    breezy_only = location_factory(name="Breezy", lat=20.0, lon=0.0)
    sunny_secondary = [location_factory(name=f"SunnyS{i}", lat=30.0 + i, lon=0.0) for i in range(3)]
    fallback = [location_factory(name=f"F{i}", lat=40.0 + i, lon=0.0, priority=i + 1) for i in range(6)]

    return LocationCatalog(
        primary={
            "sunny": [shared] + sunny_only,
            "breezy": [shared, breezy_only],
        },
        secondary={"sunny": sunny_secondary},
        fallback={"sunny": fallback, "breezy": [fallback[0]]},
    )


class TestPrefetchTargets:

    def test_priority_targets_are_deduplicated_across_vibes(self, make_cache, fake_provider, two_vibe_catalog):
        cache = make_cache(fake_provider, two_vibe_catalog)

        names = [loc.name for loc in cache.priority_targets()]

        # Breezy → Sunny の順。Sunny: primary先頭3件 + secondary先頭2件、Sharedは重複
        assert names == ["Shared", "Breezy", "Sunny0", "Sunny1", "SunnyS0", "SunnyS1"]

    def test_fallback_targets(self, make_cache, fake_provider, two_vibe_catalog):
        cache = make_cache(fake_provider, two_vibe_catalog)

        assert [loc.name for loc in cache.fallback_targets()] == ["F0", "F1"]


@pytest.mark.asyncio
class TestBackgroundPrefetch:
    """バックグラウンドプリフェッチのテスト"""

    async def test_warms_current_location_then_catalog(self, make_cache, provider_factory, two_vibe_catalog,
                                                       sunny_observation):
        provider = provider_factory(default=sunny_observation, current_location=(35.5, 139.5))
        cache = make_cache(provider, two_vibe_catalog)

        assert cache.start_background_prefetch() is True
        await cache._prefetch_task

        assert provider.calls[0] == "35.5,139.5"
        assert len(provider.calls) == 1 + 6 + 2
        assert cache.get_current_location() == sunny_observation
        assert cache.get("1.0,1.0") == sunny_observation
        assert cache.is_prefetching is False

    async def test_fresh_entries_are_skipped(self, make_cache, provider_factory, two_vibe_catalog,
                                             sunny_observation):
        provider = provider_factory(default=sunny_observation)
        cache = make_cache(provider, two_vibe_catalog)
        cache.put("1.0,1.0", sunny_observation)

        cache.start_background_prefetch()
        await cache._prefetch_task

        assert "1.0,1.0" not in provider.calls
        assert len(provider.calls) == 5 + 2

    async def test_failures_are_skipped(self, make_cache, provider_factory, two_vibe_catalog,
                                        location_factory, sunny_observation):
        provider = provider_factory(default=sunny_observation)
        provider.fail(location_factory(lat=1.0, lon=1.0), RuntimeError("boom"))
        cache = make_cache(provider, two_vibe_catalog)

        cache.start_background_prefetch()
        await cache._prefetch_task

        assert cache.get("1.0,1.0") is None
        assert cache.get("20.0,0.0") == sunny_observation

    async def test_start_while_running_is_noop(self, make_cache, provider_factory, two_vibe_catalog,
                                               sunny_observation):
        cache = make_cache(provider_factory(default=sunny_observation), two_vibe_catalog, prefetch_delay=10)

        assert cache.start_background_prefetch() is True
        task = cache._prefetch_task
        assert cache.start_background_prefetch() is False
        assert cache._prefetch_task is task

        await cache.stop_background_prefetch()

    async def test_stop_cancels_quietly(self, make_cache, provider_factory, two_vibe_catalog, sunny_observation):
        provider = provider_factory(default=sunny_observation)
        cache = make_cache(provider, two_vibe_catalog, prefetch_delay=10)

        cache.start_background_prefetch()
        task = cache._prefetch_task
        # 最初の取得の後、待機中になるまで進める
        for _ in range(5):
            await asyncio.sleep(0)
        assert cache.is_prefetching is True

        await cache.stop_background_prefetch()

        assert task.done()
        assert cache.is_prefetching is False
        assert len(provider.calls) == 1

    async def test_stop_without_running_task(self, make_cache, fake_provider, catalog_factory):
        cache = make_cache(fake_provider, catalog_factory())

        await cache.stop_background_prefetch()

        assert cache.is_prefetching is False

    async def test_stop_before_task_started(self, make_cache, fake_provider, two_vibe_catalog):
        cache = make_cache(fake_provider, two_vibe_catalog)

        cache.start_background_prefetch()
        await cache.stop_background_prefetch()

        assert fake_provider.calls == []


@pytest.mark.asyncio
class TestFallbackPrefetch:

    async def test_top_fallback_locations_by_priority(self, make_cache, provider_factory, two_vibe_catalog,
                                                      sunny_observation):
        provider = provider_factory(default=sunny_observation)
        cache = make_cache(provider, two_vibe_catalog)

        await cache.prefetch_fallback_for(Vibe.SUNNY)

        # 優先度6〜2の5件
        assert provider.calls == [f"{40.0 + i},0.0" for i in (5, 4, 3, 2, 1)]

    async def test_uses_fallback_delay(self, make_cache, provider_factory, two_vibe_catalog, sunny_observation):
        cache = make_cache(provider_factory(default=sunny_observation), two_vibe_catalog,
                           fallback_prefetch_delay=1.0)

        with patch('vibe_finder.services.prefetch_cache.asyncio.sleep', new_callable=AsyncMock) as mock_sleep:
            await cache.prefetch_fallback_for(Vibe.SUNNY, count=3)

        assert [call.args[0] for call in mock_sleep.await_args_list] == [1.0, 1.0]

    async def test_cancelled_by_stop(self, make_cache, provider_factory, two_vibe_catalog, sunny_observation):
        provider = provider_factory(default=sunny_observation)
        cache = make_cache(provider, two_vibe_catalog, fallback_prefetch_delay=10)

        warm = asyncio.create_task(cache.prefetch_fallback_for(Vibe.SUNNY))
        for _ in range(5):
            await asyncio.sleep(0)

        await cache.stop_background_prefetch()
        # 呼び出し元には例外が伝わらない
        await warm

        assert len(provider.calls) == 1

    async def test_unknown_vibe_has_nothing_to_warm(self, make_cache, fake_provider, two_vibe_catalog):
        cache = make_cache(fake_provider, two_vibe_catalog)

        await cache.prefetch_fallback_for(Vibe.SNOWY)

        assert fake_provider.calls == []
