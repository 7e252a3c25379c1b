"""
同梱の地点データを使った検索の統合テスト
"""

import pytest
from unittest.mock import patch

from vibe_finder.app import (
    CURRENT_LOCATION_UNAVAILABLE_MESSAGE,
    NO_MATCH_MESSAGE,
    VibeFinderApp,
    format_current_location,
    format_result,
    main,
)
from vibe_finder.models.location import LocationTier
from vibe_finder.models.vibe import Vibe, WeatherCondition
from vibe_finder.services.location_catalog import load_default_catalog

C = WeatherCondition


@pytest.fixture
def catalog():
    return load_default_catalog()


@pytest.fixture
def nowhere_weather(observation_factory):
    """どのバイブにも一致しない観測データ"""
    return observation_factory(temperature=40.0, condition=C.SMOKY, wind_speed=100.0)


def primary_and_secondary_keys(catalog, vibe):
    keys = set()
    for tier in (LocationTier.PRIMARY, LocationTier.SECONDARY):
        keys.update(loc.key for loc in catalog.locations_for(vibe, tier))
    return keys


@pytest.mark.asyncio
class TestBundledCatalogSearch:

    async def test_highest_priority_primary_location_first(self, catalog, provider_factory, sunny_observation):
        provider = provider_factory(default=sunny_observation)

        async with VibeFinderApp(catalog=catalog, provider=provider, enable_prefetch=False) as app:
            result = await app.search(Vibe.SUNNY)

        expected = sorted(catalog.primary_locations(Vibe.SUNNY), key=lambda loc: loc.priority, reverse=True)[0]
        assert result.location == expected
        assert result.match_score == 100.0
        assert provider.calls == [expected.key]

    @pytest.mark.parametrize("vibe", list(Vibe))
    async def test_only_fallback_matches(self, catalog, provider_factory, nowhere_weather, observation_factory,
                                         vibe):
        """fallbackでしか一致しない場合、primaryとsecondaryをすべて評価してからfallbackを返す"""
        matching = {
            Vibe.RAINY: observation_factory(15.0, C.RAIN, 10.0),
            Vibe.STORMY: observation_factory(20.0, C.THUNDERSTORMS, 40.0),
            Vibe.SNOWY: observation_factory(-5.0, C.SNOW, 10.0),
            Vibe.BREEZY: observation_factory(20.0, C.BREEZY, 25.0),
            Vibe.SUNNY: observation_factory(25.0, C.CLEAR, 5.0),
            Vibe.MISTY: observation_factory(12.0, C.HAZE, 5.0),
            Vibe.FOGGY: observation_factory(8.0, C.FOGGY, 3.0),
            Vibe.CLOUDY: observation_factory(16.0, C.CLOUDY, 10.0),
        }[vibe]
        expected_keys = primary_and_secondary_keys(catalog, vibe)
        fallback = [loc for loc in catalog.fallback_locations(vibe) if loc.key not in expected_keys]
        target = sorted(fallback, key=lambda loc: loc.priority, reverse=True)[0]

        provider = provider_factory(default=nowhere_weather)
        provider.set(target, matching)

        async with VibeFinderApp(catalog=catalog, provider=provider, enable_prefetch=False) as app:
            app.engine.request_delay = 0
            result = await app.search(vibe)

        assert result.location == target
        assert len(provider.calls) == len(set(provider.calls))
        assert set(provider.calls[:len(expected_keys)]) == expected_keys
        assert provider.calls[-1] == target.key

    async def test_exhausted_search_starts_over(self, catalog, provider_factory, nowhere_weather):
        provider = provider_factory(default=nowhere_weather)

        async with VibeFinderApp(catalog=catalog, provider=provider, enable_prefetch=False) as app:
            app.engine.request_delay = 0
            assert await app.search(Vibe.FOGGY) is None
            assert app.engine.used_locations == set()

    async def test_successive_searches_return_different_places(self, catalog, provider_factory,
                                                               sunny_observation):
        provider = provider_factory(default=sunny_observation)

        async with VibeFinderApp(catalog=catalog, provider=provider, enable_prefetch=False) as app:
            results = [await app.search(Vibe.SUNNY) for _ in range(5)]

        keys = [result.location.key for result in results]
        assert len(set(keys)) == 5

    async def test_scheduler_lifecycle(self, catalog, provider_factory, sunny_observation):
        provider = provider_factory(default=sunny_observation)

        async with VibeFinderApp(catalog=catalog, provider=provider) as app:
            assert app.scheduler.is_running() is True
            await app.search(Vibe.SUNNY)

        assert app.scheduler.is_running() is False
        assert app.cache.is_prefetching is False


class TestFormatResult:

    def test_no_match(self):
        assert format_result(Vibe.STORMY, None) == NO_MATCH_MESSAGE.format(vibe="stormy")


@pytest.mark.asyncio
class TestMain:

    async def test_main_prints_result(self, catalog, provider_factory, sunny_observation, capsys):
        provider = provider_factory(default=sunny_observation)

        def build_app(enable_prefetch):
            return VibeFinderApp(catalog=catalog, provider=provider, enable_prefetch=False)

        with patch('vibe_finder.app.setup_logging'), \
                patch('vibe_finder.app.VibeFinderApp', side_effect=build_app):
            exit_code = await main(["sunny", "--no-prefetch", "--count", "2"])

        output = capsys.readouterr().out
        assert exit_code == 0
        assert output.count("match 100/100") == 2
        assert "25°C" in output

    async def test_main_no_match(self, catalog, provider_factory, nowhere_weather, capsys):
        provider = provider_factory(default=nowhere_weather)

        def build_app(enable_prefetch):
            app = VibeFinderApp(catalog=catalog, provider=provider, enable_prefetch=False)
            app.engine.request_delay = 0
            return app

        with patch('vibe_finder.app.setup_logging'), \
                patch('vibe_finder.app.VibeFinderApp', side_effect=build_app):
            exit_code = await main(["misty", "--reset"])

        assert exit_code == 0
        assert NO_MATCH_MESSAGE.format(vibe="misty") in capsys.readouterr().out

    async def test_main_here_checks_current_location(self, catalog, provider_factory, sunny_observation, capsys):
        provider = provider_factory(current_location=(35.68, 139.69))
        provider.observations["35.68,139.69"] = sunny_observation
        apps = []

        def build_app(enable_prefetch):
            apps.append(enable_prefetch)
            return VibeFinderApp(catalog=catalog, provider=provider, enable_prefetch=enable_prefetch)

        with patch('vibe_finder.app.setup_logging'), \
                patch('vibe_finder.app.VibeFinderApp', side_effect=build_app):
            exit_code = await main(["sunny", "--here"])

        output = capsys.readouterr().out
        assert exit_code == 0
        assert apps == [False]
        assert "Your location has sunny vibes right now" in output
        assert "Clear, 25°C" in output
        assert "match 100/100" in output
        assert provider.calls == ["35.68,139.69"]

    async def test_main_here_without_current_location(self, catalog, provider_factory, sunny_observation, capsys):
        provider = provider_factory(default=sunny_observation)

        def build_app(enable_prefetch):
            return VibeFinderApp(catalog=catalog, provider=provider, enable_prefetch=False)

        with patch('vibe_finder.app.setup_logging'), \
                patch('vibe_finder.app.VibeFinderApp', side_effect=build_app):
            exit_code = await main(["rainy", "--here"])

        assert exit_code == 1
        assert CURRENT_LOCATION_UNAVAILABLE_MESSAGE in capsys.readouterr().out
        assert provider.calls == []


@pytest.mark.asyncio
class TestCheckCurrentLocation:

    async def test_not_matching_vibe(self, catalog, provider_factory, sunny_observation):
        provider = provider_factory(default=sunny_observation, current_location=(10.0, 20.0))
        app = VibeFinderApp(catalog=catalog, provider=provider, enable_prefetch=False)

        observation, matched, score = await app.check_current_location(Vibe.SNOWY)

        assert observation == sunny_observation
        assert matched is False
        assert score < 100
        assert "does not have snowy vibes" in format_current_location(Vibe.SNOWY, observation, matched, score)

    async def test_current_location_is_cached(self, catalog, provider_factory, sunny_observation):
        provider = provider_factory(default=sunny_observation, current_location=(10.0, 20.0))
        app = VibeFinderApp(catalog=catalog, provider=provider, enable_prefetch=False)

        await app.check_current_location(Vibe.SUNNY)
        await app.check_current_location(Vibe.BREEZY)

        assert len(provider.calls) == 1
