"""
Open-Meteo 天気プロバイダーのテスト
"""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

from vibe_finder.models.vibe import WeatherCondition
from vibe_finder.services.open_meteo_provider import OpenMeteoWeatherProvider, condition_from_wmo
from vibe_finder.services.weather_provider import (
    LocationNotAvailableError,
    ProviderError,
    ProviderRateLimitError,
)

C = WeatherCondition


def api_response(temperature=21.4, code=0, wind=8.2, cloud_cover=10, time="2024-01-15T12:00"):
    return {
        "latitude": 35.7,
        "longitude": 139.7,
        "current": {
            "time": time,
            "interval": 900,
            "temperature_2m": temperature,
            "weather_code": code,
            "wind_speed_10m": wind,
            "cloud_cover": cloud_cover,
        },
    }


class TestConditionFromWmo:
    """WMO天気コードの変換テスト"""

    @pytest.mark.parametrize("code,expected", [
        (0, C.CLEAR),
        (1, C.MOSTLY_CLEAR),
        (2, C.PARTLY_CLOUDY),
        (3, C.CLOUDY),
        (45, C.FOGGY),
        (53, C.DRIZZLE),
        (57, C.WINTRY_MIX),
        (63, C.RAIN),
        (65, C.HEAVY_RAIN),
        (71, C.FLURRIES),
        (73, C.SNOW),
        (75, C.HEAVY_SNOW),
        (80, C.SUN_SHOWERS),
        (82, C.HEAVY_RAIN),
        (95, C.THUNDERSTORMS),
        (99, C.STRONG_STORMS),
    ])
    def test_calm_conditions(self, code, expected):
        assert condition_from_wmo(code, wind_speed=5.0) == expected

    def test_partly_cloudy_with_heavy_cover(self):
        assert condition_from_wmo(2, wind_speed=5.0, cloud_cover=75) == C.MOSTLY_CLOUDY
        assert condition_from_wmo(2, wind_speed=5.0, cloud_cover=40) == C.PARTLY_CLOUDY

    def test_heavy_snow_with_strong_wind_is_blizzard(self):
        assert condition_from_wmo(75, wind_speed=50.0) == C.BLIZZARD
        assert condition_from_wmo(86, wind_speed=49.9) == C.HEAVY_SNOW

    def test_wind_on_clear_skies(self):
        assert condition_from_wmo(0, wind_speed=25.0) == C.BREEZY
        assert condition_from_wmo(1, wind_speed=39.0) == C.BREEZY
        assert condition_from_wmo(2, wind_speed=45.0) == C.WINDY
        # 雲の多い空は風で変わらない
        assert condition_from_wmo(3, wind_speed=45.0) == C.CLOUDY

    def test_unknown_code(self):
        with pytest.raises(ProviderError):
            condition_from_wmo(42, wind_speed=0.0)


class TestParseCurrentWeather:

    def test_parse(self):
        provider = OpenMeteoWeatherProvider(base_url="http://test.invalid")

        observation = provider.parse_current_weather(api_response())

        assert observation.temperature == 21.4
        assert observation.condition == C.CLEAR
        assert observation.wind_speed == 8.2
        assert observation.timestamp == datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)

    def test_missing_current_block(self):
        provider = OpenMeteoWeatherProvider(base_url="http://test.invalid")

        with pytest.raises(ProviderError):
            provider.parse_current_weather({"latitude": 1.0})

    def test_invalid_values(self):
        provider = OpenMeteoWeatherProvider(base_url="http://test.invalid")
        data = api_response()
        data["current"]["temperature_2m"] = None

        with pytest.raises(ProviderError):
            provider.parse_current_weather(data)


@pytest.mark.asyncio
class TestFetch:
    """fetchのテスト"""

    async def test_fetch_builds_request(self):
        provider = OpenMeteoWeatherProvider(base_url="http://test.invalid")

        with patch.object(provider, '_make_request', new_callable=AsyncMock) as mock_request:
            mock_request.return_value = api_response(temperature=-8.0, code=75, wind=55.0)
            observation = await provider.fetch(61.2, -149.9)

        params = mock_request.await_args.args[0]
        assert params['latitude'] == 61.2
        assert params['longitude'] == -149.9
        assert params['wind_speed_unit'] == 'kmh'
        assert 'weather_code' in params['current']
        assert observation.condition == C.BLIZZARD

    async def test_fetch_current_location(self):
        provider = OpenMeteoWeatherProvider(base_url="http://test.invalid", current_location=(35.7, 139.7))

        with patch.object(provider, '_make_request', new_callable=AsyncMock) as mock_request:
            mock_request.return_value = api_response()
            await provider.fetch_current_location()

        params = mock_request.await_args.args[0]
        assert (params['latitude'], params['longitude']) == (35.7, 139.7)

    async def test_fetch_current_location_without_location(self):
        provider = OpenMeteoWeatherProvider(base_url="http://test.invalid")

        with pytest.raises(LocationNotAvailableError):
            await provider.fetch_current_location()

    async def test_set_current_location(self):
        provider = OpenMeteoWeatherProvider(base_url="http://test.invalid")

        provider.set_current_location(51.5, -0.12)

        assert provider.current_location == (51.5, -0.12)


class TestRateLimit:

    def test_window_limit(self):
        provider = OpenMeteoWeatherProvider(base_url="http://test.invalid", max_requests_per_window=2)

        provider._check_rate_limit()
        provider._check_rate_limit()

        with pytest.raises(ProviderRateLimitError):
            provider._check_rate_limit()

    def test_old_requests_leave_the_window(self):
        provider = OpenMeteoWeatherProvider(base_url="http://test.invalid", max_requests_per_window=1)

        with patch('vibe_finder.services.open_meteo_provider.time.time', return_value=1000.0):
            provider._check_rate_limit()
        with patch('vibe_finder.services.open_meteo_provider.time.time', return_value=1061.0):
            provider._check_rate_limit()

        assert provider._request_times == [1061.0]

    def test_retry_delay_is_capped(self):
        provider = OpenMeteoWeatherProvider(base_url="http://test.invalid")

        assert provider._retry_delay(0) == 1.0
        assert provider._retry_delay(2) == 4.0
        assert provider._retry_delay(10) == provider.MAX_RETRY_DELAY
