"""
pytest設定ファイル

全テストで共通して使用されるフィクスチャとセットアップを定義します。
"""

import pytest
import os
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence, Tuple

from vibe_finder.models.location import Location, coordinate_key
from vibe_finder.models.vibe import Vibe, WeatherCondition
from vibe_finder.models.weather import WeatherObservation
from vibe_finder.services.location_catalog import LocationCatalog
from vibe_finder.services.weather_provider import (
    LocationNotAvailableError,
    ProviderError,
    WeatherProvider,
)


FIXED_TIME = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


def make_observation(
    temperature: float = 20.0,
    condition=WeatherCondition.CLEAR,
    wind_speed: float = 5.0,
    timestamp: datetime = FIXED_TIME,
) -> WeatherObservation:
    """テスト用の観測データを作成"""
    return WeatherObservation(
        temperature=temperature,
        condition=condition,
        wind_speed=wind_speed,
        timestamp=timestamp,
    )


def make_location(
    name: str = "Test Town",
    lat: float = 10.0,
    lon: float = 20.0,
    priority: int = 5,
    tz: str = "UTC",
    country: str = "Testland",
) -> Location:
    """テスト用の地点を作成"""
    return Location(
        name=name,
        latitude=lat,
        longitude=lon,
        timezone_id=tz,
        country=country,
        priority=priority,
    )


def make_catalog(
    vibe: Vibe = Vibe.SUNNY,
    primary: Sequence[Location] = (),
    secondary: Sequence[Location] = (),
    fallback: Sequence[Location] = (),
) -> LocationCatalog:
    """単一バイブのカタログを作成"""
    return LocationCatalog(
        primary={vibe.value: list(primary)},
        secondary={vibe.value: list(secondary)},
        fallback={vibe.value: list(fallback)},
    )


class FakeWeatherProvider(WeatherProvider):
    """座標キーごとに決まった観測データを返すプロバイダー"""

    def __init__(
        self,
        observations: Optional[Dict[str, WeatherObservation]] = None,
        default: Optional[WeatherObservation] = None,
        failures: Optional[Dict[str, Exception]] = None,
        current_location: Optional[Tuple[float, float]] = None,
    ):
        self.observations = observations or {}
        self.default = default
        self.failures = failures or {}
        self._current_location = current_location
        self.calls: List[str] = []

    @property
    def current_location(self) -> Optional[Tuple[float, float]]:
        return self._current_location

    def set(self, location: Location, observation: WeatherObservation) -> None:
        self.observations[location.key] = observation

    def fail(self, location: Location, error: Exception) -> None:
        self.failures[location.key] = error

    async def fetch(self, latitude: float, longitude: float) -> WeatherObservation:
        key = coordinate_key(latitude, longitude)
        self.calls.append(key)

        if key in self.failures:
            raise self.failures[key]
        if key in self.observations:
            return self.observations[key]
        if self.default is not None:
            return self.default
        raise ProviderError(f"no data for {key}")

    async def fetch_current_location(self) -> WeatherObservation:
        if self._current_location is None:
            raise LocationNotAvailableError()
        return await self.fetch(*self._current_location)


class FakeClock:
    """手動で進める時計"""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def observation_factory():
    return make_observation


@pytest.fixture
def location_factory():
    return make_location


@pytest.fixture
def catalog_factory():
    return make_catalog


@pytest.fixture
def provider_factory():
    return FakeWeatherProvider


@pytest.fixture
def fake_provider():
    return FakeWeatherProvider()


@pytest.fixture
def sunny_observation():
    """Sunnyに満点で一致する観測データ"""
    return make_observation(temperature=25.0, condition=WeatherCondition.CLEAR, wind_speed=5.0)


@pytest.fixture
def rainy_observation():
    return make_observation(temperature=15.0, condition=WeatherCondition.RAIN, wind_speed=10.0)


@pytest.fixture(autouse=True)
def setup_test_environment():
    """テスト環境のセットアップ"""
    original_env = {}
    test_env = {
        'ENVIRONMENT': 'testing',
        'LOG_LEVEL': 'ERROR',
    }

    for key, value in test_env.items():
        original_env[key] = os.environ.get(key)
        os.environ[key] = value

    yield

    # 環境変数を復元
    for key, value in original_env.items():
        if value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = value


def pytest_configure(config):
    """pytest設定"""
    # カスタムマーカーの登録
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


def pytest_collection_modifyitems(config, items):
    """テスト収集時の処理"""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def suppress_logs():
    """ログ出力を抑制"""
    import logging
    logging.disable(logging.CRITICAL)
    yield
    logging.disable(logging.NOTSET)
