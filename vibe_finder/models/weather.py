"""天気データ用のモデル定義"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Union

from .vibe import WeatherCondition


@dataclass(frozen=True)
class WeatherObservation:
    """現在の天気データ

    temperature は摂氏、wind_speed は km/h。condition は文字列で渡しても
    WeatherCondition に正規化される。
    """
    temperature: float
    condition: Union[WeatherCondition, str]
    wind_speed: float
    timestamp: datetime

    def __post_init__(self):
        if not isinstance(self.condition, WeatherCondition):
            object.__setattr__(self, 'condition', WeatherCondition(self.condition))
        if self.timestamp.tzinfo is None:
            object.__setattr__(self, 'timestamp', self.timestamp.replace(tzinfo=timezone.utc))


@dataclass(frozen=True)
class CachedWeather:
    """キャッシュされた天気データ"""
    observation: WeatherObservation
    fetched_at: float  # time.time() 基準

    def age(self, now: float) -> float:
        return now - self.fetched_at

    def is_expired(self, now: float, ttl_seconds: float) -> bool:
        return self.age(now) > ttl_seconds
