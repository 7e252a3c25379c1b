"""検索対象地点と検索結果のモデル"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

import pytz
from pytz.tzinfo import BaseTzInfo

from .weather import WeatherObservation


# 現在地用のキャッシュキー
CURRENT_LOCATION_KEY = "current_location"


class InvalidCatalogDataError(ValueError):
    """地点データが不正な場合のエラー"""
    pass


class LocationTier(str, Enum):
    """地点データの信頼度区分"""
    PRIMARY = "primary"
    SECONDARY = "secondary"
    FALLBACK = "fallback"
    ALL = "all"


def coordinate_key(latitude: float, longitude: float) -> str:
    """重複排除とキャッシュに使う座標キー"""
    return f"{latitude},{longitude}"


@dataclass(frozen=True)
class Location:
    """世界の検索対象地点"""
    name: str
    latitude: float
    longitude: float
    timezone_id: str
    country: str
    priority: int  # 1-10、高いほどそのバイブの天気になりやすい

    @property
    def key(self) -> str:
        return coordinate_key(self.latitude, self.longitude)

    @property
    def timezone(self) -> Optional[BaseTzInfo]:
        try:
            return pytz.timezone(self.timezone_id)
        except pytz.UnknownTimeZoneError:
            return None

    def validate(self) -> None:
        """
        地点データの妥当性を検証

        Raises:
            InvalidCatalogDataError: 名前・座標・優先度のいずれかが不正な場合
        """
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidCatalogDataError("地点名が空です")
        if not -90.0 <= self.latitude <= 90.0:
            raise InvalidCatalogDataError(f"緯度が範囲外です: {self.name} ({self.latitude})")
        if not -180.0 <= self.longitude <= 180.0:
            raise InvalidCatalogDataError(f"経度が範囲外です: {self.name} ({self.longitude})")
        if isinstance(self.priority, bool) or not isinstance(self.priority, int) or not 1 <= self.priority <= 10:
            raise InvalidCatalogDataError(f"優先度が範囲外です: {self.name} ({self.priority})")

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> 'Location':
        """
        辞書形式の地点データからLocationを作成

        Args:
            record: name, lat, lon, tz, country, priority を持つ辞書

        Returns:
            検証済みのLocation

        Raises:
            InvalidCatalogDataError: データが欠損・不正な場合
        """
        try:
            location = cls(
                name=record['name'],
                latitude=float(record['lat']),
                longitude=float(record['lon']),
                timezone_id=record.get('tz', 'UTC'),
                country=record.get('country', ''),
                priority=record['priority'],
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidCatalogDataError(f"地点データの解析に失敗しました: {record!r} - {e}")

        location.validate()
        return location


@dataclass(frozen=True)
class VibeSearchResult:
    """バイブ検索の結果"""
    location: Location
    observation: WeatherObservation
    match_score: float

    @property
    def temperature_display(self) -> str:
        return f"{int(self.observation.temperature)}°C"

    @property
    def local_time(self) -> str:
        """観測時刻を地点のタイムゾーンで表示"""
        tz = self.location.timezone
        timestamp = self.observation.timestamp
        if tz is not None:
            timestamp = timestamp.astimezone(tz)
        return timestamp.strftime("%H:%M")

    @property
    def condition_display(self) -> str:
        return self.observation.condition.description
