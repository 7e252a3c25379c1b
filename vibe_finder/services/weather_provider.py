"""
天気プロバイダーのインターフェース

座標または現在地の天気観測データを提供する外部機能の抽象化。
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..models.weather import WeatherObservation


class ProviderError(Exception):
    """天気プロバイダー関連のエラー"""
    def __init__(self, message: str, status_code: Optional[int] = None, retry_after: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
        self.retry_after = retry_after


class ProviderRateLimitError(ProviderError):
    """レート制限エラー"""
    pass


class ProviderServerError(ProviderError):
    """サーバーエラー"""
    pass


class ProviderTimeoutError(ProviderError):
    """タイムアウトエラー"""
    pass


class LocationNotAvailableError(ProviderError):
    """現在地が取得できない場合のエラー"""
    def __init__(self, message: str = "現在地が利用できません"):
        super().__init__(message)


class WeatherProvider(ABC):
    """天気プロバイダーの基底クラス"""

    @abstractmethod
    async def fetch(self, latitude: float, longitude: float) -> WeatherObservation:
        """
        指定した座標の現在の天気を取得

        Raises:
            ProviderError: 通信エラー・タイムアウト・データなしの場合
        """

    @abstractmethod
    async def fetch_current_location(self) -> WeatherObservation:
        """
        現在地の天気を取得

        Raises:
            LocationNotAvailableError: 現在地が利用できない場合
            ProviderError: 取得に失敗した場合
        """

    @property
    def current_location(self) -> Optional[Tuple[float, float]]:
        """現在地の座標（不明な場合None）"""
        return None
