"""
Open-Meteo 天気プロバイダー

Open-Meteo API の現在の天気を取得し、天気状態の語彙に正規化して返す。
APIキーは不要。
"""

import asyncio
import logging
import json
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

import aiohttp
from aiohttp import ClientTimeout, ClientError, ClientResponseError

from ..config import config
from ..models.vibe import WeatherCondition
from ..models.weather import WeatherObservation
from .weather_provider import (
    WeatherProvider,
    ProviderError,
    ProviderRateLimitError,
    ProviderServerError,
    ProviderTimeoutError,
    LocationNotAvailableError,
)

C = WeatherCondition

# WMO天気コードと天気状態の対応表
WMO_CONDITIONS: Dict[int, WeatherCondition] = {
    0: C.CLEAR,
    1: C.MOSTLY_CLEAR,
    2: C.PARTLY_CLOUDY,
    3: C.CLOUDY,
    45: C.FOGGY,
    48: C.FOGGY,
    51: C.DRIZZLE,
    53: C.DRIZZLE,
    55: C.DRIZZLE,
    56: C.WINTRY_MIX,
    57: C.WINTRY_MIX,
    61: C.RAIN,
    63: C.RAIN,
    65: C.HEAVY_RAIN,
    66: C.WINTRY_MIX,
    67: C.WINTRY_MIX,
    71: C.FLURRIES,
    73: C.SNOW,
    75: C.HEAVY_SNOW,
    77: C.FLURRIES,
    80: C.SUN_SHOWERS,
    81: C.RAIN,
    82: C.HEAVY_RAIN,
    85: C.FLURRIES,
    86: C.HEAVY_SNOW,
    95: C.THUNDERSTORMS,
    96: C.STRONG_STORMS,
    99: C.STRONG_STORMS,
}

# 風による天気状態の補正しきい値（km/h）
BLIZZARD_WIND = 50.0
WINDY_WIND = 40.0
BREEZY_WIND = 25.0
MOSTLY_CLOUDY_COVER = 60.0

CURRENT_VARIABLES = ["temperature_2m", "weather_code", "wind_speed_10m", "cloud_cover"]


def condition_from_wmo(code: int, wind_speed: float, cloud_cover: Optional[float] = None) -> WeatherCondition:
    """
    WMO天気コードを天気状態に変換

    Args:
        code: WMO天気コード
        wind_speed: 風速（km/h）
        cloud_cover: 雲量（%）

    Returns:
        天気状態

    Raises:
        ProviderError: 未知の天気コードの場合
    """
    condition = WMO_CONDITIONS.get(code)
    if condition is None:
        raise ProviderError(f"未知の天気コードです: {code}")

    if condition == C.PARTLY_CLOUDY and cloud_cover is not None and cloud_cover >= MOSTLY_CLOUDY_COVER:
        condition = C.MOSTLY_CLOUDY

    if condition == C.HEAVY_SNOW and wind_speed >= BLIZZARD_WIND:
        return C.BLIZZARD

    if condition in (C.CLEAR, C.MOSTLY_CLEAR, C.PARTLY_CLOUDY):
        if wind_speed >= WINDY_WIND:
            return C.WINDY
        if wind_speed >= BREEZY_WIND:
            return C.BREEZY

    return condition


class OpenMeteoWeatherProvider(WeatherProvider):
    """Open-Meteo APIを使用した天気プロバイダー"""

    # リトライ設定
    MAX_RETRIES = 3
    RETRY_DELAY = 1.0  # 秒
    BACKOFF_FACTOR = 2.0
    MAX_RETRY_DELAY = 60.0

    # タイムアウト設定
    REQUEST_TIMEOUT = 30
    CONNECT_TIMEOUT = 10

    # レート制限設定
    RATE_LIMIT_WINDOW = 60  # 1分間のウィンドウ

    def __init__(
        self,
        base_url: Optional[str] = None,
        current_location: Optional[Tuple[float, float]] = None,
        max_requests_per_window: Optional[int] = None,
    ):
        """
        OpenMeteoWeatherProviderの初期化

        Args:
            base_url: APIのURL（省略時は設定値）
            current_location: 現在地の座標（緯度, 経度）
            max_requests_per_window: 1分間の最大リクエスト数（省略時は設定値）
        """
        self.logger = logging.getLogger(__name__)
        self.base_url = base_url or config.WEATHER_API_BASE_URL
        self._current_location = current_location
        self.max_requests_per_window = max_requests_per_window or config.WEATHER_API_RATE_LIMIT
        self.session: Optional[aiohttp.ClientSession] = None

        # レート制限管理
        self._request_times: List[float] = []

    async def __aenter__(self):
        """非同期コンテキストマネージャーの開始"""
        await self.start_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """非同期コンテキストマネージャーの終了"""
        await self.close_session()

    @property
    def current_location(self) -> Optional[Tuple[float, float]]:
        return self._current_location

    def set_current_location(self, latitude: float, longitude: float) -> None:
        """現在地を更新"""
        self._current_location = (latitude, longitude)

    async def start_session(self):
        """HTTPセッションを開始"""
        if self.session is None or self.session.closed:
            timeout = ClientTimeout(
                total=self.REQUEST_TIMEOUT,
                connect=self.CONNECT_TIMEOUT
            )
            connector = aiohttp.TCPConnector(
                limit=10,
                limit_per_host=5,
                ttl_dns_cache=300,
                use_dns_cache=True,
            )
            self.session = aiohttp.ClientSession(
                timeout=timeout,
                connector=connector,
                headers={
                    'User-Agent': 'VibeFinder/1.0',
                    'Accept': 'application/json',
                    'Accept-Encoding': 'gzip, deflate'
                }
            )
            self.logger.info("HTTPセッションを開始しました")

    async def close_session(self):
        """HTTPセッションを終了"""
        if self.session and not self.session.closed:
            await self.session.close()
            self.logger.info("HTTPセッションを終了しました")

    def _check_rate_limit(self) -> None:
        """レート制限をチェック"""
        current_time = time.time()

        # 古いリクエスト時刻を削除
        self._request_times = [
            req_time for req_time in self._request_times
            if current_time - req_time < self.RATE_LIMIT_WINDOW
        ]

        if len(self._request_times) >= self.max_requests_per_window:
            raise ProviderRateLimitError(
                f"レート制限に達しました。{self.RATE_LIMIT_WINDOW}秒後に再試行してください。"
            )

        self._request_times.append(current_time)

    def _retry_delay(self, retries: int) -> float:
        return min(self.RETRY_DELAY * (self.BACKOFF_FACTOR ** retries), self.MAX_RETRY_DELAY)

    async def _make_request(self, params: Dict[str, Any], retries: int = 0) -> Dict[str, Any]:
        """
        HTTPリクエストを実行（リトライ機能付き）

        Args:
            params: クエリパラメータ
            retries: 現在のリトライ回数

        Returns:
            APIレスポンスのJSONデータ

        Raises:
            ProviderError: API呼び出しに失敗した場合
        """
        try:
            self._check_rate_limit()
        except ProviderRateLimitError:
            if retries < self.MAX_RETRIES:
                delay = self._retry_delay(retries)
                self.logger.warning(f"レート制限のためリトライします ({retries + 1}/{self.MAX_RETRIES}) - {delay}秒後")
                await asyncio.sleep(delay)
                return await self._make_request(params, retries + 1)
            raise

        if self.session is None or self.session.closed:
            await self.start_session()

        try:
            self.logger.debug(f"APIリクエスト開始: {params}")

            async with self.session.get(self.base_url, params=params) as response:
                retry_after = None
                if 'Retry-After' in response.headers:
                    try:
                        retry_after = int(response.headers['Retry-After'])
                    except ValueError:
                        pass

                if response.status == 200:
                    try:
                        data = await response.json()
                    except (json.JSONDecodeError, aiohttp.ContentTypeError) as e:
                        self.logger.error(f"JSONデコードエラー: {params} - {str(e)}")
                        raise ProviderError(f"レスポンスのJSONデコードに失敗しました: {str(e)}")
                    self.logger.debug(f"APIリクエスト成功: {params}")
                    return data

                elif response.status == 429:
                    self.logger.warning(f"レート制限に達しました: {params}")
                    raise ProviderRateLimitError(
                        f"レート制限に達しました (HTTP {response.status})",
                        status_code=response.status,
                        retry_after=retry_after
                    )

                elif response.status >= 500:
                    self.logger.warning(f"サーバーエラー: {params} (HTTP {response.status})")
                    raise ProviderServerError(
                        f"サーバーエラー (HTTP {response.status})",
                        status_code=response.status,
                        retry_after=retry_after
                    )

                else:
                    reason = ''
                    try:
                        body = await response.json()
                        reason = body.get('reason', '') if isinstance(body, dict) else ''
                    except (json.JSONDecodeError, aiohttp.ContentTypeError):
                        pass
                    self.logger.error(f"APIリクエスト失敗: {params} (HTTP {response.status}) {reason}")
                    raise ProviderError(
                        f"APIリクエスト失敗 (HTTP {response.status}) {reason}".strip(),
                        status_code=response.status
                    )

        except asyncio.TimeoutError:
            self.logger.error(f"タイムアウトエラー: {params}")

            if retries < self.MAX_RETRIES:
                delay = self._retry_delay(retries)
                self.logger.info(f"タイムアウトのためリトライします ({retries + 1}/{self.MAX_RETRIES}) - {delay}秒後")
                await asyncio.sleep(delay)
                return await self._make_request(params, retries + 1)
            raise ProviderTimeoutError(f"リクエストがタイムアウトしました: {params}")

        except ProviderServerError:
            if retries < self.MAX_RETRIES:
                delay = self._retry_delay(retries)
                self.logger.info(f"サーバーエラーのためリトライします ({retries + 1}/{self.MAX_RETRIES}) - {delay}秒後")
                await asyncio.sleep(delay)
                return await self._make_request(params, retries + 1)
            raise

        except ClientResponseError as e:
            self.logger.error(f"HTTPレスポンスエラー: {params} - {str(e)}")
            raise ProviderError(f"HTTPレスポンスエラー: {str(e)}", status_code=e.status)

        except ClientError as e:
            self.logger.error(f"ネットワークエラー: {params} - {str(e)}")

            if retries < self.MAX_RETRIES:
                delay = self._retry_delay(retries)
                self.logger.info(f"ネットワークエラーのためリトライします ({retries + 1}/{self.MAX_RETRIES}) - {delay}秒後")
                await asyncio.sleep(delay)
                return await self._make_request(params, retries + 1)
            raise ProviderError(f"ネットワークエラー: {str(e)}")

    def _build_params(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """現在の天気APIのクエリパラメータを構築"""
        return {
            'latitude': latitude,
            'longitude': longitude,
            'current': ','.join(CURRENT_VARIABLES),
            'wind_speed_unit': 'kmh',
            'timezone': 'GMT',
        }

    def parse_current_weather(self, data: Dict[str, Any]) -> WeatherObservation:
        """
        APIレスポンスを観測データに変換

        Args:
            data: APIレスポンスのJSONデータ

        Returns:
            天気の観測データ

        Raises:
            ProviderError: データが欠損・不正な場合
        """
        current = data.get('current') if isinstance(data, dict) else None
        if not current:
            raise ProviderError("現在の天気データが空です")

        try:
            temperature = float(current['temperature_2m'])
            wind_speed = float(current['wind_speed_10m'])
            code = int(current['weather_code'])
            cloud_cover = current.get('cloud_cover')
            cloud_cover = float(cloud_cover) if cloud_cover is not None else None

            time_str = current.get('time')
            if time_str:
                timestamp = datetime.fromisoformat(time_str)
                if timestamp.tzinfo is None:
                    timestamp = timestamp.replace(tzinfo=timezone.utc)
            else:
                timestamp = datetime.now(timezone.utc)
        except (KeyError, TypeError, ValueError) as e:
            self.logger.error(f"天気データの解析に失敗しました: {str(e)}")
            raise ProviderError(f"天気データの解析に失敗しました: {str(e)}")

        return WeatherObservation(
            temperature=temperature,
            condition=condition_from_wmo(code, wind_speed, cloud_cover),
            wind_speed=wind_speed,
            timestamp=timestamp,
        )

    async def fetch(self, latitude: float, longitude: float) -> WeatherObservation:
        data = await self._make_request(self._build_params(latitude, longitude))
        observation = self.parse_current_weather(data)
        self.logger.debug(
            f"天気を取得しました: {latitude},{longitude} - {observation.condition.value} "
            f"{observation.temperature}°C {observation.wind_speed}km/h"
        )
        return observation

    async def fetch_current_location(self) -> WeatherObservation:
        if self._current_location is None:
            raise LocationNotAvailableError()
        latitude, longitude = self._current_location
        return await self.fetch(latitude, longitude)
