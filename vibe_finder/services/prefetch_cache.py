"""
天気データのプリフェッチキャッシュ

座標キー（または現在地）ごとの観測データをTTL付きでメモリに保持し、
優先度の高い地点をバックグラウンドで事前取得する。
"""

import asyncio
import logging
import time
from typing import Callable, Dict, List, Optional, Sequence

from ..config import config
from ..models.location import CURRENT_LOCATION_KEY, Location
from ..models.vibe import Vibe
from ..models.weather import CachedWeather, WeatherObservation
from .location_catalog import LocationCatalog
from .weather_provider import WeatherProvider

logger = logging.getLogger(__name__)


class PrefetchCache:
    """TTL付き天気キャッシュとバックグラウンドプリフェッチ"""

    def __init__(
        self,
        provider: WeatherProvider,
        catalog: LocationCatalog,
        ttl_seconds: Optional[float] = None,
        prefetch_delay: Optional[float] = None,
        fallback_prefetch_delay: Optional[float] = None,
        clock: Callable[[], float] = time.time,
    ):
        """
        PrefetchCacheの初期化

        Args:
            provider: 天気プロバイダー
            catalog: 地点カタログ
            ttl_seconds: キャッシュの有効期間（省略時は設定値）
            prefetch_delay: プリフェッチのリクエスト間隔（秒）
            fallback_prefetch_delay: fallback地点の集中プリフェッチのリクエスト間隔（秒）
            clock: 現在時刻を返す関数
        """
        self.provider = provider
        self.catalog = catalog
        self.ttl_seconds = config.CACHE_TTL_SECONDS if ttl_seconds is None else ttl_seconds
        self.prefetch_delay = config.PREFETCH_DELAY if prefetch_delay is None else prefetch_delay
        self.fallback_prefetch_delay = (
            config.PREFETCH_FALLBACK_DELAY if fallback_prefetch_delay is None else fallback_prefetch_delay
        )
        self._clock = clock

        self._cache: Dict[str, CachedWeather] = {}
        self._prefetch_task: Optional[asyncio.Task] = None
        self._fallback_prefetch_task: Optional[asyncio.Task] = None

    # キャッシュ操作

    def get(self, key: str) -> Optional[WeatherObservation]:
        """キャッシュから取得（期限切れは削除してNone）"""
        cached = self._cache.get(key)
        if cached is None:
            return None

        if cached.is_expired(self._clock(), self.ttl_seconds):
            del self._cache[key]
            logger.debug(f"キャッシュの期限切れ: {key}")
            return None

        logger.debug(f"キャッシュヒット: {key}")
        return cached.observation

    def put(self, key: str, observation: WeatherObservation) -> None:
        """キャッシュに保存（常に上書き）"""
        self._cache[key] = CachedWeather(observation=observation, fetched_at=self._clock())
        logger.debug(f"データをキャッシュに保存: {key}")

    def get_for_location(self, location: Location) -> Optional[WeatherObservation]:
        return self.get(location.key)

    def put_for_location(self, location: Location, observation: WeatherObservation) -> None:
        self.put(location.key, observation)

    def get_current_location(self) -> Optional[WeatherObservation]:
        return self.get(CURRENT_LOCATION_KEY)

    def put_current_location(self, observation: WeatherObservation) -> None:
        self.put(CURRENT_LOCATION_KEY, observation)

    def is_fresh(self, key: str) -> bool:
        cached = self._cache.get(key)
        return cached is not None and not cached.is_expired(self._clock(), self.ttl_seconds)

    def cleanup(self) -> int:
        """期限切れのエントリをすべて削除"""
        now = self._clock()
        expired = [key for key, cached in self._cache.items() if cached.is_expired(now, self.ttl_seconds)]
        for key in expired:
            del self._cache[key]

        if expired:
            logger.info(f"期限切れのキャッシュを削除しました: {len(expired)}件")
        return len(expired)

    def __len__(self) -> int:
        return len(self._cache)

    async def get_current_location_weather(self) -> WeatherObservation:
        """
        現在地の天気を取得（キャッシュ優先）

        Raises:
            LocationNotAvailableError: 現在地が利用できない場合
            ProviderError: 取得に失敗した場合
        """
        cached = self.get_current_location()
        if cached is not None:
            return cached

        observation = await self.provider.fetch_current_location()
        self.put_current_location(observation)
        return observation

    # バックグラウンドプリフェッチ

    @property
    def is_prefetching(self) -> bool:
        return any(
            task is not None and not task.done()
            for task in (self._prefetch_task, self._fallback_prefetch_task)
        )

    def start_background_prefetch(self) -> bool:
        """
        バックグラウンドプリフェッチを開始

        Returns:
            新しく開始した場合True、既に実行中の場合False
        """
        if self._prefetch_task is not None and not self._prefetch_task.done():
            logger.debug("プリフェッチは既に実行中です")
            return False

        logger.info("バックグラウンドプリフェッチを開始します")
        self._prefetch_task = asyncio.create_task(self._perform_prefetch())
        return True

    async def prefetch_fallback_for(self, vibe: Vibe, count: Optional[int] = None) -> None:
        """
        指定バイブのfallback地点を優先度順に集中プリフェッチ

        Args:
            vibe: 対象のバイブ
            count: 取得する地点数（省略時は設定値）
        """
        count = config.PREFETCH_TARGETED_FALLBACK_COUNT if count is None else count
        locations = sorted(self.catalog.fallback_locations(vibe), key=lambda loc: loc.priority, reverse=True)
        targets = locations[:count]

        logger.info(f"{vibe.value} のfallback地点をプリフェッチします: {len(targets)}件")
        task = asyncio.create_task(self._run_batch(targets, self.fallback_prefetch_delay))
        self._fallback_prefetch_task = task

        try:
            await asyncio.shield(task)
        except asyncio.CancelledError:
            # stop_background_prefetch() による停止は呼び出し元に伝えない
            if not task.cancelled():
                raise
            logger.info(f"{vibe.value} のfallbackプリフェッチを中断しました")

    async def stop_background_prefetch(self) -> None:
        """すべてのプリフェッチを停止（呼び出し元には例外を送出しない）"""
        tasks = [
            task for task in (self._prefetch_task, self._fallback_prefetch_task)
            if task is not None and not task.done()
        ]
        self._prefetch_task = None
        self._fallback_prefetch_task = None

        if not tasks:
            return

        logger.info("プリフェッチを停止します")
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    def priority_targets(self) -> List[Location]:
        """プリフェッチ対象のprimary・secondary地点（バイブ間で重複排除）"""
        targets: List[Location] = []
        seen = set()

        for vibe in Vibe:
            candidates = (
                list(self.catalog.primary_locations(vibe)[:config.PREFETCH_PRIMARY_COUNT])
                + list(self.catalog.secondary_locations(vibe)[:config.PREFETCH_SECONDARY_COUNT])
            )
            for location in candidates:
                if location.key not in seen:
                    seen.add(location.key)
                    targets.append(location)

        return targets

    def fallback_targets(self) -> List[Location]:
        """プリフェッチ対象のfallback地点（バイブ間で重複排除）"""
        targets: List[Location] = []
        seen = set()

        for vibe in Vibe:
            for location in self.catalog.fallback_locations(vibe)[:config.PREFETCH_FALLBACK_COUNT]:
                if location.key not in seen:
                    seen.add(location.key)
                    targets.append(location)

        return targets

    async def _perform_prefetch(self) -> None:
        """現在地 → primary/secondary → fallback の順にプリフェッチ"""
        try:
            if self.provider.current_location is not None:
                await self._prefetch_current_location()

            priority = self.priority_targets()
            logger.info(f"優先地点をプリフェッチします: {len(priority)}件")
            await self._run_batch(priority, self.prefetch_delay)

            fallback = self.fallback_targets()
            logger.info(f"fallback地点をプリフェッチします: {len(fallback)}件")
            await self._run_batch(fallback, self.prefetch_delay)

            logger.info("バックグラウンドプリフェッチが完了しました")
        except asyncio.CancelledError:
            logger.info("バックグラウンドプリフェッチを中断しました")

    async def _run_batch(self, locations: Sequence[Location], delay: float) -> None:
        for index, location in enumerate(locations):
            await self._prefetch_location(location)

            # APIのレート制限に配慮
            if index < len(locations) - 1 and delay > 0:
                await asyncio.sleep(delay)

    async def _prefetch_location(self, location: Location) -> None:
        if self.is_fresh(location.key):
            return

        try:
            observation = await self.provider.fetch(location.latitude, location.longitude)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.warning(f"プリフェッチに失敗しました: {location.name} - {e}")
            return

        self.put_for_location(location, observation)
        logger.debug(f"プリフェッチしました: {location.name} - {observation.condition.value}")

    async def _prefetch_current_location(self) -> None:
        if self.is_fresh(CURRENT_LOCATION_KEY):
            return

        try:
            observation = await self.provider.fetch_current_location()
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.warning(f"現在地のプリフェッチに失敗しました: {e}")
            return

        self.put_current_location(observation)
