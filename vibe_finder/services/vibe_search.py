"""
バイブ検索エンジン

信頼度区分の高い順（primary → secondary → fallback）に候補地点を評価し、
最初に厳密判定を満たした地点を返す。評価済みの地点は検索をまたいで記録され、
全区分を使い切ったときにリセットされる。
"""

import asyncio
import logging
from typing import Iterable, List, Optional, Set, Tuple

from ..config import config
from ..models.location import Location, LocationTier, VibeSearchResult
from ..models.vibe import Vibe
from ..models.weather import WeatherObservation
from ..utils.logging import ContextLogger
from .location_catalog import LocationCatalog
from .prefetch_cache import PrefetchCache
from .weather_classifier import WeatherClassifier
from .weather_provider import ProviderError, WeatherProvider

logger = logging.getLogger(__name__)

SEARCH_TIERS: Tuple[LocationTier, ...] = (LocationTier.PRIMARY, LocationTier.SECONDARY, LocationTier.FALLBACK)


class VibeSearchEngine:
    """バイブに合致する地点を探す検索エンジン"""

    def __init__(
        self,
        catalog: LocationCatalog,
        provider: WeatherProvider,
        cache: PrefetchCache,
        classifier: Optional[WeatherClassifier] = None,
        request_delay: Optional[float] = None,
    ):
        """
        VibeSearchEngineの初期化

        Args:
            catalog: 地点カタログ
            provider: 天気プロバイダー
            cache: 天気キャッシュ（バックグラウンドプリフェッチを含む）
            classifier: 天気判定器
            request_delay: 一致しなかったAPI取得の後に待つ秒数
        """
        self.catalog = catalog
        self.provider = provider
        self.cache = cache
        self.classifier = classifier or WeatherClassifier()
        self.request_delay = config.SEARCH_REQUEST_DELAY if request_delay is None else request_delay

        self.used_locations: Set[str] = set()
        self._is_searching = False

    @property
    def is_searching(self) -> bool:
        return self._is_searching

    def reset_used_locations(self) -> None:
        """評価済み地点の記録をリセット"""
        self.used_locations.clear()
        logger.debug("評価済み地点をリセットしました")

    def candidates_for(self, vibe: Vibe, tier: LocationTier) -> List[Location]:
        """指定区分の未評価の候補地点（優先度の降順）"""
        locations = sorted(self.catalog.locations_for(vibe, tier), key=lambda loc: loc.priority, reverse=True)
        return [location for location in locations if location.key not in self.used_locations]

    async def search_for_first_match(self, vibe: Vibe) -> Optional[VibeSearchResult]:
        """
        バイブに合致する最初の地点を検索

        Args:
            vibe: 検索するバイブ

        Returns:
            合致した地点の検索結果、見つからない場合None
        """
        vibe = Vibe(vibe)
        search_logger = ContextLogger(logger, {'vibe': vibe.value})

        # 停止を待つ間にプリフェッチが再開されないよう、先に検索中にする
        self._is_searching = True
        try:
            await self.cache.stop_background_prefetch()

            for tier in SEARCH_TIERS:
                candidates = self.candidates_for(vibe, tier)
                search_logger.debug(f"{tier.value} 区分を検索します: {len(candidates)}件")

                result = await self._search_candidates(vibe, candidates, search_logger)
                if result is not None:
                    search_logger.info(
                        f"一致する地点が見つかりました: {result.location.name} "
                        f"({tier.value}, スコア: {result.match_score:.1f})"
                    )
                    return result

            # すべての区分を使い切った
            search_logger.info("一致する地点が見つかりませんでした")
            self.reset_used_locations()
            return None
        finally:
            self._is_searching = False

    async def _search_candidates(
        self,
        vibe: Vibe,
        candidates: Iterable[Location],
        search_logger: ContextLogger,
    ) -> Optional[VibeSearchResult]:
        for location in candidates:
            # 評価前に使用済みとして記録する
            if location.key in self.used_locations:
                continue
            self.used_locations.add(location.key)

            try:
                observation, from_cache = await self._lookup_weather(location)
            except ProviderError as e:
                search_logger.warning(f"天気の取得に失敗しました: {location.name} - {e}")
                continue
            except Exception as e:
                search_logger.error(f"天気の取得中に予期しないエラー: {location.name} - {e}", exc_info=True)
                continue

            if self.classifier.is_strict_match(observation, vibe):
                score = self.classifier.compute_score(observation, vibe)
                return VibeSearchResult(location=location, observation=observation, match_score=score)

            if not from_cache and self.request_delay > 0:
                await asyncio.sleep(self.request_delay)

        return None

    async def _lookup_weather(self, location: Location) -> Tuple[WeatherObservation, bool]:
        """キャッシュ優先で天気を取得（キャッシュから取得した場合True）"""
        cached = self.cache.get_for_location(location)
        if cached is not None:
            return cached, True

        observation = await self.provider.fetch(location.latitude, location.longitude)
        self.cache.put_for_location(location, observation)
        return observation, False
