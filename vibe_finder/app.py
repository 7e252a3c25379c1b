"""Vibe Finderのメインエントリーポイント"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional, Tuple

from vibe_finder.config import config
from vibe_finder.models.location import VibeSearchResult
from vibe_finder.models.vibe import Vibe
from vibe_finder.models.weather import WeatherObservation
from vibe_finder.services.location_catalog import LocationCatalog, load_default_catalog
from vibe_finder.services.open_meteo_provider import OpenMeteoWeatherProvider
from vibe_finder.services.prefetch_cache import PrefetchCache
from vibe_finder.services.scheduler_service import PrefetchSchedulerService
from vibe_finder.services.vibe_search import VibeSearchEngine
from vibe_finder.services.weather_provider import LocationNotAvailableError, ProviderError, WeatherProvider
from vibe_finder.utils.logging import setup_logging

logger = logging.getLogger(__name__)

NO_MATCH_MESSAGE = "No {vibe} vibes found anywhere in the world right now."
CURRENT_LOCATION_UNAVAILABLE_MESSAGE = "Your location is not available. Set DEVICE_LATITUDE and DEVICE_LONGITUDE."


class VibeFinderApp:
    """カタログ・プロバイダー・キャッシュ・検索エンジン・スケジューラーをまとめるアプリケーション"""

    def __init__(
        self,
        catalog: Optional[LocationCatalog] = None,
        provider: Optional[WeatherProvider] = None,
        enable_prefetch: bool = True,
    ):
        self.catalog = catalog if catalog is not None else load_default_catalog()
        self.provider = provider if provider is not None else OpenMeteoWeatherProvider(current_location=config.device_location)
        self.cache = PrefetchCache(self.provider, self.catalog)
        self.engine = VibeSearchEngine(self.catalog, self.provider, self.cache)
        self.scheduler = PrefetchSchedulerService(self.cache, self.engine) if enable_prefetch else None

    async def start(self) -> None:
        logger.info("Vibe Finderを起動しています...")

        if isinstance(self.provider, OpenMeteoWeatherProvider):
            await self.provider.start_session()

        if self.scheduler is not None:
            await self.scheduler.start()

    async def stop(self) -> None:
        """スケジューラー・プリフェッチ・HTTPセッションを停止"""
        if self.scheduler is not None:
            try:
                await self.scheduler.stop()
            except Exception as e:
                logger.error(f"スケジューラーの停止に失敗しました: {e}")

        await self.cache.stop_background_prefetch()

        if isinstance(self.provider, OpenMeteoWeatherProvider):
            await self.provider.close_session()

        logger.info("Vibe Finderを停止しました")

    async def __aenter__(self):
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.stop()

    async def search(self, vibe: Vibe) -> Optional[VibeSearchResult]:
        return await self.engine.search_for_first_match(vibe)

    def reset(self) -> None:
        self.engine.reset_used_locations()

    async def check_current_location(self, vibe: Vibe) -> Tuple[WeatherObservation, bool, float]:
        """
        現在地の天気がバイブに合うかを判定

        Returns:
            (観測データ, 厳密判定の結果, スコア)

        Raises:
            LocationNotAvailableError: 現在地が設定されていない場合
            ProviderError: 天気の取得に失敗した場合
        """
        observation = await self.cache.get_current_location_weather()
        classifier = self.engine.classifier
        return observation, classifier.is_strict_match(observation, vibe), classifier.compute_score(observation, vibe)


def format_current_location(vibe: Vibe, observation: WeatherObservation, matched: bool, score: float) -> str:
    """現在地の判定結果を表示用の文字列にする"""
    verdict = "has" if matched else "does not have"
    return (
        f"{vibe.emoji} Your location {verdict} {vibe.display_name.lower()} vibes right now\n"
        f"   {observation.condition.description}, {int(observation.temperature)}°C, "
        f"wind {observation.wind_speed:.0f} km/h - match {score:.0f}/100"
    )


def format_result(vibe: Vibe, result: Optional[VibeSearchResult]) -> str:
    """検索結果を表示用の文字列にする"""
    if result is None:
        return NO_MATCH_MESSAGE.format(vibe=vibe.display_name.lower())

    location = result.location
    return (
        f"{vibe.emoji} {location.name}, {location.country}\n"
        f"   {result.condition_display}, {result.temperature_display}, "
        f"wind {result.observation.wind_speed:.0f} km/h\n"
        f"   local time {result.local_time} - match {result.match_score:.0f}/100"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find a place in the world matching a weather vibe.")
    parser.add_argument("vibe", type=str, choices=[vibe.value for vibe in Vibe])
    parser.add_argument("--count", type=int, default=1, help="number of places to find in a row")
    parser.add_argument("--reset", action="store_true", help="forget previously shown places first")
    parser.add_argument("--no-prefetch", action="store_true", help="disable background prefetching")
    parser.add_argument("--here", action="store_true",
                        help="check the weather at DEVICE_LATITUDE/DEVICE_LONGITUDE instead of searching")
    return parser


async def check_here(app: VibeFinderApp, vibe: Vibe) -> int:
    """現在地モード: 現在地の天気だけを判定して表示"""
    try:
        observation, matched, score = await app.check_current_location(vibe)
    except LocationNotAvailableError as e:
        logger.warning(f"現在地が利用できません: {e}")
        print(CURRENT_LOCATION_UNAVAILABLE_MESSAGE)
        return 1
    except ProviderError as e:
        logger.error(f"現在地の天気の取得に失敗しました: {e}")
        print(f"Could not get the weather at your location: {e}")
        return 1

    print(format_current_location(vibe, observation, matched, score))
    return 0


async def main(argv: Optional[List[str]] = None) -> int:
    """1回分の検索を実行するメイン関数"""
    args = build_parser().parse_args(argv)

    setup_logging()

    try:
        config.validate()
    except ValueError as e:
        logger.error(f"設定の検証に失敗しました: {e}")
        return 1

    env_info = config.get_environment_info()
    logger.info(f"環境: {env_info['environment']}, Python: {env_info['python_version']}")

    vibe = Vibe(args.vibe)

    async with VibeFinderApp(enable_prefetch=not (args.no_prefetch or args.here)) as app:
        if args.here:
            return await check_here(app, vibe)

        if args.reset:
            app.reset()

        for _ in range(max(1, args.count)):
            result = await app.search(vibe)
            print(format_result(vibe, result))
            if result is None:
                break

    return 0


def cli() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
