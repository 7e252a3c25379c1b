"""
スケジューラーサービス
APSchedulerを使用して定期的なプリフェッチとキャッシュの掃除を行う
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from apscheduler.jobstores.memory import MemoryJobStore
from apscheduler.executors.asyncio import AsyncIOExecutor

from ..config import config
from .prefetch_cache import PrefetchCache
from .vibe_search import VibeSearchEngine

logger = logging.getLogger(__name__)

PREFETCH_JOB_ID = "prefetch_warmup"
CLEANUP_JOB_ID = "cache_cleanup"


class PrefetchSchedulerService:
    """プリフェッチとキャッシュ掃除のスケジュール管理を行うサービス"""

    def __init__(
        self,
        cache: PrefetchCache,
        engine: VibeSearchEngine,
        prefetch_interval_minutes: Optional[int] = None,
        cleanup_interval_minutes: Optional[int] = None,
        startup_delay: Optional[float] = None,
    ):
        """
        スケジューラーサービスを初期化

        Args:
            cache: プリフェッチキャッシュ
            engine: 検索エンジン（検索中はプリフェッチを見送る）
            prefetch_interval_minutes: プリフェッチの間隔（分）
            cleanup_interval_minutes: キャッシュ掃除の間隔（分）
            startup_delay: 起動から最初のプリフェッチまでの秒数
        """
        self.cache = cache
        self.engine = engine
        self.prefetch_interval_minutes = prefetch_interval_minutes or config.PREFETCH_INTERVAL_MINUTES
        self.cleanup_interval_minutes = cleanup_interval_minutes or config.CACHE_CLEANUP_INTERVAL_MINUTES
        self.startup_delay = config.PREFETCH_STARTUP_DELAY if startup_delay is None else startup_delay

        # APSchedulerの設定
        jobstores = {
            'default': MemoryJobStore()
        }
        executors = {
            'default': AsyncIOExecutor()
        }
        job_defaults = {
            'coalesce': True,
            'max_instances': 1
        }

        self.scheduler = AsyncIOScheduler(
            jobstores=jobstores,
            executors=executors,
            job_defaults=job_defaults,
            timezone=config.DEFAULT_TIMEZONE
        )

        self._is_running = False

    async def start(self) -> None:
        """スケジューラーを開始"""
        if self._is_running:
            return

        try:
            self._add_jobs()
            self.scheduler.start()
            self._is_running = True
            logger.info("スケジューラーサービスを開始しました")

            status = await self.get_scheduler_status()
            logger.info(f"スケジューラー状態: {status}")

        except Exception as e:
            logger.error(f"スケジューラーの開始に失敗しました: {e}")
            self._is_running = False
            raise

    async def stop(self) -> None:
        """スケジューラーを停止"""
        if self._is_running:
            self.scheduler.shutdown(wait=False)
            self._is_running = False
            logger.info("スケジューラーサービスを停止しました")

    def _add_jobs(self) -> None:
        first_run = datetime.now(timezone.utc) + timedelta(seconds=self.startup_delay)

        self.scheduler.add_job(
            func=self._run_prefetch_warmup,
            trigger=IntervalTrigger(minutes=self.prefetch_interval_minutes),
            id=PREFETCH_JOB_ID,
            name="Background weather prefetch",
            next_run_time=first_run,
            replace_existing=True
        )

        self.scheduler.add_job(
            func=self._run_cache_cleanup,
            trigger=IntervalTrigger(minutes=self.cleanup_interval_minutes),
            id=CLEANUP_JOB_ID,
            name="Expired cache cleanup",
            replace_existing=True
        )

    async def _run_prefetch_warmup(self) -> None:
        """定期プリフェッチ（検索中は見送る）"""
        try:
            if self.engine.is_searching:
                logger.debug("検索中のためプリフェッチを見送ります")
                return

            if self.cache.start_background_prefetch():
                logger.info("定期プリフェッチを開始しました")

        except Exception as e:
            logger.error(f"定期プリフェッチでエラーが発生しました: {e}", exc_info=True)

    async def _run_cache_cleanup(self) -> None:
        """期限切れキャッシュの削除"""
        try:
            removed = self.cache.cleanup()
            logger.debug(f"キャッシュを掃除しました: {removed}件削除")

        except Exception as e:
            logger.error(f"キャッシュの掃除でエラーが発生しました: {e}", exc_info=True)

    def is_running(self) -> bool:
        """
        スケジューラーが実行中かどうかを確認

        Returns:
            bool: 実行中の場合True
        """
        return self._is_running and self.scheduler.running

    async def get_scheduler_status(self) -> Dict:
        """
        スケジューラーの状態情報を取得

        Returns:
            Dict: スケジューラーの状態情報
        """
        jobs = self.scheduler.get_jobs()

        return {
            'running': self.is_running(),
            'total_jobs': len(jobs),
            'cached_entries': len(self.cache),
            'prefetching': self.cache.is_prefetching,
            'next_jobs': [
                {
                    'job_id': job.id,
                    'next_run': job.next_run_time,
                    'name': job.name
                }
                for job in sorted(
                    jobs,
                    key=lambda x: x.next_run_time.timestamp() if x.next_run_time else float('inf')
                )
            ]
        }
