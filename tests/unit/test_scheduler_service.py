"""
スケジューラーサービスのテスト
"""

import pytest
from unittest.mock import MagicMock

from vibe_finder.services.prefetch_cache import PrefetchCache
from vibe_finder.services.scheduler_service import (
    CLEANUP_JOB_ID,
    PREFETCH_JOB_ID,
    PrefetchSchedulerService,
)
from vibe_finder.services.vibe_search import VibeSearchEngine


@pytest.fixture
def mock_cache():
    """モックキャッシュ"""
    cache = MagicMock(spec=PrefetchCache)
    cache.start_background_prefetch.return_value = True
    cache.cleanup.return_value = 0
    cache.is_prefetching = False
    cache.__len__.return_value = 0
    return cache


@pytest.fixture
def mock_engine():
    """モック検索エンジン"""
    engine = MagicMock(spec=VibeSearchEngine)
    engine.is_searching = False
    return engine


@pytest.fixture
def scheduler_service(mock_cache, mock_engine):
    """スケジューラーサービスのフィクスチャ"""
    return PrefetchSchedulerService(
        mock_cache,
        mock_engine,
        prefetch_interval_minutes=5,
        cleanup_interval_minutes=10,
        startup_delay=60,
    )


@pytest.mark.asyncio
class TestPrefetchSchedulerService:
    """スケジューラーサービスのテストクラス"""

    async def test_start_scheduler(self, scheduler_service):
        """スケジューラーの開始テスト"""
        await scheduler_service.start()

        assert scheduler_service.is_running() is True
        assert scheduler_service.scheduler.get_job(PREFETCH_JOB_ID) is not None
        assert scheduler_service.scheduler.get_job(CLEANUP_JOB_ID) is not None

        await scheduler_service.stop()

    async def test_stop_scheduler(self, scheduler_service):
        """スケジューラーの停止テスト"""
        await scheduler_service.start()
        await scheduler_service.stop()

        assert scheduler_service.is_running() is False

    async def test_start_twice(self, scheduler_service):
        await scheduler_service.start()
        await scheduler_service.start()

        assert len(scheduler_service.scheduler.get_jobs()) == 2

        await scheduler_service.stop()

    async def test_scheduler_status(self, scheduler_service):
        await scheduler_service.start()

        status = await scheduler_service.get_scheduler_status()

        assert status['running'] is True
        assert status['total_jobs'] == 2
        assert status['cached_entries'] == 0
        assert status['prefetching'] is False
        assert {job['job_id'] for job in status['next_jobs']} == {PREFETCH_JOB_ID, CLEANUP_JOB_ID}

        await scheduler_service.stop()

    async def test_prefetch_job_starts_warming(self, scheduler_service, mock_cache):
        await scheduler_service._run_prefetch_warmup()

        mock_cache.start_background_prefetch.assert_called_once()

    async def test_prefetch_job_skipped_while_searching(self, scheduler_service, mock_cache, mock_engine):
        mock_engine.is_searching = True

        await scheduler_service._run_prefetch_warmup()

        mock_cache.start_background_prefetch.assert_not_called()

    async def test_prefetch_job_error_is_logged(self, scheduler_service, mock_cache):
        mock_cache.start_background_prefetch.side_effect = RuntimeError("boom")

        # 例外はジョブの外に出ない
        await scheduler_service._run_prefetch_warmup()

    async def test_cleanup_job(self, scheduler_service, mock_cache):
        mock_cache.cleanup.return_value = 3

        await scheduler_service._run_cache_cleanup()

        mock_cache.cleanup.assert_called_once()
