"""
ログ設定のテスト
"""

import json
import logging
import logging.handlers
import sys

import pytest
from unittest.mock import MagicMock, patch

from vibe_finder.utils.logging import LOGGER_NAME, ContextLogger, JSONFormatter, setup_logging


def make_record(message="検索を開始します", context=None, exc_info=None):
    record = logging.LogRecord(
        name="vibe_finder.services.vibe_search",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=exc_info,
    )
    if context is not None:
        record.context = context
    return record


class TestJSONFormatter:

    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(make_record()))

        assert data['level'] == 'INFO'
        assert data['message'] == '検索を開始します'
        assert data['logger'] == 'vibe_finder.services.vibe_search'
        assert 'context' not in data

    def test_only_search_fields_are_emitted(self):
        data = json.loads(JSONFormatter().format(make_record(context={'vibe': 'stormy'})))

        assert set(data) == {'timestamp', 'level', 'message', 'logger', 'context'}

    def test_context(self):
        data = json.loads(JSONFormatter().format(make_record(context={'vibe': 'sunny'})))

        assert data['context'] == {'vibe': 'sunny'}

    def test_exception(self):
        try:
            raise ValueError("bad value")
        except ValueError:
            record = make_record(exc_info=sys.exc_info())

        data = json.loads(JSONFormatter().format(record))

        assert data['exception'] == {'type': 'ValueError', 'message': 'bad value'}


class TestContextLogger:

    def test_context_is_attached(self):
        base = MagicMock()
        logger = ContextLogger(base, {'vibe': 'rainy'})

        logger.info("message")

        base.info.assert_called_once_with("message", extra={'context': {'vibe': 'rainy'}})

    def test_with_context_merges(self):
        base = MagicMock()
        logger = ContextLogger(base, {'vibe': 'rainy'}).with_context(tier='primary')

        logger.warning("message")

        base.warning.assert_called_once_with("message", extra={'context': {'vibe': 'rainy', 'tier': 'primary'}})


class TestSetupLogging:

    @pytest.fixture(autouse=True)
    def restore_logger(self):
        yield
        logger = logging.getLogger(LOGGER_NAME)
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    def test_handlers(self, tmp_path):
        with patch('vibe_finder.utils.logging.config') as mock_config:
            mock_config.LOG_LEVEL = 'DEBUG'
            mock_config.ENVIRONMENT = 'development'
            mock_config.LOG_FILE = 'logs/vibe_finder.log'

            logger = setup_logging(str(tmp_path))

        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 3
        assert (tmp_path / 'vibe_finder.log').exists()
        assert (tmp_path / 'error.log').exists()

    def test_production_handlers(self, tmp_path):
        with patch('vibe_finder.utils.logging.config') as mock_config:
            mock_config.LOG_LEVEL = 'WARNING'
            mock_config.ENVIRONMENT = 'production'
            mock_config.LOG_FILE = 'logs/vibe_finder.log'

            logger = setup_logging(str(tmp_path))

        assert len(logger.handlers) == 5
        assert any(isinstance(h, logging.handlers.TimedRotatingFileHandler) for h in logger.handlers)
        assert all(
            isinstance(h.formatter, JSONFormatter)
            for h in logger.handlers
            if isinstance(h, logging.handlers.RotatingFileHandler)
        )

    def test_repeated_setup_does_not_duplicate_handlers(self, tmp_path):
        with patch('vibe_finder.utils.logging.config') as mock_config:
            mock_config.LOG_LEVEL = 'INFO'
            mock_config.ENVIRONMENT = 'development'
            mock_config.LOG_FILE = 'vibe_finder.log'

            setup_logging(str(tmp_path))
            logger = setup_logging(str(tmp_path))

        assert len(logger.handlers) == 3
