"""Logging configuration for Vibe Finder."""

import logging
import logging.handlers
import sys
import json
from datetime import datetime
from pathlib import Path
from vibe_finder.config import config

LOGGER_NAME = "vibe_finder"


class JSONFormatter(logging.Formatter):
    """JSON形式のログフォーマッター"""

    def format(self, record):
        """ログレコードをJSON形式に変換"""
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'message': record.getMessage(),
            'logger': record.name,
        }

        # 例外情報があれば追加
        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
            }

        # 検索中のバイブなどのコンテキスト
        if hasattr(record, 'context') and record.context:
            log_data['context'] = record.context

        return json.dumps(log_data, ensure_ascii=False)


def setup_logging(log_dir: str = "logs") -> logging.Logger:
    """Set up logging configuration for Vibe Finder."""

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, config.LOG_LEVEL.upper()))

    # 複数回呼ばれてもハンドラーが重複しないようにする
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    if config.ENVIRONMENT == 'production':
        # 本番環境ではJSON形式
        detailed_formatter = JSONFormatter()
    else:
        detailed_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
        )
    simple_formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(simple_formatter)
    logger.addHandler(console_handler)

    # File handler with rotation
    file_path = Path(config.LOG_FILE)
    if not file_path.is_absolute():
        file_path = log_path / file_path.name
    file_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        file_path,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8',
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(detailed_formatter)
    logger.addHandler(file_handler)

    # Error file handler
    error_handler = logging.handlers.RotatingFileHandler(
        log_path / "error.log",
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8',
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(detailed_formatter)
    logger.addHandler(error_handler)

    if config.ENVIRONMENT == 'production':
        # 重大エラー専用のログファイル
        critical_handler = logging.handlers.RotatingFileHandler(
            log_path / "critical.log",
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=10,
            encoding='utf-8',
        )
        critical_handler.setLevel(logging.CRITICAL)
        critical_handler.setFormatter(detailed_formatter)
        logger.addHandler(critical_handler)

        # 日付ごとのログファイル
        daily_handler = logging.handlers.TimedRotatingFileHandler(
            log_path / "daily.log",
            when='midnight',
            backupCount=30,
            encoding='utf-8',
        )
        daily_handler.setLevel(logging.INFO)
        daily_handler.setFormatter(detailed_formatter)
        logger.addHandler(daily_handler)

    logger.info(f"ログシステムを初期化しました - 環境: {config.ENVIRONMENT}, レベル: {config.LOG_LEVEL}")

    return logger


class ContextLogger:
    """コンテキスト情報付きのロガー"""

    def __init__(self, logger, context=None):
        self.logger = logger
        self.context = context or {}

    def _log_with_context(self, level, msg, *args, **kwargs):
        """コンテキスト情報を付加してログを記録"""
        if kwargs.get('extra') is None:
            kwargs['extra'] = {}
        kwargs['extra']['context'] = self.context
        getattr(self.logger, level)(msg, *args, **kwargs)

    def debug(self, msg, *args, **kwargs):
        self._log_with_context('debug', msg, *args, **kwargs)

    def info(self, msg, *args, **kwargs):
        self._log_with_context('info', msg, *args, **kwargs)

    def warning(self, msg, *args, **kwargs):
        self._log_with_context('warning', msg, *args, **kwargs)

    def error(self, msg, *args, **kwargs):
        self._log_with_context('error', msg, *args, **kwargs)

    def with_context(self, **context):
        """新しいコンテキスト情報を追加したロガーを返す"""
        new_context = {**self.context, **context}
        return ContextLogger(self.logger, new_context)
