"""Configuration management for Vibe Finder."""

import os
import sys
import logging
from typing import Optional, Dict, Any, Tuple
from pathlib import Path
from dotenv import load_dotenv

# 環境変数ファイルの読み込み
env_files = ['.env', '.env.local']
for env_file in env_files:
    if os.path.exists(env_file):
        load_dotenv(env_file)
        break


def _optional_float(name: str) -> Optional[float]:
    """空文字を未設定として扱うfloat環境変数の読み込み"""
    value = os.getenv(name, '')
    if not value.strip():
        return None
    return float(value)


class Config:
    """Configuration class for Vibe Finder."""

    # 環境設定
    ENVIRONMENT: str = os.getenv('ENVIRONMENT', 'development')
    DEFAULT_TIMEZONE: str = os.getenv('DEFAULT_TIMEZONE', 'UTC')

    # Open-Meteo API Configuration
    WEATHER_API_BASE_URL: str = os.getenv('WEATHER_API_BASE_URL', 'https://api.open-meteo.com/v1/forecast')
    WEATHER_API_RATE_LIMIT: int = int(os.getenv('WEATHER_API_RATE_LIMIT', '60'))  # requests per minute

    # Cache Configuration
    CACHE_TTL_SECONDS: int = int(os.getenv('CACHE_TTL_SECONDS', '300'))  # 5 minutes
    CACHE_CLEANUP_INTERVAL_MINUTES: int = int(os.getenv('CACHE_CLEANUP_INTERVAL_MINUTES', '10'))

    # Search Configuration
    SEARCH_REQUEST_DELAY: float = float(os.getenv('SEARCH_REQUEST_DELAY', '0.5'))

    # Prefetch Configuration
    PREFETCH_DELAY: float = float(os.getenv('PREFETCH_DELAY', '1.5'))
    PREFETCH_FALLBACK_DELAY: float = float(os.getenv('PREFETCH_FALLBACK_DELAY', '1.0'))
    PREFETCH_PRIMARY_COUNT: int = int(os.getenv('PREFETCH_PRIMARY_COUNT', '3'))
    PREFETCH_SECONDARY_COUNT: int = int(os.getenv('PREFETCH_SECONDARY_COUNT', '2'))
    PREFETCH_FALLBACK_COUNT: int = int(os.getenv('PREFETCH_FALLBACK_COUNT', '2'))
    PREFETCH_TARGETED_FALLBACK_COUNT: int = int(os.getenv('PREFETCH_TARGETED_FALLBACK_COUNT', '5'))
    PREFETCH_INTERVAL_MINUTES: int = int(os.getenv('PREFETCH_INTERVAL_MINUTES', '5'))
    PREFETCH_STARTUP_DELAY: float = float(os.getenv('PREFETCH_STARTUP_DELAY', '2'))

    # Current device location (位置情報の許可処理は対象外のため環境変数で指定)
    DEVICE_LATITUDE: Optional[float] = _optional_float('DEVICE_LATITUDE')
    DEVICE_LONGITUDE: Optional[float] = _optional_float('DEVICE_LONGITUDE')

    # Logging Configuration
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', '')
    LOG_FILE: str = os.getenv('LOG_FILE', 'vibe_finder.log')

    # 環境別設定
    def __init__(self):
        """環境に応じた設定を初期化"""
        self._apply_environment_settings()

    def _apply_environment_settings(self):
        """環境に応じた設定を適用"""
        if self.ENVIRONMENT == 'development':
            if not self.LOG_LEVEL:
                self.LOG_LEVEL = 'DEBUG'

        elif self.ENVIRONMENT == 'staging':
            if not self.LOG_LEVEL:
                self.LOG_LEVEL = 'INFO'

        elif self.ENVIRONMENT == 'production':
            if not self.LOG_LEVEL:
                self.LOG_LEVEL = 'WARNING'
            # 本番環境ではAPIへの負荷を抑える
            if self.PREFETCH_DELAY < 1.0:
                self.PREFETCH_DELAY = 1.0

        if not self.LOG_LEVEL:
            self.LOG_LEVEL = 'INFO'

        # ログファイルパスの調整
        if self.LOG_FILE and not os.path.isabs(self.LOG_FILE):
            self.LOG_FILE = str(Path('logs') / self.LOG_FILE)

    @property
    def device_location(self) -> Optional[Tuple[float, float]]:
        """現在地の座標（未設定の場合None）"""
        if self.DEVICE_LATITUDE is None or self.DEVICE_LONGITUDE is None:
            return None
        return (self.DEVICE_LATITUDE, self.DEVICE_LONGITUDE)

    def validate(self) -> bool:
        """Validate configuration values."""
        errors = []

        if self.CACHE_TTL_SECONDS <= 0:
            errors.append('CACHE_TTL_SECONDS must be positive')
        if self.WEATHER_API_RATE_LIMIT <= 0:
            errors.append('WEATHER_API_RATE_LIMIT must be positive')
        if self.SEARCH_REQUEST_DELAY < 0 or self.PREFETCH_DELAY < 0 or self.PREFETCH_FALLBACK_DELAY < 0:
            errors.append('delays must not be negative')
        if self.PREFETCH_INTERVAL_MINUTES <= 0 or self.CACHE_CLEANUP_INTERVAL_MINUTES <= 0:
            errors.append('scheduler intervals must be positive')

        # 片方だけの指定は不正
        if (self.DEVICE_LATITUDE is None) != (self.DEVICE_LONGITUDE is None):
            errors.append('DEVICE_LATITUDE and DEVICE_LONGITUDE must be set together')
        elif self.device_location is not None:
            lat, lon = self.device_location
            if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
                errors.append('device location is out of range')

        if not isinstance(getattr(logging, self.LOG_LEVEL.upper(), None), int):
            errors.append(f'unknown LOG_LEVEL: {self.LOG_LEVEL}')

        if errors:
            raise ValueError(f"Invalid configuration: {'; '.join(errors)}")

        return True

    def get_environment_info(self) -> Dict[str, Any]:
        """環境情報を取得"""
        return {
            "environment": self.ENVIRONMENT,
            "python_version": f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
            "log_level": self.LOG_LEVEL,
            "log_file": self.LOG_FILE,
            "timezone": self.DEFAULT_TIMEZONE,
            "cache_ttl_seconds": self.CACHE_TTL_SECONDS,
            "device_location_configured": self.device_location is not None,
        }


# Global config instance
config = Config()
