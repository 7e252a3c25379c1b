"""
設定管理のテスト
"""

import pytest

from vibe_finder.config import Config


@pytest.fixture
def fresh_config():
    """クラス属性を汚さないConfigインスタンス"""
    return Config()


class TestConfig:

    def test_defaults(self, fresh_config):
        assert fresh_config.CACHE_TTL_SECONDS > 0
        assert fresh_config.WEATHER_API_BASE_URL.startswith("https://")
        assert fresh_config.LOG_LEVEL

    def test_validate(self, fresh_config):
        assert fresh_config.validate() is True

    def test_invalid_ttl(self, fresh_config):
        fresh_config.CACHE_TTL_SECONDS = 0

        with pytest.raises(ValueError, match="CACHE_TTL_SECONDS"):
            fresh_config.validate()

    def test_negative_delay(self, fresh_config):
        fresh_config.SEARCH_REQUEST_DELAY = -1

        with pytest.raises(ValueError, match="delays"):
            fresh_config.validate()

    def test_device_location_requires_both_coordinates(self, fresh_config):
        fresh_config.DEVICE_LATITUDE = 35.0
        fresh_config.DEVICE_LONGITUDE = None

        assert fresh_config.device_location is None
        with pytest.raises(ValueError, match="DEVICE_LATITUDE"):
            fresh_config.validate()

    def test_device_location_out_of_range(self, fresh_config):
        fresh_config.DEVICE_LATITUDE = 95.0
        fresh_config.DEVICE_LONGITUDE = 10.0

        with pytest.raises(ValueError, match="out of range"):
            fresh_config.validate()

    def test_device_location(self, fresh_config):
        fresh_config.DEVICE_LATITUDE = 35.68
        fresh_config.DEVICE_LONGITUDE = 139.69

        assert fresh_config.device_location == (35.68, 139.69)

    def test_unknown_log_level(self, fresh_config):
        fresh_config.LOG_LEVEL = "LOUD"

        with pytest.raises(ValueError, match="LOG_LEVEL"):
            fresh_config.validate()

    def test_production_settings(self):
        config = Config.__new__(Config)
        config.ENVIRONMENT = 'production'
        config.LOG_LEVEL = ''
        config.PREFETCH_DELAY = 0.2
        config.LOG_FILE = 'vibe_finder.log'

        config._apply_environment_settings()

        assert config.LOG_LEVEL == 'WARNING'
        assert config.PREFETCH_DELAY == 1.0
        assert config.LOG_FILE.endswith('vibe_finder.log')
        assert config.LOG_FILE.startswith('logs')

    def test_development_log_level(self):
        config = Config.__new__(Config)
        config.ENVIRONMENT = 'development'
        config.LOG_LEVEL = ''
        config.LOG_FILE = '/var/log/vibe_finder.log'

        config._apply_environment_settings()

        assert config.LOG_LEVEL == 'DEBUG'
        assert config.LOG_FILE == '/var/log/vibe_finder.log'

    def test_environment_info(self, fresh_config):
        info = fresh_config.get_environment_info()

        assert info['environment'] == fresh_config.ENVIRONMENT
        assert info['cache_ttl_seconds'] == fresh_config.CACHE_TTL_SECONDS
        assert 'python_version' in info
