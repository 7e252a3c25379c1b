"""
天気判定サービスのテスト
"""

import pytest

from vibe_finder.models.vibe import Vibe, WeatherCondition
from vibe_finder.services.weather_classifier import (
    VIBE_RULES,
    WeatherClassifier,
    compute_score,
    is_strict_match,
    score_breakdown,
)

C = WeatherCondition

TEMPERATURES = [-60.0, -20.0, -15.9, -15.0, -5.0, 0.0, 2.0, 5.5, 8.0, 12.0, 15.0, 20.0, 25.0, 25.9, 30.0, 35.9, 60.0]
WIND_SPEEDS = [0.0, 5.0, 10.0, 15.0, 20.0, 25.0, 30.0, 40.0, 50.0, 60.0, 150.0]


class TestScenarios:
    """代表的な観測データでの判定"""

    def test_sunny_perfect_match(self, observation_factory):
        """25°C・快晴・風速5km/hはSunnyに満点で一致する"""
        observation = observation_factory(temperature=25.0, condition=C.CLEAR, wind_speed=5.0)

        assert is_strict_match(observation, Vibe.SUNNY) is True
        assert compute_score(observation, Vibe.SUNNY) == 100.0

    def test_sunny_weather_is_not_rainy(self, observation_factory):
        observation = observation_factory(temperature=25.0, condition=C.CLEAR, wind_speed=5.0)

        assert is_strict_match(observation, Vibe.RAINY) is False

    def test_heavy_rain_with_strong_wind_is_stormy(self, observation_factory):
        observation = observation_factory(temperature=2.0, condition=C.HEAVY_RAIN, wind_speed=30.0)

        assert is_strict_match(observation, Vibe.STORMY) is True
        # 15 (固定) + 30 (大雨) + 15 (風速25以上)
        assert compute_score(observation, Vibe.STORMY) == 60.0

    def test_heavy_rain_with_light_wind_is_not_stormy(self, observation_factory):
        observation = observation_factory(temperature=2.0, condition=C.HEAVY_RAIN, wind_speed=10.0)

        assert is_strict_match(observation, Vibe.STORMY) is False

    def test_blizzard_is_snowy(self, observation_factory):
        observation = observation_factory(temperature=-10.0, condition=C.BLIZZARD, wind_speed=60.0)

        assert is_strict_match(observation, Vibe.SNOWY) is True
        # 40 (-5°C以下) + 50 (吹雪) + 5 (風速20超)
        assert compute_score(observation, Vibe.SNOWY) == 95.0

    def test_thunderstorms_match_stormy_at_any_temperature(self, observation_factory):
        for temperature in (-30.0, 0.0, 45.0):
            observation = observation_factory(temperature=temperature, condition=C.THUNDERSTORMS, wind_speed=0.0)
            assert is_strict_match(observation, Vibe.STORMY) is True

    @pytest.mark.parametrize("vibe,temperature,condition,wind_speed,expected", [
        (Vibe.RAINY, 15.0, C.RAIN, 10.0, 100.0),
        (Vibe.BREEZY, 20.0, C.BREEZY, 25.0, 100.0),
        (Vibe.MISTY, 12.0, C.HAZE, 5.0, 100.0),
        (Vibe.MISTY, 12.0, C.CLOUDY, 5.0, 85.0),
        (Vibe.FOGGY, 8.0, C.FOGGY, 3.0, 100.0),
        (Vibe.CLOUDY, 16.0, C.CLOUDY, 10.0, 100.0),
        (Vibe.SUNNY, 30.0, C.PARTLY_CLOUDY, 15.0, 72.5),
    ])
    def test_scores(self, observation_factory, vibe, temperature, condition, wind_speed, expected):
        observation = observation_factory(temperature=temperature, condition=condition, wind_speed=wind_speed)

        assert is_strict_match(observation, vibe) is True
        assert compute_score(observation, vibe) == pytest.approx(expected)


class TestStrictMatch:
    """厳密判定の境界"""

    def test_temperature_is_truncated_before_upper_bound(self, observation_factory):
        """25.9°Cは整数25として上限25を満たす"""
        within = observation_factory(temperature=25.9, condition=C.RAIN, wind_speed=10.0)
        above = observation_factory(temperature=26.0, condition=C.RAIN, wind_speed=10.0)

        assert is_strict_match(within, Vibe.RAINY) is True
        assert is_strict_match(above, Vibe.RAINY) is False

    def test_temperature_is_truncated_toward_zero_for_lower_bound(self, observation_factory):
        """-15.9°Cは整数-15として下限-15を満たす"""
        within = observation_factory(temperature=-15.9, condition=C.SNOW, wind_speed=5.0)
        below = observation_factory(temperature=-16.0, condition=C.SNOW, wind_speed=5.0)

        assert is_strict_match(within, Vibe.SNOWY) is True
        assert is_strict_match(below, Vibe.SNOWY) is False

    def test_wind_bounds_are_inclusive(self, observation_factory):
        assert is_strict_match(observation_factory(20.0, C.BREEZY, 15.0), Vibe.BREEZY) is True
        assert is_strict_match(observation_factory(20.0, C.BREEZY, 40.0), Vibe.BREEZY) is True
        assert is_strict_match(observation_factory(20.0, C.BREEZY, 14.9), Vibe.BREEZY) is False
        assert is_strict_match(observation_factory(20.0, C.BREEZY, 40.1), Vibe.BREEZY) is False

    def test_heavy_rain_wind_threshold_for_stormy(self, observation_factory):
        assert is_strict_match(observation_factory(10.0, C.HEAVY_RAIN, 25.0), Vibe.STORMY) is True
        assert is_strict_match(observation_factory(10.0, C.HEAVY_RAIN, 24.9), Vibe.STORMY) is False

    def test_non_finite_values_do_not_match(self, observation_factory):
        assert is_strict_match(observation_factory(float('nan'), C.CLEAR, 5.0), Vibe.SUNNY) is False
        assert is_strict_match(observation_factory(25.0, C.CLEAR, float('inf')), Vibe.SUNNY) is False

    def test_condition_given_as_string(self, observation_factory):
        observation = observation_factory(temperature=25.0, condition="mostly-clear", wind_speed=5.0)

        assert observation.condition is C.MOSTLY_CLEAR
        assert is_strict_match(observation, Vibe.SUNNY) is True


class TestScoreProperties:
    """スコアの性質"""

    def test_score_is_bounded(self, observation_factory):
        for vibe in Vibe:
            for condition in C:
                for temperature in TEMPERATURES:
                    for wind_speed in WIND_SPEEDS:
                        observation = observation_factory(temperature, condition, wind_speed)
                        assert 0.0 <= compute_score(observation, vibe) <= 100.0

    def test_matched_observation_has_positive_condition_score(self, observation_factory):
        matched = 0
        for vibe in Vibe:
            for condition in C:
                for temperature in TEMPERATURES:
                    for wind_speed in WIND_SPEEDS:
                        observation = observation_factory(temperature, condition, wind_speed)
                        if is_strict_match(observation, vibe):
                            matched += 1
                            assert score_breakdown(observation, vibe)['condition'] > 0

        assert matched > 0

    def test_deterministic(self, observation_factory):
        observation = observation_factory(temperature=14.3, condition=C.DRIZZLE, wind_speed=17.0)

        assert is_strict_match(observation, Vibe.RAINY) == is_strict_match(observation, Vibe.RAINY)
        assert compute_score(observation, Vibe.RAINY) == compute_score(observation, Vibe.RAINY)

    def test_stormy_temperature_score_is_constant(self, observation_factory):
        for temperature in (-20.0, 10.0, 40.0):
            observation = observation_factory(temperature, C.THUNDERSTORMS, 0.0)
            assert score_breakdown(observation, Vibe.STORMY)['temperature'] == 15

    def test_snowy_wind_score_defaults_above_band(self, observation_factory):
        assert score_breakdown(observation_factory(-5.0, C.SNOW, 20.0), Vibe.SNOWY)['wind'] == 10
        assert score_breakdown(observation_factory(-5.0, C.SNOW, 20.1), Vibe.SNOWY)['wind'] == 5

    def test_rule_table_covers_every_vibe(self):
        assert set(VIBE_RULES) == set(Vibe)


class TestWeatherClassifier:

    def test_delegates_to_rules(self, sunny_observation):
        classifier = WeatherClassifier()

        assert classifier.is_strict_match(sunny_observation, Vibe.SUNNY) is True
        assert classifier.compute_score(sunny_observation, Vibe.SUNNY) == 100.0
        assert classifier.is_strict_match(sunny_observation, Vibe.FOGGY) is False
