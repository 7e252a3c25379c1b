"""
天気判定サービス

観測データがバイブに合致するかの厳密判定と、0〜100の一致スコアを計算する。
判定ルールはバイブごとの VibeRule として表で定義する。
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

from ..models.vibe import Vibe, WeatherCondition
from ..models.weather import WeatherObservation

C = WeatherCondition

MAX_SCORE = 100.0
MIN_SCORE = 0.0


@dataclass(frozen=True)
class LinearTemperatureScore:
    """理想気温からの距離で減点する気温スコア"""
    ideal: float
    cap: float
    falloff: float

    def score(self, temperature: float) -> float:
        return max(0.0, self.cap - abs(temperature - self.ideal) * self.falloff)


@dataclass(frozen=True)
class SteppedTemperatureScore:
    """しきい値（以下）ごとの段階的な気温スコア"""
    steps: Tuple[Tuple[float, float], ...]
    default: float = 0.0

    def score(self, temperature: float) -> float:
        for threshold, points in self.steps:
            if temperature <= threshold:
                return points
        return self.default


@dataclass(frozen=True)
class ConstantTemperatureScore:
    """気温に依存しない固定スコア"""
    points: float

    def score(self, temperature: float) -> float:
        return self.points


@dataclass(frozen=True)
class WindBand:
    """風速帯（両端を含む）。Noneは上限・下限なし"""
    points: float
    minimum: Optional[float] = None
    maximum: Optional[float] = None

    def contains(self, wind_speed: float) -> bool:
        if self.minimum is not None and wind_speed < self.minimum:
            return False
        if self.maximum is not None and wind_speed > self.maximum:
            return False
        return True


@dataclass(frozen=True)
class VibeRule:
    """バイブごとの判定・採点ルール"""
    conditions: Dict[WeatherCondition, float]
    temperature_score: Union[LinearTemperatureScore, SteppedTemperatureScore, ConstantTemperatureScore]
    wind_bands: Tuple[WindBand, ...]
    temperature_range: Optional[Tuple[int, int]] = None  # Noneは気温を判定しない
    min_wind: Optional[float] = None
    max_wind: Optional[float] = None
    condition_min_wind: Dict[WeatherCondition, float] = field(default_factory=dict)
    wind_default: float = 0.0

    def accepts_temperature(self, temperature: float) -> bool:
        if self.temperature_range is None:
            return True
        if not math.isfinite(temperature):
            return False
        low, high = self.temperature_range
        # 範囲判定は0方向に切り捨てた整数で行う
        return low <= int(temperature) <= high

    def accepts_condition(self, condition: WeatherCondition) -> bool:
        return condition in self.conditions

    def accepts_wind(self, condition: WeatherCondition, wind_speed: float) -> bool:
        if not math.isfinite(wind_speed):
            return False
        if self.min_wind is not None and wind_speed < self.min_wind:
            return False
        if self.max_wind is not None and wind_speed > self.max_wind:
            return False
        required = self.condition_min_wind.get(condition)
        if required is not None and wind_speed < required:
            return False
        return True

    def condition_score(self, condition: WeatherCondition) -> float:
        return self.conditions.get(condition, 0.0)

    def wind_score(self, wind_speed: float) -> float:
        for band in self.wind_bands:
            if band.contains(wind_speed):
                return band.points
        return self.wind_default


VIBE_RULES: Dict[Vibe, VibeRule] = {
    Vibe.RAINY: VibeRule(
        temperature_range=(8, 25),
        conditions={C.RAIN: 40, C.DRIZZLE: 35, C.HEAVY_RAIN: 30, C.SUN_SHOWERS: 25},
        max_wind=30,
        temperature_score=LinearTemperatureScore(ideal=15, cap=35, falloff=2),
        wind_bands=(WindBand(25, maximum=15), WindBand(20, maximum=25)),
    ),
    Vibe.SUNNY: VibeRule(
        temperature_range=(18, 35),
        conditions={C.CLEAR: 40, C.MOSTLY_CLEAR: 35, C.PARTLY_CLOUDY: 25},
        max_wind=20,
        temperature_score=LinearTemperatureScore(ideal=25, cap=40, falloff=1.5),
        wind_bands=(WindBand(20, maximum=10), WindBand(15, maximum=20)),
    ),
    Vibe.STORMY: VibeRule(
        temperature_range=None,
        conditions={
            C.THUNDERSTORMS: 60,
            C.STRONG_STORMS: 60,
            C.ISOLATED_THUNDERSTORMS: 55,
            C.SCATTERED_THUNDERSTORMS: 55,
            C.HEAVY_RAIN: 30,
        },
        # 大雨は強風を伴う場合のみ嵐とみなす
        condition_min_wind={C.HEAVY_RAIN: 25},
        temperature_score=ConstantTemperatureScore(15),
        wind_bands=(WindBand(25, minimum=50), WindBand(20, minimum=35), WindBand(15, minimum=25)),
    ),
    Vibe.SNOWY: VibeRule(
        temperature_range=(-15, 5),
        conditions={
            C.HEAVY_SNOW: 50,
            C.BLIZZARD: 50,
            C.SNOW: 40,
            C.FLURRIES: 30,
            C.SUN_FLURRIES: 30,
            C.WINTRY_MIX: 25,
        },
        temperature_score=SteppedTemperatureScore(steps=((-5, 40), (0, 35), (3, 25))),
        wind_bands=(WindBand(10, maximum=20),),
        wind_default=5,
    ),
    Vibe.BREEZY: VibeRule(
        temperature_range=(10, 28),
        conditions={C.BREEZY: 40, C.WINDY: 40, C.CLEAR: 30, C.MOSTLY_CLEAR: 30, C.PARTLY_CLOUDY: 25},
        min_wind=15,
        max_wind=40,
        temperature_score=LinearTemperatureScore(ideal=20, cap=30, falloff=1),
        wind_bands=(WindBand(30, minimum=20, maximum=35), WindBand(25, minimum=15, maximum=40)),
    ),
    Vibe.MISTY: VibeRule(
        temperature_range=(5, 20),
        conditions={C.HAZE: 40, C.FOGGY: 35, C.MOSTLY_CLOUDY: 30, C.CLOUDY: 25},
        max_wind=15,
        temperature_score=LinearTemperatureScore(ideal=12, cap=30, falloff=2),
        wind_bands=(WindBand(30, maximum=10), WindBand(20, maximum=15)),
    ),
    Vibe.FOGGY: VibeRule(
        temperature_range=(0, 18),
        conditions={C.FOGGY: 50, C.HAZE: 35, C.SMOKY: 30},
        max_wind=10,
        temperature_score=LinearTemperatureScore(ideal=8, cap=30, falloff=2),
        wind_bands=(WindBand(20, maximum=5), WindBand(15, maximum=10)),
    ),
    Vibe.CLOUDY: VibeRule(
        temperature_range=(5, 25),
        conditions={C.CLOUDY: 40, C.MOSTLY_CLOUDY: 35, C.PARTLY_CLOUDY: 25},
        max_wind=25,
        temperature_score=LinearTemperatureScore(ideal=16, cap=30, falloff=1),
        wind_bands=(WindBand(30, maximum=20), WindBand(20, maximum=25)),
    ),
}


def rule_for(vibe: Vibe) -> VibeRule:
    return VIBE_RULES[Vibe(vibe)]


def is_strict_match(observation: WeatherObservation, vibe: Vibe) -> bool:
    """
    観測データがバイブに厳密に合致するかを判定

    気温（整数に切り捨て）が範囲内、天気状態が許容集合に含まれ、風速条件を満たす場合に True。

    Args:
        observation: 天気の観測データ
        vibe: 対象のバイブ

    Returns:
        合致する場合True
    """
    rule = rule_for(vibe)
    condition = observation.condition
    return (
        rule.accepts_temperature(observation.temperature)
        and rule.accepts_condition(condition)
        and rule.accepts_wind(condition, observation.wind_speed)
    )


def score_breakdown(observation: WeatherObservation, vibe: Vibe) -> Dict[str, float]:
    """気温・天気状態・風速それぞれのサブスコア"""
    rule = rule_for(vibe)
    return {
        'temperature': rule.temperature_score.score(observation.temperature),
        'condition': rule.condition_score(observation.condition),
        'wind': rule.wind_score(observation.wind_speed),
    }


def compute_score(observation: WeatherObservation, vibe: Vibe) -> float:
    """
    一致スコアを計算

    気温・天気状態・風速のサブスコアの合計を0〜100に収める。

    Args:
        observation: 天気の観測データ
        vibe: 対象のバイブ

    Returns:
        0〜100の一致スコア
    """
    total = sum(score_breakdown(observation, vibe).values())
    return min(MAX_SCORE, max(MIN_SCORE, float(total)))


class WeatherClassifier:
    """検索エンジンに注入する判定器"""

    def is_strict_match(self, observation: WeatherObservation, vibe: Vibe) -> bool:
        return is_strict_match(observation, vibe)

    def compute_score(self, observation: WeatherObservation, vibe: Vibe) -> float:
        return compute_score(observation, vibe)
