"""ウェザーバイブと天気状態の定義"""

from enum import Enum
from typing import Dict


class Vibe(str, Enum):
    """ユーザーが体験したい天気のバイブ"""
    RAINY = "rainy"
    STORMY = "stormy"
    SNOWY = "snowy"
    BREEZY = "breezy"
    SUNNY = "sunny"
    MISTY = "misty"
    FOGGY = "foggy"
    CLOUDY = "cloudy"

    @property
    def display_name(self) -> str:
        return VIBE_METADATA[self]["name"]

    @property
    def description(self) -> str:
        return VIBE_METADATA[self]["description"]

    @property
    def emoji(self) -> str:
        return VIBE_METADATA[self]["emoji"]


class WeatherCondition(str, Enum):
    """天気状態の語彙（プロバイダーはこの値に正規化して返す）"""
    CLEAR = "clear"
    MOSTLY_CLEAR = "mostly-clear"
    PARTLY_CLOUDY = "partly-cloudy"
    CLOUDY = "cloudy"
    MOSTLY_CLOUDY = "mostly-cloudy"
    RAIN = "rain"
    DRIZZLE = "drizzle"
    HEAVY_RAIN = "heavy-rain"
    SUN_SHOWERS = "sun-showers"
    THUNDERSTORMS = "thunderstorms"
    STRONG_STORMS = "strong-storms"
    ISOLATED_THUNDERSTORMS = "isolated-thunderstorms"
    SCATTERED_THUNDERSTORMS = "scattered-thunderstorms"
    SNOW = "snow"
    HEAVY_SNOW = "heavy-snow"
    BLIZZARD = "blizzard"
    FLURRIES = "flurries"
    SUN_FLURRIES = "sun-flurries"
    WINTRY_MIX = "wintry-mix"
    BREEZY = "breezy"
    WINDY = "windy"
    HAZE = "haze"
    FOGGY = "foggy"
    SMOKY = "smoky"

    @property
    def description(self) -> str:
        return self.value.replace("-", " ").capitalize()


# 表示用メタデータ（検索アルゴリズムでは使用しない）
VIBE_METADATA: Dict[Vibe, Dict[str, str]] = {
    Vibe.RAINY: {
        "name": "Rainy",
        "description": "Gentle rain sounds for deep relaxation",
        "emoji": "🌧️",
    },
    Vibe.STORMY: {
        "name": "Stormy",
        "description": "Thunder and heavy rain for intense atmosphere",
        "emoji": "⛈️",
    },
    Vibe.SNOWY: {
        "name": "Snowy",
        "description": "Peaceful snowfall in winter wonderland",
        "emoji": "❄️",
    },
    Vibe.BREEZY: {
        "name": "Breezy",
        "description": "Light winds and clear skies",
        "emoji": "🌬️",
    },
    Vibe.SUNNY: {
        "name": "Sunny",
        "description": "Bright sunshine with birds chirping",
        "emoji": "☀️",
    },
    Vibe.MISTY: {
        "name": "Misty",
        "description": "Soft mist and gentle humidity",
        "emoji": "🌫️",
    },
    Vibe.FOGGY: {
        "name": "Foggy",
        "description": "Dense fog with muffled sounds",
        "emoji": "🌁",
    },
    Vibe.CLOUDY: {
        "name": "Cloudy",
        "description": "Overcast skies with soft lighting",
        "emoji": "☁️",
    },
}
