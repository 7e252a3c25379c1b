"""
地点カタログ

バイブごとに信頼度区分（primary / secondary / fallback）別の検索候補地点を提供する。
カタログは起動時に一度だけ構築され、以降は読み取り専用。
"""

import logging
import random
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ..models.location import InvalidCatalogDataError, Location, LocationTier
from ..models.vibe import Vibe
from ..models import location_data

logger = logging.getLogger(__name__)

LocationRecords = Mapping[str, Iterable[Dict[str, Any]]]

_default_catalog: Optional['LocationCatalog'] = None


def _vibe_key(vibe: Union[Vibe, str]) -> str:
    if isinstance(vibe, Vibe):
        return vibe.value
    return str(vibe).strip().lower()


def _dedupe(locations: Iterable[Location]) -> List[Location]:
    """座標キーで重複を排除（最初の出現を残す）"""
    seen = set()
    unique = []
    for location in locations:
        if location.key in seen:
            continue
        seen.add(location.key)
        unique.append(location)
    return unique


def _valid_locations(locations: Iterable[Location], tier: LocationTier, vibe: Union[Vibe, str]) -> Tuple[Location, ...]:
    """検証に失敗した地点を警告を出して除外"""
    valid = []
    for location in locations:
        try:
            location.validate()
        except InvalidCatalogDataError as e:
            logger.warning(f"不正な地点をカタログから除外しました ({tier.value}/{_vibe_key(vibe)}): {e}")
            continue
        valid.append(location)
    return tuple(valid)


class LocationCatalog:
    """バイブ別の検索候補地点カタログ"""

    def __init__(
        self,
        primary: Mapping[str, Iterable[Location]],
        secondary: Mapping[str, Iterable[Location]],
        fallback: Mapping[str, Iterable[Location]],
    ):
        self._tiers: Dict[LocationTier, Dict[str, Tuple[Location, ...]]] = {
            tier: {_vibe_key(v): _valid_locations(locs, tier, v) for v, locs in records.items()}
            for tier, records in (
                (LocationTier.PRIMARY, primary),
                (LocationTier.SECONDARY, secondary),
                (LocationTier.FALLBACK, fallback),
            )
        }

    @classmethod
    def from_mapping(
        cls,
        primary: LocationRecords,
        secondary: LocationRecords,
        fallback: LocationRecords,
    ) -> 'LocationCatalog':
        """
        辞書形式の地点データからカタログを構築

        不正なデータは警告を出してスキップし、残りのデータは使用する。

        Args:
            primary: バイブ名をキーとした primary 地点データ
            secondary: バイブ名をキーとした secondary 地点データ
            fallback: バイブ名をキーとした fallback 地点データ

        Returns:
            構築されたLocationCatalog
        """
        skipped = 0

        def build(records: LocationRecords, tier: LocationTier) -> Dict[str, List[Location]]:
            nonlocal skipped
            result: Dict[str, List[Location]] = {}
            for vibe, entries in records.items():
                locations = []
                for record in entries:
                    try:
                        locations.append(Location.from_dict(record))
                    except InvalidCatalogDataError as e:
                        skipped += 1
                        logger.warning(f"不正な地点データをスキップしました ({tier.value}/{vibe}): {e}")
                result[vibe] = locations
            return result

        catalog = cls(
            primary=build(primary, LocationTier.PRIMARY),
            secondary=build(secondary, LocationTier.SECONDARY),
            fallback=build(fallback, LocationTier.FALLBACK),
        )
        logger.info(f"地点カタログを構築しました: {len(catalog)}件 (スキップ: {skipped}件)")
        return catalog

    def __len__(self) -> int:
        return sum(len(locs) for tier in self._tiers.values() for locs in tier.values())

    def vibes(self) -> List[Vibe]:
        """地点が登録されているバイブの一覧"""
        keys = {key for tier in self._tiers.values() for key, locs in tier.items() if locs}
        return [vibe for vibe in Vibe if vibe.value in keys]

    def locations_for(self, vibe: Union[Vibe, str], tier: LocationTier = LocationTier.ALL) -> Tuple[Location, ...]:
        """
        指定したバイブ・信頼度区分の地点を取得

        ALL は primary と secondary を結合して優先度の降順に並べたもの（fallback は含まない）。
        座標の重複は排除される。未知のバイブには空のタプルを返す。

        Args:
            vibe: バイブ
            tier: 信頼度区分

        Returns:
            地点のタプル
        """
        key = _vibe_key(vibe)
        tier = LocationTier(tier)

        if tier == LocationTier.ALL:
            combined = (
                self._tiers[LocationTier.PRIMARY].get(key, ())
                + self._tiers[LocationTier.SECONDARY].get(key, ())
            )
            return tuple(sorted(_dedupe(combined), key=lambda loc: loc.priority, reverse=True))

        return tuple(_dedupe(self._tiers[tier].get(key, ())))

    def primary_locations(self, vibe: Union[Vibe, str]) -> Tuple[Location, ...]:
        return self.locations_for(vibe, LocationTier.PRIMARY)

    def secondary_locations(self, vibe: Union[Vibe, str]) -> Tuple[Location, ...]:
        return self.locations_for(vibe, LocationTier.SECONDARY)

    def fallback_locations(self, vibe: Union[Vibe, str]) -> Tuple[Location, ...]:
        return self.locations_for(vibe, LocationTier.FALLBACK)

    def all_locations(self, vibe: Union[Vibe, str]) -> Tuple[Location, ...]:
        return self.locations_for(vibe, LocationTier.ALL)

    def random_location(self, vibe: Union[Vibe, str], rng: Optional[random.Random] = None) -> Optional[Location]:
        """primary・secondary からランダムに一件選ぶ"""
        candidates = self.all_locations(vibe)
        if not candidates:
            return None
        return (rng or random).choice(candidates)


def load_default_catalog() -> LocationCatalog:
    """同梱の地点データからカタログを構築（プロセスで一度だけ）"""
    global _default_catalog

    if _default_catalog is None:
        _default_catalog = LocationCatalog.from_mapping(
            primary=location_data.PRIMARY_LOCATIONS,
            secondary=location_data.SECONDARY_LOCATIONS,
            fallback=location_data.FALLBACK_LOCATIONS,
        )

    return _default_catalog
