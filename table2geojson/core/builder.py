"""
フィーチャ構築モジュール - レコード群からポイント・ライン・ポリゴンのFeatureCollectionを生成します。
"""

import logging
from typing import Any, Dict, Optional, Sequence, Tuple

import geojson

from table2geojson.errors import NumericParseError, PolygonRingError
from table2geojson.utils.coordinate_utils import (
    CoordinateParser, Point, PropertyCollections, parse_properties
)
from table2geojson.utils.geometry_processor import GeometryProcessor, LineString
from table2geojson.utils.hash_utils import parse_hash
from table2geojson.utils.progress import NullProgress

# グループキーのハッシュを格納するプロパティ名
HASH_PROPERTY = "hash_"


def _create_geometry(geometry_class, coordinates):
    # geojsonライブラリはコンストラクタで座標を丸めるため、解析した値をそのまま設定する
    geometry = geometry_class()
    geometry["coordinates"] = coordinates
    return geometry


class FeatureCollectionBuilder:
    """レコードからFeatureCollectionを構築するクラス"""

    def __init__(self,
                 longitude: str,
                 latitude: str,
                 columns: Sequence[int],
                 headers: Sequence[str],
                 limit: int = 0,
                 logger: Optional[logging.Logger] = None,
                 progress=None):
        """
        初期化関数

        Args:
            longitude: 経度カラム名（プロパティから除外する）
            latitude: 緯度カラム名（プロパティから除外する）
            columns: 経度・緯度のカラム位置
            headers: ヘッダー行
            limit: 出力件数の上限（0は無制限）
            logger: ロガーオブジェクト
            progress: progress_tick / create_chunk を持つ進捗レポーター
        """
        self.longitude = longitude
        self.latitude = latitude
        self.columns = columns
        self.headers = headers
        self.limit = limit
        self.logger = logger or logging.getLogger(__name__)
        self.progress = progress or NullProgress()
        self.stats = self._new_stats()

    def build_points(self, records: Sequence[Sequence[str]]) -> geojson.FeatureCollection:
        """
        1行を1ポイントとするFeatureCollectionを構築する

        limit は行インデックスに対する上限として働く。
        座標の解析に失敗した行も行インデックスは進む。

        Args:
            records: 文字列セルのリストのリスト

        Returns:
            geojson.FeatureCollection: ポイントフィーチャの集合
        """
        self.stats = self._new_stats()
        fc = geojson.FeatureCollection([])

        for i, record in enumerate(records):
            self.stats["total_records"] += 1
            self.progress.progress_tick(1.0)

            coord = self._parse_coordinate(record)
            if coord is None:
                continue

            feature = geojson.Feature(
                geometry=_create_geometry(geojson.Point, coord),
                properties=self._parse_properties(record)
            )

            if self.limit != 0 and self.limit == i:
                break
            fc["features"].append(feature)

        self.stats["features"] = len(fc["features"])
        return fc

    def build_line_strings(self,
                           index: int,
                           records: Sequence[Sequence[str]]) -> geojson.FeatureCollection:
        """
        キーが同じ行の座標を連結したLineStringのFeatureCollectionを構築する

        Args:
            index: グループキーのカラム位置
            records: 文字列セルのリストのリスト

        Returns:
            geojson.FeatureCollection: ラインフィーチャの集合
        """
        self.stats = self._new_stats()
        fc = geojson.FeatureCollection([])

        lines, collections = self._group_records(index, records)

        cnt = 0
        chunk = self.progress.create_chunk(len(lines))
        for key, coords in lines.items():
            self.progress.progress_tick(chunk)

            feature = self._create_grouped_feature(
                key, _create_geometry(geojson.LineString, coords), collections[key]
            )

            if self.limit != 0 and self.limit == cnt:
                break
            cnt += 1

            fc["features"].append(feature)

        self.stats["features"] = len(fc["features"])
        return fc

    def build_polygons(self,
                       index: int,
                       records: Sequence[Sequence[str]]) -> geojson.FeatureCollection:
        """
        キーが同じ行の座標を外周リングとするPolygonのFeatureCollectionを構築する

        リングを構成できないグループはスキップする。
        limit は出力できたフィーチャ数に対する上限として働く。

        Args:
            index: グループキーのカラム位置
            records: 文字列セルのリストのリスト

        Returns:
            geojson.FeatureCollection: ポリゴンフィーチャの集合
        """
        self.stats = self._new_stats()
        fc = geojson.FeatureCollection([])

        lines, collections = self._group_records(index, records)

        cnt = 0
        chunk = self.progress.create_chunk(len(lines))
        for key, coords in lines.items():
            self.progress.progress_tick(chunk)

            try:
                polygon = GeometryProcessor.parse_polygon([coords])
            except PolygonRingError as e:
                self.logger.warning(f"Skip group (key={key!r}): {e}")
                self.stats["skipped_groups"] += 1
                continue

            feature = self._create_grouped_feature(
                key, _create_geometry(geojson.Polygon, polygon), collections[key]
            )

            if self.limit != 0 and self.limit == cnt:
                break
            cnt += 1

            fc["features"].append(feature)

        self.stats["features"] = len(fc["features"])
        return fc

    def _group_records(self,
                       index: int,
                       records: Sequence[Sequence[str]]) -> Tuple[Dict[str, LineString], Dict[str, PropertyCollections]]:
        """
        レコードをキーごとの座標列とプロパティ集合にまとめる（1パス目）

        Args:
            index: グループキーのカラム位置
            records: 文字列セルのリストのリスト

        Returns:
            Tuple: (キー→座標列, キー→プロパティ集合)。キーは初出順
        """
        lines: Dict[str, LineString] = {}
        collections: Dict[str, PropertyCollections] = {}

        for record in records:
            self.stats["total_records"] += 1
            self.progress.progress_tick(0.5)

            coord = self._parse_coordinate(record)
            if coord is None:
                continue

            try:
                key = record[index]
            except IndexError:
                self.logger.warning(f"Skip record without key column {index}: {list(record)}")
                self.stats["skipped_records"] += 1
                continue

            properties = self._parse_properties(record)

            lines.setdefault(key, []).append(coord)
            collections.setdefault(key, PropertyCollections()).append_properties(properties)

        self.stats["groups"] = len(lines)
        self.logger.debug(f"Features append computation order is following. length={len(lines)}")

        return lines, collections

    def _create_grouped_feature(self,
                                key: str,
                                geometry: geojson.geometry.Geometry,
                                collection: PropertyCollections) -> geojson.Feature:
        """グループのハッシュとプロパティ集合を持つフィーチャを生成する"""
        feature = geojson.Feature(geometry=geometry, properties={HASH_PROPERTY: parse_hash(key)})

        for name, values in collection.items():
            feature["properties"][name] = values

        return feature

    def _parse_coordinate(self, record: Sequence[str]) -> Optional[Point]:
        """
        座標を解析し、失敗した場合は警告を出してNoneを返す

        カラム指定の不足は設定エラーとして呼び出し元に送出する。
        """
        coord: Point = []
        try:
            coord = CoordinateParser.parse_coordinate(self.columns, record)
        except NumericParseError as e:
            self.logger.warning(f"{e} (coordinate={coord})")
            self.stats["skipped_records"] += 1
            return None

        return coord

    def _parse_properties(self, record: Sequence[str]) -> Dict[str, Any]:
        return parse_properties(self.headers, record, self.longitude, self.latitude)

    @staticmethod
    def _new_stats() -> Dict[str, int]:
        return {
            "total_records": 0,
            "skipped_records": 0,
            "groups": 0,
            "skipped_groups": 0,
            "features": 0,
        }


# モジュールレベルのユーティリティ関数
def build_point_collection(longitude: str,
                           latitude: str,
                           columns: Sequence[int],
                           headers: Sequence[str],
                           records: Sequence[Sequence[str]],
                           limit: int = 0,
                           logger: Optional[logging.Logger] = None,
                           progress=None) -> geojson.FeatureCollection:
    """
    ポイントのFeatureCollectionを構築する

    Args:
        longitude: 経度カラム名
        latitude: 緯度カラム名
        columns: 経度・緯度のカラム位置
        headers: ヘッダー行
        records: レコードのリスト
        limit: 出力件数の上限（0は無制限）

    Returns:
        geojson.FeatureCollection: ポイントフィーチャの集合
    """
    builder = FeatureCollectionBuilder(longitude, latitude, columns, headers, limit, logger, progress)
    return builder.build_points(records)


def build_line_string_collection(longitude: str,
                                 latitude: str,
                                 index: int,
                                 columns: Sequence[int],
                                 headers: Sequence[str],
                                 records: Sequence[Sequence[str]],
                                 limit: int = 0,
                                 logger: Optional[logging.Logger] = None,
                                 progress=None) -> geojson.FeatureCollection:
    """
    LineStringのFeatureCollectionを構築する

    Args:
        longitude: 経度カラム名
        latitude: 緯度カラム名
        index: グループキーのカラム位置
        columns: 経度・緯度のカラム位置
        headers: ヘッダー行
        records: レコードのリスト
        limit: 出力件数の上限（0は無制限）

    Returns:
        geojson.FeatureCollection: ラインフィーチャの集合
    """
    builder = FeatureCollectionBuilder(longitude, latitude, columns, headers, limit, logger, progress)
    return builder.build_line_strings(index, records)


def build_polygon_collection(longitude: str,
                             latitude: str,
                             index: int,
                             columns: Sequence[int],
                             headers: Sequence[str],
                             records: Sequence[Sequence[str]],
                             limit: int = 0,
                             logger: Optional[logging.Logger] = None,
                             progress=None) -> geojson.FeatureCollection:
    """
    PolygonのFeatureCollectionを構築する

    Args:
        longitude: 経度カラム名
        latitude: 緯度カラム名
        index: グループキーのカラム位置
        columns: 経度・緯度のカラム位置
        headers: ヘッダー行
        records: レコードのリスト
        limit: 出力件数の上限（0は無制限）

    Returns:
        geojson.FeatureCollection: ポリゴンフィーチャの集合
    """
    builder = FeatureCollectionBuilder(longitude, latitude, columns, headers, limit, logger, progress)
    return builder.build_polygons(index, records)
