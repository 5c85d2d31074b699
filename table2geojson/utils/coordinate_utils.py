"""
座標処理ユーティリティ - レコードからの経度緯度の解析とプロパティ抽出を行います。
"""

import math
from typing import Any, Dict, List, Sequence

from table2geojson.errors import InvalidCoordinateFormat, NumericParseError

# [経度, 緯度]
Point = List[float]


class PropertyCollections(dict):
    """
    グループ単位のプロパティ集合

    プロパティ名ごとに、グループに属する各行の値を行の出現順にリストで保持する。
    行に存在しないプロパティはNoneで埋め、各リストの位置が行と対応するようにする。
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.rows = 0

    def append_properties(self, properties: Dict[str, Any]) -> None:
        """
        1行分のプロパティを追加する

        Args:
            properties: 1行分のプロパティ辞書
        """
        for key in properties:
            if key not in self:
                self[key] = [None] * self.rows

        for key, values in self.items():
            values.append(properties.get(key))

        self.rows += 1


class CoordinateParser:
    """レコードから座標を解析するクラス"""

    @staticmethod
    def parse_coordinate(columns: Sequence[int], record: Sequence[str]) -> Point:
        """
        レコードの指定カラムから[経度, 緯度]を作成する

        Args:
            columns: 経度・緯度のカラム位置 (先頭2つを使用)
            record: 文字列セルのリスト

        Returns:
            Point: 解析された[経度, 緯度]

        Raises:
            InvalidCoordinateFormat: カラム位置が2つ未満の場合
            NumericParseError: セルが数値として解析できない場合
        """
        if len(columns) < 2:
            raise InvalidCoordinateFormat("Coordinate format is invalid")

        lon = CoordinateParser._parse_float(record, columns[0])
        lat = CoordinateParser._parse_float(record, columns[1])

        return [lon, lat]

    @staticmethod
    def _parse_float(record: Sequence[str], column: int) -> float:
        try:
            cell = record[column]
        except IndexError:
            raise NumericParseError(f"Column {column} is missing in record") from None

        try:
            value = float(str(cell).strip())
        except ValueError as e:
            raise NumericParseError(f"Cannot parse {cell!r} as float: {e}") from e

        # NaN・無限大はGeoJSONで表現できない
        if not math.isfinite(value):
            raise NumericParseError(f"Coordinate {cell!r} is not finite")

        return value


def parse_properties(headers: Sequence[str],
                     record: Sequence[str],
                     longitude: str,
                     latitude: str) -> Dict[str, Any]:
    """
    経度・緯度カラムを除いたプロパティ辞書を作成する

    Args:
        headers: ヘッダー行
        record: 文字列セルのリスト
        longitude: 経度カラム名
        latitude: 緯度カラム名

    Returns:
        Dict[str, Any]: カラム名と値の辞書
    """
    properties = {}
    for header, value in zip(headers, record):
        if header in (longitude, latitude):
            continue
        properties[header] = value

    return properties


# モジュールレベルの関数
def parse_coordinate(columns: Sequence[int], record: Sequence[str]) -> Point:
    """
    レコードの指定カラムから[経度, 緯度]を作成する

    Args:
        columns: 経度・緯度のカラム位置
        record: 文字列セルのリスト

    Returns:
        Point: 解析された[経度, 緯度]
    """
    return CoordinateParser.parse_coordinate(columns, record)
