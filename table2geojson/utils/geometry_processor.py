"""
ジオメトリ処理ユーティリティ - 座標リストからポリゴンのリングを構成します。
"""

from typing import List, Sequence

from table2geojson.errors import PolygonRingError, RingTooShort, TooManyRings
from table2geojson.utils.coordinate_utils import Point

LineString = List[Point]
Polygon = List[LineString]

# 1ポリゴンあたりのリング数の上限（外周と穴1つ）
MAX_RINGS = 2

# 閉じる前のリングに必要な最小座標数
MIN_RING_LENGTH = 3


class GeometryType:
    """出力ジオメトリタイプの定数"""
    POINT = "point"
    LINESTRING = "linestring"
    POLYGON = "polygon"

    ALL = (POINT, LINESTRING, POLYGON)


class GeometryProcessor:
    """座標からポリゴンを生成するクラス"""

    @staticmethod
    def parse_polygon(rings: Sequence[Sequence[Point]]) -> Polygon:
        """
        1つまたは2つのリングからポリゴンを生成する

        始点と終点が一致しないリングは、始点のコピーを末尾に追加して閉じる。
        入力のリングは変更しない。

        Args:
            rings: リングのリスト [[[lon, lat], ...], ...]

        Returns:
            Polygon: 閉じたリングのリスト

        Raises:
            TooManyRings: リングが3つ以上の場合
            RingTooShort: 3点未満のリングがある場合
            PolygonRingError: リングが1つもない場合
        """
        if len(rings) > MAX_RINGS:
            raise TooManyRings("Polygon parse arguments is too many")
        if len(rings) == 0:
            raise PolygonRingError("Polygon requires at least one ring")

        polygon = []
        for ring in rings:
            if len(ring) < MIN_RING_LENGTH:
                raise RingTooShort("Coordinates format is invalid for polygon")

            polygon.append(GeometryProcessor.close_ring(ring))

        return polygon

    @staticmethod
    def close_ring(ring: Sequence[Point]) -> LineString:
        """
        リングを閉じたコピーを返す

        Args:
            ring: 座標のリスト

        Returns:
            LineString: 始点と終点が一致する座標リスト
        """
        closed = [list(coord) for coord in ring]
        first, last = closed[0], closed[-1]
        if first[0] != last[0] or first[1] != last[1]:
            closed.append(list(first))

        return closed


def parse_polygon(rings: Sequence[Sequence[Point]]) -> Polygon:
    """
    1つまたは2つのリングからポリゴンを生成する

    Args:
        rings: リングのリスト

    Returns:
        Polygon: 閉じたリングのリスト
    """
    return GeometryProcessor.parse_polygon(rings)
