"""
例外定義モジュール - 座標・ポリゴン解析と変換処理で発生するエラーを定義します。
"""


class Table2GeoJSONError(Exception):
    """パッケージ共通の基底例外"""


class CoordinateError(Table2GeoJSONError, ValueError):
    """座標の解析に失敗した場合の例外"""


class InvalidCoordinateFormat(CoordinateError):
    """経度・緯度のカラム指定が不足している場合の例外"""


class NumericParseError(CoordinateError):
    """経度・緯度のセルが数値として解析できない場合の例外"""


class PolygonRingError(Table2GeoJSONError, ValueError):
    """ポリゴンのリング構成が不正な場合の例外"""


class TooManyRings(PolygonRingError):
    """リング数が上限(2)を超えている場合の例外"""


class RingTooShort(PolygonRingError):
    """リングの座標数が3点未満の場合の例外"""


class ColumnNotFoundError(Table2GeoJSONError, KeyError):
    """指定されたカラムがヘッダーに存在しない場合の例外"""
