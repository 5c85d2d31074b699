"""
table2geojson - 表形式のレコードからGeoJSONのFeatureCollectionへの変換ツール

このパッケージはCSVなどの行データを、1行1ポイント、またはキー列でまとめた
LineString・Polygonのフィーチャに変換するためのツールセットを提供します。
"""

__version__ = "1.0.0"

# 主要コンポーネントをインポート
from table2geojson.core.builder import (
    FeatureCollectionBuilder,
    build_line_string_collection,
    build_point_collection,
    build_polygon_collection,
)
from table2geojson.core.converter import GeoJSONConverter, convert_csv_to_geojson
from table2geojson.config import DEFAULT_CONFIG
