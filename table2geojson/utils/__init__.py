"""
table2geojson.utils - ユーティリティ機能を提供するモジュール
"""

from table2geojson.utils.column_detector import ColumnDetector, resolve_column_index
from table2geojson.utils.coordinate_utils import CoordinateParser, PropertyCollections, parse_coordinate, parse_properties
from table2geojson.utils.file_handler import FileHandler, read_records
from table2geojson.utils.geometry_processor import GeometryProcessor, GeometryType, parse_polygon
from table2geojson.utils.hash_utils import parse_hash
