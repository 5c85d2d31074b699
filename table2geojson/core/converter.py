"""
変換メイン処理モジュール - CSVファイルからGeoJSONへの変換を行います。
"""

import logging
import os
from datetime import datetime
from typing import Dict, Optional, Sequence, Tuple

import geojson

from table2geojson.errors import ColumnNotFoundError, Table2GeoJSONError
from table2geojson.core.builder import FeatureCollectionBuilder
from table2geojson.utils.column_detector import ColumnDetector, resolve_column_index
from table2geojson.utils.file_handler import FileHandler, Records
from table2geojson.utils.geojson_writer import write_geojson
from table2geojson.utils.geometry_processor import GeometryType
from table2geojson.utils.memory_manager import MemoryManager
from table2geojson.utils.progress import ProgressReporter


class GeoJSONConverter:
    """CSVからGeoJSONへの変換を行うクラス"""

    def __init__(self,
                 input_file: str,
                 output_dir: str,
                 geometry: str = GeometryType.POINT,
                 longitude: Optional[str] = None,
                 latitude: Optional[str] = None,
                 key: Optional[str] = None,
                 limit: int = 0,
                 encoding: Optional[str] = None,
                 logger: Optional[logging.Logger] = None):
        """
        初期化関数

        Args:
            input_file: 入力CSVファイルのパス
            output_dir: 出力ディレクトリ
            geometry: 出力ジオメトリ (point / linestring / polygon)
            longitude: 経度カラム名（Noneの場合は検出）
            latitude: 緯度カラム名（Noneの場合は検出）
            key: グループキーのカラム名（Noneの場合は検出）
            limit: 出力件数の上限（0は無制限）
            encoding: 入力ファイルのエンコーディング（Noneの場合は自動判定）
            logger: ロガーオブジェクト
        """
        if geometry not in GeometryType.ALL:
            raise Table2GeoJSONError(f"Unknown geometry type: {geometry}")

        self.input_file = input_file
        self.output_dir = output_dir
        self.geometry = geometry
        self.longitude = longitude
        self.latitude = latitude
        self.key = key
        self.limit = limit
        self.logger = logger or logging.getLogger(__name__)

        self.file_handler = FileHandler([encoding] if encoding else None, self.logger)
        self.memory_manager = MemoryManager(logger=self.logger)

        # 処理時間記録用
        self.start_time = None
        self.end_time = None
        self.stats: Dict[str, int] = {}

    def convert(self) -> str:
        """
        CSVデータをGeoJSONに変換する

        Returns:
            str: 出力されたファイルパス
        """
        self.start_time = datetime.now()
        self.logger.info(f"Start converting {self.input_file} ({self.geometry})")

        headers, records = self.file_handler.read_records(self.input_file)
        fc = self.build(headers, records)

        output_file = write_geojson(fc, self._output_path())

        self._show_statistics(output_file)
        self._show_completion_info()

        return output_file

    def build(self, headers: Sequence[str], records: Records) -> geojson.FeatureCollection:
        """
        読み込み済みのレコードからFeatureCollectionを構築する

        Args:
            headers: ヘッダー行
            records: レコードのリスト

        Returns:
            geojson.FeatureCollection: 構築されたFeatureCollection
        """
        longitude, latitude = self._detect_coordinate_columns(headers)
        columns = [resolve_column_index(headers, longitude), resolve_column_index(headers, latitude)]

        builder = FeatureCollectionBuilder(
            longitude,
            latitude,
            columns,
            headers,
            limit=self.limit,
            logger=self.logger,
            progress=ProgressReporter(len(records), self.logger)
        )

        self.memory_manager.log_memory_usage("Before build: ")

        if self.geometry == GeometryType.POINT:
            fc = builder.build_points(records)
        else:
            index = resolve_column_index(headers, self._detect_key_column(headers))
            if self.geometry == GeometryType.LINESTRING:
                fc = builder.build_line_strings(index, records)
            else:
                fc = builder.build_polygons(index, records)

        self.memory_manager.log_memory_usage("After build: ")
        self.stats = builder.stats

        return fc

    def _detect_coordinate_columns(self, headers: Sequence[str]) -> Tuple[str, str]:
        """
        経度・緯度のカラム名を決定する

        Args:
            headers: ヘッダー行

        Returns:
            Tuple[str, str]: (経度カラム名, 緯度カラム名)
        """
        detector = ColumnDetector(headers, self.logger)
        longitude = self.longitude or detector.detect_longitude_column()
        latitude = self.latitude or detector.detect_latitude_column()

        if not longitude or not latitude:
            raise ColumnNotFoundError(f"Longitude/latitude columns not found in headers {list(headers)}")

        self.logger.debug(f"Coordinate columns: longitude='{longitude}', latitude='{latitude}'")
        return longitude, latitude

    def _detect_key_column(self, headers: Sequence[str]) -> str:
        key = self.key or ColumnDetector(headers, self.logger).detect_key_column()
        if not key:
            raise ColumnNotFoundError(f"Key column not found in headers {list(headers)}")

        self.logger.debug(f"Key column: '{key}'")
        return key

    def _output_path(self) -> str:
        stem = os.path.splitext(os.path.basename(self.input_file))[0]
        return os.path.join(self.output_dir, f"{stem}.geojson")

    def _show_statistics(self, output_file: str) -> None:
        """
        処理結果の統計情報を表示する

        Args:
            output_file: 出力ファイルパス
        """
        self.logger.info(f"Saved GeoJSON file: {output_file}")
        self.logger.info(f"Records: {self.stats.get('total_records', 0)}, "
                         f"skipped records: {self.stats.get('skipped_records', 0)}")

        if self.geometry != GeometryType.POINT:
            self.logger.info(f"Groups: {self.stats.get('groups', 0)}, "
                             f"skipped groups: {self.stats.get('skipped_groups', 0)}")

        self.logger.info(f"Features: {self.stats.get('features', 0)}")

    def _show_completion_info(self) -> None:
        """処理完了情報を表示する"""
        self.end_time = datetime.now()
        processing_time = self.end_time - self.start_time

        self.logger.info(f"Conversion finished in {processing_time.total_seconds():.2f} s")


def convert_csv_to_geojson(input_file: str,
                           output_dir: str = 'output',
                           geometry: str = GeometryType.POINT,
                           longitude: Optional[str] = None,
                           latitude: Optional[str] = None,
                           key: Optional[str] = None,
                           limit: int = 0,
                           encoding: Optional[str] = None,
                           logger: Optional[logging.Logger] = None) -> str:
    """
    CSVファイルをGeoJSONに変換する関数

    Args:
        input_file: 入力CSVファイルのパス
        output_dir: 出力ディレクトリ
        geometry: 出力ジオメトリ (point / linestring / polygon)
        longitude: 経度カラム名
        latitude: 緯度カラム名
        key: グループキーのカラム名
        limit: 出力件数の上限（0は無制限）
        encoding: 入力ファイルのエンコーディング

    Returns:
        str: 出力されたファイルパス
    """
    converter = GeoJSONConverter(
        input_file=input_file,
        output_dir=output_dir,
        geometry=geometry,
        longitude=longitude,
        latitude=latitude,
        key=key,
        limit=limit,
        encoding=encoding,
        logger=logger
    )

    return converter.convert()
