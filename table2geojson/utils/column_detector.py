"""
列検出ユーティリティ - ヘッダー行から経度・緯度・グループキーのカラムを検出します。
"""

import logging
import re
from typing import Dict, List, Optional, Sequence

from table2geojson.errors import ColumnNotFoundError

LONGITUDE_PATTERNS = ['longitude', 'lon', 'lng', 'long', 'x', '経度']
LATITUDE_PATTERNS = ['latitude', 'lat', 'y', '緯度']
KEY_PATTERNS = ['key', 'id', 'group', 'shape_id', 'ユニークキー']


class ColumnDetector:
    """
    ヘッダー行から特殊カラムを検出するクラス
    """

    def __init__(self, headers: Sequence[str], logger: Optional[logging.Logger] = None):
        """
        初期化関数

        Args:
            headers: ヘッダー行
            logger: ロガーオブジェクト
        """
        self.headers = list(headers)
        self.logger = logger or logging.getLogger(__name__)

    def detect_all_columns(self) -> Dict[str, Optional[str]]:
        """
        経度・緯度・キーのカラムを検出する

        Returns:
            Dict[str, Optional[str]]: 検出したカラム名の辞書
        """
        return {
            'longitude_column': self.detect_longitude_column(),
            'latitude_column': self.detect_latitude_column(),
            'key_column': self.detect_key_column(),
        }

    def detect_longitude_column(self) -> Optional[str]:
        return self._detect_column_by_patterns(LONGITUDE_PATTERNS, "longitude")

    def detect_latitude_column(self) -> Optional[str]:
        return self._detect_column_by_patterns(LATITUDE_PATTERNS, "latitude")

    def detect_key_column(self) -> Optional[str]:
        return self._detect_column_by_patterns(KEY_PATTERNS, "key")

    def _detect_column_by_patterns(self, patterns: List[str], column_description: str) -> Optional[str]:
        """
        パターンリストを使用して列を検出する内部ヘルパー関数

        完全一致（大文字小文字を区別しない）をパターン順に探し、
        見つからない場合は3文字以上のパターンで部分一致を探す。
        部分一致は英数字で区切られた語単位とし、plate や colonia には一致させない。

        Args:
            patterns: 検索パターンのリスト
            column_description: ログ出力用の列説明

        Returns:
            Optional[str]: 検出された列名、見つからない場合はNone
        """
        for pattern in patterns:
            for col in self.headers:
                if col.strip().lower() == pattern.lower():
                    self.logger.debug(f"Detected {column_description} column: '{col}'")
                    return col

        for pattern in patterns:
            if len(pattern) < 3:
                continue
            word = re.compile(rf"(?<![a-z0-9]){re.escape(pattern.lower())}(?![a-z0-9])")
            for col in self.headers:
                if word.search(col.lower()):
                    self.logger.debug(f"Detected {column_description} column by partial match: '{col}'")
                    return col

        return None


def resolve_column_index(headers: Sequence[str], name: str) -> int:
    """
    カラム名からカラム位置を取得する

    Args:
        headers: ヘッダー行
        name: カラム名

    Returns:
        int: カラム位置

    Raises:
        ColumnNotFoundError: カラムが存在しない場合
    """
    try:
        return list(headers).index(name)
    except ValueError:
        raise ColumnNotFoundError(f"Column '{name}' not found in headers {list(headers)}") from None
