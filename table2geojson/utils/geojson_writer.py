"""
GeoJSON出力ユーティリティ - FeatureCollectionをファイルに書き出します。
"""

import base64
import logging
import os
from typing import Any

import geojson

logger = logging.getLogger(__name__)


def _encode_value(value: Any) -> Any:
    """JSONで表現できない値を変換する（バイト列はBase64文字列）"""
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(value).decode('ascii')
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dumps_geojson(fc: geojson.FeatureCollection, **kwargs) -> str:
    """
    FeatureCollectionをGeoJSON文字列に変換する

    Args:
        fc: 出力するFeatureCollection
        **kwargs: json.dumps に渡す追加引数

    Returns:
        str: GeoJSON文字列
    """
    kwargs.setdefault('ensure_ascii', False)
    return geojson.dumps(fc, default=_encode_value, **kwargs)


def write_geojson(fc: geojson.FeatureCollection, output_file: str) -> str:
    """
    FeatureCollectionをGeoJSONファイルとして保存する

    Args:
        fc: 出力するFeatureCollection
        output_file: 出力ファイルパス

    Returns:
        str: 出力ファイルパス
    """
    output_dir = os.path.dirname(output_file)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    with open(output_file, 'w', encoding='utf-8') as f:
        f.write(dumps_geojson(fc))

    logger.info(f"Wrote {len(fc['features'])} features to {output_file}")
    return output_file
