"""
設定管理モジュール - コマンドライン引数やデフォルト設定を管理します。
"""

import os
import argparse
from typing import Any, Dict, List, NamedTuple, Optional

from table2geojson.utils.geometry_processor import GeometryType

# デフォルト設定
DEFAULT_CONFIG = {
    "output_dir": "output",
    "geometry": GeometryType.POINT,
    "limit": 0,
    "encoding": "",
    "log_dir": "",
    "verbose": False,
}

ENV_PREFIX = "TABLE2GEOJSON_"


class CommandLineArgs(NamedTuple):
    """コマンドライン引数を格納する型付きタプル"""
    input_file: str
    output_dir: str
    geometry: str
    longitude: Optional[str]
    latitude: Optional[str]
    key: Optional[str]
    limit: int
    encoding: Optional[str]
    log_dir: Optional[str]
    verbose: bool


def parse_args(argv: Optional[List[str]] = None) -> CommandLineArgs:
    """
    コマンドライン引数を解析する関数

    環境変数で上書きされた設定値を各オプションのデフォルトとして使用する。

    Args:
        argv: 引数リスト（Noneの場合は sys.argv）

    Returns:
        CommandLineArgs: 解析されたコマンドライン引数
    """
    config = get_config()

    parser = argparse.ArgumentParser(
        description='CSVファイルのレコードからポイント・ライン・ポリゴンのGeoJSONを生成します。'
    )

    parser.add_argument(
        'input_file',
        help='入力CSVファイルのパス'
    )

    parser.add_argument(
        '--output_dir', '-o',
        default=config['output_dir'],
        help=f'出力ディレクトリ（デフォルト: {config["output_dir"]}）'
    )

    parser.add_argument(
        '--geometry', '-g',
        choices=GeometryType.ALL,
        default=config['geometry'],
        help='出力ジオメトリ: point (1行1ポイント), linestring / polygon (キーごとにまとめる)'
    )

    parser.add_argument(
        '--longitude',
        help='経度カラム名（省略時はヘッダーから検出）'
    )

    parser.add_argument(
        '--latitude',
        help='緯度カラム名（省略時はヘッダーから検出）'
    )

    parser.add_argument(
        '--key', '-k',
        help='linestring / polygon のグループキーのカラム名（省略時はヘッダーから検出）'
    )

    parser.add_argument(
        '--limit', '-l',
        type=int,
        default=config['limit'],
        help='出力フィーチャ数の上限（0は無制限）'
    )

    parser.add_argument(
        '--encoding', '-e',
        default=config['encoding'] or None,
        help='入力ファイルのエンコーディング（省略時は自動判定）'
    )

    parser.add_argument(
        '--log_dir',
        default=config['log_dir'] or None,
        help='ログファイルの出力ディレクトリ'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        default=config['verbose'],
        help='詳細なログを出力します'
    )

    args = parser.parse_args(argv)

    if args.limit < 0:
        parser.error('--limit must be zero or positive')

    return CommandLineArgs(
        input_file=args.input_file,
        output_dir=args.output_dir,
        geometry=args.geometry,
        longitude=args.longitude,
        latitude=args.latitude,
        key=args.key,
        limit=args.limit,
        encoding=args.encoding,
        log_dir=args.log_dir,
        verbose=args.verbose
    )


def get_config() -> Dict[str, Any]:
    """
    設定値を環境変数とデフォルト値から取得する関数
    環境変数がある場合はそれを優先、ない場合はデフォルト値を使用

    Returns:
        Dict[str, Any]: 設定値の辞書
    """
    config = DEFAULT_CONFIG.copy()

    for key in DEFAULT_CONFIG.keys():
        env_key = f"{ENV_PREFIX}{key.upper()}"
        if env_key in os.environ:
            env_value = os.environ[env_key]

            # 値の型に応じた変換
            if isinstance(DEFAULT_CONFIG[key], bool):
                config[key] = env_value.lower() in ('true', 'yes', '1', 'y')
            elif isinstance(DEFAULT_CONFIG[key], int):
                config[key] = int(env_value)
            else:
                config[key] = env_value

    return config
