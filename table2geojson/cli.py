#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
CLI - CSVファイルをGeoJSONに変換するコマンドラインインターフェース
"""

import sys
from typing import List, Optional

from table2geojson.config import parse_args
from table2geojson.core.converter import convert_csv_to_geojson
from table2geojson.errors import Table2GeoJSONError
from table2geojson.utils.logging_utils import close_logger, setup_logging


def main(argv: Optional[List[str]] = None) -> int:
    """コマンドラインからの実行のエントリーポイント"""

    # コマンドライン引数を解析
    args = parse_args(argv)

    logger = setup_logging(args.log_dir, verbose=args.verbose)

    # 変換処理実行
    try:
        output_file = convert_csv_to_geojson(
            input_file=args.input_file,
            output_dir=args.output_dir,
            geometry=args.geometry,
            longitude=args.longitude,
            latitude=args.latitude,
            key=args.key,
            limit=args.limit,
            encoding=args.encoding,
            logger=logger
        )

        logger.info(f"GeoJSON file generated: {output_file}")
        return 0

    except (Table2GeoJSONError, ValueError, OSError) as e:
        logger.error(f"Conversion failed: {e}")
        logger.debug("Traceback:", exc_info=True)
        return 1

    finally:
        close_logger(logger)


if __name__ == "__main__":
    sys.exit(main())
