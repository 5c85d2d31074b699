"""
table2geojson/utils/logging_utils.py - ロギング関連のユーティリティ
"""

import os
import logging
from datetime import datetime
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def setup_logging(log_dir: Optional[str] = None,
                  log_name: Optional[str] = None,
                  verbose: bool = False) -> logging.Logger:
    """
    ロギングの設定を行う

    Args:
        log_dir: ログディレクトリ（Noneの場合はファイル出力なし）
        log_name: ロガー名（Noneの場合はパッケージ名）
        verbose: 詳細なログを出力するかどうか

    Returns:
        logging.Logger: 設定されたロガーオブジェクト
    """
    level = logging.DEBUG if verbose else logging.INFO

    logger = logging.getLogger(log_name or 'table2geojson')
    logger.setLevel(level)

    # 既存のハンドラを削除（重複防止）
    close_logger(logger)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        file_name = f"{log_name or 'convert'}_{timestamp}.log"

        file_handler = logging.FileHandler(os.path.join(log_dir, file_name), encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    return logger


def close_logger(logger: logging.Logger):
    """
    ロガーのクリーンアップを行う

    Args:
        logger: クローズするロガーオブジェクト
    """
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
