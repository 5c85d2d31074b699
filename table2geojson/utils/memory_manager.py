"""
table2geojson/utils/memory_manager.py - メモリ使用状況の監視
"""

import gc
import logging
from typing import Dict, Optional

import psutil


class MemoryManager:
    """メモリ使用状況の監視を行うクラス"""

    def __init__(self, limit_percent: float = 80.0, logger: Optional[logging.Logger] = None):
        """
        初期化

        Args:
            limit_percent: 警告を出すメモリ使用率の上限 (%)
            logger: ロガーオブジェクト
        """
        self.limit_percent = limit_percent
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def get_memory_usage() -> Dict[str, float]:
        """
        現在のメモリ使用状況を取得

        Returns:
            Dict[str, float]: メモリ使用状況の辞書
        """
        process = psutil.Process()
        memory_usage_bytes = process.memory_info().rss

        # システム全体のメモリ情報
        system_memory = psutil.virtual_memory()
        memory_percent = memory_usage_bytes / system_memory.total * 100

        return {
            'usage_bytes': memory_usage_bytes,
            'usage_mb': memory_usage_bytes / (1024 * 1024),
            'percent': memory_percent,
            'system_percent': system_memory.percent,
            'system_available_mb': system_memory.available / (1024 * 1024)
        }

    def log_memory_usage(self, prefix: str = "") -> Dict[str, float]:
        """
        メモリ使用状況をログに出力し、上限を超えていれば警告する

        Args:
            prefix: ログメッセージの接頭辞

        Returns:
            Dict[str, float]: メモリ使用状況の辞書
        """
        memory = self.get_memory_usage()

        self.logger.debug(f"{prefix}Memory usage: {memory['usage_mb']:.1f} MB ({memory['percent']:.1f}% of system), "
                          f"System: {memory['system_percent']:.1f}% used, {memory['system_available_mb']:.1f} MB available")

        if memory['system_percent'] > self.limit_percent:
            self.logger.warning(f"{prefix}System memory usage {memory['system_percent']:.1f}% exceeds "
                                f"{self.limit_percent:.1f}%, collecting garbage")
            gc.collect()

        return memory
