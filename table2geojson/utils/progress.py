"""
進捗表示ユーティリティ - フィーチャ構築の進捗をロガーへ報告します。
"""

import logging
import time
from typing import Optional


class NullProgress:
    """何もしない進捗レポーター"""

    def progress_tick(self, amount: float) -> None:
        pass

    def create_chunk(self, count: int) -> float:
        return 0.0


class ProgressReporter:
    """レコード数を基準に進捗をログ出力するクラス"""

    def __init__(self,
                 total: int,
                 logger: Optional[logging.Logger] = None,
                 report_interval: float = 10.0):
        """
        初期化

        Args:
            total: 入力レコード数（進捗100%に相当）
            logger: ロガーオブジェクト
            report_interval: ログを出力する進捗率の間隔 (%)
        """
        self.total = total
        self.logger = logger or logging.getLogger(__name__)
        self.report_interval = report_interval
        self.current = 0.0
        self.start_time = time.time()
        self._next_report = report_interval

    def progress_tick(self, amount: float) -> None:
        """
        進捗を加算し、間隔を超えたらログを出力する

        Args:
            amount: 加算する進捗量（レコード単位）
        """
        self.current += amount
        percent = self.percent

        if percent >= self._next_report:
            elapsed = time.time() - self.start_time
            self.logger.info(f"Progress: {self.current:.1f}/{self.total} ({percent:.1f}%) - elapsed {elapsed:.1f} s")
            while self._next_report <= percent:
                self._next_report += self.report_interval

    def create_chunk(self, count: int) -> float:
        """
        グループ処理1件あたりの進捗量を計算する

        グループ化処理では1パス目で全体の半分を報告済みのため、
        残り半分をグループ数で割った値を返す。

        Args:
            count: グループ数

        Returns:
            float: 1グループあたりの進捗量
        """
        if count <= 0:
            return 0.0
        return self.total * 0.5 / count

    @property
    def percent(self) -> float:
        if self.total <= 0:
            return 100.0
        return self.current / self.total * 100
