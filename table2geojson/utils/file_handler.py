"""
ファイル処理ユーティリティ - CSVファイルを読み込み、ヘッダーとレコードに分解します。
"""

import io
import logging
from typing import List, Optional, Sequence, Tuple

import pandas as pd

Records = List[List[str]]


class FileHandler:
    """ファイル読み込みと処理を行うクラス"""

    # サポートするエンコーディングのリスト（先頭から順に試行）
    SUPPORTED_ENCODINGS = ['utf-8-sig', 'shift_jis', 'cp932', 'euc-jp']

    def __init__(self,
                 encodings: Optional[Sequence[str]] = None,
                 logger: Optional[logging.Logger] = None):
        """
        初期化関数

        Args:
            encodings: 試行するエンコーディング（Noneの場合は既定のリスト）
            logger: ロガーオブジェクト
        """
        self.encodings = list(encodings) if encodings else list(self.SUPPORTED_ENCODINGS)
        self.logger = logger or logging.getLogger(__name__)

    def read_records(self, file_path: str) -> Tuple[List[str], Records]:
        """
        CSVファイルを読み込んでヘッダーとレコードを返す

        セルはすべて文字列として読み込み、欠損値の変換は行わない。

        Args:
            file_path: 入力ファイルのパス

        Returns:
            Tuple[List[str], Records]: (ヘッダー, レコードのリスト)

        Raises:
            ValueError: ファイル読み込みに失敗した場合
        """
        file_content = self._read_file_with_encoding(file_path)
        df = self._parse_csv_content(file_content)

        headers = [str(col) for col in df.columns]
        records = df.values.tolist()

        self.logger.info(f"Loaded {file_path}: {len(records)} rows x {len(headers)} columns")
        return headers, records

    def _read_file_with_encoding(self, file_path: str) -> str:
        """
        複数のエンコーディングを試して最適なものでファイルを読み込む

        Args:
            file_path: 入力ファイルのパス

        Returns:
            str: 読み込まれたファイル内容

        Raises:
            ValueError: どのエンコーディングでも読み込めなかった場合
        """
        for encoding in self.encodings:
            try:
                with open(file_path, 'r', encoding=encoding) as f:
                    file_content = f.read()
                self.logger.debug(f"Read {file_path} with encoding {encoding}")
                return file_content
            except UnicodeDecodeError:
                self.logger.debug(f"Failed to decode {file_path} with encoding {encoding}")
                continue

        raise ValueError(f"Cannot decode {file_path} with any of {self.encodings}")

    def _parse_csv_content(self, file_content: str) -> pd.DataFrame:
        """
        ファイル内容をCSVとして解析する

        Args:
            file_content: ファイル内容の文字列

        Returns:
            pd.DataFrame: 全セルが文字列のデータフレーム

        Raises:
            ValueError: CSV解析に失敗した場合
        """
        if not file_content.strip():
            raise ValueError("CSVデータが見つかりませんでした")

        try:
            df = pd.read_csv(
                io.StringIO(file_content),
                dtype=str,
                keep_default_na=False,
                skipinitialspace=True,
            )
        except pd.errors.ParserError as e:
            raise ValueError(f"CSV parse failed: {e}") from e

        # カラム名をクリーンアップ
        df.columns = [str(col).strip('"').strip() for col in df.columns]

        # 列数が足りない行の欠損セルは空文字にする
        return df.fillna("")


def read_records(file_path: str,
                 encodings: Optional[Sequence[str]] = None) -> Tuple[List[str], Records]:
    """
    CSVファイルを読み込んでヘッダーとレコードを返す

    Args:
        file_path: 入力ファイルのパス
        encodings: 試行するエンコーディング

    Returns:
        Tuple[List[str], Records]: (ヘッダー, レコードのリスト)
    """
    handler = FileHandler(encodings)
    return handler.read_records(file_path)
