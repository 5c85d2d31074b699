"""
ハッシュユーティリティ - グループキーから安定したフィーチャ識別子を生成します。
"""

import hashlib
import logging

logger = logging.getLogger(__name__)


def parse_hash(key: str) -> bytes:
    """
    グループキーをSHA-1ダイジェスト(20バイト)に変換する

    Args:
        key: グループキー

    Returns:
        bytes: キーのダイジェスト
    """
    digest = hashlib.sha1(key.encode("utf-8")).digest()
    logger.debug(f"Convert key to hash buffer done: {digest.hex()}")

    return digest
