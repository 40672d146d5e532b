# src/openpasteview/errors.py

from __future__ import annotations


class OpenPasteViewError(Exception):
    """OpenPasteView が送出する例外の基底クラス。"""


class IndexOutOfRange(OpenPasteViewError, IndexError):
    """レコード一覧の範囲外のインデックスが指定された。"""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"record index {index} out of range for {size} records")
        self.index = index
        self.size = size


class EmptyTextError(OpenPasteViewError, ValueError):
    """解析対象のテキストが空。"""
