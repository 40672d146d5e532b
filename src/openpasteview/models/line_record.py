# src/openpasteview/models/line_record.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class CopyField(str, Enum):
    """コピー対象の項目（客户ID / 充值金额）。"""
    ID = "id"
    AMOUNT = "amount"


@dataclass(frozen=True)
class LineRecord:
    """
    貼り付けテキスト1行から抽出した (ID, 金額) の組。

    - id: 数字のみの文字列（先頭の 0 を保持するため str のまま）
    - amount: 単位（w / k）展開後の金額
    - id_copied / amount_copied: クリップボードへコピー済みかどうか
    """
    id: str
    amount: int
    id_copied: bool = False
    amount_copied: bool = False

    def value_of(self, field: CopyField | str) -> str:
        """指定項目をクリップボードに載せる文字列として返す。"""
        if CopyField(field) is CopyField.ID:
            return self.id
        return str(self.amount)

    def is_copied(self, field: CopyField | str) -> bool:
        if CopyField(field) is CopyField.ID:
            return self.id_copied
        return self.amount_copied
