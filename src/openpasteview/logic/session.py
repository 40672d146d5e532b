# src/openpasteview/logic/session.py

from __future__ import annotations

import logging
from typing import List

from openpasteview.errors import EmptyTextError
from openpasteview.logic.copy_state import ClipboardWriter, copy_field
from openpasteview.models.line_record import CopyField, LineRecord
from openpasteview.parser.line_parser import extract

logger = logging.getLogger("openpasteview.session")

COPY_HINT = "复制之后复制按钮将会消失，请尽快粘贴"
EMPTY_TEXT_MESSAGE = "请复制内容后解析"


class ExtractSession:
    """
    画面1枚分の状態（入力テキストと抽出結果）を保持する。

    records は解析のたびに丸ごと作り直し、reset で空に戻す。
    コピー操作は新しいリストに差し替えるだけで、途中状態は外に見せない。
    """

    def __init__(self, text: str = "") -> None:
        self.text: str = text
        self.records: List[LineRecord] = []

    @property
    def hint(self) -> str:
        return COPY_HINT if self.records else ""

    def analyze(self) -> List[LineRecord]:
        if not self.text:
            raise EmptyTextError(EMPTY_TEXT_MESSAGE)

        self.records = extract(self.text)
        logger.info("analyze: %d record(s)", len(self.records))
        return self.records

    def reset(self) -> None:
        self.text = ""
        self.records = []

    def copy(self, index: int, field: CopyField | str, writer: ClipboardWriter) -> LineRecord:
        """index 番目の項目をコピーし、更新後のレコードを返す。"""
        self.records = copy_field(self.records, index, field, writer)
        return self.records[index]
