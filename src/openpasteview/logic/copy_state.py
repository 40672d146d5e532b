# src/openpasteview/logic/copy_state.py

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Protocol, Sequence

from openpasteview.errors import IndexOutOfRange
from openpasteview.models.line_record import CopyField, LineRecord

logger = logging.getLogger("openpasteview.copy")


class ClipboardWriter(Protocol):
    """クリップボードへの書き込み口。GUI 側では QClipboard をラップする。"""

    def set_text(self, value: str) -> None:
        ...


def _check_index(records: Sequence[LineRecord], index: int) -> None:
    # 負のインデックスも範囲外扱い（末尾からの参照はしない）
    if not 0 <= index < len(records):
        raise IndexOutOfRange(index, len(records))


def mark_copied(
    records: Sequence[LineRecord],
    index: int,
    field: CopyField | str,
) -> List[LineRecord]:
    """
    index 番目のレコードの指定項目を「コピー済み」にした新しいリストを返す。

    - 入力のリスト・レコードは変更しない
    - 既にコピー済みならそのまま（トグルで戻ることはない）
    - 範囲外の index は IndexOutOfRange
    """
    field = CopyField(field)
    _check_index(records, index)

    target = records[index]
    if field is CopyField.ID:
        updated = replace(target, id_copied=True)
    else:
        updated = replace(target, amount_copied=True)

    result = list(records)
    result[index] = updated
    return result


def copy_field(
    records: Sequence[LineRecord],
    index: int,
    field: CopyField | str,
    writer: ClipboardWriter,
) -> List[LineRecord]:
    """
    指定項目の値をクリップボードに書き込み、コピー済みフラグを立てたリストを返す。
    index が不正な場合はクリップボードに触れずに例外を送出する。
    """
    field = CopyField(field)
    _check_index(records, index)

    value = records[index].value_of(field)
    writer.set_text(value)
    logger.info("copied %s of record #%d", field.value, index)

    return mark_copied(records, index, field)
