# src/openpasteview/gui/record_table_widget.py

from __future__ import annotations
from typing import Callable, Optional, Sequence

from PySide6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QPushButton,
    QSizePolicy,
    QTableWidget,
    QWidget,
)

from openpasteview.models.line_record import CopyField, LineRecord

COLUMN_FIELDS = [CopyField.ID, CopyField.AMOUNT]
COLUMN_LABELS = ["客户ID", "充值金额"]


class RecordTableWidget(QTableWidget):
    """
    抽出結果の一覧表。

    1行 = 1レコード、列は 客户ID / 充值金额。
    各セルに値とコピーボタンを並べ、コピー済みの項目はボタンを消す。
    """

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        *,
        on_copy: Callable[[int, CopyField], None],
    ) -> None:
        super().__init__(0, len(COLUMN_FIELDS), parent)
        self._on_copy = on_copy

        self.setHorizontalHeaderLabels(COLUMN_LABELS)
        self.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.verticalHeader().setVisible(False)
        self.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.setSelectionMode(QAbstractItemView.NoSelection)

    def set_records(self, records: Sequence[LineRecord]) -> None:
        """レコード一覧を丸ごと描き直す。"""
        self.clearContents()
        self.setRowCount(len(records))

        for row, rec in enumerate(records):
            for col, field in enumerate(COLUMN_FIELDS):
                self.setCellWidget(row, col, self._build_cell(row, rec, field))

    def update_record(self, row: int, rec: LineRecord) -> None:
        """1行分だけ差し替える（コピー直後のボタン消去用）。"""
        for col, field in enumerate(COLUMN_FIELDS):
            self.setCellWidget(row, col, self._build_cell(row, rec, field))

    def _build_cell(self, row: int, rec: LineRecord, field: CopyField) -> QWidget:
        cell = QWidget(self)
        layout = QHBoxLayout(cell)
        layout.setContentsMargins(6, 2, 6, 2)
        layout.setSpacing(6)

        label = QLabel(rec.value_of(field), cell)
        label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        layout.addWidget(label)

        # コピー済みならボタンは出さない
        if not rec.is_copied(field):
            btn = QPushButton("复制", cell)
            btn.setObjectName(f"copy_{field.value}_{row}")
            btn.clicked.connect(lambda _checked=False, r=row, f=field: self._on_copy(r, f))
            layout.addWidget(btn)

        return cell
