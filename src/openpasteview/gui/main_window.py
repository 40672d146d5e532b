# src/openpasteview/gui/main_window.py

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtGui import QAction, QFont
from PySide6.QtWidgets import (
    QApplication,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from openpasteview.config import Settings, get_settings
from openpasteview.errors import EmptyTextError, IndexOutOfRange
from openpasteview.gui.record_table_widget import RecordTableWidget
from openpasteview.logic.session import ExtractSession
from openpasteview.models.line_record import CopyField
from openpasteview.text_loader import load_text_file

logger = logging.getLogger("openpasteview.gui")


class QtClipboardWriter:
    """ClipboardWriter の Qt 実装。"""

    def set_text(self, value: str) -> None:
        QApplication.clipboard().setText(value)


class MainWindow(QMainWindow):
    """
    OpenPasteView のメインウィンドウ。

    上: 文本内容（貼り付け欄 + 解析 / 重置 ボタン）
    下: 解析内容（客户ID / 充值金额 の一覧、各項目にコピーボタン）
    """

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or get_settings()
        self.setWindowTitle("OpenPasteView - 充值记录解析")
        self.resize(self._settings.window_width, self._settings.window_height)

        self._session = ExtractSession()
        self._clipboard = QtClipboardWriter()

        self._create_central_widgets()
        self._create_actions()
        self._create_menus()
        self._create_status_bar()

    # ─────────────────────────────
    # UI 構築
    # ─────────────────────────────
    def _create_central_widgets(self) -> None:
        root = QWidget(self)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(8)

        # ── 文本内容 ─────────────────────
        layout.addWidget(self._section_title("文本内容", root))

        self.text_input = QPlainTextEdit(root)
        self.text_input.setPlaceholderText("将内容复制在此处")
        self.text_input.setMinimumHeight(150)
        layout.addWidget(self.text_input)

        buttons = QHBoxLayout()
        buttons.setSpacing(15)
        self.analyze_btn = QPushButton("解析", root)
        self.analyze_btn.clicked.connect(self._on_analyze)
        self.reset_btn = QPushButton("重置", root)
        self.reset_btn.clicked.connect(self._on_reset)
        buttons.addWidget(self.analyze_btn)
        buttons.addWidget(self.reset_btn)
        buttons.addStretch(1)
        layout.addLayout(buttons)

        # ── 解析内容 ─────────────────────
        layout.addSpacing(12)
        layout.addWidget(self._section_title("解析内容", root))

        self.hint_label = QLabel("", root)
        self.hint_label.setStyleSheet("color: #f53f3f;")
        layout.addWidget(self.hint_label)

        self.record_table = RecordTableWidget(root, on_copy=self._on_copy)
        layout.addWidget(self.record_table, 1)

        self.setCentralWidget(root)

    def _section_title(self, text: str, parent: QWidget) -> QLabel:
        label = QLabel(text, parent)
        font = label.font()
        font.setPointSize(16)
        font.setWeight(QFont.DemiBold)
        label.setFont(font)
        return label

    def _create_actions(self) -> None:
        # テキストファイルを開く
        self.open_action = QAction("打开(&O)...", self)
        self.open_action.setShortcut("Ctrl+O")
        self.open_action.triggered.connect(self._on_open_file)

        # 終了
        self.exit_action = QAction("退出(&Q)", self)
        self.exit_action.setShortcut("Ctrl+Q")
        self.exit_action.triggered.connect(self.close)

    def _create_menus(self) -> None:
        file_menu = self.menuBar().addMenu("文件(&F)")
        file_menu.addAction(self.open_action)
        file_menu.addSeparator()
        file_menu.addAction(self.exit_action)

    def _create_status_bar(self) -> None:
        self.setStatusBar(QStatusBar(self))
        self.statusBar().showMessage("请粘贴内容后点击「解析」")

    # ─────────────────────────────
    # イベント
    # ─────────────────────────────
    def _on_analyze(self) -> None:
        self._session.text = self.text_input.toPlainText()
        try:
            records = self._session.analyze()
        except EmptyTextError as e:
            QMessageBox.warning(self, "解析", str(e))
            return

        self._refresh_records()
        self.statusBar().showMessage(f"解析完成：{len(records)} 条记录")

    def _on_reset(self) -> None:
        self._session.reset()
        self.text_input.clear()
        self._refresh_records()
        self.statusBar().clearMessage()

    def _on_copy(self, index: int, field: CopyField) -> None:
        try:
            rec = self._session.copy(index, field, self._clipboard)
        except IndexOutOfRange as e:
            # 一覧と状態がずれている場合のみ起こりうる
            logger.error("copy failed: %s", e)
            self.statusBar().showMessage(f"复制失败：{e}")
            return

        self.record_table.update_record(index, rec)
        self.statusBar().showMessage(f"已复制：{rec.value_of(field)}")

    def _on_open_file(self) -> None:
        path_str, _ = QFileDialog.getOpenFileName(
            self,
            "打开文本文件",
            "",
            "文本文件 (*.txt *.csv);;所有文件 (*.*)",
        )
        if not path_str:
            return

        self._load_text_file(Path(path_str))

    def _load_text_file(self, path: Path) -> None:
        """ファイルの内容を貼り付け欄にセットする（解析はしない）。"""
        try:
            text, encoding = load_text_file(path)
        except OSError as e:
            self.statusBar().showMessage(f"文件读取错误：{e}")
            return

        self.text_input.setPlainText(text)
        self.statusBar().showMessage(f"已读取 {path.name}（编码：{encoding}）")

    def _refresh_records(self) -> None:
        self.record_table.set_records(self._session.records)
        self.hint_label.setText(self._session.hint)
