"""Tests for text file decoding."""

import codecs

import pytest

from openpasteview.parser.line_parser import extract
from openpasteview.text_loader import decode_text, load_text_file

CHINESE_TEXT = "\n".join(
    f"客户{i:04d} 本次充值金额为 {i}w 请尽快处理，谢谢您的支持与配合" for i in range(1, 21)
)


def _no_detection(monkeypatch, encoding=None, confidence=0.0):
    monkeypatch.setattr(
        "openpasteview.text_loader.chardet.detect",
        lambda raw: {"encoding": encoding, "confidence": confidence},
    )


class TestDecodeText:
    def test_empty(self):
        assert decode_text(b"") == ("", "utf-8")

    def test_ascii(self):
        text, _ = decode_text(b"1001 a 5w\n")
        assert text == "1001 a 5w\n"

    def test_utf8_bom_is_stripped(self):
        text, encoding = decode_text(codecs.BOM_UTF8 + "1001 充值 5w".encode("utf-8"))
        assert text == "1001 充值 5w"
        assert encoding == "utf-8-sig"

    def test_utf8_chinese(self):
        text, _ = decode_text(CHINESE_TEXT.encode("utf-8"))
        assert text == CHINESE_TEXT

    def test_falls_back_to_gb18030(self, monkeypatch):
        _no_detection(monkeypatch)
        text, encoding = decode_text(CHINESE_TEXT.encode("gb18030"))
        assert text == CHINESE_TEXT
        assert encoding == "gb18030"

    def test_unknown_codec_name_is_skipped(self, monkeypatch):
        _no_detection(monkeypatch, "no-such-codec", confidence=0.99)
        text, encoding = decode_text("1001 充值 5w".encode("gb18030"))
        assert text == "1001 充值 5w"
        assert encoding == "gb18030"

    def test_short_gbk_text(self):
        # 短い GBK テキストは chardet の推定が当てにならない
        text, _ = decode_text("1001 充值 5w\n1002 充值 3k".encode("gb18030"))
        assert text == "1001 充值 5w\n1002 充值 3k"
        assert [(r.id, r.amount) for r in extract(text)] == [("1001", 50000), ("1002", 3000)]

    def test_low_confidence_guess_is_ignored(self, monkeypatch):
        _no_detection(monkeypatch, "cp949", confidence=0.066)
        text, encoding = decode_text("1001 充值 5w".encode("gb18030"))
        assert text == "1001 充值 5w"
        assert encoding == "gb18030"

    def test_undecodable_uses_replacement(self, monkeypatch):
        _no_detection(monkeypatch)
        text, encoding = decode_text(b"\xff\xff")
        assert encoding == "utf-8"
        assert "�" in text


class TestLoadTextFile:
    def test_load_and_extract(self, tmp_path):
        path = tmp_path / "paste.txt"
        path.write_bytes(CHINESE_TEXT.encode("utf-8"))

        text, _ = load_text_file(path)
        records = extract(text)

        assert len(records) == 20
        assert records[0].id == "0001"
        assert records[0].amount == 10000

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_text_file(tmp_path / "missing.txt")
