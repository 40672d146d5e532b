# src/openpasteview/text_loader.py
from __future__ import annotations

import codecs
import logging
from pathlib import Path
from typing import List, Tuple

import chardet

logger = logging.getLogger("openpasteview.loader")

# utf-8 で読めなかったときに試すエンコーディング（chardet の推定はこの前に挟む）
FALLBACK_ENCODINGS = ["gb18030"]

# これ未満の確信度の推定は使わない。短い GBK テキストでは CP949 などを低確信度で返し、
# エラーなくデコードできてしまうため
MIN_CONFIDENCE = 0.5


def _candidate_encodings(raw: bytes) -> List[str]:
    detected = chardet.detect(raw)
    encoding = detected.get("encoding")
    confidence = detected.get("confidence") or 0.0
    logger.debug("chardet: %s (confidence=%s)", encoding, confidence)

    candidates: List[str] = ["utf-8"]
    if encoding and confidence >= MIN_CONFIDENCE:
        candidates.append(encoding.lower())
    for enc in FALLBACK_ENCODINGS:
        if enc not in candidates:
            candidates.append(enc)
    return candidates


def decode_text(raw: bytes) -> Tuple[str, str]:
    """
    バイト列をテキストに変換し、(テキスト, 使ったエンコーディング) を返す。

    - 先頭の UTF-8 BOM は除去
    - utf-8 → chardet の推定（確信度が十分なときのみ） → gb18030 の順に試す
    - どれも失敗したら utf-8 で置換文字入りでデコード
    """
    if raw.startswith(codecs.BOM_UTF8):
        return raw[len(codecs.BOM_UTF8):].decode("utf-8", errors="replace"), "utf-8-sig"

    if not raw:
        return "", "utf-8"

    for enc in _candidate_encodings(raw):
        try:
            return raw.decode(enc), enc
        except (UnicodeDecodeError, LookupError):
            continue

    logger.warning("no encoding decoded cleanly, falling back to utf-8 with replacement")
    return raw.decode("utf-8", errors="replace"), "utf-8"


def load_text_file(path: Path) -> Tuple[str, str]:
    """テキストファイルを読み込む。OSError は呼び出し側に任せる。"""
    raw = path.read_bytes()
    text, encoding = decode_text(raw)
    logger.info("loaded %s (%d bytes, %s)", path.name, len(raw), encoding)
    return text, encoding
