# src/openpasteview/parser/line_parser.py
from __future__ import annotations

import logging
import re
from typing import List, Optional

from openpasteview.models.line_record import LineRecord

logger = logging.getLogger("openpasteview.parser")

# ID（数字） + 区切り（数字以外 1文字以上） + 金額（数字） + 単位（w / k、任意）
# \d は ASCII の 0-9 のみ。全角数字は区切り扱い。
RE_LINE = re.compile(r"(\d+)\D+(\d+)([wk]?)", re.ASCII)

# 数字 → 区切り → 数字 の並びがあるかだけを見る事前チェック。
# 区切りのない長い数字列で RE_LINE が開始位置ごとにバックトラックするのを避ける
RE_HAS_PAIR = re.compile(r"\d\D+\d", re.ASCII)

UNIT_MULTIPLIERS = {
    "w": 10_000,   # 万
    "k": 1_000,    # 千
}

# 符号付き 64bit 整数の上限。これを超える金額の行は取り込まない
AMOUNT_MAX = 2**63 - 1
AMOUNT_MAX_DIGITS = len(str(AMOUNT_MAX))


def _warn_out_of_range(record_id: str, raw_amount: str, unit: str) -> None:
    logger.warning(
        "amount out of range, line skipped: id=%s amount=%d digit(s)%s",
        record_id,
        len(raw_amount),
        f" unit={unit}" if unit else "",
    )


def parse_line(line: str) -> Optional[LineRecord]:
    """
    1行から (ID, 金額) を取り出す。該当しない行は None。

    行内に候補が複数あっても、左から最初に見つかった1組だけを使う。
    """
    if RE_HAS_PAIR.search(line) is None:
        return None

    m = RE_LINE.search(line)
    if m is None:
        return None

    record_id, raw_amount, unit = m.groups()

    # 先頭の 0 を除いた桁数だけで上限超えが分かる金額は int に変換しない
    # （桁数が多すぎると int() 自体が ValueError になる）
    digits = raw_amount.lstrip("0") or "0"
    if len(digits) > AMOUNT_MAX_DIGITS:
        _warn_out_of_range(record_id, raw_amount, unit)
        return None

    amount = int(digits, 10) * UNIT_MULTIPLIERS.get(unit, 1)
    if amount > AMOUNT_MAX:
        _warn_out_of_range(record_id, raw_amount, unit)
        return None

    return LineRecord(id=record_id, amount=amount)


def extract(text: str) -> List[LineRecord]:
    """
    貼り付けテキスト全体を "\\n" で行に分割し、LineRecord のリストに変換する。

    - 空文字なら空リスト
    - パターンに合わない行（空行・空白のみの行を含む）は黙って読み飛ばす
    - 出力順は入力行の順
    """
    records: List[LineRecord] = []
    if not text:
        return records

    lines = text.split("\n")
    for line in lines:
        rec = parse_line(line)
        if rec is not None:
            records.append(rec)

    logger.debug("extracted %d record(s) from %d line(s)", len(records), len(lines))
    return records
