# src/openpasteview/config.py
"""環境変数（と .env）から読み込むアプリ設定。"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_WINDOW_WIDTH = 420
DEFAULT_WINDOW_HEIGHT = 760


@dataclass
class Settings:
    log_level: str = "INFO"
    log_dir: Optional[Path] = None      # None ならファイルには出力しない
    window_width: int = DEFAULT_WINDOW_WIDTH
    window_height: int = DEFAULT_WINDOW_HEIGHT


_settings: Settings | None = None


def _get_int(key: str, default: int) -> int:
    value = os.getenv(key, "").strip()
    if not value:
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def get_settings() -> Settings:
    """.env → 環境変数の順で設定を読み込む（初回のみ、以降はキャッシュ）。"""
    global _settings
    if _settings is not None:
        return _settings

    load_dotenv()

    log_dir = os.getenv("OPENPASTEVIEW_LOG_DIR", "").strip()
    _settings = Settings(
        log_level=os.getenv("OPENPASTEVIEW_LOG_LEVEL", "INFO").strip() or "INFO",
        log_dir=Path(log_dir) if log_dir else None,
        window_width=_get_int("OPENPASTEVIEW_WINDOW_WIDTH", DEFAULT_WINDOW_WIDTH),
        window_height=_get_int("OPENPASTEVIEW_WINDOW_HEIGHT", DEFAULT_WINDOW_HEIGHT),
    )
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
