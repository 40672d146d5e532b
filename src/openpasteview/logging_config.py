# src/openpasteview/logging_config.py
"""コンソール + ローテーションファイルのログ設定。"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional


def setup_logging(level: str = "INFO", log_dir: Optional[Path] = None) -> logging.Logger:
    """
    "openpasteview" ロガーを設定して返す。

    - コンソール: level 以上
    - log_dir 指定時のみ: openpasteview.log (1MB x 3世代, DEBUG 以上)
    """
    root_logger = logging.getLogger("openpasteview")
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(getattr(logging, level.upper(), logging.INFO))
    console.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root_logger.addHandler(console)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "openpasteview.log",
            maxBytes=1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [%(filename)s:%(lineno)d] %(message)s"
        ))
        root_logger.addHandler(file_handler)

    return root_logger
