"""
日誌模組
統一的 logging 設定，同時輸出到 console 與 reports/ 下的檔案。

環境變數:
    LOG_LEVEL: console 日誌等級 (預設 INFO)
    LOG_JSON: 設為 "1" 另外輸出 JSON 結構化日誌檔
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone

from config.config import Config

LOG_DIR = Config.REPORT_DIR
LOG_DIR.mkdir(parents=True, exist_ok=True)

LOGGER_NAME = "editor_tour_test"


class JsonFormatter(logging.Formatter):
    """JSON 結構化日誌格式器"""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "line": record.lineno,
        }
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


def _create_logger() -> logging.Logger:
    _logger = logging.getLogger(LOGGER_NAME)
    _logger.setLevel(logging.DEBUG)
    _logger.propagate = False
    if _logger.handlers:
        return _logger

    console_level = getattr(
        logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO
    )
    fmt = logging.Formatter(
        "[%(asctime)s] %(levelname)-7s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    _logger.addHandler(console)

    file_handler = logging.FileHandler(LOG_DIR / "test.log", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(fmt)
    _logger.addHandler(file_handler)

    if os.getenv("LOG_JSON", "").strip() == "1":
        json_handler = logging.FileHandler(LOG_DIR / "test.json.log", encoding="utf-8")
        json_handler.setLevel(logging.DEBUG)
        json_handler.setFormatter(JsonFormatter())
        _logger.addHandler(json_handler)

    return _logger


logger = _create_logger()
