"""
報告開啟工具
測試結束後用系統預設瀏覽器開啟靜態報告 (reports/index.html)。
報告本身由外部截圖比對工具產生，這裡只負責開啟。
"""

import webbrowser
from pathlib import Path

from config.config import Config
from utils.logger import logger


def open_report(report_file: Path | None = None) -> bool:
    """
    開啟 HTML 報告。

    Returns:
        True = 已交給瀏覽器開啟, False = 報告不存在或未啟用
    """
    if not Config.OPEN_REPORT:
        return False
    report_file = report_file or Config.REPORT_DIR / "index.html"
    if not report_file.exists():
        logger.info(f"找不到報告，略過開啟: {report_file}")
        return False
    logger.info(f"開啟報告: {report_file}")
    return webbrowser.open(report_file.resolve().as_uri())
