"""
截圖工具
每個測試結束後截圖，方便對照報告與 debug。
"""

import re
from datetime import datetime

from config.config import Config
from utils.logger import logger

_UNSAFE_CHARS = re.compile(r"[^\w.-]+")


def _safe_name(name: str) -> str:
    """把測試名稱（可能含空白、引號、[]）轉成可用的檔名"""
    return _UNSAFE_CHARS.sub("_", name).strip("_") or "screenshot"


def take_screenshot(driver, name: str) -> str:
    """
    擷取瀏覽器截圖並儲存到 screenshots 目錄。

    Args:
        driver: remote WebDriver 實例
        name: 截圖名稱（不含副檔名）

    Returns:
        截圖檔案的完整路徑
    """
    Config.SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    filename = f"{_safe_name(name)}_{timestamp}.png"
    filepath = Config.SCREENSHOT_DIR / filename
    driver.save_screenshot(str(filepath))
    logger.info(f"截圖已儲存: {filepath}")
    return str(filepath)
