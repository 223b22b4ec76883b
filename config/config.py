"""
設定管理模組
統一管理 Macaca server、瀏覽器能力 (capabilities)、等待與報告等設定。
支援透過環境變數覆蓋預設值，方便 CI/CD 整合。
支援 capabilities 結構驗證，提前發現設定錯誤。
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

# capabilities 必填欄位定義
_REQUIRED_CAPS = ["platformName", "browserName"]

# 支援的桌面瀏覽器
SUPPORTED_BROWSERS = ("electron", "puppeteer", "chrome", "firefox", "safari")

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 AppleWebKit/537.36 (KHTML, like Gecko) Chrome/59.0 "
    "Safari/537.36 Macaca Custom UserAgent"
)


class ConfigValidationError(Exception):
    """Capabilities 設定驗證失敗"""

    def __init__(self, errors: list[str]):
        self.errors = errors
        msg = "Capabilities 驗證失敗:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(msg)


class Config:
    """框架全域設定"""

    # Macaca Server
    MACACA_HOST = os.getenv("MACACA_HOST", "localhost")
    MACACA_SERVER_PORT = int(os.getenv("MACACA_SERVER_PORT", "3456"))

    # 瀏覽器
    BROWSER = os.getenv("browser", "electron").lower()
    WINDOW_WIDTH = int(os.getenv("WINDOW_WIDTH", "1024"))
    WINDOW_HEIGHT = int(os.getenv("WINDOW_HEIGHT", "768"))
    USER_AGENT = os.getenv("USER_AGENT", DEFAULT_USER_AGENT)
    DEVICE_SCALE_FACTOR = 2

    # 登入帳號（請依部署環境提供）
    LOGIN_URL = os.getenv("LOGIN_URL", "")
    LOGIN_EMAIL = os.getenv("LOGIN_EMAIL", "{YOUR_EMAIL}")
    LOGIN_PASSWORD = os.getenv("LOGIN_PASSWORD", "{YOUR_PASSWORD}")

    # 超時設定 (秒)
    WAIT_TIMEOUT = float(os.getenv("WAIT_TIMEOUT", "10"))
    POLL_INTERVAL = float(os.getenv("POLL_INTERVAL", "0.1"))

    # 截圖與報告
    SCREENSHOT_DIR = BASE_DIR / "screenshots"
    REPORT_DIR = BASE_DIR / "reports"
    OPEN_REPORT = os.getenv("OPEN_REPORT", "1").strip() == "1"

    @classmethod
    def server_url(cls) -> str:
        return f"http://{cls.MACACA_HOST}:{cls.MACACA_SERVER_PORT}"

    @classmethod
    def build_capabilities(cls, browser: str | None = None, validate: bool = True) -> dict:
        """
        組出桌面瀏覽器的 desired capabilities。

        Args:
            browser: 瀏覽器名稱，預設讀取 Config.BROWSER
            validate: 是否驗證必填欄位（預設 True）

        Returns:
            capabilities dict

        Raises:
            ConfigValidationError: 必填欄位缺失或瀏覽器不支援
        """
        browser = (browser or cls.BROWSER).lower()
        caps = {
            "platformName": "desktop",
            "browserName": browser,
            "userAgent": cls.USER_AGENT,
            "deviceScaleFactor": cls.DEVICE_SCALE_FACTOR,
        }

        if validate:
            cls.validate_caps(caps)

        return caps

    @classmethod
    def validate_caps(cls, caps: dict) -> list[str]:
        """
        驗證 capabilities 結構。

        Returns:
            警告訊息列表

        Raises:
            ConfigValidationError: 必填欄位缺失或瀏覽器不支援時拋出
        """
        errors: list[str] = []
        warnings: list[str] = []

        for key in _REQUIRED_CAPS:
            if not caps.get(key):
                errors.append(f"缺少必填欄位: {key}")

        browser = caps.get("browserName")
        if browser and browser not in SUPPORTED_BROWSERS:
            errors.append(
                f"不支援的瀏覽器: {browser} (支援: {', '.join(SUPPORTED_BROWSERS)})"
            )

        if "userAgent" not in caps:
            warnings.append("建議填寫欄位: userAgent")

        if errors:
            raise ConfigValidationError(errors)

        return warnings
