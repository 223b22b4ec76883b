"""
Driver 生命週期管理

負責建立、取得、關閉連到 Macaca server 的 remote driver，確保每個測試 session 獨立。

支援：
- 執行緒安全（平行測試時每個 worker 獨立 driver）
- Macaca server 連線前健康檢查
- server 連不上或建立 session 失敗直接拋出 DriverConnectionError（不重試）
- session 建立後的設定失敗時先關閉 session 再拋出
"""

import threading
import urllib.error
import urllib.request

from appium import webdriver
from appium.options.common import AppiumOptions

from config.config import Config
from core.exceptions import DriverConnectionError
from utils.logger import logger


class DriverManager:
    """
    管理 remote WebDriver 的建立與銷毀

    使用 thread-local storage 確保平行測試時各 worker 的 driver 互不干擾。
    """

    _local = threading.local()

    # ── Server 健康檢查 ──

    @classmethod
    def health_check(cls, url: str | None = None, timeout: float = 5.0) -> bool:
        """
        檢查 Macaca server 是否可連線。

        Args:
            url: server URL，預設讀取 Config
            timeout: 連線逾時秒數

        Returns:
            True = server 可用, False = 不可用
        """
        url = url or Config.server_url()
        status_url = f"{url}/wd/hub/status"
        try:
            req = urllib.request.Request(status_url, method="GET")
            with urllib.request.urlopen(req, timeout=timeout) as resp:
                return resp.status == 200
        except (urllib.error.URLError, OSError, TimeoutError):
            return False

    # ── Driver 建立 ──

    @classmethod
    def create_driver(cls, browser: str | None = None) -> webdriver.Remote:
        """
        建立桌面瀏覽器 session 並設定視窗大小。

        Args:
            browser: 瀏覽器名稱，預設讀取 Config.BROWSER

        Returns:
            remote WebDriver 實例

        Raises:
            ConfigValidationError: capabilities 不合法
            DriverConnectionError: 無法連線或 session 建立失敗
        """
        caps = Config.build_capabilities(browser)
        options = AppiumOptions().load_capabilities(caps)
        server_url = Config.server_url()
        url = f"{server_url}/wd/hub"

        if not cls.health_check(server_url):
            raise DriverConnectionError(server_url)

        try:
            drv = webdriver.Remote(command_executor=url, options=options)
        except Exception as e:
            raise DriverConnectionError(url, e)

        # 先存入 thread-local，後續設定失敗時 quit_driver 才關得到
        cls._local.driver = drv
        try:
            drv.set_window_size(Config.WINDOW_WIDTH, Config.WINDOW_HEIGHT)
        except Exception:
            logger.error("設定視窗大小失敗，關閉 session")
            cls.quit_driver()
            raise

        logger.info(f"Driver 已建立: {caps['browserName']} -> {url}")

        return drv

    @classmethod
    def quit_driver(cls) -> None:
        """安全關閉當前執行緒的 driver"""
        drv = getattr(cls._local, "driver", None)
        if drv is not None:
            try:
                drv.quit()
            finally:
                cls._local.driver = None
            logger.info("Driver 已關閉")
