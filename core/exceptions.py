"""
自訂 Exception 體系

統一的錯誤處理階層，讓每種失敗都有明確的分類與訊息。
上層可以 catch 大類別 (如 BrowserTestError)，
也可以精準 catch 子類別 (如 ElementNotFoundError)。

Exception 樹：
    BrowserTestError
    ├── DriverError
    │   └── DriverConnectionError
    ├── PageError
    │   ├── ElementNotFoundError
    │   ├── ElementNotClickableError
    │   ├── PageNotLoadedError
    │   └── ScriptExecutionError
    └── TestDataError
        └── DataFileNotFoundError
"""


class BrowserTestError(Exception):
    """框架所有例外的基底，catch 這個就能攔截一切框架錯誤"""

    def __init__(self, message: str = "", context: dict | None = None):
        self.context = context or {}
        super().__init__(message)


# ── Driver 相關 ──

class DriverError(BrowserTestError):
    """Driver 相關錯誤"""


class DriverConnectionError(DriverError):
    """無法連接到 Macaca Server 或建立 session 失敗"""

    def __init__(self, url: str = "", original: Exception | None = None):
        self.original = original
        msg = f"無法連接到 Macaca Server: {url}"
        if original:
            msg += f" ({type(original).__name__}: {original})"
        super().__init__(msg, context={"url": url})


# ── Page / Element 相關 ──

class PageError(BrowserTestError):
    """頁面操作相關錯誤"""


class ElementNotFoundError(PageError):
    """找不到指定元素"""

    def __init__(self, locator=(), timeout: float = 0):
        msg = f"找不到元素: {locator}"
        if timeout:
            msg += f" (等待 {timeout}s)"
        super().__init__(msg, context={"locator": locator, "timeout": timeout})


class ElementNotClickableError(PageError):
    """元素無法點擊"""

    def __init__(self, locator=()):
        super().__init__(f"元素無法點擊: {locator}", context={"locator": locator})


class PageNotLoadedError(PageError):
    """頁面未載入完成"""

    def __init__(self, page_name: str = "", timeout: float = 0):
        msg = f"頁面未載入: {page_name}" if page_name else "頁面未載入"
        if timeout:
            msg += f" (等待 {timeout}s)"
        super().__init__(msg, context={"page_name": page_name, "timeout": timeout})


class ScriptExecutionError(PageError):
    """瀏覽器端 script 執行失敗"""

    def __init__(self, script: str = "", original: Exception | None = None):
        self.original = original
        msg = "Script 執行失敗"
        if original:
            msg += f" ({type(original).__name__}: {original})"
        super().__init__(msg, context={"script": script})


# ── Test Data 相關 ──

class TestDataError(BrowserTestError):
    """測試資料相關錯誤"""

    __test__ = False


class DataFileNotFoundError(TestDataError):
    """找不到測試資料檔案"""

    def __init__(self, path: str = ""):
        super().__init__(f"找不到測試資料: {path}", context={"path": path})
