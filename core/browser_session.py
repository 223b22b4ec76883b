"""
Browser Session 基底類別

包住一個 remote WebDriver session，提供等待、定位、互動與執行 script 的基本操作。
EditorActions 在此之上組合出有語意的步驟。

提供：
- 元素等待（可指定 timeout / 輪詢間隔）
- 點擊、輸入、讀取 computed style
- 參數化 script 執行（值一律以 arguments 傳入，不拼接進 script 字串）
- 頁面就緒等待（document.readyState / URL / 元素消失）
"""

from selenium.common.exceptions import (
    ElementClickInterceptedException,
    ElementNotInteractableException,
    JavascriptException,
    NoSuchElementException,
    TimeoutException,
)
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from config.config import Config
from core.exceptions import (
    ElementNotClickableError,
    ElementNotFoundError,
    PageError,
    PageNotLoadedError,
    ScriptExecutionError,
)
from core.locator import Locator
from utils.logger import logger

_READY_STATE_SCRIPT = "return document.readyState;"


class BrowserSession:
    """
    Remote browser session 包裝

    所有操作都是同步、依序執行；失敗直接拋出，不在本地重試。
    """

    def __init__(self, driver, timeout: float | None = None, interval: float | None = None):
        self.driver = driver
        self.timeout = Config.WAIT_TIMEOUT if timeout is None else timeout
        self.interval = Config.POLL_INTERVAL if interval is None else interval

    def _wait(self, timeout: float | None = None, interval: float | None = None) -> WebDriverWait:
        return WebDriverWait(
            self.driver,
            self.timeout if timeout is None else timeout,
            poll_frequency=self.interval if interval is None else interval,
        )

    # ── 導航 ──

    def get(self, url: str) -> "BrowserSession":
        """開啟網址並等待頁面就緒"""
        logger.info(f"開啟網址: {url}")
        self.driver.get(url)
        self.wait_until_ready()
        return self

    def set_window_size(self, width: int, height: int) -> "BrowserSession":
        self.driver.set_window_size(width, height)
        return self

    @property
    def current_url(self) -> str:
        return self.driver.current_url

    # ── 元素等待與查找 ──

    def wait_for_element(
        self,
        locator: Locator,
        timeout: float | None = None,
        interval: float | None = None,
    ) -> WebElement:
        """等待元素出現並回傳；逾時拋出 ElementNotFoundError"""
        timeout = self.timeout if timeout is None else timeout
        logger.debug(f"等待元素: {locator}")
        try:
            return self._wait(timeout, interval).until(
                EC.presence_of_element_located(locator.as_tuple())
            )
        except TimeoutException:
            raise ElementNotFoundError(locator, timeout)

    def wait_for_elements(
        self,
        locator: Locator,
        timeout: float | None = None,
        interval: float | None = None,
    ) -> list[WebElement]:
        """等待至少一個元素出現並回傳列表"""
        timeout = self.timeout if timeout is None else timeout
        try:
            return self._wait(timeout, interval).until(
                EC.presence_of_all_elements_located(locator.as_tuple())
            )
        except TimeoutException:
            raise ElementNotFoundError(locator, timeout)

    def find_element(self, locator: Locator) -> WebElement:
        """立即查找元素（不等待）"""
        try:
            return self.driver.find_element(*locator.as_tuple())
        except NoSuchElementException:
            raise ElementNotFoundError(locator)

    # ── 元素操作 ──

    def click(self, element: WebElement, description=None) -> None:
        """點擊元素"""
        logger.info(f"點擊元素: {description or element}")
        try:
            element.click()
        except (ElementClickInterceptedException, ElementNotInteractableException):
            raise ElementNotClickableError(description or element)

    def send_keys(self, element: WebElement, text: str, description=None) -> None:
        logger.info(f"輸入文字 -> {description or element}")
        element.send_keys(text)

    def get_computed_css(self, element: WebElement, name: str) -> str:
        """讀取元素的 computed style"""
        return element.value_of_css_property(name)

    # ── Script ──

    def execute_script(self, script: str, *args):
        """
        執行瀏覽器端 script。

        參數透過 WebDriver 的 arguments 傳入（script 內以 arguments[0]... 取用），
        不做字串拼接，因此 selector 或網址含引號也不會破壞 script。
        """
        try:
            return self.driver.execute_script(script, *args)
        except JavascriptException as e:
            raise ScriptExecutionError(script, e)

    # ── 就緒等待 ──

    def wait_until_ready(self, timeout: float | None = None) -> None:
        """等待 document.readyState 變為 complete"""
        timeout = self.timeout if timeout is None else timeout
        try:
            self._wait(timeout).until(
                lambda d: d.execute_script(_READY_STATE_SCRIPT) == "complete"
            )
        except TimeoutException:
            raise PageNotLoadedError(self.driver.current_url, timeout)

    def wait_for_url_change(self, old_url: str, timeout: float | None = None) -> None:
        timeout = self.timeout if timeout is None else timeout
        try:
            self._wait(timeout).until(EC.url_changes(old_url))
        except TimeoutException:
            raise PageNotLoadedError(f"仍停留在 {old_url}", timeout)

    def wait_for_url_contains(self, fragment: str, timeout: float | None = None) -> None:
        timeout = self.timeout if timeout is None else timeout
        try:
            self._wait(timeout).until(EC.url_contains(fragment))
        except TimeoutException:
            raise PageNotLoadedError(f"網址未包含 {fragment}", timeout)

    def wait_until_gone(self, locator: Locator, timeout: float | None = None) -> None:
        """等待元素消失（不存在或不可見）"""
        timeout = self.timeout if timeout is None else timeout
        try:
            self._wait(timeout).until(
                EC.invisibility_of_element_located(locator.as_tuple())
            )
        except TimeoutException:
            raise PageError(
                f"元素未消失: {locator} (等待 {timeout}s)",
                context={"locator": locator, "timeout": timeout},
            )

    # ── Session 狀態 ──

    def quit(self) -> None:
        self.driver.quit()
