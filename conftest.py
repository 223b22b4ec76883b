"""
pytest 全域 fixtures

提供：
- 命令列參數 --macaca-browser（覆蓋環境變數 browser）
- editor fixture：每個測試類別共用一個 remote session，結束時保證關閉
- Macaca server 連不上或 session 建立失敗時中止整個測試
- 每個測試結束後自動截圖（含 Allure 附件）
- 測試全部結束後開啟 HTML 報告
"""

import pytest
from selenium.common.exceptions import WebDriverException

from config.config import Config
from core.actions import EditorActions
from core.driver_manager import DriverManager
from core.exceptions import DriverConnectionError
from pages import build_page_model
from utils.allure_helper import attach_screenshot
from utils.logger import logger
from utils.report_viewer import open_report
from utils.screenshot import take_screenshot

# 自訂 plugin：報告摘要、incremental 步驟鏈；pytester 供 plugin 測試使用
pytest_plugins = ["utils.report_plugin", "utils.incremental", "pytester"]


# ── 命令列參數 ──

def pytest_addoption(parser):
    parser.addoption(
        "--macaca-browser",
        action="store",
        default=Config.BROWSER,
        help="桌面瀏覽器: electron / puppeteer / chrome ...（預設讀取環境變數 browser）",
    )


# ── Session / Page Model ──

@pytest.fixture(scope="session")
def browser(request) -> str:
    return request.config.getoption("--macaca-browser").lower()


@pytest.fixture(scope="session")
def page_model():
    return build_page_model(Config.LOGIN_URL or None)


@pytest.fixture(scope="class")
def editor(browser, page_model):
    """
    整個測試類別共用一個 browser session。

    server 連不上或 session 建立失敗時中止整個測試；
    session 建立後不論測試成敗，結束時一定 quit。
    """
    logger.info(f"===== 建立 {browser} session =====")
    try:
        drv = DriverManager.create_driver(browser)
    except DriverConnectionError as e:
        logger.error(f"中止測試: {e}")
        pytest.exit(str(e), returncode=pytest.ExitCode.TESTS_FAILED)

    try:
        yield EditorActions(drv, page_model)
    finally:
        logger.info("===== 關閉 session =====")
        DriverManager.quit_driver()


# ── 測試生命週期 Hook ──

@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """測試結束時截圖"""
    outcome = yield
    report = outcome.get_result()

    if report.when != "call":
        return

    if report.failed:
        logger.error(f"測試失敗: {item.name}")

    editor = item.funcargs.get("editor")
    if editor is not None:
        try:
            take_screenshot(editor.driver, item.name)
            attach_screenshot(editor.driver, f"截圖: {item.name}")
        except WebDriverException as e:
            logger.warning(f"截圖失敗: {item.name} ({e})")


def pytest_sessionfinish(session, exitstatus):
    open_report()
