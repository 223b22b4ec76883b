"""
core/exceptions.py 單元測試

驗證例外繼承關係、訊息格式與 context 欄位。
"""

import pytest

from core.exceptions import (
    BrowserTestError,
    DataFileNotFoundError,
    DriverConnectionError,
    DriverError,
    ElementNotClickableError,
    ElementNotFoundError,
    PageError,
    PageNotLoadedError,
    ScriptExecutionError,
    TestDataError,
)
from core.locator import Locator


@pytest.mark.unit
class TestExceptionHierarchy:

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "cls, parent",
        [
            (DriverConnectionError, DriverError),
            (ElementNotFoundError, PageError),
            (ElementNotClickableError, PageError),
            (PageNotLoadedError, PageError),
            (ScriptExecutionError, PageError),
            (DataFileNotFoundError, TestDataError),
        ],
    )
    def test_parent(self, cls, parent):
        assert issubclass(cls, parent)
        assert issubclass(cls, BrowserTestError)

    @pytest.mark.unit
    def test_catch_base_catches_element_errors(self):
        with pytest.raises(BrowserTestError):
            raise ElementNotFoundError(Locator.by_id("user_email"), 10)


@pytest.mark.unit
class TestExceptionMessages:

    @pytest.mark.unit
    def test_driver_connection_error(self):
        orig = ConnectionRefusedError("refused")
        e = DriverConnectionError(url="http://localhost:3456/wd/hub", original=orig)

        assert "localhost:3456" in str(e)
        assert "ConnectionRefusedError" in str(e)
        assert e.original is orig
        assert e.context["url"] == "http://localhost:3456/wd/hub"

    @pytest.mark.unit
    def test_element_not_found_shows_locator_and_timeout(self):
        e = ElementNotFoundError(Locator.by_xpath("//h3"), 10)

        assert "xpath=//h3" in str(e)
        assert "10s" in str(e)
        assert e.context["locator"] == Locator.by_xpath("//h3")

    @pytest.mark.unit
    def test_element_not_found_without_timeout(self):
        assert "s)" not in str(ElementNotFoundError(Locator.by_id("x")))

    @pytest.mark.unit
    def test_page_not_loaded(self):
        assert "https://example.com" in str(PageNotLoadedError("https://example.com", 10))
        assert "頁面未載入" in str(PageNotLoadedError())

    @pytest.mark.unit
    def test_script_execution_error(self):
        e = ScriptExecutionError("return x;", ValueError("bad"))

        assert "ValueError" in str(e)
        assert e.context["script"] == "return x;"

        assert "WAIT_TIMEOUT=-1" in str(e)
        assert "正數" in str(e)

    @pytest.mark.unit
    def test_data_file_not_found(self):
        e = DataFileNotFoundError("/tmp/none.json")
        assert e.context["path"] == "/tmp/none.json"

    @pytest.mark.unit
    def test_base_context_default_empty(self):
        assert BrowserTestError("x").context == {}
