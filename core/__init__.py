"""
core — 框架核心

統一匯出核心元件，方便外部 import。

用法：
    from core import BrowserSession, DriverManager, Locator, expect
    from core.actions import EditorActions
    from core import ElementNotFoundError, PageNotLoadedError
"""

from core.assertions import expect
from core.browser_session import BrowserSession
from core.driver_manager import DriverManager
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
from core.locator import Locator, XPathTemplate, xpath_literal

__all__ = [
    # Session
    "DriverManager",
    "BrowserSession",
    # Locators
    "Locator",
    "XPathTemplate",
    "xpath_literal",
    # Assertions
    "expect",
    # Exceptions
    "BrowserTestError",
    "DriverError",
    "DriverConnectionError",
    "PageError",
    "ElementNotFoundError",
    "ElementNotClickableError",
    "PageNotLoadedError",
    "ScriptExecutionError",
    "TestDataError",
    "DataFileNotFoundError",
]
