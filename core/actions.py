"""
編輯器操作步驟 (Action Extensions)

每個方法把 等待 / 定位 / 互動 / script 組合成一個有語意的步驟，
回傳 self 以便鏈式呼叫，或回傳讀到的值供斷言使用。

用法：
    actions = EditorActions(driver, build_page_model())
    (
        actions.get(actions.pages.login.url)
        .log_in_with_email_and_password(email, password)
        .click_element_by_index(".edit", 0)
        .replace_url_and_redirect("/edit", "/edit?open=tutorial")
        .check_dialog_title_and_content("Site Sections", "Your site is broken up", "Next")
    )
"""

from typing import Iterable

import allure
from selenium.common.exceptions import TimeoutException
from selenium.webdriver.remote.webelement import WebElement

from core.assertions import expect
from core.browser_session import BrowserSession
from core.exceptions import ElementNotFoundError
from core.locator import Locator
from pages import DialogStep, PageModel
from utils.logger import logger

_INNER_TEXT_SCRIPT = """
var element = document.querySelector(arguments[0]);
return element ? element.innerText : null;
"""

_ELEMENT_AT_INDEX_SCRIPT = """
var elements = document.querySelectorAll(arguments[0]);
return elements[arguments[1]] || null;
"""

# replacement 用 function 包起來，避免 newValue 內的 $& 之類被當成替換語法
_REPLACE_URL_SCRIPT = """
var oldValue = arguments[0];
var newValue = arguments[1];
window.location.href = window.location.href.replace(oldValue, function () {
    return newValue;
});
"""


def _as_locator(value, factory) -> Locator:
    return value if isinstance(value, Locator) else factory(value)


class EditorActions(BrowserSession):
    """登入、導覽對話框、字型切換等編輯器步驟"""

    def __init__(self, driver, pages: PageModel, timeout: float | None = None,
                 interval: float | None = None):
        super().__init__(driver, timeout, interval)
        self.pages = pages

    # ── 登入 ──

    @allure.step("使用 {email} 登入")
    def log_in_with_email_and_password(self, email: str, password: str) -> "EditorActions":
        login = self.pages.login
        self.send_keys(self.wait_for_element(login.email_text_field), email, login.email_text_field)
        self.send_keys(self.find_element(login.password_text_field), password, login.password_text_field)

        before = self.current_url
        self.click(self.find_element(login.log_in_button), login.log_in_button)
        self.wait_for_url_change(before)
        self.wait_until_ready()
        logger.info(f"登入完成: {email}")
        return self

    # ── Script 讀值 ──

    def get_element_inner_text_by_css_selector(self, css_selector: str) -> str:
        """取得第一個符合 selector 的元素 innerText"""
        text = self.execute_script(_INNER_TEXT_SCRIPT, css_selector)
        if text is None:
            raise ElementNotFoundError(Locator.by_css(css_selector))
        return text

    def get_element_in_array_by_css_selector_and_index(
        self, css_selector: str, index: int
    ) -> WebElement:
        """取得所有符合 selector 的元素中第 index 個"""
        element = self.execute_script(_ELEMENT_AT_INDEX_SCRIPT, css_selector, index)
        if element is None:
            raise ElementNotFoundError(f"{Locator.by_css(css_selector)}[{index}]")
        return element

    # ── 點擊 ──

    @allure.step("點擊 {css_selector} 第 {index} 個元素")
    def click_element_by_index(self, css_selector: str, index: int) -> "EditorActions":
        """點擊第 index 個符合 selector 的連結，等到換頁且頁面就緒"""
        self.wait_for_element(Locator.by_css(css_selector))
        element = self.get_element_in_array_by_css_selector_and_index(css_selector, index)

        before = self.current_url
        self.click(element, f"css={css_selector}[{index}]")
        self.wait_for_url_change(before)
        self.wait_until_ready()
        return self

    @allure.step("點擊 {xpath}")
    def click_element_by_xpath(self, xpath) -> "EditorActions":
        locator = _as_locator(xpath, Locator.by_xpath)
        self.click(self.wait_for_element(locator), locator)
        self.wait_until_ready()
        return self

    @allure.step("點擊 id={element_id}")
    def click_element_by_id(self, element_id) -> "EditorActions":
        locator = _as_locator(element_id, Locator.by_id)
        self.click(self.wait_for_element(locator), locator)
        self.wait_until_ready()
        return self

    # ── 導航 ──

    @allure.step("網址 {old_value} -> {new_value}")
    def replace_url_and_redirect(self, old_value: str, new_value: str) -> "EditorActions":
        logger.info(f"改寫網址: '{old_value}' -> '{new_value}'")
        self.execute_script(_REPLACE_URL_SCRIPT, old_value, new_value)
        self.wait_for_url_contains(new_value)
        self.wait_until_ready()
        return self

    # ── 導覽對話框 ──

    @allure.step("檢查對話框「{title}」並點擊「{button}」")
    def check_dialog_title_and_content(
        self, title: str, content: str, button: str
    ) -> "EditorActions":
        """
        等待標題為 title 的對話框，確認內容包含 content，再點擊 button。

        內容不符時拋出 AssertionError，後續步驟不會執行。
        """
        dialog = self.pages.tutorial.popup_dialog
        title_locator = dialog.dialog_by_title.format(title)
        self.wait_for_element(title_locator)

        text = self.get_element_inner_text_by_css_selector(dialog.content.value)
        expect(text, label=f"對話框「{title}」").to_contain(content)

        button_locator = dialog.button_by_text.format(button)
        self.click(self.find_element(button_locator), button_locator)
        self.wait_until_gone(title_locator)
        return self

    def check_dialog_sequence(self, steps: Iterable[DialogStep]) -> "EditorActions":
        """依序檢查整段導覽"""
        for i, step in enumerate(steps, 1):
            logger.info(f"導覽第 {i} 步: {step.title}")
            self.check_dialog_title_and_content(step.title, step.content, step.button)
        return self

    # ── 字型 ──

    @allure.step("讀取 font-family: {xpath}")
    def get_font_family_by_xpath(self, xpath) -> str:
        locator = _as_locator(xpath, Locator.by_xpath)
        element = self.wait_for_element(locator)
        return self.get_computed_css(element, "font-family")

    @allure.step("等待 font-family 變為 {font_name}")
    def wait_for_font_family(self, xpath, font_name: str, timeout: float | None = None) -> str:
        """
        輪詢 computed font-family，直到以 font_name 開頭（不分大小寫）。

        逾時仍不符時以 expect 拋出 AssertionError，訊息帶有實際字型。
        """
        locator = _as_locator(xpath, Locator.by_xpath)
        element = self.wait_for_element(locator, timeout)
        expected = font_name.lower()

        def font_applied(_driver):
            value = self.get_computed_css(element, "font-family")
            return value if value.lower().startswith(expected) else False

        try:
            return self._wait(timeout).until(font_applied)
        except TimeoutException:
            actual = self.get_computed_css(element, "font-family")
            expect(actual.lower(), label=f"{locator} font-family").to_start_with(expected)
            return actual

    @allure.step("將 Contact Us 標題字型改為 {font_name}")
    def change_font(self, font_name: str) -> "EditorActions":
        """依序點擊 Contact Us 區塊、文字框、字型按鈕與字型項目，並等到字型生效"""
        tutorial = self.pages.tutorial
        text_box = tutorial.page.contact_with_us_text_box
        (
            self.click_element_by_xpath(tutorial.menu.sections.contact_us_button)
            .click_element_by_xpath(text_box)
            .click_element_by_id(tutorial.toolbar.change_font_family_button)
            .click_element_by_xpath(
                tutorial.menu.edit_fonts.title_font.font_by_name.format(font_name)
            )
        )
        self.wait_for_font_family(text_box, font_name)
        return self
