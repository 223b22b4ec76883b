"""
Locator 定義

把「怎麼找到元素」包成不可變的值物件，頁面描述只存資料，不嵌入原始字串操作。

支援：
- Locator：id / CSS selector / XPath / class name 四種策略
- XPathTemplate：帶一個執行期參數的 XPath（例如對話框標題、字型名稱）
- xpath_literal：把任意字串轉成合法的 XPath 字串常值（含引號時自動改用 concat）

用法：
    from core.locator import Locator, XPathTemplate

    EMAIL = Locator.by_id("user_email")
    FONT_ITEM = XPathTemplate('//div[@class="font-item-inner" and contains(text(), {text})]')
    FONT_ITEM.format("Arvo")
    # -> Locator(strategy='xpath', value='//div[... contains(text(), "Arvo")]')
"""

from __future__ import annotations

from dataclasses import dataclass

from appium.webdriver.common.appiumby import AppiumBy

_STRATEGIES = {
    "id": AppiumBy.ID,
    "css": AppiumBy.CSS_SELECTOR,
    "xpath": AppiumBy.XPATH,
    "class_name": AppiumBy.CLASS_NAME,
}


def xpath_literal(text: str) -> str:
    """
    將字串轉為 XPath 1.0 字串常值。

    XPath 沒有跳脫字元，只能換引號或用 concat() 拼接：
        Arvo          -> "Arvo"
        say "hi"      -> 'say "hi"'
        it's "fine"   -> concat("it's ", '"', "fine", '"')
    """
    if '"' not in text:
        return f'"{text}"'
    if "'" not in text:
        return f"'{text}'"
    parts = []
    for i, chunk in enumerate(text.split('"')):
        if i:
            parts.append("'\"'")
        if chunk:
            parts.append(f'"{chunk}"')
    return f"concat({', '.join(parts)})"


@dataclass(frozen=True)
class Locator:
    """元素定位規則 (strategy, value)"""

    strategy: str
    value: str

    def __post_init__(self):
        if self.strategy not in _STRATEGIES:
            raise ValueError(
                f"不支援的定位策略: {self.strategy} "
                f"(支援: {', '.join(_STRATEGIES)})"
            )

    @classmethod
    def by_id(cls, value: str) -> "Locator":
        return cls("id", value)

    @classmethod
    def by_css(cls, value: str) -> "Locator":
        return cls("css", value)

    @classmethod
    def by_xpath(cls, value: str) -> "Locator":
        return cls("xpath", value)

    @classmethod
    def by_class_name(cls, value: str) -> "Locator":
        return cls("class_name", value)

    def as_tuple(self) -> tuple[str, str]:
        """轉成 WebDriver find_element(*locator) 使用的 tuple"""
        return _STRATEGIES[self.strategy], self.value

    def __str__(self) -> str:
        return f"{self.strategy}={self.value}"


@dataclass(frozen=True)
class XPathTemplate:
    """
    帶一個文字參數的 XPath 樣板。

    樣板中以 {text} 標記插入位置，format() 時會先經過 xpath_literal() 處理，
    因此參數含引號也能產生合法的 XPath。
    """

    template: str

    def __post_init__(self):
        if "{text}" not in self.template:
            raise ValueError(f"XPath 樣板缺少 {{text}} 佔位符: {self.template}")

    def format(self, text: str) -> Locator:
        return Locator.by_xpath(self.template.replace("{text}", xpath_literal(text)))
