"""
編輯器導覽 (tutorial) 頁面描述

結構：
    TutorialPage
    ├── popup_dialog   導覽對話框（標題、內容、下一步按鈕）
    ├── menu           左側選單（sections / edit fonts）
    ├── page           編輯區內容
    └── toolbar        文字編輯工具列
"""

from dataclasses import dataclass

from core.locator import Locator, XPathTemplate

_ACTIVE_PANEL = '//div[contains(@class, "panel") and contains(@class, "active")]'


@dataclass(frozen=True)
class PopupDialog:
    title: Locator = Locator.by_xpath(f'{_ACTIVE_PANEL}/div[@class="text"]/h3')
    content: Locator = Locator.by_css(".panel.active > .text")
    content_xpath: Locator = Locator.by_xpath(f'{_ACTIVE_PANEL}/div[@class="text"]')
    dialog_by_title: XPathTemplate = XPathTemplate(
        f'{_ACTIVE_PANEL}/div[@class="text"]/h3[contains(text(),{{text}})]'
    )
    button_by_text: XPathTemplate = XPathTemplate(
        f'{_ACTIVE_PANEL}/div[@class="next"]/a[contains(text(),{{text}})]'
    )


@dataclass(frozen=True)
class SectionsMenu:
    contact_us_button: Locator = Locator.by_xpath(
        '//div[contains(@class,"section-button") and contains(text(), "Contact Us")]'
    )


@dataclass(frozen=True)
class TitleFontMenu:
    font_by_name: XPathTemplate = XPathTemplate(
        '//div[@class="font-item-inner" and contains(text(), {text})]'
    )


@dataclass(frozen=True)
class EditFontsMenu:
    title_font: TitleFontMenu = TitleFontMenu()


@dataclass(frozen=True)
class Menu:
    sections: SectionsMenu = SectionsMenu()
    edit_fonts: EditFontsMenu = EditFontsMenu()


@dataclass(frozen=True)
class EditorCanvas:
    contact_with_us_text_box: Locator = Locator.by_xpath(
        '//div[@role="textbox"]/p[contains(text(), "Connect With Us")]'
    )


@dataclass(frozen=True)
class Toolbar:
    # CKEditor 動態產生的 id
    change_font_family_button: Locator = Locator.by_id("cke_599")


@dataclass(frozen=True)
class TutorialPage:
    """開啟 ?open=tutorial 後的編輯器"""

    popup_dialog: PopupDialog = PopupDialog()
    menu: Menu = Menu()
    page: EditorCanvas = EditorCanvas()
    toolbar: Toolbar = Toolbar()


@dataclass(frozen=True)
class DialogStep:
    """導覽中的一個對話框：標題、預期內容片段、要按的按鈕"""

    title: str
    content: str
    button: str

    @classmethod
    def from_dict(cls, data: dict) -> "DialogStep":
        return cls(title=data["title"], content=data["content"], button=data["button"])
