"""
登入頁面描述

只存放 locator 與網址，操作邏輯在 core.actions.EditorActions。
"""

from dataclasses import dataclass

from core.locator import Locator


@dataclass(frozen=True)
class LoginPage:
    """登入頁面"""

    url: str = "https://www.strikingly.com/s/login"
    email_text_field: Locator = Locator.by_id("user_email")
    password_text_field: Locator = Locator.by_id("user_password")
    log_in_button: Locator = Locator.by_class_name("s-btn")
