"""
Dashboard 頁面描述
"""

from dataclasses import dataclass

from core.locator import Locator


@dataclass(frozen=True)
class DashboardPage:
    """登入後的網站列表"""

    edit_button: Locator = Locator.by_css(".edit")
