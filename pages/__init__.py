"""
pages — 頁面描述 (Page Model)

所有 locator 與文字樣板集中於此，啟動時由 build_page_model() 建立一次，
再明確傳給 EditorActions 使用。
"""

from dataclasses import dataclass

from pages.dashboard_page import DashboardPage
from pages.login_page import LoginPage
from pages.tutorial_page import DialogStep, TutorialPage


@dataclass(frozen=True)
class PageModel:
    login: LoginPage
    dashboard: DashboardPage
    tutorial: TutorialPage


def build_page_model(login_url: str | None = None) -> PageModel:
    """建立整份頁面描述；login_url 可覆蓋預設登入網址"""
    login = LoginPage(url=login_url) if login_url else LoginPage()
    return PageModel(login=login, dashboard=DashboardPage(), tutorial=TutorialPage())


__all__ = [
    "PageModel",
    "build_page_model",
    "LoginPage",
    "DashboardPage",
    "TutorialPage",
    "DialogStep",
]
