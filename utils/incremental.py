"""
incremental marker plugin

同一個測試類別標上 @pytest.mark.incremental 時，各測試視為一條依序執行的步驟鏈：
某一步失敗後，後續步驟不再執行，直接回報 xfail「前一步失敗」。

conftest.py 透過 pytest_plugins 載入。
"""

import pytest

_INCREMENTAL_FAILED = "_incremental_failed"


def _is_incremental(item) -> bool:
    return "incremental" in item.keywords and item.cls is not None


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed and _is_incremental(item):
        setattr(item.cls, _INCREMENTAL_FAILED, item.name)


def pytest_runtest_setup(item):
    if _is_incremental(item):
        failed = getattr(item.cls, _INCREMENTAL_FAILED, None)
        if failed is not None:
            pytest.xfail(f"前一步失敗 ({failed})")
