"""
Assertion Library — 語意化斷言

讓測試更好讀，失敗訊息帶有預期值與實際值。

用法：
    from core.assertions import expect

    expect(dialog_text, label="Site Sections").to_contain("Your site is broken up")
    expect(font_family.lower()).to_start_with("arvo")
"""

from __future__ import annotations

from typing import Any


class Expect:
    """
    斷言物件

    expect(actual).to_contain(substring)
    """

    def __init__(self, actual: Any, label: str = ""):
        self._actual = actual
        self._label = label

    # ── 字串 ──

    def to_contain(self, substring: str, msg: str = "") -> None:
        passed = substring in str(self._actual)
        self._assert(passed, msg or f"預期包含 '{substring}'，實際 '{self._actual}'")

    def to_start_with(self, prefix: str, msg: str = "") -> None:
        passed = str(self._actual).startswith(prefix)
        self._assert(passed, msg or f"預期以 '{prefix}' 開頭，實際 '{self._actual}'")

    # ── 內部 ──

    def _assert(self, passed: bool, message: str) -> None:
        if not passed:
            label = f"[{self._label}] " if self._label else ""
            raise AssertionError(f"{label}{message}")


def expect(actual: Any, label: str = "") -> Expect:
    """
    建立斷言物件。

    Args:
        actual: 要驗證的值
        label: 斷言標籤（出現在錯誤訊息中）
    """
    return Expect(actual, label)
