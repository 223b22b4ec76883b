"""
自訂 pytest 報告 plugin
在終端機輸出測試摘要：通過率、失敗原因、因前一步失敗而中斷的步驟、耗時排行。
在 conftest.py 引入即可生效。
"""

import time
from collections import defaultdict

from utils.logger import logger


class RunMetrics:
    """收集測試指標"""

    def __init__(self):
        self.results: dict[str, list] = defaultdict(list)
        self.durations: dict[str, float] = {}
        self.reasons: dict[str, str] = {}
        self.start_time: float = 0

    def record(self, nodeid: str, outcome: str, duration: float, reason: str = "") -> None:
        self.results[outcome].append(nodeid)
        self.durations[nodeid] = duration
        if reason:
            self.reasons[nodeid] = reason

    def summary_lines(self, total_time: float) -> list[str]:
        passed = self.results.get("passed", [])
        failed = self.results.get("failed", [])
        skipped = self.results.get("skipped", [])
        halted = self.results.get("halted", [])
        total = len(passed) + len(failed) + len(skipped) + len(halted)
        if total == 0:
            return []

        pass_rate = len(passed) / total * 100
        sep = "=" * 60
        lines = [
            "",
            sep,
            "  編輯器導覽 UI 測試摘要",
            sep,
            "",
            f"  總計:   {total} 個測試",
            f"  通過:   {len(passed)}",
            f"  失敗:   {len(failed)}",
            f"  中斷:   {len(halted)}",
            f"  跳過:   {len(skipped)}",
            f"  通過率: {pass_rate:.1f}%",
            f"  總耗時: {total_time:.1f} 秒",
            "",
        ]

        if failed:
            lines.append("  --- 失敗步驟 ---")
            for nodeid in failed:
                lines.append(f"    FAIL  {nodeid}  ({self.durations.get(nodeid, 0):.2f}s)")
                if nodeid in self.reasons:
                    lines.append(f"          {self.reasons[nodeid]}")
            lines.append("")

        if halted:
            lines.append("  --- 因前一步失敗未執行 ---")
            for nodeid in halted:
                lines.append(f"    HALT  {nodeid}")
            lines.append("")

        if self.durations:
            slowest = sorted(self.durations.items(), key=lambda x: x[1], reverse=True)[:5]
            lines.append("  --- 最慢的測試 (Top 5) ---")
            for nodeid, dur in slowest:
                lines.append(f"    {dur:.2f}s  {nodeid}")
            lines.append("")

        lines.append(sep)
        return lines


_metrics = RunMetrics()


def _first_line(longrepr) -> str:
    crash = getattr(longrepr, "reprcrash", None)
    if crash is not None:
        return crash.message.splitlines()[0] if crash.message else ""
    text = str(longrepr or "").strip()
    return text.splitlines()[-1] if text else ""


# ── pytest hooks ──

def pytest_sessionstart(session):
    _metrics.start_time = time.time()


def pytest_runtest_logreport(report):
    if report.when == "setup" and report.skipped and hasattr(report, "wasxfail"):
        _metrics.record(report.nodeid, "halted", report.duration)
    elif report.when == "setup" and report.skipped:
        _metrics.record(report.nodeid, "skipped", report.duration)
    elif report.when == "call":
        reason = _first_line(report.longrepr) if report.failed else ""
        _metrics.record(report.nodeid, report.outcome, report.duration, reason)


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    lines = _metrics.summary_lines(time.time() - _metrics.start_time)
    if not lines:
        return

    terminalreporter.section("Editor Tour UI Test Report", sep="=")
    for line in lines:
        terminalreporter.line(line)

    for line in lines:
        logger.info(line)
