"""
utils.incremental 單元測試

以 pytester 實際跑一個標上 incremental 的測試類別，驗證：
- 前一步失敗時只回報一個失敗，後續步驟為 xfail 且不會執行
- 全部通過時照常執行
"""

import pytest

_INI = """
[pytest]
markers =
    incremental: 依序執行的步驟鏈
"""


@pytest.mark.unit
class TestIncremental:

    @pytest.mark.unit
    def test_failed_step_halts_later_steps(self, pytester):
        pytester.makeini(_INI)
        pytester.makepyfile(
            """
            import pytest

            @pytest.mark.incremental
            class TestTour:
                def test_dialogs(self):
                    raise AssertionError("[Site Sections] 預期包含 'SECTIONS'")

                def test_font(self):
                    raise RuntimeError("後續步驟被執行")
            """
        )

        result = pytester.runpytest("-p", "utils.incremental", "-rx")

        result.assert_outcomes(failed=1, xfailed=1)
        result.stdout.fnmatch_lines(["*test_font*前一步失敗 (test_dialogs)*"])
        result.stdout.no_fnmatch_line("*後續步驟被執行*")

    @pytest.mark.unit
    def test_passing_chain_runs_every_step(self, pytester):
        pytester.makeini(_INI)
        pytester.makepyfile(
            """
            import pytest

            @pytest.mark.incremental
            class TestTour:
                def test_dialogs(self):
                    pass

                def test_font(self):
                    pass
            """
        )

        result = pytester.runpytest("-p", "utils.incremental")

        result.assert_outcomes(passed=2)

    @pytest.mark.unit
    def test_unmarked_class_is_not_halted(self, pytester):
        pytester.makepyfile(
            """
            class TestIndependent:
                def test_a(self):
                    assert False

                def test_b(self):
                    pass
            """
        )

        result = pytester.runpytest("-p", "utils.incremental")

        result.assert_outcomes(failed=1, passed=1)
