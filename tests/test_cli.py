"""
Tests for the spring-arrangements command line entry point.
"""

import pytest

from spring_arrangements.cli import EXIT_BAD_INPUT, EXIT_OK, main


class TestMain:
    """Tests for cli.main()."""

    def test_main_when_lines_given_then_prints_one_count_each(self, capsys):
        code = main(["???.### 1,1,3", ".??..??...?##. 1,1,3"])
        assert code == EXIT_OK
        assert capsys.readouterr().out.splitlines() == ["1", "4"]

    def test_main_when_unfold_then_prints_unfolded_counts(self, capsys):
        code = main(["?###???????? 3,2,1", "--unfold"])
        assert code == EXIT_OK
        assert capsys.readouterr().out.strip() == "506250"

    def test_main_when_factor_given_then_uses_it(self, capsys):
        main(["??? 1", "--unfold", "--factor", "1"])
        assert capsys.readouterr().out.strip() == "3"

    def test_main_when_bad_line_then_exit_code_and_no_counts(self, capsys):
        """A malformed line stops before anything is counted."""
        code = main(["???.### 1,1,3", "??x 1"])
        assert code == EXIT_BAD_INPUT
        assert capsys.readouterr().out == ""

    def test_main_when_bad_factor_then_usage_error(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["??? 1", "--factor", "0"])
        assert excinfo.value.code == 2
