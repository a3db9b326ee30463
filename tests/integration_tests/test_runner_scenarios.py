# tests/integration_tests/test_runner_scenarios.py
# This file is part of Tabula - A Propositional Truth Table Generator
#
# End-to-end scenarios for the line runner

"""End-to-end scenarios for the line runner.

Each scenario feeds raw input lines through normalization, parsing,
enumeration and rendering, and checks the printed output together with the
run summary. Malformed lines must be reported without stopping the run.
"""

import pytest
from formula.exceptions import MalformedFormula
from logic.runner import FormulaRunner, RunnerConfig, RunSummary


def _plain_runner(stream, **options):
    return FormulaRunner(RunnerConfig(color=False, **options), stream)


class TestRunnerScenarios:
    """Scenarios driving FormulaRunner over several lines."""

    def test_conjunction_table(self, output_stream):
        summary = _plain_runner(output_stream).run(["A and B"])

        assert summary == RunSummary(processed=1, failed=0)
        assert output_stream.getvalue().splitlines() == [
            "| A | B | A ∧ B |",
            "-----------------",
            "| F | F |   F   |",
            "| F | T |   F   |",
            "| T | F |   F   |",
            "| T | T |   T   |",
            "-----------------",
        ]

    def test_negation_table(self, output_stream):
        _plain_runner(output_stream).run(["not A"])
        lines = output_stream.getvalue().splitlines()
        assert lines[0] == "| A | ¬ A |"
        assert lines[2:4] == ["| F |  T  |", "| T |  F  |"]

    def test_comments_and_blank_lines_are_skipped(self, output_stream, implication_lines):
        summary = _plain_runner(output_stream).run(implication_lines)

        assert summary.processed == 2
        assert summary.failed == 0
        assert output_stream.getvalue().count("| A | B | A → B |") == 1
        assert "| B | A | ¬ B → ¬ A |" in output_stream.getvalue()

    def test_malformed_line_does_not_stop_the_run(self, output_stream):
        summary = _plain_runner(output_stream).run(
            ["A and", "(A or B", "A B", "A xor B"]
        )

        assert summary == RunSummary(processed=4, failed=3)
        assert summary.succeeded == 1
        assert output_stream.getvalue().splitlines()[0] == "| A | B | A ⊕ B |"

    def test_too_many_variables_is_a_line_failure(self, output_stream):
        summary = _plain_runner(output_stream, max_variables=1).run(["A or B", "A"])
        assert summary == RunSummary(processed=2, failed=1)

    def test_single_mode_prints_one_result(self, output_stream):
        summary = _plain_runner(output_stream, single=True).run(
            ["true imply false", "not false"]
        )

        assert summary.failed == 0
        assert output_stream.getvalue().splitlines() == [
            "⊤ → ⊥ => F",
            "¬ ⊥ => T",
        ]

    def test_single_mode_reports_unbound_variables(self, output_stream):
        summary = _plain_runner(output_stream, single=True).run(["A or true"])
        assert summary == RunSummary(processed=1, failed=1)
        assert output_stream.getvalue() == ""

    def test_process_line_propagates_errors(self, output_stream):
        with pytest.raises(MalformedFormula):
            _plain_runner(output_stream).process_line(1, "A and")

    def test_quoted_names_with_keywords(self, output_stream):
        _plain_runner(output_stream).run(["`rock and roll` or B"])
        header = output_stream.getvalue().splitlines()[0]
        assert header == "| `rock and roll` | B | `rock and roll` ∨ B |"
