# tests/integration_tests/test_cli.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# End-to-end tests for the command-line interface

"""End-to-end tests for run_truth_table.main.

Each test drives the CLI with an argument list and an in-memory standard
input, then checks the exit code and the messages sent through the logger.
"""

import io

import pytest
from run_truth_table import main, read_formula


class TestTruthTableCLI:
    """Exit codes and reported output of the CLI."""

    def test_formula_argument(self, log_records, basic_formula):
        assert main([basic_formula], stdin=io.StringIO()) == 0

        text = log_records.text
        assert "Variables: [fenetreouverte, ilpleut]" in text
        assert "Satisfying assignments (1):" in text
        assert "{fenetreouverte: true, ilpleut: true}" in text
        assert "Falsifying assignments (3):" in text
        assert "CONTINGENT" in text

    def test_formula_from_stdin(self, log_records):
        assert main([], stdin=io.StringIO("a or not a\nignored line\n")) == 0

        text = log_records.text
        assert "Formula: a or not a" in text
        assert "Falsifying assignments (0):" in text
        assert "TAUTOLOGY" in text

    def test_dash_reads_stdin(self, log_records):
        assert main(["-"], stdin=io.StringIO("a and not a")) == 0

        assert "CONTRADICTION" in log_records.text

    def test_verbose_shows_tokens_and_ast(self, log_records):
        assert main(["-v", "if a then b"], stdin=io.StringIO()) == 0

        text = log_records.text
        assert "Tokens: IF(if) ID(a) THEN(then) ID(b) END" in text
        assert "AST: Implies(antecedent=Var(name='a'), consequent=Var(name='b'))" in text
        assert "Canonical form: (if a then b)" in text

    def test_table_lists_rows_in_enumeration_order(self, log_records):
        assert main(["--table", "if a then b"], stdin=io.StringIO()) == 0

        rows = [m.strip() for m in log_records.messages if "->" in m]
        assert rows == [
            "{a: false, b: false} -> true",
            "{a: true, b: false} -> false",
            "{a: false, b: true} -> true",
            "{a: true, b: true} -> true",
        ]

    def test_parse_error_exit_code(self, log_records):
        assert main(["a and"], stdin=io.StringIO()) == 2

        text = log_records.text
        assert "Formula parsing error" in text
        assert "end of input" in text
        assert "       ^" in text

    def test_lex_error_exit_code(self, log_records):
        assert main(["a & b"], stdin=io.StringIO()) == 2

        text = log_records.text
        assert "Formula lexing error" in text
        assert "'&'" in text

    def test_too_many_variables_exit_code(self, log_records):
        assert main(["--max-variables", "1", "a or b"], stdin=io.StringIO()) == 3

        assert "Enumeration refused" in log_records.text

    def test_empty_input_exit_code(self, log_records):
        assert main([], stdin=io.StringIO("\n")) == 1

        assert "No formula given" in log_records.text

    def test_quiet_hides_results(self, log_records):
        assert main(["-q", "a"], stdin=io.StringIO()) == 0

        assert log_records.messages == []

    def test_quiet_still_reports_errors(self, log_records):
        assert main(["-q", "a b"], stdin=io.StringIO()) == 2

        assert any("Formula parsing error" in m for m in log_records.messages)

    def test_long_conjunction(self, log_records):
        assert main(["a and " * 3000 + "a"], stdin=io.StringIO()) == 0

        assert "CONTINGENT" in log_records.text

    def test_long_disjunction_verbose_table(self, log_records):
        assert main(["-v", "--table", "a or " * 3000 + "b"], stdin=io.StringIO()) == 0

        text = log_records.text
        assert "Canonical form: " + "(" * 3000 + "a or a)" in text
        assert "{a: false, b: false} -> false" in text
        assert "Falsifying assignments (1):" in text

    def test_table_and_buckets_agree(self, log_records):
        assert main(["--table", "a iff b"], stdin=io.StringIO()) == 0

        text = log_records.text
        assert "{a: true, b: false} -> false" in text
        assert "Satisfying assignments (2):" in text
        assert "Falsifying assignments (2):" in text

    def test_deep_nesting_exit_code(self, log_records):
        formula = "(" * 200 + "a" + ")" * 200
        assert main([formula], stdin=io.StringIO()) == 2

        text = log_records.text
        assert "Formula parsing error" in text
        assert "nested levels" in text
        assert " " * 102 + "^" in text


class TestReadFormula:

    def test_argument_is_stripped(self):
        assert read_formula("  a and b  ", io.StringIO()) == "a and b"

    def test_reads_single_line(self):
        assert read_formula(None, io.StringIO("a\nb\n")) == "a"

    def test_empty_argument_is_rejected(self):
        with pytest.raises(ValueError):
            read_formula("   ", io.StringIO())
