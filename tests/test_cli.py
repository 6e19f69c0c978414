"""Tests for the command-line / interactive front end."""

import functools
import math

import pytest

from quadsuite import cli
from quadsuite import typerequest as tr
from quadsuite.libquad.driver import integrate
from quadsuite.libquad.methods import Simpson


def _answers(*values):
    """Fake ``input`` replaying *values* in order."""
    it = iter(values)
    return lambda prompt: next(it)


class TestFlags:
    def test_simpson_sine(self, capsys):
        rc = cli.main(["--function", "sin", "--method", "simpson", "--start", "0",
                       "--end", str(math.pi), "--eps", "1e-6", "--nsplits", "2"])
        out = capsys.readouterr().out
        assert rc == 0
        assert "Number of splits used: 64" in out
        value = float(out.split("Integral: ")[1].splitlines()[0])
        assert value == pytest.approx(2.0 + 1.125 * math.pi, abs=1e-6)

    def test_odd_splits_for_simpson_rejected(self, capsys):
        rc = cli.main(["--function", "sin", "--method", "simpson", "--nsplits", "1"])
        assert rc == 2
        assert "odd" in capsys.readouterr().err

    def test_function_without_method(self, capsys):
        rc = cli.main(["--function", "sin"])
        assert rc == 2
        assert "--function and --method" in capsys.readouterr().err

    def test_reference_values(self, capsys):
        rc = cli.main(["--function", "cubic-a", "--method", "trapezoid", "--reference"])
        out = capsys.readouterr().out
        assert rc == 0
        assert "Analytic value" in out
        assert "Result from scipy" in out

    def test_non_convergence_exit_code(self, monkeypatch, capsys):
        monkeypatch.setattr(cli, "integrate", functools.partial(integrate, maxiter=2))
        rc = cli.main(["--function", "sin", "--method", "trapezoid", "--eps", "1e-300"])
        assert rc == 1
        assert "Max iterations: 2" in capsys.readouterr().err


class TestParamsFiles:
    def test_round_trip_through_cli(self, tmp_path, capsys):
        path = tmp_path / "quad.params"
        rc = cli.main(["--function", "cubic-b", "--method", "simpson", "--nsplits", "4",
                       "--write-params", str(path)])
        first = capsys.readouterr().out
        assert rc == 0
        assert tr.ReadRequestParams(path).method == Simpson()

        rc = cli.main(["--params", str(path)])
        assert rc == 0
        assert capsys.readouterr().out == first

    def test_params_reject_request_flags(self, tmp_path, capsys):
        path = tmp_path / "quad.params"
        tr.WriteRequestParams(path, tr.IntegrationRequest(function="sin"))
        rc = cli.main(["--params", str(path), "--eps", "1e-9", "--method", "trapezoid"])
        assert rc == 2
        assert "--params cannot be combined with --method, --eps" in capsys.readouterr().err

    def test_missing_file_is_an_error(self, tmp_path, capsys):
        rc = cli.main(["--params", str(tmp_path / "missing.params")])
        assert rc == 2
        assert "Error:" in capsys.readouterr().err


class TestInteractive:
    def test_prompts_with_defaults_and_reprompts(self, capsys):
        ask = _answers(
            "3",      # sin(x) + 1.125
            "3",      # Simpson
            "",       # start -> 0
            "",       # end -> 1
            "0",      # eps rejected
            "",       # eps -> 0.001
            "5",      # odd, rejected for Simpson
            "4",
        )
        rc = cli.main([], ask=ask)
        out = capsys.readouterr().out
        assert rc == 0
        assert "Should be strictly above zero" in out
        assert "Number 5 is odd number" in out
        assert "Integral:" in out

    def test_rectangle_mode_submenu(self):
        ask = _answers("1", "1", "2", "-1", "1", "1e-2", "")
        req = cli.promptRequest(ask=ask)
        assert req.function == "cubic-a"
        assert cli.methodFromName("rectangle-center") == req.method
        assert (req.start, req.end, req.eps, req.nsplits) == (-1.0, 1.0, 0.01, 5)

    def test_menu_rejects_out_of_range(self, capsys):
        idx = cli.promptChoice("Pick", ["a", "b"], ask=_answers("9", "x", "2"))
        assert idx == 1
        assert capsys.readouterr().out.count("Please enter a number between 1 and 2") == 2

    def test_end_of_input_is_reported(self, capsys):
        def ask(prompt):
            raise EOFError

        rc = cli.main([], ask=ask)
        assert rc == 2
        assert "Error: input aborted (EOFError)" in capsys.readouterr().err

    def test_interrupt_after_some_answers(self, capsys):
        answers = iter(["4", "2"])

        def ask(prompt):
            try:
                return next(answers)
            except StopIteration:
                raise KeyboardInterrupt from None

        assert cli.main([], ask=ask) == 2
        assert "KeyboardInterrupt" in capsys.readouterr().err
