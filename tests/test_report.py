"""Tests for the console report and the command-line entry point."""

import datetime as dt
import io

import pytest
from bsmpricer import PricingResult
from bsmpricer.cli import main
from bsmpricer.config import EQUITY_OPTION_EXAMPLE
from bsmpricer.report import (
    format_value, format_rate, format_inputs, format_row, format_elapsed, write_report,
)

EXPECTED_INPUTS = """\
Option type = Put
Maturity = May 17th, 1999
Underlying price = 36
Strike = 40
Risk-free interest rate = 6.000000 %
Dividend yield = 0.000000 %
Volatility = 20.000000 %
Day Counter = Actual/365 (Fixed)

"""


class TestFormatting:
    def test_value_kinds(self):
        assert format_value("European") == "European"
        assert format_value(3.8443082) == "3.84431"
        assert format_value(36.0) == "36"

    def test_rate(self):
        assert format_rate(0.06) == "6.000000 %"
        assert format_rate(0.2) == "20.000000 %"

    def test_inputs(self):
        assert format_inputs(EQUITY_OPTION_EXAMPLE) == EXPECTED_INPUTS

    def test_row_widths(self):
        row = format_row("Method", "European")
        assert row == "Method" + " " * 29 + "European"
        assert format_row("Black-Scholes", 3.8443082).index("3.84431") == 35

    @pytest.mark.parametrize("seconds,text", [
        (0.25, "Run completed in 0.25000 s"),
        (75.5, "Run completed in 1 m 15.50000 s"),
        (3600 + 2.0, "Run completed in 1 h 0 m 2.00000 s"),
    ])
    def test_elapsed(self, seconds, text):
        assert format_elapsed(seconds) == text

    def test_write_report_with_greeks(self):
        buf = io.StringIO()
        res = PricingResult(npv=3.84, delta=-0.59, gamma=0.05, vega=14.0,
                            theta=-0.9, rho=-25.0)
        write_report(buf, EQUITY_OPTION_EXAMPLE, dt.date(1998, 5, 15), res)
        text = buf.getvalue()
        assert "Today's Date : May 15th, 1998" in text
        assert "Day Counter = Actual/365 (Fixed)\n\n\nToday's Date" in text
        assert text.splitlines()[-5].startswith("Delta")
        assert text.splitlines()[-1].startswith("Rho")


class TestCommandLine:
    def test_default_example(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert EXPECTED_INPUTS in out
        assert "Black-Scholes" + " " * 22 + "3.84431" in out
        assert "Run completed in" in out

    def test_call_override(self, capsys):
        assert main(["--kind", "c", "--greeks"]) == 0
        out = capsys.readouterr().out
        assert "Option type = Call" in out
        assert "Gamma" in out

    def test_evaluation_date_without_settlement(self, capsys):
        # no settlement lag: T runs from the evaluation date
        assert main(["--evaluation-date", "1998-05-17"]) == 0
        out = capsys.readouterr().out
        assert "Today's Date : May 17th, 1998" in out

    @pytest.mark.parametrize("argv", [
        ["--strike", "0"],
        ["--vol", "-0.2"],
        ["--maturity", "1997-01-01"],
        ["--day-counter", "30/360"],
    ])
    def test_invalid_input_exits_one(self, capsys, argv):
        assert main(argv) == 1
        out = capsys.readouterr().out
        assert "Black-Scholes" not in out
        assert "Run completed" not in out

    def test_bad_kind_is_usage_error(self):
        with pytest.raises(SystemExit) as exc:
            main(["--kind", "straddle"])
        assert exc.value.code == 2
