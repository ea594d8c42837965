"""
Tests for the command-line interface.
"""

import pytest

from options_sheet.cli import main
from options_sheet.config import SheetConfig, PricingConfig
from options_sheet.logger import setup_logger
from options_sheet.pricing.black_scholes import bs_model
from options_sheet.pricing.normal import normal_cdf


@pytest.fixture(autouse=True)
def reset_package_logger():
    """main() reconfigures the package logger; restore the defaults afterwards."""
    yield
    setup_logger()


class TestCLI:
    """Test the options-sheet entry point."""

    def test_cdf(self, capsys):
        """cdf prints Φ(x)."""
        assert main(["cdf", "1.0"]) == 0
        assert capsys.readouterr().out.strip() == f"{normal_cdf(1.0):.6f}"

    def test_price_uses_configured_rate(self, capsys):
        """price defaults to the house rate."""
        assert main(["price", "call", "100", "105", "30", "0.25"]) == 0
        expected = bs_model('call', 100.0, 105.0, 0.0525, 30.0, 0.25)
        assert capsys.readouterr().out.strip() == f"{expected:.6f}"

    def test_price_with_rate_and_precision(self, capsys):
        """--rate and --precision are honoured."""
        assert main(["--precision", "4", "price", "PUT", "100", "95", "30", "0.25", "--rate", "0.04"]) == 0
        expected = bs_model('put', 100.0, 95.0, 0.04, 30.0, 0.25)
        assert capsys.readouterr().out.strip() == f"{expected:.4f}"

    def test_price_invalid_input(self, capsys):
        """Invalid numbers exit with status 1 and a message on stderr."""
        assert main(["price", "call", "100", "100", "-5", "0.2"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "time_to_maturity" in captured.err

    def test_invalid_option_type_is_usage_error(self):
        """argparse rejects unknown option types."""
        with pytest.raises(SystemExit) as excinfo:
            main(["price", "straddle", "100", "100", "30", "0.2"])
        assert excinfo.value.code == 2

    def test_greeks(self, capsys):
        """greeks prints one line per Greek."""
        assert main(["greeks", "call", "100", "100", "90", "0.2"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert [line.split(":")[0] for line in lines] == ["delta", "gamma", "vega", "theta", "rho"]

    def test_sequence(self, capsys):
        """sequence prints one value per line."""
        assert main(["--precision", "0", "sequence", "0", "10", "5"]) == 0
        assert capsys.readouterr().out.split() == ["0", "2", "4", "6", "8", "10"]

    def test_sequence_zero_rows(self, capsys):
        """Zero rows is reported as an error."""
        assert main(["sequence", "0", "10", "0"]) == 1
        assert "rows" in capsys.readouterr().err

    def test_formula(self, capsys):
        """formula evaluates a sheet formula by name."""
        assert main(["formula", "BSMODEL", "call", "100", "100", "0.05", "30", "0.2"]) == 0
        expected = bs_model('call', 100.0, 100.0, 0.05, 30.0, 0.2)
        assert capsys.readouterr().out.strip() == f"{expected:.6f}"

    def test_formula_table(self, capsys):
        """Table results print tab-separated rows."""
        assert main(["--precision", "1", "formula", "setsequence", "0", "1", "2"]) == 0
        assert capsys.readouterr().out.splitlines() == ["0.0", "0.5", "1.0"]

    def test_formula_error(self, capsys):
        """Formula errors print their code and exit with status 1."""
        assert main(["formula", "BSMODEL", "straddle", "100", "100", "0.05", "30", "0.2"]) == 1
        assert "#VALUE!" in capsys.readouterr().err

        assert main(["formula", "VLOOKUP"]) == 1
        assert "#NAME?" in capsys.readouterr().err

    def test_config_file(self, tmp_path, capsys):
        """--config supplies the risk-free rate."""
        path = tmp_path / "sheet.yaml"
        SheetConfig(pricing=PricingConfig(risk_free_rate=0.01)).save(path)

        assert main(["--config", str(path), "price", "call", "100", "100", "30", "0.2"]) == 0
        expected = bs_model('call', 100.0, 100.0, 0.01, 30.0, 0.2)
        assert capsys.readouterr().out.strip() == f"{expected:.6f}"

    def test_missing_config_file(self, tmp_path):
        """A missing config file is a usage error."""
        with pytest.raises(SystemExit) as excinfo:
            main(["--config", str(tmp_path / "missing.yaml"), "cdf", "0"])
        assert excinfo.value.code == 2

    @pytest.mark.parametrize("content", [
        "log_level: verbose\n",
        "hello\n",
        "- 1\n- 2\n",
        "pricing:\n  risk_free_rate: abc\n",
        "pricing:\n  days_per_year: 0\n",
        "json_logs: maybe\n",
        "sequence: diagonal\n",
        "unknown_key: 1\n",
    ])
    def test_invalid_config_file(self, tmp_path, capsys, content):
        """A malformed config file is a usage error, not a traceback."""
        path = tmp_path / "sheet.yaml"
        path.write_text(content)
        with pytest.raises(SystemExit) as excinfo:
            main(["--config", str(path), "cdf", "0"])
        assert excinfo.value.code == 2
        assert "invalid config" in capsys.readouterr().err

    def test_negative_precision(self, capsys):
        """--precision must be non-negative."""
        with pytest.raises(SystemExit) as excinfo:
            main(["--precision", "-1", "cdf", "0"])
        assert excinfo.value.code == 2
        assert "--precision" in capsys.readouterr().err

    def test_debug_logging_goes_to_stderr(self, capsys):
        """Debug logs never mix with results on stdout."""
        assert main(["--log-level", "DEBUG", "cdf", "0"]) == 0
        captured = capsys.readouterr()
        assert captured.out.strip() == f"{normal_cdf(0.0):.6f}"
        assert "Running 'cdf'" in captured.err


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
