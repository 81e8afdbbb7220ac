"""
Test suite for the command line entry point.
"""

import logging
import pytest
import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import main


class TestCommandLine:

    @pytest.fixture(autouse=True)
    def workdir(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        self.tmp_path = tmp_path

    def test_writes_out_txt_and_prints_timings(self, capsys):
        assert main.main(["4", "50"]) == 0

        assert (self.tmp_path / "out.txt").read_text(encoding='utf-8') == "12586269025\n"
        out = capsys.readouterr().out.splitlines()
        assert out[0].startswith("Calculation time: ")
        assert out[0].endswith(" seconds")
        assert out[1].startswith("Write time: ")
        # six decimal places
        assert len(out[0].split()[2].split(".")[1]) == 6

    def test_dashed_version(self):
        assert main.main(["-2", "10"]) == 0
        assert (self.tmp_path / "out.txt").read_text(encoding='utf-8') == "55\n"

    def test_trailing_dash_version(self):
        assert main.main(["4-", "10", "-q"]) == 0
        assert (self.tmp_path / "out.txt").read_text(encoding='utf-8') == "55\n"

    def test_custom_output_path(self):
        assert main.main(["1", "20", "--output", "fib20.txt", "--quiet"]) == 0
        assert (self.tmp_path / "fib20.txt").read_text(encoding='utf-8') == "6765\n"
        assert not (self.tmp_path / "out.txt").exists()

    def test_quiet_prints_nothing(self, capsys):
        assert main.main(["3", "10", "-q"]) == 0
        assert capsys.readouterr().out == ""

    @pytest.mark.parametrize("version", ["0", "5", "-9"])
    def test_invalid_version(self, version, capsys):
        assert main.main([version, "10"]) == 1
        out = capsys.readouterr().out
        assert "is not a valid algorithm number" in out
        assert "Valid numbers are [1, 2, 3, 4]" in out
        assert not (self.tmp_path / "out.txt").exists()

    def test_non_numeric_version(self, capsys):
        assert main.main(["abc", "10"]) == 1
        assert "'version' must be an integer" in capsys.readouterr().out

    def test_non_numeric_n(self, capsys):
        assert main.main(["4", "ten"]) == 1
        assert "'n' must be an integer" in capsys.readouterr().out

    def test_negative_n(self, capsys):
        assert main.main(["4", "-3"]) == 1
        assert "Error: 'n' must be a non-negative integer" in capsys.readouterr().out

    def test_wrong_argument_count(self):
        with pytest.raises(SystemExit) as excinfo:
            main.main(["4"])
        assert excinfo.value.code != 0

    def test_unwritable_output(self, capsys):
        assert main.main(["4", "10", "--output", str(self.tmp_path / "missing" / "out.txt")]) == 1
        assert "Error: Output could not be written to file" in capsys.readouterr().out

    def test_recursion_depth_reported(self, capsys):
        assert main.main(["1", "5000"]) == 1
        out = capsys.readouterr().out
        assert "exceeds the maximum recursion depth for n=5000" in out
        assert "maximum recursion depth exceeded" not in out

    def test_summary_skipped_when_info_disabled(self, caplog, monkeypatch):
        """The decimal summary is only built when INFO logging is on"""
        caplog.set_level(logging.WARNING, logger="fibbench")

        def fail(self, result):
            raise AssertionError("summarize called with INFO disabled")

        monkeypatch.setattr(main.ReportGenerator, "summarize", fail)
        assert main.main(["4", "1000", "-q"]) == 0

    def test_closed_form_overflow_reported(self, capsys):
        assert main.main(["3", "5000"]) == 1
        assert "overflows double precision" in capsys.readouterr().out

    def test_compare_with_reports(self, capsys):
        assert main.main(["2", "100", "--compare", "--repeat", "1",
                          "--json", "bench.json", "--csv", "bench.csv"]) == 0
        out = capsys.readouterr().out
        assert "FIBONACCI ALGORITHM COMPARISON" in out
        assert (self.tmp_path / "bench.json").exists()
        assert (self.tmp_path / "bench.csv").exists()

    def test_plot(self, capsys):
        assert main.main(["4", "30", "--plot", "timing.png", "--sweep-points", "4", "-q"]) == 0
        assert (self.tmp_path / "timing.png").exists()
        assert "Timing plot saved" in capsys.readouterr().out

    def test_divergence_scan(self, capsys):
        assert main.main(["4", "10", "-q", "--divergence"]) == 0
        assert "Closed form first diverges at n = " in capsys.readouterr().out

    def test_divergence_scan_with_limit(self, capsys):
        assert main.main(["4", "10", "-q", "--divergence", "1"]) == 0
        assert "matches the exact value for every n <= 1" in capsys.readouterr().out
