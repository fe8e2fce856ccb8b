"""
Tests for the headless command line.
"""
from main import main

from conftest import HEADER, JAN_LINE


def test_cli_converts_next_to_input(jan_xlsx, tmp_path, capsys):
    assert main([jan_xlsx]) == 0
    out = tmp_path / "contacten.csv"
    assert out.read_bytes().decode("utf-8").split("\n")[1] == JAN_LINE
    assert "1 rows" in capsys.readouterr().out


def test_cli_explicit_output(jan_xlsx, tmp_path):
    out = tmp_path / "alert.csv"
    assert main([jan_xlsx, "-o", str(out)]) == 0
    assert out.exists()


def test_cli_check_only(jan_xlsx, tmp_path, capsys):
    assert main([jan_xlsx, "--check"]) == 0
    assert "columns OK" in capsys.readouterr().out
    assert list(tmp_path.glob("*.csv")) == []


def test_cli_reports_missing_column(make_xlsx, capsys):
    path = make_xlsx([HEADER[:-1]])
    assert main([path, "--check"]) == 1
    assert "Missing required XLSX column: E-mailadres" in capsys.readouterr().err
