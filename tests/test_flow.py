import pathlib
import sys

import pytest

# Ensure src package is on path
sys.path.append(str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from theater_seating import cli, runner
from theater_seating.exceptions import NoInputProvided, OutputUnavailable
from theater_seating.models import TheaterConfig

DATA_FILE = pathlib.Path(__file__).parent / "data" / "reservations.txt"


def test_full_flow(tmp_path):
    out = tmp_path / "out" / "output.txt"
    result, theater, written = runner.run(DATA_FILE, out)

    assert written == out.resolve()
    assert out.read_text().splitlines() == [
        "R001 F1,F2",
        "R002 F6,F7,F8,F9",
        "R003 F13,F14,F15,F16",
        "R004 G1,G2,G3",
    ]
    assert result.rejected == []
    assert result.seats_assigned == 13
    assert theater.first_available_columns[5] == 19


def test_rejected_reservation_is_skipped(tmp_path):
    source = tmp_path / "small.txt"
    source.write_text("A 5\nB 1\n")
    out = tmp_path / "output.txt"
    result, _, _ = runner.run(source, out, TheaterConfig(rows=1, columns=5, buffer=3))

    assert result.rejected == ["B"]
    assert out.read_text() == "A A1,A2,A3,A4,A5\n"


def test_run_without_input():
    with pytest.raises(NoInputProvided):
        runner.run(None)


def test_cli_writes_output(tmp_path, capsys):
    out = tmp_path / "output.txt"
    assert cli.main([str(DATA_FILE), "--output", str(out), "--report"]) == 0

    printed = capsys.readouterr().out
    assert "[REPORT] accepted=4 rejected=0" in printed
    assert f"Output File Path: {out.resolve()}" in printed
    assert out.read_text().startswith("R001 F1,F2\n")


def test_cli_reports_rejections(tmp_path, capsys):
    source = tmp_path / "small.txt"
    source.write_text("A 5\nB 1\n")
    out = tmp_path / "output.txt"
    args = [str(source), "--output", str(out), "--rows", "1", "--columns", "5", "--buffer", "3"]
    assert cli.main(args) == 0
    assert "Not enough seats for reservation: B" in capsys.readouterr().out


def test_cli_without_input(capsys):
    assert cli.main([]) == 1
    assert "No input file found." in capsys.readouterr().out


def test_cli_missing_file(tmp_path, capsys):
    out = tmp_path / "output.txt"
    assert cli.main([str(tmp_path / "missing.txt"), "--output", str(out)]) == 1
    assert "Failed to open file." in capsys.readouterr().out
    assert not out.exists()


def test_cli_malformed_file(tmp_path, capsys):
    source = tmp_path / "bad.txt"
    source.write_text("R001 two\n")
    assert cli.main([str(source), "--output", str(tmp_path / "output.txt")]) == 1
    assert "Error parsing reservations: line 1" in capsys.readouterr().out


def test_cli_rejects_invalid_grid():
    with pytest.raises(SystemExit):
        cli.main(["whatever.txt", "--rows", "0"])


def test_cli_output_path_is_a_directory(tmp_path, capsys):
    assert cli.main([str(DATA_FILE), "--output", str(tmp_path)]) == 1
    printed = capsys.readouterr().out
    assert "Failed to open file." in printed
    assert "Output File Path" not in printed


def test_write_output_reports_unwritable_path(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    with pytest.raises(OutputUnavailable):
        runner.write_output(blocker / "output.txt", ["R001 A1"])
