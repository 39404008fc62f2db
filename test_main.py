import json
from datetime import date

import pytest

import main
from calendar_logic import MONTH_ABBR


def test_grid_output(capsys):
    assert main.main(["grid", "2024", "12"]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "Dec 2024"
    assert lines[1].startswith("Wk  Mon")
    assert len(lines) == 8
    assert lines[2].startswith("48  25-11-2024* 26-11-2024*")
    assert lines[2].endswith("01-12-2024")
    assert lines[7].startswith(" 1  30-12-2024  31-12-2024  01-01-2025*")


def test_grid_rejects_month_13():
    with pytest.raises(SystemExit):
        main.main(["grid", "2024", "13"])


@pytest.mark.parametrize(
    "args, code, status",
    [
        (["check", "15-06-2024"], 0, "valid"),
        (["check", "31-06-2024"], 1, "invalid"),
        (["check", "15-06-2024", "--max", "14-06-2024"], 3, "out_of_range"),
        (["check", "15-06-2024", "--min", "15-06-2024", "--max", "15-06-2024"], 0, "valid"),
    ],
)
def test_check(capsys, args, code, status):
    assert main.main(args) == code
    assert capsys.readouterr().out.strip() == status


def test_check_rejects_bad_bound():
    with pytest.raises(SystemExit):
        main.main(["check", "15-06-2024", "--min", "2024-06-01"])


def test_check_uses_settings_bounds(tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"min_date": "01-07-2024"}), encoding="utf-8")

    assert main.main(["--settings", str(path), "check", "15-06-2024"]) == 3
    assert capsys.readouterr().out.strip() == "out_of_range"


def test_bad_bound_and_out_of_range_exit_differently(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main.main(["check", "15-06-2024", "--max", "junk"])
    assert excinfo.value.code == 2
    assert main.main(["check", "15-06-2024", "--max", "14-06-2024"]) == 3


def test_grid_for_last_representable_month(capsys):
    assert main.main(["grid", "9999", "12"]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "Dec 9999"
    assert lines[7].startswith(" 1  03-01-10000*")
    assert lines[7].endswith("09-01-10000*")


def test_grid_defaults_to_initial_date_setting(tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"initial_date": "15-06-2024"}), encoding="utf-8")

    assert main.main(["--settings", str(path), "grid"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "Jun 2024"


def test_grid_defaults_to_today(capsys):
    today = date.today()
    assert main.main(["grid"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == f"{MONTH_ABBR[today.month - 1]} {today.year}"


@pytest.mark.parametrize(
    "moves, header",
    [
        (["prev-month"], "Dec 2023"),
        (["next-month", "next-month"], "Mar 2024"),
        (["prev-year"], "Jan 2023"),
        (["next-year", "prev-month"], "Dec 2024"),
    ],
)
def test_grid_moves(capsys, moves, header):
    argv = ["grid", "2024", "1"]
    for move in moves:
        argv += ["--move", move]

    assert main.main(argv) == 0
    assert capsys.readouterr().out.splitlines()[0] == header


def test_grid_needs_both_year_and_month():
    with pytest.raises(SystemExit):
        main.main(["grid", "2024"])
