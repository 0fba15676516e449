# tests/test_cli.py

import pytest

from caljalali import cli


def test_day(capsys):
    assert cli.main(["day", "2017-10-28"]) == 0
    out = capsys.readouterr().out
    assert "Gregorian : 2017-10-28" in out
    assert "Persian   : 1396/08/06" in out
    assert "Weekday   : Saturday" in out
    assert "Leap year : no" in out
    assert "Julian day: 2458054" in out
    assert "Epoch day : 17467" in out


def test_day_shorthand_with_attributes(capsys):
    assert cli.main(["2017-10-28", "--attr", "year_day", "--debug"]) == 0
    out = capsys.readouterr().out
    assert "day_of_year = 222" in out
    assert "Debug:" in out
    assert "civil_jdn = 2458055" in out


def test_day_unknown_attribute():
    with pytest.raises(SystemExit):
        cli.main(["day", "2017-10-28", "--attr", "nope"])


def test_to_gregorian(capsys):
    assert cli.main(["to-gregorian", "1396/12/01"]) == 0
    assert capsys.readouterr().out.strip() == "2018-02-20"


def test_to_gregorian_invalid():
    with pytest.raises(SystemExit):
        cli.main(["to-gregorian", "1396/12/30"])


def test_diff(capsys):
    assert cli.main(["diff", "1389/01/15", "1390/03/18"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("P1Y2M3D")
    assert "(1 years, 2 months, 3 days)" in out

    assert cli.main(["diff", "1396/06/15", "1396/08/14", "--unit", "days"]) == 0
    assert capsys.readouterr().out.strip() == "60"


def test_month(capsys):
    assert cli.main(["month", "1396", "12"]) == 0
    out = capsys.readouterr().out
    assert "Esfand 1396  (2018-02-20 .. 2018-03-20)" in out
    assert out.count("\n") > 5


def test_diag_new_years(capsys):
    assert cli.main(["diag", "new-years", "--from-year", "1395", "--to-year", "1403"]) == 0
    out = capsys.readouterr().out
    assert "2017-03-21" in out
    assert "Nowruz on March 21:" in out


def test_diag_round_trip(capsys):
    assert cli.main(["diag", "round-trip", "--N", "300", "--seed", "5"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out


def test_diag_leap_years(capsys):
    assert cli.main(["diag", "leap-years", "--cycles", "1"]) == 0
    out = capsys.readouterr().out
    assert "475..3294: 683 leap years" in out


def test_day_malformed_gregorian_date():
    with pytest.raises(SystemExit) as exc:
        cli.main(["day", "2017-13-01"])
    assert "error:" in str(exc.value)
    with pytest.raises(SystemExit):
        cli.main(["2017-02-30"])
