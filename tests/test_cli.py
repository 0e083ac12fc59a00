# tests/test_cli.py

from vnlunar.cli import main

def test_bare_date_is_day(capsys):
    assert main(["2023-01-22"]) == 0
    out = capsys.readouterr().out
    assert "01/01/2023" in out
    assert "Canh Thìn" in out
    assert "Chủ Nhật" in out

def test_day_rejects_invalid(capsys):
    assert main(["day", "2023-02-29"]) == 2
    assert "error" in capsys.readouterr().err

def test_lunar_leap(capsys):
    assert main(["lunar", "2023", "2", "1", "--leap"]) == 0
    out = capsys.readouterr().out
    assert "2023-03-22" in out
    assert "(nhuận)" in out

def test_lunar_missing_leap(capsys):
    assert main(["lunar", "2023", "5", "1", "--leap"]) == 2

def test_year(capsys):
    assert main(["year", "2023"]) == 0
    out = capsys.readouterr().out
    assert "Quý Mão" in out
    assert "leap month: 2" in out
    assert "2023-01-22" in out

def test_solar_term(capsys):
    # 2024-03-21 starts after the equinox
    assert main(["solar-term", "2460391"]) == 0
    assert "Xuân Phân" in capsys.readouterr().out

def test_new_years(capsys):
    assert main(["new-years", "--from-year", "2023", "--to-year", "2024"]) == 0
    out = capsys.readouterr().out
    assert "2023-01-22" in out
    assert "2024-02-10" in out
    assert "Giáp Thìn" in out

def test_pretty_month(capsys):
    assert main(["pretty-month", "--lunar", "2023", "2", "--leap"]) == 0
    out = capsys.readouterr().out
    assert "Ất Mão (nhuận)" in out
    assert "03-22" in out

def test_diag_round_trip(capsys):
    rc = main(["diag", "round-trip", "--N", "30", "--start", "2000-01-01", "--end", "2030-12-31"])
    assert rc == 0
    assert "All round-trip tests passed." in capsys.readouterr().out

def test_first_supported_year(capsys):
    assert main(["year", "1200"]) == 0
    assert "Canh Thân" in capsys.readouterr().out

    assert main(["new-years", "--from-year", "1200", "--to-year", "1200"]) == 0
    assert "Canh Thân" in capsys.readouterr().out

    assert main(["pretty-month", "--lunar", "1200", "1"]) == 0
    assert "Y=1200  M=1" in capsys.readouterr().out
