# tests/test_decoder.py

import pytest

from vnlunar.core.time import jdn_from_ymd
from vnlunar.engines.decoder import decode_lunar_year, new_year_jd, regular_month_lengths
from vnlunar.engines.year_code import get_year_code

def _code(offset: int, lengths, leap_month: int = 0, leap_length: int = 29) -> int:
    bits = 0
    for month, length in enumerate(lengths, start=1):
        bits |= (length - 29) << (12 - month)
    return (offset << 17) | ((leap_length - 29) << 16) | (bits << 4) | leap_month

def test_regular_month_lengths_bit_order():
    lengths = [30, 29, 29, 30, 29, 30, 30, 29, 30, 29, 30, 29]
    assert regular_month_lengths(_code(30, lengths)) == lengths

def test_no_leap_month_gives_12_entries():
    lengths = [30, 29] * 6
    months = decode_lunar_year(2000, _code(30, lengths))
    assert len(months) == 12
    assert [m.month for m in months] == list(range(1, 13))
    assert not any(m.leap_month for m in months)
    assert not any(m.leap_year for m in months)
    assert months[0].jd == jdn_from_ymd(1, 1, 2000) + 30

@pytest.mark.parametrize("leap", range(1, 13))
def test_leap_month_inserted_after_its_month(leap):
    lengths = [29, 30] * 6
    months = decode_lunar_year(2000, _code(25, lengths, leap_month=leap, leap_length=30))
    assert len(months) == 13
    i = [m.month for m in months].index(leap)
    assert months[i].leap_month is False
    assert months[i + 1].month == leap
    assert months[i + 1].leap_month is True
    assert months[i + 1].length == 30
    assert all(m.leap_year for m in months)

def test_anchors_strictly_increase_by_length():
    for year in range(1200, 2200, 7):
        months = decode_lunar_year(year, get_year_code(year))
        assert len(months) in (12, 13)
        for a, b in zip(months, months[1:]):
            assert b.jd - a.jd == a.length
        # last month ends where next year's month 1 begins
        if year < 2199:
            assert months[-1].jd + months[-1].length == new_year_jd(year + 1, get_year_code(year + 1))

def test_2023_has_leap_second_month():
    months = decode_lunar_year(2023, get_year_code(2023))
    assert len(months) == 13
    seconds = [(i, m) for i, m in enumerate(months) if m.month == 2]
    assert [m.leap_month for _, m in seconds] == [False, True]
    assert seconds[1][0] == seconds[0][0] + 1
    assert months[0].jd == jdn_from_ymd(22, 1, 2023)
    assert sum(m.length for m in months) == jdn_from_ymd(10, 2, 2024) - jdn_from_ymd(22, 1, 2023)

@pytest.mark.parametrize(
    "year, tet",
    [
        (1985, (21, 1, 1985)),
        (2020, (25, 1, 2020)),
        (2021, (12, 2, 2021)),
        (2022, (1, 2, 2022)),
        (2023, (22, 1, 2023)),
        (2024, (10, 2, 2024)),
        (2025, (29, 1, 2025)),
    ],
)
def test_known_tet_dates(year, tet):
    assert new_year_jd(year, get_year_code(year)) == jdn_from_ymd(*tet)
