# tests/test_attributes.py

import pytest

from vnlunar import LuckyHour, LunarDate, SolarDate
from vnlunar.attributes import STANDARD_ATTRIBUTES, compute_attributes, list_attributes

# Tet of Quy Mao: Sunday 2023-01-22, JDN 2459967
TET_2023 = 2459967

@pytest.fixture
def tet():
    return LunarDate.from_solar_date(SolarDate(22, 1, 2023))

def test_jd(tet):
    assert tet.jd == TET_2023

def test_year_and_month_names(tet):
    assert tet.year_name() == "Quý Mão"
    assert tet.month_name() == "Giáp Dần"

def test_leap_month_name():
    lunar = LunarDate(day=1, month=2, year=2023, leap_month=True).init()
    assert lunar.month_name() == "Ất Mão (nhuận)"

def test_day_name(tet):
    assert tet.day_name() == "Canh Thìn"

def test_hour_name_branch_is_always_ty(tet):
    # Stem of the Tý hour only; the branch does not vary with the day
    assert tet.hour_name() == "Bính Tý"
    nxt = LunarDate.from_solar_date(SolarDate(23, 1, 2023))
    assert nxt.hour_name() == "Mậu Tý"

def test_day_of_week(tet):
    assert tet.day_of_week() == "Chủ Nhật"
    assert LunarDate.from_solar_date(SolarDate(1, 1, 2000)).day_of_week() == "Thứ Bảy"

def test_solar_term(tet):
    assert tet.solar_term() == "Đại Hàn"
    assert LunarDate.from_solar_date(SolarDate(21, 3, 2024)).solar_term() == "Xuân Phân"

def test_lucky_hours(tet):
    # Thìn day -> pattern "001011001101"
    hours = tet.lucky_hours()
    assert hours == [
        LuckyHour("Dần", (3, 5)),
        LuckyHour("Thìn", (7, 9)),
        LuckyHour("Tỵ", (9, 11)),
        LuckyHour("Thân", (15, 17)),
        LuckyHour("Dậu", (17, 19)),
        LuckyHour("Hợi", (21, 23)),
    ]

def test_lucky_hour_slots_are_two_hours():
    for offset in range(12):
        lunar = LunarDate.from_solar_date(SolarDate.from_jd(TET_2023 + offset))
        for h in lunar.lucky_hours():
            start, end = h.time
            assert start in {23, 1, 3, 5, 7, 9, 11, 13, 15, 17, 19, 21}
            assert end == (start + 2) % 24

def test_unresolved_queries_return_none():
    lunar = LunarDate(day=1, month=1, year=2023)
    assert lunar.year_name() == "Quý Mão"
    assert lunar.day_name() is None
    assert lunar.hour_name() is None
    assert lunar.day_of_week() is None
    assert lunar.solar_term() is None
    assert lunar.lucky_hours() is None

def test_registry(tet):
    assert set(STANDARD_ATTRIBUTES) <= set(list_attributes())
    attrs = compute_attributes(tet, ["year_name", "day_name"])
    assert attrs == {"year_name": "Quý Mão", "day_name": "Canh Thìn"}
    with pytest.raises(KeyError):
        compute_attributes(tet, ["nope"])
