# reference/constants.py

from __future__ import annotations

from typing import Tuple

# Supported lunar years (inclusive).
MIN_YEAR = 1200
MAX_YEAR = 2199

# Vietnamese civil time, UTC+7.
TIME_ZONE = 7.0

# Heavenly stems (Can).
CAN: Tuple[str, ...] = ("Giáp", "Ất", "Bính", "Đinh", "Mậu", "Kỷ", "Canh", "Tân", "Nhâm", "Quý")

# Earthly branches (Chi).
CHI: Tuple[str, ...] = (
    "Tý", "Sửu", "Dần", "Mão", "Thìn", "Tỵ",
    "Ngọ", "Mùi", "Thân", "Dậu", "Tuất", "Hợi",
)

# Indexed by (jd + 1) % 7, so Sunday comes first.
DAY: Tuple[str, ...] = ("Chủ Nhật", "Thứ Hai", "Thứ Ba", "Thứ Tư", "Thứ Năm", "Thứ Sáu", "Thứ Bảy")

# Index 0 starts at the March equinox (sun at 0 deg), one entry per 15 deg.
SOLAR_TERMS: Tuple[str, ...] = (
    "Xuân Phân", "Thanh Minh", "Cốc Vũ", "Lập Hạ", "Tiểu Mãn", "Mang Chủng",
    "Hạ Chí", "Tiểu Thử", "Đại Thử", "Lập Thu", "Xử Thử", "Bạch Lộ",
    "Thu Phân", "Hàn Lộ", "Sương Giáng", "Lập Đông", "Tiểu Tuyết", "Đại Tuyết",
    "Đông Chí", "Tiểu Hàn", "Đại Hàn", "Lập Xuân", "Vũ Thủy", "Kinh Trập",
)

# Auspicious (hoàng đạo) two-hour slots, indexed by day branch % 6.
# Character i is "1" when the slot of CHI[i] is lucky.
LUCKY_HOURS: Tuple[str, ...] = (
    "110100101100",
    "001101001011",
    "110011010010",
    "101100110100",
    "001011001101",
    "010010110011",
)

LEAP_SUFFIX = " (nhuận)"
