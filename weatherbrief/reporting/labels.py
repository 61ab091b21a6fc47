"""Qualitative labels, pollutant grades and number formatting.

Every function accepts None (absent) and never raises. Threshold ladders
are checked top to bottom with inclusive upper bounds; the first match wins.
"""

import math
import sys
from enum import StrEnum

NO_DATA = "데이터없음"
NO_WEATHER_INFO = "날씨정보없음"
PM_UNIT = "µg/m³"

_EPSILON = sys.float_info.epsilon
# floats at or above this magnitude have no fractional part
_WHOLE_MAGNITUDE = 2.0**52


class Pollutant(StrEnum):
    PM10 = "pm10"
    PM2_5 = "pm2_5"


# (inclusive upper bound, label)
TEMPERATURE_LADDER: list[tuple[float, str]] = [
    (-5, "매우추움"),
    (5, "추움"),
    (12, "쌀쌀함"),
    (19, "선선함"),
    (26, "온화함"),
    (31, "더움"),
]
TEMPERATURE_TOP = "매우더움"

PM10_LADDER: list[tuple[float, str]] = [
    (30, "좋음"),
    (80, "보통"),
    (150, "나쁨"),
]
PM25_LADDER: list[tuple[float, str]] = [
    (15, "좋음"),
    (35, "보통"),
    (75, "나쁨"),
]
PM_TOP = "매우나쁨"


def _ladder(value: float, ladder: list[tuple[float, str]], top: str) -> str:
    for upper, label in ladder:
        if value <= upper:
            return label
    return top


def round_one_decimal(value: float) -> float:
    """Round half away from zero to one decimal place.

    A machine epsilon is added to the magnitude first so that values like
    1.05, stored as 1.04999..., still round up.
    """
    if not math.isfinite(value) or abs(value) >= _WHOLE_MAGNITUDE:
        # non-finite, or already whole
        return float(value)
    scaled = math.floor((abs(value) + _EPSILON) * 10 + 0.5) / 10
    if scaled == 0:
        return 0.0
    return math.copysign(scaled, value)


def format_rounded(value: float | None) -> str:
    if value is None:
        return NO_DATA
    rounded = round_one_decimal(value)
    if rounded.is_integer():
        return str(int(rounded))
    return f"{rounded:.1f}"


def format_temperature(value: float | None) -> str:
    if value is None:
        return NO_DATA
    return f"{format_rounded(value)}°C"


def temperature_label(celsius: float | None) -> str | None:
    if celsius is None:
        return None
    return _ladder(celsius, TEMPERATURE_LADDER, TEMPERATURE_TOP)


def weather_code_label(code: float | None) -> str | None:
    """Map a WMO weather code to a label; unknown codes get NO_WEATHER_INFO."""
    if code is None:
        return None
    if code == 0:
        return "맑음"
    if code in (1, 2, 3):
        return "흐림"
    if code in (45, 48):
        return "안개"
    if 51 <= code <= 67 or 80 <= code <= 82:
        return "비"
    if 71 <= code <= 77 or code in (85, 86):
        return "눈"
    if code in (95, 96, 99):
        return "뇌우"
    return NO_WEATHER_INFO


def weather_label(temperature: float | None, code: float | None) -> str:
    """Combine temperature and weather labels, dropping whichever is absent."""
    temp_label = temperature_label(temperature)
    code_label = weather_code_label(code)

    if temp_label and code_label:
        return f"{temp_label}·{code_label}"
    if temp_label:
        return temp_label
    if code_label:
        return code_label
    return NO_DATA


def pm10_grade(value: float | None) -> str | None:
    if value is None:
        return None
    return _ladder(round_one_decimal(value), PM10_LADDER, PM_TOP)


def pm25_grade(value: float | None) -> str | None:
    if value is None:
        return None
    return _ladder(round_one_decimal(value), PM25_LADDER, PM_TOP)


def pollutant_grade(kind: Pollutant, value: float | None) -> str | None:
    if kind == Pollutant.PM10:
        return pm10_grade(value)
    return pm25_grade(value)


def format_pollutant(kind: Pollutant, value: float | None) -> str:
    if value is None:
        return NO_DATA
    return f"{pollutant_grade(kind, value)}({format_rounded(value)}){PM_UNIT}"
