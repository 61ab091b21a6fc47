"""Boundary tests for rounding, labels and pollutant grades."""

import pytest

from weatherbrief.reporting.labels import (
    NO_DATA,
    NO_WEATHER_INFO,
    Pollutant,
    format_pollutant,
    format_rounded,
    format_temperature,
    pm10_grade,
    pm25_grade,
    round_one_decimal,
    temperature_label,
    weather_code_label,
    weather_label,
)


class TestFormatRounded:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (35.04, "35"),
            (42.06, "42.1"),
            (1.05, "1.1"),
            (40.44, "40.4"),
            (15.05, "15.1"),
            (9.04, "9"),
            (0, "0"),
            (-2.25, "-2.3"),
            (-0.04, "0"),
        ],
    )
    def test_values(self, value, expected):
        assert format_rounded(value) == expected

    def test_absent(self):
        assert format_rounded(None) == NO_DATA

    def test_half_away_from_zero(self):
        assert round_one_decimal(0.25) == 0.3
        assert round_one_decimal(-0.25) == -0.3

    def test_huge_values(self):
        assert round_one_decimal(1e308) == 1e308
        assert round_one_decimal(-(2.0**53)) == -(2.0**53)
        assert format_rounded(1e308) == str(int(1e308))
        assert pm10_grade(1e308) == "매우나쁨"

    def test_temperature_unit(self):
        assert format_temperature(1.05) == "1.1°C"
        assert format_temperature(0) == "0°C"
        assert format_temperature(None) == NO_DATA


class TestTemperatureLabel:
    @pytest.mark.parametrize(
        "celsius,expected",
        [
            (-5, "매우추움"),
            (-4.9, "추움"),
            (5, "추움"),
            (12, "쌀쌀함"),
            (19, "선선함"),
            (26, "온화함"),
            (31, "더움"),
            (31.1, "매우더움"),
        ],
    )
    def test_ladder(self, celsius, expected):
        assert temperature_label(celsius) == expected

    def test_absent(self):
        assert temperature_label(None) is None


class TestWeatherCodeLabel:
    @pytest.mark.parametrize(
        "code,expected",
        [
            (0, "맑음"),
            (1, "흐림"),
            (3, "흐림"),
            (45, "안개"),
            (48, "안개"),
            (51, "비"),
            (67, "비"),
            (80, "비"),
            (82, "비"),
            (71, "눈"),
            (77, "눈"),
            (85, "눈"),
            (86, "눈"),
            (95, "뇌우"),
            (99, "뇌우"),
        ],
    )
    def test_known(self, code, expected):
        assert weather_code_label(code) == expected

    @pytest.mark.parametrize("code", [4, 50, 68, 83, 97, 100])
    def test_unknown(self, code):
        assert weather_code_label(code) == NO_WEATHER_INFO

    def test_absent(self):
        assert weather_code_label(None) is None


class TestWeatherLabel:
    def test_both(self):
        assert weather_label(3, 0) == "추움·맑음"

    def test_temperature_only(self):
        assert weather_label(20, None) == "온화함"

    def test_code_only(self):
        assert weather_label(None, 61) == "비"

    def test_neither(self):
        assert weather_label(None, None) == NO_DATA

    def test_zero_values_are_present(self):
        assert weather_label(0, 0) == "추움·맑음"


class TestPollutantGrades:
    @pytest.mark.parametrize(
        "value,expected",
        [(30, "좋음"), (30.01, "좋음"), (31, "보통"), (80, "보통"), (150, "나쁨"), (151, "매우나쁨")],
    )
    def test_pm10(self, value, expected):
        assert pm10_grade(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [(15, "좋음"), (16, "보통"), (35, "보통"), (75, "나쁨"), (75.1, "매우나쁨")],
    )
    def test_pm25(self, value, expected):
        assert pm25_grade(value) == expected

    def test_grade_follows_printed_value(self):
        # 30.05 prints as 30.1, so it must not be graded "good"
        assert format_pollutant(Pollutant.PM10, 30.05) == "보통(30.1)µg/m³"

    def test_absent_grades(self):
        assert pm10_grade(None) is None
        assert pm25_grade(None) is None


class TestFormatPollutant:
    def test_cell(self):
        assert format_pollutant(Pollutant.PM10, 35.04) == "보통(35)µg/m³"
        assert format_pollutant(Pollutant.PM2_5, 24.04) == "보통(24)µg/m³"

    def test_zero(self):
        assert format_pollutant(Pollutant.PM2_5, 0) == "좋음(0)µg/m³"

    def test_absent(self):
        assert format_pollutant(Pollutant.PM10, None) == NO_DATA
