"""
Sanity-тест для модуля DayUnits

Проверяет:
1. Границы представимого диапазона (extrema)
2. Конверсии seconds ↔ days ↔ nanos
3. Календарную арифметику (civil → unix seconds)
"""

import pytest

from src.epochdate.domain.errors import OutOfRangeError
from src.epochdate.domain.units import (
    MAX_DAYS,
    MAX_UNIX_SECONDS,
    SECONDS_PER_DAY,
    civil_to_unix_seconds,
    days_to_unix_nanos,
    days_to_unix_seconds,
    is_representable_seconds,
    unix_seconds_to_days,
    validate_days,
    validate_unix_seconds,
)


DAY = 60 * 60 * 24


class TestConstants:
    """Тесты констант"""

    def test_seconds_per_day(self) -> None:
        assert SECONDS_PER_DAY == 86400

    def test_max_days_is_uint16_max(self) -> None:
        assert MAX_DAYS == 65535

    def test_max_unix_seconds(self) -> None:
        """Последняя секунда 2149-06-06"""
        assert MAX_UNIX_SECONDS == 65536 * DAY - 1


class TestExtrema:
    """Тесты границ диапазона"""

    @pytest.mark.parametrize(
        "seconds, valid",
        [
            (-1, False),
            (0, True),
            (65536 * DAY - 1, True),
            (65536 * DAY, False),
        ],
    )
    def test_is_representable_seconds(self, seconds: int, valid: bool) -> None:
        assert is_representable_seconds(seconds) is valid

    def test_validate_unix_seconds_passthrough(self) -> None:
        assert validate_unix_seconds(12345) == 12345

    def test_validate_unix_seconds_rejects_negative(self) -> None:
        with pytest.raises(OutOfRangeError, match="date_out_of_range"):
            validate_unix_seconds(-1)

    def test_validate_unix_seconds_rejects_past_horizon(self) -> None:
        with pytest.raises(OutOfRangeError, match="date_out_of_range"):
            validate_unix_seconds(65536 * DAY)

    def test_validate_days(self) -> None:
        assert validate_days(0) == 0
        assert validate_days(MAX_DAYS) == MAX_DAYS

        with pytest.raises(OutOfRangeError):
            validate_days(-1)
        with pytest.raises(OutOfRangeError):
            validate_days(MAX_DAYS + 1)

    def test_out_of_range_error_is_value_error(self) -> None:
        """OutOfRangeError совместим с ValueError"""
        with pytest.raises(ValueError):
            validate_unix_seconds(-1)

    def test_out_of_range_error_carries_value(self) -> None:
        with pytest.raises(OutOfRangeError) as exc_info:
            validate_unix_seconds(-5)
        assert exc_info.value.value == -5


class TestConversions:
    """Тесты конверсий seconds ↔ days"""

    def test_truncates_to_day(self) -> None:
        """Любая секунда дня даёт тот же день"""
        assert unix_seconds_to_days(0) == 0
        assert unix_seconds_to_days(DAY - 1) == 0
        assert unix_seconds_to_days(DAY) == 1
        assert unix_seconds_to_days(367 * DAY - 1) == 366

    def test_last_representable_day(self) -> None:
        assert unix_seconds_to_days(MAX_UNIX_SECONDS) == MAX_DAYS

    def test_unix_seconds_to_days_validates(self) -> None:
        with pytest.raises(OutOfRangeError):
            unix_seconds_to_days(-1)

    @pytest.mark.parametrize("seconds", [0, 1, 86399, 86400, 1_700_000_000, MAX_UNIX_SECONDS])
    def test_day_window_invariant(self, seconds: int) -> None:
        """Инвариант: days*86400 <= s < days*86400 + 86400"""
        days = unix_seconds_to_days(seconds)
        start = days_to_unix_seconds(days)
        assert start <= seconds < start + SECONDS_PER_DAY

    def test_days_to_unix_nanos(self) -> None:
        assert days_to_unix_nanos(1) == DAY * 1_000_000_000
        assert days_to_unix_nanos(0) == 0


class TestCivilToUnixSeconds:
    """Тесты календарной арифметики"""

    def test_epoch(self) -> None:
        assert civil_to_unix_seconds(1970, 1, 1) == 0

    def test_after_non_leap_year(self) -> None:
        """1970 не високосный: 1971-01-02 = день 366"""
        assert civil_to_unix_seconds(1971, 1, 2) == 366 * DAY

    def test_horizon(self) -> None:
        assert civil_to_unix_seconds(2149, 6, 6) == 65535 * DAY

    def test_before_epoch_is_negative(self) -> None:
        """Проверку диапазона делает вызывающий код"""
        assert civil_to_unix_seconds(1969, 12, 31) == -DAY

    def test_leap_day(self) -> None:
        assert civil_to_unix_seconds(2000, 3, 1) - civil_to_unix_seconds(2000, 2, 28) == 2 * DAY

    @pytest.mark.parametrize(
        "year, month, day",
        [
            (2021, 2, 29),
            (2020, 13, 1),
            (2020, 0, 10),
            (2020, 4, 31),
        ],
    )
    def test_invalid_calendar_components(self, year: int, month: int, day: int) -> None:
        with pytest.raises(OutOfRangeError, match="Invalid calendar date"):
            civil_to_unix_seconds(year, month, day)
