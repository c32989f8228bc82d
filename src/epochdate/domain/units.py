"""
DayUnits — Централизованный модуль конверсии единиц времени

Единственный допустимый способ преобразований между:
- unix seconds (секунды с 1970-01-01T00:00:00Z)
- unix nanos (наносекунды с той же точки)
- days (целые дни с epoch, 16-битное беззнаковое значение)

ЗАПРЕЩЕНО делить/умножать на 86400 вне этого модуля.
"""

from datetime import date
from typing import Final

from .errors import OutOfRangeError


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

SECONDS_PER_DAY: Final[int] = 60 * 60 * 24

NANOS_PER_SECOND: Final[int] = 1_000_000_000

# 16-битное беззнаковое: 0..65535 дней → 1970-01-01..2149-06-06
MAX_DAYS: Final[int] = (1 << 16) - 1

# Последняя секунда 2149-06-06 (UTC)
MAX_UNIX_SECONDS: Final[int] = (1 << 16) * SECONDS_PER_DAY - 1

EPOCH_ORDINAL: Final[int] = date(1970, 1, 1).toordinal()


# =============================================================================
# ВАЛИДАЦИЯ ДИАПАЗОНА
# =============================================================================


def is_representable_seconds(seconds: int) -> bool:
    """
    Проверка, что unix timestamp попадает в представимый диапазон.

    Единственный gate для конструирования даты из сырого timestamp:
    0 <= seconds <= MAX_UNIX_SECONDS

    Args:
        seconds: Секунды с epoch (UTC-day семантика)

    Returns:
        True если из timestamp можно построить дату
    """
    return 0 <= seconds <= MAX_UNIX_SECONDS


def validate_unix_seconds(seconds: int) -> int:
    """
    Проверка timestamp с exception.

    Args:
        seconds: Секунды с epoch

    Returns:
        seconds без изменений

    Raises:
        OutOfRangeError: Если timestamp вне [0, MAX_UNIX_SECONDS]
    """
    if not is_representable_seconds(seconds):
        raise OutOfRangeError(
            f"Unix timestamp {seconds} outside [0, {MAX_UNIX_SECONDS}]",
            value=seconds,
        )
    return seconds


def validate_days(days: int) -> int:
    """
    Проверка количества дней (прямое конструирование из int).

    Raises:
        OutOfRangeError: Если days вне [0, MAX_DAYS]
    """
    if not 0 <= days <= MAX_DAYS:
        raise OutOfRangeError(f"Day count {days} outside [0, {MAX_DAYS}]", value=days)
    return days


# =============================================================================
# БАЗОВЫЕ КОНВЕРТЕРЫ
# =============================================================================


def unix_seconds_to_days(seconds: int) -> int:
    """
    Конверсия: unix seconds → дни с epoch

    Целочисленное деление, UTC-day семантика. Timestamp должен быть
    уже нормализован по часовому поясу вызывающим кодом.

    Raises:
        OutOfRangeError: Если timestamp вне диапазона
    """
    return validate_unix_seconds(seconds) // SECONDS_PER_DAY


def days_to_unix_seconds(days: int) -> int:
    """Конверсия: дни → unix seconds (UTC полночь)."""
    return days * SECONDS_PER_DAY


def days_to_unix_nanos(days: int) -> int:
    """Конверсия: дни → unix nanos (UTC полночь)."""
    return days * SECONDS_PER_DAY * NANOS_PER_SECOND


def civil_to_unix_seconds(year: int, month: int, day: int) -> int:
    """
    Конверсия: григорианская дата → unix seconds её UTC полуночи.

    Args:
        year: Год (пролептический григорианский)
        month: Месяц 1-12
        day: День месяца

    Returns:
        Секунды с epoch (могут быть вне диапазона, проверку делает вызывающий)

    Raises:
        OutOfRangeError: Если компоненты не образуют существующую дату
    """
    try:
        ordinal = date(year, month, day).toordinal()
    except ValueError as e:
        raise OutOfRangeError(
            f"Invalid calendar date {year:04d}-{month:02d}-{day:02d}: {e}",
            value=(year, month, day),
        ) from e

    return days_to_unix_seconds(ordinal - EPOCH_ORDINAL)
