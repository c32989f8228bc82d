"""
EpochDate errors — типизированные исключения пакета

Два вида ошибок:
- OutOfRangeError: timestamp или дата вне [1970-01-01, 2149-06-06]
- DateParseError: текст не соответствует layout, либо невалидный JSON

Оба наследуют ValueError, поэтому внутри pydantic моделей они
превращаются в обычный ValidationError.
"""

from typing import Optional


class EpochDateError(ValueError):
    """Базовое исключение для всех ошибок EpochDate."""

    code: str = "epoch_date_error"

    def __init__(self, message: str, *, value: Optional[object] = None):
        super().__init__(f"{message} ({self.code})")
        self.message = message
        self.value = value


class OutOfRangeError(EpochDateError):
    """Значение не представимо 16-битным количеством дней."""

    code = "date_out_of_range"


class DateParseError(EpochDateError):
    """Текст не разбирается по заданному layout."""

    code = "date_parse_failed"

    def __init__(
        self,
        message: str,
        *,
        value: Optional[object] = None,
        layout: Optional[str] = None,
    ):
        super().__init__(message, value=value)
        self.layout = layout
