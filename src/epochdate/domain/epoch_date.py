"""
EpochDate — Компактная дата (2 байта)

Календарная дата без времени суток, упакованная в беззнаковое
16-битное количество дней с 1970-01-01T00:00:00Z.
Диапазон: 0..65535 → 1970-01-01..2149-06-06.

Часовой пояс учитывается там, где это применимо:
- При конверсии из datetime сохраняется дата относительно зоны самого
  datetime. Любой момент в течение дня (в его зоне) даёт одну и ту же дату.
- При конверсии обратно (to_utc / to_local / in_zone) результат
  нормализуется к полуночи (началу дня) в соответствующей зоне.

Immutable value-тип (подкласс int): сравнение, хэширование и порядок
наследуются от целого числа.
"""

import json
import operator
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Any, Optional, Tuple, Union
from zoneinfo import ZoneInfo

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .codecs import JSONInput
from .errors import DateParseError
from .layouts import ISO, format_layout, parse_layout
from .units import (
    MAX_DAYS,
    civil_to_unix_seconds,
    days_to_unix_nanos,
    days_to_unix_seconds,
    unix_seconds_to_days,
    validate_days,
)


_EPOCH_UTC = datetime(1970, 1, 1, tzinfo=timezone.utc)
_EPOCH_NAIVE = datetime(1970, 1, 1)
_ONE_SECOND = timedelta(seconds=1)

Zone = Union[tzinfo, str, None]


def resolve_zone(zone: Zone) -> Optional[tzinfo]:
    """
    Приведение зоны к tzinfo.

    Args:
        zone: tzinfo, IANA имя ("Europe/Moscow") или None (системная зона)

    Returns:
        tzinfo или None для системной локальной зоны

    Raises:
        zoneinfo.ZoneInfoNotFoundError: Если IANA имя неизвестно
    """
    if isinstance(zone, str):
        return ZoneInfo(zone)
    return zone


# =============================================================================
# EPOCH DATE
# =============================================================================


class EpochDate(int):
    """
    Дата как количество дней с Unix epoch.

    EpochDate(0) — нулевое значение (1970-01-01).
    Прямое конструирование из int проверяет диапазон 0..65535,
    арифметика со сдвигами в днях заворачивается по модулю 65536.
    """

    __slots__ = ()

    def __new__(cls, days: int = 0) -> "EpochDate":
        return super().__new__(cls, validate_days(operator.index(days)))

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_unix_seconds(cls, seconds: int) -> "EpochDate":
        """
        Дата из unix timestamp (UTC-day семантика).

        Args:
            seconds: Секунды с epoch, уже нормализованные по зоне

        Returns:
            floor(seconds / 86400)

        Raises:
            OutOfRangeError: Если timestamp вне [0, MAX_UNIX_SECONDS]
        """
        return cls(unix_seconds_to_days(operator.index(seconds)))

    @classmethod
    def from_calendar_date(cls, year: int, month: int, day: int) -> "EpochDate":
        """
        Дата из (год, месяц, день), интерпретированных как полночь UTC.

        Raises:
            OutOfRangeError: Если дата не существует или вне диапазона
        """
        return cls.from_unix_seconds(civil_to_unix_seconds(year, month, day))

    @classmethod
    def from_date(cls, value: date) -> "EpochDate":
        """Дата из datetime.date (datetime делегируется в from_datetime)."""
        if isinstance(value, datetime):
            return cls.from_datetime(value)
        return cls.from_calendar_date(value.year, value.month, value.day)

    @classmethod
    def from_datetime(cls, value: datetime) -> "EpochDate":
        """
        Дата из момента времени, наблюдаемая в его собственной зоне.

        seconds = unix(value) + utcoffset(value)

        Полночь одного и того же календарного дня в UTC-12 и UTC+14
        (26 часов разницы в абсолютном времени) даёт одну и ту же дату.
        Naive datetime читается как показание часов (offset = 0).

        Raises:
            OutOfRangeError: Если нормализованный timestamp вне диапазона
        """
        offset = value.utcoffset()
        if offset is None:
            seconds = (value - _EPOCH_NAIVE) // _ONE_SECOND
        else:
            seconds = (value - _EPOCH_UTC) // _ONE_SECOND + offset // _ONE_SECOND
        return cls.from_unix_seconds(seconds)

    @classmethod
    def parse(cls, text: str, layout: str = ISO) -> "EpochDate":
        """
        Разбор текста по layout.

        Поля времени суток разбираются, но в дату не попадают. Если layout
        содержит %z, дата нормализуется по разобранному offset.

        Args:
            text: Исходный текст
            layout: strftime layout (по умолчанию ISO "%Y-%m-%d")

        Raises:
            DateParseError: Если текст не соответствует layout
            OutOfRangeError: Если дата вне диапазона
        """
        return cls.from_datetime(parse_layout(text, layout))

    # -------------------------------------------------------------------------
    # Конверсии в datetime
    # -------------------------------------------------------------------------

    def to_utc(self) -> datetime:
        """Полночь даты в UTC (aware datetime)."""
        return _EPOCH_UTC + timedelta(days=int(self))

    def in_zone(self, zone: Zone = None) -> datetime:
        """
        Полночь даты в заданной зоне.

        Не "момент UTC-полночи на часах зоны", а начало этого
        календарного дня в зоне: UTC-полночь переводится в зону,
        затем сдвигается назад на offset зоны в этот момент.

        Args:
            zone: tzinfo, IANA имя или None (системная зона)

        Returns:
            Aware datetime в зоне zone
        """
        tz = resolve_zone(zone)
        moment = self.to_utc().astimezone(tz)
        offset = moment.utcoffset()
        return (moment.astimezone(timezone.utc) - offset).astimezone(tz)

    def to_local(self) -> datetime:
        """Полночь даты в системной локальной зоне."""
        return self.in_zone(None)

    def date_parts(self) -> Tuple[int, int, int]:
        """(год, месяц, день)"""
        utc = self.to_utc()
        return utc.year, utc.month, utc.day

    def to_date(self) -> date:
        """Календарная дата как datetime.date."""
        return self.to_utc().date()

    def to_unix_seconds(self) -> int:
        """Unix seconds UTC-полуночи даты."""
        return days_to_unix_seconds(int(self))

    def to_unix_nanos(self) -> int:
        """Unix nanos UTC-полуночи даты."""
        return days_to_unix_nanos(int(self))

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def format(self, layout: str = ISO) -> str:
        """
        Форматирование UTC-полуночи даты по layout.

        Поля времени суток выводятся как полночь.
        """
        return format_layout(self.to_utc(), layout)

    def __format__(self, format_spec: str) -> str:
        # Без % это обычный spec выравнивания ("{d:>12}"), применяется к ISO тексту
        if "%" not in format_spec:
            return format(str(self), format_spec)
        return self.format(format_spec)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    # -------------------------------------------------------------------------
    # Арифметика (сдвиги в днях, wrap по модулю 2^16)
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "EpochDate":
        if not isinstance(other, int):
            return NotImplemented
        return EpochDate((int(self) + int(other)) & MAX_DAYS)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Union["EpochDate", int]:
        if isinstance(other, EpochDate):
            return int(self) - int(other)
        if not isinstance(other, int):
            return NotImplemented
        return EpochDate((int(self) - int(other)) & MAX_DAYS)

    # -------------------------------------------------------------------------
    # Text capability
    # -------------------------------------------------------------------------

    def to_text(self) -> str:
        """Каноническое текстовое представление: YYYY-MM-DD."""
        return self.format(ISO)

    @classmethod
    def from_text(cls, text: str) -> "EpochDate":
        return cls.parse(text, ISO)

    # -------------------------------------------------------------------------
    # JSON capability
    # -------------------------------------------------------------------------

    def to_json(self) -> str:
        """JSON скаляр: "YYYY-MM-DD" в кавычках."""
        return json.dumps(self.to_text())

    @classmethod
    def from_json(
        cls, data: JSONInput, default: Optional["EpochDate"] = None
    ) -> Optional["EpochDate"]:
        """
        Разбор JSON скаляра.

        Args:
            data: JSON текст (str/bytes)
            default: Что вернуть для JSON null

        Returns:
            EpochDate, либо default для null

        Raises:
            DateParseError: Невалидный JSON или не строка
            OutOfRangeError: Дата вне диапазона
        """
        try:
            value = json.loads(data)
        except ValueError as e:
            raise DateParseError(f"Malformed JSON date {data!r}: {e}", value=data) from e

        if value is None:
            return default
        if not isinstance(value, str):
            raise DateParseError(f"JSON date must be a string, got {value!r}", value=data)

        return cls.from_text(value)

    def merge_json(self, data: JSONInput) -> "EpochDate":
        """Декодирование поверх текущего значения: null оставляет его без изменений."""
        return type(self).from_json(data, default=self)

    # -------------------------------------------------------------------------
    # Pydantic integration
    # -------------------------------------------------------------------------

    @classmethod
    def _coerce(cls, value: Any) -> "EpochDate":
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise DateParseError(f"Cannot build date from bool {value!r}", value=value)
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, date):
            return cls.from_date(value)
        if isinstance(value, (bytes, bytearray)):
            value = value.decode("utf-8")
        if isinstance(value, str):
            return cls.from_text(value)
        raise DateParseError(
            f"Cannot build date from {type(value).__name__}", value=value
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_text, when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "format": "date"}
