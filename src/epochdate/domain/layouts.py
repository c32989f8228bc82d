"""
Date layouts — именованные форматы и strftime/strptime хелперы

Layout — обычная strftime строка. Дополнительно поддерживаются
непаддированные поля в стиле glibc (`%-m`, `%-d`, ...) на любой
платформе: при форматировании они раскрываются здесь, при разборе
сводятся к обычным полям (strptime и так принимает 1-2 цифры).
Паддированные поля при разборе требуют точную ширину: "1970-1-2"
не разбирается по "%Y-%m-%d".
"""

import re
from datetime import datetime
from typing import Final

from .errors import DateParseError


# =============================================================================
# ИМЕНОВАННЫЕ LAYOUTS
# =============================================================================

# Каноническое текстовое представление (ISO-8601 / RFC 3339 full-date)
ISO: Final[str] = "%Y-%m-%d"

# Короткий американский формат: 1-2-06
AMERICAN_SHORT: Final[str] = "%-m-%-d-%y"

# ISO-8601 instant, для отладочного вывода datetime
ISO_INSTANT: Final[str] = "%Y-%m-%dT%H:%M:%S%z"


# =============================================================================
# НЕПАДДИРОВАННЫЕ ПОЛЯ
# =============================================================================

_DIRECTIVE = re.compile(r"%(?:%|-([mdHIMSjy]))")

_UNPADDED_FIELDS = {
    "m": lambda dt: dt.month,
    "d": lambda dt: dt.day,
    "H": lambda dt: dt.hour,
    "I": lambda dt: dt.hour % 12 or 12,
    "M": lambda dt: dt.minute,
    "S": lambda dt: dt.second,
    "j": lambda dt: dt.timetuple().tm_yday,
    "y": lambda dt: dt.year % 100,
}


def format_layout(dt: datetime, layout: str) -> str:
    """
    Форматирование datetime по layout.

    Args:
        dt: Момент времени для форматирования
        layout: strftime строка, допускающая `%-X` поля

    Returns:
        Отформатированная строка
    """

    def expand(match: re.Match) -> str:
        field = match.group(1)
        if field is None:
            return match.group(0)  # "%%" отдаём strftime
        return str(_UNPADDED_FIELDS[field](dt))

    return dt.strftime(_DIRECTIVE.sub(expand, layout))


def strptime_layout(layout: str) -> str:
    """Layout для strptime: `%-X` → `%X`."""

    def normalize(match: re.Match) -> str:
        field = match.group(1)
        return match.group(0) if field is None else f"%{field}"

    return _DIRECTIVE.sub(normalize, layout)


# =============================================================================
# ШИРИНА ПОЛЕЙ ПРИ РАЗБОРЕ
# =============================================================================

# strptime принимает 1 цифру и для паддированных полей ("1970-1-2" по "%Y-%m-%d");
# ширину проверяем отдельно, до strptime
_PARSE_TOKEN = re.compile(r"%(?:%|-?[a-zA-Z])")

_PADDED_WIDTHS = {
    "Y": r"\d{4}",
    "m": r"\d{2}",
    "d": r"\d{2}",
    "H": r"\d{2}",
    "I": r"\d{2}",
    "M": r"\d{2}",
    "S": r"\d{2}",
    "y": r"\d{2}",
    "j": r"\d{3}",
}


def layout_pattern(layout: str) -> "re.Pattern[str]":
    """
    Регулярное выражение формы текста для layout.

    Паддированные числовые поля требуют точную ширину, `%-X` — 1-2 цифры
    (`%-j` — 1-3), прочие директивы (%b, %z, %p, ...) проверяет strptime.
    """
    parts = []
    position = 0
    for match in _PARSE_TOKEN.finditer(layout):
        parts.append(re.escape(layout[position:match.start()]))
        token = match.group(0)
        if token == "%%":
            parts.append("%")
        elif token.startswith("%-"):
            parts.append(r"\d{1,3}" if token[2] == "j" else r"\d{1,2}")
        else:
            parts.append(_PADDED_WIDTHS.get(token[1], ".+?"))
        position = match.end()
    parts.append(re.escape(layout[position:]))
    return re.compile("".join(parts), re.DOTALL)


def parse_layout(text: str, layout: str) -> datetime:
    """
    Разбор текста по layout.

    Args:
        text: Исходный текст
        layout: strftime строка

    Returns:
        datetime (aware, если layout содержит %z; иначе naive)

    Raises:
        DateParseError: Если текст не соответствует layout
    """
    try:
        if layout_pattern(layout).fullmatch(text) is None:
            raise ValueError("field widths do not match layout")
        return datetime.strptime(text, strptime_layout(layout))
    except (TypeError, ValueError) as e:
        raise DateParseError(
            f"Cannot parse {text!r} with layout {layout!r}: {e}",
            value=text,
            layout=layout,
        ) from e
