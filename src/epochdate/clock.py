"""Clock: текущая дата на границе системы

Единственное место, где читаются системные часы и локальная зона.
Ядро (EpochDate) остаётся чистым: текущий момент и зона передаются
снаружи (now=..., ClockConfig.zone).

Порядок:
1. Текущий момент (aware datetime) от источника now
2. Перевод в настроенную зону (None → системная локальная)
3. EpochDate.from_datetime (нормализация по offset)
4. Вне диапазона (после 2149-06-06): нулевая дата + WARNING,
   либо OutOfRangeError в strict режиме
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Callable, Optional

from src.epochdate.domain.epoch_date import EpochDate, resolve_zone
from src.epochdate.domain.errors import OutOfRangeError


logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ClockConfig:
    """Конфигурация Clock."""

    # IANA имя зоны для today(); None → системная локальная зона
    zone: Optional[str] = None

    # True → today() пробрасывает OutOfRangeError вместо нулевой даты
    strict: bool = False


def _system_now() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# CLOCK
# =============================================================================


class Clock:
    """Источник текущей даты.

    Args:
        config: Конфигурация (зона, strict режим)
        now: Источник текущего момента; должен возвращать aware datetime
    """

    def __init__(
        self,
        config: Optional[ClockConfig] = None,
        now: Optional[Callable[[], datetime]] = None,
    ):
        self.config = config or ClockConfig()
        self._now = now or _system_now
        self._zone: Optional[tzinfo] = resolve_zone(self.config.zone)
        logger.debug(
            "Clock zone resolved: %s", self._zone if self._zone is not None else "system local"
        )

    @property
    def zone(self) -> Optional[tzinfo]:
        return self._zone

    def now(self) -> datetime:
        """Текущий момент в настроенной зоне."""
        return self._now().astimezone(self._zone)

    def today(self) -> EpochDate:
        """Текущая дата в настроенной зоне."""
        return self._to_date(self.now())

    def today_utc(self) -> EpochDate:
        """Текущая дата в UTC."""
        return self._to_date(self._now().astimezone(timezone.utc))

    def _to_date(self, moment: datetime) -> EpochDate:
        try:
            return EpochDate.from_datetime(moment)
        except OutOfRangeError:
            if self.config.strict:
                raise
            logger.warning(
                "Current moment %s is outside the representable range, using %s",
                moment.isoformat(),
                EpochDate(0),
            )
            return EpochDate(0)


_DEFAULT_CLOCK = Clock()


def today() -> EpochDate:
    """Текущая дата в системной локальной зоне (нулевая дата после 2149-06-06)."""
    return _DEFAULT_CLOCK.today()


def today_utc() -> EpochDate:
    """Текущая дата в UTC (нулевая дата после 2149-06-06)."""
    return _DEFAULT_CLOCK.today_utc()
