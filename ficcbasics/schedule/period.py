"""
Calendar period arithmetic for schedule frequencies.

A period is a (years, months, days) triple applied to dates with calendar
rules: years and months move the month, clamping the day to the month end,
then days are added.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Tuple, TypeVar

from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

DateLike = TypeVar("DateLike", date, datetime)

_PATTERN = re.compile(
    r"([-+]?)P(?:([-+]?[0-9]+)Y)?(?:([-+]?[0-9]+)M)?(?:([-+]?[0-9]+)W)?(?:([-+]?[0-9]+)D)?",
    re.IGNORECASE,
)


class PeriodUnit(Enum):
    """Calendar units understood by a period."""

    YEARS = "YEARS"
    MONTHS = "MONTHS"
    WEEKS = "WEEKS"
    DAYS = "DAYS"


_UNITS = (PeriodUnit.YEARS, PeriodUnit.MONTHS, PeriodUnit.DAYS)


def _check_int(value, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


@dataclass(frozen=True)
class Period:
    """A signed calendar duration of years, months and days.

    Months are never folded into years implicitly, so twelve months and
    one year are different periods until ``normalized()`` is called.
    Weeks are not a stored unit and are held as seven days each.
    """

    years: int = 0
    months: int = 0
    days: int = 0

    def __post_init__(self):
        _check_int(self.years, "years")
        _check_int(self.months, "months")
        _check_int(self.days, "days")

    @classmethod
    def of_years(cls, years: int) -> "Period":
        return cls(years=years)

    @classmethod
    def of_months(cls, months: int) -> "Period":
        return cls(months=months)

    @classmethod
    def of_weeks(cls, weeks: int) -> "Period":
        _check_int(weeks, "weeks")
        return cls(days=weeks * 7)

    @classmethod
    def of_days(cls, days: int) -> "Period":
        return cls(days=days)

    @classmethod
    def parse(cls, text: str) -> "Period":
        """
        Parse an ISO-8601 period such as 'P1Y6M', 'P2W' or '-P3D'.

        Weeks are converted to days. A leading sign applies to every component.

        Raises:
            TypeError: if text is not a string
            ValueError: if the text does not match the period grammar
        """
        if not isinstance(text, str):
            raise TypeError(f"Period text must be a string, got {type(text).__name__}")
        match = _PATTERN.fullmatch(text)
        if match is None or not any(match.group(i) for i in range(2, 6)):
            raise ValueError(f"Text cannot be parsed to a Period: {text!r}")

        sign, years, months, weeks, days = match.groups()
        negate = -1 if sign == "-" else 1
        total_days = int(weeks or 0) * 7 + int(days or 0)
        return cls(
            years=negate * int(years or 0),
            months=negate * int(months or 0),
            days=negate * total_days,
        )

    # ------------------------------------------------------------------
    def to_total_months(self) -> int:
        """Total months of the years and months parts; days are ignored."""
        return self.years * 12 + self.months

    def is_zero(self) -> bool:
        return self.years == 0 and self.months == 0 and self.days == 0

    def is_negative(self) -> bool:
        """True if any component is below zero."""
        return self.years < 0 or self.months < 0 or self.days < 0

    def negated(self) -> "Period":
        return Period(-self.years, -self.months, -self.days)

    def normalized(self) -> "Period":
        """
        Fold whole years out of the months, leaving days untouched.

        The sign of the total months is kept on both parts, so 18 months
        becomes 1 year 6 months and -18 months becomes -1 year -6 months.
        Returns self when there is nothing to fold.
        """
        total = self.to_total_months()
        years, months = divmod(abs(total), 12)
        if total < 0:
            years, months = -years, -months
        if years == self.years and months == self.months:
            return self
        logger.debug("Normalized %s to %sY%sM", self, years, months)
        return Period(years, months, self.days)

    # ------------------------------------------------------------------
    @property
    def units(self) -> Tuple[PeriodUnit, ...]:
        """Units reported by the period; weeks are never included."""
        return _UNITS

    def get(self, unit: PeriodUnit) -> int:
        """Return the amount held for a unit."""
        if unit == PeriodUnit.YEARS:
            return self.years
        if unit == PeriodUnit.MONTHS:
            return self.months
        if unit == PeriodUnit.DAYS:
            return self.days
        raise ValueError(f"Unsupported unit: {unit}")

    def to_relativedelta(self) -> relativedelta:
        return relativedelta(years=self.years, months=self.months, days=self.days)

    def add_to(self, dt: DateLike) -> DateLike:
        """
        Add this period to a date or datetime.

        Raises:
            ValueError, OverflowError: if the result is outside the supported date range
        """
        return dt + self.to_relativedelta()

    def subtract_from(self, dt: DateLike) -> DateLike:
        """
        Subtract this period from a date or datetime.

        Raises:
            ValueError, OverflowError: if the result is outside the supported date range
        """
        return dt - self.to_relativedelta()

    def __str__(self) -> str:
        if self.is_zero():
            return "P0D"
        text = "P"
        if self.years != 0:
            text += f"{self.years}Y"
        if self.months != 0:
            text += f"{self.months}M"
        if self.days != 0:
            text += f"{self.days}D"
        return text


ZERO = Period()

