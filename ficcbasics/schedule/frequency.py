"""
Periodic frequency used by products that have an event every so often.

A frequency is any positive period of days, weeks, months or years. The
special value ``TERM`` stands for no subdivision of the whole term (also
known as zero-coupon or once). It is held as 10,000 years so that date
arithmetic still works, always landing after the end of the term.

Months and years are not normalized, so 12 months and 1 year are different
frequencies until ``normalized()`` is applied. Standard date addition
rules mean there is no difference between them when added to a date.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Optional, Tuple

from .period import DateLike, Period, PeriodUnit

logger = logging.getLogger(__name__)

# Artificial maximum length of an ordinary frequency
MAX_YEARS = 1_000
MAX_MONTHS = MAX_YEARS * 12
# Artificial length of the 'Term' frequency
TERM_YEARS = 10_000

MONTHS_PER_YEAR = 12
DAYS_PER_YEAR = 364

TERM_NAME = "Term"


class InvalidFrequencyError(ValueError):
    """Raised when a frequency cannot be created, parsed or converted."""


def _require(value, name: str) -> None:
    if value is None:
        raise InvalidFrequencyError(f"{name} must not be None")


def _default_name(period: Period) -> str:
    if period.to_total_months() == 0 and period.days % 7 == 0:
        return f"P{period.days // 7}W"
    return str(period)


@dataclass(frozen=True)
class Frequency:
    """
    Periodic frequency backed by a calendar period.

    Equality and hashing use the period only, the name is for display.
    The constructor applies the same limits as the factories: the period
    must be positive, at most 1,000 years unless it is the 'Term' period,
    and a whole number of weeks is named in weeks. Use ``of`` to also
    collapse a day count into weeks from a generic period.
    """

    period: Period
    name: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        if not isinstance(self.period, Period):
            raise InvalidFrequencyError(f"Period must be a Period, got {self.period!r}")
        if self.period.is_zero():
            raise InvalidFrequencyError("Period must not be zero")
        if self.period.is_negative():
            raise InvalidFrequencyError("Period must not be negative")
        if self.period.to_total_months() > MAX_MONTHS and self.period != _TERM_PERIOD:
            raise InvalidFrequencyError("Period must not exceed 1000 years")
        if self.name is None:
            object.__setattr__(self, "name", _default_name(self.period))

    # ------------------------------------------------------------------
    @classmethod
    def of(cls, period: Period) -> "Frequency":
        """
        Obtain a frequency from a period.

        If the period is only days, multiples of 7 are converted to weeks.
        Months are not normalized into years.

        Args:
            period: Positive, non-zero period of at most 1,000 years

        Returns:
            The frequency

        Raises:
            InvalidFrequencyError: if the period is missing, negative, zero or too large
        """
        if period is None:
            raise InvalidFrequencyError("Period must not be None")
        if not isinstance(period, Period):
            raise InvalidFrequencyError(f"Period must be a Period, got {period!r}")
        if period.is_negative():
            raise InvalidFrequencyError(f"Period must not be negative: {period}")

        months = period.to_total_months()
        if months == 0 and period.days != 0:
            return cls.of_days(period.days)
        if months > MAX_MONTHS:
            raise InvalidFrequencyError("Period must not exceed 1000 years")
        return cls(period)

    @classmethod
    def of_days(cls, days: int) -> "Frequency":
        """Frequency of a number of days, converted to weeks when divisible by 7."""
        _require(days, "Days")
        if days > 0 and days % 7 == 0:
            logger.debug("Converting %s days to %s weeks", days, days // 7)
            return cls.of_weeks(days // 7)
        return cls(Period.of_days(days))

    @classmethod
    def of_weeks(cls, weeks: int) -> "Frequency":
        _require(weeks, "Weeks")
        return cls(Period.of_weeks(weeks))

    @classmethod
    def of_months(cls, months: int) -> "Frequency":
        """Frequency of a number of months, at most 12,000. Not normalized into years."""
        _require(months, "Months")
        if months > MAX_MONTHS:
            raise InvalidFrequencyError("Months must not exceed 12,000")
        return cls(Period.of_months(months))

    @classmethod
    def of_years(cls, years: int) -> "Frequency":
        """Frequency of a number of years, at most 1,000."""
        _require(years, "Years")
        if years > MAX_YEARS:
            raise InvalidFrequencyError("Years must not exceed 1,000")
        return cls(Period.of_years(years))

    @classmethod
    def parse(cls, text: str) -> "Frequency":
        """
        Parse a formatted frequency.

        The format is ISO-8601 based, such as 'P3M', or the same without
        the 'P' prefix, such as '2W'. 'Term' is matched ignoring case.

        Raises:
            InvalidFrequencyError: if the text is missing or cannot be parsed
        """
        if text is None:
            raise InvalidFrequencyError("Frequency text must not be None")
        if not isinstance(text, str):
            raise InvalidFrequencyError(f"Frequency text must be a string, got {text!r}")
        if text.lower() == TERM_NAME.lower():
            return TERM

        prefixed = text if text[:1] in ("P", "p") else "P" + text
        try:
            period = Period.parse(prefixed)
        except ValueError as exc:
            logger.debug("Invalid frequency text %r: %s", text, exc)
            raise InvalidFrequencyError(f"Unable to parse frequency: {text!r}") from exc
        return cls.of(period)

    @classmethod
    def try_parse(cls, text: str) -> "FrequencyResult":
        """Parse a frequency, returning the failure instead of raising it."""
        return attempt(cls.parse, text)

    # ------------------------------------------------------------------
    def is_term(self) -> bool:
        """True if this is the 'Term' frequency, no subdivision of the term."""
        return self.period == _TERM_PERIOD

    def is_week_based(self) -> bool:
        """True if the period is a whole number of weeks with no month or year part."""
        return self.period.to_total_months() == 0 and self.period.days % 7 == 0

    def is_month_based(self) -> bool:
        """
        True if the period is a whole number of months with no day part.

        Year-based frequencies are also month-based.
        """
        return (
            self.period.to_total_months() > 0
            and self.period.days == 0
            and not self.is_term()
        )

    def normalized(self) -> "Frequency":
        """Return an equivalent frequency with months of 12 or more folded into years."""
        norm = self.period.normalized()
        if norm == self.period:
            return self
        return Frequency.of(norm)

    def events_per_year(self) -> int:
        """
        Number of events that occur in a year.

        Month-based frequencies divide 12 by the number of months, which only
        works for P1M, P2M, P3M, P4M, P6M and P12M (or P1Y). Day and week
        based frequencies divide 364 by the number of days, such as P1D, P2D,
        P4D, P1W, P2W, P4W, P13W, P26W and P52W. 'Term' returns zero.

        Raises:
            InvalidFrequencyError: if the frequency has no whole number of events per year
        """
        if self.is_term():
            return 0
        months = self.period.to_total_months()
        days = self.period.days
        if self.is_month_based():
            if MONTHS_PER_YEAR % months == 0:
                return MONTHS_PER_YEAR // months
        elif months == 0 and DAYS_PER_YEAR % days == 0:
            return DAYS_PER_YEAR // days
        raise InvalidFrequencyError(f"Unable to calculate events per year: {self}")

    # ------------------------------------------------------------------
    @property
    def units(self) -> Tuple[PeriodUnit, ...]:
        """Years, months and days. Weeks are never reported."""
        return self.period.units

    def get(self, unit: PeriodUnit) -> int:
        return self.period.get(unit)

    def add_to(self, dt: DateLike) -> DateLike:
        """Add the period of this frequency to a date; overflow errors propagate."""
        return self.period.add_to(dt)

    def subtract_from(self, dt: DateLike) -> DateLike:
        """Subtract the period of this frequency from a date; overflow errors propagate."""
        return self.period.subtract_from(dt)

    def __radd__(self, other):
        if isinstance(other, date):
            return self.add_to(other)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, date):
            return self.subtract_from(other)
        return NotImplemented

    def __reduce__(self):
        return (_resolve, (self.period,))

    def __str__(self) -> str:
        return self.name


def _resolve(period: Period) -> Frequency:
    """Rebuild a frequency after unpickling or copying, keeping TERM shared."""
    if period == _TERM_PERIOD:
        return TERM
    return Frequency.of(period)


@dataclass(frozen=True)
class FrequencyResult:
    """Outcome of a frequency operation: a value or the error that prevented it."""

    value: Any = None
    error: Optional[InvalidFrequencyError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.value


def attempt(func: Callable[..., Any], *args, **kwargs) -> FrequencyResult:
    """
    Run a frequency factory or calculation and capture invalid-frequency failures.

    Only ``InvalidFrequencyError`` is captured, other errors propagate.
    """
    try:
        return FrequencyResult(value=func(*args, **kwargs))
    except InvalidFrequencyError as exc:
        return FrequencyResult(error=exc)


_TERM_PERIOD = Period.of_years(TERM_YEARS)

P1D = Frequency.of_days(1)
"""Daily, 364 events per year."""
P1W = Frequency.of_weeks(1)
"""Weekly, 52 events per year."""
P2W = Frequency.of_weeks(2)
"""Bi-weekly, 26 events per year."""
P4W = Frequency.of_weeks(4)
"""Lunar, 13 events per year."""
P13W = Frequency.of_weeks(13)
"""Thirteen weeks, 4 events per year."""
P26W = Frequency.of_weeks(26)
"""Twenty-six weeks, 2 events per year."""
P52W = Frequency.of_weeks(52)
"""Fifty-two weeks, 1 event per year."""
P1M = Frequency.of_months(1)
"""Monthly, 12 events per year."""
P2M = Frequency.of_months(2)
"""Bi-monthly, 6 events per year."""
P3M = Frequency.of_months(3)
"""Quarterly, 4 events per year."""
P4M = Frequency.of_months(4)
"""Four months, 3 events per year."""
P6M = Frequency.of_months(6)
"""Semi-annual, 2 events per year."""
P12M = Frequency.of_months(12)
"""Annual, 1 event per year."""
TERM = Frequency(_TERM_PERIOD, TERM_NAME)
"""The whole term, zero-coupon. No events per year."""
