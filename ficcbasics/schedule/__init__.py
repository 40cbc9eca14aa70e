# Re-export frequency and period components
from .frequency import (
    P1D,
    P1M,
    P1W,
    P2M,
    P2W,
    P3M,
    P4M,
    P4W,
    P6M,
    P12M,
    P13W,
    P26W,
    P52W,
    TERM,
    Frequency,
    FrequencyResult,
    InvalidFrequencyError,
    attempt,
)
from .period import ZERO, Period, PeriodUnit

__all__ = [
    "Frequency",
    "FrequencyResult",
    "InvalidFrequencyError",
    "attempt",
    "Period",
    "PeriodUnit",
    "ZERO",
    # Frequency constants
    "P1D",
    "P1W",
    "P2W",
    "P4W",
    "P13W",
    "P26W",
    "P52W",
    "P1M",
    "P2M",
    "P3M",
    "P4M",
    "P6M",
    "P12M",
    "TERM",
]
