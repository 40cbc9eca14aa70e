"""Fixed income schedule basics.

This package provides the periodic frequency value type used by schedule,
curve and volatility builders to describe how often a dated event recurs.

Key modules:
- schedule.frequency: Periodic frequency, 'Term' sentinel and events per year
- schedule.period: Calendar period arithmetic backed by dateutil
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Main modules are imported via subpackages
    "schedule",
]
