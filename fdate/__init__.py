"""
The French Republican Calendar, with decimal time
"""

from .fr_calendar import (
    decimal_time, gregorian_to_julian_day, gregorian_to_republican,
    julian_day_to_republican,
)
from .republican_date import DEFAULT_FORMAT, RepublicanDate
from .roman import decimal_to_roman


__version__ = '0.1.0'
