"""
Republican dates and their formatting
"""

from collections import namedtuple

from .fr_calendar import (
    JOURS, MOIS_REPU, SANSCULOTTIDES,
    decimal_time, gregorian_to_julian_day, julian_day_to_republican,
)
from .roman import decimal_to_roman
from .rural import JOURS_RURAUX


DEFAULT_FORMAT = "%A, %d %B an %Y (%J). %Hh %Mm %Ss"


class RepublicanDate(namedtuple('RepublicanDate', 'year month day decade weekday rural day_of_year time')):
    """A date of the Republican calendar, with a decimal time of day.

    `date` is a (year, month, day) tuple, the Sansculottides being month 13,
    and `time` is a decimal (hour, minute, second) tuple. The values aren't
    checked. `decade` and `rural` are 0 during the Sansculottides, and the
    day of a Sansculottide must not be greater than 6.
    """

    __slots__ = ()

    def __new__(cls, date, time):
        year, month, day = date
        return super(RepublicanDate, cls).__new__(
            cls, year, month, day,
            decade=0 if month == 13 else (day - 1) // 10 + 1,
            weekday=(day - 1) % 10 + 1,
            rural=0 if month == 13 else (month - 1) * 30 + day,
            day_of_year=(month - 1) * 30 + day,
            time=tuple(time),
        )

    def __getnewargs__(self):
        return (tuple(self[:3]), self.time)

    @classmethod
    def _make(cls, iterable):
        year, month, day, decade, weekday, rural, day_of_year, time = iterable
        return cls((year, month, day), time)

    def _replace(self, **kw):
        # the derived fields can't be replaced, they follow the date
        date = tuple(kw.pop(f, getattr(self, f)) for f in ('year', 'month', 'day'))
        time = kw.pop('time', self.time)
        if kw:
            raise ValueError('Got unexpected field names: %r' % list(kw))
        return self.__class__(date, time)

    __replace__ = _replace

    @classmethod
    def from_gregorian(cls, year, month, day, hour=0, minute=0, second=0):
        jd = gregorian_to_julian_day(year, month, day, hour, minute, second)
        return cls(julian_day_to_republican(jd), decimal_time(hour, minute, second))

    @classmethod
    def from_datetime(cls, dt):
        return cls.from_gregorian(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second)

    def format_str(self, fmt):
        """Renders the date according to `fmt`.

        The directives are introduced by a `%`. Unknown directives, and the
        ones that don't apply to the Sansculottides (`%J`, `%w`, `%W`), are
        dropped from the output.

        >>> RepublicanDate((230, 3, 17), (5, 50, 99)).format_str('%A %d %B an %Y')
        'Septidi 17 Frimaire an CCXXX'
        """
        r = []
        percent = False
        for c in fmt:
            if not percent:
                if c == '%':
                    percent = True
                else:
                    r.append(c)
                continue
            percent = False
            if c == '%':
                r.append('%')
            elif c == 'A':
                names = SANSCULOTTIDES if self.month == 13 else JOURS
                r.append(names[self.weekday - 1])
            elif c == 'B':
                r.append(MOIS_REPU[self.month - 1])
            elif c == 'd':
                r.append(str(self.day))
            elif c == 'H':
                r.append(str(self.time[0]))
            elif c == 'j':
                r.append(str(self.day_of_year))
            elif c == 'J':
                if self.month != 13:
                    r.append(JOURS_RURAUX[self.rural - 1])
            elif c == 'm':
                r.append(str(self.month))
            elif c == 'M':
                r.append(str(self.time[1]))
            elif c == 'n':
                r.append('\n')
            elif c == 'S':
                r.append(str(self.time[2]))
            elif c == 't':
                r.append('\t')
            elif c == 'u':
                r.append(str(self.weekday))
            elif c == 'w':
                if self.decade != 0:
                    r.append(str(self.decade))
            elif c == 'W':
                if self.decade != 0:
                    r.append(decimal_to_roman(self.decade))
            elif c == 'y':
                r.append(str(self.year))
            elif c == 'Y':
                if self.year < 0:
                    r.append('-')
                r.append(decimal_to_roman(abs(self.year)))
        return ''.join(r)
