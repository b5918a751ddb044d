"""
A module to convert dates to the French Republican Calendar
"""

from math import fmod, trunc


MOIS_REPU = (
    "Vendémiaire", "Brumaire", "Frimaire",
    "Nivôse", "Pluviôse", "Ventôse",
    "Germinal", "Floréal", "Prairial",
    "Messidor", "Thermidor", "Fructidor",
    "Sansculottides",
)
JOURS = (
    "Primidi", "Duodi", "Tridi", "Quarti", "Quintidi",
    "Sextidi", "Septidi", "Octidi", "Nonidi", "Décadi",
)
SANSCULOTTIDES = (
    "La Fête de la Vertu", "La Fête du Génie", "La Fête du Travail",
    "La Fête de l'Opinion", "La Fête des Récompenses", "La Fête de la Révolution",
)

# Parameters of the Hatcher (1985) equations, with Parisot's (1986)
# coefficients for the Republican calendar.
EPOCH_Y = 6504
EPOCH_J = 111
EPOCH_M = 1
EPOCH_N = 13
EPOCH_R = 4
EPOCH_P = 1461
EPOCH_V = 3
EPOCH_S = 30


def gregorian_to_julian_day(year, month, day, hour=0, minute=0, second=0):
    """Returns the Julian Day of a proleptic Gregorian date and time.

    Jean Meeus, Astronomical Algorithms (1991), pp. 60-61. The date isn't
    validated.

    >>> gregorian_to_julian_day(1999, 1, 1)
    2451179.5
    """
    if month > 2:
        y, m = float(year), float(month)
    else:
        y, m = float(year - 1), float(month + 12)
    a = trunc(y / 100)
    b = 2 - a + trunc(a / 4)
    d = day + hour / 24 + minute / 1440 + second / 86400
    return trunc(365.25 * (y + 4716)) + trunc(30.6001 * (m + 1)) + d + b - 1524.5


def julian_day_to_republican(jd):
    """Returns the (year, month, day) of the Republican date at Julian Day `jd`.

    The Sansculottides are returned as month 13. `jd` must not be negative.
    """
    j = jd + EPOCH_J
    y = trunc((EPOCH_R * j + EPOCH_V) / EPOCH_P)
    t = trunc(fmod(EPOCH_R * j + EPOCH_V, EPOCH_P) / EPOCH_R)
    m = t // EPOCH_S
    d = t % EPOCH_S
    day = d + 1
    month = (m + EPOCH_M - 1) % EPOCH_N + 1
    year = trunc(y - EPOCH_Y + (EPOCH_N + EPOCH_M - 1 - month) / EPOCH_N)
    return year, month, day


def decimal_time(hour, minute, second):
    """Converts a time of day to decimal time: 10 hours of 100 minutes of 100 seconds.

    >>> decimal_time(21, 46, 43)
    (9, 7, 44)
    """
    x = (hour * 3600 + minute * 60 + second) / 86400
    return trunc(x * 10), trunc(fmod(x * 1000, 100)), trunc(fmod(x * 100000, 100))


def gregorian_to_republican(year, month, day):
    return julian_day_to_republican(gregorian_to_julian_day(year, month, day))
