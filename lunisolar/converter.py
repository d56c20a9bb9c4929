"""
Solar <-> lunisolar date conversion.

Handles:
- Locating lunisolar month 11 (the month containing the December solstice)
- Leap month detection
- Solar to lunisolar conversion
- Lunisolar to solar conversion

Follows Ho Ngoc Duc's algorithm for the Vietnamese/Chinese calendar.
Lunation indices are estimated with math.floor (INT in the published
algorithm), which differs from int() for the months around the 1900
reference new moon. The other truncations only ever see non-negative
values. Changing any of them moves month boundaries.
"""

import logging
import math
from dataclasses import dataclass, asdict
from typing import Optional

from lunisolar.ephemeris import (
    NEW_MOON_EPOCH_JDN, SYNODIC_MONTH, new_moon_day, sun_longitude,
)
from lunisolar.julian import jd_from_date, jd_to_date

LOG = logging.getLogger(__name__)


# ============================================================
# CONSTANTS
# ============================================================

# Range in which the ephemeris series are trusted.
MIN_YEAR = 1900
MAX_YEAR = 2100

# Upper bound for the leap month scan, counted in lunations after month 11.
LEAP_MONTH_SCAN_LIMIT = 14


class OutOfRangeError(ValueError):
    """Raised when a solar year falls outside [MIN_YEAR, MAX_YEAR]."""


@dataclass(frozen=True)
class LunisolarDate:
    day: int
    month: int
    is_leap_month: bool
    year: int

    def __str__(self):
        leap = " (leap)" if self.is_leap_month else ""
        return f"{self.day:02d}/{self.month:02d}{leap}/{self.year}"

    def to_dict(self):
        return asdict(self)


# ============================================================
# MONTH 11 AND LEAP MONTH
# ============================================================

def lunar_month_11(year: int, timezone_offset: int) -> int:
    """
    Find the start of lunisolar month 11 for a solar year.

    Month 11 is the lunar month that contains the December solstice,
    so its new moon is the last one before the Sun reaches 270 degrees
    (sector 9).

    Returns:
        JDN of the new moon that starts month 11
    """
    off = jd_from_date(31, 12, year) - 2415021
    k = math.floor(off / SYNODIC_MONTH)
    nm = new_moon_day(k, timezone_offset)
    if sun_longitude(nm, timezone_offset) >= 9:
        nm = new_moon_day(k - 1, timezone_offset)
    return nm


def leap_month_offset(a11: int, timezone_offset: int) -> int:
    """
    Find the position of the leap month in a leap year.

    Walks the new moons following month 11 and returns the 1-based
    offset of the first month during which the Sun stays in the same
    30 degree sector, i.e. a month without a principal solar term.
    The scan stops at LEAP_MONTH_SCAN_LIMIT.

    Args:
        a11: JDN of the month 11 that opens the leap year
        timezone_offset: hours east of UTC

    Returns:
        Offset from month 11, between 1 and LEAP_MONTH_SCAN_LIMIT - 1
    """
    k = math.floor((a11 - NEW_MOON_EPOCH_JDN) / SYNODIC_MONTH + 0.5)
    i = 1
    arc = int(sun_longitude(new_moon_day(k + i, timezone_offset), timezone_offset))
    while True:
        last = arc
        i += 1
        arc = int(sun_longitude(new_moon_day(k + i, timezone_offset), timezone_offset))
        if arc == last or i == LEAP_MONTH_SCAN_LIMIT:
            break
    return i - 1


# ============================================================
# CONVERSION
# ============================================================

def solar_to_lunisolar(day: int, month: int, year: int,
                       timezone_offset: int) -> LunisolarDate:
    """
    Convert a solar date to a lunisolar date.

    Args:
        day, month, year: solar date, already validated
        timezone_offset: whole hours east of UTC (7 for Vietnam, 8 for China)

    Returns:
        LunisolarDate

    Raises:
        OutOfRangeError: year is outside [MIN_YEAR, MAX_YEAR]
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OutOfRangeError(f"year should be between {MIN_YEAR} and {MAX_YEAR}, got {year}")

    day_number = jd_from_date(day, month, year)
    k = math.floor((day_number - NEW_MOON_EPOCH_JDN) / SYNODIC_MONTH)
    month_start = new_moon_day(k + 1, timezone_offset)
    # The periodic terms and the offset can push a new moon onto the next
    # local day, so more than one step back may be needed.
    while month_start > day_number:
        k -= 1
        month_start = new_moon_day(k + 1, timezone_offset)

    a11 = lunar_month_11(year, timezone_offset)
    b11 = a11
    if a11 >= month_start:
        lunar_year = year
        a11 = lunar_month_11(year - 1, timezone_offset)
    else:
        lunar_year = year + 1
        b11 = lunar_month_11(year + 1, timezone_offset)

    lunar_day = day_number - month_start + 1
    diff = int((month_start - a11) / 29)
    lunar_month = diff + 11
    is_leap = False

    if b11 - a11 > 365:
        leap_offset = leap_month_offset(a11, timezone_offset)
        LOG.debug("Leap year after month 11 at JDN %d, leap offset %d", a11, leap_offset)
        if diff >= leap_offset:
            lunar_month = diff + 10
            is_leap = diff == leap_offset

    if lunar_month > 12:
        lunar_month -= 12
    if lunar_month >= 11 and diff < 4:
        lunar_year -= 1

    return LunisolarDate(day=lunar_day, month=lunar_month,
                         is_leap_month=is_leap, year=lunar_year)


def lunisolar_to_solar(day: int, month: int, is_leap_month: bool, year: int,
                       timezone_offset: int) -> Optional[tuple[int, int, int]]:
    """
    Convert a lunisolar date back to a solar date.

    Args:
        day, month, year: lunisolar date
        is_leap_month: True if the date lies in the leap month
        timezone_offset: whole hours east of UTC

    Returns:
        (day, month, year) solar date, or None when no solar date exists
        for the requested leap month (the year has no leap month, or its
        leap month is a different one)

    Raises:
        ValueError: month is outside 1-12 or day outside 1-30
    """
    if not 1 <= month <= 12:
        raise ValueError(f"lunisolar month should be between 1 and 12, got {month}")
    if not 1 <= day <= 30:
        raise ValueError(f"lunisolar day should be between 1 and 30, got {day}")

    if month < 11:
        a11 = lunar_month_11(year - 1, timezone_offset)
        b11 = lunar_month_11(year, timezone_offset)
    else:
        a11 = lunar_month_11(year, timezone_offset)
        b11 = lunar_month_11(year + 1, timezone_offset)

    off = month - 11
    if off < 0:
        off += 12

    if b11 - a11 > 365:
        leap_offset = leap_month_offset(a11, timezone_offset)
        leap_month = leap_offset - 2
        if leap_month < 0:
            leap_month += 12
        if is_leap_month and month != leap_month:
            LOG.debug("Month %d of %d is not the leap month (%d)", month, year, leap_month)
            return None
        if is_leap_month or off >= leap_offset:
            off += 1
    elif is_leap_month:
        LOG.debug("Lunisolar year %d has no leap month", year)
        return None

    k = math.floor((a11 - NEW_MOON_EPOCH_JDN) / SYNODIC_MONTH + 0.5)
    month_start = new_moon_day(k + off, timezone_offset)
    return jd_to_date(month_start + day - 1)


# Quick verification
if __name__ == "__main__":
    for d, m, y, tz in [(9, 1, 2011, 7), (3, 9, 1925, 7), (16, 4, 1964, 7),
                        (17, 2, 2007, 7), (17, 2, 2007, 8)]:
        lunar = solar_to_lunisolar(d, m, y, tz)
        back = lunisolar_to_solar(lunar.day, lunar.month, lunar.is_leap_month, lunar.year, tz)
        print(f"{y:04d}-{m:02d}-{d:02d} UTC+{tz} -> {lunar} -> {back}")
