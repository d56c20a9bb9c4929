"""
Julian Day Number utilities.
Handles solar date <-> JDN conversion across the Julian/Gregorian
calendar switch, and day counting from the 1900-01-01 epoch.

All arithmetic is integer arithmetic. Inputs are assumed to be
calendrically valid; no error path exists.
"""


# ============================================================
# CONSTANTS
# ============================================================

# First JDN of the Gregorian calendar: October 15, 1582.
GREGORIAN_CUTOVER_JDN = 2299161

# JDN of 1900-01-01, the epoch of the day pillar count.
EPOCH_1900_JDN = 2415021


# ============================================================
# SOLAR DATE <-> JDN
# ============================================================

def jd_from_date(day: int, month: int, year: int) -> int:
    """
    Convert a solar (day, month, year) date to its Julian Day Number.

    Computes the Gregorian-calendar JDN first. Dates that land before
    the 1582 cutover are recomputed with the Julian-calendar formula.

    Args:
        day: day of month (1-31)
        month: month (1-12)
        year: astronomical year

    Returns:
        Integer Julian Day Number
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3

    jd = day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045
    if jd < GREGORIAN_CUTOVER_JDN:
        jd = day + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083
    return jd


def jd_to_date(jd: int) -> tuple[int, int, int]:
    """
    Convert a Julian Day Number back to a solar (day, month, year) date.

    JDNs after 2299160 (October 4, 1582) use the Gregorian inverse,
    earlier ones the Julian inverse.
    """
    if jd >= GREGORIAN_CUTOVER_JDN:
        a = jd + 32044
        b = (4 * a + 3) // 146097
        c = a - (b * 146097) // 4
    else:
        b = 0
        c = jd + 32082

    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = b * 100 + d - 4800 + m // 10
    return day, month, year


def days_since_epoch(day: int, month: int, year: int) -> int:
    """Number of solar days from 1900-01-01 to the given date."""
    return jd_from_date(day, month, year) - EPOCH_1900_JDN


# Quick verification
if __name__ == "__main__":
    for d, m, y in [(1, 1, 1900), (15, 10, 1582), (4, 10, 1582), (9, 1, 2011)]:
        jd = jd_from_date(d, m, y)
        print(f"{y:04d}-{m:02d}-{d:02d} -> JDN {jd} -> {jd_to_date(jd)}")
