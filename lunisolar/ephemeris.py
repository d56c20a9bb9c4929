"""
Low-precision lunar and solar ephemeris.

Handles:
- Day of the k-th new moon after the 1900 reference new moon
- Solar ecliptic longitude, in 30 degree sectors

Both are truncated series from Jean Meeus, *Astronomical Algorithms*,
in the form used by Ho Ngoc Duc's lunar calendar algorithm. The month
boundaries of the calendar depend on every rounding step here, so the
coefficients and the order of operations are kept exactly as published.
Do not "improve" these formulas.
"""

import math


# ============================================================
# CONSTANTS
# ============================================================

DR = math.pi / 180.0

# Mean length of a synodic month, in days.
SYNODIC_MONTH = 29.530588853

# Julian day of the reference new moon (1900-01-01 13:51 GMT).
NEW_MOON_EPOCH_JDN = 2415021.076998695


# ============================================================
# NEW MOON
# ============================================================

def new_moon_day(k: int, timezone_offset: int) -> int:
    """
    Compute the day of the k-th new moon after the reference new moon.

    Args:
        k: lunation index (0 = new moon of 1900-01-01)
        timezone_offset: hours east of UTC

    Returns:
        Julian Day Number of the local day containing the new moon
    """
    t = k / 1236.85  # Julian centuries from 1900 January 0.5
    t2 = t * t
    t3 = t2 * t

    # Mean new moon
    jd1 = 2415020.75933 + 29.53058868 * k + 0.0001178 * t2 - 0.000000155 * t3
    jd1 = jd1 + 0.00033 * math.sin(166.56 + 132.87 * t - 0.009173 * t2) * DR

    m = 359.2242 + 29.10535608 * k - 0.0000333 * t2 - 0.00000347 * t3  # Sun's mean anomaly
    mpr = 306.0253 + 385.81691806 * k + 0.0107306 * t2 + 0.00001236 * t3  # Moon's mean anomaly
    f = 21.2964 + 390.67050646 * k - 0.0016528 * t2 - 0.00000239 * t3  # Moon's argument of latitude

    c1 = (0.1734 - 0.000393 * t) * math.sin(m * DR) + 0.0021 * math.sin(2.0 * DR * m)
    c1 = c1 - 0.4068 * math.sin(mpr * DR) + 0.0161 * math.sin(DR * 2.0 * mpr)
    c1 = c1 - 0.0004 * math.sin(DR * 3.0 * mpr)
    c1 = c1 + 0.0104 * math.sin(DR * 2.0 * f) - 0.0051 * math.sin(DR * (m + mpr))
    c1 = c1 - 0.0074 * math.sin(DR * (m - mpr)) + 0.0004 * math.sin(DR * (2.0 * f + m))
    c1 = c1 - 0.0004 * math.sin(DR * (2.0 * f - m)) - 0.0006 * math.sin(DR * (2.0 * f + mpr))
    c1 = c1 + 0.0010 * math.sin(DR * (2.0 * f - mpr)) + 0.0005 * math.sin(DR * (2.0 * mpr + m))

    if t < -11.0:
        deltat = 0.001 + 0.000839 * t + 0.0002261 * t2 - 0.00000845 * t3 - 0.000000081 * t * t3
    else:
        deltat = -0.000278 + 0.000265 * t + 0.000262 * t2

    jd_new = jd1 + c1 - deltat
    return int(jd_new + 0.5 + timezone_offset / 24.0)


# ============================================================
# SUN LONGITUDE
# ============================================================

def sun_longitude(jdn: float, timezone_offset: int) -> float:
    """
    Compute the Sun's ecliptic longitude at local midnight of a day.

    The result is expressed in 30 degree sectors, so it lies in
    [0, 12): 0 is the March equinox, 9 the December solstice.

    Args:
        jdn: Julian Day Number of the local day
        timezone_offset: hours east of UTC

    Returns:
        Longitude in sector units, 0 <= value < 12
    """
    # Julian centuries from 2000-01-01 12:00:00 GMT
    t = (jdn - 2451545.5 - timezone_offset / 24.0) / 36525.0
    t2 = t * t

    m = 357.52910 + 35999.05030 * t - 0.0001559 * t2 - 0.00000048 * t * t2  # mean anomaly, degrees
    l0 = 280.46645 + 36000.76983 * t + 0.0003032 * t2  # mean longitude, degrees

    dl = (1.914600 - 0.004817 * t - 0.000014 * t2) * math.sin(DR * m)
    dl = dl + (0.019993 - 0.000101 * t) * math.sin(DR * 2.0 * m) + 0.000290 * math.sin(DR * 3.0 * m)

    l = (l0 + dl) * DR  # true longitude, radians
    l = l - math.pi * 2.0 * math.floor(l / (math.pi * 2.0))
    return l / math.pi * 6.0


# Quick verification
if __name__ == "__main__":
    print("New moons around January 2011 (UTC+7):")
    for k in range(1368, 1372):
        print(f"  k={k}: JDN {new_moon_day(k, 7)}")

    print("\nSun longitude sectors (UTC+7):")
    for jdn in (2455571, 2455650, 2455735, 2455918):
        print(f"  JDN {jdn}: {sun_longitude(jdn, 7):.4f}")
