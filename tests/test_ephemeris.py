from __future__ import annotations

import pytest

from lunisolar.ephemeris import NEW_MOON_EPOCH_JDN, SYNODIC_MONTH, new_moon_day, sun_longitude
from lunisolar.julian import jd_from_date


def test_new_moon_reference_epoch() -> None:
    """k = 0 is the new moon of 1900-01-01 (13:51 UTC)."""

    assert new_moon_day(0, 0) == jd_from_date(1, 1, 1900)
    assert int(NEW_MOON_EPOCH_JDN + 0.5) == jd_from_date(1, 1, 1900)


def test_new_moon_solar_eclipse_2011() -> None:
    """The eclipse new moon of 2011-01-04 09:03 UTC falls on Jan 4 at UTC+7."""

    assert new_moon_day(1373, 7) == jd_from_date(4, 1, 2011)


def test_new_moon_timezone_moves_day_boundary() -> None:
    """New moon 2007-02-17 16:14 UTC is Feb 17 at UTC+7 but Feb 18 at UTC+8."""

    k = int((jd_from_date(17, 2, 2007) - NEW_MOON_EPOCH_JDN) / SYNODIC_MONTH + 0.5)
    assert new_moon_day(k, 7) == jd_from_date(17, 2, 2007)
    assert new_moon_day(k, 8) == jd_from_date(18, 2, 2007)


def test_new_moons_are_one_lunation_apart() -> None:
    for k in range(0, 2500, 37):
        gap = new_moon_day(k + 1, 7) - new_moon_day(k, 7)
        assert gap in (29, 30)


@pytest.mark.parametrize(
    ("day", "month", "year", "low", "high"),
    [
        (22, 3, 2011, 0.0, 0.05),     # just after the March equinox
        (21, 6, 2011, 2.9, 3.0),      # just before the June solstice
        (24, 12, 2011, 9.0, 9.2),     # just after the December solstice
    ],
)
def test_sun_longitude_at_seasons(day, month, year, low, high) -> None:
    assert low <= sun_longitude(jd_from_date(day, month, year), 7) < high


def test_sun_longitude_stays_in_range() -> None:
    start = jd_from_date(1, 1, 1900)
    for jdn in range(start, start + 365 * 201, 11):
        assert 0.0 <= sun_longitude(jdn, 7) < 12.0


def test_sun_longitude_matches_swiss_ephemeris() -> None:
    """The truncated series stays within 0.1 degree of Swiss Ephemeris."""

    swe = pytest.importorskip("swisseph")

    for year in range(1900, 2101, 10):
        for month in (1, 4, 7, 10):
            jdn = jd_from_date(15, month, year)
            # Local midnight at UTC+7, expressed as a UT Julian date.
            jd_ut = jdn - 0.5 - 7 / 24.0
            result, _flags = swe.calc_ut(jd_ut, swe.SUN, swe.FLG_MOSEPH)
            expected = result[0]
            actual = sun_longitude(jdn, 7) * 30.0
            diff = abs(actual - expected) % 360.0
            assert min(diff, 360.0 - diff) < 0.1
