from __future__ import annotations

import pytest

from lunisolar.converter import LunisolarDate
from lunisolar.sexagenary import (
    EarthlyBranch,
    Element,
    HeavenlyStem,
    Polarity,
    SexagenaryPair,
    Zodiac,
    day_branch,
    day_stem,
    four_pillars,
    hour_branch,
    hour_stem,
    month_branch,
    month_stem,
    year_branch,
    year_stem,
)


def test_ordinals_round_trip() -> None:
    for i, stem in enumerate(HeavenlyStem):
        assert stem.ordinal() == i
        assert HeavenlyStem.from_ordinal(i) is stem
    for i, branch in enumerate(EarthlyBranch):
        assert branch.ordinal() == i
        assert EarthlyBranch.from_ordinal(i) is branch


def test_from_ordinal_wraps_the_cycle() -> None:
    assert HeavenlyStem.from_ordinal(10) is HeavenlyStem.HS1
    assert HeavenlyStem.from_ordinal(24135) is HeavenlyStem.HS6
    assert HeavenlyStem.from_ordinal(-1) is HeavenlyStem.HS10
    assert EarthlyBranch.from_ordinal(12) is EarthlyBranch.EB1
    assert EarthlyBranch.from_ordinal(-1) is EarthlyBranch.EB12


def test_year_pair() -> None:
    assert year_stem(1996) is HeavenlyStem.HS3
    assert year_branch(1996) is EarthlyBranch.EB1
    assert year_stem(2010) is HeavenlyStem.HS7
    assert year_branch(2010) is EarthlyBranch.EB3


def test_month_pair() -> None:
    assert month_stem(3, 1996) is HeavenlyStem.HS9
    assert month_branch(3) is EarthlyBranch.EB5
    assert month_stem(12, 2010) is HeavenlyStem.HS6
    assert month_branch(12) is EarthlyBranch.EB2
    assert month_branch(11) is EarthlyBranch.EB1


@pytest.mark.parametrize(
    ("solar", "stem", "branch"),
    [
        ((1, 1, 1900), HeavenlyStem.HS1, EarthlyBranch.EB11),
        ((2, 1, 1950), HeavenlyStem.HS4, None),
        ((21, 4, 1996), HeavenlyStem.HS5, EarthlyBranch.EB1),
        ((1, 1, 2000), HeavenlyStem.HS5, EarthlyBranch.EB7),
    ],
)
def test_day_pair(solar, stem, branch) -> None:
    assert day_stem(*solar) is stem
    if branch is not None:
        assert day_branch(*solar) is branch


def test_hour_stem() -> None:
    assert hour_stem(3, 21, 4, 1996) is HeavenlyStem.HS1
    assert hour_stem(10, 9, 11, 1999) is HeavenlyStem.HS8


@pytest.mark.parametrize(
    ("hour", "branch"),
    [
        (23, EarthlyBranch.EB1),
        (0, EarthlyBranch.EB1),
        (1, EarthlyBranch.EB2),
        (2, EarthlyBranch.EB2),
        (10, EarthlyBranch.EB6),
        (12, EarthlyBranch.EB7),
        (22, EarthlyBranch.EB12),
    ],
)
def test_hour_branch(hour, branch) -> None:
    assert hour_branch(hour) is branch


def test_hour_23_and_0_share_a_stem_offset() -> None:
    """23:00 wraps to the start of the cycle before the day stem is added."""

    assert hour_stem(23, 21, 4, 1996) is hour_stem(0, 21, 4, 1996)


def test_element_polarity_tables() -> None:
    assert HeavenlyStem.HS1.element is Element.WOOD
    assert HeavenlyStem.HS1.polarity is Polarity.YANG
    assert HeavenlyStem.HS7.element is Element.METAL
    assert HeavenlyStem.HS10.polarity is Polarity.YIN
    assert EarthlyBranch.EB1.element is Element.WATER
    assert EarthlyBranch.EB10.element is Element.METAL
    assert EarthlyBranch.EB12.polarity is Polarity.YIN


def test_zodiac_mapping() -> None:
    assert EarthlyBranch.EB3.zodiac is Zodiac.TIGER
    assert EarthlyBranch.EB4.zodiac is Zodiac.CAT
    for branch in EarthlyBranch:
        assert branch.zodiac.branch is branch


def test_four_pillars() -> None:
    lunar = LunisolarDate(6, 12, False, 2010)
    pillars = four_pillars(lunar, 10, 9, 1, 2011)

    assert list(pillars) == ["year", "month", "day", "hour"]
    assert pillars["year"] == SexagenaryPair(HeavenlyStem.HS7, EarthlyBranch.EB3, "year")
    assert pillars["month"] == SexagenaryPair(HeavenlyStem.HS6, EarthlyBranch.EB2, "month")
    assert pillars["hour"].branch is EarthlyBranch.EB6
    assert all(pair.position == position for position, pair in pillars.items())


def test_pair_to_dict() -> None:
    data = SexagenaryPair(HeavenlyStem.HS7, EarthlyBranch.EB3, "year").to_dict()

    assert data["position"] == "year"
    assert data["stem"] == {"id": "HS7", "ordinal": 6, "element": "metal", "polarity": "yang"}
    assert data["branch"]["zodiac"] == "tiger"
    assert data["branch"]["ordinal"] == 2
