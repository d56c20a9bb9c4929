"""
Sexagenary (stem-and-branch) cycle.

Handles:
- Heavenly Stems (10-cycle) and Earthly Branches (12-cycle)
- Element / polarity and zodiac lookups
- Year and month pairs from the lunisolar date
- Day and hour pairs from the solar date

Design principle: this module only does modular arithmetic. The
lunisolar year/month it consumes must come from the converter; the
day and hour pairs use the raw solar date, counted from 1900-01-01.
Display names live in lunisolar.localization.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from lunisolar.converter import LunisolarDate
from lunisolar.julian import days_since_epoch


# ============================================================
# FUNDAMENTAL DATA STRUCTURES
# ============================================================

class Polarity(Enum):
    YANG = "yang"
    YIN = "yin"


class Element(Enum):
    METAL = "metal"
    WOOD = "wood"
    WATER = "water"
    FIRE = "fire"
    EARTH = "earth"


class HeavenlyStem(Enum):
    HS1 = "HS1"
    HS2 = "HS2"
    HS3 = "HS3"
    HS4 = "HS4"
    HS5 = "HS5"
    HS6 = "HS6"
    HS7 = "HS7"
    HS8 = "HS8"
    HS9 = "HS9"
    HS10 = "HS10"

    def ordinal(self) -> int:
        """Position in the 10-cycle, 0-9."""
        return _STEM_ORDINALS[self]

    @classmethod
    def from_ordinal(cls, num: int) -> "HeavenlyStem":
        """Stem at position num, wrapped into the 10-cycle."""
        return _STEMS[num % 10]

    @property
    def element(self) -> Element:
        return _STEM_ELEMENTS[self.ordinal()][0]

    @property
    def polarity(self) -> Polarity:
        return _STEM_ELEMENTS[self.ordinal()][1]


class EarthlyBranch(Enum):
    EB1 = "EB1"
    EB2 = "EB2"
    EB3 = "EB3"
    EB4 = "EB4"
    EB5 = "EB5"
    EB6 = "EB6"
    EB7 = "EB7"
    EB8 = "EB8"
    EB9 = "EB9"
    EB10 = "EB10"
    EB11 = "EB11"
    EB12 = "EB12"

    def ordinal(self) -> int:
        """Position in the 12-cycle, 0-11."""
        return _BRANCH_ORDINALS[self]

    @classmethod
    def from_ordinal(cls, num: int) -> "EarthlyBranch":
        """Branch at position num, wrapped into the 12-cycle."""
        return _BRANCHES[num % 12]

    @property
    def element(self) -> Element:
        return _BRANCH_ELEMENTS[self.ordinal()][0]

    @property
    def polarity(self) -> Polarity:
        return _BRANCH_ELEMENTS[self.ordinal()][1]

    @property
    def zodiac(self) -> "Zodiac":
        return _ZODIACS[self.ordinal()]


class Zodiac(Enum):
    RAT = "rat"
    BUFFALO = "buffalo"
    TIGER = "tiger"
    CAT = "cat"
    DRAGON = "dragon"
    SNAKE = "snake"
    HORSE = "horse"
    GOAT = "goat"
    MONKEY = "monkey"
    CHICKEN = "chicken"
    DOG = "dog"
    PIG = "pig"

    @property
    def branch(self) -> EarthlyBranch:
        return EarthlyBranch.from_ordinal(_ZODIACS.index(self))


@dataclass(frozen=True)
class SexagenaryPair:
    stem: HeavenlyStem
    branch: EarthlyBranch
    position: Optional[str] = None  # "year", "month", "day", "hour"

    def __str__(self):
        return f"{self.stem.value}-{self.branch.value} ({self.stem.polarity.value} {self.stem.element.value} {self.branch.zodiac.value})"

    def to_dict(self):
        return {
            "position": self.position,
            "stem": {
                "id": self.stem.value,
                "ordinal": self.stem.ordinal(),
                "element": self.stem.element.value,
                "polarity": self.stem.polarity.value,
            },
            "branch": {
                "id": self.branch.value,
                "ordinal": self.branch.ordinal(),
                "zodiac": self.branch.zodiac.value,
                "element": self.branch.element.value,
                "polarity": self.branch.polarity.value,
            },
            "description": str(self),
        }


# ============================================================
# STEM AND BRANCH TABLES
# ============================================================

_STEMS = tuple(HeavenlyStem)
_STEM_ORDINALS = {stem: i for i, stem in enumerate(_STEMS)}

_BRANCHES = tuple(EarthlyBranch)
_BRANCH_ORDINALS = {branch: i for i, branch in enumerate(_BRANCHES)}

_ZODIACS = tuple(Zodiac)

# Indexed by stem ordinal
_STEM_ELEMENTS = (
    (Element.WOOD, Polarity.YANG),
    (Element.WOOD, Polarity.YIN),
    (Element.FIRE, Polarity.YANG),
    (Element.FIRE, Polarity.YIN),
    (Element.EARTH, Polarity.YANG),
    (Element.EARTH, Polarity.YIN),
    (Element.METAL, Polarity.YANG),
    (Element.METAL, Polarity.YIN),
    (Element.WATER, Polarity.YANG),
    (Element.WATER, Polarity.YIN),
)

# Indexed by branch ordinal
_BRANCH_ELEMENTS = (
    (Element.WATER, Polarity.YANG),   # Rat
    (Element.EARTH, Polarity.YIN),    # Buffalo
    (Element.WOOD, Polarity.YANG),    # Tiger
    (Element.WOOD, Polarity.YIN),     # Cat
    (Element.EARTH, Polarity.YANG),   # Dragon
    (Element.FIRE, Polarity.YIN),     # Snake
    (Element.FIRE, Polarity.YANG),    # Horse
    (Element.EARTH, Polarity.YIN),    # Goat
    (Element.METAL, Polarity.YANG),   # Monkey
    (Element.METAL, Polarity.YIN),    # Chicken (traditional Metal; some tables list Fire)
    (Element.EARTH, Polarity.YANG),   # Dog
    (Element.WATER, Polarity.YIN),    # Pig
)


# ============================================================
# STEMS
# ============================================================

def year_stem(lunar_year: int) -> HeavenlyStem:
    return HeavenlyStem.from_ordinal((lunar_year + 6) % 10)


def month_stem(lunar_month: int, lunar_year: int) -> HeavenlyStem:
    return HeavenlyStem.from_ordinal(lunar_year * 12 + lunar_month + 3)


def day_stem(day: int, month: int, year: int) -> HeavenlyStem:
    """Day stem of a solar date; 1900-01-01 is HS1."""
    return HeavenlyStem.from_ordinal(days_since_epoch(day, month, year) % 10)


def hour_stem(hour: int, day: int, month: int, year: int) -> HeavenlyStem:
    """
    Hour stem of a solar hour.

    The Rat hour starts at 23:00, so the hour is advanced by one before
    it is halved. The stem of the first hour follows the day stem.
    """
    shifted = hour + 1
    if shifted >= 24:
        shifted = 0
    return HeavenlyStem.from_ordinal(shifted // 2 + day_stem(day, month, year).ordinal() * 2)


# ============================================================
# BRANCHES
# ============================================================

def year_branch(lunar_year: int) -> EarthlyBranch:
    return EarthlyBranch.from_ordinal((lunar_year + 8) % 12)


def month_branch(lunar_month: int) -> EarthlyBranch:
    return EarthlyBranch.from_ordinal((lunar_month + 1) % 12)


def day_branch(day: int, month: int, year: int) -> EarthlyBranch:
    """Day branch of a solar date; 1900-01-01 is EB11 (Dog)."""
    return EarthlyBranch.from_ordinal((days_since_epoch(day, month, year) + 10) % 12)


def hour_branch(hour: int) -> EarthlyBranch:
    """
    Branch of the two-hour period containing a solar hour.

    23:00-00:59 = EB1 (Rat)
    01:00-02:59 = EB2 (Buffalo)
    ...
    21:00-22:59 = EB12 (Pig)
    """
    return EarthlyBranch.from_ordinal(((hour + 1) // 2) % 12)


# ============================================================
# PAIRS
# ============================================================

def year_pair(lunar_year: int) -> SexagenaryPair:
    return SexagenaryPair(year_stem(lunar_year), year_branch(lunar_year), "year")


def month_pair(lunar_month: int, lunar_year: int) -> SexagenaryPair:
    return SexagenaryPair(month_stem(lunar_month, lunar_year), month_branch(lunar_month), "month")


def day_pair(day: int, month: int, year: int) -> SexagenaryPair:
    return SexagenaryPair(day_stem(day, month, year), day_branch(day, month, year), "day")


def hour_pair(hour: int, day: int, month: int, year: int) -> SexagenaryPair:
    return SexagenaryPair(hour_stem(hour, day, month, year), hour_branch(hour), "hour")


def four_pillars(lunar: LunisolarDate, hour: int, day: int, month: int,
                 year: int) -> dict[str, SexagenaryPair]:
    """
    Compute the year, month, day and hour pairs of a moment.

    Args:
        lunar: lunisolar date of the moment (from solar_to_lunisolar)
        hour: solar hour, 0-23
        day, month, year: solar date

    Returns:
        Dict keyed by "year", "month", "day", "hour"
    """
    return {
        "year": year_pair(lunar.year),
        "month": month_pair(lunar.month, lunar.year),
        "day": day_pair(day, month, year),
        "hour": hour_pair(hour, day, month, year),
    }


# Quick verification
if __name__ == "__main__":
    from lunisolar.converter import solar_to_lunisolar

    lunar = solar_to_lunisolar(9, 1, 2011, 7)
    print(f"2011-01-09 10:25 UTC+7 -> {lunar}")
    for position, pair in four_pillars(lunar, 10, 9, 1, 2011).items():
        print(f"  {position.capitalize():6s}: {pair}")
    print("Expected year HS7-EB3, month HS6-EB2")
