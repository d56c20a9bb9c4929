"""
Lunisolar date/time of a solar moment.

Packages the solar input, the lunisolar date and the four sexagenary
pairs (year, month, day, hour) into one object, with a JSON-ready
dict form.

Usage from Python:
    from lunisolar.lunar_datetime import LunarDateTime
    moment = LunarDateTime.from_solar(9, 1, 2011, 10, 25, timezone_offset=7)
    moment.lunisolar   # LunisolarDate(day=6, month=12, is_leap_month=False, year=2010)
    moment.year_pair   # SexagenaryPair(stem=HS7, branch=EB3)
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from lunisolar.converter import LunisolarDate, solar_to_lunisolar
from lunisolar.localization import pair_name, zodiac_name
from lunisolar.sexagenary import SexagenaryPair, four_pillars

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class LunarDateTime:
    day: int
    month: int
    year: int
    hour: int
    minute: int
    timezone_offset: int
    lunisolar: LunisolarDate
    year_pair: SexagenaryPair
    month_pair: SexagenaryPair
    day_pair: SexagenaryPair
    hour_pair: SexagenaryPair

    @classmethod
    def from_solar(cls, day: int, month: int, year: int, hour: int = 0,
                   minute: int = 0, timezone_offset: int = 7) -> "LunarDateTime":
        """
        Compute the lunisolar date and the four pairs of a solar moment.

        Args:
            day, month, year: solar date
            hour, minute: local clock time
            timezone_offset: whole hours east of UTC

        Raises:
            ValueError: the date/time is not valid
            OutOfRangeError: the year is outside the supported range
        """
        # Rejects Feb 30 and friends before the integer formulas see them.
        datetime(year, month, day, hour, minute)
        if not -12 <= timezone_offset <= 14:
            raise ValueError(f"timezone offset must be between -12 and +14 hours, got {timezone_offset}")

        lunar = solar_to_lunisolar(day, month, year, timezone_offset)
        pillars = four_pillars(lunar, hour, day, month, year)
        LOG.debug("%04d-%02d-%02d %02d:%02d UTC%+d -> %s",
                  year, month, day, hour, minute, timezone_offset, lunar)

        return cls(
            day=day, month=month, year=year,
            hour=hour, minute=minute, timezone_offset=timezone_offset,
            lunisolar=lunar,
            year_pair=pillars["year"],
            month_pair=pillars["month"],
            day_pair=pillars["day"],
            hour_pair=pillars["hour"],
        )

    @classmethod
    def from_datetime(cls, moment: datetime) -> "LunarDateTime":
        """
        Build from an aware datetime with a whole-hour UTC offset.

        Raises:
            ValueError: the datetime is naive or its offset is not whole hours
        """
        offset = moment.utcoffset()
        if offset is None:
            raise ValueError("datetime must be timezone-aware")
        if offset % timedelta(hours=1):
            raise ValueError(f"UTC offset must be a whole number of hours, got {offset}")
        hours = int(offset / timedelta(hours=1))
        return cls.from_solar(moment.day, moment.month, moment.year,
                              moment.hour, moment.minute, hours)

    def pillars(self) -> dict[str, SexagenaryPair]:
        return {
            "year": self.year_pair,
            "month": self.month_pair,
            "day": self.day_pair,
            "hour": self.hour_pair,
        }

    def to_dict(self, language: str = "vi") -> dict:
        """JSON-ready dict of the moment, with pair labels in the given language."""
        pillars = {}
        for position, pair in self.pillars().items():
            entry = pair.to_dict()
            entry["label"] = pair_name(pair, language)
            pillars[position] = entry

        return {
            "solar": {
                "date": f"{self.year:04d}-{self.month:02d}-{self.day:02d}",
                "time": f"{self.hour:02d}:{self.minute:02d}",
                "utc_offset": self.timezone_offset,
            },
            "lunisolar": self.lunisolar.to_dict(),
            "pillars": pillars,
            "zodiac_animal": zodiac_name(self.year_pair.branch.zodiac),
        }


# Quick verification
if __name__ == "__main__":
    import json

    moment = LunarDateTime.from_solar(9, 1, 2011, 10, 25, timezone_offset=7)
    print(json.dumps(moment.to_dict(), indent=2, ensure_ascii=False))
