"""
Display names for stems, branches and zodiac animals.

Pure lookup tables keyed by the sexagenary enumerations. Vietnamese
labels come first since the calendar algorithm is the Vietnamese one;
Chinese characters and pinyin are provided alongside.
"""

import unicodedata

from lunisolar.sexagenary import EarthlyBranch, HeavenlyStem, SexagenaryPair, Zodiac


# ============================================================
# NAME TABLES
# ============================================================

# (vietnamese, chinese, pinyin)
STEM_NAMES = {
    HeavenlyStem.HS1: ("Giáp", "甲", "Jia"),
    HeavenlyStem.HS2: ("Ất", "乙", "Yi"),
    HeavenlyStem.HS3: ("Bính", "丙", "Bing"),
    HeavenlyStem.HS4: ("Đinh", "丁", "Ding"),
    HeavenlyStem.HS5: ("Mậu", "戊", "Wu"),
    HeavenlyStem.HS6: ("Kỷ", "己", "Ji"),
    HeavenlyStem.HS7: ("Canh", "庚", "Geng"),
    HeavenlyStem.HS8: ("Tân", "辛", "Xin"),
    HeavenlyStem.HS9: ("Nhâm", "壬", "Ren"),
    HeavenlyStem.HS10: ("Quý", "癸", "Gui"),
}

BRANCH_NAMES = {
    EarthlyBranch.EB1: ("Tý", "子", "Zi"),
    EarthlyBranch.EB2: ("Sửu", "丑", "Chou"),
    EarthlyBranch.EB3: ("Dần", "寅", "Yin"),
    EarthlyBranch.EB4: ("Mão", "卯", "Mao"),
    EarthlyBranch.EB5: ("Thìn", "辰", "Chen"),
    EarthlyBranch.EB6: ("Tỵ", "巳", "Si"),
    EarthlyBranch.EB7: ("Ngọ", "午", "Wu"),
    EarthlyBranch.EB8: ("Mùi", "未", "Wei"),
    EarthlyBranch.EB9: ("Thân", "申", "Shen"),
    EarthlyBranch.EB10: ("Dậu", "酉", "You"),
    EarthlyBranch.EB11: ("Tuất", "戌", "Xu"),
    EarthlyBranch.EB12: ("Hợi", "亥", "Hai"),
}

ZODIAC_NAMES = {
    Zodiac.RAT: "Chuột",
    Zodiac.BUFFALO: "Trâu",
    Zodiac.TIGER: "Hổ",
    Zodiac.CAT: "Mèo",
    Zodiac.DRAGON: "Rồng",
    Zodiac.SNAKE: "Rắn",
    Zodiac.HORSE: "Ngựa",
    Zodiac.GOAT: "Dê",
    Zodiac.MONKEY: "Khỉ",
    Zodiac.CHICKEN: "Gà",
    Zodiac.DOG: "Chó",
    Zodiac.PIG: "Lợn",
}

LANGUAGES = ("vi", "zh", "pinyin")

# Named aliases
HS_GIAP = HeavenlyStem.HS1
HS_AT = HeavenlyStem.HS2
HS_BINH = HeavenlyStem.HS3
HS_DINH = HeavenlyStem.HS4
HS_MAU = HeavenlyStem.HS5
HS_KY = HeavenlyStem.HS6
HS_CANH = HeavenlyStem.HS7
HS_TAN = HeavenlyStem.HS8
HS_NHAM = HeavenlyStem.HS9
HS_QUY = HeavenlyStem.HS10

EB_RAT = EarthlyBranch.EB1
EB_BUFFALO = EarthlyBranch.EB2
EB_TIGER = EarthlyBranch.EB3
EB_CAT = EarthlyBranch.EB4
EB_DRAGON = EarthlyBranch.EB5
EB_SNAKE = EarthlyBranch.EB6
EB_HORSE = EarthlyBranch.EB7
EB_GOAT = EarthlyBranch.EB8
EB_MONKEY = EarthlyBranch.EB9
EB_CHICKEN = EarthlyBranch.EB10
EB_DOG = EarthlyBranch.EB11
EB_PIG = EarthlyBranch.EB12


# ============================================================
# LOOKUPS
# ============================================================

def _fold(name: str) -> str:
    """Lowercase and strip Vietnamese diacritics ("Đinh" -> "dinh")."""
    name = name.strip().lower().replace("đ", "d")
    decomposed = unicodedata.normalize("NFD", name)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def _language_index(language: str) -> int:
    if language not in LANGUAGES:
        raise ValueError(f"Unknown language: {language!r}. Options: {list(LANGUAGES)}")
    return LANGUAGES.index(language)


def stem_name(stem: HeavenlyStem, language: str = "vi") -> str:
    return STEM_NAMES[stem][_language_index(language)]


def branch_name(branch: EarthlyBranch, language: str = "vi") -> str:
    return BRANCH_NAMES[branch][_language_index(language)]


def zodiac_name(zodiac: Zodiac) -> str:
    return ZODIAC_NAMES[zodiac]


def pair_name(pair: SexagenaryPair, language: str = "vi") -> str:
    """Label such as "Canh Dần" for a stem-branch pair."""
    return f"{stem_name(pair.stem, language)} {branch_name(pair.branch, language)}"


def _build_index(table):
    """
    Map exact (lowercased) and diacritic-free names to table keys.

    A folded name shared by two keys ("Tý" and "Tỵ" both fold to "ty")
    maps to None and has to be given with its diacritics.
    """
    exact, folded = {}, {}
    for key, names in table.items():
        for name in names:
            exact[unicodedata.normalize("NFC", name.lower())] = key
            short = _fold(name)
            if short in folded and folded[short] is not key:
                folded[short] = None
            else:
                folded[short] = key
    return exact, folded


def _lookup(index, name, kind):
    exact, folded = index
    key = exact.get(unicodedata.normalize("NFC", name.strip().lower()))
    if key is not None:
        return key
    short = _fold(name)
    if short not in folded:
        raise ValueError(f"Unknown {kind}: {name!r}")
    if folded[short] is None:
        raise ValueError(f"Ambiguous {kind}: {name!r}, use the accented spelling")
    return folded[short]


# Pinyin "Wu" is both a stem and a branch; each index resolves its own.
_STEM_INDEX = _build_index(STEM_NAMES)
_BRANCH_INDEX = _build_index(BRANCH_NAMES)


def stem_by_name(name: str) -> HeavenlyStem:
    """
    Look up a stem by any of its names.

    Vietnamese labels match with or without diacritics, so "Kỷ" and
    "Ky" both give HS6.
    """
    return _lookup(_STEM_INDEX, name, "heavenly stem")


def branch_by_name(name: str) -> EarthlyBranch:
    """Look up a branch by any of its names, ignoring diacritics where unambiguous."""
    return _lookup(_BRANCH_INDEX, name, "earthly branch")
