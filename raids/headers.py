"""
Heading text classification.

Event pages announce raid days in several ways:
  "Five-Star Raids: Tuesday, November 11"     type and date in one heading
  "Tuesday, November 19"                       date only, type from an earlier heading
  "Appearing in 5-Star Raids (Saturday)"       tier with a bare weekday
  "Three-Star Raids" / "Appearing in Mega Raids"   no date, sets the raid-type context

Each matcher is a pure function of the text (plus the current context); the
dispatchers try them in a fixed order and return a tagged result.
"""

from __future__ import annotations
import dataclasses
import re
from typing import Optional, Union

DAY = r"(Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday)"
DATE = DAY + r",\s+\w+\s+\d+"                     # "Monday, November 10"

TYPE_AND_DATE_PAT = re.compile(r"([^:]+):\s*(.+)")
DATE_PAT = re.compile(DATE, re.I)
LEADING_DATE_PAT = re.compile("^" + DATE, re.I)
DAY_IN_PARENS_PAT = re.compile(
    r"appearing in\s+([\w-]+[\s-]*star[\s-]*(?:shadow\s+)?raids?)\s*\(" + DAY + r"\)", re.I)
APPEARING_IN_PAT = re.compile(r"appearing in\s+([\w-]+)[\s-]*(shadow\s+)?raids?", re.I)
STAR_RAIDS_PAT = re.compile(r"([\w-]+[\s-]*star[\s-]*(?:shadow\s+)?raids?)", re.I)


@dataclasses.dataclass(frozen=True)
class DateHeader:
    raid_type: str
    date: str


@dataclasses.dataclass(frozen=True)
class ContextUpdate:
    raid_type: str


@dataclasses.dataclass(frozen=True)
class NoMatch:
    pass


HeadingResult = Union[DateHeader, ContextUpdate, NoMatch]


# ---------- date headers ----------

def match_type_and_date(text: str) -> Optional[DateHeader]:
    m = TYPE_AND_DATE_PAT.search(text)
    if m and DATE_PAT.search(m.group(2)):
        return DateHeader(m.group(1).strip(), m.group(2).strip())
    return None


def match_leading_date(text: str, context: Optional[str]) -> Optional[DateHeader]:
    if not context:
        return None
    m = LEADING_DATE_PAT.match(text)
    if m:
        return DateHeader(context, m.group(0).strip())
    return None


def match_day_in_parens(text: str) -> Optional[DateHeader]:
    m = DAY_IN_PARENS_PAT.search(text)
    if m:
        return DateHeader(m.group(1).strip(), m.group(2).strip())
    return None


def parse_raid_header(text: str, context: Optional[str] = None) -> Optional[DateHeader]:
    return (match_type_and_date(text)
            or match_leading_date(text, context)
            or match_day_in_parens(text))


# ---------- raid-type context ----------

def match_appearing_in(text: str) -> Optional[str]:
    m = APPEARING_IN_PAT.search(text)
    if not m:
        return None
    base = m.group(1).lower()
    starred = bool(re.search(r"[\s-]star$", base))
    base = re.sub(r"[\s-]star$", "", base).strip()
    if not base:
        return None
    label = base[0].upper() + base[1:]
    shadow = " Shadow" if m.group(2) else ""
    return f"{label}-Star{shadow} Raids" if starred else f"{label}{shadow} Raids"


def raid_type_context(text: str) -> Optional[str]:
    low = text.lower()
    if "appearing in" in low and "raids" in low:
        return match_appearing_in(text)
    if "star" in low and "raids" in low:
        m = STAR_RAIDS_PAT.search(text)
        return m.group(1).strip() if m else None
    if "primal" in low and "raids" in low:
        return "Primal Raids"
    if "mega" in low and "raids" in low:
        return "Mega Raids"
    # "Five-Star Shadow Raids" is handled by the star branch above
    if "shadow" in low and "raids" in low and "star" not in low:
        return "Shadow Raids"
    return None


def classify_section_heading(text: str, context: Optional[str] = None) -> HeadingResult:
    parsed = parse_raid_header(text, context)
    if parsed:
        return parsed
    new_context = raid_type_context(text)
    if new_context:
        return ContextUpdate(new_context)
    return NoMatch()


# ---------- day sections ----------

RAID_HOUR = "raid_hour"


def classify_day_subheading(text: str) -> Optional[str]:
    """
    Sub-heading inside a "Monday, February 23: Kanto" section.
    Returns RAID_HOUR, a raid-type label, or None when the heading changes nothing.
    """
    low = text.lower()
    if "raid hour" in low:
        return RAID_HOUR
    if "star" in low and "raids" in low:
        return text.strip()
    if "primal" in low and "raids" in low:
        return "Primal Raids"
    if "mega" in low and "raids" in low:
        return "Mega Raids"
    if "shadow" in low and "raids" in low:
        return "Shadow Raids"
    return None


def is_day_heading(text: str) -> bool:
    return bool(LEADING_DATE_PAT.match(text))


def day_label(text: str) -> str:
    """"Friday, February 27: Unova (Black Kyurem)" -> "Friday, February 27"."""
    return text.split(":")[0].strip()
