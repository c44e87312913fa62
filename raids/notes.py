"""
Prose scanners: Raid Hour announcements and bonus notes.

Example paragraphs:
  "Raid Hour: Kyurem will be featured from 6:00 p.m. to 7:00 p.m. local time."
  "There will be a Raid Hour featuring Reshiram, Zekrom, and Kyurem from 6:00 p.m. to 7:00 p.m."
  "Trainers can earn Fusion Energy by defeating Black Kyurem in raids."
"""

from __future__ import annotations
import re
from typing import List, Optional, Set, Tuple

TIME_PAT = re.compile(r"from ([\d:]+\s+[ap]\.?m\.?\s+to\s+[\d:]+\s+[ap]\.?m\.?)", re.I)
FEATURING_PAT = re.compile(r"featuring\s+([^.]+?)(?:\s+from|\s*\.)", re.I)
NAME_SPLIT_PAT = re.compile(r",|\s+and\s+")

# raid-hour wording -> substring of the stored tier label
RAID_HOUR_KEYWORDS = [
    (("five-star", "5-star"), "tier 5"),
    (("shadow",), "shadow"),
    (("mega",), "mega"),
    (("primal",), "primal"),
]

BONUS_KEYWORDS = ["fusion energy", "mega energy", "primal energy", "adventure effect move"]
MIN_NOTE_LEN = 10


def parse_raid_hour_time(text: str) -> Optional[str]:
    m = TIME_PAT.search(text)
    if m:
        return m.group(1) + " local time"
    return None


def parse_featured_names(text: str) -> List[str]:
    m = FEATURING_PAT.search(text)
    if not m:
        return []
    return [n.strip() for n in NAME_SPLIT_PAT.split(m.group(1)) if n.strip()]


def extract_raid_hour(text: str) -> Tuple[Optional[str], List[str]]:
    """(time window, featured names) from a paragraph mentioning Raid Hour."""
    if "raid hour" not in text.lower():
        return None, []
    return parse_raid_hour_time(text), parse_featured_names(text)


def raid_hour_keywords(text: str) -> Set[str]:
    low = text.lower()
    return {label for words, label in RAID_HOUR_KEYWORDS if any(w in low for w in words)}


def is_bonus_note(text: str) -> bool:
    low = text.lower()
    if not any(k in low for k in BONUS_KEYWORDS):
        return False
    return len(text.strip()) > MIN_NOTE_LEN
