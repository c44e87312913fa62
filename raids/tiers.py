"""
Raid tier classification.

Free-text raid labels ("Five-Star Raids", "appearing in 3-star raids",
"Shadow Raids", ...) collapse to a closed set of tiers. Shadow-ness of star
tiers is not tracked: "Five-Star Shadow Raids" is Tier 5.
"""

from __future__ import annotations
from enum import Enum
from typing import Optional


class Tier(str, Enum):
    TIER1 = "Tier 1"
    TIER3 = "Tier 3"
    TIER5 = "Tier 5"
    TIER6 = "Tier 6"
    MEGA = "Mega"
    PRIMAL = "Primal"
    SHADOW = "Shadow"


# Priority order matters: star tiers win over "mega"/"primal"/"shadow".
STAR_TIERS = [
    (("one-star", "1-star"), Tier.TIER1),
    (("three-star", "3-star"), Tier.TIER3),
    (("five-star", "5-star"), Tier.TIER5),
    (("six-star", "6-star"), Tier.TIER6),
]

_BY_LABEL = {t.value.lower(): t for t in Tier}


def tier_from_raid_type(raid_type: Optional[str]) -> Optional[Tier]:
    if not raid_type:
        return None
    t = raid_type.strip().lower()

    # already a stored label
    if t in _BY_LABEL:
        return _BY_LABEL[t]

    for keys, tier in STAR_TIERS:
        if any(k in t for k in keys):
            return tier
    if "mega" in t:
        return Tier.MEGA
    if "primal" in t:
        return Tier.PRIMAL
    if "shadow" in t and "star" not in t:
        return Tier.SHADOW
    return None
