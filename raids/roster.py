from __future__ import annotations
from typing import List, Optional

from common.utils import node_text, safe_join
from raids.models import Boss
from raids.tiers import tier_from_raid_type


def parse_boss(item, raid_type: Optional[str], base_url: str = "") -> Optional[Boss]:
    """One `.pkmn-list-item`; None unless it has both a name and an image."""
    name_el = item.select_one(":scope > .pkmn-name")
    img_el = item.select_one(":scope > .pkmn-list-img > img")
    if name_el is None or img_el is None:
        return None
    src = img_el.get("src") or ""
    return Boss(
        name=node_text(name_el),
        image=safe_join(base_url, src) if src else "",
        can_be_shiny=item.select_one(":scope > .shiny-icon") is not None,
        raid_type=tier_from_raid_type(raid_type),
    )


def parse_boss_list(container, raid_type: Optional[str], base_url: str = "") -> List[Boss]:
    out = []
    for item in container.select(":scope > .pkmn-list-item"):
        boss = parse_boss(item, raid_type, base_url)
        if boss is not None:
            out.append(boss)
    return out


def merge_bosses(existing: List[Boss], incoming: List[Boss]) -> List[Boss]:
    """Append bosses whose name is not already present; returns what was added."""
    seen = {b.name for b in existing}
    added = []
    for b in incoming:
        if b.name in seen:
            continue
        seen.add(b.name)
        existing.append(b)
        added.append(b)
    return added
