"""
The two ways an event page lays out its raids.

Section-based: one shared "Raids" (or "Appearing in 5-Star Raids") section whose
h3s alternate between raid-type headings and date headings.

Day-based: one h2 per day ("Monday, February 23: Kanto") with its own
"<tier> Raids" and "Raid Hour" sub-headings.
"""

from __future__ import annotations
from typing import List, Optional

from raids.headers import (ContextUpdate, DateHeader, RAID_HOUR,
                           classify_day_subheading, classify_section_heading, day_label)
from raids.models import ParseContext, RaidHourWindow
from raids.nodes import HEADING, LIST, PARAGRAPH, Node
from raids.notes import extract_raid_hour, is_bonus_note, parse_raid_hour_time, raid_hour_keywords
from raids.roster import parse_boss_list
from raids.schedule import FIVE_STAR_SECTION, ScheduleAggregator, resolve_featured

SUBHEADING_LEVEL = 3


def section_context(section_id: str) -> Optional[str]:
    return "Five-Star Raids" if section_id == FIVE_STAR_SECTION else None


def process_raids_section(nodes: List[Node], section_id: str, agg: ScheduleAggregator,
                          ctx: ParseContext, base_url: str = "") -> None:
    context = section_context(section_id)
    current_date: Optional[str] = None
    current_type: Optional[str] = None

    for n in nodes:
        if n.kind == HEADING and n.level == SUBHEADING_LEVEL and n.text:
            result = classify_section_heading(n.text, context)
            if isinstance(result, DateHeader):
                current_date, current_type = result.date, result.raid_type
                agg.day(current_date)
            else:
                current_date = current_type = None
                if isinstance(result, ContextUpdate):
                    context = result.raid_type

        elif n.kind == LIST:
            if current_date:
                agg.add_day_bosses(current_date, parse_boss_list(n.el, current_type, base_url))
            else:
                agg.add_static_bosses(parse_boss_list(n.el, context, base_url))

        elif n.kind == PARAGRAPH:
            if "Raid Hour" in n.text:
                ctx.raid_hour_section_id = section_id
                time = parse_raid_hour_time(n.text)
                if time:
                    ctx.raid_hour_time = time
                ctx.raid_types_with_raid_hour |= raid_hour_keywords(n.text)
            if is_bonus_note(n.text):
                ctx.special_notes.append(n.text.strip())


# day-section states
NONE = "none"
RAID_TYPE_CONTEXT = "raid_type_context"
RAID_HOUR_SECTION = "raid_hour_section"


def process_day_section(nodes: List[Node], heading_text: str, agg: ScheduleAggregator,
                        base_url: str = "") -> None:
    date = day_label(heading_text)
    day = agg.day(date)
    state = NONE
    raid_type: Optional[str] = None
    time: Optional[str] = None
    names: List[str] = []

    for n in nodes:
        if n.kind == HEADING and n.level == SUBHEADING_LEVEL and n.text:
            sub = classify_day_subheading(n.text)
            if sub == RAID_HOUR:
                state, raid_type = RAID_HOUR_SECTION, None
            elif sub:
                state, raid_type = RAID_TYPE_CONTEXT, sub

        elif n.kind == LIST and state == RAID_TYPE_CONTEXT:
            agg.add_day_bosses(date, parse_boss_list(n.el, raid_type, base_url))

        elif n.kind == PARAGRAPH and state == RAID_HOUR_SECTION:
            t, featured = extract_raid_hour(n.text)
            if t:
                time = t
            if featured:
                names = featured

    if time and names:
        bosses = resolve_featured(day, names)
        if bosses:
            day.raid_hours.append(RaidHourWindow(time=time, bosses=bosses))
