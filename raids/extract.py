"""
Raid schedule extraction for a single LeekDuck event page.

Usage:
    root = content_root(soup_html(html))
    record = extract_event_details(root, base_url=url)
    record.as_dict()   # {"raidSchedule": [...], "raidbattles": [...]}

Nothing here raises on odd markup: missing sections just mean fewer results.
"""

from __future__ import annotations
from typing import List

from raids.headers import is_day_heading
from raids.models import EventDetailRecord, ParseContext
from raids.nodes import HEADING, Node, collect_section, find_heading, page_nodes
from raids.schedule import FIVE_STAR_SECTION, RAIDS_SECTION, ScheduleAggregator
from raids.traverse import process_day_section, process_raids_section

SECTION_ANCHORS = [RAIDS_SECTION, FIVE_STAR_SECTION]


def day_heading_indexes(nodes: List[Node]) -> List[int]:
    return [i for i, n in enumerate(nodes)
            if n.kind == HEADING and n.level == 2 and is_day_heading(n.text)]


def extract_from_nodes(nodes: List[Node], base_url: str = "") -> EventDetailRecord:
    agg = ScheduleAggregator()
    ctx = ParseContext()

    for anchor in SECTION_ANCHORS:
        i = find_heading(nodes, anchor)
        if i is not None:
            process_raids_section(collect_section(nodes, i), anchor, agg, ctx, base_url)

    for i in day_heading_indexes(nodes):
        process_day_section(collect_section(nodes, i), nodes[i].text, agg, base_url)

    return agg.finalize(ctx)


def extract_event_details(root, base_url: str = "") -> EventDetailRecord:
    """`root` is the page's `.page-content` element."""
    return extract_from_nodes(page_nodes(root), base_url)
