from __future__ import annotations
import re
from typing import Dict, Iterable, List

from raids.models import Boss, EventDetailRecord, ParseContext, RaidHourWindow, ScheduleDay
from raids.roster import merge_bosses

FIVE_STAR_SECTION = "appearing-in-5-star-raids"
RAIDS_SECTION = "raids"


class ScheduleAggregator:
    """Owns the record being built for one page; days are keyed by their date label."""

    def __init__(self):
        self.record = EventDetailRecord()
        self._days: Dict[str, ScheduleDay] = {}

    def day(self, date: str) -> ScheduleDay:
        entry = self._days.get(date)
        if entry is None:
            entry = ScheduleDay(date=date)
            self._days[date] = entry
            self.record.raid_schedule.append(entry)
        return entry

    def add_day_bosses(self, date: str, bosses: Iterable[Boss]) -> List[Boss]:
        return merge_bosses(self.day(date).bosses, list(bosses))

    def add_static_bosses(self, bosses: Iterable[Boss]) -> List[Boss]:
        return merge_bosses(self.record.raidbattles, list(bosses))

    def finalize(self, ctx: ParseContext) -> EventDetailRecord:
        distribute_raid_hours(self.record.raid_schedule, ctx)
        distribute_bonuses(self.record.raid_schedule, ctx.special_notes)
        return self.record


def _tier_label(boss: Boss) -> str:
    return boss.raid_type.value.lower() if boss.raid_type else ""


def _attach_window(day: ScheduleDay, time: str, bosses: List[Boss]) -> bool:
    if day.raid_hours or not bosses:
        return False
    day.raid_hours.append(RaidHourWindow(time=time, bosses=bosses))
    return True


def resolve_featured(day: ScheduleDay, names: List[str]) -> List[Boss]:
    """Day bosses whose name contains any featured name (case-insensitive)."""
    wanted = [n.lower() for n in names]
    return [b for b in day.bosses if any(w in b.name.lower() for w in wanted)]


def distribute_raid_hours(days: List[ScheduleDay], ctx: ParseContext) -> None:
    """
    Give the page-wide Raid Hour to every day that has no window of its own.
    Days that already carry a window (from a day section) are never touched.
    """
    if not ctx.raid_hour_time:
        return

    if ctx.raid_hour_section_id == FIVE_STAR_SECTION:
        for day in days:
            five_star = [b for b in day.bosses if "tier 5" in _tier_label(b)]
            _attach_window(day, ctx.raid_hour_time, five_star)

    if not ctx.raid_types_with_raid_hour:
        return
    for day in days:
        matching = [b for b in day.bosses
                    if any(k in _tier_label(b) for k in ctx.raid_types_with_raid_hour)]
        _attach_window(day, ctx.raid_hour_time, matching)


def _name_variants(name: str) -> List[str]:
    return [name.lower(), re.sub(r"\s*\(.*\)", "", name).lower()]


def distribute_bonuses(days: List[ScheduleDay], notes: List[str]) -> None:
    for note in notes:
        low = note.lower()
        for day in days:
            if any(v and v in low for b in day.bosses for v in _name_variants(b.name)):
                day.bonuses.append(note)

