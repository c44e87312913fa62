"""
Normalized raid schedule records.

Serialized shape (camelCase keys, as consumed by the event index):
{
  "raidSchedule": [
    {"date": "Tuesday, November 11",
     "bosses": [{"name", "image", "canBeShiny", "raidType"}],
     "raidHours": [{"time": "6:00 p.m. to 7:00 p.m. local time", "bosses": [...]}],
     "bonuses": ["..."]}
  ],
  "raidbattles": [{"name", "image", "canBeShiny", "raidType"}]
}
"""

from __future__ import annotations
import dataclasses
from typing import Any, Dict, List, Optional, Set

from raids.tiers import Tier


@dataclasses.dataclass
class Boss:
    name: str
    image: str
    can_be_shiny: bool
    raid_type: Optional[Tier]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "image": self.image,
            "canBeShiny": self.can_be_shiny,
            "raidType": self.raid_type.value if self.raid_type else None,
        }


@dataclasses.dataclass
class RaidHourWindow:
    time: str
    bosses: List[Boss]

    def as_dict(self) -> Dict[str, Any]:
        return {"time": self.time, "bosses": [b.as_dict() for b in self.bosses]}


@dataclasses.dataclass
class ScheduleDay:
    date: str
    bosses: List[Boss] = dataclasses.field(default_factory=list)
    raid_hours: List[RaidHourWindow] = dataclasses.field(default_factory=list)
    bonuses: List[str] = dataclasses.field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "bosses": [b.as_dict() for b in self.bosses],
            "raidHours": [w.as_dict() for w in self.raid_hours],
            "bonuses": list(self.bonuses),
        }


@dataclasses.dataclass
class EventDetailRecord:
    raid_schedule: List[ScheduleDay] = dataclasses.field(default_factory=list)
    raidbattles: List[Boss] = dataclasses.field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "raidSchedule": [d.as_dict() for d in self.raid_schedule],
            "raidbattles": [b.as_dict() for b in self.raidbattles],
        }


@dataclasses.dataclass
class ParseContext:
    """Per-document scratch state shared by the traversals and the final passes."""
    raid_hour_time: Optional[str] = None
    raid_hour_section_id: Optional[str] = None
    raid_types_with_raid_hour: Set[str] = dataclasses.field(default_factory=set)
    special_notes: List[str] = dataclasses.field(default_factory=list)
