"""
Fallback data from a previous run's event index.

`extraData` on an index entry comes in two shapes:
  legacy     {"event": {"raidSchedule": [...], "raidbattles": [...]}}
  flattened  {"raidSchedule": [...], "raidbattles": [...]}   (either key optional)
"""

from __future__ import annotations
import dataclasses
from typing import Any, Dict, List, Optional, Union

DETAIL_KEYS = ("raidSchedule", "raidbattles")


@dataclasses.dataclass(frozen=True)
class LegacyExtraData:
    event: Dict[str, Any]

    def recover(self) -> Dict[str, Any]:
        return dict(self.event) if isinstance(self.event, dict) else {}


@dataclasses.dataclass(frozen=True)
class FlatExtraData:
    fields: Dict[str, Any]

    def recover(self) -> Dict[str, Any]:
        return {k: self.fields[k] for k in DETAIL_KEYS if k in self.fields}


ExtraData = Union[LegacyExtraData, FlatExtraData]


def parse_extra_data(extra: Dict[str, Any]) -> ExtraData:
    if "event" in extra:
        return LegacyExtraData(extra["event"])
    return FlatExtraData(extra)


def recover_from_backup(event_id: str, bkp: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """First backup entry for this event whose extraData yields anything."""
    for entry in bkp or []:
        if not isinstance(entry, dict) or entry.get("eventID") != event_id:
            continue
        extra = entry.get("extraData")
        if not isinstance(extra, dict):
            continue
        data = parse_extra_data(extra).recover()
        if data:
            return data
    return None
