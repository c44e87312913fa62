#!/usr/bin/env python3
"""
Raid calendar builder: one all-day calendar entry per raid schedule day.

Input:
  files/events.json   event index with extraData.raidSchedule (see tools/combine_details.py)

Outputs:
  - POGO_Raids.ics    (days whose date could be resolved)
  - POGO_Raids.csv    (every schedule day; unresolved days have an empty Date)

Day labels have no year ("Tuesday, November 11"), so the event's start date
supplies it. Bare weekdays ("Saturday") become the first such day on or after
the event start.
"""

import argparse
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import pandas as pd
from dateutil import parser as dateparser
from dateutil.relativedelta import relativedelta

from common.utils import CONFIG_PATH, load_config, load_json
from raids.backup import parse_extra_data

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

CSV_COLS = ["Event ID", "Event Name", "Day", "Date", "Bosses", "Raid Hours", "Bonuses", "Source URL"]

# ----------------- dates -----------------

def parse_start(val) -> Optional[date]:
    if not val or not isinstance(val, str):
        return None
    try:
        return dateparser.parse(val).date()
    except (ValueError, OverflowError):
        return None

def resolve_day(label: str, start: Optional[date]) -> Optional[date]:
    if not label or start is None:
        return None
    low = label.strip().lower()
    if low in WEEKDAYS:
        delta = (WEEKDAYS.index(low) - start.weekday()) % 7
        return start + timedelta(days=delta)
    try:
        d = dateparser.parse(label, default=datetime(start.year, 1, 1), fuzzy=True).date()
    except (ValueError, OverflowError):
        return None
    # event starting in December with days in January
    if d < start - timedelta(days=31):
        d += relativedelta(years=1)
    return d

# ----------------- rows -----------------

def schedule_of(event: Dict[str, Any]) -> List[Dict[str, Any]]:
    extra = event.get("extraData")
    if not isinstance(extra, dict):
        return []
    return parse_extra_data(extra).recover().get("raidSchedule") or []

def schedule_rows(events: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    rows = []
    for ev in events:
        start = parse_start(ev.get("start"))
        for day in schedule_of(ev):
            d = resolve_day(day.get("date", ""), start)
            rows.append({
                "Event ID": ev.get("eventID", ""),
                "Event Name": ev.get("name", ""),
                "Day": day.get("date", ""),
                "Date": d.isoformat() if d else "",
                "Bosses": ", ".join(b.get("name", "") for b in day.get("bosses") or []),
                "Raid Hours": "; ".join(
                    f"{w.get('time', '')}: {', '.join(b.get('name', '') for b in w.get('bosses') or [])}"
                    for w in day.get("raidHours") or []),
                "Bonuses": " | ".join(day.get("bonuses") or []),
                "Source URL": ev.get("link", ""),
            })
    return rows

# ----------------- ICS writing -----------------

def ics_escape(text: str) -> str:
    return (text or "").replace("\\", "\\\\").replace(";", "\\;").replace(",", "\\,").replace("\n", "\\n")

def to_ics(df: pd.DataFrame) -> str:
    """VCALENDAR text, one all-day VEVENT per dated row."""
    lines: List[str] = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "PRODID:-//pogo-raid-schedule//EN",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
    ]
    now = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")

    dated = df[df["Date"] != ""]
    for _, row in dated.iterrows():
        start = date.fromisoformat(row["Date"])
        end_excl = start + timedelta(days=1)   # DTEND is exclusive for all-day events

        name = row["Event Name"] or row["Event ID"]
        summary = f"{name}: {row['Bosses']}" if row["Bosses"] else name
        desc_parts = []
        if row["Raid Hours"]:
            desc_parts.append(f"Raid Hour: {row['Raid Hours']}")
        if row["Bonuses"]:
            desc_parts.append(f"Bonuses: {row['Bonuses']}")
        if row["Source URL"]:
            desc_parts.append(f"Link: {row['Source URL']}")
        description = "\\n".join(ics_escape(p) for p in desc_parts)

        lines.extend([
            "BEGIN:VEVENT",
            f"DTSTAMP:{now}",
            f"UID:{row['Event ID']}-{start.strftime('%Y%m%d')}@pogo-raid-schedule",
            f"SUMMARY:{ics_escape(summary)}",
            f"DTSTART;VALUE=DATE:{start.strftime('%Y%m%d')}",
            f"DTEND;VALUE=DATE:{end_excl.strftime('%Y%m%d')}",
        ])
        if description:
            lines.append(f"DESCRIPTION:{description}")
        lines.append("END:VEVENT")

    lines.append("END:VCALENDAR")
    return "\r\n".join(lines) + "\r\n"

# ----------------- main -----------------

def main():
    ap = argparse.ArgumentParser(description="Build raid calendar (ICS) and CSV digest from the event index")
    ap.add_argument("-c", "--config", default=CONFIG_PATH)
    ap.add_argument("--events", default=None)
    args = ap.parse_args()

    paths = load_config(args.config)["paths"]
    events = load_json(args.events or paths["events"], default=[]) or []

    df = pd.DataFrame(schedule_rows(events), columns=CSV_COLS)
    df.to_csv(paths["csv"], index=False)

    with open(paths["calendar"], "w", encoding="utf-8", newline="\n") as f:
        f.write(to_ics(df))

    dated_n = int((df["Date"] != "").sum())
    print(f"Raid calendar built: {len(df)} days total → {dated_n} dated, {len(df) - dated_n} undated")
    print(f"ICS: {paths['calendar']} | CSV: {paths['csv']}")

if __name__ == "__main__":
    main()
