#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Scrape raid schedules from LeekDuck event pages.

For every event of type "event" in the event index (plus any extra events
listed in sources/events.yaml), fetch the page and write:
  files/temp/<eventID>.json   {"id": ..., "type": "event", "data": {"raidSchedule": [...], "raidbattles": [...]}}

If a page cannot be fetched or parsed, the previous index (backup) is used
instead; an event with no usable backup gets no file. One failing event never
stops the others.

CLI:
  python -m scrapers.event_details [-c sources/events.yaml] [--concurrency 4]
  python -m scrapers.event_details --id into-the-wild-2025 --url https://leekduck.com/events/into-the-wild-2025/
"""

from __future__ import annotations
import argparse, asyncio, os, sys
from typing import Any, Dict, List, Optional, Tuple

from common.utils import CONFIG_PATH, http_get, load_config, load_json, save_json, soup_html
from raids.backup import recover_from_backup
from raids.extract import extract_event_details
from raids.nodes import content_root

DEFAULT_CONCURRENCY = 4


def fetch_page(url: str, use_cache: bool = False):
    html = http_get(url, use_cache=use_cache)
    root = content_root(soup_html(html))
    if root is None:
        raise ValueError(f"no .page-content in {url}")
    return root


def write_result(out_dir: str, result: Dict[str, Any]) -> None:
    path = os.path.join(out_dir, f"{result['id']}.json")
    try:
        save_json(path, result)
    except OSError as e:
        print(f"[warn] could not write {path}: {e}", file=sys.stderr)


async def get(url: str, event_id: str, bkp: List[Dict[str, Any]], out_dir: str = "files/temp",
              use_cache: bool = False) -> Optional[Dict[str, Any]]:
    """Scrape one event page; falls back to backup data on any fetch/parse failure."""
    try:
        root = await asyncio.to_thread(fetch_page, url, use_cache)
        data = extract_event_details(root, base_url=url).as_dict()
    except Exception as e:
        print(f"[warn] Error scraping event {event_id}: {e}", file=sys.stderr)
        data = recover_from_backup(event_id, bkp)
        if not data:
            return None
        print(f"[info] {event_id}: using backup data ({', '.join(data)})", file=sys.stderr)

    result = {"id": event_id, "type": "event", "data": data}
    write_result(out_dir, result)
    return result


def select_events(index: List[Dict[str, Any]], extra: List[Dict[str, Any]]) -> List[Tuple[str, str]]:
    """(eventID, url) pairs: index entries of type "event", then enabled config entries."""
    picked: Dict[str, str] = {}
    for e in index or []:
        if e.get("eventType") == "event" and e.get("eventID") and e.get("link"):
            picked[e["eventID"]] = e["link"]
    for e in extra or []:
        if not e.get("enabled", True):
            continue
        if e.get("id") and e.get("url"):
            picked[e["id"]] = e["url"]
    return list(picked.items())


async def run_all(events: List[Tuple[str, str]], bkp: List[Dict[str, Any]], out_dir: str,
                  concurrency: int = DEFAULT_CONCURRENCY, use_cache: bool = False) -> List[Optional[Dict[str, Any]]]:
    sem = asyncio.Semaphore(max(1, concurrency))

    async def one(event_id: str, url: str):
        async with sem:
            return await get(url, event_id, bkp, out_dir, use_cache)

    return await asyncio.gather(*(one(eid, url) for eid, url in events))


def main():
    ap = argparse.ArgumentParser(description="Scrape raid schedules from LeekDuck event pages")
    ap.add_argument("-c", "--config", default=CONFIG_PATH, help="YAML config path")
    ap.add_argument("--events", default=None, help="Event index JSON (overrides config)")
    ap.add_argument("--backup", default=None, help="Backup event index JSON (overrides config)")
    ap.add_argument("-o", "--out", default=None, help="Output directory for per-event JSON")
    ap.add_argument("--concurrency", type=int, default=DEFAULT_CONCURRENCY)
    ap.add_argument("--id", default=None, help="Scrape a single event id (requires --url)")
    ap.add_argument("--url", default=None, help="Event page URL for --id")
    args = ap.parse_args()

    cfg = load_config(args.config)
    paths = cfg["paths"]
    out_dir = args.out or paths["temp_dir"]
    use_cache = bool((cfg.get("fetch") or {}).get("use_cache", False))
    bkp = load_json(args.backup or paths["backup"], default=[]) or []

    if args.id:
        if not args.url:
            ap.error("--id requires --url")
        events = [(args.id, args.url)]
    else:
        index = load_json(args.events or paths["events"], default=[]) or []
        events = select_events(index, cfg.get("events"))

    if not events:
        print("[warn] No events to scrape.", file=sys.stderr)
        return

    results = asyncio.run(run_all(events, bkp, out_dir, args.concurrency, use_cache))
    written = sum(1 for r in results if r)
    print(f"[ok] wrote {written}/{len(events)} event files to {out_dir}")


if __name__ == "__main__":
    main()
