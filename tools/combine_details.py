#!/usr/bin/env python3
"""
Merge per-event detail files (files/temp/<eventID>.json) back into the event index.

Event results are stored flattened under extraData:
    extraData.raidSchedule / extraData.raidbattles   (only the keys the result has)

Index entries without a detail file keep whatever extraData they already had.
"""

import argparse
import glob
import json
import os
import sys
from typing import Any, Dict, List

from common.utils import CONFIG_PATH, load_config, load_json, save_json

DETAIL_KEYS = ("raidSchedule", "raidbattles")


def read_results(temp_dir: str) -> Dict[str, Dict[str, Any]]:
    out = {}
    for path in sorted(glob.glob(os.path.join(temp_dir, "*.json"))):
        try:
            with open(path, "r", encoding="utf-8") as f:
                res = json.load(f)
        except (OSError, ValueError) as e:
            print(f"[warn] Failed reading {path}: {e}", file=sys.stderr)
            continue
        if isinstance(res, dict) and res.get("id"):
            out[res["id"]] = res
    return out


def merge_result(entry: Dict[str, Any], result: Dict[str, Any]) -> Dict[str, Any]:
    if result.get("type") != "event":
        return entry
    data = result.get("data") or {}
    extra = dict(entry.get("extraData") or {})
    extra.pop("event", None)  # legacy nested shape
    for k in DETAIL_KEYS:
        if k in data:
            extra[k] = data[k]
    merged = dict(entry)
    merged["extraData"] = extra
    return merged


def combine(index: List[Dict[str, Any]], results: Dict[str, Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [merge_result(e, results[e.get("eventID")]) if e.get("eventID") in results else e
            for e in index]


def main():
    ap = argparse.ArgumentParser(description="Merge event detail files into the event index")
    ap.add_argument("-c", "--config", default=CONFIG_PATH)
    ap.add_argument("--events", default=None, help="Event index JSON (read and rewritten)")
    ap.add_argument("--temp", default=None, help="Directory with per-event detail files")
    args = ap.parse_args()

    paths = load_config(args.config)["paths"]
    events_path = args.events or paths["events"]
    index = load_json(events_path, default=[]) or []
    results = read_results(args.temp or paths["temp_dir"])

    merged = combine(index, results)
    save_json(events_path, merged)
    hits = sum(1 for e in index if e.get("eventID") in results)
    print(f"[ok] merged {hits} detail files into {events_path} ({len(merged)} events)")


if __name__ == "__main__":
    main()
