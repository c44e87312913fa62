import asyncio
import json

import requests

import scrapers.event_details as event_details
from raids.backup import FlatExtraData, LegacyExtraData, parse_extra_data, recover_from_backup


def _fail(url, use_cache=False):
    raise requests.ConnectionError("boom")


def _read(path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def test_parse_extra_data_variants():
    legacy = parse_extra_data({"event": {"raidbattles": []}})
    flat = parse_extra_data({"raidSchedule": []})
    assert isinstance(legacy, LegacyExtraData)
    assert isinstance(flat, FlatExtraData)
    assert legacy.recover() == {"raidbattles": []}
    assert flat.recover() == {"raidSchedule": []}


def test_recover_from_backup_skips_other_events():
    bkp = [
        {"eventID": "other", "extraData": {"raidbattles": [{"name": "Mew"}]}},
        {"eventID": "max-finale", "extraData": None},
        {"eventID": "max-finale", "extraData": {"spotlight": {}}},
        {"eventID": "max-finale", "extraData": {"raidbattles": [{"name": "Eternatus"}]}},
    ]
    assert recover_from_backup("max-finale", bkp) == {"raidbattles": [{"name": "Eternatus"}]}
    assert recover_from_backup("missing", bkp) is None
    assert recover_from_backup("missing", None) is None


def test_fetch_failure_uses_flattened_backup(monkeypatch, tmp_path):
    monkeypatch.setattr(event_details, "fetch_page", _fail)
    schedule = [{"date": "Saturday", "bosses": [], "raidHours": [], "bonuses": []}]
    bkp = [{"eventID": "go-fest", "extraData": {"raidSchedule": schedule}}]

    result = asyncio.run(event_details.get("https://leekduck.com/events/go-fest/", "go-fest", bkp, str(tmp_path)))

    assert result == {"id": "go-fest", "type": "event", "data": {"raidSchedule": schedule}}
    written = _read(tmp_path / "go-fest.json")
    assert "raidbattles" not in written["data"]
    assert written["data"]["raidSchedule"] == schedule


def test_fetch_failure_uses_legacy_backup(monkeypatch, tmp_path):
    monkeypatch.setattr(event_details, "fetch_page", _fail)
    nested = {"raidSchedule": [], "raidbattles": [{"name": "Kyurem"}]}
    bkp = [{"eventID": "old", "extraData": {"event": nested}}]

    result = asyncio.run(event_details.get("https://x", "old", bkp, str(tmp_path)))

    assert result["data"] == nested


def test_fetch_failure_without_backup_writes_nothing(monkeypatch, tmp_path):
    monkeypatch.setattr(event_details, "fetch_page", _fail)
    result = asyncio.run(event_details.get("https://x", "lost", [], str(tmp_path)))
    assert result is None
    assert not (tmp_path / "lost.json").exists()


def test_success_writes_extracted_record(monkeypatch, tmp_path, page, roster):
    root = page('<h2 id="raids">Raids</h2><h3>Five-Star Raids: Tuesday, November 11</h3>' + roster("Kyurem"))
    monkeypatch.setattr(event_details, "fetch_page", lambda url, use_cache=False: root)

    url = "https://leekduck.com/events/kyurem/"
    result = asyncio.run(event_details.get(url, "kyurem", [], str(tmp_path)))

    assert result["id"] == "kyurem"
    assert result["type"] == "event"
    day = result["data"]["raidSchedule"][0]
    assert day["date"] == "Tuesday, November 11"
    assert day["bosses"][0]["raidType"] == "Tier 5"
    assert day["bosses"][0]["image"].startswith("https://leekduck.com/")
    assert result["data"]["raidbattles"] == []
    assert _read(tmp_path / "kyurem.json") == result


def test_page_without_content_falls_back(monkeypatch, tmp_path):
    monkeypatch.setattr(event_details, "http_get", lambda url, use_cache=False: "<html><body><p>x</p></body></html>")
    bkp = [{"eventID": "e", "extraData": {"raidbattles": []}}]
    result = asyncio.run(event_details.get("https://x", "e", bkp, str(tmp_path)))
    assert result["data"] == {"raidbattles": []}


def test_run_all_isolates_failures(monkeypatch, tmp_path, page):
    def fake_fetch(url, use_cache=False):
        if "bad" in url:
            raise requests.HTTPError("404")
        return page("<h2>Nothing</h2>")

    monkeypatch.setattr(event_details, "fetch_page", fake_fetch)
    events = [("good", "https://leekduck.com/events/good/"), ("bad", "https://leekduck.com/events/bad/")]

    results = asyncio.run(event_details.run_all(events, [], str(tmp_path), concurrency=1))

    assert results[0]["id"] == "good"
    assert results[1] is None


def test_select_events():
    index = [
        {"eventID": "a", "link": "https://leekduck.com/events/a/", "eventType": "event"},
        {"eventID": "b", "link": "https://leekduck.com/events/b/", "eventType": "community-day"},
    ]
    extra = [
        {"id": "c", "url": "https://leekduck.com/events/c/"},
        {"id": "d", "url": "https://leekduck.com/events/d/", "enabled": False},
        {"id": "a", "url": "https://leekduck.com/events/a-2/"},
    ]
    assert event_details.select_events(index, extra) == [
        ("a", "https://leekduck.com/events/a-2/"),
        ("c", "https://leekduck.com/events/c/"),
    ]


def test_fallback_skips_malformed_backup_entries(monkeypatch, tmp_path):
    monkeypatch.setattr(event_details, "fetch_page", _fail)
    bkp = [None, "junk", {"eventID": "e", "extraData": {"raidbattles": []}}]

    result = asyncio.run(event_details.get("https://x", "e", bkp, str(tmp_path)))

    assert result["data"] == {"raidbattles": []}
    assert recover_from_backup("missing", [None, 3]) is None
