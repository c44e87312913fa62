import os, json, hashlib
import requests
import yaml
from urllib.parse import urljoin
from bs4 import BeautifulSoup, FeatureNotFound

UA = "POGO-Raid-Schedule-Bot/1.0 (+github actions; repo issues contact)"
SESSION = requests.Session()
SESSION.headers.update({
    "User-Agent": UA,
    "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
})
TIMEOUT = 30
CACHE_DIR = ".cache/http"
CONFIG_PATH = "sources/events.yaml"

DEFAULT_PATHS = {
    "events": "files/events.json",
    "backup": "files/events_min.json",
    "temp_dir": "files/temp",
    "calendar": "POGO_Raids.ics",
    "csv": "POGO_Raids.csv",
}

def _cache_path(url: str) -> str:
    h = hashlib.sha1(url.encode("utf-8")).hexdigest()
    return os.path.join(CACHE_DIR, h + ".cache")

def http_get(url: str, use_cache=True) -> str:
    cp = _cache_path(url)
    if use_cache and os.path.exists(cp):
        try:
            with open(cp, "r", encoding="utf-8") as f:
                return f.read()
        except OSError:
            pass
    resp = SESSION.get(url, timeout=TIMEOUT)
    resp.raise_for_status()
    text = resp.text
    if use_cache:
        os.makedirs(CACHE_DIR, exist_ok=True)
        with open(cp, "w", encoding="utf-8") as f:
            f.write(text)
    return text

def soup_html(html: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(html, "lxml")
    except FeatureNotFound:
        return BeautifulSoup(html, "html.parser")

def node_text(n) -> str:
    """DOM-style textContent, trimmed (inner whitespace kept)."""
    if n is None:
        return ""
    return n.get_text().strip()

def load_json(path, default=None):
    if not os.path.exists(path):
        return default
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)

def save_json(path, obj):
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)

def safe_join(base, href):
    if not base:
        return href
    try:
        return urljoin(base, href)
    except Exception:
        return href

def load_config(path=CONFIG_PATH) -> dict:
    cfg = {}
    if path and os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    cfg["paths"] = {**DEFAULT_PATHS, **(cfg.get("paths") or {})}
    return cfg
