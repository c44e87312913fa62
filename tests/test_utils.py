import common.utils as utils


class _Resp:
    def __init__(self, text):
        self.text = text

    def raise_for_status(self):
        pass


def test_http_get_uses_cache(monkeypatch, tmp_path):
    calls = []

    def fake_get(url, timeout=None):
        calls.append(url)
        return _Resp("<html>page</html>")

    monkeypatch.setattr(utils, "CACHE_DIR", str(tmp_path / "cache"))
    monkeypatch.setattr(utils.SESSION, "get", fake_get)

    assert utils.http_get("https://leekduck.com/events/a/") == "<html>page</html>"
    assert utils.http_get("https://leekduck.com/events/a/") == "<html>page</html>"
    assert len(calls) == 1

    utils.http_get("https://leekduck.com/events/a/", use_cache=False)
    assert len(calls) == 2


def test_load_config_defaults(tmp_path):
    cfg = utils.load_config(str(tmp_path / "missing.yaml"))
    assert cfg["paths"] == utils.DEFAULT_PATHS


def test_load_config_overrides(tmp_path):
    path = tmp_path / "events.yaml"
    path.write_text("paths:\n  temp_dir: out/tmp\nevents:\n  - id: a\n    url: https://x\n", encoding="utf-8")
    cfg = utils.load_config(str(path))
    assert cfg["paths"]["temp_dir"] == "out/tmp"
    assert cfg["paths"]["events"] == utils.DEFAULT_PATHS["events"]
    assert cfg["events"] == [{"id": "a", "url": "https://x"}]


def test_safe_join():
    assert utils.safe_join("https://leekduck.com/events/a/", "/img/x.png") == "https://leekduck.com/img/x.png"
    assert utils.safe_join("", "/img/x.png") == "/img/x.png"
