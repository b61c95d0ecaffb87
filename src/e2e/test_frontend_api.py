from pathlib import Path
import pytest

import kwic_web.web as webmod
from kwic.engine import Engine
from kwic.loader import iter_file_lines
from kwic_web.web import app as flask_app


@pytest.fixture
def client():
    return flask_app.test_client()


@pytest.fixture
def seeded_engine(tmp_path: Path, monkeypatch):
    root = tmp_path / "Archive"; root.mkdir()
    (root / "h.txt").write_text("this is a test\nthis is another test\n", encoding="utf-8")
    eng = Engine().build(iter_file_lines([str(root)]))
    monkeypatch.setattr(webmod, "_engine", eng)
    yield eng
    eng.shutdown()


@pytest.mark.e2e
def test_home_page_renders(client):
    r = client.get("/")
    assert r.status_code == 200
    html = r.data.decode("utf-8", errors="ignore").lower()
    assert "<form" in html and "kwic" in html


@pytest.mark.e2e
def test_post_kwic_json(client):
    r = client.post("/api/kwic", json={"text": "Apple banana\nBanana apple"})
    assert r.status_code == 200
    data = r.get_json()
    assert data["count"] == 2
    assert [e["text"] for e in data["entries"]] == ["Apple banana", "banana Apple"]
    for key in ("text", "keyword", "line_no", "shift"):
        assert key in data["entries"][0]


@pytest.mark.e2e
def test_post_kwic_form_and_empty_text(client):
    r = client.post("/api/kwic", data={"text": "hello, world!"})
    assert [e["text"] for e in r.get_json()["entries"]] == ["hello world", "world hello"]
    r = client.post("/api/kwic", json={"text": ""})
    assert r.get_json() == {"count": 0, "entries": []}


@pytest.mark.e2e
def test_post_kwic_splits_lines_like_the_stream_engine(client):
    import io
    from kwic.engine import kwic_stream

    text = "alpha\x0cbeta\nbeta alpha\r\ngamma\x85delta\u2028eps"
    out = io.StringIO()
    kwic_stream(io.StringIO(text), out)

    r = client.post("/api/kwic", json={"text": text})
    rows = [e["text"] for e in r.get_json()["entries"]]
    assert rows == out.getvalue().splitlines()
    assert rows[:2] == ["alpha beta", "beta alpha"]
    assert len(rows) == 5


@pytest.mark.e2e
def test_post_kwic_missing_text_is_400(client):
    assert client.post("/api/kwic", json={"nope": 1}).status_code == 400
    assert client.post("/api/kwic", json={"text": 42}).status_code == 400


@pytest.mark.e2e
def test_entries_without_startup_engine(client, monkeypatch):
    monkeypatch.setattr(webmod, "_engine", None)
    assert client.get("/api/entries").get_json() == []
    assert client.get("/api/entries/0").status_code == 404
    assert client.get("/health").get_json() == {"ok": True, "entries": 0}


@pytest.mark.e2e
def test_entries_and_rank_lookup(client, seeded_engine):
    rows = client.get("/api/entries").get_json()
    assert len(rows) == 8
    assert rows[0]["text"] == "a test this is"

    last = client.get("/api/entries/-1")
    assert last.status_code == 200
    assert last.get_json()["text"] == "this is another test"
    assert client.get("/api/entries/0").get_json() == rows[0]
    assert client.get("/api/entries/8").status_code == 404
    assert client.get("/api/entries/-9").status_code == 404


@pytest.mark.e2e
def test_health(client, seeded_engine):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json() == {"ok": True, "entries": 8}
