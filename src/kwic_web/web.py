from __future__ import annotations
import argparse
import logging
from dataclasses import asdict

from flask import Flask, request, jsonify, Response, abort

from kwic.config import WEB_HOST, WEB_PORT
from kwic.engine import Engine
from kwic.errors import OutOfRange
from kwic.loader import iter_file_lines, split_lines

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: Engine | None = None  # built once at startup from --roots, read-only afterwards

# ---------- API ----------
@app.post("/api/kwic")
def api_kwic():
    payload = request.get_json(silent=True) or {}
    text = payload.get("text") if isinstance(payload, dict) else None
    if text is None:
        text = request.form.get("text")
    if not isinstance(text, str):
        return jsonify({"error": "missing 'text'"}), 400
    eng = Engine()
    try:
        entries = eng.build(split_lines(text)).entries()
    finally:
        eng.shutdown()
    return jsonify({"count": len(entries), "entries": [asdict(e) for e in entries]})

@app.get("/api/entries")
def api_entries():
    if _engine is None:
        return jsonify([])
    return jsonify([asdict(e) for e in _engine.entries()])

@app.get("/api/entries/<int(signed=True):rank>")
def api_entry(rank: int):
    if _engine is None:
        abort(404)
    try:
        e = _engine.entry(rank)
    except OutOfRange:
        abort(404)
    return jsonify(asdict(e))

@app.get("/health")
def health():
    return jsonify({"ok": True, "entries": len(_engine) if _engine is not None else 0})

# ---------- UI ----------
@app.get("/")
def home():
    # Single page: textarea in, sorted rotations out. No external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>KWIC Index • Flask UI</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --accent-2:#22d3ee; --border:#1c2530;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; box-shadow:0 10px 30px rgba(0,0,0,.25);
}
h1{ font-size:20px; margin:0 0 8px 0; letter-spacing:.3px; }
textarea{
  width:100%; min-height:140px; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:15px; resize:vertical;
}
textarea:focus{ border-color:var(--accent) }
.btn{
  margin-top:10px; padding:10px 14px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); cursor:pointer;
}
.btn:hover{ border-color:var(--accent-2) }
.meta{ color:var(--muted); font-size:13px; margin-top:6px; }
.results{ margin-top:16px; border-radius:12px; border:1px solid var(--border); }
.row{
  display:grid; grid-template-columns:3rem 5rem 1fr; gap:10px;
  padding:10px 14px; border-top:1px solid var(--border);
}
.row:first-child{ border-top:none }
.kw{ color:var(--accent); font-weight:600 }
.small{ color:var(--muted); font-variant-numeric:tabular-nums }
.empty{ padding:24px; text-align:center; color:var(--muted); }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>KWIC Index</h1>
      <form id="f">
        <textarea id="text" name="text" placeholder="One line of text per row…" autofocus></textarea>
        <button class="btn" type="submit">Build index</button>
      </form>
      <div id="stats" class="meta">Ready.</div>
      <div class="results"><div id="out" class="empty">Results appear here.</div></div>
    </div>
  </div>
<script>
const $ = (s) => document.querySelector(s);
function esc(s){ return s.replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
$("#f").addEventListener("submit", async (ev) => {
  ev.preventDefault();
  const resp = await fetch("/api/kwic", {
    method: "POST", headers: {"Content-Type": "application/json"},
    body: JSON.stringify({text: $("#text").value}),
  });
  const data = await resp.json();
  $("#stats").textContent = `Entries: ${data.count ?? 0}`;
  if(!data.entries || data.entries.length === 0){
    $("#out").className = "empty"; $("#out").innerHTML = "No entries."; return;
  }
  $("#out").className = "";
  $("#out").innerHTML = data.entries.map((e, i) => {
    const rest = e.text.slice(e.keyword.length);
    return `<div class="row"><div class="small">${i}</div><div class="small">line ${e.line_no}</div>`
         + `<div><span class="kw">${esc(e.keyword)}</span>${esc(rest)}</div></div>`;
  }).join("");
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of the KWIC engine")
    ap.add_argument("--roots", nargs="+", default=[], help="Files or folders indexed at startup")
    ap.add_argument("--host", default=WEB_HOST)
    ap.add_argument("--port", type=int, default=WEB_PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine(verbose=args.verbose)
    if args.roots:
        try:
            _engine.build(iter_file_lines(args.roots))
        except FileNotFoundError as e:
            ap.error(f"no such file or directory: {e}")
    log.info("Serving %d entries on %s:%d", len(_engine), args.host, args.port)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
        _engine = None
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
