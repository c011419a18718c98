from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from anagrams.engine import Engine
from anagrams import config as CFG

app = Flask(__name__)
_engine: Engine | None = None

def _clamp_workers(w: int | None) -> int | None:
    # clients can ask for parallelism, never for more than MAX_SEARCH_WORKERS
    if w is None:
        return None
    return max(0, min(w, CFG.MAX_SEARCH_WORKERS))

def _not_ready():
    return jsonify({"error": "engine not initialized"}), 503

# ---------- API ----------
@app.get("/api/anagrams")
def api_anagrams():
    q = request.args.get("q", "", type=str)
    w = _clamp_workers(request.args.get("workers", None, type=int))
    if _engine is None or _engine.index is None:
        return _not_ready()
    if not q.strip():
        return jsonify([])
    rows = _engine.sentence_anagrams(q, workers=w)
    return jsonify([{"words": list(s), "sentence": " ".join(s)} for s in rows])

@app.get("/api/word")
def api_word():
    w = request.args.get("w", "", type=str).strip()
    if _engine is None or _engine.index is None:
        return _not_ready()
    if not w:
        return jsonify([])
    return jsonify(_engine.word_anagrams(w))

@app.get("/health")
def health():
    if _engine is None or _engine.index is None:
        return jsonify({"ok": False}), 503
    return jsonify({"ok": True, **_engine.stats()})

# ---------- UI ----------
@app.get("/")
def home():
    # Single page, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Anagrams • Flask UI</title>
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
.container{ max-width:860px; margin:24px auto; padding:0 16px; }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; box-shadow:0 10px 30px rgba(0,0,0,.25);
}
h1{ font-size:20px; margin:0 0 8px 0; letter-spacing:.3px; }
form{ display:flex; gap:12px; margin:12px 0 4px 0; }
input{
  flex:1; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
input:focus{ border-color:var(--accent) }
button{
  padding:10px 14px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); cursor:pointer;
}
button:hover{ border-color:var(--accent-2) }
#stats{ color:var(--muted); font-size:13px; margin-top:6px; }
ol{ margin:16px 0 0 0; padding-left:2.2rem; }
li{ padding:4px 0; border-top:1px solid var(--border); }
.empty{ padding:24px; text-align:center; color:var(--muted); }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Sentence anagrams</h1>
      <form id="f">
        <input id="q" type="text" placeholder="Type a sentence, e.g. yes man" autocomplete="off" autofocus />
        <button type="submit">Find</button>
      </form>
      <div id="stats">Ready.</div>
      <div id="out" class="empty">Enter a sentence to list its anagrams.</div>
    </div>
  </div>
<script>
const q = document.querySelector("#q"), out = document.querySelector("#out"),
      stats = document.querySelector("#stats");
function esc(s){ return s.replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
document.querySelector("#f").addEventListener("submit", async (ev)=>{
  ev.preventDefault();
  const query = q.value.trim();
  if(!query){ out.className="empty"; out.innerHTML="Enter a sentence to list its anagrams."; return; }
  stats.textContent = "Searching…";
  const t0 = performance.now();
  try{
    const resp = await fetch(`/api/anagrams?q=${encodeURIComponent(query)}`);
    if(!resp.ok) throw new Error(`HTTP ${resp.status}`);
    const data = await resp.json();
    stats.textContent = `Anagrams: ${data.length} • ~${Math.round(performance.now()-t0)} ms`;
    if(data.length === 0){ out.className="empty"; out.innerHTML="No anagrams."; return; }
    out.className = "";
    out.innerHTML = "<ol>" + data.map(r => `<li>${esc(r.sentence)}</li>`).join("") + "</ol>";
  }catch(e){
    stats.textContent = `Error: ${e.message ?? e}`;
  }
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    mode = ap.add_mutually_exclusive_group(required=True)
    mode.add_argument("--build", action="store_true")
    mode.add_argument("--load", action="store_true")
    ap.add_argument("--roots", nargs="+", default=[])
    ap.add_argument("--cache", default=None)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    if args.build:
        if not args.roots:
            ap.error("--build requires --roots")
        _engine.build(roots=args.roots, cache=args.cache, verbose=args.verbose)
    else:
        _engine.load(cache=args.cache, verbose=args.verbose)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
