"""Flask search page over an index built at startup.

Usage:
    python -m lse.viewer.app --docs docs.txt --noise-words noisewords.txt \\
        [--port 5000]
"""

import argparse
from pathlib import Path

from flask import Flask, jsonify, render_template_string, request

from lse.engine import SearchEngine
from lse.search import build_engine

app = Flask(__name__)

_engine: SearchEngine | None = None


def init(engine: SearchEngine) -> None:
    global _engine
    _engine = engine


def get_engine() -> SearchEngine:
    assert _engine is not None, "call init() before serving"
    return _engine


INDEX_TEMPLATE = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Little Search Engine</title></head>
<body>
<h1>Little Search Engine</h1>
<form action="/" method="get">
  <input name="kw1" value="{{ kw1 }}" placeholder="first keyword">
  or
  <input name="kw2" value="{{ kw2 }}" placeholder="second keyword">
  <button type="submit">Search</button>
</form>
{% if searched %}
  {% if documents is none %}
  <p>No matches found</p>
  {% else %}
  <ol>
  {% for doc in documents %}
    <li>{{ doc }}</li>
  {% endfor %}
  </ol>
  {% endif %}
{% endif %}
</body>
</html>
"""


@app.get("/")
def index():
    kw1 = request.args.get("kw1", "").strip()
    kw2 = request.args.get("kw2", "").strip()
    searched = bool(kw1 and kw2)
    documents = get_engine().top5_search(kw1, kw2) if searched else None
    return render_template_string(
        INDEX_TEMPLATE, kw1=kw1, kw2=kw2, searched=searched, documents=documents
    )


@app.get("/api/search")
def api_search():
    kw1 = request.args.get("kw1", "").strip()
    kw2 = request.args.get("kw2", "").strip()
    if not kw1 or not kw2:
        return jsonify({"error": "kw1 and kw2 are required"}), 400
    result = get_engine().search(kw1, kw2)
    return jsonify(result.model_dump())


def main() -> None:
    parser = argparse.ArgumentParser(description="Search page for the keyword index")
    parser.add_argument("--docs", default="docs.txt", help="Path to document list")
    parser.add_argument(
        "--noise-words", default="noisewords.txt", help="Path to noise-word list"
    )
    parser.add_argument("--port", type=int, default=5000)
    args = parser.parse_args()

    init(build_engine(Path(args.docs), Path(args.noise_words)))
    app.run(host="localhost", port=args.port, debug=False)


if __name__ == "__main__":
    main()
