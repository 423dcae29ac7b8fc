"""Build the index and answer a two-keyword query.

Usage:
    python -m lse.search --docs docs.txt --noise-words noisewords.txt \\
        [--kw1 apple --kw2 banana]

Without --kw1/--kw2 the terms are read interactively.
"""

import argparse
from pathlib import Path
import sys

from lse.data_models.search_result import SearchResult
from lse.engine import SearchEngine


def format_result(result: SearchResult) -> str:
    if result.documents is None:
        return "No matches found"
    return "\n".join(result.documents)


def build_engine(docs: Path, noise_words: Path) -> SearchEngine:
    engine = SearchEngine()
    try:
        engine.make_index(docs, noise_words)
    except OSError as e:
        sys.exit(str(e))
    print(f"Loaded {len(engine.noise_words)} noise words")
    print(
        f"Indexed {len(engine.documents)} documents, "
        f"{len(engine.keywords_index)} keywords"
    )
    return engine


def main() -> None:
    parser = argparse.ArgumentParser(description="Two-keyword top-5 document search")
    parser.add_argument("--docs", default="docs.txt", help="Path to document list")
    parser.add_argument(
        "--noise-words", default="noisewords.txt", help="Path to noise-word list"
    )
    parser.add_argument("--kw1", default=None, help="First search term")
    parser.add_argument("--kw2", default=None, help="Second search term")
    args = parser.parse_args()

    engine = build_engine(Path(args.docs), Path(args.noise_words))

    kw1 = args.kw1 if args.kw1 is not None else input("Search term 1 = ").strip()
    kw2 = args.kw2 if args.kw2 is not None else input("Search term 2 = ").strip()
    print(format_result(engine.search(kw1, kw2)))


if __name__ == "__main__":
    main()
