"""Print a summary of the keyword index built from a corpus.

Usage:
    python -m lse.inspect_index --docs docs.txt --noise-words noisewords.txt \\
        [--top-n 20] [--keyword apple]
"""

import argparse
from pathlib import Path

import polars as pl

from lse.engine import SearchEngine
from lse.search import build_engine


def keyword_table(engine: SearchEngine, keyword: str) -> pl.DataFrame:
    """Occurrences of one keyword in index order."""
    normalized = engine.get_keyword(keyword) or keyword.lower()
    return (
        engine.to_polars()
        .filter(pl.col("keyword") == normalized)
        .sort("rank")
        .select(["rank", "document", "frequency"])
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Summarize the keyword index")
    parser.add_argument("--docs", default="docs.txt", help="Path to document list")
    parser.add_argument(
        "--noise-words", default="noisewords.txt", help="Path to noise-word list"
    )
    parser.add_argument("--top-n", type=int, default=20)
    parser.add_argument(
        "--keyword", default=None, help="Show the occurrence list of one keyword"
    )
    args = parser.parse_args()

    engine = build_engine(Path(args.docs), Path(args.noise_words))

    if args.keyword is not None:
        table = keyword_table(engine, args.keyword)
        if table.is_empty():
            print(f"{args.keyword!r} is not indexed")
        else:
            print(table)
        return

    stats = engine.keyword_stats()
    with pl.Config(tbl_rows=args.top_n):
        print(stats.head(args.top_n))


if __name__ == "__main__":
    main()
