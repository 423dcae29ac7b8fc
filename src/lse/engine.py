"""Keyword index over a closed set of text documents, with two-keyword top-5 search."""

from collections.abc import Mapping
from pathlib import Path

import polars as pl

from lse.corpus import (
    read_document_list,
    read_noise_words,
    read_tokens,
    resolve_document,
)
from lse.data_models.occurrence import Occurrence
from lse.data_models.search_result import SearchResult
from lse.keywords import get_keyword
from lse.ordering import insert_last_occurrence
from lse.query import TOP_N, merge_top, top_documents

_SCHEMA = {
    "keyword": pl.String,
    "document": pl.String,
    "frequency": pl.Int64,
    "rank": pl.Int64,
}


class SearchEngine:
    """Owns the keyword index and the noise words it was built with.

    Build once with make_index(), then query any number of times.
    """

    def __init__(self) -> None:
        # keyword -> occurrences in descending order of frequency
        self.keywords_index: dict[str, list[Occurrence]] = {}
        self.noise_words: set[str] = set()
        self.documents: list[str] = []
        self._indexed = False

    @property
    def indexed(self) -> bool:
        return self._indexed

    def get_keyword(self, word: str) -> str | None:
        return get_keyword(word, self.noise_words)

    def load_noise_words(self, noise_words_file: Path) -> None:
        self.noise_words |= read_noise_words(noise_words_file)

    def load_keywords_from_document(
        self, document: str, base_dir: Path = Path(".")
    ) -> dict[str, Occurrence]:
        """Count the keywords of one document.

        `document` is recorded as given; the file is looked up in `base_dir`
        first, then relative to the working directory.
        """
        kws: dict[str, Occurrence] = {}
        for word in read_tokens(resolve_document(document, base_dir)):
            keyword = self.get_keyword(word)
            if keyword is None:
                continue
            occ = kws.get(keyword)
            kws[keyword] = (
                occ.incremented()
                if occ is not None
                else Occurrence(document=document, frequency=1)
            )
        return kws

    def merge_keywords(self, kws: Mapping[str, Occurrence]) -> None:
        for keyword, occ in kws.items():
            occs = self.keywords_index.setdefault(keyword, [])
            occs.append(occ)
            insert_last_occurrence(occs)

    def make_index(self, docs_file: Path, noise_words_file: Path) -> None:
        """Load noise words, then index every document named in `docs_file`, in order.

        A document listed more than once is indexed only the first time.
        Raises FileNotFoundError if any input is missing (OSError if one cannot
        be read); the index is then left in an unspecified state.
        """
        if self._indexed:
            raise RuntimeError("index already built; create a new SearchEngine")
        self.load_noise_words(noise_words_file)
        base_dir = docs_file.parent
        for document in read_document_list(docs_file):
            if document in self.documents:
                continue
            self.merge_keywords(self.load_keywords_from_document(document, base_dir))
            self.documents.append(document)
        self._indexed = True

    def top5_search(self, kw1: str, kw2: str) -> list[str] | None:
        """Documents containing kw1 or kw2, highest frequency first, at most 5.

        Ties between different documents favor kw1. Returns None if neither
        keyword is indexed.
        """
        key1 = get_keyword(kw1)
        key2 = get_keyword(kw2)
        occs1 = self.keywords_index.get(key1) if key1 is not None else None
        occs2 = self.keywords_index.get(key2) if key2 is not None else None
        if occs1 is not None and occs2 is not None:
            return merge_top(occs1, occs2, TOP_N)
        if occs1 is not None:
            return top_documents(occs1, TOP_N)
        if occs2 is not None:
            return top_documents(occs2, TOP_N)
        return None

    def search(self, kw1: str, kw2: str) -> SearchResult:
        return SearchResult(kw1=kw1, kw2=kw2, documents=self.top5_search(kw1, kw2))

    def to_polars(self) -> pl.DataFrame:
        rows = [
            (keyword, occ.document, occ.frequency, rank)
            for keyword, occs in self.keywords_index.items()
            for rank, occ in enumerate(occs)
        ]
        if not rows:
            return pl.DataFrame(schema=_SCHEMA)
        return pl.DataFrame(rows, schema=_SCHEMA, orient="row")

    def keyword_stats(self) -> pl.DataFrame:
        """Per-keyword document count and total frequency, most frequent first."""
        return (
            self.to_polars()
            .group_by("keyword")
            .agg(
                pl.len().cast(pl.Int64).alias("n_documents"),
                pl.col("frequency").sum().alias("total_frequency"),
            )
            .sort(["total_frequency", "keyword"], descending=[True, False])
        )
