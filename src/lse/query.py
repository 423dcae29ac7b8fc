"""Rank documents for a two-keyword OR query."""

from collections.abc import Sequence

from lse.data_models.occurrence import Occurrence

TOP_N = 5


def top_documents(occs: Sequence[Occurrence], limit: int = TOP_N) -> list[str]:
    return [occ.document for occ in occs[:limit]]


def merge_top(
    first: Sequence[Occurrence],
    second: Sequence[Occurrence],
    limit: int = TOP_N,
) -> list[str]:
    """Merge two descending-frequency occurrence lists into a ranked document list.

    Each document appears at most once. Higher frequency wins; on a frequency
    tie between different documents the first list's document goes first and
    the second list's entry is compared again on the next round.
    """
    result: list[str] = []
    seen: set[str] = set()

    def take(document: str) -> None:
        if document not in seen:
            seen.add(document)
            result.append(document)

    a = b = 0
    while len(result) < limit:
        a_done = a >= len(first)
        b_done = b >= len(second)
        if a_done and b_done:
            break
        if a_done:
            take(second[b].document)
            b += 1
        elif b_done:
            take(first[a].document)
            a += 1
        elif first[a].frequency == second[b].frequency:
            take(first[a].document)
            if first[a].document == second[b].document:
                b += 1
            a += 1
        elif first[a].frequency > second[b].frequency:
            take(first[a].document)
            a += 1
        else:
            take(second[b].document)
            b += 1
    return result
