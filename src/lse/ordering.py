"""Keep occurrence lists in descending order of frequency."""

from lse.data_models.occurrence import Occurrence


def insert_last_occurrence(occs: list[Occurrence]) -> list[int] | None:
    """Move the last element of `occs` into place by binary search, in place.

    occs[:-1] must already be in descending order of frequency. On a frequency
    tie the new occurrence goes ahead of the equal entry it probed.

    Returns the midpoint indexes probed, in order, or None if `occs` has a
    single element and no search was needed.
    """
    if len(occs) <= 1:
        return None
    candidate = occs.pop()
    probes: list[int] = []
    left, right = 0, len(occs) - 1
    mid = 0
    while left <= right:
        mid = (left + right) // 2
        probes.append(mid)
        freq = occs[mid].frequency
        if freq == candidate.frequency:
            occs.insert(mid, candidate)
            return probes
        if freq > candidate.frequency:
            left = mid + 1
        else:
            right = mid - 1
    if candidate.frequency < occs[mid].frequency:
        occs.insert(mid + 1, candidate)
    else:
        occs.insert(mid, candidate)
    return probes
