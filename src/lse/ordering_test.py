from lse.data_models.occurrence import Occurrence
from lse.ordering import insert_last_occurrence


def _occs(*freqs: int) -> list[Occurrence]:
    return [Occurrence(document=f"doc{i}", frequency=f) for i, f in enumerate(freqs)]


def _freqs(occs: list[Occurrence]) -> list[int]:
    return [o.frequency for o in occs]


def test_single_element_no_search():
    occs = _occs(4)
    assert insert_last_occurrence(occs) is None
    assert _freqs(occs) == [4]


def test_probe_sequence_in_middle():
    occs = _occs(12, 8, 7, 5, 3, 2, 6)
    probes = insert_last_occurrence(occs)
    assert probes == [2, 4, 3]
    assert _freqs(occs) == [12, 8, 7, 6, 5, 3, 2]


def test_smallest_goes_last():
    occs = _occs(5, 4, 1)
    assert insert_last_occurrence(occs) == [0, 1]
    assert _freqs(occs) == [5, 4, 1]


def test_largest_goes_first():
    occs = _occs(5, 4, 9)
    assert insert_last_occurrence(occs) == [0]
    assert _freqs(occs) == [9, 5, 4]
    assert occs[0].document == "doc2"


def test_equal_frequency_inserted_ahead():
    occs = [
        Occurrence(document="doc1", frequency=3),
        Occurrence(document="doc2", frequency=3),
    ]
    assert insert_last_occurrence(occs) == [0]
    assert [o.document for o in occs] == ["doc2", "doc1"]


def test_equal_frequency_stops_at_first_match():
    occs = _occs(9, 7, 7, 7, 2, 7)
    probes = insert_last_occurrence(occs)
    assert probes == [2]
    assert _freqs(occs) == [9, 7, 7, 7, 7, 2]
    assert occs[2].document == "doc5"


def test_stays_sorted_over_many_inserts():
    occs: list[Occurrence] = []
    for i, freq in enumerate([3, 1, 4, 1, 5, 9, 2, 6, 5, 3]):
        occs.append(Occurrence(document=f"d{i}", frequency=freq))
        insert_last_occurrence(occs)
        freqs = _freqs(occs)
        assert freqs == sorted(freqs, reverse=True)
    assert len({o.document for o in occs}) == len(occs)
