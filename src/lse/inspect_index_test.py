from lse.data_models.occurrence import Occurrence
from lse.engine import SearchEngine
from lse.inspect_index import keyword_table


def _engine() -> SearchEngine:
    engine = SearchEngine()
    for document, frequency in [("d1", 1), ("d2", 5), ("d3", 3)]:
        engine.merge_keywords(
            {"storm": Occurrence(document=document, frequency=frequency)}
        )
    engine.merge_keywords({"night": Occurrence(document="d1", frequency=2)})
    return engine


def test_keyword_table_in_index_order():
    table = keyword_table(_engine(), "Storm.")
    assert table["document"].to_list() == ["d2", "d3", "d1"]
    assert table["frequency"].to_list() == [5, 3, 1]
    assert table["rank"].to_list() == [0, 1, 2]


def test_keyword_table_unknown_is_empty():
    assert keyword_table(_engine(), "calm").is_empty()
