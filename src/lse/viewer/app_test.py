import pytest

from lse.data_models.occurrence import Occurrence
from lse.engine import SearchEngine
from lse.viewer import app as viewer


@pytest.fixture
def client():
    engine = SearchEngine()
    engine.merge_keywords({"apple": Occurrence(document="docA", frequency=5)})
    engine.merge_keywords({"banana": Occurrence(document="docC", frequency=5)})
    viewer.init(engine)
    return viewer.app.test_client()


def test_api_search(client):
    resp = client.get("/api/search?kw1=apple&kw2=banana")
    assert resp.status_code == 200
    assert resp.get_json() == {
        "kw1": "apple",
        "kw2": "banana",
        "documents": ["docA", "docC"],
    }


def test_api_search_no_match(client):
    resp = client.get("/api/search?kw1=ghost&kw2=phantom")
    assert resp.get_json()["documents"] is None


def test_api_search_requires_both_terms(client):
    resp = client.get("/api/search?kw1=apple")
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_index_page_lists_results(client):
    resp = client.get("/?kw1=apple&kw2=ghost")
    body = resp.get_data(as_text=True)
    assert "<li>docA</li>" in body
    assert "No matches found" not in body


def test_index_page_no_match(client):
    resp = client.get("/?kw1=ghost&kw2=phantom")
    assert "No matches found" in resp.get_data(as_text=True)
