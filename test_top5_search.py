"""
Test top-5 search over a built index
"""

import pytest

from LittleSearch.build_inverted_index import InvertedIndexBuilder, build_index
from LittleSearch.config import merge_config
from LittleSearch.occurrence import Occurrence
from LittleSearch.top5_search import NO_RESULTS, QuerySyntaxError, Top5SearchEngine, parse_query, top5_search


@pytest.fixture
def index():
    return {
        "dog": [Occurrence("D1", 3), Occurrence("D2", 1)],
        "cat": [Occurrence("D3", 3), Occurrence("D2", 1)],
    }


def test_tie_goes_to_first_keyword_and_documents_are_unique(index):
    assert top5_search(index, "dog", "cat") == ["D1", "D3", "D2"]
    assert top5_search(index, "cat", "dog") == ["D3", "D1", "D2"]


def test_keywords_are_normalized(index):
    assert top5_search(index, "Dog.", "CAT!") == ["D1", "D3", "D2"]


def test_both_rejected_returns_no_results(index):
    assert top5_search(index, "don't", "123") is NO_RESULTS


def test_one_rejected_uses_other_keyword(index):
    assert top5_search(index, "the", "cat", noise_words={"the"}) == ["D3", "D2"]
    assert top5_search(index, "dog", "x-ray") == ["D1", "D2"]


def test_one_rejected_and_other_unknown(index):
    assert top5_search(index, "the", "horse", noise_words={"the"}) is NO_RESULTS


def test_unknown_keywords_return_no_results(index):
    assert top5_search(index, "horse", "cow") is NO_RESULTS


def test_one_unknown_keyword(index):
    assert top5_search(index, "horse", "cat") == ["D3", "D2"]


def test_same_keyword_twice(index):
    assert top5_search(index, "dog", "Dog") == ["D1", "D2"]


def test_result_limited_to_five():
    index = build_index(
        [(f"D{i}", ["war"] * (10 - i) + ["peace"] * i) for i in range(10)]
    )
    results = top5_search(index, "war", "peace")
    assert results == ["D0", "D1", "D9", "D2", "D8"]


def test_higher_frequency_wins_over_first_keyword():
    index = {
        "war": [Occurrence("A", 2), Occurrence("B", 1)],
        "alice": [Occurrence("C", 7), Occurrence("D", 4), Occurrence("A", 1)],
    }
    assert top5_search(index, "war", "alice") == ["C", "D", "A", "B"]


def test_document_already_taken_is_skipped_under_first_keyword():
    index = {
        "war": [Occurrence("A", 2), Occurrence("B", 2), Occurrence("E", 1)],
        "alice": [Occurrence("B", 5), Occurrence("C", 2)],
    }
    assert top5_search(index, "war", "alice") == ["B", "A", "C", "E"]


def test_membership_does_not_depend_on_keyword_order():
    index = build_index([
        ("D1", "war war peace".split()),
        ("D2", "peace peace".split()),
        ("D3", "war".split()),
        ("D4", "peace war war war".split()),
    ])
    assert set(top5_search(index, "war", "peace")) == set(top5_search(index, "peace", "war"))


def test_max_results_is_configurable(index):
    config = merge_config({"search": {"max_results": 2}})
    assert top5_search(index, "dog", "cat", config=config) == ["D1", "D3"]


def test_search_query(index):
    engine = Top5SearchEngine(index)
    assert engine.search_query("dog OR cat") == ["D1", "D3", "D2"]
    assert engine.search_query("dog or cat") == ["D1", "D3", "D2"]
    assert engine.search_query("cat") == ["D3", "D2"]


def test_engine_from_builder_uses_noise_words():
    builder = InvertedIndexBuilder(noise_words={"the"})
    builder.build([("D1", "the war".split()), ("D2", "war war".split())])
    engine = Top5SearchEngine.from_builder(builder)
    assert engine.search("The", "war") == ["D2", "D1"]


def test_queries_do_not_modify_index(index):
    before = {k: list(v) for k, v in index.items()}
    top5_search(index, "dog", "cat")
    top5_search(index, "horse", "cat")
    assert index == before


@pytest.mark.parametrize("query, expected", [
    ("war OR alice", ("war", "alice")),
    ("war or alice", ("war", "alice")),
    ("  war   Or  alice ", ("war", "alice")),
    ("war alice", ("war", "alice")),
    ("war", ("war", "")),
])
def test_parse_query(query, expected):
    assert parse_query(query) == expected


@pytest.mark.parametrize("query", ["", "   ", "OR", "war OR", "OR alice", "a OR b OR c", "a b c"])
def test_parse_query_rejects_malformed(query):
    with pytest.raises(QuerySyntaxError):
        parse_query(query)


@pytest.mark.parametrize("max_results", [0, -1, "5"])
def test_max_results_must_be_positive(index, max_results):
    config = merge_config({"search": {"max_results": max_results}})
    with pytest.raises(ValueError):
        Top5SearchEngine(index, config=config)
