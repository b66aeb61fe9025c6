"""
Tests for the substring search over the cached document
"""

import pytest

from skdocs_cache.core.query import matches, results_of, search


class TestResultsOf:
    @pytest.mark.parametrize(
        "doc",
        [None, [], "results", 42, {}, {"results": None}, {"results": {"a": 1}}, {"results": "x"}],
    )
    def test_missing_or_wrong_type_is_empty(self, doc):
        assert results_of(doc) == []

    def test_returns_results_list(self, upstream_doc):
        assert results_of(upstream_doc) is upstream_doc["results"]


class TestSearch:
    def test_matches_title(self, upstream_doc):
        out = search(upstream_doc, "push")
        assert out == {"results": [upstream_doc["results"][0]], "count": 1}

    def test_query_is_case_insensitive(self, upstream_doc):
        out = search(upstream_doc, "EVENT")
        assert out["results"] == [upstream_doc["results"][0]]
        assert out["count"] == 1

    def test_no_match(self, upstream_doc):
        assert search(upstream_doc, "zzz") == {"results": [], "count": 0}

    def test_matches_syntax_and_category(self, upstream_doc):
        assert search(upstream_doc, "%integer%")["count"] == 1
        assert search(upstream_doc, "contr")["results"] == [upstream_doc["results"][1]]

    def test_order_is_preserved(self):
        doc = {"results": [{"title": f"item {i}"} for i in (3, 1, 2)]}
        out = search(doc, "item")
        assert [r["title"] for r in out["results"]] == ["item 3", "item 1", "item 2"]

    def test_empty_query_matches_items_with_a_string_field(self):
        doc = {
            "results": [
                {"title": "A"},
                {"syntax": ""},
                {"category": 5},
                {"other": "x"},
                "not-an-object",
                None,
            ]
        }
        out = search(doc, "")
        assert out["results"] == [{"title": "A"}, {"syntax": ""}]
        assert out["count"] == 2

    def test_wrong_typed_fields_do_not_raise(self):
        doc = {
            "results": [
                {"title": None, "syntax": ["push"], "category": {"name": "push"}},
                {"title": 123, "syntax": "on push"},
                42,
            ]
        }
        out = search(doc, "push")
        assert out["results"] == [{"title": 123, "syntax": "on push"}]

    def test_document_without_results(self):
        assert search({"error": "nope"}, "a") == {"results": [], "count": 0}

    @pytest.mark.parametrize("q", ["", "o", "LOOP", "on ", "%", "vent", "zzz"])
    def test_count_and_partition(self, upstream_doc, q):
        out = search(upstream_doc, q)
        assert out["count"] == len(out["results"])

        needle = q.lower()
        for item in upstream_doc["results"]:
            hit = any(needle in item[k].lower() for k in ("title", "syntax", "category"))
            assert (item in out["results"]) == hit


def test_matches_expects_lowercased_query():
    item = {"title": "Push Event"}
    assert matches(item, "push")
    assert not matches(item, "PUSH")
