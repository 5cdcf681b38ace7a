from collections import Counter

from bigram_tfidf.schemas.record import Ngram
from bigram_tfidf.scoring.aggregator import aggregate_frequencies, count_group, merge_group_counts


def _grams(group, *texts):
    return [Ngram(tuple(t.split()), group) for t in texts]


class TestAggregateFrequencies:

    def test_single_record_scenario(self):
        table = aggregate_frequencies(_grams("A", "cast iron", "iron skillet", "skillet pan"))
        assert table.counts["A"] == {"cast iron": 1, "iron skillet": 1, "skillet pan": 1}
        assert table.group_totals["A"] == 3
        assert table.group_count == 1

    def test_group_total_counts_instances_not_distinct(self):
        table = aggregate_frequencies(_grams("A", "best pizza", "best pizza", "deep dish"))
        assert table.counts["A"]["best pizza"] == 2
        assert table.group_totals["A"] == 3
        assert table.distinct_ngrams("A") == 2

    def test_document_frequency_counts_groups_once(self):
        grams = (
            _grams("A", "best pizza", "best pizza")
            + _grams("B", "best pizza", "deep dish")
            + _grams("C", "deep dish")
        )
        table = aggregate_frequencies(grams)
        assert table.doc_frequency == {"best pizza": 2, "deep dish": 2}
        assert table.groups == ["A", "B", "C"]

    def test_known_groups_without_ngrams_are_degenerate(self):
        table = aggregate_frequencies(_grams("A", "best pizza"), groups=["A", "B"])
        assert table.groups == ["A", "B"]
        assert table.group_totals["B"] == 0
        assert table.degenerate_groups == ["B"]
        assert table.group_count == 1

    def test_empty_input(self):
        table = aggregate_frequencies([])
        assert table.groups == []
        assert table.group_count == 0
        assert table.doc_frequency == {}


def test_per_group_counts_merge_to_same_table():
    grams = _grams("A", "x y", "y z") + _grams("B", "x y")
    direct = aggregate_frequencies(grams)
    merged = merge_group_counts({
        "A": count_group(g for g in grams if g.group == "A"),
        "B": count_group(g for g in grams if g.group == "B"),
    })
    assert merged == direct


def test_merge_drops_zero_counts():
    table = merge_group_counts({"A": Counter({"x y": 1}), "B": Counter({"x y": 0, "z w": 2})})
    assert table.counts["B"] == {"z w": 2}
    assert table.doc_frequency == {"x y": 1, "z w": 1}
