import pytest

from bigram_tfidf.core.config import InvalidConfigurationError
from bigram_tfidf.preprocessing.tokenizer import make_ngrams, split_tokens, tokenize_record
from bigram_tfidf.schemas.record import Ngram, Record


class TestSplitTokens:

    def test_consecutive_whitespace_yields_no_empty_tokens(self):
        assert split_tokens("  cast   iron\tskillet \n pan ") == ["cast", "iron", "skillet", "pan"]

    def test_empty_text(self):
        assert split_tokens("") == []


class TestMakeNgrams:

    @pytest.mark.parametrize("k,n", [(1, 1), (4, 2), (5, 2), (5, 3), (3, 3)])
    def test_count_is_k_minus_n_plus_one(self, k, n):
        tokens = [f"w{i}" for i in range(k)]
        grams = make_ngrams(tokens, n)
        assert len(grams) == k - n + 1
        assert grams[0] == tuple(tokens[:n])
        assert grams[-1] == tuple(tokens[-n:])

    def test_n_larger_than_tokens_yields_nothing(self):
        assert make_ngrams(["only"], 2) == []
        assert make_ngrams([], 2) == []

    def test_order_of_appearance(self):
        assert make_ngrams(["cast", "iron", "skillet", "pan"], 2) == [
            ("cast", "iron"),
            ("iron", "skillet"),
            ("skillet", "pan"),
        ]

    def test_repeated_ngrams_are_kept(self):
        grams = make_ngrams(["best", "pizza", "best", "pizza"], 2)
        assert grams.count(("best", "pizza")) == 2

    def test_invalid_size_raises(self):
        with pytest.raises(InvalidConfigurationError):
            make_ngrams(["a", "b"], 0)


class TestTokenizeRecord:

    def test_tags_group_and_strips_urls(self):
        record = Record(text="cast iron http://x.co/1 skillet pan", group="A")
        grams = tokenize_record(record, n=2)
        assert grams == [
            Ngram(("cast", "iron"), "A"),
            Ngram(("iron", "skillet"), "A"),
            Ngram(("skillet", "pan"), "A"),
        ]
        assert grams[0].text == "cast iron"

    def test_fold_case(self):
        record = Record(text="Best Pizza", group="A")
        assert tokenize_record(record, fold_case=True)[0].tokens == ("best", "pizza")
        assert tokenize_record(record, fold_case=False)[0].tokens == ("Best", "Pizza")

    def test_empty_record_yields_nothing(self):
        assert tokenize_record(Record(text=None, group="A")) == []
