# File: bigram_tfidf/preprocessing/token_filter.py

from typing import Dict, Iterable, List, Optional, Set

from bigram_tfidf.schemas.record import Ngram

# Standard English stopwords (pronouns, determiners, auxiliaries, prepositions,
# conjunctions and the contractions built from them).
ENGLISH_STOPWORDS = frozenset({
    "a", "about", "above", "after", "again", "against", "all", "am", "an", "and",
    "any", "are", "aren't", "as", "at", "be", "because", "been", "before", "being",
    "below", "between", "both", "but", "by", "can", "can't", "cannot", "could",
    "couldn't", "did", "didn't", "do", "does", "doesn't", "doing", "don't", "down",
    "during", "each", "few", "for", "from", "further", "get", "got", "had", "hadn't",
    "has", "hasn't", "have", "haven't", "having", "he", "he'd", "he'll", "he's",
    "her", "here", "here's", "hers", "herself", "him", "himself", "his", "how",
    "how's", "i", "i'd", "i'll", "i'm", "i've", "if", "in", "into", "is", "isn't",
    "it", "it's", "its", "itself", "just", "let's", "me", "more", "most", "mustn't",
    "my", "myself", "no", "nor", "not", "now", "of", "off", "on", "once", "only",
    "or", "other", "ought", "our", "ours", "ourselves", "out", "over", "own", "same",
    "shan't", "she", "she'd", "she'll", "she's", "should", "shouldn't", "so", "some",
    "such", "than", "that", "that's", "the", "their", "theirs", "them", "themselves",
    "then", "there", "there's", "these", "they", "they'd", "they'll", "they're",
    "they've", "this", "those", "through", "to", "too", "under", "until", "up",
    "very", "was", "wasn't", "we", "we'd", "we'll", "we're", "we've", "were",
    "weren't", "what", "what's", "when", "when's", "where", "where's", "which",
    "while", "who", "who's", "whom", "why", "why's", "will", "with", "won't",
    "would", "wouldn't", "you", "you'd", "you'll", "you're", "you've", "your",
    "yours", "yourself", "yourselves",
})


class StopwordFilter:
    """
    N-gram level stopword filter.

    Methodology:
    1. Case-fold every constituent token
    2. If ANY token is in the exclusion set: drop the entire n-gram
    3. Otherwise keep the n-gram unchanged

    The exclusion set is the union of the base stopword list, configured
    extras (retweet markers, topic words) and the lowercased author ids.
    """

    def __init__(
        self,
        base_stopwords: Optional[Iterable[str]] = ENGLISH_STOPWORDS,
        extra_stopwords: Optional[Iterable[str]] = None,
        author_ids: Optional[Iterable[str]] = None,
    ):
        self.base_stopwords = {w.lower() for w in (base_stopwords or ())}
        self.extra_stopwords = {w.lower() for w in (extra_stopwords or ())}
        # Screen names are matched without their leading "@"
        self.author_ids = {a.lower().lstrip("@") for a in (author_ids or ()) if a}

        self.exclusion_set: Set[str] = (
            self.base_stopwords | self.extra_stopwords | self.author_ids
        )

        self.kept = 0
        self.dropped = 0

    def is_excluded_token(self, token: str) -> bool:
        return token.lower() in self.exclusion_set

    def keep(self, ngram: Ngram) -> bool:
        """False if any constituent token, case-folded, is excluded."""
        for token in ngram.tokens:
            if self.is_excluded_token(token):
                return False
        return True

    def filter_ngrams(self, ngrams: Iterable[Ngram]) -> List[Ngram]:
        kept_ngrams = []
        for ngram in ngrams:
            if self.keep(ngram):
                kept_ngrams.append(ngram)
                self.kept += 1
            else:
                self.dropped += 1
        return kept_ngrams

    def get_filter_stats(self) -> Dict[str, int]:
        """Return sizes of the exclusion categories and the kept/dropped tallies."""
        return {
            "base_stopwords": len(self.base_stopwords),
            "extra_stopwords": len(self.extra_stopwords),
            "author_ids": len(self.author_ids),
            "total_excluded_tokens": len(self.exclusion_set),
            "kept": self.kept,
            "dropped": self.dropped,
        }
