# File: bigram_tfidf/preprocessing/tokenizer.py

from typing import List, Sequence, Tuple

from bigram_tfidf.core.config import InvalidConfigurationError
from bigram_tfidf.preprocessing.normalizer import normalize_text
from bigram_tfidf.schemas.record import Ngram, Record


def split_tokens(text: str) -> List[str]:
    """Whitespace tokenization. Consecutive whitespace never yields empty tokens."""
    if not text:
        return []
    return text.split()


def make_ngrams(tokens: Sequence[str], n: int = 2) -> List[Tuple[str, ...]]:
    """
    All contiguous, overlapping n-tuples of `tokens` in order of appearance.
    A sequence of K tokens yields max(K - n + 1, 0) n-grams.
    """
    if n < 1:
        raise InvalidConfigurationError(f"n-gram size must be >= 1, got {n}")
    tokens = tuple(tokens)
    return [tokens[i:i + n] for i in range(len(tokens) - n + 1)]


def tokenize_record(
    record: Record,
    n: int = 2,
    fold_case: bool = True,
    strip_handles: bool = False,
) -> List[Ngram]:
    """Normalize, split and window one record. Repeated n-grams are kept."""
    cleaned = normalize_text(record.text, strip_handles=strip_handles)
    tokens = split_tokens(cleaned)
    if fold_case:
        tokens = [t.lower() for t in tokens]
    return [Ngram(tokens=gram, group=record.group) for gram in make_ngrams(tokens, n)]
