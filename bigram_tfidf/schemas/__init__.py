# bigram_tfidf/schemas/__init__.py
from .record import (
    Record,
    Ngram,
    ScoredEntry,
)

from .tfidf import (
    ScoreOptions,
    ScoreRequest,
    ScoreResponse,
    GroupSummary,
    LeaderboardResponse,
)
