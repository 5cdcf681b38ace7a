# bigram_tfidf/schemas/tfidf.py
from pydantic import BaseModel, Field
from typing import List, Optional

from bigram_tfidf.core.config import RetweetPolicy
from .record import Record, ScoredEntry


class ScoreOptions(BaseModel):
    """Per-request overrides of the pipeline configuration."""
    ngram_size: Optional[int] = None
    fold_case: Optional[bool] = None
    strip_handles: Optional[bool] = None
    retweet_policy: Optional[RetweetPolicy] = None
    extra_stopwords: Optional[List[str]] = None
    exclude_authors: Optional[bool] = None
    use_base_stopwords: Optional[bool] = None


class ScoreRequest(BaseModel):
    records: List[Record]
    options: ScoreOptions = Field(default_factory=ScoreOptions)
    top_n: Optional[int] = Field(None, ge=1, description="Keep the top N entries per group")


class GroupSummary(BaseModel):
    group: str
    total_ngrams: int
    distinct_ngrams: int
    degenerate: bool = False


class ScoreResponse(BaseModel):
    total_groups: int
    groups: List[GroupSummary]
    entries: List[ScoredEntry]
    warnings: List[str] = Field(default_factory=list)


class LeaderboardResponse(BaseModel):
    group: Optional[str] = None
    top_n: int
    entries: List[ScoredEntry]
