# bigram_tfidf/schemas/record.py
"""
Core records flowing through the scoring pipeline.
"""

from typing import NamedTuple, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator

RETWEET_PREFIX = "RT "


class Record(BaseModel):
    """One post as delivered by the corpus loader."""
    model_config = ConfigDict(frozen=True)

    text: Optional[str] = None
    group: str
    author: str = ""
    is_retweet: bool = False
    post_id: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _detect_retweet(cls, data):
        if isinstance(data, dict) and data.get("is_retweet") is None:
            data = dict(data)
            text = data.get("text") or ""
            data["is_retweet"] = text.startswith(RETWEET_PREFIX)
        return data


class Ngram(NamedTuple):
    tokens: Tuple[str, ...]
    group: str

    @property
    def text(self) -> str:
        return " ".join(self.tokens)


class ScoredEntry(BaseModel):
    """tf-idf score of one n-gram within one group."""
    model_config = ConfigDict(frozen=True)

    ngram: str
    group: str
    count: int = Field(..., ge=1)
    term_frequency: float
    doc_frequency_count: int = Field(..., ge=1)
    inverse_document_frequency: float
    tf_idf: float
