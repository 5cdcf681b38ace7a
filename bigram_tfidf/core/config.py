# bigram_tfidf/core/config.py
from typing import List, Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

RetweetPolicy = Literal["keep", "drop", "dedupe"]
RETWEET_POLICIES = ("keep", "drop", "dedupe")

DEFAULT_EXTRA_STOPWORDS = ["rt", "via", "amp"]


class InvalidConfigurationError(ValueError):
    """Raised for configuration the pipeline cannot run with (e.g. n-gram size < 1)."""


class Settings(BaseSettings):
    NGRAM_SIZE: int = 2
    FOLD_CASE: bool = True
    STRIP_HANDLES: bool = False
    RETWEET_POLICY: str = "keep"
    EXTRA_STOPWORDS: List[str] = Field(default_factory=lambda: list(DEFAULT_EXTRA_STOPWORDS))
    EXCLUDE_AUTHORS: bool = True
    TOP_N: int = 25
    EXPORT_ON_STARTUP: bool = False

    SEARCH_API_TOKEN: Optional[str] = None
    SEARCH_MAX_RESULTS: int = 500

    model_config = SettingsConfigDict(env_file=".env", extra="allow")


class PipelineConfig(BaseModel):
    """Explicit configuration for one scoring run."""

    ngram_size: int = 2
    fold_case: bool = True
    strip_handles: bool = False
    retweet_policy: str = "keep"
    extra_stopwords: List[str] = Field(default_factory=lambda: list(DEFAULT_EXTRA_STOPWORDS))
    exclude_authors: bool = True
    use_base_stopwords: bool = True

    @classmethod
    def from_settings(cls, s: Settings) -> "PipelineConfig":
        return cls(
            ngram_size=s.NGRAM_SIZE,
            fold_case=s.FOLD_CASE,
            strip_handles=s.STRIP_HANDLES,
            retweet_policy=s.RETWEET_POLICY,
            extra_stopwords=list(s.EXTRA_STOPWORDS),
            exclude_authors=s.EXCLUDE_AUTHORS,
        )


def validate_config(config: PipelineConfig) -> PipelineConfig:
    if config.ngram_size < 1:
        raise InvalidConfigurationError(f"ngram_size must be >= 1, got {config.ngram_size}")
    if config.retweet_policy not in RETWEET_POLICIES:
        raise InvalidConfigurationError(
            f"retweet_policy must be one of {RETWEET_POLICIES}, got {config.retweet_policy!r}"
        )
    return config


settings = Settings()
