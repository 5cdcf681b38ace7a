"""
Pytest configuration and fixtures
"""
import pytest

from bigram_tfidf.core.config import PipelineConfig
from bigram_tfidf.schemas.record import Record


@pytest.fixture
def no_stopwords_config():
    """Pipeline configuration with an empty exclusion set."""
    return PipelineConfig(use_base_stopwords=False, extra_stopwords=[], exclude_authors=False)


@pytest.fixture
def city_records():
    return [
        Record(text="Best pizza in town http://t.co/abc", group="Chicago", author="deepdishfan"),
        Record(text="deep dish pizza is the best pizza", group="Chicago", author="windy"),
        Record(text="best pizza slice near times square", group="New York", author="nyc_eats"),
        Record(text="RT @nyc_eats: best pizza slice near times square", group="New York", author="bob"),
        Record(text="wood fired pizza oven", group="Naples", author="napoli"),
        Record(text=None, group="Naples", author="ghost"),
    ]
