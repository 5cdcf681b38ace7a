# File: bigram_tfidf/settings.py

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent.parent

class SearchAPIConfig:
    RECENT_SEARCH_URL = os.getenv(
        "SEARCH_API_BASE",
        "https://api.twitter.com/2/tweets/search/recent"
    )
    USER_AGENT = "BigramTfidf/1.0"
    MAX_PER_PAGE = 100
    REQUEST_TIMEOUT = 30  # seconds

class CacheFiles:
    CACHE_ROOT = Path(os.getenv("CACHE_DIR", BASE_DIR / "cache"))
    POSTS_CACHE_DIR = CACHE_ROOT / "posts"
    SCORED_TABLE_PATH = CACHE_ROOT / "scored_bigrams.parquet"

class RawDataFiles:
    RAW_DATASET_DIR = Path(os.getenv("DATA_DIR", BASE_DIR / "data"))
    RAW_FILE_PATTERNS = (".csv", ".tsv", ".jsonl")
