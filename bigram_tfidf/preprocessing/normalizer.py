# File: bigram_tfidf/preprocessing/normalizer.py

import re
from typing import Optional

# "http" up to the next whitespace
URL_PATTERN = re.compile(r"http\S*")
HANDLE_PATTERN = re.compile(r"@\w+")


def normalize_text(text: Optional[str], strip_handles: bool = False) -> str:
    """Remove URL-like substrings (and optionally @handles) from raw post text."""
    if not text:
        return ""
    cleaned = URL_PATTERN.sub("", text)
    if strip_handles:
        cleaned = HANDLE_PATTERN.sub("", cleaned)
    return cleaned
