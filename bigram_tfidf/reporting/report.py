# File: bigram_tfidf/reporting/report.py
"""
Presentation helpers applied after scoring: top-N truncation and tabular export.
"""

import logging
from collections import defaultdict
from pathlib import Path
from typing import Dict, Iterable, List, Union

import pandas as pd

from bigram_tfidf.schemas.record import ScoredEntry

logger = logging.getLogger("uvicorn")

COLUMNS = [
    "ngram",
    "group",
    "count",
    "term_frequency",
    "doc_frequency_count",
    "inverse_document_frequency",
    "tf_idf",
]


def top_n_per_group(entries: Iterable[ScoredEntry], n: int = 25) -> List[ScoredEntry]:
    """
    Highest tf-idf entries per group, at most `n` each. Ties at the cut-off are
    broken by raw count, then n-gram text, so the output is stable.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")

    by_group: Dict[str, List[ScoredEntry]] = defaultdict(list)
    for entry in entries:
        by_group[entry.group].append(entry)

    out: List[ScoredEntry] = []
    for group in by_group:
        ranked = sorted(by_group[group], key=lambda e: (-e.tf_idf, -e.count, e.ngram))
        out.extend(ranked[:n])
    return out


def entries_to_dataframe(entries: Iterable[ScoredEntry]) -> pd.DataFrame:
    rows = [entry.model_dump() for entry in entries]
    return pd.DataFrame(rows, columns=COLUMNS)


def export_entries(entries: Iterable[ScoredEntry], path: Union[str, Path]) -> Path:
    """Write the scored table as .csv, .json (records) or .parquet, chosen by suffix."""
    path = Path(path)
    df = entries_to_dataframe(entries)
    path.parent.mkdir(parents=True, exist_ok=True)

    suffix = path.suffix.lower()
    if suffix == ".csv":
        df.to_csv(path, index=False)
    elif suffix == ".json":
        df.to_json(path, orient="records", indent=2, force_ascii=False)
    elif suffix == ".parquet":
        df.to_parquet(path, compression="gzip", index=False)
    else:
        raise ValueError(f"Unsupported export format: {suffix or path.name}")

    logger.info(f"💾 Exported {len(df):,} scored entries to {path}")
    return path
