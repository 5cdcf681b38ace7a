# File: bigram_tfidf/scoring/tfidf.py

import logging
import math
from typing import List, Optional

from bigram_tfidf.schemas.record import ScoredEntry
from bigram_tfidf.scoring.aggregator import FrequencyTable

logger = logging.getLogger("uvicorn")


def inverse_document_frequency(total_groups: int, doc_frequency_count: int) -> float:
    """ln(G / df). Exactly 0.0 when the term occurs in every group."""
    if doc_frequency_count == total_groups:
        return 0.0
    return math.log(total_groups / doc_frequency_count)


def score_tfidf(table: FrequencyTable, total_groups: Optional[int] = None) -> List[ScoredEntry]:
    """
    Score every (n-gram, group) pair present in `table`.

    Groups whose total n-gram count is 0 are skipped. Ties are kept as-is.
    Entries come back ordered by group, tf-idf descending, then n-gram text.
    """
    G = table.group_count if total_groups is None else total_groups

    if not any(table.group_totals.get(g, 0) > 0 for g in table.groups):
        return []

    if G < 1:
        raise ValueError(f"total_groups must be >= 1, got {G}")

    entries: List[ScoredEntry] = []

    for group in table.groups:
        group_total = table.group_totals.get(group, 0)
        if group_total == 0:
            logger.warning(f"⚠️ Group '{group}' has no n-grams after filtering; excluded from scoring")
            continue

        group_entries = []
        for ngram, count in table.counts[group].items():
            df_count = table.doc_frequency[ngram]
            if df_count > G:
                raise ValueError(
                    f"document frequency of '{ngram}' ({df_count}) exceeds total groups ({G})"
                )

            tf = count / group_total
            idf = inverse_document_frequency(G, df_count)
            group_entries.append(ScoredEntry(
                ngram=ngram,
                group=group,
                count=count,
                term_frequency=tf,
                doc_frequency_count=df_count,
                inverse_document_frequency=idf,
                tf_idf=tf * idf,
            ))

        group_entries.sort(key=lambda e: (-e.tf_idf, e.ngram))
        entries.extend(group_entries)

    return entries
