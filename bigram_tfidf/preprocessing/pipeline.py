# File: bigram_tfidf/preprocessing/pipeline.py

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from bigram_tfidf.core.config import PipelineConfig, validate_config
from bigram_tfidf.preprocessing.normalizer import normalize_text
from bigram_tfidf.preprocessing.token_filter import ENGLISH_STOPWORDS, StopwordFilter
from bigram_tfidf.preprocessing.tokenizer import tokenize_record
from bigram_tfidf.schemas.record import Ngram, Record, ScoredEntry
from bigram_tfidf.scoring.aggregator import FrequencyTable, aggregate_frequencies
from bigram_tfidf.scoring.tfidf import score_tfidf

logger = logging.getLogger("uvicorn")


@dataclass
class ScoringResult:
    entries: List[ScoredEntry]
    table: FrequencyTable
    filter_stats: Dict[str, int]
    stats: Dict[str, int] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)


def apply_retweet_policy(records: List[Record], policy: str) -> List[Record]:
    """
    keep:   every record
    drop:   records not flagged as retweets
    dedupe: first occurrence of each (group, cleaned text) among retweets
    """
    if policy == "keep":
        return list(records)
    if policy == "drop":
        return [r for r in records if not r.is_retweet]

    seen = set()
    out = []
    for r in records:
        if r.is_retweet:
            key = (r.group, normalize_text(r.text).strip())
            if key in seen:
                continue
            seen.add(key)
        out.append(r)
    return out


class TfidfPipeline:
    """
    Batch scoring pipeline:
    1. Apply the retweet policy
    2. Normalize and tokenize each record into n-grams (empty records contribute nothing)
    3. Drop n-grams containing any excluded token
    4. Count n-grams per group and document frequency across groups
    5. Score tf-idf per (n-gram, group)
    """

    def __init__(self, config: Optional[PipelineConfig] = None):
        self.config = validate_config(config or PipelineConfig())

    def build_filter(self, records: Iterable[Record]) -> StopwordFilter:
        authors = [r.author for r in records] if self.config.exclude_authors else []
        return StopwordFilter(
            base_stopwords=ENGLISH_STOPWORDS if self.config.use_base_stopwords else None,
            extra_stopwords=self.config.extra_stopwords,
            author_ids=authors,
        )

    def run(self, records: Iterable[Record], groups: Optional[Iterable[str]] = None) -> ScoringResult:
        start_time = datetime.now()
        records = list(records)
        warnings: List[str] = []

        # Every group seen in the input is part of the corpus, even if all its records get dropped
        known_groups = list(dict.fromkeys(list(groups or []) + [r.group for r in records]))

        logger.info(f"🚀 Stage 1: Applying retweet policy '{self.config.retweet_policy}'...")
        kept_records = apply_retweet_policy(records, self.config.retweet_policy)
        retweets_removed = len(records) - len(kept_records)
        logger.info(f"📊 {len(kept_records):,} of {len(records):,} records kept across {len(known_groups)} groups")

        logger.info(f"🚀 Stage 2: Tokenizing into {self.config.ngram_size}-grams...")
        ngrams: List[Ngram] = []
        empty_records = 0
        for record in kept_records:
            if not record.text or not record.text.strip():
                empty_records += 1
                continue
            ngrams.extend(tokenize_record(
                record,
                n=self.config.ngram_size,
                fold_case=self.config.fold_case,
                strip_handles=self.config.strip_handles,
            ))
        if empty_records:
            logger.info(f"   - {empty_records:,} records without text skipped")
        logger.info(f"✂️ Produced {len(ngrams):,} n-grams")

        logger.info("🚀 Stage 3: Stopword filtering...")
        # Authors of dropped retweets stay excluded
        token_filter = self.build_filter(records)
        filtered = token_filter.filter_ngrams(ngrams)
        filter_stats = token_filter.get_filter_stats()
        logger.info(f"🧹 Exclusion set: {filter_stats['total_excluded_tokens']:,} tokens "
                    f"({filter_stats['author_ids']:,} author ids)")
        logger.info(f"   - {filter_stats['dropped']:,} n-grams dropped, {filter_stats['kept']:,} kept")

        logger.info("🚀 Stage 4: Aggregating frequencies...")
        table = aggregate_frequencies(filtered, known_groups)
        # The scorer logs each of these when it skips them
        for group in table.degenerate_groups:
            warnings.append(f"Group '{group}' has no n-grams after filtering and is excluded")

        logger.info(f"🚀 Stage 5: Scoring tf-idf over {table.group_count} groups...")
        entries = score_tfidf(table)
        if not entries:
            msg = "Corpus produced no scorable n-grams"
            logger.warning(f"⚠️ {msg}")
            warnings.append(msg)

        total_time = (datetime.now() - start_time).total_seconds()
        logger.info(f"✅ Scored {len(entries):,} entries in {total_time:.2f} seconds")

        return ScoringResult(
            entries=entries,
            table=table,
            filter_stats=filter_stats,
            stats={
                "records": len(records),
                "retweets_removed": retweets_removed,
                "empty_records": empty_records,
                "ngrams": len(ngrams),
                "filtered_ngrams": len(filtered),
                "groups": len(table.groups),
                "scored_groups": table.group_count,
            },
            warnings=warnings,
        )
