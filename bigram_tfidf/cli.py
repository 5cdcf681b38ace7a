# File: bigram_tfidf/cli.py
"""
Batch entry point: load (or fetch) a corpus, score it, write the report.

    bigram-tfidf --data-dir data --out reports/bigrams.csv --top-n 25
    bigram-tfidf --queries queries.json --out reports/bigrams.parquet
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from bigram_tfidf.core.config import (
    RETWEET_POLICIES,
    InvalidConfigurationError,
    PipelineConfig,
    settings,
)
from bigram_tfidf.preprocessing.fetcher import PostSearchClient
from bigram_tfidf.preprocessing.loader import CorpusFileLoader
from bigram_tfidf.preprocessing.pipeline import TfidfPipeline
from bigram_tfidf.reporting.report import export_entries, top_n_per_group

logger = logging.getLogger("uvicorn")


def get_args(argv=None):
    ap = argparse.ArgumentParser(description="Grouped bigram tf-idf analysis")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--data-dir", type=Path, default=None,
                     help="Directory of exported posts (.csv/.tsv/.jsonl)")
    src.add_argument("--queries", type=Path, default=None,
                     help="JSON file mapping group label -> search query; posts are fetched and cached")
    ap.add_argument("--out", type=Path, required=True,
                    help="Output file (.csv, .json or .parquet)")
    ap.add_argument("--top-n", type=int, default=settings.TOP_N,
                    help="Entries kept per group in the report (0 keeps everything)")
    ap.add_argument("--ngram-size", type=int, default=settings.NGRAM_SIZE)
    ap.add_argument("--preserve-case", action="store_true",
                    help="Count tokens case-sensitively (stopword matching stays case-insensitive)")
    ap.add_argument("--strip-handles", action=argparse.BooleanOptionalAction, default=settings.STRIP_HANDLES,
                    help="Remove @handles during normalization")
    ap.add_argument("--retweets", choices=RETWEET_POLICIES, default=settings.RETWEET_POLICY,
                    help="Retweet policy")
    ap.add_argument("--stopword", action="append", default=[],
                    help="Extra stopword (repeatable), added to the configured extras")
    ap.add_argument("--no-cache", action="store_true",
                    help="Ignore cached posts when fetching")
    return ap.parse_args(argv)


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    args = get_args(argv)

    config = PipelineConfig.from_settings(settings).model_copy(update={
        "ngram_size": args.ngram_size,
        "fold_case": settings.FOLD_CASE and not args.preserve_case,
        "strip_handles": args.strip_handles,
        "retweet_policy": args.retweets,
        "extra_stopwords": list(settings.EXTRA_STOPWORDS) + args.stopword,
    })

    try:
        pipeline = TfidfPipeline(config)
    except InvalidConfigurationError as e:
        logger.error(f"❌ Invalid configuration: {e}")
        return 2

    if args.queries is not None:
        with open(args.queries, "r", encoding="utf-8") as f:
            queries = json.load(f)
        records = PostSearchClient().fetch_groups(queries, use_cache=not args.no_cache)
    else:
        try:
            records = CorpusFileLoader(args.data_dir).load_records()
        except FileNotFoundError as e:
            logger.error(f"❌ {e}")
            return 1

    result = pipeline.run(records)
    entries = top_n_per_group(result.entries, args.top_n) if args.top_n > 0 else result.entries
    export_entries(entries, args.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
