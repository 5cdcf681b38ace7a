import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from bigram_tfidf.core.config import PipelineConfig, settings
from bigram_tfidf.preprocessing.loader import CorpusFileLoader
from bigram_tfidf.preprocessing.pipeline import ScoringResult, TfidfPipeline
from bigram_tfidf.reporting.report import export_entries

logger = logging.getLogger("uvicorn")


class ApplicationInitializer:
    """Loads the default corpus from the data directory and scores it once at startup."""

    def __init__(self, data_dir: Optional[Path] = None, config: Optional[PipelineConfig] = None):
        self.loader = CorpusFileLoader(data_dir)
        self.pipeline = TfidfPipeline(config or PipelineConfig.from_settings(settings))
        self.result: Optional[ScoringResult] = None

    def initialize_corpus(self, export_path: Optional[Path] = None) -> dict:
        logger.info("🔍 Checking for a default corpus...")

        if not self.loader.has_files():
            logger.warning(f"⚠️ No corpus files found in {self.loader.data_dir}; leaderboard will be empty")
            return {
                "corpus_loaded": False,
                "records": 0,
                "scored_entries": 0,
                "scoring_time": 0.0,
            }

        start_time = datetime.now()
        try:
            records = self.loader.load_records()
            logger.info(f"📊 Loaded {len(records):,} records from {self.loader.data_dir}")

            self.result = self.pipeline.run(records)

            if export_path is not None:
                export_entries(self.result.entries, export_path)

            scoring_time = (datetime.now() - start_time).total_seconds()
            return {
                "corpus_loaded": True,
                "records": len(records),
                "scored_entries": len(self.result.entries),
                "groups": self.result.table.group_count,
                "scoring_time": scoring_time,
                "warnings": list(self.result.warnings),
            }

        except (OSError, ValueError) as e:
            logger.error(f"❌ Corpus initialization failed: {e}")
            return {
                "corpus_loaded": False,
                "records": 0,
                "scored_entries": 0,
                "scoring_time": 0.0,
                "error": str(e),
            }

    def get_initialization_summary(self) -> dict:
        if self.result is None:
            return {"corpus": {"loaded": False, "groups": 0, "entries": 0}}
        return {
            "corpus": {
                "loaded": True,
                "groups": self.result.table.group_count,
                "entries": len(self.result.entries),
                "degenerate_groups": self.result.table.degenerate_groups,
            },
            "pipeline": self.pipeline.config.model_dump(),
            "filter": self.result.filter_stats,
        }
