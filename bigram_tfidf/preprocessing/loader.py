# File: bigram_tfidf/preprocessing/loader.py
import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence

import pandas as pd

from bigram_tfidf.schemas.record import Record
from bigram_tfidf.settings import RawDataFiles

logger = logging.getLogger("uvicorn")

# Accepted spellings per column, first match wins
COLUMN_ALIASES = {
    "text": ["text", "full_text", "body"],
    "group": ["group", "city", "category", "query_group"],
    "author": ["author", "screen_name", "username", "author_username"],
    "is_retweet": ["is_retweet", "retweet"],
    "post_id": ["post_id", "id", "status_id", "tweet_id"],
}


class CorpusFileLoader:
    def __init__(self, data_dir: Optional[Path] = None, file_patterns: Sequence[str] = RawDataFiles.RAW_FILE_PATTERNS):
        self.data_dir = Path(data_dir or RawDataFiles.RAW_DATASET_DIR)
        self.file_patterns = tuple(file_patterns)

    def has_files(self) -> bool:
        return self.data_dir.is_dir() and bool(self._list_files())

    def load_files(self) -> pd.DataFrame:
        if not self.data_dir.is_dir():
            raise FileNotFoundError(f"Data directory {self.data_dir} does not exist.")
        files = self._list_files()
        if not files:
            raise FileNotFoundError(f"No files matching {self.file_patterns} found in {self.data_dir}.")

        df_list = [self._load_file(os.path.join(self.data_dir, f)) for f in files]
        return pd.concat(df_list, ignore_index=True)

    def load_records(self) -> List[Record]:
        return self.to_records(self.load_files())

    def _list_files(self) -> List[str]:
        return sorted(f for f in os.listdir(self.data_dir) if f.endswith(self.file_patterns))

    def _load_file(self, path: str) -> pd.DataFrame:
        if path.endswith(".jsonl"):
            df = pd.read_json(path, lines=True, dtype=False)
        else:
            sep = "\t" if path.endswith(".tsv") else ","
            df = pd.read_csv(path, sep=sep, dtype=str, keep_default_na=False)
        df = df.loc[:, ~df.columns.astype(str).str.contains('^Unnamed')]
        df.columns = [str(c).strip().lower() for c in df.columns]  # Strip whitespace

        df = df.rename(columns=self._alias_map(df.columns))
        if "text" not in df.columns or "group" not in df.columns:
            raise ValueError(f"{path}: a text column and a group column are required, got {list(df.columns)}")

        # Keep ids and names as strings so concatenation with other files can't turn them into floats
        for col in ("author", "post_id"):
            if col in df.columns:
                df[col] = df[col].map(lambda v: None if v is None or pd.isna(v) else str(v)).astype(object)
        return df

    @staticmethod
    def _alias_map(columns) -> dict:
        rename = {}
        for canonical, aliases in COLUMN_ALIASES.items():
            if canonical in columns:
                continue
            for alias in aliases:
                if alias in columns:
                    rename[alias] = canonical
                    break
        return rename

    @staticmethod
    def to_records(df: pd.DataFrame) -> List[Record]:
        records = []
        has_author = "author" in df.columns
        has_retweet = "is_retweet" in df.columns
        has_id = "post_id" in df.columns
        skipped = 0

        for row in df.itertuples(index=False):
            group = getattr(row, "group")
            if group is None or pd.isna(group) or not str(group).strip():
                skipped += 1
                continue
            text = getattr(row, "text")
            records.append(Record(
                text=None if pd.isna(text) else str(text),
                group=str(group).strip(),
                author=str(getattr(row, "author")) if has_author and not pd.isna(getattr(row, "author")) else "",
                is_retweet=_parse_bool(getattr(row, "is_retweet")) if has_retweet else None,
                post_id=str(getattr(row, "post_id")) if has_id and not pd.isna(getattr(row, "post_id")) else None,
            ))
        if skipped:
            logger.warning(f"⚠️ Skipped {skipped:,} rows without a group")
        return records


def _parse_bool(value) -> Optional[bool]:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    if isinstance(value, bool):
        return value
    s = str(value).strip().lower()
    if s in ("true", "1", "yes", "t"):
        return True
    if s in ("false", "0", "no", "f"):
        return False
    return None
