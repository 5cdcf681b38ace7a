# File: bigram_tfidf/preprocessing/fetcher.py
import json
import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import requests

from bigram_tfidf.core.config import settings
from bigram_tfidf.schemas.record import Record
from bigram_tfidf.settings import CacheFiles, SearchAPIConfig

logger = logging.getLogger("uvicorn")


def _cache_key(group: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", group.lower()).strip("_") or "group"


class PostSearchClient:
    """
    Fetches recent posts per group from the search service and caches the raw
    posts as JSON, one file per group.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        cache_dir: Optional[Path] = None,
        max_results: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        self.token = token if token is not None else settings.SEARCH_API_TOKEN
        self.cache_dir = Path(cache_dir or CacheFiles.POSTS_CACHE_DIR)
        self.max_results = max_results or settings.SEARCH_MAX_RESULTS
        self.session = session or requests.Session()

    def _cache_path(self, group: str) -> Path:
        return self.cache_dir / f"{_cache_key(group)}.json"

    def _load_cache(self, group: str) -> Optional[List[dict]]:
        path = self._cache_path(group)
        if path.exists():
            try:
                with open(path, "r", encoding="utf-8") as f:
                    return json.load(f)
            except json.JSONDecodeError as e:
                logger.error(f"❌ Unreadable cache {path}, fetching again: {e}")
        return None

    def _save_cache(self, group: str, posts: List[dict]):
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        with open(self._cache_path(group), "w", encoding="utf-8") as f:
            json.dump(posts, f, indent=2, ensure_ascii=False)

    def _headers(self) -> dict:
        headers = {"User-Agent": SearchAPIConfig.USER_AGENT}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _fetch_posts(self, query: str) -> Tuple[List[dict], bool]:
        """Returns (posts, complete). `complete` is False when a request failed."""
        posts = []
        next_token = None
        complete = True
        while len(posts) < self.max_results:
            params = {
                "query": query,
                "max_results": max(10, min(SearchAPIConfig.MAX_PER_PAGE, self.max_results - len(posts))),
                "expansions": "author_id",
                "user.fields": "username",
            }
            if next_token:
                params["next_token"] = next_token
            try:
                response = self.session.get(
                    SearchAPIConfig.RECENT_SEARCH_URL,
                    params=params,
                    headers=self._headers(),
                    timeout=SearchAPIConfig.REQUEST_TIMEOUT,
                )
                response.raise_for_status()
                data = response.json()
            except requests.RequestException as e:
                logger.error(f"❌ Error fetching posts for query '{query}': {e}")
                complete = False
                break

            users = {u.get("id"): u.get("username", "") for u in data.get("includes", {}).get("users", [])}
            for item in data.get("data", []):
                posts.append({
                    "id": item.get("id"),
                    "text": item.get("text", ""),
                    "author": users.get(item.get("author_id"), ""),
                })

            next_token = data.get("meta", {}).get("next_token")
            if not next_token or not data.get("data"):
                break

        return posts[:self.max_results], complete

    def fetch_group(self, group: str, query: str, use_cache: bool = True) -> List[Record]:
        posts = self._load_cache(group) if use_cache else None
        if posts is None:
            logger.info(f"🔎 Fetching posts for '{group}' with query: {query}")
            posts, complete = self._fetch_posts(query)
            if complete:
                self._save_cache(group, posts)
                logger.info(f"💾 Cached {len(posts):,} posts for '{group}'")
            else:
                logger.warning(f"⚠️ Partial fetch for '{group}' ({len(posts):,} posts), not cached")
        else:
            logger.info(f"↪️ Using {len(posts):,} cached posts for '{group}'")

        return [
            Record(text=p.get("text"), group=group, author=p.get("author") or "", post_id=p.get("id"))
            for p in posts
        ]

    def fetch_groups(self, queries: Dict[str, str], use_cache: bool = True) -> List[Record]:
        """`queries` maps group label -> search query."""
        records: List[Record] = []
        for group, query in queries.items():
            records.extend(self.fetch_group(group, query, use_cache=use_cache))
        return records
