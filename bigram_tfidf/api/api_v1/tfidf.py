# bigram_tfidf/api/api_v1/tfidf.py
from fastapi import APIRouter, HTTPException, Query, Request
from typing import List, Optional

from bigram_tfidf.core.config import InvalidConfigurationError, PipelineConfig, settings
from bigram_tfidf.preprocessing.pipeline import ScoringResult, TfidfPipeline
from bigram_tfidf.reporting.report import top_n_per_group
from bigram_tfidf.schemas.tfidf import (
    GroupSummary,
    LeaderboardResponse,
    ScoreRequest,
    ScoreResponse,
)

router = APIRouter()


def _group_summaries(result: ScoringResult) -> List[GroupSummary]:
    table = result.table
    return [
        GroupSummary(
            group=group,
            total_ngrams=table.group_totals.get(group, 0),
            distinct_ngrams=table.distinct_ngrams(group),
            degenerate=table.group_totals.get(group, 0) == 0,
        )
        for group in table.groups
    ]


def _default_result(request: Request) -> Optional[ScoringResult]:
    initializer = getattr(request.app.state, "initializer", None)
    return initializer.result if initializer is not None else None


@router.post("/tfidf", response_model=ScoreResponse)
def score_corpus(payload: ScoreRequest):
    """Score a posted corpus. Option fields left unset fall back to the server configuration."""
    base = PipelineConfig.from_settings(settings)
    overrides = payload.options.model_dump(exclude_none=True)
    config = base.model_copy(update=overrides)

    try:
        result = TfidfPipeline(config).run(payload.records)
    except InvalidConfigurationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    entries = result.entries
    if payload.top_n is not None:
        entries = top_n_per_group(entries, payload.top_n)

    return ScoreResponse(
        total_groups=result.table.group_count,
        groups=_group_summaries(result),
        entries=entries,
        warnings=result.warnings,
    )


@router.get("/groups", response_model=List[GroupSummary])
def get_groups(request: Request):
    """Groups of the default corpus with their n-gram totals."""
    result = _default_result(request)
    if result is None:
        return []
    return _group_summaries(result)


@router.get("/leaderboard", response_model=LeaderboardResponse)
def get_leaderboard(
    request: Request,
    group: Optional[str] = Query(None, description="Restrict to one group"),
    top_n: int = Query(settings.TOP_N, ge=1, le=1000, description="Entries per group"),
):
    """Top tf-idf bigrams per group of the default corpus."""
    result = _default_result(request)
    if result is None:
        return LeaderboardResponse(group=group, top_n=top_n, entries=[])

    entries = result.entries
    if group is not None:
        if group not in result.table.groups:
            raise HTTPException(status_code=404, detail=f"Group '{group}' not found")
        entries = [e for e in entries if e.group == group]

    return LeaderboardResponse(group=group, top_n=top_n, entries=top_n_per_group(entries, top_n))
