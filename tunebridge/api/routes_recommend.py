"""
TuneBridge Recommendation API
추천 / 교차 소스 매칭 라우터
"""

import logging
from typing import Optional

from fastapi import APIRouter, Request, HTTPException, Query

from ..core.models import RecommendationRequest
from ..schemas.common import ErrorResponse
from ..schemas.recommend import RecommendResponse, RecommendItem, MetricsInfo
from ..schemas.songs import TrackItem, MatchResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["recommend"])


@router.get(
    "/recommendations",
    response_model=RecommendResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Unknown platform or limit out of range"},
        503: {"model": ErrorResponse, "description": "Engine not initialized"}
    }
)
async def get_recommendations(
    request: Request,
    query: str = Query(..., min_length=1, description="검색어 (곡명/아티스트)"),
    platform: Optional[str] = Query(default=None, description="소스 이름 또는 both"),
    limit: Optional[int] = Query(default=None, description="추천 개수")
) -> RecommendResponse:
    """
    유사 곡 추천

    - query: 레퍼런스 곡을 찾을 검색어
    - platform: 후보를 가져올 소스 (기본: 전체)
    - limit: 결과 개수 (1~MAX_LIMIT, 기본 DEFAULT_LIMIT)

    레퍼런스를 찾지 못하면 빈 결과를 반환한다 (에러 아님).
    """
    state = request.app.state
    config = state.config

    if state.engine is None:
        raise HTTPException(status_code=503, detail="Recommendation engine not initialized")

    if limit is None:
        limit = config.DEFAULT_LIMIT
    if limit < 1 or limit > config.MAX_LIMIT:
        raise HTTPException(status_code=400, detail=f"Limit must be between 1 and {config.MAX_LIMIT}")

    try:
        result = await state.engine.get_recommendations(
            RecommendationRequest(query=query, source=platform, limit=limit)
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return RecommendResponse(
        query=result.query,
        processing_time_ms=round(result.processing_time_ms, 3),
        total_found=result.total_found,
        reference=TrackItem.from_track(result.reference) if result.reference else None,
        results=[
            RecommendItem(
                rank=rank,
                track=TrackItem.from_track(item.track),
                similarity=round(item.similarity, 6),
                matched_features=item.explanations,
                metrics=MetricsInfo(
                    text=item.metrics.text,
                    audio=item.metrics.audio,
                    genre=item.metrics.genre,
                    overall=item.metrics.overall
                )
            )
            for rank, item in enumerate(result.results, 1)
        ]
    )


@router.post(
    "/match",
    response_model=MatchResponse,
    responses={503: {"model": ErrorResponse, "description": "Engine not initialized"}}
)
async def match_track(request: Request, track: TrackItem) -> MatchResponse:
    """
    다른 소스에서 같은 곡 찾기

    - body: 기준 곡 (source 필수)
    """
    state = request.app.state

    if state.engine is None:
        raise HTTPException(status_code=503, detail="Recommendation engine not initialized")

    matches = await state.engine.find_cross_source_matches(track.to_track())
    return MatchResponse(
        track=track,
        matches=[TrackItem.from_track(m) for m in matches]
    )
