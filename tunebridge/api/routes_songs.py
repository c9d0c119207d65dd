"""
TuneBridge Search API
점수 없는 곡 검색 라우터
"""

from typing import Optional

from fastapi import APIRouter, Request, HTTPException, Query

from ..schemas.common import ErrorResponse
from ..schemas.songs import TrackItem, SearchResponse

router = APIRouter(tags=["songs"])


@router.get(
    "/search",
    response_model=SearchResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Unknown platform"},
        503: {"model": ErrorResponse, "description": "Engine not initialized"}
    }
)
async def search_tracks(
    request: Request,
    query: str = Query(..., min_length=1, description="검색어"),
    platform: Optional[str] = Query(default=None, description="소스 이름 또는 both")
) -> SearchResponse:
    """
    곡 검색

    추천 파이프라인을 그대로 쓰되 점수/설명 없이 곡만 반환
    """
    state = request.app.state

    if state.engine is None:
        raise HTTPException(status_code=503, detail="Recommendation engine not initialized")

    try:
        tracks, total_found = await state.engine.search(query, platform)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return SearchResponse(
        query=query,
        total_found=total_found,
        tracks=[TrackItem.from_track(t) for t in tracks]
    )
