"""
TuneBridge Status API
소스 상태 라우터
"""

from fastapi import APIRouter, Request

from ..schemas.recommend import StatusResponse, SourceStatus

router = APIRouter(tags=["health"])


@router.get("/status", response_model=StatusResponse)
async def get_status(request: Request) -> StatusResponse:
    """
    서버 / 소스 상태 확인

    - 소스별 configured(카탈로그 보유 여부), available
    """
    state = request.app.state
    config = state.config

    if state.engine is None:
        return StatusResponse(status="degraded", version=config.VERSION, sources={})

    sources = {
        name: SourceStatus(**info)
        for name, info in state.engine.get_status().items()
    }
    # 하나라도 동작하는 소스가 있으면 ok
    status = "ok" if any(s.configured for s in sources.values()) else "degraded"

    return StatusResponse(status=status, version=config.VERSION, sources=sources)
