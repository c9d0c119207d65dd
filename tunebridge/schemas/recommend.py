"""
TuneBridge Recommendation Schemas
추천 관련 스키마
"""

from typing import Dict, List, Optional
from pydantic import BaseModel

from .songs import TrackItem


class MetricsInfo(BaseModel):
    """유사도 세부 지표"""
    text: float
    audio: float
    genre: float
    overall: float


class RecommendItem(BaseModel):
    """추천 결과 항목"""
    rank: int
    track: TrackItem
    similarity: float
    matched_features: List[str]
    metrics: MetricsInfo


class RecommendResponse(BaseModel):
    """추천 응답"""
    query: str
    processing_time_ms: float
    total_found: int
    reference: Optional[TrackItem] = None
    results: List[RecommendItem]


class SourceStatus(BaseModel):
    """소스 상태"""
    configured: bool
    available: bool


class StatusResponse(BaseModel):
    """전체 소스 상태"""
    status: str
    version: str
    sources: Dict[str, SourceStatus]
