"""
TuneBridge Track Schemas
곡 관련 스키마
"""

from typing import List, Optional
from pydantic import BaseModel

from ..core.models import Track


class TrackItem(BaseModel):
    """곡 정보"""
    id: str
    title: str
    artist: str
    source: str
    album: Optional[str] = None
    genre: Optional[str] = None
    duration: Optional[int] = None
    popularity: Optional[float] = None
    acousticness: Optional[float] = None
    danceability: Optional[float] = None
    energy: Optional[float] = None
    valence: Optional[float] = None
    tempo: Optional[float] = None
    thumbnail_url: Optional[str] = None
    external_url: Optional[str] = None

    @classmethod
    def from_track(cls, track: Track) -> "TrackItem":
        return cls(**track.to_dict())

    def to_track(self) -> Track:
        return Track(**self.model_dump())


class SearchResponse(BaseModel):
    """검색 응답 (점수 없음)"""
    query: str
    total_found: int
    tracks: List[TrackItem]


class MatchResponse(BaseModel):
    """다른 소스의 같은 곡"""
    track: TrackItem
    matches: List[TrackItem]
