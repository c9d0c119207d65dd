"""
TuneBridge Domain Models
곡(Track), 유사도 지표, 추천 요청/응답
"""

import dataclasses
from dataclasses import dataclass
from typing import Dict, List, Optional, Any


# 오디오 특성 차원 (벡터 순서 고정)
FEATURE_FIELDS = ("acousticness", "danceability", "energy", "valence", "tempo")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class Track:
    """
    하나의 소스에서 가져온 곡/영상

    id는 소스 안에서만 유일하다. 다른 소스의 같은 곡이라도 id가 같다고 가정하지 않는다.
    """
    id: str
    title: str
    artist: str
    source: str
    album: Optional[str] = None
    genre: Optional[str] = None
    duration: Optional[int] = None  # ms
    popularity: Optional[float] = None
    acousticness: Optional[float] = None
    danceability: Optional[float] = None
    energy: Optional[float] = None
    valence: Optional[float] = None
    tempo: Optional[float] = None
    thumbnail_url: Optional[str] = None
    external_url: Optional[str] = None

    @property
    def features(self) -> Dict[str, float]:
        """숫자로 채워진 오디오 특성만 반환"""
        return {
            name: getattr(self, name)
            for name in FEATURE_FIELDS
            if _is_number(getattr(self, name))
        }

    def with_features(self, features: Dict[str, Any]) -> "Track":
        """
        특성 조회 결과를 덮어쓴 새 Track 반환

        알 수 없는 키나 숫자가 아닌 값은 무시한다.
        """
        updates = {
            name: float(value)
            for name, value in (features or {}).items()
            if name in FEATURE_FIELDS and _is_number(value)
        }
        if not updates:
            return self
        return dataclasses.replace(self, **updates)

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class SimilarityMetrics:
    """(reference, candidate) 쌍의 유사도 지표, 모두 [0, 1]"""
    text: float
    audio: float
    genre: float
    overall: float


@dataclass(frozen=True)
class ScoredCandidate:
    """랭킹된 후보 + 설명"""
    track: Track
    similarity: float
    explanations: List[str]
    metrics: SimilarityMetrics


@dataclass(frozen=True)
class RecommendationRequest:
    """추천 요청 (source=None 이면 등록된 모든 소스)"""
    query: str
    source: Optional[str] = None
    limit: int = 20


@dataclass(frozen=True)
class RecommendationResponse:
    """추천 응답"""
    results: List[ScoredCandidate]
    query: str
    processing_time_ms: float
    total_found: int
    reference: Optional[Track] = None

    @classmethod
    def empty(cls, query: str, processing_time_ms: float) -> "RecommendationResponse":
        return cls(results=[], query=query, processing_time_ms=processing_time_ms, total_found=0)
