"""
TuneBridge Configuration
환경변수 기반 설정 + 스코어링 상수
"""

from dataclasses import dataclass, field
from typing import List, Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


@dataclass(frozen=True)
class WeightSet:
    """text / genre / audio 가중치 묶음"""
    text: float
    genre: float
    audio: float


@dataclass(frozen=True)
class ScoringConfig:
    """
    PairScorer / CandidateRanker에 주입되는 튜닝 상수

    기본값은 수작업으로 맞춘 값이며 학습으로 구하지 않는다.
    """
    default_weights: WeightSet = field(default_factory=lambda: WeightSet(text=0.5, genre=0.2, audio=0.3))
    artist_match_weights: WeightSet = field(default_factory=lambda: WeightSet(text=0.7, genre=0.15, audio=0.15))

    # 아티스트 유사도 구간
    strong_artist_threshold: float = 0.7
    partial_artist_threshold: float = 0.3
    bonus_artist_threshold: float = 0.8

    # adaptive text score
    strong_artist_base: float = 0.85
    strong_artist_slope: float = 0.5
    partial_artist_factor: float = 0.9

    same_artist_bonus: float = 0.1
    same_artist_floor: float = 0.75

    # 설명 문구 임계값
    strong_text_threshold: float = 0.7
    partial_text_threshold: float = 0.3
    same_genre_threshold: float = 0.9
    similar_genre_threshold: float = 0.5
    very_similar_audio_threshold: float = 0.8
    similar_audio_threshold: float = 0.6

    # 동점 처리: "input_order" (안정 정렬) | "popularity"
    tie_break: str = "input_order"


DEFAULT_SCORING = ScoringConfig()


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Service
    SERVICE_NAME: str = Field(default="TuneBridge API", description="서비스 이름")
    VERSION: str = Field(default="1.0.0", description="서비스 버전")
    LOG_LEVEL: str = Field(default="INFO", description="로그 레벨")

    # Mode settings
    DEMO_MODE: bool = Field(default=True, description="데모 모드 (카탈로그 파일 없으면 내장 데모 카탈로그 사용)")

    # Sources
    SOURCES: str = Field(
        default="spotify,youtube",
        description="등록할 소스 이름 (쉼표 구분, 앞쪽일수록 레퍼런스 우선)"
    )
    VIDEO_SOURCES: str = Field(default="youtube", description="제목 정리를 적용할 영상 소스")
    CATALOG_DIR: str = Field(default="", description="<source>.json 카탈로그 디렉터리")
    ESTIMATE_FEATURES: bool = Field(default=True, description="오디오 특성이 없는 곡에 추정값 사용")

    # Fan-out sizes
    REFERENCE_SEARCH_LIMIT: int = Field(default=5, ge=1, le=50, description="레퍼런스 검색 개수")
    CANDIDATE_SEARCH_LIMIT: int = Field(default=50, ge=1, le=500, description="소스별 후보 개수")
    MATCH_SEARCH_LIMIT: int = Field(default=10, ge=1, le=100, description="교차 소스 매칭 검색 개수")
    MATCH_RESULT_LIMIT: int = Field(default=5, ge=1, le=50, description="교차 소스 매칭 결과 개수")
    ENRICH_CONCURRENCY: int = Field(default=8, ge=1, description="동시 특성 조회 수")

    # Result sizes
    DEFAULT_LIMIT: int = Field(default=20, ge=1, le=50, description="기본 추천 개수")
    MAX_LIMIT: int = Field(default=50, ge=1, description="최대 추천 개수")

    # Thresholds
    MIN_SIMILARITY: float = Field(default=0.05, ge=0.0, le=1.0, description="일반 추천 최소 유사도")
    MATCH_MIN_SIMILARITY: float = Field(default=0.6, ge=0.0, le=1.0, description="동일 곡 매칭 최소 유사도")
    TIE_BREAK: Literal["input_order", "popularity"] = Field(default="input_order", description="동점 정렬 기준")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True

    @model_validator(mode="after")
    def _check_limits(self) -> "Settings":
        if self.DEFAULT_LIMIT > self.MAX_LIMIT:
            raise ValueError(
                f"DEFAULT_LIMIT ({self.DEFAULT_LIMIT}) must not exceed MAX_LIMIT ({self.MAX_LIMIT})"
            )
        return self

    @property
    def source_names(self) -> List[str]:
        return _split_names(self.SOURCES)

    @property
    def video_source_names(self) -> List[str]:
        return _split_names(self.VIDEO_SOURCES)

    def scoring_config(self) -> ScoringConfig:
        """환경 설정을 반영한 ScoringConfig"""
        return ScoringConfig(tie_break=self.TIE_BREAK)


def _split_names(raw: str) -> List[str]:
    return [name.strip().lower() for name in raw.split(",") if name.strip()]


def get_settings() -> Settings:
    return Settings()
