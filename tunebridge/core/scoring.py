"""
TuneBridge Scoring Utilities
텍스트 / 장르 / 오디오 특성 유사도와 PairScorer
"""

import math
import re
from typing import List, Optional, Set, Tuple

import numpy as np

from .config import ScoringConfig, DEFAULT_SCORING
from .genres import GenreRelatednessTable, DEFAULT_GENRE_TABLE
from .models import Track, SimilarityMetrics, FEATURE_FIELDS


# 부분 일치 파라미터
MIN_PARTIAL_TOKEN_LEN = 3
MIN_FUZZY_TOKEN_LEN = 4
FUZZY_DISTANCE_RATIO = 0.2
FUZZY_MATCH_CREDIT = 0.8
PARTIAL_DAMPING = 0.8

# tempo(BPM) → 0~1 정규화
TEMPO_OFFSET = 60.0
TEMPO_SCALE = 140.0

_NON_WORD_RE = re.compile(r"[^\w\s]")


# =============================================================================
# 기본 유틸리티 함수
# =============================================================================

def edit_distance(a: str, b: str) -> int:
    """Levenshtein 거리 (삽입/삭제/치환 각 1)"""
    if not a:
        return len(b)
    if not b:
        return len(a)

    # (len(a)+1) x (len(b)+1) 비용 행렬을 한 행씩 계산
    prev = list(range(len(b) + 1))
    for i in range(1, len(a) + 1):
        curr = [i] + [0] * len(b)
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            curr[j] = min(
                curr[j - 1] + 1,
                prev[j] + 1,
                prev[j - 1] + cost
            )
        prev = curr
    return prev[len(b)]


def cosine_similarity(vec1: np.ndarray, vec2: np.ndarray) -> float:
    """
    두 벡터의 코사인 유사도 (음수는 0으로 클램프)

    Raises:
        ValueError: 길이가 다른 벡터 (vectorize_pair 불변식 위반)
    """
    vec1 = np.asarray(vec1, dtype=float)
    vec2 = np.asarray(vec2, dtype=float)
    if vec1.shape != vec2.shape:
        raise ValueError(f"Vectors must have the same length: {vec1.shape} vs {vec2.shape}")
    if vec1.size == 0:
        return 0.0

    norm1 = np.linalg.norm(vec1)
    norm2 = np.linalg.norm(vec2)
    if norm1 == 0 or norm2 == 0:
        return 0.0
    cos = float(np.dot(vec1, vec2) / (norm1 * norm2))
    return min(1.0, max(0.0, cos))


# =============================================================================
# 텍스트 유사도 (제목, 아티스트)
# =============================================================================

def tokenize(text: Optional[str]) -> Set[str]:
    """소문자화 → 기호 제거 → 공백 분리 토큰 집합"""
    if not text:
        return set()
    cleaned = _NON_WORD_RE.sub("", text.lower())
    return {token for token in cleaned.split() if token}


def _is_fuzzy_match(word1: str, word2: str) -> bool:
    if len(word1) < MIN_FUZZY_TOKEN_LEN or len(word2) < MIN_FUZZY_TOKEN_LEN:
        return False
    allowed = max(1, math.floor(min(len(word1), len(word2)) * FUZZY_DISTANCE_RATIO))
    return edit_distance(word1, word2) <= allowed


def text_similarity(text1: Optional[str], text2: Optional[str]) -> float:
    """
    Jaccard + 부분 일치 보정 텍스트 유사도 (대칭)

    - 완전 일치: 토큰 집합 Jaccard
    - 부분 일치: 길이 3 이상 토큰 쌍의 포함 관계(1.0),
      길이 4 이상이면 편집거리 기반 근사 일치(0.8)
    - 부분 일치 점수는 0.8 감쇠 후 Jaccard와 max
    """
    words1 = tokenize(text1)
    words2 = tokenize(text2)

    union = words1 | words2
    if not union:
        return 0.0
    exact = len(words1 & words2) / len(union)

    if not words1 or not words2:
        return min(1.0, exact)

    # 합산 순서와 무관하도록 정수로 센다
    substring_hits = 0
    fuzzy_hits = 0
    for word1 in words1:
        if len(word1) < MIN_PARTIAL_TOKEN_LEN:
            continue
        for word2 in words2:
            if len(word2) < MIN_PARTIAL_TOKEN_LEN:
                continue
            if word1 in word2 or word2 in word1:
                substring_hits += 1
            elif _is_fuzzy_match(word1, word2):
                fuzzy_hits += 1

    partial_credit = substring_hits + fuzzy_hits * FUZZY_MATCH_CREDIT
    partial = partial_credit / max(len(words1), len(words2)) * PARTIAL_DAMPING

    return min(1.0, max(exact, partial))


# =============================================================================
# 오디오 특성 유사도
# =============================================================================

def vectorize_pair(track1: Track, track2: Track) -> Tuple[List[float], List[float]]:
    """
    두 곡 모두 숫자 값을 가진 차원만 골라 같은 순서의 벡터 쌍 생성

    tempo는 (v - 60) / 140 으로 정규화, 나머지는 0~1 그대로 사용
    """
    features1 = track1.features
    features2 = track2.features

    vec1: List[float] = []
    vec2: List[float] = []
    for name in FEATURE_FIELDS:
        if name not in features1 or name not in features2:
            continue
        v1 = float(features1[name])
        v2 = float(features2[name])
        if name == "tempo":
            v1 = (v1 - TEMPO_OFFSET) / TEMPO_SCALE
            v2 = (v2 - TEMPO_OFFSET) / TEMPO_SCALE
        vec1.append(v1)
        vec2.append(v2)
    return vec1, vec2


def audio_feature_similarity(track1: Track, track2: Track) -> float:
    vec1, vec2 = vectorize_pair(track1, track2)
    if not vec1:
        return 0.0
    return max(0.0, cosine_similarity(np.array(vec1), np.array(vec2)))


# =============================================================================
# PairScorer
# =============================================================================

def _clamp01(value: float) -> float:
    return min(1.0, max(0.0, value))


class PairScorer:
    """
    (reference, candidate) 쌍 → SimilarityMetrics

    아티스트 일치 강도에 따라 텍스트 점수와 가중치를 조정한다.
    """

    def __init__(
        self,
        config: ScoringConfig = DEFAULT_SCORING,
        genre_table: GenreRelatednessTable = DEFAULT_GENRE_TABLE
    ):
        self.config = config
        self.genre_table = genre_table

    def adaptive_text_score(self, title_sim: float, artist_sim: float) -> float:
        cfg = self.config
        if artist_sim > cfg.strong_artist_threshold:
            boosted = cfg.strong_artist_base + (artist_sim - cfg.strong_artist_threshold) * cfg.strong_artist_slope
            return max(title_sim, boosted)
        if artist_sim > cfg.partial_artist_threshold:
            return max(title_sim, artist_sim * cfg.partial_artist_factor)
        return title_sim

    def score(self, reference: Track, candidate: Track) -> SimilarityMetrics:
        cfg = self.config

        title_sim = text_similarity(reference.title, candidate.title)
        artist_sim = text_similarity(reference.artist, candidate.artist)

        text_sim = _clamp01(self.adaptive_text_score(title_sim, artist_sim))
        genre_sim = self.genre_table.score(reference.genre, candidate.genre)
        audio_sim = audio_feature_similarity(reference, candidate)

        strong_artist = artist_sim > cfg.strong_artist_threshold
        weights = cfg.artist_match_weights if strong_artist else cfg.default_weights

        overall = (
            text_sim * weights.text
            + genre_sim * weights.genre
            + audio_sim * weights.audio
        )

        # 같은 아티스트 보너스
        if artist_sim > cfg.bonus_artist_threshold:
            overall = min(1.0, overall + cfg.same_artist_bonus)

        # 같은 아티스트 하한
        if strong_artist:
            overall = max(overall, cfg.same_artist_floor)

        return SimilarityMetrics(
            text=text_sim,
            audio=audio_sim,
            genre=genre_sim,
            overall=_clamp01(overall)
        )
