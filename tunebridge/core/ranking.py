"""
TuneBridge Candidate Ranking
임계값 필터링 → 정렬 → 상위 N개 → 설명 문구
"""

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .config import ScoringConfig, DEFAULT_SCORING
from .models import Track, SimilarityMetrics, ScoredCandidate
from .scoring import PairScorer

logger = logging.getLogger(__name__)


STRONG_TEXT = "Strong title/artist match"
PARTIAL_TEXT = "Partial title/artist match"
SAME_GENRE = "Same genre"
SIMILAR_GENRE = "Similar genre"
VERY_SIMILAR_AUDIO = "Very similar audio features"
SIMILAR_AUDIO = "Similar audio features"
GENERAL_SIMILARITY = "General similarity"


# (metrics, track, input_index) → 정렬 키 (작을수록 앞)
SortKey = Callable[[SimilarityMetrics, Track, int], Tuple]


def _input_order_key(metrics: SimilarityMetrics, track: Track, index: int) -> Tuple:
    return (-metrics.overall, index)


def _popularity_key(metrics: SimilarityMetrics, track: Track, index: int) -> Tuple:
    popularity = track.popularity if track.popularity is not None else 0.0
    return (-metrics.overall, -popularity, index)


TIE_BREAKERS: Dict[str, SortKey] = {
    "input_order": _input_order_key,
    "popularity": _popularity_key,
}


def explain_similarity(metrics: SimilarityMetrics, config: ScoringConfig = DEFAULT_SCORING) -> List[str]:
    """지표별 설명 문구 생성 (해당 없으면 General similarity)"""
    explanations: List[str] = []

    if metrics.text > config.strong_text_threshold:
        explanations.append(STRONG_TEXT)
    elif metrics.text > config.partial_text_threshold:
        explanations.append(PARTIAL_TEXT)

    if metrics.genre > config.same_genre_threshold:
        explanations.append(SAME_GENRE)
    elif metrics.genre > config.similar_genre_threshold:
        explanations.append(SIMILAR_GENRE)

    if metrics.audio > config.very_similar_audio_threshold:
        explanations.append(VERY_SIMILAR_AUDIO)
    elif metrics.audio > config.similar_audio_threshold:
        explanations.append(SIMILAR_AUDIO)

    return explanations or [GENERAL_SIMILARITY]


class CandidateRanker:
    """레퍼런스 대비 후보 랭킹"""

    def __init__(
        self,
        config: ScoringConfig = DEFAULT_SCORING,
        scorer: Optional[PairScorer] = None,
        sort_key: Optional[SortKey] = None
    ):
        self.config = config
        self.scorer = scorer or PairScorer(config)
        if sort_key is None:
            if config.tie_break not in TIE_BREAKERS:
                raise ValueError(f"Unknown tie_break: {config.tie_break}")
            sort_key = TIE_BREAKERS[config.tie_break]
        self.sort_key = sort_key

    def rank_with_total(
        self,
        reference: Track,
        candidates: Sequence[Track],
        limit: int,
        min_similarity: float
    ) -> Tuple[List[ScoredCandidate], int]:
        """
        Returns:
            (상위 limit개 ScoredCandidate, 임계값 통과 후보 수)
        """
        scored = []
        for index, candidate in enumerate(candidates):
            # 자기 자신 제외
            if candidate.id == reference.id:
                continue
            metrics = self.scorer.score(reference, candidate)
            if metrics.overall < min_similarity:
                continue
            scored.append((metrics, candidate, index))

        scored.sort(key=lambda item: self.sort_key(*item))
        total = len(scored)

        results = [
            ScoredCandidate(
                track=candidate,
                similarity=metrics.overall,
                explanations=explain_similarity(metrics, self.config),
                metrics=metrics
            )
            for metrics, candidate, _ in scored[:max(0, limit)]
        ]
        logger.debug(f"Ranked {len(candidates)} candidates: {total} passed, {len(results)} returned")
        return results, total

    def rank(
        self,
        reference: Track,
        candidates: Sequence[Track],
        limit: int = 10,
        min_similarity: float = 0.1
    ) -> List[ScoredCandidate]:
        results, _ = self.rank_with_total(reference, candidates, limit, min_similarity)
        return results
