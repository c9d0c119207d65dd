"""
TuneBridge Recommendation Engine
레퍼런스 해석 → 후보 수집 → 스코어링/랭킹 → 응답
"""

import asyncio
import logging
from typing import Dict, List, Optional, Tuple

from .config import Settings, ScoringConfig, DEFAULT_SCORING
from .models import Track, RecommendationRequest, RecommendationResponse
from .ranking import CandidateRanker
from .sources import ContentSource, SourceRegistry
from ..utils.timing import Timer

logger = logging.getLogger(__name__)


ALL_SOURCES = ("both", "all")


class RecommendationEngine:
    """
    교차 소스 추천 엔진

    추천 파이프라인:
    1. 등록된 모든 소스에서 질의 검색 → 우선 소스의 첫 결과를 레퍼런스로 사용
    2. 선택된 소스에서 후보 수집 (소스별 동시 실행, 특성 조회는 동시성 제한)
    3. PairScorer + CandidateRanker로 점수/정렬/설명
    4. 결과, 처리 시간, 임계값 통과 후보 수 반환

    한 소스의 실패는 그 소스의 결과만 비운다.
    """

    def __init__(
        self,
        registry: SourceRegistry,
        scoring: ScoringConfig = DEFAULT_SCORING,
        ranker: Optional[CandidateRanker] = None,
        reference_search_limit: int = 5,
        candidate_search_limit: int = 50,
        match_search_limit: int = 10,
        match_result_limit: int = 5,
        min_similarity: float = 0.05,
        match_min_similarity: float = 0.6,
        enrich_concurrency: int = 8,
        search_limit: int = 20
    ):
        """
        Args:
            registry: 소스 레지스트리 (등록 순서 = 레퍼런스 우선순위)
            scoring: 스코어링 상수
            ranker: 직접 주입할 CandidateRanker (없으면 scoring으로 생성)
            reference_search_limit: 레퍼런스 검색 개수
            candidate_search_limit: 소스별 후보 검색 개수
            match_search_limit: 교차 소스 매칭 검색 개수
            match_result_limit: 교차 소스 매칭 결과 개수
            min_similarity: 일반 추천 임계값
            match_min_similarity: 동일 곡 매칭 임계값
            enrich_concurrency: 소스별 동시 특성 조회 수
            search_limit: search() 결과 개수
        """
        self.registry = registry
        self.ranker = ranker or CandidateRanker(scoring)
        self.reference_search_limit = reference_search_limit
        self.candidate_search_limit = candidate_search_limit
        self.match_search_limit = match_search_limit
        self.match_result_limit = match_result_limit
        self.min_similarity = min_similarity
        self.match_min_similarity = match_min_similarity
        self.enrich_concurrency = max(1, enrich_concurrency)
        self.search_limit = search_limit

        logger.info(
            f"Engine 초기화: sources={registry.names}, "
            f"min_similarity={min_similarity}, match_min_similarity={match_min_similarity}"
        )

    @classmethod
    def from_settings(cls, registry: SourceRegistry, config: Settings) -> "RecommendationEngine":
        return cls(
            registry=registry,
            scoring=config.scoring_config(),
            reference_search_limit=config.REFERENCE_SEARCH_LIMIT,
            candidate_search_limit=config.CANDIDATE_SEARCH_LIMIT,
            match_search_limit=config.MATCH_SEARCH_LIMIT,
            match_result_limit=config.MATCH_RESULT_LIMIT,
            min_similarity=config.MIN_SIMILARITY,
            match_min_similarity=config.MATCH_MIN_SIMILARITY,
            enrich_concurrency=config.ENRICH_CONCURRENCY,
            search_limit=config.DEFAULT_LIMIT
        )

    # ------------------------------------------------------------------
    # 소스 I/O (실패는 여기서 흡수)
    # ------------------------------------------------------------------

    async def _safe_search(self, name: str, source: ContentSource, query: str, limit: int) -> List[Track]:
        try:
            return list(await source.search_tracks(query, limit))
        except Exception as e:
            logger.warning(f"{name} search failed: {e}")
            return []

    async def _enrich(
        self,
        name: str,
        source: ContentSource,
        track: Track,
        semaphore: asyncio.Semaphore
    ) -> Track:
        async with semaphore:
            try:
                features = await source.get_track_features(track.id)
            except Exception as e:
                logger.warning(f"{name} feature lookup failed for {track.id}: {e}")
                return track
        return track.with_features(features)

    async def _enrich_all(self, name: str, source: ContentSource, tracks: List[Track]) -> List[Track]:
        semaphore = asyncio.Semaphore(self.enrich_concurrency)
        return list(await asyncio.gather(
            *(self._enrich(name, source, track, semaphore) for track in tracks)
        ))

    async def _search_and_enrich(self, name: str, source: ContentSource, query: str, limit: int) -> List[Track]:
        tracks = await self._safe_search(name, source, query, limit)
        return await self._enrich_all(name, source, tracks)

    def _select_sources(self, source_filter: Optional[str]) -> List[Tuple[str, ContentSource]]:
        """
        Raises:
            ValueError: 등록되지 않은 소스 이름
        """
        if source_filter is None or source_filter.strip().lower() in ALL_SOURCES:
            return self.registry.items()
        source = self.registry.get(source_filter)
        if source is None:
            raise ValueError(f"Unknown source: {source_filter}")
        return [(source_filter.strip().lower(), source)]

    # ------------------------------------------------------------------
    # 파이프라인 단계
    # ------------------------------------------------------------------

    async def resolve_reference(self, query: str) -> Optional[Track]:
        """
        레퍼런스 곡 결정

        모든 소스를 동시에 검색하고, 등록 순서대로 첫 결과가 있는 소스의 1위 곡을 특성 보강 후 반환
        """
        sources = self.registry.items()
        results = await asyncio.gather(
            *(self._safe_search(name, source, query, self.reference_search_limit) for name, source in sources)
        )

        for (name, source), tracks in zip(sources, results):
            if not tracks:
                continue
            enriched = await self._enrich_all(name, source, tracks[:1])
            reference = enriched[0]
            logger.debug(f"Reference resolved from {name}: {reference.artist} - {reference.title}")
            return reference

        return None

    async def gather_candidates(self, query: str, source_filter: Optional[str] = None) -> List[Track]:
        """선택된 소스에서 후보 수집 (소스 순서 유지, (source, id) 중복 제거)"""
        sources = self._select_sources(source_filter)
        batches = await asyncio.gather(
            *(self._search_and_enrich(name, source, query, self.candidate_search_limit) for name, source in sources)
        )

        candidates: List[Track] = []
        seen = set()
        for batch in batches:
            for track in batch:
                key = (track.source, track.id)
                if key in seen:
                    continue
                seen.add(key)
                candidates.append(track)
        return candidates

    async def get_recommendations(self, request: RecommendationRequest) -> RecommendationResponse:
        """
        추천 실행

        Raises:
            ValueError: 등록되지 않은 소스 필터
        """
        # 잘못된 필터는 소스 호출 전에 거른다
        self._select_sources(request.source)

        with Timer("get_recommendations") as timer:
            reference = await self.resolve_reference(request.query)
            if reference is None:
                logger.info(f"No reference found for query: {request.query!r}")
                return RecommendationResponse.empty(request.query, timer.elapsed_ms)

            candidates = await self.gather_candidates(request.query, request.source)
            results, total = self.ranker.rank_with_total(
                reference,
                candidates,
                limit=request.limit,
                min_similarity=self.min_similarity
            )

        logger.info(
            f"Recommendations for {request.query!r}: "
            f"{len(candidates)} candidates, {total} passed, {len(results)} returned "
            f"({timer.elapsed_ms:.1f}ms)"
        )
        return RecommendationResponse(
            results=results,
            query=request.query,
            processing_time_ms=timer.elapsed_ms,
            total_found=total,
            reference=reference
        )

    async def search(self, query: str, source_filter: Optional[str] = None) -> Tuple[List[Track], int]:
        """점수 없이 곡만 반환하는 추천 (tracks, total_found)"""
        response = await self.get_recommendations(
            RecommendationRequest(query=query, source=source_filter, limit=self.search_limit)
        )
        return [result.track for result in response.results], response.total_found

    async def find_cross_source_matches(self, track: Track) -> List[Track]:
        """
        다른 소스에서 같은 곡 찾기

        "{artist} {title}" 로 자기 소스를 제외한 모든 소스를 검색하고 엄격한 임계값으로 랭킹
        """
        query = f"{track.artist} {track.title}"
        # 레지스트리 키는 소문자/공백 제거 형태
        own = (track.source or "").strip().lower()
        others = [(name, source) for name, source in self.registry.items() if name != own]
        if not others:
            return []

        batches = await asyncio.gather(
            *(self._safe_search(name, source, query, self.match_search_limit) for name, source in others)
        )
        candidates = [candidate for batch in batches for candidate in batch]

        matches = self.ranker.rank(
            track,
            candidates,
            limit=self.match_result_limit,
            min_similarity=self.match_min_similarity
        )
        return [match.track for match in matches]

    def get_status(self) -> Dict[str, Dict[str, bool]]:
        """소스별 상태"""
        status = {}
        for name, source in self.registry.items():
            try:
                configured = bool(source.is_configured())
            except Exception as e:
                logger.warning(f"{name} status check failed: {e}")
                configured = False
            status[name] = {"configured": configured, "available": True}
        return status
