"""
TuneBridge Genre Relatedness
장르 태그 동의어 그룹 (정적 설정 데이터)
"""

from typing import Dict, FrozenSet, Iterable, Optional, Tuple


SAME_GENRE_SCORE = 1.0
RELATED_GENRE_SCORE = 0.7

DEFAULT_GENRE_GROUPS: Tuple[Tuple[str, ...], ...] = (
    ("pop", "dance pop", "dance-pop", "electropop"),
    ("rock", "alternative rock", "indie rock", "hard rock"),
    ("hip hop", "hip-hop", "rap", "trap"),
    ("electronic", "edm", "house", "techno", "dubstep"),
    ("r&b", "soul", "neo soul"),
    ("country", "folk", "americana"),
    ("jazz", "blues", "funk"),
    ("classical", "orchestral", "chamber music"),
)


def _normalize_tag(tag: Optional[str]) -> str:
    if not isinstance(tag, str):
        return ""
    return tag.strip().lower()


class GenreRelatednessTable:
    """
    장르 유사도 테이블

    - 한쪽이라도 태그가 없으면 0
    - 대소문자 무시 일치 → 1
    - 같은 그룹 → 0.7
    - 그 외 → 0
    """

    def __init__(self, groups: Iterable[Iterable[str]] = DEFAULT_GENRE_GROUPS):
        # 태그 → 소속 그룹 인덱스 집합 (한 태그가 여러 그룹에 있을 수 있음)
        self._membership: Dict[str, FrozenSet[int]] = {}
        for idx, group in enumerate(groups):
            for tag in group:
                key = _normalize_tag(tag)
                self._membership[key] = self._membership.get(key, frozenset()) | {idx}

    def score(self, genre1: Optional[str], genre2: Optional[str]) -> float:
        g1 = _normalize_tag(genre1)
        g2 = _normalize_tag(genre2)
        if not g1 or not g2:
            return 0.0
        if g1 == g2:
            return SAME_GENRE_SCORE

        groups1 = self._membership.get(g1, frozenset())
        groups2 = self._membership.get(g2, frozenset())
        if groups1 & groups2:
            return RELATED_GENRE_SCORE
        return 0.0


DEFAULT_GENRE_TABLE = GenreRelatednessTable()


def genre_similarity(genre1: Optional[str], genre2: Optional[str]) -> float:
    """기본 테이블로 장르 유사도 계산"""
    return DEFAULT_GENRE_TABLE.score(genre1, genre2)
