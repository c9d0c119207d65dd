"""
TuneBridge Catalog Loaders
소스별 JSON 카탈로그 로더 (데모 모드면 내장 카탈로그 사용)
"""

import json
import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Any

from .demo_catalog import DEMO_CATALOGS
from .models import Track, FEATURE_FIELDS

logger = logging.getLogger(__name__)


_TITLE_NOISE_PATTERNS = [
    re.compile(r"\[.*?\]"),                               # [Official Video], [Lyrics]
    re.compile(r"\(.*?official.*?\)", re.IGNORECASE),     # (Official Music Video)
    re.compile(r"\(.*?lyrics.*?\)", re.IGNORECASE),       # (With Lyrics)
    re.compile(r"\(.*?audio.*?\)", re.IGNORECASE),        # (Official Audio)
    re.compile(r"\s*-\s*topic$", re.IGNORECASE),          # 자동 생성 채널 "- Topic"
    re.compile(r"^\s*\d+\.\s*"),                          # "1. " 트랙 번호
]

# 정리 후 남은 길이가 원본의 이 비율보다 작으면 원본 유지
MIN_CLEANED_RATIO = 0.3


def clean_video_title(title: str) -> str:
    """영상 제목에서 공식 영상/가사/오디오 표기 제거"""
    cleaned = title
    for pattern in _TITLE_NOISE_PATTERNS:
        cleaned = pattern.sub("", cleaned)
    cleaned = cleaned.strip()

    if len(cleaned) < len(title) * MIN_CLEANED_RATIO:
        return title
    return cleaned


def _extract_field(item: Dict, candidates: List[str], default: str = "") -> str:
    """여러 후보 키에서 필드 추출"""
    for key in candidates:
        if key in item:
            val = item[key]
            if isinstance(val, list):
                return ", ".join(str(v) for v in val if v)
            return str(val) if val else default
    return default


def _parse_number(value: Any) -> Optional[float]:
    """숫자 파싱 (bool, 빈 값, 숫자가 아닌 문자열은 None)"""
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (ValueError, TypeError):
        return None


def parse_track(item: Dict[str, Any], source: str, clean_titles: bool = False) -> Optional[Track]:
    """
    카탈로그 레코드 → Track

    id / title 이 없으면 None
    """
    track_id = _extract_field(item, ["id", "track_id", "video_id"])
    title = _extract_field(item, ["title", "name", "track_name", "song_name"])
    if not track_id or not title:
        return None

    if clean_titles:
        title = clean_video_title(title)

    artist = _extract_field(item, ["artist", "artists", "artist_name", "channel_title"], default="Unknown")
    duration = _parse_number(item.get("duration", item.get("duration_ms")))

    features = {}
    for name in FEATURE_FIELDS:
        value = _parse_number(item.get(name))
        if value is not None:
            features[name] = value

    return Track(
        id=track_id,
        title=title,
        artist=artist,
        source=source,
        album=_extract_field(item, ["album", "album_name"]) or None,
        genre=_extract_field(item, ["genre", "genres"]) or None,
        duration=int(duration) if duration is not None else None,
        popularity=_parse_number(item.get("popularity")),
        thumbnail_url=_extract_field(item, ["thumbnail_url", "thumbnailUrl"]) or None,
        external_url=_extract_field(item, ["external_url", "externalUrl", "url"]) or None,
        **features
    )


def parse_catalog(items: List[Dict[str, Any]], source: str, clean_titles: bool = False) -> List[Track]:
    """레코드 목록 파싱 (소스 내 중복 id는 첫 번째만 유지)"""
    tracks: List[Track] = []
    seen = set()
    for item in items:
        if not isinstance(item, dict):
            continue
        track = parse_track(item, source, clean_titles=clean_titles)
        if track is None:
            continue
        if track.id in seen:
            logger.debug(f"중복 id 스킵: {source}/{track.id}")
            continue
        seen.add(track.id)
        tracks.append(track)
    return tracks


def load_catalog(
    path: str,
    source: str,
    demo_mode: bool,
    clean_titles: bool = False
) -> List[Track]:
    """
    소스 카탈로그 JSON 로드

    Args:
        path: JSON 파일 경로 (리스트 또는 {"tracks": [...]})
        source: 소스 이름
        demo_mode: 파일이 없으면 내장 데모 카탈로그 사용
        clean_titles: 영상 제목 정리 여부

    Returns:
        Track 리스트

    Raises:
        RuntimeError: 데모 모드가 아닌데 카탈로그를 읽지 못한 경우
    """
    tracks: List[Track] = []
    file_path = Path(path) if path else None

    if file_path and file_path.exists():
        try:
            logger.info(f"{source} 카탈로그 로드 중: {file_path}")
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)

            items = []
            if isinstance(data, list):
                items = data
            elif isinstance(data, dict):
                items = data.get("tracks") or data.get("items") or []

            tracks = parse_catalog(items, source, clean_titles=clean_titles)
            logger.info(f"{source} 카탈로그 로드 완료: {len(tracks):,}곡")
        except Exception as e:
            logger.error(f"{source} 카탈로그 로드 실패: {e}")
            if not demo_mode:
                raise RuntimeError(f"{source} 카탈로그 로드 실패: {e}")

    if not tracks and demo_mode:
        demo_items = DEMO_CATALOGS.get(source, [])
        tracks = parse_catalog(demo_items, source, clean_titles=clean_titles)
        logger.info(f"{source} 데모 카탈로그 사용: {len(tracks):,}곡")

    if not tracks and not demo_mode:
        raise RuntimeError(f"카탈로그가 비어있습니다: {source} ({path})")

    return tracks


def catalog_path(catalog_dir: str, source: str) -> str:
    """<catalog_dir>/<source>.json 경로 (디렉터리 미설정이면 빈 문자열)"""
    if not catalog_dir:
        return ""
    return str(Path(catalog_dir) / f"{source}.json")
