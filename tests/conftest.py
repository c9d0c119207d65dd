"""
Pytest configuration and shared fixtures.
"""

from typing import List

import pytest

from tunebridge.core.demo_catalog import SPOTIFY_DEMO_TRACKS, YOUTUBE_DEMO_TRACKS
from tunebridge.core.engine import RecommendationEngine
from tunebridge.core.loaders import parse_catalog
from tunebridge.core.models import Track
from tunebridge.core.sources import CatalogSource, SourceRegistry
from tests.helpers import make_track


@pytest.fixture
def spotify_tracks() -> List[Track]:
    return parse_catalog(SPOTIFY_DEMO_TRACKS, "spotify")


@pytest.fixture
def youtube_tracks() -> List[Track]:
    return parse_catalog(YOUTUBE_DEMO_TRACKS, "youtube", clean_titles=True)


@pytest.fixture
def registry(spotify_tracks, youtube_tracks) -> SourceRegistry:
    """Demo registry: spotify first (richer metadata), then youtube."""
    reg = SourceRegistry()
    reg.register("spotify", CatalogSource("spotify", spotify_tracks))
    reg.register("youtube", CatalogSource("youtube", youtube_tracks))
    return reg


@pytest.fixture
def engine(registry) -> RecommendationEngine:
    return RecommendationEngine(registry)


@pytest.fixture
def shape_of_you() -> Track:
    """Spotify reference record with full audio features."""
    return make_track(
        "spotify-2", "Shape of You", "Ed Sheeran",
        source="spotify", genre="Pop", popularity=93,
        acousticness=0.581, danceability=0.825, energy=0.652,
        valence=0.931, tempo=95.977,
    )
