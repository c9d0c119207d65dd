"""
Test doubles and builders shared across test modules.
"""

import asyncio
from typing import Dict, List

from tunebridge.core.models import Track
from tunebridge.core.sources import CatalogSource


class FailingSource:
    """Source whose every call raises, as a dead upstream would."""

    def __init__(self):
        self.search_calls = 0

    async def search_tracks(self, query: str, limit: int) -> List[Track]:
        self.search_calls += 1
        raise ConnectionError("upstream unavailable")

    async def get_track_features(self, track_id: str) -> Dict[str, float]:
        raise ConnectionError("upstream unavailable")

    def is_configured(self) -> bool:
        return False


class FeaturelessSource(CatalogSource):
    """Catalog source whose search works but whose feature lookup always raises."""

    def __init__(self, name: str, tracks: List[Track]):
        super().__init__(name, tracks, estimate_missing_features=True)
        self.feature_calls = 0

    async def get_track_features(self, track_id: str) -> Dict[str, float]:
        self.feature_calls += 1
        raise TimeoutError(f"feature lookup timed out for {track_id}")


class CountingSource(CatalogSource):
    """Catalog source that records peak concurrent feature lookups."""

    def __init__(self, name: str, tracks: List[Track]):
        super().__init__(name, tracks, estimate_missing_features=True)
        self.active = 0
        self.peak = 0

    async def get_track_features(self, track_id: str) -> Dict[str, float]:
        self.active += 1
        self.peak = max(self.peak, self.active)
        await asyncio.sleep(0.001)
        self.active -= 1
        return await super().get_track_features(track_id)


def make_track(track_id: str = "t-1", title: str = "Song", artist: str = "Artist",
               source: str = "spotify", **kwargs) -> Track:
    return Track(id=track_id, title=title, artist=artist, source=source, **kwargs)
