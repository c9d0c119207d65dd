"""
Tests for catalog loading, catalog sources and the source registry.
"""

import asyncio
import json

import pytest

from tunebridge.core.config import Settings
from tunebridge.core.loaders import clean_video_title, load_catalog, parse_track, catalog_path
from tunebridge.core.sources import (
    CatalogSource,
    ContentSource,
    SourceRegistry,
    build_registry,
    estimate_features,
)
from tests.helpers import FailingSource


class TestCleanVideoTitle:
    """Video title cleanup."""

    def test_strips_bracket_tags(self):
        assert clean_video_title("Song Name [Official Video]") == "Song Name"

    def test_strips_track_number_and_audio_tag(self):
        assert clean_video_title("1. Song Title Here (Official Audio)") == "Song Title Here"

    def test_strips_topic_suffix(self):
        assert clean_video_title("Kesariya - Topic") == "Kesariya"

    def test_keeps_original_when_too_much_removed(self):
        assert clean_video_title("[Official Video]") == "[Official Video]"

    def test_leaves_plain_titles_alone(self):
        assert clean_video_title("Shape of You - Official Video") == "Shape of You - Official Video"


class TestLoaders:
    """Catalog parsing and loading."""

    def test_parse_track_requires_id_and_title(self):
        assert parse_track({"title": "No id"}, "spotify") is None
        assert parse_track({"id": "x"}, "spotify") is None

    def test_parse_track_fields(self):
        track = parse_track({
            "id": "abc",
            "name": "Song",
            "artists": ["A", "B"],
            "tempo": "120.5",
            "energy": 0.4,
            "danceability": "n/a",
            "thumbnailUrl": "http://img",
        }, "spotify")
        assert track.title == "Song"
        assert track.artist == "A, B"
        assert track.tempo == 120.5
        assert track.energy == 0.4
        assert track.danceability is None
        assert track.thumbnail_url == "http://img"
        assert track.source == "spotify"

    def test_load_catalog_from_file(self, tmp_path):
        path = tmp_path / "deezer.json"
        path.write_text(json.dumps({"tracks": [
            {"id": "d-1", "title": "One", "artist": "X"},
            {"id": "d-1", "title": "Duplicate", "artist": "X"},
            {"id": "d-2", "title": "Two", "artist": "Y", "genre": "Rock"},
        ]}), encoding="utf-8")
        tracks = load_catalog(str(path), "deezer", demo_mode=False)
        assert [t.id for t in tracks] == ["d-1", "d-2"]
        assert tracks[1].genre == "Rock"

    def test_demo_fallback(self):
        tracks = load_catalog("", "spotify", demo_mode=True)
        assert tracks
        assert all(t.source == "spotify" for t in tracks)

    def test_missing_catalog_outside_demo_mode(self, tmp_path):
        with pytest.raises(RuntimeError):
            load_catalog(str(tmp_path / "missing.json"), "spotify", demo_mode=False)

    def test_catalog_path(self):
        assert catalog_path("", "spotify") == ""
        assert catalog_path("/data", "spotify").endswith("spotify.json")


class TestCatalogSource:
    """Search and feature lookup over an in-memory catalog."""

    def test_artist_matches_first_by_popularity(self, spotify_tracks):
        source = CatalogSource("spotify", spotify_tracks)
        results = asyncio.run(source.search_tracks("Arijit Singh", 10))
        assert [t.id for t in results[:4]] == ["spotify-4", "spotify-3", "spotify-6", "spotify-5"]
        assert all(t.artist == "Arijit Singh" for t in results[:4])

    def test_word_match(self, youtube_tracks):
        source = CatalogSource("youtube", youtube_tracks)
        results = asyncio.run(source.search_tracks("kesariya", 10))
        assert [t.id for t in results] == ["youtube-4"]

    def test_demo_catalog_classics(self, spotify_tracks, youtube_tracks):
        source = CatalogSource("spotify", spotify_tracks)
        results = asyncio.run(source.search_tracks("Lata Mangeshkar", 10))
        assert [t.id for t in results] == ["spotify-39", "spotify-40", "spotify-41"]

        ids = [t.id for t in spotify_tracks + youtube_tracks]
        assert len(ids) == len(set(ids))
        assert all(t.features for t in spotify_tracks)

    def test_limit(self, spotify_tracks):
        source = CatalogSource("spotify", spotify_tracks)
        assert len(asyncio.run(source.search_tracks("Vijay Prakash", 2))) == 2

    def test_no_match(self, spotify_tracks, youtube_tracks):
        for name, tracks in (("spotify", spotify_tracks), ("youtube", youtube_tracks)):
            source = CatalogSource(name, tracks)
            assert asyncio.run(source.search_tracks("zzzqqqnonexistent123", 5)) == []

    def test_stored_features(self, spotify_tracks):
        source = CatalogSource("spotify", spotify_tracks)
        features = asyncio.run(source.get_track_features("spotify-2"))
        assert features["tempo"] == pytest.approx(95.977)
        assert features["energy"] == pytest.approx(0.652)

    def test_estimated_features_are_deterministic(self, youtube_tracks):
        source = CatalogSource("youtube", youtube_tracks)
        first = asyncio.run(source.get_track_features("youtube-2"))
        second = asyncio.run(source.get_track_features("youtube-2"))
        assert first == second
        assert 0.0 <= first["acousticness"] < 0.5
        for name in ("danceability", "energy", "valence"):
            assert 0.2 <= first[name] < 1.0
        assert 80.0 <= first["tempo"] < 180.0

    def test_estimation_disabled(self, youtube_tracks):
        source = CatalogSource("youtube", youtube_tracks, estimate_missing_features=False)
        assert asyncio.run(source.get_track_features("youtube-2")) == {}

    def test_estimate_differs_per_id(self):
        assert estimate_features("youtube-1") != estimate_features("youtube-2")

    def test_is_configured(self, spotify_tracks):
        assert CatalogSource("spotify", spotify_tracks).is_configured()
        assert not CatalogSource("empty", []).is_configured()

    def test_satisfies_protocol(self, spotify_tracks):
        assert isinstance(CatalogSource("spotify", spotify_tracks), ContentSource)
        assert isinstance(FailingSource(), ContentSource)


class TestSourceRegistry:
    """Ordered registration of named sources."""

    def test_order_and_lookup(self, spotify_tracks, youtube_tracks):
        registry = SourceRegistry()
        registry.register("YouTube", CatalogSource("youtube", youtube_tracks))
        registry.register("spotify", CatalogSource("spotify", spotify_tracks))
        assert registry.names == ["youtube", "spotify"]
        assert "youtube" in registry
        assert registry.get("SPOTIFY") is not None
        assert registry.get("deezer") is None
        assert len(registry) == 2

    def test_duplicate_name(self, spotify_tracks):
        registry = SourceRegistry()
        registry.register("spotify", CatalogSource("spotify", spotify_tracks))
        with pytest.raises(ValueError):
            registry.register("spotify", CatalogSource("spotify", spotify_tracks))

    def test_empty_name(self):
        with pytest.raises(ValueError):
            SourceRegistry().register("  ", FailingSource())

    def test_build_from_settings(self):
        registry = build_registry(Settings(SOURCES="youtube,spotify", DEMO_MODE=True))
        assert registry.names == ["youtube", "spotify"]
        assert registry.get("youtube").is_configured()
