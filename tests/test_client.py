import pytest

from app.client.api_client import CatalogClient
from app.client.fetch import FetchResult, FetchState
from app.client.playback import PlaybackState


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def api(client, clock):
    return CatalogClient(http=client, ttls={"artists": 60, "songs": 30}, clock=clock)


def test_fetch_result_only_exposes_data_on_success():
    assert FetchResult.pending().state == FetchState.PENDING
    with pytest.raises(ValueError):
        FetchResult.pending().items()
    with pytest.raises(ValueError):
        FetchResult.failure("boom", 500).items()
    assert FetchResult.success([1, 2]).items() == [1, 2]


def test_reads_are_cached_for_the_resource_ttl(api, clock, client, admin_headers):
    assert api.artists().items() == []

    client.post("/api/artists", json={"name": "A"}, headers=admin_headers)
    # Still fresh, served from cache
    assert api.artists().items() == []

    clock.now += 61
    assert [a["name"] for a in api.artists().items()] == ["A"]


def test_resources_without_ttl_are_not_cached(api, client, admin_headers):
    assert api.videos().items() == []
    client.post("/api/videos", json={"title": "V", "videoUrl": "/v.mp4"}, headers=admin_headers)
    assert len(api.videos().items()) == 1


def test_error_result_carries_status_and_message(api):
    result = api.get("/api/artists/missing")
    assert result.state == FetchState.ERROR
    assert result.status_code == 404
    assert result.error == "Artist not found"


def test_login_and_write_invalidate_cache(api, admin):
    assert api.login("admin", "secret1").ok
    assert api.artists().items() == []

    created = api.send("POST", "/api/artists", {"name": "B"})
    assert created.ok
    assert [a["name"] for a in api.artists().items()] == ["B"]


def test_failed_login_keeps_client_anonymous(api, admin):
    result = api.login("admin", "nope")
    assert result.status_code == 401
    assert api.token is None


def test_play_updates_state_and_counts(api, client, admin_headers):
    song = client.post("/api/songs", json={"title": "S", "audioUrl": "/s.mp3"}, headers=admin_headers).json()
    playback = PlaybackState()
    seen = []
    unsubscribe = playback.subscribe(lambda state: seen.append(state.current_song["id"]))

    assert api.play(song, playback).ok
    assert playback.is_playing
    assert seen == [song["id"]]
    assert api.trending().items()[0]["playCount"] == 1

    unsubscribe()
    playback.pause()
    assert seen == [song["id"]]
    assert not playback.is_playing


def test_stop_clears_current_song_and_notifies():
    playback = PlaybackState()
    seen = []
    playback.subscribe(lambda state: seen.append((state.current_song, state.is_playing)))

    playback.play({"id": "s1"})
    playback.stop()

    assert playback.current_song is None
    assert not playback.is_playing
    assert seen == [({"id": "s1"}, True), (None, False)]
