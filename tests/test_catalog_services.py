from concurrent.futures import ThreadPoolExecutor

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.db.init_db import init_db, drop_db
from app.services.artist_service import artist_service
from app.services.album_service import album_service, DEFAULT_ALBUM_TITLE
from app.services.song_service import song_service
from app.services.video_service import video_service


def new_song(db, title="Song", **fields):
    return song_service.create(db, {"title": title, "audio_url": f"/uploads/audio/{title}.mp3", **fields})


def test_create_then_get_returns_fields_and_defaults(db):
    artist = artist_service.create(db, {"name": "Fairuz", "bio": "Singer"})
    song = new_song(db, "Li Beirut", artist_id=artist.id, duration=240)

    fetched = song_service.get(db, song.id)
    assert fetched.id
    assert fetched.title == "Li Beirut"
    assert fetched.artist_id == artist.id
    assert fetched.duration == 240
    assert fetched.play_count == 0
    assert fetched.album_id is None
    assert fetched.created_at is not None


def test_new_video_has_zero_views(db):
    video = video_service.create(db, {"title": "Live", "video_url": "/uploads/video/live.mp4"})
    assert video_service.get(db, video.id).view_count == 0


def test_get_missing_returns_none(db):
    assert artist_service.get(db, "missing") is None
    assert song_service.get(db, "missing") is None


def test_delete_then_get_is_not_found(db):
    artist = artist_service.create(db, {"name": "Gone"})
    assert artist_service.delete(db, artist.id) is True
    assert artist_service.get(db, artist.id) is None
    # Deleting again is not an error
    assert artist_service.delete(db, artist.id) is False


def test_deleting_artist_keeps_its_songs(db):
    artist = artist_service.create(db, {"name": "Solo"})
    song = new_song(db, artist_id=artist.id)
    artist_service.delete(db, artist.id)

    db.expire_all()
    remaining = song_service.get(db, song.id)
    assert remaining is not None
    assert remaining.artist_id == artist.id


def test_update_is_partial(db):
    artist = artist_service.create(db, {"name": "Old", "bio": "keep me"})
    updated = artist_service.update(db, artist.id, {"name": "New"})
    assert updated.name == "New"
    assert updated.bio == "keep me"


def test_update_missing_returns_none(db):
    assert album_service.update(db, "missing", {"title": "x"}) is None


def test_artists_are_listed_by_name(db):
    for name in ("Zed", "Adele", "Mika"):
        artist_service.create(db, {"name": name})
    assert [a.name for a in artist_service.list(db)] == ["Adele", "Mika", "Zed"]


def test_songs_are_listed_newest_first(db):
    first = new_song(db, "first")
    second = new_song(db, "second")
    listed = [s.id for s in song_service.list(db)]
    assert listed.index(second.id) < listed.index(first.id)


def test_list_by_artist_and_album(db):
    artist = artist_service.create(db, {"name": "A"})
    other = artist_service.create(db, {"name": "B"})
    album = album_service.create(db, {"title": "LP", "artist_id": artist.id})
    on_album = new_song(db, "on", artist_id=artist.id, album_id=album.id)
    new_song(db, "loose", artist_id=artist.id)
    new_song(db, "elsewhere", artist_id=other.id)

    assert {s.title for s in song_service.list_by_artist(db, artist.id)} == {"on", "loose"}
    assert [s.id for s in song_service.list_by_album(db, album.id)] == [on_album.id]
    assert [a.id for a in album_service.list_by_artist(db, artist.id)] == [album.id]


def test_repeated_increments_on_one_session_add_exactly_n(db):
    song = new_song(db)
    for _ in range(25):
        assert song_service.increment_play_count(db, song.id)

    db.expire_all()
    assert song_service.get(db, song.id).play_count == 25


def test_concurrent_increments_from_separate_sessions_add_exactly_n(tmp_path):
    # File-backed database so every thread gets its own connection and transaction
    engine = create_engine(
        f"sqlite:///{tmp_path / 'counters.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    init_db(bind=engine)
    try:
        with Session() as setup:
            song_id = new_song(setup).id

        def play(_):
            with Session() as session:
                return song_service.increment_play_count(session, song_id)

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(play, range(40)))

        assert all(results)
        with Session() as check:
            assert song_service.get(check, song_id).play_count == 40
    finally:
        drop_db(bind=engine)
        engine.dispose()


def test_increment_missing_song_reports_false(db):
    assert song_service.increment_play_count(db, "missing") is False
    assert video_service.increment_view_count(db, "missing") is False


def test_increment_view_count(db):
    video = video_service.create(db, {"title": "Clip", "video_url": "/v.mp4"})
    video_service.increment_view_count(db, video.id)
    video_service.increment_view_count(db, video.id)
    db.expire_all()
    assert video_service.get(db, video.id).view_count == 2


def test_trending_orders_by_plays_and_respects_limit(db):
    counts = [3, 7, 0, 7, 1]
    for i, plays in enumerate(counts):
        song = new_song(db, f"s{i}")
        for _ in range(plays):
            song_service.increment_play_count(db, song.id)

    trending = song_service.get_trending(db, 3)
    assert len(trending) == 3
    assert [s.play_count for s in trending] == [7, 7, 3]
    # Same data, same order
    assert [s.id for s in song_service.get_trending(db, 3)] == [s.id for s in trending]


def test_trending_default_limit_is_ten(db):
    for i in range(12):
        new_song(db, f"s{i}")
    assert len(song_service.get_trending(db)) == 10


def test_default_album_is_created_once_per_artist(db):
    artist = artist_service.create(db, {"name": "Singer"})

    first = new_song(db, "one", artist_id=artist.id, album_id="default")
    second = new_song(db, "two", artist_id=artist.id, album_id="default")

    albums = album_service.list_by_artist(db, artist.id)
    assert len(albums) == 1
    assert albums[0].title == DEFAULT_ALBUM_TITLE
    assert first.album_id == second.album_id == albums[0].id


def test_default_album_is_per_artist(db):
    a = artist_service.create(db, {"name": "A"})
    b = artist_service.create(db, {"name": "B"})
    song_a = new_song(db, "a", artist_id=a.id, album_id="default")
    song_b = new_song(db, "b", artist_id=b.id, album_id="default")
    assert song_a.album_id != song_b.album_id


def test_none_sentinel_means_no_album(db):
    song = new_song(db, album_id="none")
    assert song.album_id is None
    assert album_service.list(db) == []
