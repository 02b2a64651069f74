import pytest
from sqlalchemy.exc import IntegrityError

from app.db.models.favorite import Favorite
from app.services.favorite_service import favorite_service
from app.services.song_service import song_service


def test_is_favorite_lifecycle(db, user):
    song = song_service.create(db, {"title": "S", "audio_url": "/s.mp3"})

    assert favorite_service.is_favorite(db, user.id, song.id) is False
    favorite_service.add_to_favorites(db, user.id, song.id)
    assert favorite_service.is_favorite(db, user.id, song.id) is True
    favorite_service.remove_from_favorites(db, user.id, song.id)
    assert favorite_service.is_favorite(db, user.id, song.id) is False


def test_adding_twice_keeps_one_row(db, user):
    song = song_service.create(db, {"title": "S", "audio_url": "/s.mp3"})

    first = favorite_service.add_to_favorites(db, user.id, song.id)
    second = favorite_service.add_to_favorites(db, user.id, song.id)

    assert first.id == second.id
    assert db.query(Favorite).filter(Favorite.user_id == user.id).count() == 1


def test_duplicate_row_is_rejected_by_the_database(db, user):
    song = song_service.create(db, {"title": "S", "audio_url": "/s.mp3"})
    db.add(Favorite(user_id=user.id, song_id=song.id))
    db.commit()
    db.add(Favorite(user_id=user.id, song_id=song.id))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_favorite_routes_for_current_user(client, admin_headers, user_headers):
    song = client.post("/api/songs", json={"title": "S", "audioUrl": "/s.mp3"}, headers=admin_headers).json()

    check = f"/api/favorites/{song['id']}/check"
    assert client.get(check, headers=user_headers).json() == {"isFavorite": False}

    assert client.post(f"/api/favorites/{song['id']}", headers=user_headers).status_code == 201
    assert client.post(f"/api/favorites/{song['id']}", headers=user_headers).status_code == 201
    assert client.get(check, headers=user_headers).json() == {"isFavorite": True}
    assert len(client.get("/api/favorites", headers=user_headers).json()) == 1

    assert client.delete(f"/api/favorites/{song['id']}", headers=user_headers).status_code == 200
    assert client.get(check, headers=user_headers).json() == {"isFavorite": False}


def test_favorites_require_login(client):
    assert client.get("/api/favorites").status_code == 401


def test_favoriting_unknown_song_is_not_found(client, user_headers):
    assert client.post("/api/favorites/missing", headers=user_headers).status_code == 404


def test_user_favorites_are_self_only_for_changes(client, user, make_user, headers_for, admin_headers, user_headers):
    song = client.post("/api/songs", json={"title": "S", "audioUrl": "/s.mp3"}, headers=admin_headers).json()
    stranger = headers_for(make_user("stranger"))
    url = f"/api/users/{user.id}/favorites"

    assert client.post(url, json={"songId": song["id"]}, headers=stranger).status_code == 403
    assert client.post(url, json={"songId": song["id"]}, headers=admin_headers).status_code == 403
    assert client.post(url, json={"songId": song["id"]}, headers=user_headers).status_code == 201

    # Reading is allowed for admins too
    assert len(client.get(url, headers=admin_headers).json()) == 1
    assert client.get(url, headers=stranger).status_code == 403

    assert client.delete(f"{url}/{song['id']}", headers=admin_headers).status_code == 403
    assert client.delete(f"{url}/{song['id']}", headers=user_headers).status_code == 200
    assert client.get(url, headers=user_headers).json() == []
