import pytest


CATALOG = [
    ("/api/artists", {"name": "Fairuz"}, {"name": "Fairuz Updated"}),
    ("/api/albums", {"title": "Ya Tayr"}, {"title": "Ya Tayr (Remastered)"}),
    ("/api/songs", {"title": "Kifak Inta", "audioUrl": "/uploads/audio/k.mp3"}, {"lyrics": "..."}),
    ("/api/videos", {"title": "Live", "videoUrl": "/uploads/video/live.mp4"}, {"duration": 300}),
]


@pytest.mark.parametrize("path,payload,changes", CATALOG)
def test_admin_crud_cycle(client, admin_headers, path, payload, changes):
    created = client.post(path, json=payload, headers=admin_headers)
    assert created.status_code == 201
    item = created.json()
    assert item["id"]

    fetched = client.get(f"{path}/{item['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == item

    updated = client.put(f"{path}/{item['id']}", json=changes, headers=admin_headers)
    assert updated.status_code == 200
    for key, value in changes.items():
        assert updated.json()[key] == value
    for key, value in payload.items():
        if key not in changes:
            assert updated.json()[key] == value

    assert client.delete(f"{path}/{item['id']}", headers=admin_headers).status_code == 200
    assert client.get(f"{path}/{item['id']}").status_code == 404
    # Deleting twice is fine
    assert client.delete(f"{path}/{item['id']}", headers=admin_headers).status_code == 200


@pytest.mark.parametrize("path,payload,changes", CATALOG)
def test_non_admin_writes_are_forbidden(client, admin_headers, user_headers, path, payload, changes):
    existing = client.post(path, json=payload, headers=admin_headers).json()

    assert client.post(path, json=payload, headers=user_headers).status_code == 403
    assert client.put(f"{path}/{existing['id']}", json=changes, headers=user_headers).status_code == 403
    assert client.delete(f"{path}/{existing['id']}", headers=user_headers).status_code == 403

    # Nothing changed
    listing = client.get(path).json()
    assert listing == [existing]


@pytest.mark.parametrize("path,payload,changes", CATALOG)
def test_anonymous_writes_are_unauthenticated(client, path, payload, changes):
    assert client.post(path, json=payload).status_code == 401
    assert client.get(path).json() == []


def test_role_is_checked_before_existence(client, user_headers):
    response = client.put("/api/artists/missing", json={"name": "x"}, headers=user_headers)
    assert response.status_code == 403


def test_update_missing_entity_is_not_found(client, admin_headers):
    response = client.put("/api/songs/missing", json={"title": "x"}, headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["message"] == "Song not found"


def test_create_validation_error(client, admin_headers):
    response = client.post("/api/songs", json={"title": ""}, headers=admin_headers)
    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert "title" in fields
    assert "audioUrl" in fields
    assert client.get("/api/songs").json() == []


def test_update_cannot_null_required_field(client, admin_headers):
    artist = client.post("/api/artists", json={"name": "A"}, headers=admin_headers).json()
    response = client.put(f"/api/artists/{artist['id']}", json={"name": None}, headers=admin_headers)
    assert response.status_code == 400


def test_wire_format_is_camel_case(client, admin_headers):
    artist = client.post(
        "/api/artists",
        json={"name": "A", "profileImageUrl": "/uploads/images/a.png"},
        headers=admin_headers
    ).json()
    assert artist["profileImageUrl"] == "/uploads/images/a.png"
    assert "profile_image_url" not in artist

    song = client.post(
        "/api/songs",
        json={"title": "S", "audioUrl": "/a.mp3", "artistId": artist["id"]},
        headers=admin_headers
    ).json()
    assert song["playCount"] == 0
    assert song["artistId"] == artist["id"]


def test_nested_artist_listings(client, admin_headers):
    artist = client.post("/api/artists", json={"name": "A"}, headers=admin_headers).json()
    album = client.post("/api/albums", json={"title": "LP", "artistId": artist["id"]}, headers=admin_headers).json()
    song = client.post(
        "/api/songs",
        json={"title": "S", "audioUrl": "/a.mp3", "artistId": artist["id"], "albumId": album["id"]},
        headers=admin_headers
    ).json()
    video = client.post(
        "/api/videos", json={"title": "V", "videoUrl": "/v.mp4", "artistId": artist["id"]}, headers=admin_headers
    ).json()

    assert [a["id"] for a in client.get(f"/api/artists/{artist['id']}/albums").json()] == [album["id"]]
    assert [s["id"] for s in client.get(f"/api/artists/{artist['id']}/songs").json()] == [song["id"]]
    assert [v["id"] for v in client.get(f"/api/artists/{artist['id']}/videos").json()] == [video["id"]]
    assert [s["id"] for s in client.get(f"/api/albums/{album['id']}/songs").json()] == [song["id"]]


def test_default_album_sentinel_over_http(client, admin_headers):
    artist = client.post("/api/artists", json={"name": "A"}, headers=admin_headers).json()
    body = {"audioUrl": "/a.mp3", "artistId": artist["id"], "albumId": "default"}

    first = client.post("/api/songs", json={"title": "one", **body}, headers=admin_headers).json()
    second = client.post("/api/songs", json={"title": "two", **body}, headers=admin_headers).json()

    albums = client.get(f"/api/artists/{artist['id']}/albums").json()
    assert len(albums) == 1
    assert albums[0]["title"] == "Singles"
    assert first["albumId"] == second["albumId"] == albums[0]["id"]


def test_play_and_view_counters_are_public(client, admin_headers):
    song = client.post("/api/songs", json={"title": "S", "audioUrl": "/a.mp3"}, headers=admin_headers).json()
    video = client.post("/api/videos", json={"title": "V", "videoUrl": "/v.mp4"}, headers=admin_headers).json()

    assert client.post(f"/api/songs/{song['id']}/play").status_code == 200
    assert client.put(f"/api/songs/{song['id']}/play").status_code == 200
    assert client.post(f"/api/videos/{video['id']}/view").status_code == 200

    assert client.get(f"/api/songs/{song['id']}").json()["playCount"] == 2
    assert client.get(f"/api/videos/{video['id']}").json()["viewCount"] == 1


def test_counter_on_missing_entity_is_not_found(client):
    assert client.post("/api/songs/missing/play").status_code == 404
    assert client.post("/api/videos/missing/view").status_code == 404


def test_trending_limit_is_validated(client):
    assert client.get("/api/songs/trending", params={"limit": 0}).status_code == 400
    assert client.get("/api/songs/trending").status_code == 200


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    body = client.get("/api/health").json()
    assert body["status"] == "healthy"
    assert body["environment"] == "test"
