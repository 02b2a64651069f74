# ============================================================================
# FILE: app/client/api_client.py
# HTTP client for the catalog API with a per-resource response cache
# ============================================================================
import time
from typing import Any, Dict, Optional, Tuple
import httpx
from app.client.fetch import FetchResult
from app.client.playback import PlaybackState
from app.config import settings
import logging

logger = logging.getLogger(__name__)

class CatalogClient:
    """
    Thin client for the /api endpoints.

    Reads go through a small in-memory cache whose freshness per resource
    comes from the same TTL table the server uses (settings.CACHE_TTLS).
    Writes drop the cached reads of the resource they touch.
    """

    def __init__(self, http: Optional[httpx.Client] = None, base_url: str = "http://localhost:5000",
                 ttls: Optional[Dict[str, int]] = None, clock=time.monotonic):
        self.http = http or httpx.Client(base_url=base_url, timeout=30.0)
        self.ttls = dict(settings.CACHE_TTLS if ttls is None else ttls)
        self.token: Optional[str] = None
        self._clock = clock
        self._cache: Dict[str, Tuple[float, Any]] = {}

    def _headers(self) -> Dict[str, str]:
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    @staticmethod
    def _resource(path: str) -> str:
        # "/api/songs/trending" -> "songs"
        parts = [p for p in path.split("/") if p]
        if parts and parts[0] == "api":
            parts = parts[1:]
        return parts[0] if parts else ""

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            return response.json().get("message") or response.reason_phrase
        except ValueError:
            return response.text or response.reason_phrase

    def invalidate(self, resource: str):
        prefix = f"/api/{resource}"
        for key in [k for k in self._cache if k.startswith(prefix)]:
            del self._cache[key]

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> FetchResult:
        """Cached GET; the result is either success (with data) or error"""
        key = str(httpx.URL(path, params=params))
        ttl = self.ttls.get(self._resource(path), 0)
        cached = self._cache.get(key)
        if cached and self._clock() - cached[0] < ttl:
            return FetchResult.success(cached[1])

        try:
            response = self.http.get(path, params=params, headers=self._headers())
        except httpx.HTTPError as e:
            logger.error(f"GET {path} failed: {e}")
            return FetchResult.failure(str(e))

        if response.status_code != 200:
            return FetchResult.failure(self._error_message(response), response.status_code)

        data = response.json()
        if ttl:
            self._cache[key] = (self._clock(), data)
        return FetchResult.success(data, response.status_code)

    def send(self, method: str, path: str, json: Any = None) -> FetchResult:
        """Uncached write; clears cached reads of the touched resource"""
        try:
            response = self.http.request(method, path, json=json, headers=self._headers())
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            return FetchResult.failure(str(e))

        if response.status_code >= 400:
            return FetchResult.failure(self._error_message(response), response.status_code)
        self.invalidate(self._resource(path))
        return FetchResult.success(response.json(), response.status_code)

    # Auth

    def login(self, username: str, password: str) -> FetchResult:
        result = self.send("POST", "/api/auth/login", {"username": username, "password": password})
        if result.ok:
            self.token = result.data["token"]
        return result

    def logout(self) -> FetchResult:
        result = self.send("POST", "/api/auth/logout")
        self.token = None
        return result

    # Catalog reads

    def artists(self) -> FetchResult:
        return self.get("/api/artists")

    def albums(self) -> FetchResult:
        return self.get("/api/albums")

    def songs(self) -> FetchResult:
        return self.get("/api/songs")

    def trending(self, limit: int = 10) -> FetchResult:
        return self.get("/api/songs/trending", params={"limit": limit})

    def videos(self) -> FetchResult:
        return self.get("/api/videos")

    def playlists(self) -> FetchResult:
        return self.get("/api/playlists")

    # Playback

    def play(self, song: Dict[str, Any], playback: PlaybackState) -> FetchResult:
        """Start a song locally and count the play on the server"""
        playback.play(song)
        return self.send("POST", f"/api/songs/{song['id']}/play")
