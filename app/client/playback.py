# ============================================================================
# FILE: app/client/playback.py
# ============================================================================
from typing import Any, Callable, Dict, List, Optional

class PlaybackState:
    """
    Currently playing song, owned by whoever creates it and handed to the
    components that need it. Listeners are called after every change.
    """

    def __init__(self):
        self.current_song: Optional[Dict[str, Any]] = None
        self.is_playing = False
        self._listeners: List[Callable[["PlaybackState"], None]] = []

    def subscribe(self, listener: Callable[["PlaybackState"], None]) -> Callable[[], None]:
        """Register a listener, returns a function that removes it"""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def _notify(self):
        for listener in list(self._listeners):
            listener(self)

    def play(self, song: Dict[str, Any]):
        self.current_song = song
        self.is_playing = True
        self._notify()

    def pause(self):
        if self.is_playing:
            self.is_playing = False
            self._notify()

    def stop(self):
        self.current_song = None
        self.is_playing = False
        self._notify()
