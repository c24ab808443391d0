"""
In-process magnetometer feed.

Whatever reads the physical sensor (a serial reader, the HTTP route in
api/routes/compass.py, a test) calls `publish`; listeners are invoked
synchronously on the publishing thread.
"""

import logging
import threading
from typing import Callable, Dict

from core.bearing import HeadingSample

Listener = Callable[[HeadingSample], None]


class Subscription:
    """Handle returned by HeadingStream.add_listener. `remove` is idempotent."""

    def __init__(self, stream: "HeadingStream", token: int):
        self._stream = stream
        self._token = token
        self._removed = False
        self._lock = threading.Lock()

    @property
    def active(self) -> bool:
        with self._lock:
            return not self._removed

    def remove(self) -> bool:
        """Detach the listener. Returns False when it was already removed."""
        with self._lock:
            if self._removed:
                return False
            self._removed = True
        self._stream._drop(self._token)
        return True


class HeadingStream:
    def __init__(self, available: bool = True):
        self._available = available
        self._listeners: Dict[int, Listener] = {}
        self._next_token = 0
        self._lock = threading.Lock()
        self._latest = None

    def is_available(self) -> bool:
        return self._available

    def set_available(self, available: bool) -> None:
        self._available = available

    def add_listener(self, listener: Listener) -> Subscription:
        with self._lock:
            token = self._next_token
            self._next_token += 1
            self._listeners[token] = listener
        logging.debug(f"[HEADING] Listener {token} attached")
        return Subscription(self, token)

    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)

    def latest(self):
        with self._lock:
            return self._latest

    def publish(self, sample: HeadingSample) -> None:
        with self._lock:
            self._latest = sample
            listeners = list(self._listeners.values())

        for listener in listeners:
            try:
                listener(sample)
            except Exception as e:
                logging.error(f"[HEADING] Listener failure: {e}", exc_info=True)

    def _drop(self, token: int) -> None:
        with self._lock:
            self._listeners.pop(token, None)
        logging.debug(f"[HEADING] Listener {token} detached")
