"""Observer registry and fan-out over Socket.IO."""

import threading
from enum import Enum
from typing import Any, Dict, List

from flask import current_app


class ObserverStatus(str, Enum):
    CONNECTING = 'connecting'
    CONNECTED = 'connected'
    DISCONNECTED = 'disconnected'


class BroadcastChannel:
    """Best-effort delivery of named events to every registered observer.

    Observers are Socket.IO session ids on a single namespace. There is no
    acknowledgement and no retry: an observer that is gone or failing simply
    misses the event.
    """

    def __init__(self, socketio, namespace: str):
        self.socketio = socketio
        self.namespace = namespace
        self._observers: Dict[str, ObserverStatus] = {}
        self._lock = threading.Lock()

    def attach(self, sid: str) -> None:
        with self._lock:
            self._observers[sid] = ObserverStatus.CONNECTING

    def mark_connected(self, sid: str) -> None:
        with self._lock:
            if sid in self._observers:
                self._observers[sid] = ObserverStatus.CONNECTED

    def detach(self, sid: str) -> ObserverStatus:
        """Drop ``sid`` from the registry; a later connect is a new observer."""
        with self._lock:
            self._observers.pop(sid, None)
        return ObserverStatus.DISCONNECTED

    def status(self, sid: str) -> ObserverStatus:
        with self._lock:
            return self._observers.get(sid, ObserverStatus.DISCONNECTED)

    def observers(self) -> List[str]:
        with self._lock:
            return list(self._observers)

    def observer_count(self) -> int:
        with self._lock:
            return len(self._observers)

    def send(self, sid: str, event: str, payload: Any) -> bool:
        try:
            self.socketio.emit(event, payload, to=sid, namespace=self.namespace)
        except Exception as exc:
            current_app.logger.warning(f"[broadcast-fail] event={event} sid={sid}: {exc}")
            return False
        return True

    def publish(self, event: str, payload: Any) -> int:
        """Emit ``event`` to each observer in turn; returns how many were reached."""
        delivered = 0
        for sid in self.observers():
            if self.send(sid, event, payload):
                delivered += 1
        return delivered
