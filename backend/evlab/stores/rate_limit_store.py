"""Rate limit por IP con ventana deslizante, en memoria del proceso."""
import threading
from collections import deque
from typing import Deque, Dict

from evlab.config import RATE_LIMIT_MAX_REQUESTS, RATE_LIMIT_WINDOW_MS


class SlidingWindowRateLimiter:
    """
    Guarda los timestamps (ms) de las peticiones admitidas por identificador.
    Un registro sigue contando mientras su edad no supere window_ms;
    con edad exactamente igual a window_ms todavia cuenta.
    """

    def __init__(
        self,
        max_requests: int = RATE_LIMIT_MAX_REQUESTS,
        window_ms: int = RATE_LIMIT_WINDOW_MS,
    ) -> None:
        self.max_requests = max_requests
        self.window_ms = window_ms
        self._windows: Dict[str, Deque[int]] = {}
        self._lock = threading.Lock()

    def _evict(self, identifier: str, now: int) -> Deque[int]:
        # Llamar siempre con el lock tomado
        dq = self._windows.get(identifier)
        if dq is None:
            return deque()

        while dq and now - dq[0] > self.window_ms:
            dq.popleft()

        if not dq:
            self._windows.pop(identifier, None)
        return dq

    def admit(self, identifier: str, now: int) -> bool:
        """True si la peticion entra; False si el identificador ya llego al tope."""
        with self._lock:
            dq = self._evict(identifier, now)

            if len(dq) >= self.max_requests:
                return False

            dq.append(now)
            self._windows[identifier] = dq
            return True

    def count(self, identifier: str, now: int) -> int:
        with self._lock:
            return len(self._evict(identifier, now))

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()
