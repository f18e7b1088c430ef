import logging
import threading
from typing import Dict

from evlab.config import SESSION_TTL_MS

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Sesiones autenticadas por identificador (IP) con expiracion fija.

    Limitacion conocida: todos los clientes detras de la misma IP (NAT,
    proxy corporativo) comparten la sesion.
    """

    def __init__(self, ttl_ms: int = SESSION_TTL_MS) -> None:
        self.ttl_ms = ttl_ms
        self._expiry: Dict[str, int] = {}
        self._lock = threading.Lock()

    def is_authenticated(self, identifier: str, now: int) -> bool:
        with self._lock:
            expires_at = self._expiry.get(identifier)
            if expires_at is None:
                return False

            if now >= expires_at:
                self._expiry.pop(identifier, None)
                logger.info(f"Sesion expirada para {identifier}")
                return False

            return True

    def mark_authenticated(self, identifier: str, now: int) -> None:
        # Sobrescribe: la duracion se reinicia completa, no se extiende
        with self._lock:
            self._expiry[identifier] = now + self.ttl_ms

    def __len__(self) -> int:
        with self._lock:
            return len(self._expiry)
