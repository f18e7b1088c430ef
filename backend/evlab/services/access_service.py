import hmac
import logging
from typing import Any, Optional

from evlab.domain.errors import NotConfigured, RateLimited, Unauthorized
from evlab.extensions import ProxyState

logger = logging.getLogger(__name__)


def password_matches(candidate: Any, expected: str) -> bool:
    if not expected or not isinstance(candidate, str) or not candidate:
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))


def check_chat_access(
    state: ProxyState,
    identifier: str,
    password: Optional[Any],
    now: int,
) -> None:
    """
    Precondiciones de /api/chat, en este orden:
      1) rate limit      -> RateLimited
      2) API key         -> NotConfigured
      3) password/sesion -> Unauthorized
    Un password correcto crea (o reinicia) la sesion del identificador.
    """
    if not state.rate_limiter.admit(identifier, now):
        logger.warning(f"Rate limit excedido para {identifier}")
        raise RateLimited()

    if state.upstream is None:
        raise NotConfigured()

    if not state.settings.PASSWORD_GATE:
        return

    if password_matches(password, state.settings.CHAT_PASSWORD):
        state.sessions.mark_authenticated(identifier, now)
        return

    if state.sessions.is_authenticated(identifier, now):
        return

    logger.info(f"Acceso denegado a /api/chat para {identifier}")
    raise Unauthorized()
