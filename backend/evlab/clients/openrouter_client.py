import logging
from typing import Any, Dict, Optional, Protocol

from evlab.clients.http_client import HttpClientError, http_post
from evlab.config import Settings
from evlab.domain.errors import ServerError, UpstreamError

logger = logging.getLogger(__name__)


class CompletionClient(Protocol):
    """
    Capacidad minima que necesita el relay: dado un body, devolver el JSON
    de la completion o lanzar UpstreamError / ServerError.
    Los tests la sustituyen por un doble sin red.
    """

    def complete(self, body: Dict[str, Any]) -> Dict[str, Any]:
        ...


class OpenRouterClient:
    def __init__(
        self,
        api_key: str,
        *,
        url: str,
        referer: str,
        title: str,
        timeout: float,
    ) -> None:
        self.api_key = api_key
        self.url = url
        self.referer = referer
        self.title = title
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
            "HTTP-Referer": self.referer,
            "X-Title": self.title,
        }

    def complete(self, body: Dict[str, Any]) -> Dict[str, Any]:
        try:
            resp = http_post(
                self.url,
                headers=self._headers(),
                json_body=body,
                timeout=self.timeout,
            )
        except HttpClientError as e:
            raise ServerError() from e

        if not resp.ok:
            # El body de error se reenvia tal cual al frontend
            logger.warning(f"OpenRouter respondio {resp.status_code}")
            raise UpstreamError(resp.status_code, resp.text)

        try:
            data = resp.json()
        except ValueError as e:
            logger.error(f"Respuesta de OpenRouter no es JSON: {e}")
            raise ServerError() from e

        if not isinstance(data, dict):
            logger.error("Respuesta de OpenRouter con forma inesperada")
            raise ServerError()

        return data


def build_openrouter_client(settings: Settings) -> Optional[OpenRouterClient]:
    """
    Inicializa el cliente de OpenRouter.
    Retorna None si no hay API key (el chat respondera 500).
    """
    if not settings.OPENROUTER_API_KEY:
        logger.warning("OPENROUTER_API_KEY no configurada: /api/chat respondera 500")
        return None

    logger.info("Cliente OpenRouter inicializado correctamente")
    return OpenRouterClient(
        settings.OPENROUTER_API_KEY,
        url=settings.OPENROUTER_URL,
        referer=settings.OPENROUTER_SITE,
        title=settings.OPENROUTER_TITLE,
        timeout=settings.UPSTREAM_TIMEOUT,
    )
