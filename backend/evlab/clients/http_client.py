import logging
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


DEFAULT_TIMEOUT = 60


class HttpClientError(Exception):
    """Fallo de transporte: DNS, conexion, timeout, TLS."""


def http_post(
    url: str,
    *,
    headers: Optional[Dict[str, str]] = None,
    json_body: Optional[Dict[str, Any]] = None,
    timeout: float = DEFAULT_TIMEOUT
) -> requests.Response:
    """
    POST sin interpretar el status.
    Quien llama decide que hacer con respuestas no-2xx.
    """
    try:
        return requests.post(url, headers=headers, json=json_body, timeout=timeout)
    except requests.RequestException as e:
        logger.error(f"HTTP POST error: {e}")
        raise HttpClientError(str(e)) from e
