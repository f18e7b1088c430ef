from typing import Any, Dict, Optional


class ProxyError(Exception):
    """
    Error con status HTTP y mensaje publico.
    Se convierte a JSON en routers/error_handlers.py.
    """
    status_code: int = 500
    message: str = "Server error"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class RateLimited(ProxyError):
    status_code = 429
    message = "Too many requests"


class Unauthorized(ProxyError):
    status_code = 401
    message = "Unauthorized"


class NotConfigured(ProxyError):
    status_code = 500
    message = "Server not configured"


class ServerError(ProxyError):
    status_code = 500
    message = "Server error"


class Unavailable(ProxyError):
    status_code = 503
    message = "Dataset unavailable"


class NotFound(ProxyError):
    status_code = 404
    message = "Not found"


class UpstreamError(ProxyError):
    """
    Respuesta no exitosa de OpenRouter.
    El body se reenvia tal cual en `detail`.
    """
    message = "OpenRouter error"

    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code)
        self.detail = detail

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "detail": self.detail}
