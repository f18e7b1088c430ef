# backend/evlab/routers/error_handlers.py
from __future__ import annotations

import logging

from flask import jsonify, request
from werkzeug.exceptions import HTTPException, MethodNotAllowed

from evlab.domain.errors import NotFound, ProxyError, ServerError

logger = logging.getLogger(__name__)

# Mensajes publicos para errores HTTP de Werkzeug
_HTTP_MESSAGES = {
    404: NotFound.message,
    413: "Payload too large",
}


def register_error_handlers(app):
    @app.errorhandler(ProxyError)
    def proxy_error_handler(e: ProxyError):
        if e.status_code >= 500:
            logger.error(f"{request.method} {request.path} -> {e.status_code}: {e!r}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(MethodNotAllowed)
    def method_not_allowed_handler(e: MethodNotAllowed):
        # Metodo no registrado para la ruta: igual que una ruta inexistente
        return jsonify(NotFound().to_dict()), 404

    @app.errorhandler(HTTPException)
    def http_exception_handler(e: HTTPException):
        code = e.code or 500
        message = _HTTP_MESSAGES.get(code) or e.name
        return jsonify({"error": message}), code

    @app.errorhandler(Exception)
    def unhandled_exception_handler(e: Exception):
        # Detalle solo en logs, nunca al cliente
        logger.exception(f"Unhandled error en {request.method} {request.path}")
        return jsonify(ServerError().to_dict()), 500
