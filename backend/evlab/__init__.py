# backend/evlab/__init__.py
import logging
import sys
import time
from typing import Callable, Optional

from flask import Flask, Response, g, request
from werkzeug.middleware.proxy_fix import ProxyFix

from evlab.clients.openrouter_client import CompletionClient, build_openrouter_client
from evlab.config import Settings, settings as default_settings
from evlab.extensions import EXTENSION_KEY, ProxyState, cors, now_ms
from evlab.routers.chat_routes import chat_bp
from evlab.routers.data_routes import data_bp
from evlab.routers.error_handlers import register_error_handlers
from evlab.routers.system_routes import system_bp
from evlab.services.dataset_service import Dataset, load_dataset

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("evlab.access")

# Sentinel para distinguir "sin cliente" de "construir desde settings"
_FROM_SETTINGS = object()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def _register_middleware(app: Flask) -> None:
    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    # Security headers
    @app.after_request
    def add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("X-Frame-Options", "SAMEORIGIN")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")
        resp.headers.setdefault("X-DNS-Prefetch-Control", "off")
        resp.headers.setdefault("Content-Security-Policy", "default-src 'self'")
        return resp

    @app.after_request
    def log_request(resp: Response) -> Response:
        started = g.get("request_started")
        elapsed = (time.perf_counter() - started) * 1000 if started else 0.0
        length = resp.calculate_content_length()
        access_logger.info(
            f"{request.method} {request.path} {resp.status_code} "
            f"{length if length is not None else '-'} - {elapsed:.3f} ms"
        )
        return resp


def create_app(
    settings: Optional[Settings] = None,
    *,
    upstream=_FROM_SETTINGS,
    clock: Optional[Callable[[], int]] = None,
    dataset: Optional[Dataset] = None,
) -> Flask:
    """
    App factory.
    Los tests pasan settings, un cliente upstream falso, un reloj y un
    dataset propios; en produccion todo sale de las variables de entorno.
    """
    settings = settings or default_settings
    _configure_logging(settings.LOG_LEVEL)

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = settings.MAX_BODY_BYTES
    app.json.sort_keys = False

    if settings.TRUST_PROXY_HOPS > 0:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=settings.TRUST_PROXY_HOPS)

    cors.init_app(
        app,
        origins=settings.cors_origins,
        methods=["GET", "POST", "OPTIONS"],
    )

    if upstream is _FROM_SETTINGS:
        upstream = build_openrouter_client(settings)
    client: Optional[CompletionClient] = upstream

    if settings.PASSWORD_GATE and not settings.CHAT_PASSWORD:
        logger.warning("CHAT_PASSWORD no configurada: /api/chat respondera 401")

    app.extensions[EXTENSION_KEY] = ProxyState(
        settings=settings,
        dataset=dataset if dataset is not None else load_dataset(settings.EV_DATA_PATH),
        upstream=client,
        clock=clock or now_ms,
    )

    _register_middleware(app)

    # Blueprints
    app.register_blueprint(system_bp)
    app.register_blueprint(chat_bp)
    app.register_blueprint(data_bp)
    # Error handlers centralizados
    register_error_handlers(app)

    return app
