from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional

from flask import current_app
from flask_cors import CORS

from .config import Settings
from .stores import SessionStore, SlidingWindowRateLimiter

if TYPE_CHECKING:
    from .clients.openrouter_client import CompletionClient
    from .services.dataset_service import Dataset


EXTENSION_KEY = "evlab"


# Extensión CORS
# Se inicializa con init_app(app) desde create_app()
cors = CORS()


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class ProxyState:
    """
    Estado de proceso del proxy. Se crea en create_app() y vive en
    app.extensions["evlab"]; cada app (y cada test) tiene el suyo.
    """
    settings: Settings
    dataset: "Dataset"
    upstream: Optional["CompletionClient"] = None
    clock: Callable[[], int] = now_ms
    rate_limiter: SlidingWindowRateLimiter = field(default_factory=SlidingWindowRateLimiter)
    sessions: SessionStore = field(default_factory=SessionStore)

    def now(self) -> int:
        return self.clock()


def get_state() -> ProxyState:
    return current_app.extensions[EXTENSION_KEY]
