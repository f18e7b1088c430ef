import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv

# Cargar .env una sola vez en el arranque de la app
load_dotenv()


# Limites fijos del proxy (milisegundos)
RATE_LIMIT_WINDOW_MS = 60_000
RATE_LIMIT_MAX_REQUESTS = 60
SESSION_TTL_MS = 3_600_000

# Parametros fijos del payload hacia OpenRouter
DEFAULT_MODEL = "openrouter/auto"
DEFAULT_TEMPERATURE = 0.4
MAX_OUTPUT_TOKENS = 600


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_origins(name: str, default: str) -> Tuple[str, ...]:
    raw = os.getenv(name, default) or default
    origins = tuple(o.strip() for o in raw.split(",") if o.strip())
    return origins or ("*",)


@dataclass(frozen=True)
class Settings:
    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    SERVICE_NAME: str = "ev-range-lab-backend"
    MAX_BODY_BYTES: int = 2 * 1024 * 1024
    TRUST_PROXY_HOPS: int = 0

    # CORS
    FRONTEND_ORIGINS: Tuple[str, ...] = ("*",)

    # OpenRouter
    OPENROUTER_API_KEY: str = ""
    OPENROUTER_URL: str = "https://openrouter.ai/api/v1/chat/completions"
    OPENROUTER_SITE: str = "https://example.com"
    OPENROUTER_TITLE: str = "EV Range Lab"
    UPSTREAM_TIMEOUT: float = 60.0

    # Password gate
    PASSWORD_GATE: bool = True
    CHAT_PASSWORD: str = ""

    # Dataset estatico
    EV_DATA_PATH: str = "data/evs.json"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            HOST=os.getenv("HOST", "0.0.0.0"),
            PORT=int(os.getenv("PORT", "3000")),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
            SERVICE_NAME=os.getenv("SERVICE_NAME", "ev-range-lab-backend"),
            MAX_BODY_BYTES=int(os.getenv("MAX_BODY_BYTES", str(2 * 1024 * 1024))),
            TRUST_PROXY_HOPS=int(os.getenv("TRUST_PROXY_HOPS", "0")),
            FRONTEND_ORIGINS=_env_origins("FRONTEND_ORIGIN", "*"),
            OPENROUTER_API_KEY=os.getenv("OPENROUTER_API_KEY", ""),
            OPENROUTER_URL=os.getenv(
                "OPENROUTER_URL",
                "https://openrouter.ai/api/v1/chat/completions"
            ),
            OPENROUTER_SITE=os.getenv("OPENROUTER_SITE", "https://example.com"),
            OPENROUTER_TITLE=os.getenv("OPENROUTER_TITLE", "EV Range Lab"),
            UPSTREAM_TIMEOUT=float(os.getenv("UPSTREAM_TIMEOUT", "60")),
            PASSWORD_GATE=_env_bool("PASSWORD_GATE", "true"),
            CHAT_PASSWORD=os.getenv("CHAT_PASSWORD", ""),
            EV_DATA_PATH=os.getenv("EV_DATA_PATH", "data/evs.json"),
        )

    @property
    def cors_origins(self):
        if "*" in self.FRONTEND_ORIGINS:
            return "*"
        return list(self.FRONTEND_ORIGINS)


settings = Settings.from_env()
