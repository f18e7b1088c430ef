from .system_routes import system_bp
from .chat_routes import chat_bp
from .data_routes import data_bp

__all__ = [
    "system_bp",
    "chat_bp",
    "data_bp",
]
