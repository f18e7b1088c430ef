from .chat import ChatReply, ChatRequestPayload, ConversationMessage
from .errors import (
    NotConfigured,
    NotFound,
    ProxyError,
    RateLimited,
    ServerError,
    Unauthorized,
    Unavailable,
    UpstreamError,
)

__all__ = [
    "ChatReply",
    "ChatRequestPayload",
    "ConversationMessage",
    "NotConfigured",
    "NotFound",
    "ProxyError",
    "RateLimited",
    "ServerError",
    "Unauthorized",
    "Unavailable",
    "UpstreamError",
]
