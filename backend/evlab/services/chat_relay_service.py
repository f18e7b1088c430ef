from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional

from evlab.clients.openrouter_client import CompletionClient
from evlab.config import DEFAULT_MODEL, DEFAULT_TEMPERATURE
from evlab.domain.chat import ChatReply, ChatRequestPayload, ConversationMessage
from evlab.domain.errors import NotConfigured
from evlab.prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)

NO_RESPONSE = "No response"


# -------------------------------------------------------------------
# Request shaping
# -------------------------------------------------------------------

def _coerce_model(raw: Any) -> str:
    if isinstance(raw, str) and raw.strip():
        return raw.strip()
    return DEFAULT_MODEL


def _coerce_temperature(raw: Any) -> float:
    if raw is None or isinstance(raw, bool):
        return DEFAULT_TEMPERATURE
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return DEFAULT_TEMPERATURE
    return value if math.isfinite(value) else DEFAULT_TEMPERATURE


def build_chat_payload(body: Optional[Dict[str, Any]]) -> ChatRequestPayload:
    """
    Construye el payload a partir del JSON del frontend.
    Campos ausentes o con tipo invalido toman su valor por defecto.
    """
    body = body if isinstance(body, dict) else {}

    raw_messages = body.get("messages")
    if not isinstance(raw_messages, list):
        raw_messages = []

    return ChatRequestPayload(
        model=_coerce_model(body.get("model")),
        temperature=_coerce_temperature(body.get("temperature")),
        messages=[ConversationMessage.from_raw(m) for m in raw_messages],
    )


# -------------------------------------------------------------------
# Response mapping
# -------------------------------------------------------------------

def extract_reply(data: Dict[str, Any], requested_model: str) -> ChatReply:
    """
    Toma el contenido de la primera choice.
    Si la estructura no trae contenido, responde con el placeholder.
    """
    content = None
    choices = data.get("choices")
    if isinstance(choices, list) and choices:
        first = choices[0]
        if isinstance(first, dict):
            message = first.get("message")
            if isinstance(message, dict):
                content = message.get("content")

    # Contenido truthy que no es texto (p.ej. lista de partes) se convierte a str
    if not content:
        reply = NO_RESPONSE
    elif isinstance(content, str):
        reply = content
    else:
        reply = str(content)

    model = data.get("model")
    if not isinstance(model, str) or not model:
        model = requested_model

    return ChatReply(reply=reply, model=model)


# -------------------------------------------------------------------
# Relay
# -------------------------------------------------------------------

def relay_chat(
    client: Optional[CompletionClient],
    payload: ChatRequestPayload,
    *,
    system_prompt: str = SYSTEM_PROMPT
) -> ChatReply:
    """
    Una sola llamada a OpenRouter, sin reintentos.
    UpstreamError y ServerError se propagan al handler de errores.
    """
    if client is None:
        raise NotConfigured()

    body = payload.to_upstream(system_prompt)
    logger.info(
        f"Relay a OpenRouter: model={payload.model} mensajes={len(payload.messages)}"
    )

    data = client.complete(body)
    return extract_reply(data, payload.model)
