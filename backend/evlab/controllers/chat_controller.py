import logging

from flask import jsonify

from evlab.controllers._request_utils import get_client_identifier, get_json_body
from evlab.extensions import get_state
from evlab.services.access_service import check_chat_access
from evlab.services.chat_relay_service import build_chat_payload, relay_chat

logger = logging.getLogger(__name__)


def chat_controller():
    """
    POST /api/chat
    Los errores tipados (429/401/500/upstream) los convierte error_handlers.
    """
    state = get_state()
    identifier = get_client_identifier()
    data = get_json_body()

    check_chat_access(state, identifier, data.get("password"), state.now())

    payload = build_chat_payload(data)
    # Sin locks tomados durante la llamada saliente
    reply = relay_chat(state.upstream, payload)

    return jsonify(reply.to_dict())
