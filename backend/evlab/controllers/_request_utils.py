from typing import Any, Dict

from flask import request
from flask_limiter.util import get_remote_address


def get_client_identifier() -> str:
    # Con TRUST_PROXY_HOPS > 0, ProxyFix ya reescribio remote_addr
    return get_remote_address() or "unknown"


def get_json_body() -> Dict[str, Any]:
    # JSON invalido o ausente se trata como body vacio
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
