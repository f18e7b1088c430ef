from flask import Response

from evlab.extensions import get_state


def evs_controller():
    """
    GET /api/evs
    Responde los bytes tal como se cargaron al arrancar, o 503 si no hay datos.
    """
    body = get_state().dataset.get()
    return Response(body, status=200, mimetype="application/json")
