from flask import jsonify

from evlab.extensions import get_state


def health_controller():
    state = get_state()
    return jsonify({"ok": True, "time": state.now()})


def root_controller():
    state = get_state()
    return jsonify({
        "ok": True,
        "service": state.settings.SERVICE_NAME,
        "time": state.now(),
    })
