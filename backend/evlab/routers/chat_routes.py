# backend/evlab/routers/chat_routes.py
from flask import Blueprint

from evlab.controllers.chat_controller import chat_controller

chat_bp = Blueprint("chat", __name__)

chat_bp.route("/api/chat", methods=["POST"])(chat_controller)
