# backend/evlab/routers/system_routes.py
from flask import Blueprint

from evlab.controllers.system_controller import health_controller, root_controller

system_bp = Blueprint("system", __name__)

system_bp.route("/", methods=["GET"])(root_controller)
system_bp.route("/api/health", methods=["GET"])(health_controller)
