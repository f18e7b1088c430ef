# backend/evlab/routers/data_routes.py
from flask import Blueprint

from evlab.controllers.data_controller import evs_controller

data_bp = Blueprint("data", __name__)

data_bp.route("/api/evs", methods=["GET"])(evs_controller)
