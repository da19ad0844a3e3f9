from flask import Blueprint

coaching_bp = Blueprint("coaching", __name__)

from . import routes  # noqa
