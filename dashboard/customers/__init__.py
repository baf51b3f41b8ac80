from flask import Blueprint

bp_api_user = Blueprint('customers_api_user', __name__, url_prefix='/api/v1/customer')

def register_blueprints(flask_app):
    flask_app.register_blueprint(bp_api_user)

from .models import *
from . import routes
