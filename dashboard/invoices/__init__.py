from flask import Blueprint

bp_client_user = Blueprint('invoices_client_user', __name__, url_prefix='/dashboard/invoices',
                           template_folder='templates')

LISTING_PATH = '/dashboard/invoices'

def register_blueprints(flask_app):
    flask_app.register_blueprint(bp_client_user)

from .models import *
from . import routes
