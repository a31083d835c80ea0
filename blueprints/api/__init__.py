"""
API Blueprint - JSON endpoints
Handles: Contact form submission
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from . import routes
