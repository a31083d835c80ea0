"""
Portfolio Blueprint - Project list and project detail pages
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='/projects')

from . import routes
