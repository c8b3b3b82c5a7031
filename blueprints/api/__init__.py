"""
API Blueprint - JSON endpoints behind the portfolio page
Handles: Contact form submission, contact listing, resume download
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from . import routes
