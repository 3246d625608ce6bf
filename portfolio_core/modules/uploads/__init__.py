"""
Uploads Module
==============

Image upload endpoint used by the admin project forms.
"""

from flask import Blueprint

uploads_bp = Blueprint('uploads', __name__, url_prefix='/api/upload')

from . import routes

__all__ = ['uploads_bp']
