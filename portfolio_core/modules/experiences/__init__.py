"""
Experiences Module
==================

Work-experience timeline shown in the about section.
"""

from flask import Blueprint

experiences_bp = Blueprint('experiences', __name__, url_prefix='/api/experiences')

from . import routes

__all__ = ['experiences_bp']
