"""
Projects Module
===============

Showcased portfolio works.

Provides:
- Public project listing (optionally filtered by category)
- Project creation, editing and deletion for the admin
- Display ordering via the stored `order` field
"""

from flask import Blueprint

projects_bp = Blueprint('projects', __name__, url_prefix='/api/projects')

from . import routes

__all__ = ['projects_bp']
