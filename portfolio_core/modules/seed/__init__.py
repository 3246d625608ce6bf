"""
Seed Module
===========

First-run initialisation: creates the admin account and fills empty
project / experience tables with the default showcase content.
"""

from flask import Blueprint

seed_bp = Blueprint('seed', __name__, url_prefix='/api/init')

from . import routes
from .routes import seed_database

__all__ = ['seed_bp', 'seed_database']
