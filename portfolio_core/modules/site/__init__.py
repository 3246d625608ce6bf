"""
Site Module
===========

Public single-page portfolio with the embedded admin panel, plus the
health check endpoint.
"""

from flask import Blueprint

site_bp = Blueprint(
    'site',
    __name__,
    template_folder='templates',
    static_folder='static',
    static_url_path='/site-static'
)

from . import routes

__all__ = ['site_bp']
