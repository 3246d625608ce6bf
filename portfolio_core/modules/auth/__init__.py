"""
Auth Module
===========

Admin authentication for the portfolio panel.

Provides:
- Login / logout / session status on /api/auth
- Password change for the signed-in admin
- `login_required` guard for write endpoints
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')

from . import routes
from .utils import login_required, current_admin

__all__ = ['auth_bp', 'login_required', 'current_admin']
