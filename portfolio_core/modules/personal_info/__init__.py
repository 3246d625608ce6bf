"""
Personal Info Module
====================

The single bio/contact record shown in the about section.
"""

from flask import Blueprint

personal_info_bp = Blueprint('personal_info', __name__, url_prefix='/api/personal-info')

from . import routes

__all__ = ['personal_info_bp']
