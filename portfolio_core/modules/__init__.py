"""
Portfolio Modules
=================

Flask blueprint modules making up the portfolio site and its admin API.
"""

__all__ = ['auth', 'projects', 'experiences', 'personal_info', 'seed', 'uploads', 'site']
