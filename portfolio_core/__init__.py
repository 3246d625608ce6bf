"""
Portfolio Core - A Flask Portfolio Site
=======================================

A personal portfolio website with an embedded admin panel:
- Showcased projects grouped by category
- Work experience timeline and personal bio
- Session-based admin authentication
- Image uploads for project covers and galleries

Usage:
    from portfolio_core import PortfolioCore

    app = Flask(__name__)
    PortfolioCore(app)

or simply:

    from portfolio_core import create_app
    app = create_app()
"""

import os
from datetime import timedelta

import click
from flask import Flask
from flask_cors import CORS

from .core.config import Config
from .core.database import Database
from .core.errors import register_error_handlers
from .core.logging_service import LoggingService

__version__ = '0.1.0'

DEFAULT_FEATURES = {
    'auth': True,
    'projects': True,
    'experiences': True,
    'personal_info': True,
    'seed': True,
    'uploads': True,
    'site': True,
}

# Keys copied from Config onto app.config when not already set
_CONFIG_KEYS = (
    'SECRET_KEY', 'IS_PRODUCTION', 'DB_DIR', 'SQLALCHEMY_DATABASE_URI',
    'SQLALCHEMY_TRACK_MODIFICATIONS', 'UPLOAD_SUBFOLDER', 'MAX_UPLOAD_MB',
    'ADMIN_USERNAME', 'ADMIN_PASSWORD', 'CORS_ORIGINS', 'SITE_NAME',
    'SITE_TAGLINE', 'SESSION_LIFETIME',
)


class PortfolioCore:
    """Flask extension wiring the portfolio modules into an app."""

    def __init__(self, app=None, config=None):
        self._config = {'features': dict(DEFAULT_FEATURES)}
        if config:
            self._config['features'].update(config.get('features', {}))
        self._registered = []
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self._apply_config(app)
        Database.init_app(app)
        self._setup_cors(app)
        register_error_handlers(app)
        self._register_modules(app)
        self._register_commands(app)

        app.extensions['portfolio_core'] = self

    def _apply_config(self, app):
        for key in _CONFIG_KEYS:
            if app.config.get(key) is None:
                app.config[key] = getattr(Config, key)

        if app.config.get('MAX_CONTENT_LENGTH') is None:
            app.config['MAX_CONTENT_LENGTH'] = int(app.config['MAX_UPLOAD_MB']) * 1024 * 1024

        # Session security
        app.config['SESSION_COOKIE_HTTPONLY'] = True
        app.config['SESSION_COOKIE_SAMESITE'] = 'Lax'
        app.config['SESSION_COOKIE_SECURE'] = bool(app.config['IS_PRODUCTION'])
        app.config['PERMANENT_SESSION_LIFETIME'] = timedelta(seconds=int(app.config['SESSION_LIFETIME']))

    def _setup_cors(self, app):
        origins = app.config.get('CORS_ORIGINS') or ''
        if isinstance(origins, str):
            origins = [o.strip() for o in origins.split(',') if o.strip()]
        if origins:
            CORS(app, resources={r'/api/*': {'origins': origins}}, supports_credentials=True)

    def _register_modules(self, app):
        features = self._config['features']

        if features.get('auth'):
            from .modules.auth import auth_bp
            app.register_blueprint(auth_bp)
            self._registered.append('auth')

        if features.get('projects'):
            from .modules.projects import projects_bp
            app.register_blueprint(projects_bp)
            self._registered.append('projects')

        if features.get('experiences'):
            from .modules.experiences import experiences_bp
            app.register_blueprint(experiences_bp)
            self._registered.append('experiences')

        if features.get('personal_info'):
            from .modules.personal_info import personal_info_bp
            app.register_blueprint(personal_info_bp)
            self._registered.append('personal_info')

        if features.get('seed'):
            from .modules.seed import seed_bp
            app.register_blueprint(seed_bp)
            self._registered.append('seed')

        if features.get('uploads'):
            from .modules.uploads import uploads_bp
            app.register_blueprint(uploads_bp)
            self._registered.append('uploads')

        if features.get('site'):
            from .modules.site import site_bp
            app.register_blueprint(site_bp)
            self._registered.append('site')

    def _register_commands(self, app):
        @app.cli.command('seed')
        def seed_command():
            """Create the admin account and default content."""
            from .modules.seed import seed_database
            result = seed_database()
            for key, value in result.items():
                click.echo(f"{key}: {value}")

        @app.cli.command('cleanup-logs')
        @click.option('--days', default=30, show_default=True, help='Days of logs to keep.')
        def cleanup_logs_command(days):
            """Delete log entries older than --days."""
            deleted = LoggingService.cleanup_old_logs(days)
            click.echo(f"Deleted {deleted} log entries")

    def get_registered_modules(self):
        return list(self._registered)


def create_app(config=None, features=None):
    """
    Application factory.

    Args:
        config (dict): Values placed on app.config before initialisation
        features (dict): Module toggles, see DEFAULT_FEATURES
    """
    config = dict(config or {})
    static_folder = config.pop('STATIC_FOLDER', None) or Config.STATIC_FOLDER
    os.makedirs(static_folder, exist_ok=True)

    app = Flask(__name__, static_folder=static_folder)
    app.config.update(config)

    PortfolioCore(app, {'features': features or {}})
    return app


__all__ = ['PortfolioCore', 'create_app', 'DEFAULT_FEATURES']
