import os
from dotenv import load_dotenv

load_dotenv(override=True)

IS_PRODUCTION = (
    os.getenv('ENVIRONMENT') == 'production' or
    os.getenv('FLASK_ENV') == 'production' or
    os.getenv('PRODUCTION') == '1'
)


class Config:
    """
    Base configuration for the portfolio site.
    Deployments override these through environment variables or app.config.
    """
    # Flask settings
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY', 'dev-secret-key-change-in-production')
    IS_PRODUCTION = IS_PRODUCTION

    # Get DB_DIR from environment, or use a default if not set
    DB_DIR = os.getenv('DB_DIR', os.path.join(os.getcwd(), 'databases'))

    SQLALCHEMY_DATABASE_URI = os.getenv(
        'DATABASE_URL',
        'sqlite:///' + os.path.join(DB_DIR, 'portfolio.db')
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    STATIC_FOLDER = os.getenv('STATIC_FOLDER', os.path.join(os.getcwd(), 'static'))

    # Uploads land in <STATIC_FOLDER>/<UPLOAD_SUBFOLDER>
    UPLOAD_SUBFOLDER = os.getenv('UPLOAD_SUBFOLDER', 'uploads')
    MAX_UPLOAD_MB = int(os.getenv('MAX_UPLOAD_MB', '10'))

    # Seeded admin account
    ADMIN_USERNAME = os.getenv('ADMIN_USERNAME', 'admin')
    ADMIN_PASSWORD = os.getenv('ADMIN_PASSWORD', 'admin123')

    # Comma separated list, empty disables CORS
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '')

    # Branding
    SITE_NAME = os.getenv('SITE_NAME', 'Tan Yajun | UI/UX Designer Portfolio')
    SITE_TAGLINE = os.getenv('SITE_TAGLINE', 'UI/UX designer focused on interface and interaction design')

    # Session lifetime in seconds (7 days)
    SESSION_LIFETIME = 60 * 60 * 24 * 7

    # Port for local server
    PORT = int(os.getenv('PORT', '5000'))


def get_config_value(key, default=None):
    """Get configuration value: Flask app config first, then Config, then env var"""
    try:
        from flask import current_app
        val = current_app.config.get(key)
        if val is not None and val != '':
            return val
    except RuntimeError:
        pass
    val = getattr(Config, key, None)
    if val is not None and val != '':
        return val
    return os.getenv(key, default)
