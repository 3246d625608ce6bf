from flask import jsonify, render_template

from . import site_bp
from ..projects.routes import CATEGORY_LABELS
from ...core.config import get_config_value
from ...core.database import Database


@site_bp.app_context_processor
def inject_site_config():
    return {
        'site_name': get_config_value('SITE_NAME', 'Portfolio'),
        'site_tagline': get_config_value('SITE_TAGLINE', ''),
        'category_labels': CATEGORY_LABELS,
    }


@site_bp.route('/')
def home():
    """Portfolio page; content is loaded client-side from the JSON API"""
    return render_template('site/index.html')


@site_bp.route('/health')
def health():
    """Liveness check including a database round trip"""
    db_ok, db_error = Database.check_connection()
    checks = {'database': {'status': 'ok' if db_ok else 'critical'}}
    if db_error:
        checks['database']['error'] = db_error

    status = 'ok' if db_ok else 'critical'
    return jsonify({'status': status, 'checks': checks}), 200 if db_ok else 503
