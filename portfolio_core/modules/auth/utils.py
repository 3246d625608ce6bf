from functools import wraps

from flask import jsonify, session

from ...core.database import db, User


def current_admin():
    """Return the User bound to the session, clearing stale sessions"""
    admin_id = session.get('admin_id')
    if admin_id is None:
        return None

    admin = db.session.get(User, admin_id)
    if admin is None:
        session.pop('admin_id', None)
        session.pop('admin_username', None)
    return admin


def login_required(f):
    """Decorator to require an authenticated admin session"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if current_admin() is None:
            return jsonify({'error': 'Unauthorized'}), 401
        return f(*args, **kwargs)
    return decorated_function


def validate_new_password(password):
    """Minimum requirements for a replacement admin password"""
    return isinstance(password, str) and len(password) >= 6
