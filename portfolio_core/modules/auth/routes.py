"""
Auth Routes
===========

Session-based admin authentication. The session cookie is Flask's signed
cookie; only the admin id and username are stored in it.
"""

from flask import jsonify, session

from . import auth_bp
from .utils import current_admin, login_required, validate_new_password
from ...core.database import db, User
from ...core.errors import ApiError, get_json_body
from ...core.logging_service import LoggingService


@auth_bp.route('', methods=['POST'])
def login():
    """Admin login"""
    data = get_json_body()
    username = data.get('username') or ''
    password = data.get('password') or ''

    if not isinstance(username, str) or not isinstance(password, str):
        raise ApiError('Username and password are required', 400)
    username = username.strip()
    if not username or not password:
        raise ApiError('Username and password are required', 400)

    user = User.query.filter_by(username=username).first()

    if not user or not user.check_password(password):
        LoggingService.log_security_event('Failed admin login', {'username': username})
        return jsonify({'error': 'Invalid username or password'}), 401

    session.clear()
    session.permanent = True
    session['admin_id'] = user.id
    session['admin_username'] = user.username

    LoggingService.log_user_action('auth', 'login', user_id=user.id)
    return jsonify({'success': True, 'user': user.to_dict()})


@auth_bp.route('', methods=['DELETE'])
def logout():
    """Admin logout"""
    admin_id = session.get('admin_id')
    session.clear()
    if admin_id is not None:
        LoggingService.log_user_action('auth', 'logout', user_id=admin_id)
    return jsonify({'success': True})


@auth_bp.route('', methods=['GET'])
def status():
    """Report whether the current session belongs to an admin"""
    admin = current_admin()
    if admin is None:
        return jsonify({'authenticated': False})
    return jsonify({'authenticated': True, 'user': admin.to_dict()})


@auth_bp.route('/password', methods=['PUT'])
@login_required
def change_password():
    """Change the signed-in admin's password"""
    data = get_json_body()
    current_password = data.get('currentPassword') or ''
    new_password = data.get('newPassword') or ''

    if not current_password or not new_password:
        raise ApiError('All fields are required', 400)

    if not validate_new_password(new_password):
        raise ApiError('Password must be at least 6 characters long', 400)

    admin = current_admin()
    if not admin.check_password(current_password):
        LoggingService.log_security_event('Wrong current password on change', {'username': admin.username})
        raise ApiError('Current password is incorrect', 400)

    admin.set_password(new_password)
    db.session.commit()

    LoggingService.log_user_action('auth', 'password changed', user_id=admin.id)
    return jsonify({'success': True})
