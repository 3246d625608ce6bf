"""
API Errors
==========

JSON error responses shared by all API blueprints.
"""

from flask import jsonify, request
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from .database import db
from .logging_service import LoggingService


class ApiError(Exception):
    """Error raised inside API routes, rendered as {"error": message}."""

    def __init__(self, message, status_code=400, details=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details

    def to_dict(self):
        payload = {'error': self.message}
        if self.details is not None:
            payload['details'] = self.details
        return payload


def get_json_body():
    """Return the request JSON object or raise ApiError(400)"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ApiError('Invalid JSON body', 400)
    return data


def get_int_arg(value, name='id'):
    """Coerce an id taken from a query string or JSON body"""
    if value is None or value == '':
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ApiError(f'Invalid {name}', 400)


def _is_api_request():
    return request.path.startswith('/api/')


def _operation_label():
    """'projects.get_categories' -> 'Get categories'"""
    name = (request.endpoint or '').rsplit('.', 1)[-1]
    if not name:
        return 'Database operation'
    return name.replace('_', ' ').capitalize()


def register_error_handlers(app):
    """Attach JSON handlers for ApiError, DB errors and API-path HTTP errors"""

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(SQLAlchemyError)
    def handle_db_error(error):
        db.session.rollback()
        LoggingService.log_error_with_traceback('database', error, {'path': request.path})
        return jsonify({'error': f'{_operation_label()} failed'}), 500

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        if not _is_api_request():
            return error
        return jsonify({'error': error.description or error.name}), error.code
