"""
Centralized logging service for the portfolio application.
Provides structured logging with database storage and easy integration.
"""

import json
import logging
import traceback
from datetime import datetime, timedelta

from flask import request, session, has_app_context, has_request_context

from .database import db, AppLog

_stdlib_logger = logging.getLogger('portfolio_core')


class LoggingService:
    """Centralized logging service for application-wide logging"""

    @staticmethod
    def _get_request_context():
        """Extract request context information"""
        if not has_request_context():
            return None, None, None

        try:
            ip_address = request.headers.get('X-Forwarded-For', request.remote_addr)
            if ip_address and ',' in ip_address:
                ip_address = ip_address.split(',')[0].strip()

            user_agent = request.headers.get('User-Agent', '')
            request_path = request.path

            return ip_address, user_agent, request_path
        except Exception:
            return None, None, None

    @staticmethod
    def _session_user():
        if not has_request_context():
            return None
        admin_id = session.get('admin_id')
        return str(admin_id) if admin_id is not None else None

    @staticmethod
    def log(level, source, message, details=None, user_id=None):
        """
        Log a message to the database

        Args:
            level (str): Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            source (str): Source component (auth, projects, uploads, etc.)
            message (str): Main log message
            details (str/dict): Additional details (will be JSON-encoded if dict)
            user_id (str): Optional user identifier, defaults to the session admin
        """
        level = level.upper()
        _stdlib_logger.log(
            getattr(logging, level, logging.INFO),
            "[%s] %s", source, message
        )

        if isinstance(details, dict):
            details = json.dumps(details, indent=2, default=str)

        if not has_app_context():
            return

        try:
            ip_address, user_agent, request_path = LoggingService._get_request_context()
            if user_id is None:
                user_id = LoggingService._session_user()

            # Callers log after their own commit or rollback, so the
            # session only holds this entry here
            db.session.add(AppLog(
                timestamp=datetime.utcnow(),
                level=level,
                source=source,
                message=message,
                details=details,
                ip_address=ip_address,
                user_agent=(user_agent or '')[:500] or None,
                request_path=request_path,
                user_id=str(user_id) if user_id is not None else None,
            ))
            db.session.commit()
        except Exception as e:
            # Fallback to console logging if database fails
            db.session.rollback()
            _stdlib_logger.warning("Logging service error: %s", e)
            if details:
                _stdlib_logger.info("Details: %s", details)

    @staticmethod
    def debug(source, message, details=None, user_id=None):
        """Log debug message"""
        LoggingService.log('DEBUG', source, message, details, user_id)

    @staticmethod
    def info(source, message, details=None, user_id=None):
        """Log info message"""
        LoggingService.log('INFO', source, message, details, user_id)

    @staticmethod
    def warning(source, message, details=None, user_id=None):
        """Log warning message"""
        LoggingService.log('WARNING', source, message, details, user_id)

    @staticmethod
    def error(source, message, details=None, user_id=None):
        """Log error message"""
        LoggingService.log('ERROR', source, message, details, user_id)

    @staticmethod
    def critical(source, message, details=None, user_id=None):
        """Log critical message"""
        LoggingService.log('CRITICAL', source, message, details, user_id)

    @staticmethod
    def log_user_action(source, action, user_id=None, details=None):
        """Log admin actions (login, create, delete, etc.)"""
        LoggingService.info(source, f"User action: {action}", details, user_id)

    @staticmethod
    def log_api_call(source, endpoint, method='GET', status_code=200, details=None):
        """Log API calls"""
        message = f"API {method} {endpoint} - Status: {status_code}"
        level = 'INFO' if 200 <= status_code < 400 else 'WARNING' if status_code < 500 else 'ERROR'
        LoggingService.log(level, source, message, details)

    @staticmethod
    def log_error_with_traceback(source, error, details=None):
        """Log error with full traceback"""
        error_details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'traceback': traceback.format_exc()
        }
        if details:
            error_details['additional_details'] = details

        LoggingService.error(source, f"Exception occurred: {type(error).__name__}", error_details)

    @staticmethod
    def log_security_event(message, details=None, ip_address=None):
        """Log security-related events"""
        if ip_address and has_request_context():
            # Override request IP if provided
            details = details or {}
            details['provided_ip'] = ip_address

        LoggingService.warning('security', message, details)

    @staticmethod
    def get_recent_logs(limit=100, level=None, source=None):
        """Return the newest log entries as dicts"""
        query = AppLog.query
        if level:
            query = query.filter(AppLog.level == level.upper())
        if source:
            query = query.filter(AppLog.source == source)
        entries = query.order_by(AppLog.timestamp.desc(), AppLog.id.desc()).limit(limit).all()
        return [entry.to_dict() for entry in entries]

    @staticmethod
    def cleanup_old_logs(days_to_keep=30):
        """Clean up old log entries"""
        try:
            cutoff = datetime.utcnow() - timedelta(days=days_to_keep)
            deleted_count = AppLog.query.filter(AppLog.timestamp < cutoff).delete()
            db.session.commit()

            LoggingService.info('system', f"Cleaned up {deleted_count} old log entries")
            return deleted_count

        except Exception as e:
            db.session.rollback()
            LoggingService.error('system', f"Failed to cleanup old logs: {e}")
            return 0


# Convenience instance for easy importing
logger = LoggingService()
