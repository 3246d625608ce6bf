"""
Portfolio Core
==============

Core utilities and shared functionality for the portfolio modules.
"""

from .config import Config, get_config_value
from .database import db, Database, User, Project, WorkExperience, PersonalInfo, AppLog
from .errors import ApiError, get_json_body, register_error_handlers
from .logging_service import LoggingService, logger

__all__ = [
    'Config', 'get_config_value',
    'db', 'Database', 'User', 'Project', 'WorkExperience', 'PersonalInfo', 'AppLog',
    'ApiError', 'get_json_body', 'register_error_handlers',
    'LoggingService', 'logger',
]
