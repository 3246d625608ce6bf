"""
Database layer
==============

Flask-SQLAlchemy instance and the ORM models backing the portfolio:
admin users, projects, work experiences and the personal-info record.
"""

import json
import os
from datetime import datetime

from flask_sqlalchemy import SQLAlchemy
from werkzeug.security import generate_password_hash, check_password_hash

db = SQLAlchemy()


def encode_list(value):
    """Serialize a list of strings to the JSON text stored in the DB."""
    if value is None:
        return '[]'
    if isinstance(value, str):
        # Already encoded, normalise through decode_list
        return json.dumps(decode_list(value), ensure_ascii=False)
    return json.dumps([str(v) for v in value], ensure_ascii=False)


def decode_list(value):
    """Parse a JSON list column. Malformed or non-list JSON yields []."""
    if not value:
        return []
    if isinstance(value, list):
        return value
    try:
        parsed = json.loads(value)
        if isinstance(parsed, list):
            return parsed
    except (json.JSONDecodeError, TypeError):
        pass
    return []


def _iso(value):
    return value.isoformat() if value else None


class User(db.Model):
    __tablename__ = 'user'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)

    def to_dict(self):
        return {'id': self.id, 'username': self.username}


class Project(db.Model):
    __tablename__ = 'project'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False, default='')
    category = db.Column(db.String(50), nullable=False, index=True)
    cover_image = db.Column(db.String(500), nullable=False, default='')
    images = db.Column(db.Text, nullable=False, default='[]')
    order = db.Column(db.Integer, nullable=False, default=0, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description or '',
            'category': self.category,
            'coverImage': self.cover_image or '',
            'images': decode_list(self.images),
            'order': self.order,
            'createdAt': _iso(self.created_at),
            'updatedAt': _iso(self.updated_at),
        }


class WorkExperience(db.Model):
    __tablename__ = 'work_experience'

    id = db.Column(db.Integer, primary_key=True)
    company = db.Column(db.String(200), nullable=False)
    position = db.Column(db.String(200), nullable=False)
    period = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text, nullable=False, default='')
    highlights = db.Column(db.Text, nullable=False, default='[]')
    order = db.Column(db.Integer, nullable=False, default=0, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'company': self.company,
            'position': self.position,
            'period': self.period,
            'description': self.description or '',
            'highlights': decode_list(self.highlights),
            'order': self.order,
            'createdAt': _iso(self.created_at),
            'updatedAt': _iso(self.updated_at),
        }


class PersonalInfo(db.Model):
    __tablename__ = 'personal_info'

    id = db.Column(db.Integer, primary_key=True)
    bio = db.Column(db.Text, nullable=False, default='')
    email = db.Column(db.String(200), nullable=False, default='')
    wechat = db.Column(db.String(100), nullable=False, default='')
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'bio': self.bio or '',
            'email': self.email or '',
            'wechat': self.wechat or '',
            'updatedAt': _iso(self.updated_at),
        }


class AppLog(db.Model):
    __tablename__ = 'app_logs'

    id = db.Column(db.Integer, primary_key=True)
    timestamp = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    level = db.Column(db.String(10), nullable=False, index=True)
    source = db.Column(db.String(50), nullable=False, index=True)
    message = db.Column(db.Text, nullable=False)
    details = db.Column(db.Text)
    ip_address = db.Column(db.String(64))
    user_agent = db.Column(db.String(500))
    request_path = db.Column(db.String(500))
    user_id = db.Column(db.String(64))

    def to_dict(self):
        return {
            'id': self.id,
            'timestamp': _iso(self.timestamp),
            'level': self.level,
            'source': self.source,
            'message': self.message,
            'details': self.details,
            'ip_address': self.ip_address,
            'request_path': self.request_path,
            'user_id': self.user_id,
        }


class Database:
    """Setup helpers around the shared db instance."""

    @staticmethod
    def sqlite_path(uri):
        """Return the filesystem path of a sqlite URI, or None."""
        prefix = 'sqlite:///'
        if not uri or not uri.startswith(prefix):
            return None
        path = uri[len(prefix):]
        if not path or path == ':memory:':
            return None
        return path

    @staticmethod
    def init_app(app):
        """Bind db to the app, create the sqlite directory and all tables"""
        path = Database.sqlite_path(app.config.get('SQLALCHEMY_DATABASE_URI'))
        if path:
            db_dir = os.path.dirname(path)
            if db_dir:
                os.makedirs(db_dir, exist_ok=True)

        db.init_app(app)
        with app.app_context():
            db.create_all()

    @staticmethod
    def check_connection():
        """Run a trivial query; returns (ok, error_message)"""
        try:
            db.session.execute(db.text('SELECT 1'))
            return True, None
        except Exception as e:
            db.session.rollback()
            return False, str(e)
