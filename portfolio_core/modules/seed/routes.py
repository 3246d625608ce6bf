from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError

from . import seed_bp
from .data import DEFAULT_PROJECTS, DEFAULT_EXPERIENCES
from ...core.config import get_config_value
from ...core.database import db, User, Project, WorkExperience, encode_list
from ...core.logging_service import LoggingService


def seed_database():
    """
    Create the admin account and default content where missing.

    Existing rows are never touched, so calling this repeatedly is safe.
    Must run inside an application context.

    Returns:
        dict with adminCreated, projectsSeeded, experiencesSeeded flags
    """
    username = get_config_value('ADMIN_USERNAME', 'admin')
    password = get_config_value('ADMIN_PASSWORD', 'admin123')

    admin_created = False
    if User.query.filter_by(username=username).first() is None:
        admin = User(username=username)
        admin.set_password(password)
        db.session.add(admin)
        admin_created = True

    projects_seeded = False
    if Project.query.count() == 0:
        for item in DEFAULT_PROJECTS:
            db.session.add(Project(
                title=item['title'],
                description=item['description'],
                category=item['category'],
                cover_image=item['cover_image'],
                images=encode_list(item['images']),
                order=item['order'],
            ))
        projects_seeded = True

    experiences_seeded = False
    if WorkExperience.query.count() == 0:
        for item in DEFAULT_EXPERIENCES:
            db.session.add(WorkExperience(
                company=item['company'],
                position=item['position'],
                period=item['period'],
                description=item['description'],
                highlights=encode_list(item['highlights']),
                order=item['order'],
            ))
        experiences_seeded = True

    db.session.commit()

    result = {
        'adminCreated': admin_created,
        'projectsSeeded': projects_seeded,
        'experiencesSeeded': experiences_seeded,
    }
    if any(result.values()):
        LoggingService.info('seed', 'Database initialised', result)
    return result


@seed_bp.route('', methods=['GET', 'POST'])
def init():
    """Seed admin and default content if none exist"""
    try:
        result = seed_database()
    except SQLAlchemyError as e:
        db.session.rollback()
        LoggingService.log_error_with_traceback('seed', e)
        return jsonify({'error': 'Initialization failed', 'details': str(e)}), 500

    return jsonify({
        'success': True,
        'message': 'Initialization complete',
        **result,
    })
