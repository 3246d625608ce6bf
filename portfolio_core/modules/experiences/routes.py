from flask import jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from . import experiences_bp
from ..auth import login_required
from ...core.database import db, WorkExperience, encode_list
from ...core.errors import ApiError, get_json_body, get_int_arg
from ...core.logging_service import LoggingService

REQUIRED_FIELDS = ('company', 'position', 'period')


def get_all_experiences_db():
    """Get all work experiences in display order"""
    return WorkExperience.query.order_by(WorkExperience.order.asc(), WorkExperience.id.asc()).all()


def _coerce_order(value):
    if value is None or value == '':
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ApiError('order must be an integer', 400)


def _coerce_highlights(value):
    if value is None:
        return []
    if not isinstance(value, list):
        raise ApiError('highlights must be a list', 400)
    return [str(item).strip() for item in value if str(item).strip()]


@experiences_bp.route('', methods=['GET'])
def get_experiences():
    """Fetch all work experiences"""
    try:
        experiences = get_all_experiences_db()
    except SQLAlchemyError as e:
        db.session.rollback()
        LoggingService.log_error_with_traceback('experiences', e)
        # The about section renders an empty timeline rather than an error
        return jsonify([]), 200
    return jsonify([exp.to_dict() for exp in experiences])


@experiences_bp.route('', methods=['POST'])
@login_required
def create_experience():
    """Create new work experience"""
    data = get_json_body()
    values = {field: str(data.get(field) or '').strip() for field in REQUIRED_FIELDS}

    if not all(values.values()):
        raise ApiError('Missing required fields', 400)

    experience = WorkExperience(
        company=values['company'],
        position=values['position'],
        period=values['period'],
        description=str(data.get('description') or ''),
        highlights=encode_list(_coerce_highlights(data.get('highlights'))),
        order=_coerce_order(data.get('order')),
    )

    try:
        db.session.add(experience)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        LoggingService.log_error_with_traceback('experiences', e)
        return jsonify({'error': 'Failed to create experience'}), 500

    LoggingService.log_user_action('experiences', f'created experience {experience.id}',
                                   details={'company': experience.company})
    return jsonify(experience.to_dict())


@experiences_bp.route('', methods=['PUT'])
@login_required
def update_experience():
    """Update work experience"""
    data = get_json_body()
    experience_id = get_int_arg(data.get('id'))
    if experience_id is None:
        raise ApiError('Missing experience ID', 400)

    experience = db.session.get(WorkExperience, experience_id)
    if not experience:
        return jsonify({'error': 'Experience not found'}), 404

    changes = {}
    for field in REQUIRED_FIELDS:
        if field in data:
            value = str(data.get(field) or '').strip()
            if not value:
                raise ApiError(f'{field} cannot be empty', 400)
            changes[field] = value
    if 'description' in data:
        changes['description'] = str(data.get('description') or '')
    if 'highlights' in data:
        changes['highlights'] = encode_list(_coerce_highlights(data.get('highlights')))
    if 'order' in data:
        changes['order'] = _coerce_order(data.get('order'))

    try:
        for attr, value in changes.items():
            setattr(experience, attr, value)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        LoggingService.log_error_with_traceback('experiences', e)
        return jsonify({'error': 'Failed to update experience'}), 500

    LoggingService.log_user_action('experiences', f'updated experience {experience_id}')
    return jsonify(experience.to_dict())


@experiences_bp.route('', methods=['DELETE'])
@login_required
def delete_experience():
    """Delete work experience"""
    experience_id = get_int_arg(request.args.get('id'))
    if experience_id is None:
        raise ApiError('Missing experience ID', 400)

    experience = db.session.get(WorkExperience, experience_id)
    if not experience:
        return jsonify({'error': 'Experience not found'}), 404

    try:
        db.session.delete(experience)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        LoggingService.log_error_with_traceback('experiences', e)
        return jsonify({'error': 'Failed to delete experience'}), 500

    LoggingService.log_user_action('experiences', f'deleted experience {experience_id}')
    return jsonify({'success': True})
