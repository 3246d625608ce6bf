from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError

from . import personal_info_bp
from ..auth import login_required
from ...core.database import db, PersonalInfo
from ...core.errors import ApiError, get_json_body
from ...core.logging_service import LoggingService

DEFAULT_PERSONAL_INFO = {
    'bio': (
        '5 years of design experience on products with millions of users, covering '
        'UI design and interaction logic. Fluent in Sketch, Photoshop, Illustrator and '
        'Cinema 4D.\n\n'
        'Delivers interaction prototypes, visual design, motion design and component '
        'guidelines, and takes part in research, requirement analysis, design '
        'hand-off, design review and data tracking.\n\n'
        'Also works on IP, brand and poster design.'
    ),
    'email': '13430974149@163.com',
    'wechat': 'im-ahjun',
}

FIELDS = ('bio', 'email', 'wechat')


def get_personal_info_db(create_default=True):
    """Return the single personal-info record, creating the default one"""
    info = PersonalInfo.query.order_by(PersonalInfo.id.asc()).first()
    if info is None and create_default:
        info = PersonalInfo(**DEFAULT_PERSONAL_INFO)
        db.session.add(info)
        db.session.commit()
    return info


@personal_info_bp.route('', methods=['GET'])
def get_personal_info():
    """Fetch personal info"""
    try:
        info = get_personal_info_db()
    except SQLAlchemyError as e:
        db.session.rollback()
        LoggingService.log_error_with_traceback('personal_info', e)
        return jsonify({'error': 'Failed to fetch personal info'}), 500
    return jsonify(info.to_dict())


@personal_info_bp.route('', methods=['PUT'])
@login_required
def update_personal_info():
    """Update personal info, creating the record if none exists"""
    data = get_json_body()
    values = {field: str(data.get(field) or '') for field in FIELDS}
    values['email'] = values['email'].strip()

    if values['email'] and '@' not in values['email']:
        raise ApiError('Invalid email address', 400)

    try:
        info = get_personal_info_db(create_default=False)
        if info is None:
            info = PersonalInfo(**values)
            db.session.add(info)
        else:
            for field, value in values.items():
                setattr(info, field, value)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        LoggingService.log_error_with_traceback('personal_info', e)
        return jsonify({'error': 'Failed to update personal info'}), 500

    LoggingService.log_user_action('personal_info', 'updated personal info')
    return jsonify(info.to_dict())
