"""
Projects Routes
===============

CRUD for portfolio works. `images` is a list of detail-image URLs stored
as JSON text; `coverImage` is the thumbnail shown in the works grid.
"""

from flask import jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from . import projects_bp
from ..auth import login_required
from ...core.database import db, Project, encode_list
from ...core.errors import ApiError, get_json_body, get_int_arg
from ...core.logging_service import LoggingService

CATEGORY_LABELS = {
    'ToB': 'ToB',
    'App': 'App',
    'Web': 'Web',
    'AI': 'AI',
    'GD': 'GD',
}

# request key -> model attribute
_FIELD_MAP = {
    'title': 'title',
    'description': 'description',
    'category': 'category',
    'coverImage': 'cover_image',
    'order': 'order',
}

# ===== Database Helper Functions =====

def get_all_projects_db(category=None):
    """Get all projects ordered for display, optionally for one category"""
    query = Project.query
    if category:
        query = query.filter(Project.category == category)
    return query.order_by(Project.order.asc(), Project.id.asc()).all()


def get_project_db(project_id):
    """Get single project by ID"""
    return db.session.get(Project, project_id)


def _coerce_order(value):
    if value is None or value == '':
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ApiError('order must be an integer', 400)


def create_project_db(title, category, description='', cover_image='', images=None, order=0):
    """Create new project in database"""
    project = Project(
        title=title,
        description=description or '',
        category=category,
        cover_image=cover_image or '',
        images=encode_list(images or []),
        order=order or 0,
    )
    db.session.add(project)
    db.session.commit()
    return project


def update_project_db(project, data):
    """Apply the keys present in `data` to an existing project"""
    changes = {}
    for key, attr in _FIELD_MAP.items():
        if key not in data:
            continue
        value = data[key]
        if attr == 'order':
            value = _coerce_order(value)
        elif attr in ('title', 'category'):
            if not value or not str(value).strip():
                raise ApiError(f'{key} cannot be empty', 400)
            value = str(value).strip()
        else:
            value = str(value) if value else ''
        changes[attr] = value

    if 'images' in data:
        changes['images'] = encode_list(data['images'] or [])

    for attr, value in changes.items():
        setattr(project, attr, value)
    db.session.commit()
    return project


def delete_project_db(project):
    """Delete project from database"""
    db.session.delete(project)
    db.session.commit()


def reorder_projects_db(ids):
    """Assign order = position + 1 following the given id sequence"""
    projects = {p.id: p for p in Project.query.filter(Project.id.in_(ids)).all()}
    missing = [pid for pid in ids if pid not in projects]
    if missing:
        raise ApiError('Unknown project id', 404, details={'ids': missing})
    for position, pid in enumerate(ids):
        projects[pid].order = position + 1
    db.session.commit()
    return [projects[pid] for pid in ids]


def get_category_counts_db():
    """Return [(category, count)] ordered by category"""
    rows = (
        db.session.query(Project.category, db.func.count(Project.id))
        .group_by(Project.category)
        .order_by(Project.category)
        .all()
    )
    return [(category, count) for category, count in rows]

# ===== Routes =====

@projects_bp.route('', methods=['GET'])
def get_projects():
    """Get projects - public endpoint"""
    category = request.args.get('category') or None
    try:
        projects = get_all_projects_db(category)
    except SQLAlchemyError as e:
        db.session.rollback()
        LoggingService.log_error_with_traceback('projects', e)
        return jsonify({'error': 'Failed to fetch projects'}), 500
    return jsonify([p.to_dict() for p in projects])


@projects_bp.route('/categories', methods=['GET'])
def get_categories():
    """Distinct categories with project counts"""
    counts = dict(get_category_counts_db())
    categories = []
    for key, label in CATEGORY_LABELS.items():
        categories.append({'key': key, 'label': label, 'count': counts.pop(key, 0)})
    # Categories saved outside the known label set
    for key, count in counts.items():
        categories.append({'key': key, 'label': key, 'count': count})
    return jsonify(categories)


@projects_bp.route('/<int:project_id>', methods=['GET'])
def get_project(project_id):
    """Get single project - public endpoint"""
    project = get_project_db(project_id)
    if not project:
        return jsonify({'error': 'Project not found'}), 404
    return jsonify(project.to_dict())


@projects_bp.route('', methods=['POST'])
@login_required
def create_project():
    """Create project"""
    data = get_json_body()
    title = str(data.get('title') or '').strip()
    category = str(data.get('category') or '').strip()

    if not title or not category:
        raise ApiError('Missing required fields', 400)

    images = data.get('images') or []
    if not isinstance(images, list):
        raise ApiError('images must be a list', 400)

    try:
        project = create_project_db(
            title=title,
            category=category,
            description=str(data.get('description') or ''),
            cover_image=str(data.get('coverImage') or ''),
            images=images,
            order=_coerce_order(data.get('order')),
        )
    except SQLAlchemyError as e:
        db.session.rollback()
        LoggingService.log_error_with_traceback('projects', e)
        return jsonify({'error': 'Failed to create project'}), 500

    LoggingService.log_user_action('projects', f'created project {project.id}', details={'title': title})
    return jsonify(project.to_dict())


@projects_bp.route('', methods=['PUT'])
@login_required
def update_project():
    """Update project"""
    data = get_json_body()
    project_id = get_int_arg(data.get('id'))
    if project_id is None:
        raise ApiError('Missing project ID', 400)

    if 'images' in data and data['images'] is not None and not isinstance(data['images'], list):
        raise ApiError('images must be a list', 400)

    project = get_project_db(project_id)
    if not project:
        return jsonify({'error': 'Project not found'}), 404

    try:
        update_project_db(project, data)
    except SQLAlchemyError as e:
        db.session.rollback()
        LoggingService.log_error_with_traceback('projects', e)
        return jsonify({'error': 'Failed to update project'}), 500

    LoggingService.log_user_action('projects', f'updated project {project_id}')
    return jsonify(project.to_dict())


@projects_bp.route('', methods=['DELETE'])
@login_required
def delete_project():
    """Delete project"""
    project_id = get_int_arg(request.args.get('id'))
    if project_id is None:
        raise ApiError('Missing project ID', 400)

    project = get_project_db(project_id)
    if not project:
        return jsonify({'error': 'Project not found'}), 404

    try:
        delete_project_db(project)
    except SQLAlchemyError as e:
        db.session.rollback()
        LoggingService.log_error_with_traceback('projects', e)
        return jsonify({'error': 'Failed to delete project'}), 500

    LoggingService.log_user_action('projects', f'deleted project {project_id}')
    return jsonify({'success': True})


@projects_bp.route('/reorder', methods=['POST'])
@login_required
def reorder_projects():
    """Persist a new display order from an ordered list of ids"""
    data = get_json_body()
    raw_ids = data.get('ids')
    if not isinstance(raw_ids, list) or not raw_ids:
        raise ApiError('ids must be a non-empty list', 400)

    ids = [get_int_arg(pid) for pid in raw_ids]
    if any(pid is None for pid in ids):
        raise ApiError('Invalid id', 400)
    if len(set(ids)) != len(ids):
        raise ApiError('ids must be unique', 400)

    projects = reorder_projects_db(ids)
    LoggingService.log_user_action('projects', 'reordered projects', details={'ids': ids})
    return jsonify([p.to_dict() for p in projects])
