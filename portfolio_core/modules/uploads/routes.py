from flask import jsonify, request

from . import uploads_bp
from ..auth import login_required
from ...core.config import get_config_value
from ...core.errors import ApiError
from ...core.logging_service import LoggingService
from ...core.storage import allowed_file, unique_filename, upload_file, list_files, delete_file


def _subfolder():
    return get_config_value('UPLOAD_SUBFOLDER', 'uploads')


@uploads_bp.route('', methods=['POST'])
@login_required
def upload():
    """Store an uploaded image and return its public URL"""
    file = request.files.get('file')
    if file is None or not file.filename:
        return jsonify({'success': False, 'error': 'No file provided'}), 400

    if not allowed_file(file.filename):
        return jsonify({'success': False, 'error': 'File type not allowed'}), 400

    file_bytes = file.read()
    if not file_bytes:
        return jsonify({'success': False, 'error': 'No file provided'}), 400

    filename = unique_filename(file.filename)
    try:
        url = upload_file(file_bytes, filename, _subfolder())
    except OSError as e:
        LoggingService.log_error_with_traceback('uploads', e, {'filename': file.filename})
        return jsonify({'success': False, 'error': 'Upload failed'}), 500

    LoggingService.log_user_action('uploads', f'uploaded {filename}',
                                   details={'original': file.filename, 'size': len(file_bytes)})
    return jsonify({'success': True, 'url': url, 'filename': filename})


@uploads_bp.route('', methods=['GET'])
@login_required
def list_uploads():
    """List uploaded images, newest first"""
    return jsonify(list_files(_subfolder()))


@uploads_bp.route('', methods=['DELETE'])
@login_required
def delete_upload():
    """Remove an uploaded image by URL"""
    url = request.args.get('url', '')
    if not url:
        raise ApiError('Missing url', 400)

    prefix = f"/static/{_subfolder()}/"
    if not url.startswith(prefix):
        raise ApiError('Only uploaded files can be deleted', 400)

    if not delete_file(url):
        return jsonify({'error': 'File not found'}), 404

    LoggingService.log_user_action('uploads', f'deleted {url}')
    return jsonify({'success': True})
