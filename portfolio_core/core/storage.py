"""
Storage Utility
===============

Image uploads saved under the app's static folder.
"""

import os
import secrets
from datetime import datetime

from flask import current_app

ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp', 'svg'}


def file_extension(filename):
    return filename.rsplit('.', 1)[-1].lower() if filename and '.' in filename else ''


def allowed_file(filename):
    return file_extension(filename) in ALLOWED_EXTENSIONS


def unique_filename(original):
    """Build a collision-free name keeping the original extension"""
    stamp = datetime.utcnow().strftime('%Y%m%d%H%M%S')
    return f"{stamp}-{secrets.token_hex(6)}.{file_extension(original)}"


def upload_file(file_bytes, filename, subfolder):
    """Save file to the local static folder.

    Args:
        file_bytes: Raw bytes of the uploaded file.
        filename: Target filename (e.g. "20260101120000-ab12cd.jpg").
        subfolder: Subfolder name (e.g. "uploads").

    Returns:
        Public path like "/static/uploads/abc.jpg".
    """
    upload_dir = os.path.join(current_app.static_folder, subfolder)
    os.makedirs(upload_dir, exist_ok=True)
    filepath = os.path.join(upload_dir, filename)
    with open(filepath, 'wb') as f:
        f.write(file_bytes)
    return f"/static/{subfolder}/{filename}"


def list_files(subfolder):
    """List image files in a storage subfolder.

    Returns list of {url, filename} dicts, newest first.
    """
    folder = os.path.join(current_app.static_folder, subfolder)
    if not os.path.isdir(folder):
        return []

    images = []
    for filename in os.listdir(folder):
        if allowed_file(filename):
            images.append({
                'url': f'/static/{subfolder}/{filename}',
                'filename': filename,
            })

    # Sort by modification time, newest first
    images.sort(
        key=lambda img: os.path.getmtime(os.path.join(folder, img['filename'])),
        reverse=True,
    )
    return images


def _resolve_static_path(file_url):
    """Map /static/... to a path inside the static folder, or None"""
    if not file_url or not file_url.startswith('/static/'):
        return None
    static_root = os.path.realpath(current_app.static_folder)
    full_path = os.path.realpath(os.path.join(static_root, file_url[len('/static/'):]))
    if os.path.commonpath([static_root, full_path]) != static_root:
        return None
    return full_path


def delete_file(file_url):
    """Delete a file from the local static folder.

    Returns True when a file was removed.
    """
    full_path = _resolve_static_path(file_url)
    if full_path and os.path.isfile(full_path):
        os.unlink(full_path)
        return True
    return False
