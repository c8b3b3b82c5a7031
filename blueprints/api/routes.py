"""
API Routes - Contact pipeline and resume download
"""

import os
from flask import request, jsonify, send_file, current_app
from utils.errors import StorageError, NotFoundError
from utils.notifications import notify_new_contact
from utils.security import check_rate_limit
from utils.validation import validate_contact
from . import api_bp


def get_store():
    """Contact store owned by the running application"""
    return current_app.extensions['contact_store']


def get_rate_limiter():
    return current_app.extensions['contact_rate_limiter']


@api_bp.route('/contact', methods=['POST'])
def submit_contact():
    """Contact form submission - validates, stores, notifies owner"""
    if not check_rate_limit(get_rate_limiter(), 'contact'):
        current_app.logger.warning("Contact form rate limit exceeded")
        return jsonify({'success': False, 'message': 'Too many requests'}), 429

    result = validate_contact(request.get_json(silent=True))
    if not result.ok:
        current_app.logger.warning(
            f"Rejected contact submission: {', '.join(sorted({e.field for e in result.errors}))}")
        return jsonify({
            'success': False,
            'message': 'Invalid form data',
            'errors': result.errors_as_dicts()
        }), 400

    try:
        record = get_store().create(result.draft)
    except StorageError as e:
        current_app.logger.error(f"Contact form error: {str(e)}")
        return jsonify({'success': False, 'message': 'Failed to send message'}), 500

    current_app.logger.info(f"Contact message stored, message_id: {record.id}")
    notify_new_contact(record)

    return jsonify({'success': True, 'message': 'Message sent successfully!'})


@api_bp.route('/contacts', methods=['GET'])
def list_contacts():
    """All stored contact messages, oldest first"""
    try:
        records = get_store().list_all()
    except StorageError as e:
        current_app.logger.error(f"Contact listing error: {str(e)}")
        return jsonify({'success': False, 'message': 'Failed to retrieve contacts'}), 500

    return jsonify([record.to_dict() for record in records])


def resolve_resume_path():
    path = current_app.config.get('RESUME_PATH')
    if not path or not os.path.isfile(path):
        raise NotFoundError(f"Resume file not found at {path}")
    return path


@api_bp.route('/resume', methods=['GET'])
def download_resume():
    """Stream the resume file as a download"""
    try:
        path = resolve_resume_path()
    except NotFoundError as e:
        current_app.logger.warning(str(e))
        return jsonify({'success': False, 'message': 'Resume not found'}), 404

    return send_file(path,
                     mimetype='application/pdf',
                     as_attachment=True,
                     download_name=current_app.config.get('RESUME_DOWNLOAD_NAME', 'Resume.pdf'))
