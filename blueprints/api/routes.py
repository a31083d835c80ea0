"""
API Routes - Contact form submission endpoint
"""

from flask import request, jsonify, current_app
from utils.contact import (
    ValidationError,
    RECEIVED_MESSAGE,
    validate_submission,
    process_submission
)
from utils.helpers import get_client_ip
from . import api_bp


# Every other method, OPTIONS included, falls through to the app's 405 handler
@api_bp.route('/contact', methods=['POST'], provide_automatic_options=False)
def contact():
    """Accept {name, email, message} as JSON and acknowledge it"""
    payload = request.get_json(silent=True)

    try:
        submission = validate_submission(payload)
    except ValidationError as e:
        current_app.logger.info(f"Rejected contact submission from {get_client_ip()}: {str(e)}")
        return jsonify({'message': str(e)}), 400

    process_submission(submission, client_ip=get_client_ip())
    return jsonify({'message': RECEIVED_MESSAGE}), 200
