#!/usr/bin/env python3
"""
Flask REST API for the supergroup directory.

Serves the parsed supergroup table as JSON behind a shared password.
"""

from flask import Flask, request, jsonify
from flask_cors import CORS
import secrets
import sys
import logging
import traceback
from datetime import datetime, timezone

from supergroups.groups_cache import get_default_cache, load_groups_data
from supergroups.utils.config import get_api_password, get_cors_origins

# Create Flask app
app = Flask(__name__)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

CORS(app,
     origins=get_cors_origins(),
     methods=['GET', 'POST', 'OPTIONS'],
     allow_headers=['Content-Type'])


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


def password_matches(candidate) -> bool:
    """
    Check a submitted password against TOP_SECRET_PASSWORD.

    Always False while no password is configured.
    """
    expected = get_api_password()
    if expected is None or not isinstance(candidate, str):
        return False
    return secrets.compare_digest(candidate.encode('utf-8'), expected.encode('utf-8'))


@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint (no auth required)."""
    logger.debug("Health check requested")
    cache = get_default_cache()

    return jsonify({
        'status': 'ok',
        'service': 'supergroups',
        'data_dir': str(cache.assembler.data_dir),
        'data_loaded': cache.is_loaded,
        'timestamp': utc_timestamp()
    }), 200


@app.route('/api/data', methods=['POST'])
def data():
    """
    Return the supergroup table.

    Requires:
        - JSON body: {"password": str}

    Returns:
        JSON: {"supergroups": [...]}
        HTTP 200: Success
        HTTP 400: Body is not a JSON object
        HTTP 401: Wrong password
        HTTP 500: Data could not be loaded
    """
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        logger.warning(f"Invalid request body from {request.remote_addr}")
        return jsonify({'error': 'Invalid request body'}), 400

    if not password_matches(body.get('password')):
        logger.warning(f"Wrong password from {request.remote_addr}")
        return jsonify({'error': 'Wrong password'}), 401

    try:
        groups_data = load_groups_data()
    except OSError as e:
        logger.error(f"Failed to load supergroup data: {e}")
        logger.error(traceback.format_exc())
        return jsonify({
            'error': 'Data unavailable',
            'message': 'Supergroup data could not be read.',
            'timestamp': utc_timestamp()
        }), 500

    logger.info(f"Served {len(groups_data)} supergroups to {request.remote_addr}")
    return jsonify(groups_data.to_dict()), 200


@app.errorhandler(404)
def not_found(error):
    """Handle 404 errors."""
    logger.warning(f"404 Not Found: {request.path} from {request.remote_addr}")
    return jsonify({
        'error': 'Endpoint not found',
        'path': request.path,
        'timestamp': utc_timestamp()
    }), 404


@app.errorhandler(500)
def internal_error(error):
    """Handle 500 errors."""
    logger.error(f"500 Internal Server Error: {error}")
    logger.error(traceback.format_exc())
    return jsonify({
        'error': 'Internal server error',
        'message': 'An unexpected error occurred',
        'timestamp': utc_timestamp()
    }), 500


# Log all requests (middleware)
@app.before_request
def log_request():
    """Log incoming requests."""
    logger.debug(f"{request.method} {request.path} from {request.remote_addr}")


@app.after_request
def log_response(response):
    """Log response status."""
    logger.debug(f"Response: {response.status_code}")
    return response


if __name__ == '__main__':
    # For local development only
    app.run(debug=True, host='127.0.0.1', port=5000)
