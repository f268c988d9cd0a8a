import logging
from flask import Blueprint, request, jsonify
from flask_login import login_required, current_user
from contract_backend.models.template import Template
from contract_backend.utils.auth_middleware import validate_json_data

logger = logging.getLogger(__name__)

templates_bp = Blueprint('templates', __name__)

@templates_bp.route('/templates', methods=['GET'])
@login_required
def get_templates():
    """Get the current user's templates"""
    try:
        templates = Template.find_by_owner(current_user.id)
        return jsonify([template.to_dict() for template in templates]), 200

    except Exception as e:
        logger.exception("Failed to list templates")
        return jsonify({'error': str(e)}), 500

@templates_bp.route('/templates', methods=['POST'])
@login_required
@validate_json_data([])
def create_template():
    """Save a template for the current user"""
    try:
        template = Template.from_request(current_user.id, request.get_json())
        template.save()
        return jsonify(template.to_dict()), 201

    except Exception as e:
        logger.exception("Failed to save template")
        return jsonify({'error': str(e)}), 400
