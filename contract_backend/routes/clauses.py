import logging
from flask import Blueprint, jsonify
from contract_backend.models.clause import Clause

logger = logging.getLogger(__name__)

clauses_bp = Blueprint('clauses', __name__)

@clauses_bp.route('/clauses', methods=['GET'])
def get_clauses():
    """Public clause library; no authentication required"""
    try:
        return jsonify([clause.to_dict() for clause in Clause.find_public()]), 200

    except Exception as e:
        logger.exception("Failed to list clauses")
        return jsonify({'error': str(e)}), 500
