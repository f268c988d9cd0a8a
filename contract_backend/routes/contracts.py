#routes/contracts.py
import logging
from flask import Blueprint, request, jsonify
from flask_login import login_required, current_user
from contract_backend.errors import ValidationError
from contract_backend.models.contract import Contract
from contract_backend.utils.auth_middleware import validate_json_data

logger = logging.getLogger(__name__)

contracts_bp = Blueprint('contracts', __name__)

NOT_FOUND = 'Contract not found'

@contracts_bp.route('/contracts', methods=['GET'])
@login_required
def get_contracts():
    """Get contracts the current user owns or collaborates on"""
    try:
        contracts = Contract.find_accessible(current_user)
        return jsonify([contract.to_dict() for contract in contracts]), 200

    except Exception as e:
        logger.exception("Failed to list contracts")
        return jsonify({'error': str(e)}), 500

@contracts_bp.route('/contracts', methods=['POST'])
@login_required
@validate_json_data([])
def create_contract():
    """Create a draft contract owned by the current user"""
    try:
        contract = Contract.from_request(current_user.id, request.get_json())
        contract.save()

        logger.info("Contract %s created by %s", contract.id, current_user.id)
        return jsonify(contract.to_dict()), 201

    except ValidationError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.exception("Failed to create contract")
        return jsonify({'error': str(e)}), 400

@contracts_bp.route('/contracts/<contract_id>', methods=['PUT'])
@login_required
@validate_json_data([])
def update_contract(contract_id):
    """Edit contract terms; owner only"""
    try:
        contract = Contract.update_for(current_user, contract_id, request.get_json())
        if not contract:
            return jsonify({'error': NOT_FOUND}), 404

        logger.info("Contract %s updated by %s", contract.id, current_user.id)
        return jsonify(contract.to_dict()), 200

    except ValidationError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.exception("Failed to update contract %s", contract_id)
        return jsonify({'error': str(e)}), 400

@contracts_bp.route('/contracts/<contract_id>/sign', methods=['POST'])
@login_required
@validate_json_data([])
def sign_contract(contract_id):
    """Add a signature; owner or any collaborator"""
    try:
        data = request.get_json()
        contract = Contract.append_signature(
            current_user,
            contract_id,
            data.get('name'),
            data.get('signature')
        )
        if not contract:
            return jsonify({'error': NOT_FOUND}), 404

        logger.info("Contract %s signed by %s (%d signatures)",
                    contract.id, current_user.id, len(contract.signatures))
        return jsonify(contract.to_dict()), 200

    except ValidationError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.exception("Failed to sign contract %s", contract_id)
        return jsonify({'error': str(e)}), 400
