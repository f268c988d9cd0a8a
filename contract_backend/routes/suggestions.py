from flask import Blueprint, request, jsonify
from flask_login import login_required
from contract_backend.utils.auth_middleware import validate_json_data

suggestions_bp = Blueprint('suggestions', __name__)

# Fixed clause wording per category; there is no model behind this
SUGGESTIONS = {
    'confidentiality': "Both parties agree to keep confidential any proprietary information received from the other party during the term of this agreement.",
    'termination': "Either party may terminate this agreement with 30 days written notice to the other party.",
    'payment': "The client agrees to pay the provider $X upon completion of the deliverables outlined in this agreement.",
    'liability': "In no event shall either party be liable for any indirect, special, incidental, or consequential damages.",
}

FALLBACK_SUGGESTION = "No suggestion available"

def suggestion_for(suggestion_type):
    if not isinstance(suggestion_type, str):
        return FALLBACK_SUGGESTION
    return SUGGESTIONS.get(suggestion_type, FALLBACK_SUGGESTION)

@suggestions_bp.route('/ai-suggestions', methods=['POST'])
@login_required
@validate_json_data([])
def get_suggestion():
    """Return canned clause text for the requested type"""
    data = request.get_json()
    return jsonify({'suggestion': suggestion_for(data.get('type'))}), 200
