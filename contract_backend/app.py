# app.py
import logging
import os
from flask import Flask, jsonify
from flask_login import LoginManager
from flask_cors import CORS
from dotenv import load_dotenv

# Import models and routes
from contract_backend.config.database import db_instance
from contract_backend.config.logging_config import configure_logging
from contract_backend.routes.auth import auth_bp
from contract_backend.routes.templates import templates_bp
from contract_backend.routes.contracts import contracts_bp
from contract_backend.routes.clauses import clauses_bp
from contract_backend.routes.suggestions import suggestions_bp
from contract_backend.utils.auth_middleware import load_user_from_request, unauthorized

logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()

def create_app(config=None, mongo_client=None):
    """Application factory"""
    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = os.getenv('SECRET_KEY', 'your-secret-key-change-in-production')
    app.config['JWT_SECRET'] = os.getenv('JWT_SECRET', app.config['SECRET_KEY'])
    app.config['JWT_ALGORITHM'] = 'HS256'
    app.config['MONGODB_URI'] = os.getenv('MONGODB_URI', 'mongodb://localhost:27017/contract_manager')
    app.config['MONGODB_DB'] = os.getenv('MONGODB_DB', 'contract_manager')
    app.config['LOG_LEVEL'] = os.getenv('LOG_LEVEL', 'INFO')
    if config:
        app.config.update(config)

    configure_logging(app.config['LOG_LEVEL'])

    # Initialize extensions
    CORS(app)

    # Initialize database
    db_instance.initialize(app, client=mongo_client)

    # Identity comes only from the bearer token; no session login
    login_manager = LoginManager()
    login_manager.init_app(app)
    login_manager.request_loader(load_user_from_request)
    login_manager.unauthorized_handler(unauthorized)

    # Register blueprints
    app.register_blueprint(auth_bp, url_prefix='/api')
    app.register_blueprint(templates_bp, url_prefix='/api')
    app.register_blueprint(contracts_bp, url_prefix='/api')
    app.register_blueprint(clauses_bp, url_prefix='/api')
    app.register_blueprint(suggestions_bp, url_prefix='/api')

    # Error handlers
    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(500)
    def internal_error(error):
        return jsonify({'error': 'Internal server error'}), 500

    return app

def main():
    app = create_app()

    if app.config['JWT_SECRET'] == 'your-secret-key-change-in-production':
        logger.warning("JWT_SECRET not set; tokens are signed with the development key")

    port = int(os.getenv('PORT', 3000))
    logger.info("Starting contract backend on port %d", port)

    app.run(
        host='0.0.0.0',
        port=port,
        debug=os.getenv('FLASK_ENV') == 'development'
    )

if __name__ == '__main__':
    main()
