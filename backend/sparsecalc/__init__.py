from flask import Flask, jsonify
from flask_cors import CORS
from dotenv import load_dotenv
from werkzeug.exceptions import HTTPException

from .errors import DimensionMismatchError, MatrixError, UnknownOperationError
from .logging_config import setup_logging
from .utils.helpers import generate_response

# Load environment variables
load_dotenv()

def register_error_handlers(app):
    """Return the JSON error envelope for matrix errors and HTTP errors"""

    @app.errorhandler(MatrixError)
    def handle_matrix_error(e):
        if isinstance(e, UnknownOperationError):
            status = 404
        elif isinstance(e, DimensionMismatchError):
            status = 422
        else:
            status = 400
        app.logger.warning("Matrix error: %s", e)
        return jsonify(generate_response(False, error=str(e))), status

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify(generate_response(False, error=e.description)), e.code

def create_app(config_name='development'):
    """Application factory pattern"""
    from .config import config_by_name

    app = Flask(__name__)

    # Configuration
    app.config.from_object(config_by_name.get(config_name, config_by_name['development']))
    setup_logging(app.config['LOG_LEVEL'], app.config['LOG_FILE'])

    # Enable CORS
    CORS(app)

    # Register blueprints
    from .routes.main import main_bp
    from .routes.api import api_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(api_bp)
    register_error_handlers(app)

    return app
