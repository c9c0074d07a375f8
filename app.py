"""Flask application serving receipt points."""

import logging
from typing import Optional

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config.settings import ServiceConfig
from routes.receipt_routes import receipt_bp
from services.receipt_service import ReceiptService
from storage.memory_storage import InMemoryPointsStorage
from utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: Optional[ServiceConfig] = None,
               receipt_service: Optional[ReceiptService] = None,
               configure_logging: bool = True) -> Flask:
    """
    Build the Flask application.

    Args:
        config: Service configuration, read from the environment when omitted
        receipt_service: Service instance to use instead of a fresh in-memory one
        configure_logging: Whether to install the logging configuration

    Returns:
        Configured Flask application
    """
    config = config or ServiceConfig()
    config.validate()

    if configure_logging:
        setup_logging(
            log_dir=config.log_dir,
            debug_mode=config.debug,
            log_to_file=config.log_to_file
        )

    app = Flask(__name__)
    app.config.update(
        DEBUG=config.debug,
        SERVICE_CONFIG=config.to_dict()
    )

    if receipt_service is None:
        storage = InMemoryPointsStorage(max_attempts=config.id_max_attempts)
        receipt_service = ReceiptService(storage)
    app.config['receipt_service'] = receipt_service

    app.register_blueprint(receipt_bp)

    @app.errorhandler(Exception)
    def handle_error(error):
        """Global error handler returning JSON for unexpected failures."""
        if isinstance(error, HTTPException):
            return jsonify({'error': error.description}), error.code
        logger.error(f"Unhandled error: {str(error)}", exc_info=True)
        return jsonify({
            'error': 'Internal server error',
            'error_type': error.__class__.__name__
        }), 500

    logger.info(f"Receipt points service configured (debug={config.debug})")
    return app
