from flask import Blueprint, request, jsonify, current_app
import logging

from services.errors import IdentifierSpaceExhaustedError, InvalidReceiptError
from services.receipt_service import ReceiptService

logger = logging.getLogger(__name__)
receipt_bp = Blueprint('receipts', __name__, url_prefix='/receipts')

INVALID_RECEIPT_MESSAGE = 'The receipt is invalid'
NOT_FOUND_MESSAGE = 'No receipt found for that id'
ID_UNAVAILABLE_MESSAGE = 'Unable to assign a receipt id'


def get_receipt_service() -> ReceiptService:
    """Get the receipt service from the Flask app config."""
    receipt_service = current_app.config.get('receipt_service')
    if receipt_service is None:
        logger.warning("Creating new receipt_service instance in routes!")
        receipt_service = ReceiptService()
        current_app.config['receipt_service'] = receipt_service
    return receipt_service


@receipt_bp.route('/process', methods=['POST'])
def process_receipt():
    """Score a JSON receipt and return the id assigned to it."""
    payload = request.get_json(force=True, silent=True)
    if payload is None:
        logger.info("Rejected receipt: body is not valid JSON")
        return jsonify({'error': INVALID_RECEIPT_MESSAGE, 'reason': 'request body must be a JSON object'}), 400

    try:
        receipt_id = get_receipt_service().submit(payload)
    except InvalidReceiptError as e:
        return jsonify({'error': INVALID_RECEIPT_MESSAGE, 'reason': e.reason}), 400
    except IdentifierSpaceExhaustedError as e:
        logger.error(f"Receipt id assignment failed: {e}")
        return jsonify({'error': ID_UNAVAILABLE_MESSAGE}), 500

    return jsonify({'id': receipt_id})


@receipt_bp.route('/<receipt_id>/points', methods=['GET'])
def get_receipt_points(receipt_id: str):
    """Return the points awarded to a previously processed receipt."""
    points = get_receipt_service().get_points(receipt_id)
    if points is None:
        return jsonify({'error': NOT_FOUND_MESSAGE}), 404
    return jsonify({'points': points})
