import logging
from typing import Any, Mapping, Optional, Union

from models.receipt import Receipt
from services.errors import InvalidReceiptError
from services.points_calculator import calculate_points, points_breakdown
from storage.base import PointsStorage
from storage.memory_storage import InMemoryPointsStorage
from utils.logging_config import log_with_context
from utils.receipt_validator import ReceiptValidator

logger = logging.getLogger(__name__)


class ReceiptService:
    """
    Service for scoring submitted receipts and looking up their points.
    """

    def __init__(self,
                 storage: Optional[PointsStorage] = None,
                 validator: Optional[ReceiptValidator] = None):
        """
        Initialize the receipt service.

        Args:
            storage: Points storage instance
            validator: Receipt validator instance
        """
        self.storage = storage if storage is not None else InMemoryPointsStorage()
        self.validator = validator or ReceiptValidator()

    def submit(self, submission: Union[Receipt, Mapping[str, Any]]) -> str:
        """
        Validate and score a receipt, then store its points.

        Args:
            submission: Receipt model or decoded JSON body

        Returns:
            The id assigned to the receipt

        Raises:
            InvalidReceiptError: If the receipt fails validation
            IdentifierSpaceExhaustedError: If no unique id could be assigned
        """
        receipt, result = self.validator.check(submission)
        if receipt is None:
            logger.info(f"Rejected receipt: {result.reason}")
            raise InvalidReceiptError(result.reason)

        points = calculate_points(receipt)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Points breakdown: {points_breakdown(receipt)}")

        receipt_id = self.storage.put(points)
        log_with_context(logger, logging.INFO, f"Processed receipt {receipt_id}",
                         {"receipt_id": receipt_id, "points": points})
        return receipt_id

    def get_points(self, receipt_id: str) -> Optional[int]:
        """Return the points for a receipt id, or None if no such receipt exists."""
        points = self.storage.get(receipt_id)
        if points is None:
            logger.debug(f"No receipt found for id {receipt_id!r}")
        return points
