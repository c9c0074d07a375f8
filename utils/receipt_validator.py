"""
Receipt Validator

Checks a submitted receipt's structure and field formats before it is scored.
Validation stops at the first rule that fails and reports that rule's reason.
"""

import re
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from models.receipt import Receipt, ReceiptItem, format_validation_errors, to_amount

# Set up logging
logger = logging.getLogger(__name__)

RETAILER_PATTERN = re.compile(r'\S')
DATE_PATTERN = re.compile(r'\d{4}-\d{2}-\d{2}', re.ASCII)
TIME_PATTERN = re.compile(r'\d{2}:\d{2}', re.ASCII)
AMOUNT_PATTERN = re.compile(r'\d+\.\d{2}', re.ASCII)
DESCRIPTION_PATTERN = re.compile(r'[\w\s\-]+', re.ASCII)

# Amounts are capped so that stored points always fit a signed 64-bit integer
MAX_AMOUNT_CENTS = 2 ** 63 - 1
MAX_AMOUNT_LENGTH = len(f"{MAX_AMOUNT_CENTS // 100}.00")

DATE_FORMAT = '%Y-%m-%d'
TIME_FORMAT = '%H:%M'


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a receipt."""
    ok: bool
    reason: Optional[str] = None

    @classmethod
    def success(cls) -> 'ValidationResult':
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: str) -> 'ValidationResult':
        return cls(ok=False, reason=reason)

    def __bool__(self) -> bool:
        return self.ok


def _parses(value: str, pattern: re.Pattern, fmt: str) -> bool:
    if not pattern.fullmatch(value):
        return False
    try:
        datetime.strptime(value, fmt)
    except ValueError:
        return False
    return True


def is_valid_amount(value: str) -> bool:
    """Check for an unsigned decimal with exactly two fractional digits within the amount cap."""
    if len(value.lstrip("0")) > MAX_AMOUNT_LENGTH or not AMOUNT_PATTERN.fullmatch(value):
        return False
    return to_amount(value) * 100 <= MAX_AMOUNT_CENTS


class ReceiptValidator:
    """Validates receipts against the submission rules."""

    def validate(self, receipt: Receipt) -> ValidationResult:
        """
        Validate a receipt.

        Rules are checked in order: retailer, purchase date, purchase time,
        total, then the items.

        Args:
            receipt: Receipt to validate

        Returns:
            ValidationResult carrying the reason of the first failed rule
        """
        if not RETAILER_PATTERN.search(receipt.retailer):
            return ValidationResult.failure("invalid retailer")

        if not _parses(receipt.purchase_date, DATE_PATTERN, DATE_FORMAT):
            return ValidationResult.failure("invalid purchase date")

        if not _parses(receipt.purchase_time, TIME_PATTERN, TIME_FORMAT):
            return ValidationResult.failure("invalid purchase time")

        if not is_valid_amount(receipt.total):
            return ValidationResult.failure("invalid total format")

        if not receipt.items:
            return ValidationResult.failure("no items provided")

        for item in receipt.items:
            result = self.validate_item(item)
            if not result:
                return result

        if sum(item.price_amount for item in receipt.items) * 100 > MAX_AMOUNT_CENTS:
            return ValidationResult.failure("invalid item price format")

        return ValidationResult.success()

    def validate_item(self, item: ReceiptItem) -> ValidationResult:
        """Validate a single receipt item."""
        # Apostrophes and commas are not accepted in descriptions
        if not DESCRIPTION_PATTERN.fullmatch(item.short_description):
            return ValidationResult.failure("invalid item short description")

        if not is_valid_amount(item.price):
            return ValidationResult.failure("invalid item price format")

        return ValidationResult.success()

    def parse(self, payload: Any) -> Tuple[Optional[Receipt], ValidationResult]:
        """
        Build a receipt from decoded JSON without validating field formats.

        Args:
            payload: Decoded JSON body

        Returns:
            Tuple of (receipt or None, structural validation result)
        """
        if not isinstance(payload, Mapping):
            return None, ValidationResult.failure("malformed receipt: expected a JSON object")

        try:
            receipt = Receipt.from_payload(dict(payload))
        except ValidationError as e:
            return None, ValidationResult.failure(
                f"malformed receipt: {format_validation_errors(e.errors())}"
            )

        return receipt, ValidationResult.success()

    def check(self, submission: Union[Receipt, Mapping[str, Any]]) -> Tuple[Optional[Receipt], ValidationResult]:
        """Parse (when given raw data) and validate a submission."""
        if isinstance(submission, Receipt):
            receipt = submission
        else:
            receipt, result = self.parse(submission)
            if not result:
                return None, result

        result = self.validate(receipt)
        if not result:
            logger.debug(f"Receipt rejected: {result.reason}")
            return None, result
        return receipt, result
