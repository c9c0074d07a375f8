"""Receipt model implementation."""

from decimal import Decimal
from typing import Any, Dict, List, Tuple
from pydantic import BaseModel, ConfigDict, Field, StrictStr


def to_amount(value: str) -> Decimal:
    """Parse a validated ``digits.dd`` money string."""
    return Decimal(value)


class ReceiptItem(BaseModel):
    """A single line item as submitted on a receipt."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='ignore')

    short_description: StrictStr = Field(..., alias='shortDescription')
    price: StrictStr

    @property
    def price_amount(self) -> Decimal:
        return to_amount(self.price)

    def to_payload(self) -> Dict[str, str]:
        """Convert the item back to its JSON wire shape."""
        return self.model_dump(by_alias=True)


class Receipt(BaseModel):
    """Submitted purchase receipt.

    Field values are kept exactly as submitted (strings); format checks live in
    ``utils.receipt_validator``. The ``*_amount`` properties are only meaningful
    once the receipt has passed validation.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='ignore')

    retailer: StrictStr
    purchase_date: StrictStr = Field(..., alias='purchaseDate')
    purchase_time: StrictStr = Field(..., alias='purchaseTime')
    items: Tuple[ReceiptItem, ...]
    total: StrictStr

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def total_amount(self) -> Decimal:
        return to_amount(self.total)

    def to_payload(self) -> Dict[str, Any]:
        """Convert the receipt back to its JSON wire shape."""
        data = self.model_dump(by_alias=True)
        data['items'] = [item.to_payload() for item in self.items]
        return data

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> 'Receipt':
        """Build a receipt from decoded JSON.

        Raises:
            pydantic.ValidationError: If required keys are missing or have the wrong JSON type
        """
        return cls.model_validate(payload)


def format_validation_errors(errors: List[Dict[str, Any]]) -> str:
    """Render pydantic error entries as a short ``field: message`` string."""
    parts = []
    for error in errors:
        location = '.'.join(str(part) for part in error.get('loc', ())) or 'receipt'
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return '; '.join(parts)
