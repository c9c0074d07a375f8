"""Points calculation for validated receipts.

Every rule is independent and contributes a non-negative integer; the receipt's
points are the sum of all rule contributions. Money values are ``Decimal`` so
no rule depends on binary floating point rounding.
"""

from datetime import datetime
from decimal import Decimal, ROUND_CEILING
from typing import Callable, Dict, List, Tuple

from models.receipt import Receipt

ROUND_TOTAL_POINTS = 50
QUARTER_TOTAL_POINTS = 25
ITEM_PAIR_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10

QUARTER = Decimal('0.25')
DESCRIPTION_PRICE_FACTOR = Decimal('0.2')

AFTERNOON_START_HOUR = 14
AFTERNOON_END_HOUR = 16


def retailer_points(receipt: Receipt) -> int:
    """One point for every ASCII letter or digit in the retailer name."""
    return sum(1 for ch in receipt.retailer if ch.isascii() and ch.isalnum())


def round_total_points(receipt: Receipt) -> int:
    total = receipt.total_amount
    if total == total.to_integral_value():
        return ROUND_TOTAL_POINTS
    return 0


def quarter_total_points(receipt: Receipt) -> int:
    if receipt.total_amount % QUARTER == 0:
        return QUARTER_TOTAL_POINTS
    return 0


def item_pair_points(receipt: Receipt) -> int:
    return len(receipt.items) // 2 * ITEM_PAIR_POINTS


def item_description_points(receipt: Receipt) -> int:
    """
    Award ceil(price * 0.2) for each item whose trimmed description length is
    a positive multiple of three.
    """
    points = 0
    for item in receipt.items:
        length = len(item.short_description.strip())
        if length and length % 3 == 0:
            bonus = item.price_amount * DESCRIPTION_PRICE_FACTOR
            points += int(bonus.to_integral_value(rounding=ROUND_CEILING))
    return points


def odd_day_points(receipt: Receipt) -> int:
    day = datetime.strptime(receipt.purchase_date, '%Y-%m-%d').day
    return ODD_DAY_POINTS if day % 2 else 0


def afternoon_points(receipt: Receipt) -> int:
    """Ten points for purchases from 14:00 up to but not including 16:00."""
    hour = datetime.strptime(receipt.purchase_time, '%H:%M').hour
    if AFTERNOON_START_HOUR <= hour < AFTERNOON_END_HOUR:
        return AFTERNOON_POINTS
    return 0


RULES: List[Tuple[str, Callable[[Receipt], int]]] = [
    ('retailer_name', retailer_points),
    ('round_total', round_total_points),
    ('quarter_total', quarter_total_points),
    ('item_pairs', item_pair_points),
    ('item_descriptions', item_description_points),
    ('odd_day', odd_day_points),
    ('afternoon_purchase', afternoon_points),
]


def points_breakdown(receipt: Receipt) -> Dict[str, int]:
    """Return each rule's contribution keyed by rule name."""
    return {name: rule(receipt) for name, rule in RULES}


def calculate_points(receipt: Receipt) -> int:
    """
    Calculate the points for a receipt that has already passed validation.

    Args:
        receipt: Validated receipt

    Returns:
        Non-negative point total
    """
    return sum(points_breakdown(receipt).values())
