"""Tests for receipt validation."""
import pytest

from conftest import CORNER_MARKET_RECEIPT, TARGET_RECEIPT, make_payload
from models.receipt import Receipt
from utils.receipt_validator import ReceiptValidator, ValidationResult, is_valid_amount


@pytest.fixture
def validator():
    return ReceiptValidator()


def check(validator, payload):
    receipt, result = validator.check(payload)
    return result


@pytest.mark.parametrize("payload", [TARGET_RECEIPT, CORNER_MARKET_RECEIPT])
def test_sample_receipts_are_valid(validator, payload):
    receipt, result = validator.check(payload)
    
    assert result.ok is True
    assert result.reason is None
    assert isinstance(receipt, Receipt)


def test_accepts_receipt_model(validator, target_receipt):
    receipt, result = validator.check(target_receipt)
    
    assert result
    assert receipt is target_receipt


@pytest.mark.parametrize("retailer", ["", "   ", "\t\n"])
def test_blank_retailer_is_rejected(validator, retailer):
    result = check(validator, make_payload(retailer=retailer))
    
    assert not result
    assert result.reason == "invalid retailer"


@pytest.mark.parametrize("retailer", ["M&M Corner Market", "  Target  ", "7-Eleven"])
def test_retailer_with_visible_characters_is_accepted(validator, retailer):
    assert check(validator, make_payload(retailer=retailer))


@pytest.mark.parametrize("purchase_date", [
    "2022-02-30",   # not a calendar date
    "2022-13-01",
    "2022-1-01",    # month must have two digits
    "01-01-2022",
    "2022/01/01",
    "",
])
def test_invalid_purchase_date_is_rejected(validator, purchase_date):
    result = check(validator, make_payload(purchaseDate=purchase_date))
    
    assert result.reason == "invalid purchase date"


def test_leap_day_is_accepted(validator):
    assert check(validator, make_payload(purchaseDate="2024-02-29"))


@pytest.mark.parametrize("purchase_time", ["24:00", "13:60", "1:05", "13:5", "1:05 PM", "13:01:00", ""])
def test_invalid_purchase_time_is_rejected(validator, purchase_time):
    result = check(validator, make_payload(purchaseTime=purchase_time))
    
    assert result.reason == "invalid purchase time"


@pytest.mark.parametrize("purchase_time", ["00:00", "23:59", "16:00"])
def test_purchase_time_bounds_are_accepted(validator, purchase_time):
    assert check(validator, make_payload(purchaseTime=purchase_time))


@pytest.mark.parametrize("total", ["35.3", "35", "35.355", "-35.35", "+35.35", "3.5e1", ".35", "35.35 ", "٣٥.٣٥"])
def test_invalid_total_is_rejected(validator, total):
    result = check(validator, make_payload(total=total))
    
    assert result.reason == "invalid total format"


def test_empty_items_are_rejected(validator):
    result = check(validator, make_payload(items=[]))
    
    assert result.reason == "no items provided"


@pytest.mark.parametrize("description", ["Ben's Cookies", "Chips, Salsa", "", "Soda!"])
def test_invalid_item_description_is_rejected(validator, description):
    items = [{"shortDescription": description, "price": "1.00"}]
    result = check(validator, make_payload(items=items))
    
    assert result.reason == "invalid item short description"


def test_item_description_allows_hyphen_underscore_and_digits(validator):
    items = [{"shortDescription": "Klarbrunn 12-PK_12 FL OZ", "price": "12.00"}]
    
    assert check(validator, make_payload(items=items))


@pytest.mark.parametrize("price", ["1", "1.0", "1.000", "-1.00", "1,00"])
def test_invalid_item_price_is_rejected(validator, price):
    items = [{"shortDescription": "Gatorade", "price": price}]
    result = check(validator, make_payload(items=items))
    
    assert result.reason == "invalid item price format"


def test_first_failure_wins(validator):
    """Rules are reported in order and only the first failure is returned."""
    payload = make_payload(retailer=" ", purchaseDate="bad", total="35.3", items=[])
    
    assert check(validator, payload).reason == "invalid retailer"
    
    payload["retailer"] = "Target"
    assert check(validator, payload).reason == "invalid purchase date"


def test_later_invalid_item_is_reported(validator):
    items = [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.2"},
    ]
    
    assert check(validator, make_payload(items=items)).reason == "invalid item price format"


@pytest.mark.parametrize("payload", [None, [], "receipt", 42])
def test_non_object_payload_is_malformed(validator, payload):
    receipt, result = validator.check(payload)
    
    assert receipt is None
    assert result.reason.startswith("malformed receipt")


def test_wrong_json_type_is_malformed(validator):
    receipt, result = validator.check(make_payload(items="Gatorade"))
    
    assert receipt is None
    assert result.reason.startswith("malformed receipt")
    assert "items" in result.reason


def test_validation_result_truthiness():
    assert ValidationResult.success()
    assert not ValidationResult.failure("invalid retailer")


@pytest.mark.parametrize("value,expected", [("0.00", True), ("100.25", True), ("1.5", False), ("1e2", False)])
def test_is_valid_amount(value, expected):
    assert is_valid_amount(value) is expected


@pytest.mark.parametrize("total,valid", [
    ("92233720368547758.07", True),     # 2**63 - 1 cents
    ("92233720368547758.08", False),
    ("000092233720368547758.07", True),
    ("100000000000000000000000.00", False),
    ("1" * 5000 + ".00", False),
])
def test_total_is_capped_at_64_bit_cents(validator, total, valid):
    result = check(validator, make_payload(total=total))
    
    assert bool(result) is valid
    if not valid:
        assert result.reason == "invalid total format"


@pytest.mark.parametrize("price,valid", [
    ("92233720368547758.07", True),
    ("92233720368547758.08", False),
    ("9" * 5000 + ".99", False),
])
def test_item_price_is_capped_at_64_bit_cents(validator, price, valid):
    result = check(validator, make_payload(items=[{"shortDescription": "abc", "price": price}]))
    
    assert bool(result) is valid
    if not valid:
        assert result.reason == "invalid item price format"


def test_combined_item_prices_are_capped(validator):
    items = [
        {"shortDescription": "abc", "price": "92233720368547758.00"},
        {"shortDescription": "abc", "price": "0.08"},
    ]
    
    assert check(validator, make_payload(items=items[:1]))
    assert check(validator, make_payload(items=items)).reason == "invalid item price format"


def test_retailer_of_non_breaking_spaces_is_rejected(validator):
    result = check(validator, make_payload(retailer="\u00a0\u00a0"))
    
    assert result.reason == "invalid retailer"
