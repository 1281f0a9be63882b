"""
Tests for the BOT barcode record.
"""

from decimal import Decimal

import pytest

from thaiqr.barcode import BOTBarcode
from thaiqr.errors import BarcodeFormatError


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def test_parse_without_ref2_and_amount():
    barcode = BOTBarcode.from_string("|099999999999990\r111222333444\r\r0")
    assert barcode.biller_id == "099999999999990"
    assert barcode.ref1 == "111222333444"
    assert barcode.ref2 is None
    assert barcode.amount is None
    assert barcode.minor_units is None


def test_parse_with_ref2_and_amount():
    barcode = BOTBarcode.from_string("|099400016550100\r123456789012\r670429\r364922")
    assert barcode.biller_id == "099400016550100"
    assert barcode.ref1 == "123456789012"
    assert barcode.ref2 == "670429"
    assert barcode.amount == Decimal("3649.22")
    assert barcode.minor_units == 364922


@pytest.mark.parametrize("payload", [
    "00020101021230650016A00000067701011201150994000165501000212123456789012030667042953037645802TH54073649.2263044534",
    "|099400016550100\r123456789012\r670429",
    "|a\rb\rc\rd\re",
])
def test_parse_rejects_bad_layout(payload):
    with pytest.raises(BarcodeFormatError):
        BOTBarcode.from_string(payload)


@pytest.mark.parametrize("amount", ["ABC", "12.50", "-100", ""])
def test_parse_rejects_bad_amount(amount):
    with pytest.raises(BarcodeFormatError):
        BOTBarcode.from_string(f"|099999999999990\r111222333444\r\r{amount}")


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def test_format_without_ref2_and_amount():
    barcode = BOTBarcode(biller_id="099999999999990", ref1="111222333444")
    assert str(barcode) == "|099999999999990\r111222333444\r\r0"


def test_format_with_ref2_and_amount():
    barcode = BOTBarcode(
        biller_id="099999999999990", ref1="111222333444", ref2="REF2", amount=100.50,
    )
    assert str(barcode) == "|099999999999990\r111222333444\rREF2\r10050"


@pytest.mark.parametrize("amount, expected", [
    (100.555, "10055"),
    ("100.559", "10055"),
    (Decimal("0.019"), "1"),
    (3649.22, "364922"),
    (0.29, "29"),
    (1.005, "100"),
])
def test_format_truncates_to_whole_satang(amount, expected):
    barcode = BOTBarcode(biller_id="0", ref1="1", amount=amount)
    assert str(barcode).split("\r")[-1] == expected


def test_zero_amount_is_kept_distinct_from_absent():
    zero = BOTBarcode(biller_id="0", ref1="1", amount=0)
    absent = BOTBarcode(biller_id="0", ref1="1")
    assert zero.amount == Decimal("0")
    assert absent.amount is None
    assert zero != absent


@pytest.mark.parametrize("payload", [
    "|099999999999990\r111222333444\r\r0",
    "|099400016550100\r123456789012\r670429\r364922",
    "|099999999999990\r111222333444\rREF2\r10050",
])
def test_format_parse_round_trip(payload):
    assert str(BOTBarcode.from_string(payload)) == payload


# ---------------------------------------------------------------------------
# Conversion to QR
# ---------------------------------------------------------------------------

def test_to_qr_tag30():
    barcode = BOTBarcode.from_string("|099400016550100\r123456789012\r670429\r364922")
    assert barcode.to_qr_tag30() == (
        "00020101021230650016A00000067701011201150994000165501000212123456789012"
        "030667042953037645802TH54073649.2263044534"
    )


def test_to_qr_tag30_without_ref2_and_amount():
    barcode = BOTBarcode.from_string("|099999999999990\r111222333444\r\r0")
    assert barcode.to_qr_tag30() == (
        "00020101021130550016A0000006770101120115099999999999990021211122233344453037645802TH63043EE7"
    )
