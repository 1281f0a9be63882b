# Human-readable view of a parsed Thai QR payload (type, phone, refs, amount...)

import logging
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from pydantic import BaseModel

from .constants import (
    CRC_TAG_ID,
    POI_STATIC,
    SLIP_CRC_TAG_ID,
    TAG_NAMES,
    TRUEMONEY_EWALLET_PREFIX,
)
from .encoding import decode_tag81
from .errors import ThaiQRError
from .models import SlipVerifyData, TrueMoneySlipVerifyData
from .tlv import TLVTag
from .validate import slip_verify, true_money_slip_verify

logger = logging.getLogger(__name__)


class QRCodeInfo(BaseModel):
    type: Optional[str] = None
    reusable: Optional[bool] = None
    phone_number: Optional[str] = None
    national_id: Optional[str] = None
    tax_id: Optional[str] = None
    ewallet_id: Optional[str] = None
    amount: Optional[Decimal] = None
    currency: Optional[str] = None
    country: Optional[str] = None
    biller_id: Optional[str] = None
    ref1: Optional[str] = None
    ref2: Optional[str] = None
    ref3: Optional[str] = None
    message: Optional[str] = None
    slip_verify: Optional[SlipVerifyData] = None
    true_money_slip_verify: Optional[TrueMoneySlipVerifyData] = None
    crc_valid: bool = False
    tags: List[TLVTag] = []


def display_phone(value):
    """0066812345678 -> 0812345678; anything else is returned as-is."""
    if value.startswith("0066") and len(value) == 13:
        return "0" + value[4:]
    return value


def _amount(raw):
    try:
        value = Decimal(raw)
    except InvalidOperation:
        logger.debug("ignoring unparseable amount %r", raw)
        return None
    return value if value.is_finite() else None


def inspect_qr(qr):
    """Work out which kind of Thai QR this is and pull out its fields."""
    info = QRCodeInfo(tags=qr.tags)

    # Slip Verify flavors carry nothing else worth reporting
    try:
        info.slip_verify = slip_verify(qr.payload)
    except ThaiQRError as exc:
        logger.debug("not a Slip Verify QR: %s", exc)
    else:
        info.type = "SlipVerify"
        info.crc_valid = qr.validate(SLIP_CRC_TAG_ID)
        return info

    try:
        info.true_money_slip_verify = true_money_slip_verify(qr.payload)
    except ThaiQRError as exc:
        logger.debug("not a TrueMoney Slip Verify QR: %s", exc)
    else:
        info.type = "TrueMoneySlipVerify"
        info.crc_valid = qr.validate(SLIP_CRC_TAG_ID, upper_case=False)
        return info

    info.currency = qr.get_tag_value("53") or None
    info.country = qr.get_tag_value("58") or None
    if qr.get_tag("01") is not None:
        info.reusable = qr.get_tag_value("01") == POI_STATIC
    if qr.get_tag_value("54"):
        info.amount = _amount(qr.get_tag_value("54"))

    if qr.get_tag("29") is not None:
        info.type = "PromptPayAnyID"
        if qr.get_tag("29", "01") is not None:
            info.phone_number = display_phone(qr.get_tag_value("29", "01"))
        if qr.get_tag("29", "02") is not None:
            info.national_id = info.tax_id = qr.get_tag_value("29", "02")
        if qr.get_tag("29", "03") is not None:
            ewallet = qr.get_tag_value("29", "03")
            if ewallet.startswith(TRUEMONEY_EWALLET_PREFIX):
                info.type = "TrueMoney"
                info.phone_number = ewallet[len(TRUEMONEY_EWALLET_PREFIX):]
            else:
                info.ewallet_id = ewallet

    if qr.get_tag("30") is not None:
        info.type = "PromptPayBillPayment"
        info.biller_id = qr.get_tag_value("30", "01") or None
        info.ref1 = qr.get_tag_value("30", "02") or None
        info.ref2 = qr.get_tag_value("30", "03") or None
        info.ref3 = qr.get_tag_value("62", "07") or None

    if qr.get_tag_value("81"):
        info.message = decode_tag81(qr.get_tag_value("81"))

    for crc_tag_id in (CRC_TAG_ID, SLIP_CRC_TAG_ID):
        if qr.get_tag(crc_tag_id) is not None:
            info.crc_valid = qr.validate(crc_tag_id)
            break

    return info


def tag_tree(tags, indent=0):
    lines = []
    prefix = "  " * indent
    for t in tags:
        name = TAG_NAMES.get(t.id, "") if indent == 0 else ""
        label = f" [{name}]" if name else ""
        lines.append(f"{prefix}Tag {t.id}{label} (length: {t.length}): {t.value}")
        if t.sub_tags:
            lines.extend(tag_tree(t.sub_tags, indent + 1))
    return lines


def summary_text(info: QRCodeInfo) -> str:
    lines = [
        f"Type: {info.type or 'Unknown'}",
        f"Reusable: {'Yes' if info.reusable else 'No'}" if info.reusable is not None else None,
        f"Phone Number: {info.phone_number}" if info.phone_number else None,
        f"National ID: {info.national_id}" if info.national_id else None,
        f"E-Wallet ID: {info.ewallet_id}" if info.ewallet_id else None,
        f"Biller ID: {info.biller_id}" if info.biller_id else None,
        f"Reference 1: {info.ref1}" if info.ref1 else None,
        f"Reference 2: {info.ref2}" if info.ref2 else None,
        f"Reference 3: {info.ref3}" if info.ref3 else None,
        f"Amount: {info.amount:.2f}" if info.amount is not None else None,
        f"Currency: {info.currency}" if info.currency else None,
        f"Country: {info.country}" if info.country else None,
        f"Message: {info.message}" if info.message else None,
    ]
    if info.slip_verify:
        lines += [
            "Slip Verify Data:",
            f"  Sending Bank: {info.slip_verify.sending_bank}",
            f"  Transaction Reference: {info.slip_verify.trans_ref}",
        ]
    if info.true_money_slip_verify:
        lines += [
            "TrueMoney Slip Verify Data:",
            f"  Event Type: {info.true_money_slip_verify.event_type}",
            f"  Transaction ID: {info.true_money_slip_verify.transaction_id}",
            f"  Date: {info.true_money_slip_verify.date}",
        ]
    lines.append(f"CRC Valid: {info.crc_valid}")
    return "\n".join(filter(None, lines))
