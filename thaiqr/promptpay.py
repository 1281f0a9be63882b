# PromptPay payload assembly shared by every Tag 29 / Tag 30 flavor

import logging

from .constants import (
    COUNTRY_TH,
    CRC_TAG_ID,
    CURRENCY_THB,
    GUID_BILL_PAYMENT,
    PAYLOAD_FORMAT_INDICATOR,
    POI_DYNAMIC,
    POI_STATIC,
)
from .models import BillPaymentConfig, format_amount
from .tlv import encode, nested, tag, with_crc_tag

logger = logging.getLogger(__name__)


def build_payload(account, amount=None, extra=()):
    """Assemble and checksum a PromptPay payload.

    account: the merchant account tag (29 or 30)
    amount: Decimal or None; presence switches the QR to dynamic (01 = "12")
    extra: tags appended after the amount, before the CRC
    """
    tags = [
        tag("00", PAYLOAD_FORMAT_INDICATOR),
        tag("01", POI_DYNAMIC if amount is not None else POI_STATIC),
        account,
        tag("53", CURRENCY_THB),
        tag("58", COUNTRY_TH),
    ]
    if amount is not None:
        tags.append(tag("54", format_amount(amount)))
    tags.extend(extra)

    payload = with_crc_tag(encode(tags), CRC_TAG_ID, upper_case=True)
    logger.debug("built PromptPay payload with tag %s: %s", account.id, payload)
    return payload


def bill_payment(config: BillPaymentConfig) -> str:
    """PromptPay Bill Payment (Tag 30) payload."""
    sub_tags = [
        tag("00", GUID_BILL_PAYMENT),
        tag("01", config.biller_id),
        tag("02", config.ref1),
    ]
    if config.ref2 is not None:
        sub_tags.append(tag("03", config.ref2))

    extra = []
    if config.ref3 is not None:
        extra.append(nested("62", [tag("07", config.ref3)]))

    return build_payload(nested("30", sub_tags), config.amount, extra)
