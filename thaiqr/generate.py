# Thai QR payload generators: PromptPay AnyID / Bill Payment, TrueMoney,
# Slip Verify mini-QR and BOT barcode

import logging

from .barcode import BOTBarcode
from .constants import (
    COUNTRY_TH,
    GUID_CREDIT_TRANSFER,
    MSISDN_LENGTH,
    PROXY_TYPES,
    SLIP_CRC_TAG_ID,
    SLIP_VERIFY_API_TYPE,
    TRUEMONEY_EWALLET_PREFIX,
    TRUEMONEY_SLIP_API_TYPE,
)
from .encoding import encode_tag81
from .errors import InvalidConfigError
from .models import (
    AnyIDConfig,
    BillPaymentConfig,
    BOTBarcodeConfig,
    SlipVerifyConfig,
    TrueMoneyConfig,
    TrueMoneySlipVerifyConfig,
)
from .promptpay import bill_payment, build_payload
from .tlv import encode, nested, tag, with_crc_tag

logger = logging.getLogger(__name__)

__all__ = [
    "any_id",
    "bill_payment",
    "true_money",
    "slip_verify",
    "true_money_slip_verify",
    "bot_barcode",
    "bot_barcode_to_qr",
    "format_msisdn",
]


def format_msisdn(mobile):
    """0812223333 -> 0066812223333 (66 country code, 13 digits)."""
    if mobile.startswith("0"):
        mobile = mobile[1:]
    return ("66" + mobile).rjust(MSISDN_LENGTH, "0")[-MSISDN_LENGTH:]


def any_id(config: AnyIDConfig) -> str:
    """PromptPay AnyID (Tag 29) payload."""
    proxy_type = PROXY_TYPES.get(config.type)
    if proxy_type is None:
        raise InvalidConfigError("type", config.type)

    target = config.target
    if config.type == "MSISDN":
        target = format_msisdn(target)

    account = nested("29", [
        tag("00", GUID_CREDIT_TRANSFER),
        tag(proxy_type, target),
    ])
    return build_payload(account, config.amount)


def true_money(config: TrueMoneyConfig) -> str:
    """TrueMoney Wallet payload.

    Other apps scan it like a regular e-Wallet PromptPay QR and ignore the
    personal message in Tag 81.
    """
    account = nested("29", [
        tag("00", GUID_CREDIT_TRANSFER),
        tag("03", TRUEMONEY_EWALLET_PREFIX + config.mobile_no),
    ])
    extra = []
    if config.message is not None:
        extra.append(tag("81", encode_tag81(config.message)))
    return build_payload(account, config.amount, extra)


def slip_verify(config: SlipVerifyConfig) -> str:
    """Slip Verify mini-QR, the one printed on bank transfer slips."""
    tags = [
        nested("00", [
            tag("00", SLIP_VERIFY_API_TYPE),
            tag("01", config.sending_bank),
            tag("02", config.trans_ref),
        ]),
        tag("51", COUNTRY_TH),
    ]
    payload = with_crc_tag(encode(tags), SLIP_CRC_TAG_ID, upper_case=True)
    logger.debug("built Slip Verify payload: %s", payload)
    return payload


def true_money_slip_verify(config: TrueMoneySlipVerifyConfig) -> str:
    """TrueMoney flavor of Slip Verify.

    Differs from the bank one: API type 01/01, no Tag 51, TrueMoney fields
    in Tag 00, and a lowercase checksum.
    """
    tags = [
        nested("00", [
            tag("00", TRUEMONEY_SLIP_API_TYPE),
            tag("01", TRUEMONEY_SLIP_API_TYPE),
            tag("02", config.event_type),
            tag("03", config.transaction_id),
            tag("04", config.date),
        ]),
    ]
    payload = with_crc_tag(encode(tags), SLIP_CRC_TAG_ID, upper_case=False)
    logger.debug("built TrueMoney Slip Verify payload: %s", payload)
    return payload


def bot_barcode(config: BOTBarcodeConfig) -> str:
    return str(BOTBarcode(
        biller_id=config.biller_id,
        ref1=config.ref1,
        ref2=config.ref2,
        amount=config.amount,
    ))


def bot_barcode_to_qr(biller_id, ref1, ref2=None, amount=None):
    """Bill Payment (Tag 30) payload from BOT barcode fields."""
    return bill_payment(BillPaymentConfig(
        biller_id=biller_id,
        ref1=ref1,
        ref2=ref2,
        amount=amount,
    ))
