# Slip Verify extraction: check the mini-QR layout and pull out its fields

from .constants import SLIP_VERIFY_API_TYPE, TRUEMONEY_SLIP_API_TYPE
from .emvco import parse
from .errors import InvalidFormatError
from .models import SlipVerifyData, TrueMoneySlipVerifyData


def slip_verify(payload):
    """Bank code and transaction reference of a Slip Verify QR.

    Used with the banks' Open API to look the transfer up.
    """
    qr = parse(payload, strict=True, sub_tags=True)

    api_type = qr.get_tag_value("00", "00")
    sending_bank = qr.get_tag_value("00", "01")
    trans_ref = qr.get_tag_value("00", "02")

    if api_type != SLIP_VERIFY_API_TYPE or not sending_bank or not trans_ref:
        raise InvalidFormatError("invalid Slip Verify format: missing required fields")

    return SlipVerifyData(sending_bank=sending_bank, trans_ref=trans_ref)


def true_money_slip_verify(payload):
    qr = parse(payload, strict=True, sub_tags=True)

    if (qr.get_tag_value("00", "00") != TRUEMONEY_SLIP_API_TYPE
            or qr.get_tag_value("00", "01") != TRUEMONEY_SLIP_API_TYPE):
        raise InvalidFormatError("invalid TrueMoney Slip Verify format: incorrect API type")

    event_type = qr.get_tag_value("00", "02")
    transaction_id = qr.get_tag_value("00", "03")
    date = qr.get_tag_value("00", "04")
    if not event_type or not transaction_id or not date:
        raise InvalidFormatError("invalid TrueMoney Slip Verify format: missing required fields")

    return TrueMoneySlipVerifyData(
        event_type=event_type,
        transaction_id=transaction_id,
        date=date,
    )
