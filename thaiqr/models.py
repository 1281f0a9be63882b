# Configuration and result records for the Thai QR generators and extractors

from decimal import ROUND_DOWN, Decimal, InvalidOperation
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

CENT = Decimal("0.01")


def to_decimal(amount):
    """Coerce an amount to Decimal without going through binary float arithmetic."""
    if amount is None or isinstance(amount, Decimal):
        return amount
    if isinstance(amount, bool):
        raise ValueError("amount must be a number, not bool")
    if isinstance(amount, (int, float, str)):
        try:
            value = Decimal(str(amount).strip())
        except InvalidOperation:
            raise ValueError(f"invalid amount: {amount!r}") from None
        if not value.is_finite():
            raise ValueError(f"invalid amount: {amount!r}")
        return value
    raise ValueError(f"unsupported amount type: {type(amount).__name__}")


def format_amount(amount):
    """Tag 54 text: the amount with exactly two decimals."""
    return f"{amount:.2f}"


def truncate_to_cents(amount):
    return amount.quantize(CENT, rounding=ROUND_DOWN)


class _Config(BaseModel):
    model_config = ConfigDict(frozen=True)


class _AmountConfig(_Config):
    amount: Optional[Decimal] = None

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, v):
        return to_decimal(v)


class AnyIDConfig(_AmountConfig):
    """PromptPay AnyID (Tag 29). ``type`` is one of MSISDN, NATID, EWALLETID, BANKACC."""

    type: str
    target: str


class BillPaymentConfig(_AmountConfig):
    """PromptPay Bill Payment (Tag 30)."""

    biller_id: str
    ref1: str
    ref2: Optional[str] = None
    # undocumented, carried in Tag 62.07
    ref3: Optional[str] = None


class TrueMoneyConfig(_AmountConfig):
    mobile_no: str
    message: Optional[str] = None


class SlipVerifyConfig(_Config):
    sending_bank: str
    trans_ref: str


class TrueMoneySlipVerifyConfig(_Config):
    event_type: str
    transaction_id: str
    # DDMMYYYY
    date: str


class BOTBarcodeConfig(_AmountConfig):
    biller_id: str
    ref1: str
    ref2: Optional[str] = None


# ---------------------------------------------------------------------------
# Extracted data
# ---------------------------------------------------------------------------


class SlipVerifyData(_Config):
    sending_bank: str
    trans_ref: str


class TrueMoneySlipVerifyData(_Config):
    event_type: str
    transaction_id: str
    date: str
