# Bank of Thailand bill payment barcode: |billerID\rref1\rref2\ramount

import logging
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .errors import BarcodeFormatError
from .models import BillPaymentConfig, to_decimal, truncate_to_cents
from .promptpay import bill_payment

logger = logging.getLogger(__name__)

PREFIX = "|"
SEPARATOR = "\r"
NO_AMOUNT = "0"


class BOTBarcode(BaseModel):
    """A BOT barcode.

    ``amount`` is kept as a Decimal truncated to whole satang, so it always
    maps onto an exact integer number of minor units.
    """

    model_config = ConfigDict(frozen=True)

    biller_id: str
    ref1: str
    ref2: Optional[str] = None
    amount: Optional[Decimal] = None

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, v):
        v = to_decimal(v)
        return truncate_to_cents(v) if v is not None else None

    @property
    def minor_units(self) -> Optional[int]:
        if self.amount is None:
            return None
        return int(self.amount * 100)

    @classmethod
    def from_string(cls, payload):
        if not payload.startswith(PREFIX):
            raise BarcodeFormatError("invalid barcode format: must start with '|'")

        data = payload[1:].split(SEPARATOR)
        if len(data) != 4:
            raise BarcodeFormatError(
                f"invalid barcode format: expected 4 fields, got {len(data)}"
            )
        biller_id, ref1, ref2, raw_amount = data

        amount = None
        if raw_amount != NO_AMOUNT:
            if not (raw_amount.isascii() and raw_amount.isdigit()):
                raise BarcodeFormatError(f"invalid amount format: {raw_amount!r}")
            amount = Decimal(int(raw_amount)) / 100

        logger.debug("parsed BOT barcode for biller %s", biller_id)
        return cls(biller_id=biller_id, ref1=ref1, ref2=ref2 or None, amount=amount)

    def __str__(self):
        amount = str(self.minor_units) if self.amount is not None else NO_AMOUNT
        return SEPARATOR.join([PREFIX + self.biller_id, self.ref1, self.ref2 or "", amount])

    def to_qr_tag30(self):
        """Convert to a PromptPay Bill Payment (Tag 30) QR payload.

        Whether the result is accepted depends on the biller's bank.
        """
        return bill_payment(BillPaymentConfig(
            biller_id=self.biller_id,
            ref1=self.ref1,
            ref2=self.ref2,
            amount=self.amount,
        ))
