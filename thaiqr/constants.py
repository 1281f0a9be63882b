# Thai QR Code protocol constants (PromptPay / TrueMoney / Slip Verify)

# Tag 00 / Tag 01
PAYLOAD_FORMAT_INDICATOR = "01"
POI_STATIC = "11"
POI_DYNAMIC = "12"

# Tag 29 / Tag 30 application identifiers
GUID_CREDIT_TRANSFER = "A000000677010111"
GUID_BILL_PAYMENT = "A000000677010112"

CURRENCY_THB = "764"
COUNTRY_TH = "TH"

CRC_TAG_ID = "63"
SLIP_CRC_TAG_ID = "91"

SLIP_VERIFY_API_TYPE = "000001"
TRUEMONEY_SLIP_API_TYPE = "01"
TRUEMONEY_EWALLET_PREFIX = "14000"

# AnyID proxy type -> Tag 29 sub-tag id
PROXY_TYPES = {
    "MSISDN": "01",     # mobile number
    "NATID": "02",      # national id or tax id
    "EWALLETID": "03",  # e-wallet id
    "BANKACC": "04",    # bank account (reserved)
}

MSISDN_LENGTH = 13

# Known top-level tags, used for display only
TAG_NAMES = {
    "00": "Payload Format Indicator",
    "01": "Point of Initiation Method",
    "29": "Merchant Account Information (Credit Transfer)",
    "30": "Merchant Account Information (Bill Payment)",
    "51": "Country Code (Slip Verify)",
    "52": "Merchant Category Code",
    "53": "Transaction Currency",
    "54": "Transaction Amount",
    "58": "Country Code",
    "59": "Merchant Name",
    "60": "Merchant City",
    "62": "Additional Data",
    "63": "CRC",
    "81": "Personal Message",
    "91": "CRC (Slip Verify)",
}
