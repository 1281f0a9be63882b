# Thai QR Code command line tool: decode payloads and generate new ones

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from . import __version__, generate
from .config import OUTPUT_FORMATS, CLIConfig
from .emvco import parse, parse_barcode
from .errors import ThaiQRError
from .models import (
    AnyIDConfig,
    BillPaymentConfig,
    BOTBarcodeConfig,
    SlipVerifyConfig,
    TrueMoneyConfig,
    TrueMoneySlipVerifyConfig,
)
from .summary import inspect_qr, summary_text, tag_tree

logger = logging.getLogger(__name__)

ESCAPES = {"\\r": "\r", "\\n": "\n", "\\t": "\t"}


def convert_escapes(s):
    for literal, char in ESCAPES.items():
        s = s.replace(literal, char)
    return s


def dump_json(obj):
    print(json.dumps(obj, indent=2, ensure_ascii=False))


# --- DECODE ---
def decode_qr(payload, output_format, strict):
    qr = parse(payload, strict=strict, sub_tags=True)
    info = inspect_qr(qr)

    if output_format == "text":
        print("QR Code Information:")
        print("=" * 19)
        print(f"Payload: {qr.payload}\n")
        print(summary_text(info))
        print("\nTLV Tags:")
        print("\n".join(tag_tree(qr.tags)))
    else:
        dump_json({"payload": qr.payload, "info": info.model_dump(mode="json", exclude_none=True)})


def decode_barcode(payload, output_format):
    barcode = parse_barcode(payload)

    if output_format == "text":
        print("BOT Barcode Information:")
        print("=" * 24)
        print(f"Biller ID: {barcode.biller_id}")
        print(f"Reference 1: {barcode.ref1}")
        if barcode.ref2 is not None:
            print(f"Reference 2: {barcode.ref2}")
        if barcode.amount is not None:
            print(f"Amount: {barcode.amount:.2f}")
    else:
        dump_json({"type": "BOTBarcode", **barcode.model_dump(mode="json", exclude_none=True)})


def run_decode(args, config):
    payload = convert_escapes((args.payload_flag or args.payload or "").strip())
    if not payload:
        raise ThaiQRError("QR code payload is required")

    output_format = args.format or config.output_format
    strict = args.strict or config.strict

    # BOT barcodes are not TLV
    if payload.startswith("|"):
        decode_barcode(payload, output_format)
    else:
        decode_qr(payload, output_format, strict)


# --- GENERATE ---
def run_generate(args, config):
    flavor = args.flavor
    if flavor == "anyid":
        payload = generate.any_id(AnyIDConfig(type=args.type, target=args.target, amount=args.amount))
    elif flavor == "billpay":
        payload = generate.bill_payment(BillPaymentConfig(
            biller_id=args.biller_id, ref1=args.ref1, ref2=args.ref2, ref3=args.ref3,
            amount=args.amount,
        ))
    elif flavor == "truemoney":
        payload = generate.true_money(TrueMoneyConfig(
            mobile_no=args.mobile, amount=args.amount, message=args.message,
        ))
    elif flavor == "slip":
        payload = generate.slip_verify(SlipVerifyConfig(
            sending_bank=args.bank, trans_ref=args.trans_ref,
        ))
    elif flavor == "truemoney-slip":
        payload = generate.true_money_slip_verify(TrueMoneySlipVerifyConfig(
            event_type=args.event_type, transaction_id=args.transaction_id, date=args.date,
        ))
    elif flavor == "barcode":
        payload = generate.bot_barcode(BOTBarcodeConfig(
            biller_id=args.biller_id, ref1=args.ref1, ref2=args.ref2, amount=args.amount,
        ))
    else:  # barcode-qr
        payload = generate.bot_barcode_to_qr(args.biller_id, args.ref1, args.ref2, args.amount)
    print(payload)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="thai-qr",
        description="Decode and generate Thai QR code (PromptPay/EMVCo) payloads.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", help="Logging level (default: $THAIQR_LOG_LEVEL or WARNING)")
    commands = parser.add_subparsers(dest="command", required=True)

    decode = commands.add_parser(
        "decode",
        help="Parse a QR code payload or BOT barcode",
        epilog='Example: thai-qr decode --format text "00020101021129370016..."',
    )
    decode.add_argument("payload", nargs="?", help="Payload string (\\r, \\n, \\t escapes allowed)")
    decode.add_argument("--payload", dest="payload_flag", help="Payload string, alternative to the positional argument")
    decode.add_argument("--format", choices=OUTPUT_FORMATS, help="Output format (default: json)")
    decode.add_argument("--strict", action="store_true", default=False, help="Validate the CRC checksum first")
    decode.set_defaults(func=run_decode)

    gen = commands.add_parser("generate", help="Generate a payload")
    flavors = gen.add_subparsers(dest="flavor", required=True)

    anyid = flavors.add_parser("anyid", help="PromptPay AnyID (Tag 29)")
    anyid.add_argument("--type", default="MSISDN", help="MSISDN, NATID, EWALLETID or BANKACC")
    anyid.add_argument("--target", required=True)
    anyid.add_argument("--amount")

    billpay = flavors.add_parser("billpay", help="PromptPay Bill Payment (Tag 30)")
    billpay.add_argument("--ref3")

    truemoney = flavors.add_parser("truemoney", help="TrueMoney Wallet")
    truemoney.add_argument("--mobile", required=True)
    truemoney.add_argument("--amount")
    truemoney.add_argument("--message")

    slip = flavors.add_parser("slip", help="Slip Verify mini-QR")
    slip.add_argument("--bank", required=True)
    slip.add_argument("--trans-ref", required=True)

    tm_slip = flavors.add_parser("truemoney-slip", help="TrueMoney Slip Verify mini-QR")
    tm_slip.add_argument("--event-type", required=True)
    tm_slip.add_argument("--transaction-id", required=True)
    tm_slip.add_argument("--date", required=True, help="DDMMYYYY")

    barcode = flavors.add_parser("barcode", help="BOT barcode")
    barcode_qr = flavors.add_parser("barcode-qr", help="BOT barcode fields as a Bill Payment QR")
    for p in (billpay, barcode, barcode_qr):
        p.add_argument("--biller-id", required=True)
        p.add_argument("--ref1", required=True)
        p.add_argument("--ref2")
        p.add_argument("--amount")
    gen.set_defaults(func=run_generate)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = CLIConfig.from_env()
        if args.log_level:
            config = CLIConfig(**{**config.model_dump(), "log_level": args.log_level})
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1
    logging.basicConfig(level=config.log_level, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        args.func(args, config)
    except (ThaiQRError, ValidationError) as e:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
