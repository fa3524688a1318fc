#!/usr/bin/env python3
"""
Fill an Algerian cheque.

Usage:
    python fill_cheque.py 1234.56 --beneficiary "Sarl Atlas" --language fr -o cheque.pdf
    python fill_cheque.py 1234.56 --language ar --words-only
"""

import argparse
import datetime
import io
import logging
import sys
from decimal import InvalidOperation

from amount_words import Language, convert_amount, to_decimal
from cheque_data import ChequeData
from cheque_renderer import ChequeRenderer, merge_onto_background
from template_store import load_default_template

_LOGGER = logging.getLogger(__name__)


def parse_amount(value):
    """argparse type for non-negative amounts such as "1234.56" or "1 234,56"."""
    try:
        amount = to_decimal(value)
    except (InvalidOperation, ValueError):
        raise argparse.ArgumentTypeError(f"invalid amount: {value!r}")
    if not amount.is_finite() or amount < 0:
        raise argparse.ArgumentTypeError(f"amount must be a non-negative number: {value!r}")
    return amount


def parse_date(value):
    try:
        return datetime.datetime.strptime(value, "%d/%m/%Y").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"date must be dd/mm/yyyy: {value!r}")


def build_parser():
    parser = argparse.ArgumentParser(description="Fill an Algerian cheque (amount in words in FR/AR/EN)")
    parser.add_argument("amount", type=parse_amount, help="Amount in dinars, e.g. 1234.56")
    parser.add_argument(
        "--language",
        default="fr",
        choices=[language.value for language in Language],
        help="Language of the amount in words (default: fr)",
    )
    parser.add_argument("--beneficiary", default="", help="Name of the beneficiary")
    parser.add_argument("--place", default="", help="Place of issue")
    parser.add_argument(
        "--date", type=parse_date, default=None, help="Date of issue dd/mm/yyyy (default: today)"
    )
    parser.add_argument("--template", default=None, help="Template JSON file (default: built-in layout)")
    parser.add_argument(
        "--test-mode",
        action="store_true",
        help="Draw field boxes and labels to check the alignment on a blank sheet",
    )
    parser.add_argument("--background", default=None, help="Scanned cheque PDF to draw onto")
    parser.add_argument("-o", "--output", default="cheque.pdf", help="Output PDF (default: cheque.pdf)")
    parser.add_argument(
        "--words-only", action="store_true", help="Only print the amount in words"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.words_only:
        print(convert_amount(args.amount, args.language))
        return 0

    data = ChequeData(
        amount=args.amount,
        beneficiary=args.beneficiary,
        place=args.place,
        date=args.date or datetime.date.today(),
        language=args.language,
    )
    if not data.is_printable():
        _LOGGER.warning("Cheque has no beneficiary or a zero amount")

    template = load_default_template(args.template)
    renderer = ChequeRenderer(template, test_mode=args.test_mode)

    if args.background:
        overlay = io.BytesIO()
        renderer.render_pdf(data, overlay)
        overlay.seek(0)
        merge_onto_background(overlay, args.background, args.output)
    else:
        renderer.render_pdf(data, args.output)

    print(f"✓ Cheque written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
