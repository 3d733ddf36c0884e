"""Quick look at an account through the REST API.

Usage:
  export TWILIO_ACCOUNT_SID=AC...
  export TWILIO_AUTH_TOKEN=...
  python scripts/usage_report.py usage --window this_month --limit 20
  python scripts/usage_report.py trunks --limit 5

Records are streamed page by page; --limit caps what is printed and fetched.
"""

import argparse
import json
import sys

import requests

from twilio_lite.base.exceptions import TwilioException
from twilio_lite.rest.client import Client

WINDOWS = ("all_time", "daily", "monthly", "yearly", "today", "yesterday", "this_month", "last_month")


def _positive_int(value):
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return n


def _usage_rows(client, args):
    records = client.usage.records
    target = getattr(records, args.window) if args.window else records
    filters = {}
    if args.category:
        filters["category"] = args.category
    for r in target.stream(limit=args.limit, page_size=args.page_size, **filters):
        yield {
            "category": r.category,
            "start_date": str(r.start_date),
            "end_date": str(r.end_date),
            "usage": r.usage,
            "usage_unit": r.usage_unit,
            "price": str(r.price) if r.price is not None else None,
            "price_unit": r.price_unit,
        }


def _trunk_rows(client, args):
    for t in client.trunking.trunks.stream(limit=args.limit, page_size=args.page_size):
        yield {"sid": t.sid, "friendly_name": t.friendly_name, "domain_name": t.domain_name}


def main(argv=None):
    ap = argparse.ArgumentParser()
    sub = ap.add_subparsers(dest="command", required=True)

    usage = sub.add_parser("usage", help="usage records of the account")
    usage.add_argument("--window", choices=WINDOWS, default=None)
    usage.add_argument("--category", default=None)

    sub.add_parser("trunks", help="SIP trunks of the account")

    for p in sub.choices.values():
        p.add_argument("--limit", type=_positive_int, default=None)
        p.add_argument("--page-size", type=_positive_int, default=None)

    args = ap.parse_args(argv)

    try:
        client = Client()
        rows = _usage_rows(client, args) if args.command == "usage" else _trunk_rows(client, args)
        for row in rows:
            print(json.dumps(row, ensure_ascii=False))
    except (TwilioException, requests.RequestException) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
