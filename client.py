#!/usr/bin/env python3
"""
Command-line client for the Array Data Processor.

Sends the payload to the API and falls back to local processing when the
API cannot be reached.

Usage:
    python client.py
    python client.py --data '{"data": ["a", "1", "23", "$", "B"]}'
    python client.py --file payload.json --json
"""
import argparse
import json
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from app.domain.errors import ValidationError  # noqa: E402
from app.services import ProcessorClient  # noqa: E402
from app.views.presenter import render_summary  # noqa: E402
from config import get_settings  # noqa: E402

DEFAULT_PAYLOAD = {"data": ["a", "1", "2", "b", "B", "$", "3"]}

logger = logging.getLogger("client")


def load_payload(args):
    """Read the request payload from --data, --file or the default."""
    if args.data is not None:
        raw = args.data
    elif args.file is not None:
        with open(args.file, encoding='utf-8') as f:
            raw = f.read()
    else:
        return dict(DEFAULT_PAYLOAD)

    if not raw.strip():
        raise ValidationError("Please enter JSON data")
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        raise ValidationError("Invalid JSON format. Please check your input.")


def main(argv=None):
    settings = get_settings()

    parser = argparse.ArgumentParser(description='Array Data Processor client')
    parser.add_argument('--url', help=f'API base URL (default: {settings.api_base_url})')
    parser.add_argument('--timeout', type=float,
                        help=f'Request timeout in seconds (default: {settings.client_timeout})')
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--data', help='JSON payload text')
    source.add_argument('--file', help='Path to a JSON payload file')
    parser.add_argument('--json', action='store_true', help='Print the raw JSON result')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    client = ProcessorClient.from_settings(settings, base_url=args.url, timeout=args.timeout)
    try:
        payload = load_payload(args)
        client.validate_payload(payload)
    except ValidationError as exc:
        logger.error(f"❌ {exc}")
        return 2

    if client.check_health():
        logger.info(f"✅ Backend connected at {client.base_url}")
    else:
        logger.warning(f"⚠️ Backend not connected at {client.base_url}, results may be computed locally")

    outcome = client.process(payload)

    if args.json:
        print(json.dumps(outcome.result, indent=2))
    else:
        print(render_summary(outcome.result, outcome.source))
    return 0 if outcome.result.get("is_success") else 1


if __name__ == '__main__':
    sys.exit(main())
