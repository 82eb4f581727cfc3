"""
Minimal script that uses the public API to start an Express Checkout session.
"""

from __future__ import annotations

import argparse
import logging
import sys

from ppec_nvp import ConfigError, create_client, is_success, load_nvp_config, parse_errors
from ppec_nvp.cli import collect_overrides, parse_override


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Start a PayPal Express Checkout session")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PPEC_* settings",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=parse_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument(
        "--environment",
        choices=("live", "sandbox"),
        help="Override PPEC_ENVIRONMENT",
    )
    parser.add_argument("--amount", required=True, help="Order total, e.g. 19.99")
    parser.add_argument("--currency", default="USD", help="Currency code (default: USD)")
    parser.add_argument(
        "--return-url",
        required=True,
        help="Where PayPal sends the buyer after approving the payment",
    )
    parser.add_argument(
        "--cancel-url",
        required=True,
        help="Where PayPal sends the buyer after cancelling",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    overrides = collect_overrides(args.set or ())

    try:
        config = load_nvp_config(
            env_file=args.env_file,
            overrides=overrides,
            environment=args.environment,
        )
        client = create_client(config=config)
    except (ConfigError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    response = client.set_express_checkout(
        {
            "PAYMENTREQUEST_0_AMT": args.amount,
            "PAYMENTREQUEST_0_CURRENCYCODE": args.currency,
            "PAYMENTREQUEST_0_PAYMENTACTION": "Sale",
            "RETURNURL": args.return_url,
            "CANCELURL": args.cancel_url,
        }
    )
    if not is_success(response):
        for error in parse_errors(response):
            logging.error("SetExpressCheckout failed (%s): %s", error.code, error.long_message)
        return 1

    host = "www.sandbox.paypal.com" if config.environment == "sandbox" else "www.paypal.com"
    logging.info("Checkout session created with token %s", response["TOKEN"])
    print(f"https://{host}/cgi-bin/webscr?cmd=_express-checkout&token={response['TOKEN']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
