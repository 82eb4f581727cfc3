"""
Command-line interface for exercising the PayPal NVP client.
"""

from __future__ import annotations

import argparse
import logging
from typing import Dict, Iterable, Mapping, Sequence, Tuple

import requests

from .api import ConfigError, create_client, load_nvp_config, verify_credentials
from .core.responses import is_success, parse_errors


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def parse_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ppec-nvp",
        description="Call the PayPal Express Checkout NVP API",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PPEC_* settings (default: .env)",
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

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser(
        "verify",
        help="Check the active credentials with GetPalDetails and print the payer id",
    )

    details = commands.add_parser(
        "details",
        help="Print the GetExpressCheckoutDetails response for a token",
    )
    details.add_argument("token", help="Express Checkout token (EC-...)")

    refund = commands.add_parser("refund", help="Refund a transaction")
    refund.add_argument("transaction_id", help="PayPal transaction id")
    refund.add_argument("--amount", help="Refund this amount instead of the full total")
    refund.add_argument(
        "--currency",
        default="USD",
        help="Currency code for a partial refund (default: USD)",
    )
    return parser


def _refund_params(args: argparse.Namespace) -> Dict[str, str]:
    params = {"TRANSACTIONID": args.transaction_id}
    if args.amount:
        params["REFUNDTYPE"] = "Partial"
        params["AMT"] = args.amount
        params["CURRENCYCODE"] = args.currency
    else:
        params["REFUNDTYPE"] = "Full"
    return params


def _report(response: Mapping[str, str]) -> int:
    if not is_success(response):
        errors = parse_errors(response)
        if not errors:
            logging.error("PayPal request failed: %s", response)
        for error in errors:
            logging.error("PayPal error %s: %s", error.code, error.long_message)
        return 1

    for key, value in response.items():
        print(f"{key}={value}")
    return 0


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    overrides = collect_overrides(args.set or ())

    try:
        config = load_nvp_config(env_file=args.env_file, overrides=overrides)
        credential = config.active_credential()
    except (ConfigError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    with requests.Session() as session:
        if args.command == "verify":
            payer_id = verify_credentials(
                credential,
                config.environment,
                session=session,
                timeout=config.timeout_seconds,
            )
            if payer_id is None:
                logging.error(
                    "PayPal did not accept the %s credentials", config.environment
                )
                return 1
            print(payer_id)
            return 0

        client = create_client(config=config, session=session)
        if args.command == "details":
            return _report(client.get_express_checkout_details(args.token))
        return _report(client.refund_transaction(_refund_params(args)))


def main() -> None:
    raise SystemExit(run_cli())
