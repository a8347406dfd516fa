"""
Command-line interface for exercising the Payment Assist API.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from typing import Any, Iterable, Sequence, TextIO, Tuple

import requests

from .api import create_client
from .core import (
    CaptureRequest,
    ConfigError,
    PASDKError,
    PaymentAssistClient,
    PlanRequest,
    PreapprovalRequest,
    StatusRequest,
    load_client_config,
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="payment-assist",
        description="Call a single Payment Assist API endpoint",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PA_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
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

    commands.add_parser("account", help="Show account details and plans")

    status = commands.add_parser("status", help="Show the status of an application")
    status.add_argument("token", help="Application token returned by begin")

    capture = commands.add_parser("capture", help="Capture a pending application")
    capture.add_argument("token", help="Application token returned by begin")

    plan = commands.add_parser("plan", help="Quote a repayment schedule")
    plan.add_argument("--amount", type=int, required=True, help="Amount in pence")
    plan.add_argument("--plan-id", type=int, help="Plan type (default: account default)")
    plan.add_argument("--plan-length", type=int, help="Number of instalments")

    preapproval = commands.add_parser(
        "preapproval", help="Check a customer's eligibility"
    )
    preapproval.add_argument("--first-name", required=True)
    preapproval.add_argument("--last-name", required=True)
    preapproval.add_argument("--address1", required=True)
    preapproval.add_argument("--postcode", required=True)
    return parser


def _dispatch(client: PaymentAssistClient, args: argparse.Namespace) -> Any:
    if args.command == "account":
        return client.account()
    if args.command == "status":
        return client.status(StatusRequest(token=args.token))
    if args.command == "capture":
        return client.capture(CaptureRequest(token=args.token))
    if args.command == "plan":
        return client.plan(
            PlanRequest(
                amount=args.amount,
                plan_id=args.plan_id,
                plan_length=args.plan_length,
            )
        )
    return client.preapproval(
        PreapprovalRequest(
            customer_first_name=args.first_name,
            customer_last_name=args.last_name,
            customer_postcode=args.postcode,
            customer_address1=args.address1,
        )
    )


def _print_result(result: Any, stream: TextIO) -> None:
    json.dump(dataclasses.asdict(result), stream, indent=2, default=str)
    stream.write("\n")


def run_cli(argv: Sequence[str] | None = None, *, session: requests.Session | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    overrides = _collect_overrides(args.set or ())

    try:
        config = load_client_config(env_file=args.env_file, overrides=overrides)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_client(config=config, session=session)

    try:
        result = _dispatch(client, args)
    except PASDKError as exc:
        logging.error("%s: %s", exc.error_type, exc)
        return 1

    _print_result(result, sys.stdout)
    return 0


def main() -> None:
    sys.exit(run_cli())
