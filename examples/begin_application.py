"""
Minimal script that uses the public API to start a Payment Assist application.
"""

from __future__ import annotations

import argparse
import logging
import sys

from payment_assist import (
    BeginRequest,
    ConfigError,
    PASDKError,
    PlanRequest,
    StatusRequest,
    create_client,
    load_client_config,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Quote a plan and begin an application using the SDK API"
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PA_* settings",
    )
    parser.add_argument("--api-key", help="Overrides PA_API_KEY")
    parser.add_argument("--api-secret", help="Overrides PA_API_SECRET")
    parser.add_argument("--api-url", help="Overrides PA_API_URL")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument("--order-id", required=True, help="Your order or invoice ID")
    parser.add_argument("--amount", type=int, required=True, help="Amount in pence")
    parser.add_argument("--first-name", required=True)
    parser.add_argument("--last-name", required=True)
    parser.add_argument("--address1", required=True)
    parser.add_argument("--postcode", required=True)
    parser.add_argument("--email", help="Send the application link to this address")
    parser.add_argument("--plan-id", type=int, help="Plan type to apply for")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        config = load_client_config(
            env_file=args.env_file,
            api_key=args.api_key,
            api_secret=args.api_secret,
            api_url=args.api_url,
        )
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_client(config=config)
    logging.info("Using Payment Assist API at %s", config.api_url)

    try:
        quote = client.plan(PlanRequest(amount=args.amount, plan_id=args.plan_id))
    except PASDKError as exc:
        logging.error("Plan quote failed: %s", exc)
        return 1

    logging.info(
        "%s plan: %d instalments, %d pence repayable",
        quote.plan,
        len(quote.schedule),
        quote.repayable,
    )

    request = BeginRequest(
        order_id=args.order_id,
        amount=args.amount,
        customer_first_name=args.first_name,
        customer_last_name=args.last_name,
        customer_address1=args.address1,
        customer_postcode=args.postcode,
        customer_email=args.email,
        send_email=args.email is not None,
        plan_id=args.plan_id,
    )

    try:
        application = client.begin(request)
        status = client.status(StatusRequest(token=application.token))
    except PASDKError as exc:
        logging.error("Application failed (%s): %s", exc.error_type, exc)
        return 1

    logging.info("Application %s is %s", application.token, status.status)
    logging.info("Send the customer to %s", application.url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
