"""
CLI Module

Architectural Intent:
- Operator tooling for deployments that embed the dispatcher
- check-config validates the channel map a service would start with
- envelope prints the exact wire payload subscribers will receive
- Supports --verbose/--debug flags for log level control
"""

import argparse
import asyncio
import json
import logging
import sys
import traceback

from hebo_notifications.domain.channel_map import ChannelMap
from hebo_notifications.domain.envelope import Envelope
from hebo_notifications.domain.errors import ConfigurationError, EnvelopeError
from hebo_notifications.infrastructure.config import load_config
from hebo_notifications.infrastructure.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hebo-notify",
        description="hebo notifications: route event store notifications to channels",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output with tracebacks"
    )
    parser.add_argument(
        "--config", "-c", default=None, help="Path to JSON config (default: hebo.json)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser(
        "check-config", help="Validate the configured channel map"
    )

    envelope_parser = subparsers.add_parser(
        "envelope", help="Print the wire payload for a notification"
    )
    envelope_parser.add_argument("notification_type", help="Notification type tag")
    envelope_parser.add_argument("notification", help="Notification body as JSON")

    return parser


async def async_main():
    parser = build_parser()
    args = parser.parse_args()

    config = load_config(args.config)

    if args.debug:
        configure_logging(level=logging.DEBUG)
    elif args.verbose:
        configure_logging(level=logging.INFO)
    else:
        try:
            configure_logging(level=config.log_level)
        except ValueError as e:
            print(f"[-] Invalid configuration: {e}")
            sys.exit(1)

    verbose = args.verbose or args.debug

    if args.command == "check-config":
        try:
            channel_map = ChannelMap(config.notifications.channel_map())
        except ConfigurationError as e:
            print(f"[-] Invalid configuration: {e}")
            sys.exit(1)
        print("[+] Channel map is valid:")
        for notification_type, channel_id in channel_map.items():
            print(f"  - {notification_type} -> {channel_id}")
        print(f"[*] SNS region: {config.sns.region}")
        if config.sns.endpoint_url:
            print(f"[*] SNS endpoint: {config.sns.endpoint_url}")
        return

    if args.command == "envelope":
        try:
            notification = json.loads(args.notification)
            payload = Envelope(args.notification_type, notification).to_json()
        except json.JSONDecodeError as e:
            print(f"[-] Notification is not valid JSON: {e}")
            if verbose:
                traceback.print_exc()
            sys.exit(1)
        except EnvelopeError as e:
            print(f"[-] {e}")
            sys.exit(1)
        print(payload)
        return

    parser.print_help()


def main():
    asyncio.run(async_main())


if __name__ == "__main__":
    main()
