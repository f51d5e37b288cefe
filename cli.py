#!/usr/bin/env python3
"""
Command-line interface for the SOLID notification demo.

Usage:
    uv run python cli.py [command] [options]

Commands:
    demo        Run the demo scenarios (default when no command is given)
    send        Send a single notification
    test        Run the test suite
    serve       Start the API server

Examples:
    uv run python cli.py
    uv run python cli.py send --channel sms Alice "Your appointment is confirmed!"
    uv run python cli.py serve
"""

import argparse
import logging
import subprocess
from typing import Optional

from notifications.demo import run_demo, run_scenario
from notifications.models import ChannelType, NotificationRequest


def run_send(channel: str, recipient: str, content: str) -> None:
    """Send one notification to stdout."""
    request = NotificationRequest(channel=channel, recipient=recipient, content=content)
    run_scenario(request)


def run_tests(args: list[str]) -> None:
    """Run the test suite."""
    cmd = ["uv", "run", "pytest"] + args
    subprocess.run(cmd)


def run_server(host: str, port: int, reload: bool) -> None:
    """Start the API server."""
    cmd = ["uv", "run", "uvicorn", "api.main:app", f"--host={host}", f"--port={port}"]
    if reload:
        cmd.append("--reload")

    print(f"Starting server at http://{host}:{port}")
    print(f"API docs available at http://{host}:{port}/docs")
    subprocess.run(cmd)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="SOLID Notification Demo CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s demo
  %(prog)s send --channel email John "Your order has been shipped!"
  %(prog)s test -v
  %(prog)s serve --reload
        """,
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic log level (logs go to stderr)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Demo command
    subparsers.add_parser("demo", help="Run the demo scenarios")

    # Send command
    send_parser = subparsers.add_parser("send", help="Send a single notification")
    send_parser.add_argument(
        "--channel",
        choices=[c.value for c in ChannelType],
        default=ChannelType.EMAIL.value,
        help="Which notifier to use",
    )
    send_parser.add_argument("recipient", help="Name of the person being notified")
    send_parser.add_argument("content", help="Body of the notification")

    # Test command
    test_parser = subparsers.add_parser("test", help="Run the test suite")
    test_parser.add_argument(
        "pytest_args",
        nargs="*",
        default=[],
        help="Arguments to pass to pytest",
    )

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.command == "send":
        run_send(args.channel, args.recipient, args.content)
    elif args.command == "test":
        run_tests(args.pytest_args)
    elif args.command == "serve":
        run_server(args.host, args.port, args.reload)
    else:
        run_demo()


if __name__ == "__main__":
    main()
