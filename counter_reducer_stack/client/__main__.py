"""CLI for the counter server client."""

from __future__ import annotations

import argparse
import json
import sys

from counter_reducer_stack.client.api import (
    ClientConfig,
    CounterServerClient,
    build_base_url,
)


def _print_json(payload: dict) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


def _resolve_base_url(args: argparse.Namespace) -> str:
    if args.base_url:
        return args.base_url
    return build_base_url(args.host, args.port)


def _load_payload(args: argparse.Namespace) -> dict:
    if not args.payload:
        return {}
    payload = json.loads(args.payload)
    if not isinstance(payload, dict):
        raise ValueError("--payload must be a JSON object")
    return payload


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Counter server client")
    parser.add_argument("--base-url", help="Server base URL")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8676)

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("health", help="Check the server is up")
    subparsers.add_parser("state", help="Get current counter state")

    dispatch_parser = subparsers.add_parser("dispatch", help="Dispatch an action")
    dispatch_parser.add_argument("type", help="Action type, e.g. counter/increment")
    dispatch_parser.add_argument("--payload", help="Extra action fields as JSON")

    subparsers.add_parser("reset", help="Reset to the initial state")
    return parser


def main(argv: list[str] | None = None, client: CounterServerClient | None = None) -> int:
    args = build_parser().parse_args(argv)
    if client is None:
        client = CounterServerClient(ClientConfig(base_url=_resolve_base_url(args)))

    with client:
        if args.command == "health":
            _print_json(client.health())
        elif args.command == "state":
            _print_json(client.get_state())
        elif args.command == "dispatch":
            _print_json(client.dispatch(args.type, **_load_payload(args)))
        else:
            _print_json(client.reset())

    return 0


if __name__ == "__main__":
    sys.exit(main())
