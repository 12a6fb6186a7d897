"""Command line entry point for the numbers and verify APIs."""

import argparse
import sys
from typing import List, Optional

from nexmo_client import NexmoClient, NexmoClientError
from nexmo_client.config.logging import setup_logging
from nexmo_client.models.schemas import SearchPattern


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Numbers and verify API client")
    commands = parser.add_subparsers(dest="command", required=True)

    search = commands.add_parser("search", help="Search numbers available for purchase")
    search.add_argument("country", help="Two-letter country code")
    search.add_argument("--pattern")
    search.add_argument(
        "--search-pattern",
        choices=[p.name.lower() for p in SearchPattern],
        help="Where the pattern must match"
    )
    search.add_argument("--features", help="Comma separated, e.g. SMS,VOICE")
    search.add_argument("--type", dest="number_type")
    search.add_argument("--index", type=int)
    search.add_argument("--size", type=int)

    verify = commands.add_parser("verify", help="Start a verification")
    verify.add_argument("number")
    verify.add_argument("brand")

    check = commands.add_parser("check", help="Check a verification code")
    check.add_argument("request_id")
    check.add_argument("code")
    check.add_argument("--ip", dest="ip_address")

    cancel = commands.add_parser("cancel", help="Cancel a verification")
    cancel.add_argument("request_id")

    return parser


def run(args: argparse.Namespace, client: NexmoClient) -> str:
    """Run one command and return its result as JSON."""
    if args.command == "search":
        criteria = {
            "pattern": args.pattern,
            "features": args.features,
            "number_type": args.number_type,
            "index": args.index,
            "size": args.size,
        }
        if args.search_pattern:
            criteria["search_pattern"] = SearchPattern[args.search_pattern.upper()]
        result = client.numbers.search_numbers(args.country, **criteria)
    elif args.command == "verify":
        result = client.verify.verify(args.number, args.brand)
    elif args.command == "check":
        result = client.verify.check(args.request_id, args.code, args.ip_address)
    else:
        result = client.verify.cancel(args.request_id)

    return result.model_dump_json(indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, call the API and print the result."""
    setup_logging()
    args = build_parser().parse_args(argv)

    with NexmoClient() as client:
        try:
            print(run(args, client))
        except (NexmoClientError, ValueError) as e:
            print(f"error: {e}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
