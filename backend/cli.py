#!/usr/bin/env python3
"""Run the matchmaking engine on a JSON request without starting the API.

Usage (from the backend/ directory):
    python cli.py request.json
    cat request.json | python cli.py -
    python cli.py request.json --demo     # score against the demo catalogue

The request has the same shape as POST /matchmaking. The response (or the
400-style error body) is written to stdout.

Exit codes: 0 success, 1 invalid request payload, 2 unreadable input.
"""

import argparse
import json
import logging
import sys
from typing import Any, TextIO

from pydantic import ValidationError

from api.errors import format_validation_errors
from data.demo_mentors import get_demo_mentors
from models.requests import MatchmakingRequest
from services import matchmaking

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_UNREADABLE = 2


def _load_payload(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    with open(source, encoding="utf-8") as f:
        return json.load(f)


def _emit(payload: dict, out: TextIO, indent: int | None) -> None:
    json.dump(payload, out, indent=indent, ensure_ascii=False)
    out.write("\n")


def run(source: str, demo: bool = False, indent: int | None = 2, out: TextIO | None = None) -> int:
    out = out or sys.stdout

    try:
        payload = _load_payload(source)
    except (OSError, ValueError) as e:  # ValueError covers JSON and UTF-8 decode errors
        logger.error("Could not read request from %s: %s", source, e)
        _emit({"message": "Could not read request", "errors": [{"field": "body", "message": str(e)}]}, out, indent)
        return EXIT_UNREADABLE

    if demo and isinstance(payload, dict):
        payload = {**payload, "mentors": get_demo_mentors()}

    try:
        request = MatchmakingRequest.model_validate(payload)
    except ValidationError as e:
        errors = format_validation_errors(e.errors())
        logger.info("Invalid request payload: %d invalid field(s)", len(errors.errors))
        _emit(errors.model_dump(), out, indent)
        return EXIT_INVALID

    _emit(matchmaking.match(request).model_dump(), out, indent)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Rank mentors for a mentee profile")
    parser.add_argument("request", nargs="?", default="-", help="Request JSON file, or - for stdin")
    parser.add_argument("--demo", action="store_true", help="Use the built-in demo mentors")
    parser.add_argument("--indent", type=int, default=2)
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    return run(args.request, demo=args.demo, indent=args.indent)


if __name__ == "__main__":
    sys.exit(main())
