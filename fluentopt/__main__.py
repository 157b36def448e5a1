from __future__ import annotations
import argparse
import sys
from typing import List

from .errors import AbsenceError, ContractError
from .logger import ConsoleLogger
from .optional import Optional


def _parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="fluentopt", description="Optional container demo")
    parser.add_argument("value", nargs="?", default="12", help="integer to wrap (default: 12)")
    parser.add_argument("--level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    parser.add_argument("--json", action="store_true", help="emit JSON log lines")
    parser.add_argument("--require", action="store_true", help="fail when no number passes the filter")
    args = parser.parse_args(argv)

    log = ConsoleLogger(level=args.level, json_output=args.json)
    log.info("Hello, World!")
    try:
        number = (
            Optional.of_nullable(_parse_int(args.value))
            .peek(log.tap("parsed"))
            .filter(lambda n: n > 10)
        )
        log.info(f"Optional number is {number}")
        if args.require:
            log.info(f"Required number is {number.get()}")
    except (AbsenceError, ContractError) as e:
        log.error("demo failed", error=repr(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
