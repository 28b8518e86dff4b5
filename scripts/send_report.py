from __future__ import annotations

import argparse
import logging
import sys

from telegram_reports.errors import DeliveryError
from telegram_reports.models.entities import ReportLevel
from telegram_reports.services.reporter import Reporter


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Send one report to the configured Telegram chat")
    parser.add_argument("content", help="Report body (HTML subset allowed)")
    parser.add_argument(
        "--level",
        default=ReportLevel.INFORMATION.value,
        choices=[lvl.value for lvl in ReportLevel],
        help="Report level",
    )
    parser.add_argument("--title", default=None, help="Custom title (defaults to the level name)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        reporter = Reporter.from_settings()
    except ValueError as exc:
        print(f"config error: {exc}", file=sys.stderr)
        return 2

    with reporter:
        try:
            msg = reporter.report(args.level, args.content, args.title)
        except DeliveryError as exc:
            print(f"delivery failed: {exc}", file=sys.stderr)
            return 1

    print(f"OK: message_id={msg.message_id}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
