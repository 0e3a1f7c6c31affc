"""CLI entry point for solfhe-analyzer."""

from __future__ import annotations

import argparse
import logging
import sys

from solfhe_analyzer.exceptions import HistorySourceError
from solfhe_analyzer.history.reader import ChromeHistoryReader
from solfhe_analyzer.poller import POLL_INTERVAL, BatchSummary, HistoryPoller, PollReport

logger = logging.getLogger(__name__)


def print_report(report: PollReport) -> None:
    """Write one poll's outcome to stdout."""
    if report.no_new_links:
        print("No new links found")
        return

    for position, url in enumerate(report.analyzed, start=1):
        print(f"Analyzed new link: {url}")
        for summary in report.summaries:
            if summary.position == position:
                _print_summary(summary)


def _print_summary(summary: BatchSummary) -> None:
    print("\nSolfhe Result (ZK compressed):")
    print(summary.encoded)
    if summary.inspection is None:
        print(f"Error decompressing: {summary.inspection_error}")
    else:
        print("\nDecompressed data (hash):")
        print(summary.inspection)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solfhe-analyzer",
        description="Summarize keywords of recently visited Chrome URLs as a SHA-256 fingerprint",
    )
    parser.add_argument(
        "--history",
        default=None,
        help="Path to a Chrome History file (or set SOLFHE_CHROME_HISTORY)",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=POLL_INTERVAL,
        help=f"Seconds between polls (default: {POLL_INTERVAL})",
    )
    parser.add_argument(
        "--fetch-retries",
        type=int,
        default=0,
        help="Retry a failed history read this many times with backoff (default: 0)",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Poll a single time and exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    reader = ChromeHistoryReader(history_path=args.history)
    poller = HistoryPoller(reader, fetch_retries=args.fetch_retries)

    try:
        if args.once:
            print_report(poller.poll_once())
        else:
            poller.run(interval=args.interval, on_report=print_report)
    except HistorySourceError as e:
        logger.error("Cannot read browser history: %s", e)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
