#!/usr/bin/env python3
"""Access Report - Entry point"""

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from access_report import VERSION, LogAnalyzer, LogFileError, print_report


class ArgumentParser(argparse.ArgumentParser):
    """Usage errors exit with status 1"""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def setup_logging(verbose: bool = False, debug: bool = False):
    if debug:
        loglevel = logging.DEBUG
    elif verbose:
        loglevel = logging.INFO
    else:
        loglevel = logging.WARNING

    logging.basicConfig(
        format="%(message)s",
        level=loglevel,
        handlers=[
            RichHandler(console=Console(stderr=True), log_time_format="%Y-%m-%d %H:%M:%S")
        ],
        force=True,
    )


def parse_args(argv=None):
    parser = ArgumentParser(
        description="Access Report - Apache access log analytics",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("logfile", help="Apache access log to analyze")
    parser.add_argument("-o", "--output", help="Also save the report to a file (JSON)")
    parser.add_argument("-j", "--json", action="store_true", help="JSON output only")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    parser.add_argument("-d", "--debug", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"AccessReport v{VERSION}")

    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.verbose, args.debug)

    console = Console()
    analyzer = LogAnalyzer(console=Console(stderr=True) if not args.json else None)

    try:
        report = analyzer.analyze_file(args.logfile)
    except LogFileError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}", highlight=False, soft_wrap=True)
        sys.exit(1)

    if args.json:
        print(json.dumps(report, indent=2))
    else:
        print_report(report, console)

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(report, f, indent=2)
        logging.getLogger(__name__).info("Report saved to: %s", args.output)


if __name__ == "__main__":
    main()
