#!/usr/bin/env python3
"""
INDENTDETECT CLI
----------------
Command-line front end. Parses FILE FORMAT DEFTABWIDTH, runs the engine
and maps the outcome to output and exit status:

    0  result line printed on stdout
    1  detection or configuration error, message on stderr
    2  usage error

Author: IndentDetect Team
Date: 2026-10-18
"""

import sys
import argparse
import logging
from typing import List, Optional

from rich.logging import RichHandler

from indentdetect.cli.formatter import CliFormatter, err_console
from indentdetect.core.config import DetectConfig
from indentdetect.core.engine import DetectionEngine
from indentdetect.core.errors import ConfigError

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


class IndentDetectCLI:
    """
    CLI wrapper that turns command-line arguments into an engine run.
    """

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog="indentdetect",
            description="Detect the indentation style (tabs/spaces and width) of a file.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=(
                "FORMAT: output format (`vim` or `generic`)\n"
                "DEFTABWIDTH: default tab width\n"
                "\n"
                "Put `--` before FILE when its name starts with '-'."
            ),
        )
        self.formatter = CliFormatter()
        self._setup_args()

    def _setup_args(self):
        self.parser.add_argument("-V", "--version", action="version", version="indentdetect v1.0.0")
        self.parser.add_argument("--verbose", action="store_true", help="Log sampling details to stderr")
        self.parser.add_argument("--explain", action="store_true", help="Print a summary of the sampled lines to stderr")
        self.parser.add_argument("file", metavar="FILE", help="File to inspect ('-' for standard input)")
        # Validated by DetectConfig so that bad values exit 1, not 2
        self.parser.add_argument("format", metavar="FORMAT", help="Output format: generic or vim")
        self.parser.add_argument("def_tab_width", metavar="DEFTABWIDTH", help="Tab width used when only tabs are found")

    def _setup_logging(self, verbose: bool):
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
            force=True,
        )

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary entry point. Returns the process exit status."""
        try:
            args = self.parser.parse_args(argv)
        except SystemExit as e:
            # argparse exits 0 for --help/--version and 2 for usage errors
            code = e.code if isinstance(e.code, int) else EXIT_USAGE
            if code == EXIT_USAGE:
                self.parser.print_help(sys.stderr)
            return code

        self._setup_logging(args.verbose)

        try:
            config = DetectConfig.from_strings(args.format, args.def_tab_width)
        except ConfigError as e:
            self.formatter.print_error(str(e))
            return EXIT_FAILURE

        report = DetectionEngine(config).detect_file(args.file)
        if not report["success"]:
            self.formatter.print_error(report["error"])
            return EXIT_FAILURE

        if args.explain:
            self.formatter.print_explain(report)
        self.formatter.print_result(report)
        return EXIT_OK


def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(IndentDetectCLI().run())
    except KeyboardInterrupt:
        err_console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(EXIT_FAILURE)


if __name__ == "__main__":
    main()
