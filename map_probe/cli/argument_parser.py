"""
Focused argument parsing for the probe CLI.

Keeps argument parsing separate from command routing, with one sub-parser
per semantic check.
"""

import argparse

from ..config import PROFILES
from ..domain.container import ValueType
from ..domain.key_candidate import KeyKind
from ..utilities.constants import (
    DEFAULT_MISSING_KEY,
    REPORT_FORMATS,
    DuplicatePolicy,
    IterationOrder,
    MissPolicy,
)
from ..utilities.validators import parse_pair


class CLIArgumentParser:
    """
    Argument parser for the ``probe`` command.

    Global options precede the sub-command and override environment settings.
    """

    def __init__(self):
        """Initialize the argument parser."""
        self.parser = argparse.ArgumentParser(
            prog="probe",
            description="Probe and compare dictionary/map semantics across languages",
        )
        self._setup_global_options()
        self.subparsers = self.parser.add_subparsers(dest="command", help="Available checks")
        self._setup_all_parsers()

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def print_help(self) -> None:
        self.parser.print_help()

    def _setup_global_options(self) -> None:
        self.parser.add_argument(
            "--profile",
            choices=sorted(PROFILES),
            help="Language profile supplying default policies (default: $MAP_PROBE_PROFILE or python)",
        )
        self.parser.add_argument(
            "--seed", type=int, help="Seed for randomized iteration order (default: $MAP_PROBE_SEED)"
        )
        self.parser.add_argument(
            "-v", "--verbose", action="store_true", help="Enable debug logging on stderr"
        )

    def _setup_all_parsers(self) -> None:
        """Set up all command parsers."""
        self._setup_key_commands()
        self._setup_container_commands()
        self._setup_report_command()

    def _setup_key_commands(self) -> None:
        parser_kind = self.subparsers.add_parser(
            "key-eligibility", help="Check whether a key kind may be used as a map key"
        )
        parser_kind.add_argument(
            "--kind",
            required=True,
            help=f"Key kind to probe ({', '.join(KeyKind.names())})",
        )

    def _setup_container_commands(self) -> None:
        # Missing-key subcommand
        parser_missing = self.subparsers.add_parser(
            "missing-key", help="Show what a lookup of an absent key returns"
        )
        parser_missing.add_argument(
            "--policy",
            type=MissPolicy,
            choices=list(MissPolicy),
            help="Miss policy (default: from profile)",
        )
        parser_missing.add_argument(
            "--key", default=DEFAULT_MISSING_KEY, help=f"Key to query (default: {DEFAULT_MISSING_KEY})"
        )
        parser_missing.add_argument(
            "--value-type",
            type=ValueType,
            choices=list(ValueType),
            default=ValueType.STR,
            help="Declared value type whose zero value is returned (default: str)",
        )

        # Duplicates subcommand
        parser_dup = self.subparsers.add_parser(
            "duplicates", help="Resolve a repeated key during bulk construction"
        )
        parser_dup.add_argument(
            "--policy",
            type=DuplicatePolicy,
            choices=list(DuplicatePolicy),
            help="Duplicate policy (default: from profile)",
        )
        parser_dup.add_argument(
            "--pair",
            dest="pairs",
            type=parse_pair,
            action="append",
            metavar="KEY=VALUE",
            help="Input pair, repeatable and ordered (default: the Green Lantern pairs)",
        )

        # Iteration-stability subcommand
        parser_iter = self.subparsers.add_parser(
            "iteration-stability", help="Compare key order across repeated traversals"
        )
        parser_iter.add_argument(
            "--passes", type=int, help="Number of traversals, at least 2 (default: 5)"
        )
        parser_iter.add_argument(
            "--order",
            type=IterationOrder,
            choices=list(IterationOrder),
            help="Iteration order of the container (default: from profile)",
        )

    def _setup_report_command(self) -> None:
        parser_report = self.subparsers.add_parser(
            "report", help="Run every check against the active profile"
        )
        parser_report.add_argument(
            "--format",
            dest="output_format",
            choices=REPORT_FORMATS,
            default="table",
            help="Output format (default: table)",
        )
        parser_report.add_argument(
            "--passes", type=int, help="Traversals for the iteration check (default: 5)"
        )


def create_cli_parser() -> CLIArgumentParser:
    """
    Factory function to create CLI argument parser.

    Returns:
        Configured CLIArgumentParser instance
    """
    return CLIArgumentParser()
