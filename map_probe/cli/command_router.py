"""
Command routing for the probe CLI.

Maps parsed sub-commands onto command functions and returns their results.
"""

import argparse
import logging
from collections.abc import Callable

from ..commands import (
    duplicates_command,
    iteration_stability_command,
    key_eligibility_command,
    missing_key_command,
    report_command,
)
from ..commands.core import CommandResult
from ..services.probe_service import MapSemanticsProbe

logger = logging.getLogger(__name__)


class CommandRouter:
    """Dispatches parsed arguments to the matching command."""

    def __init__(self, probe: MapSemanticsProbe):
        self.probe = probe
        self._routes: dict[str, Callable[[argparse.Namespace], CommandResult]] = {
            "key-eligibility": self._key_eligibility,
            "missing-key": self._missing_key,
            "duplicates": self._duplicates,
            "iteration-stability": self._iteration_stability,
            "report": self._report,
        }

    def route_command(self, args: argparse.Namespace) -> CommandResult:
        """Run the command named by ``args.command``."""
        handler = self._routes.get(args.command)
        if handler is None:
            raise ValueError(f"Unknown command: {args.command}")
        logger.debug(f"Routing command {args.command}")
        result = handler(args)
        logger.debug(f"Command {args.command} finished: {result.to_dict()}")
        return result

    def _key_eligibility(self, args: argparse.Namespace) -> CommandResult:
        return key_eligibility_command(self.probe, args.kind)

    def _missing_key(self, args: argparse.Namespace) -> CommandResult:
        return missing_key_command(
            self.probe, policy=args.policy, key=args.key, value_type=args.value_type
        )

    def _duplicates(self, args: argparse.Namespace) -> CommandResult:
        return duplicates_command(self.probe, policy=args.policy, pairs=args.pairs)

    def _iteration_stability(self, args: argparse.Namespace) -> CommandResult:
        return iteration_stability_command(self.probe, passes=args.passes, order=args.order)

    def _report(self, args: argparse.Namespace) -> CommandResult:
        return report_command(self.probe, output_format=args.output_format, passes=args.passes)


def create_command_router(probe: MapSemanticsProbe) -> CommandRouter:
    """Factory function to create the command router."""
    return CommandRouter(probe)
