"""
Command-line interface for the map semantics probe.

Uses focused components for argument parsing and command routing; this
module wires them to settings and logging and turns results into exit codes.
"""

import logging
import sys

from ..config import get_environment_config
from ..services.probe_service import create_probe
from ..utilities.console import print_error_code
from ..utilities.constants import ProbeError
from .argument_parser import create_cli_parser
from .command_router import create_command_router

logger = logging.getLogger(__name__)

_PACKAGE_LOGGER = "map_probe"
_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: int) -> None:
    """Send package log records to the current stderr at ``level``."""
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if getattr(handler, "_map_probe_handler", False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    handler._map_probe_handler = True
    package_logger.addHandler(handler)
    package_logger.setLevel(level)


def main(argv=None) -> int:
    """
    Main CLI entry point.

    Returns:
        Process exit code: 0 on success, 1 on a probe error, 2 on usage errors
    """
    parser = create_cli_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_environment_config().with_overrides(
            profile=args.profile,
            seed=args.seed,
            log_level="DEBUG" if args.verbose else None,
        )
        configure_logging(settings.numeric_log_level)

        if not args.command:
            parser.print_help()
            return 0

        router = create_command_router(create_probe(settings))
        return router.route_command(args).exit_code

    except ProbeError as e:
        logger.error(f"{e.code}: {e}")
        print_error_code(e.code)
        return 1
    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
        return 130
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


__all__ = ["configure_logging", "main"]
