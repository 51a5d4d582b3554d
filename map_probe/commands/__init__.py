"""
Commands package for the map semantics probe.

Each sub-command lives in its own module and returns a CommandResult
that the router turns into an exit code.
"""

from .duplicates import duplicates_command
from .iteration_stability import iteration_stability_command
from .key_eligibility import key_eligibility_command
from .missing_key import missing_key_command
from .report import report_command

__all__ = [
    "duplicates_command",
    "iteration_stability_command",
    "key_eligibility_command",
    "missing_key_command",
    "report_command",
]
