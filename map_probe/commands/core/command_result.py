"""
Command result types for standardized command execution results.

Provides consistent result handling and exit codes across all commands.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ...utilities.constants import ProbeError


class CommandStatus(Enum):
    """Command execution status."""

    SUCCESS = "success"
    FAILED = "failed"
    VALIDATION_ERROR = "validation_error"

    def is_success(self) -> bool:
        """Check if status indicates success."""
        return self == CommandStatus.SUCCESS


@dataclass
class CommandResult:
    """Result of command execution."""

    status: CommandStatus
    data: Any | None = None
    error_code: str | None = None
    error_message: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def exit_code(self) -> int:
        """Process exit code for this result."""
        return 0 if self.is_success() else 1

    def is_success(self) -> bool:
        """Check if command execution was successful."""
        return self.status.is_success()

    def add_metadata(self, key: str, value: Any) -> None:
        """Add metadata to the result."""
        self.metadata[key] = value

    @classmethod
    def success(cls, data: Any = None) -> "CommandResult":
        """Create a successful command result."""
        return cls(status=CommandStatus.SUCCESS, data=data)

    @classmethod
    def failure(cls, error: ProbeError, data: Any = None) -> "CommandResult":
        """Create a failed command result from a probe error."""
        return cls(
            status=CommandStatus.FAILED,
            data=data,
            error_code=error.code,
            error_message=str(error),
        )

    @classmethod
    def validation_error(cls, error: ProbeError) -> "CommandResult":
        """Create a result for input the probe refused to run with."""
        return cls(
            status=CommandStatus.VALIDATION_ERROR,
            error_code=error.code,
            error_message=str(error),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary representation."""
        return {
            "status": self.status.value,
            "data": self.data,
            "error_code": self.error_code,
            "error_message": self.error_message,
            "metadata": self.metadata,
        }

    def __str__(self) -> str:
        """String representation of the command result."""
        if self.is_success():
            return f"SUCCESS: {self.data}"
        return f"{self.status.value.upper()}: {self.error_code}"
