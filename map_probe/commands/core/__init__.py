from .command_result import CommandResult, CommandStatus

__all__ = ["CommandResult", "CommandStatus"]
