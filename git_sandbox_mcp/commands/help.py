from collections.abc import Sequence
from typing import override

from git_sandbox_mcp.commands.base import Command
from git_sandbox_mcp.models.engine import CommandResult, EngineState


class HelpCommand(Command):
    """
    Lists the commands available in the current exercise.

    The dispatcher supplies the exercise's allow-list, so the listing never
    mentions a command the learner cannot run.
    """

    def __init__(self, allowed_commands: Sequence[str] = ()) -> None:
        self._allowed_commands = tuple(allowed_commands)

    def with_commands(self, allowed_commands: Sequence[str]) -> "HelpCommand":
        return HelpCommand(allowed_commands)

    @override
    def get_name(self) -> str:
        return "help"

    @override
    def get_description(self) -> str:
        return "List the commands available in this exercise."

    @override
    def execute(self, state: EngineState, args: list[str]) -> CommandResult:
        lines = ["Available commands:", ""]
        lines.extend(f"  {command}" for command in self._allowed_commands)
        return CommandResult(state=state, output="\n".join(lines))
