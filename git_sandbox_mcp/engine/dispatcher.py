"""
Command registry and dispatcher.

A line is resolved in a fixed order: registered handler lookup, then the
exercise allow-list, then invocation. The order decides which of the three
messages a learner sees for a rejected line (unknown command, not allowed in
this exercise, or the handler's own error).
"""

import logging
from collections.abc import Collection, Mapping, Sequence
from typing import NamedTuple

from git_sandbox_mcp.commands.base import Command
from git_sandbox_mcp.commands.git import (
    GitAddCommand,
    GitCommitCommand,
    GitInitCommand,
    GitLogCommand,
    GitStatusCommand,
)
from git_sandbox_mcp.commands.help import HelpCommand
from git_sandbox_mcp.commands.terminal import (
    CatCommand,
    CdCommand,
    ClearCommand,
    LsCommand,
    MkdirCommand,
    PwdCommand,
    RmCommand,
    TouchCommand,
)
from git_sandbox_mcp.models.engine import CommandResult, EngineState
from git_sandbox_mcp.models.errors import CommandError, CommandNotAllowed, UnknownCommand

logger = logging.getLogger(__name__)

HELP_KEY = "help"
GIT_PREFIX = "git"

# Subcommands that exist in real Git; the sandbox answers "not allowed"
# for these instead of "unknown command".
KNOWN_GIT_SUBCOMMANDS = frozenset(
    {
        "init", "add", "commit", "status", "log",
        "branch", "checkout", "merge", "rebase", "reset",
        "stash", "cherry-pick", "tag", "switch", "diff",
        "push", "pull", "fetch", "clone", "remote",
    }
)


class ParsedInput(NamedTuple):
    command_key: str
    args: list[str]


def parse_input(raw_input: str) -> ParsedInput:
    """
    Splits a line on whitespace into a registry key and its arguments.
    `git <sub>` forms a two-word key.
    """
    parts = raw_input.split()
    if not parts:
        return ParsedInput("", [])
    if parts[0] == GIT_PREFIX and len(parts) >= 2:
        return ParsedInput(f"{GIT_PREFIX} {parts[1]}", parts[2:])
    return ParsedInput(parts[0], parts[1:])


def build_default_registry() -> dict[str, Command]:
    """Returns a fresh registry holding every command the sandbox implements."""
    commands: list[Command] = [
        LsCommand(),
        CdCommand(),
        PwdCommand(),
        CatCommand(),
        TouchCommand(),
        MkdirCommand(),
        RmCommand(),
        ClearCommand(),
        GitInitCommand(),
        GitAddCommand(),
        GitCommitCommand(),
        GitStatusCommand(),
        GitLogCommand(),
    ]
    return {command.get_name(): command for command in commands}


class CommandDispatcher:
    """Routes raw terminal input to the registered command handlers."""

    def __init__(
        self,
        registry: Mapping[str, Command] | None = None,
        known_git_subcommands: Collection[str] = KNOWN_GIT_SUBCOMMANDS,
    ) -> None:
        self._registry: dict[str, Command] = dict(registry) if registry is not None else build_default_registry()
        self._known_git_subcommands = frozenset(known_git_subcommands)
        self._help = HelpCommand()

    @property
    def command_names(self) -> list[str]:
        return list(self._registry)

    def get_command(self, command_key: str) -> Command | None:
        return self._registry.get(command_key)

    def _is_known_git_command(self, command_key: str) -> bool:
        prefix = GIT_PREFIX + " "
        return command_key.startswith(prefix) and command_key[len(prefix):] in self._known_git_subcommands

    def _resolve(self, command_key: str, allowed_commands: Sequence[str]) -> Command:
        if command_key == HELP_KEY:
            if HELP_KEY not in allowed_commands:
                raise CommandNotAllowed()
            return self._help.with_commands(allowed_commands)

        command = self._registry.get(command_key)
        if command is None:
            if self._is_known_git_command(command_key):
                raise CommandNotAllowed()
            raise UnknownCommand(command_key)

        if command_key not in allowed_commands:
            raise CommandNotAllowed()
        return command

    def dispatch(self, state: EngineState, raw_input: str, allowed_commands: Sequence[str]) -> CommandResult:
        """
        Runs one line of input.

        Args:
            state: The engine state the line runs against.
            raw_input: The line as typed.
            allowed_commands: Command keys the current exercise permits.

        Returns:
            The handler's result, or the input state with a rejection
            message when the line is empty, unknown, or not allowed.
        """
        command_key, args = parse_input(raw_input)
        if not command_key:
            return CommandResult(state=state)

        try:
            command = self._resolve(command_key, allowed_commands)
        except CommandError as e:
            logger.info(f"Rejected '{command_key}': {e.message}")
            return CommandResult(state=state, output=e.message)

        logger.debug(f"Dispatching '{command_key}' with args {args}")
        return command(state, args)
