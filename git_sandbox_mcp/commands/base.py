"""Base class shared by all command handlers."""

import logging
from abc import ABC, abstractmethod

from git_sandbox_mcp.models.engine import CommandResult, EngineState
from git_sandbox_mcp.models.errors import CommandError

logger = logging.getLogger(__name__)


class Command(ABC):
    """
    A terminal command that maps an EngineState and its arguments to a new
    EngineState plus text output.

    Subclasses implement `execute` and may raise CommandError; calling the
    command turns any such error into output with the state left unchanged,
    so a command never raises to its caller.
    """

    @abstractmethod
    def get_name(self) -> str:
        """The registry key, e.g. "ls" or "git add"."""
        pass

    @abstractmethod
    def get_description(self) -> str:
        pass

    @abstractmethod
    def execute(self, state: EngineState, args: list[str]) -> CommandResult:
        pass

    def __call__(self, state: EngineState, args: list[str]) -> CommandResult:
        try:
            return self.execute(state, args)
        except CommandError as e:
            logger.debug(f"{self.get_name()} failed: {e.message}")
            return CommandResult(state=state, output=e.message)
