from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

from git_sandbox_mcp.engine.file_system import create_file_system
from git_sandbox_mcp.models.engine import EngineState
from git_sandbox_mcp.models.file_system import DirectoryNode
from git_sandbox_mcp.models.git import GitState


def _never_complete(state: EngineState) -> bool:
    return False


class ExerciseConfig(BaseModel):
    """
    Describes one exercise: the starting tree, the commands the learner may
    use, and the predicate that decides when the exercise is solved.

    `allowed_commands` is the only authorization source for the dispatcher.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    initial_file_structure: DirectoryNode = Field(default_factory=DirectoryNode)
    allowed_commands: tuple[str, ...] = ()
    steps: tuple[str, ...] = ()
    goal: str | None = None
    success_condition: Callable[[EngineState], bool] = Field(
        default=_never_complete, exclude=True
    )

    def create_state(self) -> EngineState:
        """Builds a fresh engine state with an un-initialized repository."""
        return EngineState(
            file_system=create_file_system(self.initial_file_structure),
            git=GitState(),
        )

    def is_complete(self, state: EngineState) -> bool:
        return bool(self.success_condition(state))
