from pydantic import BaseModel, ConfigDict, Field

from git_sandbox_mcp.models.file_system import FileSystemState
from git_sandbox_mcp.models.git import GitState


class EngineState(BaseModel):
    """The unit of dispatch input and output: file system plus repository."""

    model_config = ConfigDict(frozen=True)

    file_system: FileSystemState = Field(default_factory=FileSystemState)
    git: GitState = Field(default_factory=GitState)


class CommandResult(BaseModel):
    """Result of running one command line against an EngineState."""

    model_config = ConfigDict(frozen=True)

    state: EngineState
    output: str = ""
    clear_terminal: bool = False
