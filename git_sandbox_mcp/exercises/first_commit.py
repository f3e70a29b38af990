"""Exercise 1: initialize a repository and make the first commit."""

from git_sandbox_mcp.models.engine import EngineState
from git_sandbox_mcp.models.exercise import ExerciseConfig
from git_sandbox_mcp.models.file_system import DirectoryNode, FileNode


def _has_single_commit(state: EngineState) -> bool:
    return state.git.is_initialized and len(state.git.commits) == 1


EXERCISE = ExerciseConfig(
    id=1,
    title="Initialize and First Commit",
    initial_file_structure=DirectoryNode(
        children={
            "index.js": FileNode(),
            "app.js": FileNode(),
        }
    ),
    allowed_commands=(
        "ls",
        "git init",
        "git status",
        "git add",
        "git commit",
        "git log",
    ),
    steps=(
        "Use ls to see files in your working directory.",
        "Run git init to initialize a new Git repository.",
        "Check git status to see untracked files.",
        "Stage all files using git add .",
        'Create your first commit with git commit -m "initial commit".',
        "View your commit history with git log.",
    ),
    goal="Turn the project folder into a Git repository and record its first commit.",
    success_condition=_has_single_commit,
)
