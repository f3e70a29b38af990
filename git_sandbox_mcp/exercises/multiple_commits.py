"""Exercise 2: build a linear history of several commits."""

from git_sandbox_mcp.models.engine import EngineState
from git_sandbox_mcp.models.exercise import ExerciseConfig
from git_sandbox_mcp.models.file_system import DirectoryNode, FileNode

MIN_COMMITS = 3


def _has_enough_commits(state: EngineState) -> bool:
    return len(state.git.commits) >= MIN_COMMITS


EXERCISE = ExerciseConfig(
    id=2,
    title="Multiple Commits",
    initial_file_structure=DirectoryNode(
        children={
            "index.js": FileNode(),
            "app.js": FileNode(),
            "utils.js": FileNode(),
        }
    ),
    allowed_commands=(
        "ls",
        "cd",
        "pwd",
        "cat",
        "touch",
        "mkdir",
        "rm",
        "clear",
        "help",
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
        "Stage some or all files using git add . or git add <file>.",
        'Create your first commit with git commit -m "first commit".',
        "Create new files with touch <filename> to have something new to stage.",
        "Stage and commit again to build a linear history of at least 3 commits.",
    ),
    goal=(
        "Create multiple commits in a clean linear history. Initialize a repository, "
        "stage files, and commit at least 3 times to complete this exercise."
    ),
    success_condition=_has_enough_commits,
)
