"""
Pure operations on the simplified Git object/ref store.

Repository lifecycle: Uninitialized -> Initialized (main unborn) ->
Initialized (main has commits). `init` is the only way out of the first
state and `commit` the only way to move a branch tip.
"""

import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from types import MappingProxyType

from git_sandbox_mcp.models.errors import MissingCommitMessage, NothingToCommit
from git_sandbox_mcp.models.git import DEFAULT_BRANCH, Commit, FileStatus, GitState

logger = logging.getLogger(__name__)

INITIALIZED_MESSAGE = "Initialized empty Git repository."
REINITIALIZED_MESSAGE = "Reinitialized existing Git repository."
NOTHING_TO_COMMIT_MESSAGE = "nothing to commit, working tree clean"
COMMIT_MESSAGE_REQUIRED = 'error: commit message required. Usage: git commit -m "message"'

COMMIT_ID_PREFIX = "C"


def init(state: GitState) -> tuple[GitState, str]:
    """Initializes the repository; a second call only reports reinitialization."""
    if state.is_initialized:
        return state, REINITIALIZED_MESSAGE

    new_state = state.model_copy(
        update={
            "is_initialized": True,
            "current_branch": DEFAULT_BRANCH,
            "branches": MappingProxyType({DEFAULT_BRANCH: None}),
        }
    )
    return new_state, INITIALIZED_MESSAGE


def file_status(state: GitState, path: str) -> FileStatus:
    if path in state.staged_files:
        return FileStatus.STAGED
    if path in state.tracked_files:
        return FileStatus.TRACKED_CLEAN
    return FileStatus.UNTRACKED


def stage(state: GitState, paths: Iterable[str]) -> GitState:
    staged = state.staged_files | frozenset(paths)
    if staged == state.staged_files:
        return state
    return state.model_copy(update={"staged_files": staged})


def unstage_and_untrack(state: GitState, path: str) -> GitState:
    """Forgets a path entirely, as when its file is deleted from the tree."""
    if path not in state.staged_files and path not in state.tracked_files:
        return state
    return state.model_copy(
        update={
            "staged_files": state.staged_files - {path},
            "tracked_files": state.tracked_files - {path},
        }
    )


def head_commit_id(state: GitState) -> str | None:
    """The tip of the current branch, or None while it is unborn."""
    return state.branches.get(state.current_branch)


def commit(state: GitState, message: str, timestamp: datetime | None = None) -> tuple[GitState, Commit]:
    """
    Records the staging area as a new commit on the current branch.

    Args:
        state: The repository before the commit.
        message: The commit message, must be non-empty.
        timestamp: When the commit happened. Defaults to the current UTC time.

    Returns:
        The updated repository and the commit that was created.

    Raises:
        MissingCommitMessage: If the message is empty.
        NothingToCommit: If nothing is staged.
    """
    if not message:
        raise MissingCommitMessage(COMMIT_MESSAGE_REQUIRED)
    if not state.staged_files:
        raise NothingToCommit(NOTHING_TO_COMMIT_MESSAGE)

    counter = state.commit_counter + 1
    commit_id = f"{COMMIT_ID_PREFIX}{counter}"
    parent_id = head_commit_id(state)
    tracked = state.tracked_files | state.staged_files

    new_commit = Commit(
        id=commit_id,
        message=message,
        parents=(parent_id,) if parent_id else (),
        timestamp=timestamp or datetime.now(timezone.utc),
        snapshot=tracked,
    )

    branches = dict(state.branches)
    branches[state.current_branch] = commit_id

    logger.debug(f"Created commit {commit_id} on {state.current_branch} with {len(state.staged_files)} file(s)")
    new_state = state.model_copy(
        update={
            "commits": state.commits + (new_commit,),
            "branches": MappingProxyType(branches),
            "staged_files": frozenset(),
            "tracked_files": tracked,
            "commit_counter": counter,
        }
    )
    return new_state, new_commit


def chronological(state: GitState) -> list[Commit]:
    """Commits oldest first; commits sharing a timestamp keep creation order."""
    ordered = sorted(enumerate(state.commits), key=lambda item: (item[1].timestamp, item[0]))
    return [c for _, c in ordered]


def log(state: GitState) -> list[Commit]:
    """Commits newest first; on equal timestamps the later-created commit comes first."""
    return list(reversed(chronological(state)))
