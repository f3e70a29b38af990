"""Git commands supported by the sandbox: init, add, commit, status, log."""

import logging
import re
from abc import abstractmethod
from typing import override

from git_sandbox_mcp.commands.base import Command
from git_sandbox_mcp.engine import file_system as fs
from git_sandbox_mcp.engine import git_store
from git_sandbox_mcp.models.engine import CommandResult, EngineState
from git_sandbox_mcp.models.errors import MissingOperand, NotARepository, NothingToStage, PathNotFound
from git_sandbox_mcp.models.file_system import ROOT_PATH, DirectoryNode, FileNode
from git_sandbox_mcp.models.git import FileStatus
from git_sandbox_mcp.utils.path_utils import display_path, resolve_path

logger = logging.getLogger(__name__)

NO_UNTRACKED_FILES = "No untracked files to add."
NO_COMMITS_YET = "No commits yet."

_QUOTED_MESSAGE = re.compile(r'^"(.+)"$')


def _plural(count: int) -> str:
    return "s" if count > 1 else ""


class GitCommand(Command):
    """A git subcommand that needs an initialized repository."""

    @override
    def execute(self, state: EngineState, args: list[str]) -> CommandResult:
        if not state.git.is_initialized:
            raise NotARepository()
        return self.execute_in_repository(state, args)

    @abstractmethod
    def execute_in_repository(self, state: EngineState, args: list[str]) -> CommandResult:
        pass


class GitInitCommand(Command):
    @override
    def get_name(self) -> str:
        return "git init"

    @override
    def get_description(self) -> str:
        return "Create an empty Git repository."

    @override
    def execute(self, state: EngineState, args: list[str]) -> CommandResult:
        new_git, message = git_store.init(state.git)
        if new_git is state.git:
            return CommandResult(state=state, output=message)
        return CommandResult(state=state.model_copy(update={"git": new_git}), output=message)


class GitAddCommand(GitCommand):
    @override
    def get_name(self) -> str:
        return "git add"

    @override
    def get_description(self) -> str:
        return "Stage a file, every untracked file in a directory, or everything with '.'."

    @override
    def execute_in_repository(self, state: EngineState, args: list[str]) -> CommandResult:
        if not args:
            raise MissingOperand("Nothing specified, nothing added.")

        target = args[0]
        if target == ".":
            return self._stage_untracked(state, fs.all_file_paths(state.file_system.root, ROOT_PATH))

        resolved = resolve_path(state.file_system.cwd, target)
        match fs.lookup(state.file_system, resolved):
            case None:
                raise PathNotFound(f"fatal: pathspec '{target}' did not match any files")
            case DirectoryNode() as directory:
                return self._stage_untracked(state, fs.all_file_paths(directory, resolved))
            case FileNode():
                return self._stage_file(state, target, resolved)

    def _stage_untracked(self, state: EngineState, paths: list[str]) -> CommandResult:
        to_stage = [p for p in paths if git_store.file_status(state.git, p) == FileStatus.UNTRACKED]
        if not to_stage:
            raise NothingToStage(NO_UNTRACKED_FILES)

        new_git = git_store.stage(state.git, to_stage)
        return CommandResult(
            state=state.model_copy(update={"git": new_git}),
            output=f"{len(to_stage)} file{_plural(len(to_stage))} added to staging area.",
        )

    def _stage_file(self, state: EngineState, target: str, resolved: str) -> CommandResult:
        match git_store.file_status(state.git, resolved):
            case FileStatus.STAGED:
                return CommandResult(state=state, output=f"'{target}' is already staged.")
            case FileStatus.TRACKED_CLEAN:
                return CommandResult(state=state, output=f"'{target}' is already tracked and clean.")
            case FileStatus.UNTRACKED:
                new_git = git_store.stage(state.git, [resolved])
                return CommandResult(
                    state=state.model_copy(update={"git": new_git}),
                    output=f"'{target}' added to staging area.",
                )


def parse_commit_message(args: list[str]) -> str | None:
    """
    Extracts the message following -m.

    Tokens after -m are re-joined with single spaces; a double-quoted string
    yields its contents, an unquoted single word is taken as-is.
    """
    if "-m" not in args:
        return None
    index = args.index("-m")
    if index >= len(args) - 1:
        return None

    raw = " ".join(args[index + 1:])
    match = _QUOTED_MESSAGE.match(raw)
    if match:
        return match.group(1)
    # An empty or unbalanced quote is not a message
    if raw and " " not in raw and '"' not in raw:
        return raw
    return None


class GitCommitCommand(GitCommand):
    @override
    def get_name(self) -> str:
        return "git commit"

    @override
    def get_description(self) -> str:
        return 'Record the staged files as a new commit: git commit -m "message".'

    @override
    def execute_in_repository(self, state: EngineState, args: list[str]) -> CommandResult:
        message = parse_commit_message(args) or ""
        file_count = len(state.git.staged_files)
        new_git, new_commit = git_store.commit(state.git, message)

        logger.info(f"Committed {new_commit.id} on {new_git.current_branch}")
        return CommandResult(
            state=state.model_copy(update={"git": new_git}),
            output=(
                f"[{new_git.current_branch} {new_commit.id}] {message}\n"
                f"{file_count} file{_plural(file_count)} committed."
            ),
        )


class GitStatusCommand(GitCommand):
    @override
    def get_name(self) -> str:
        return "git status"

    @override
    def get_description(self) -> str:
        return "Show staged and untracked files."

    @override
    def execute_in_repository(self, state: EngineState, args: list[str]) -> CommandResult:
        lines = [f"On branch {state.git.current_branch}", ""]

        staged: list[str] = []
        untracked: list[str] = []
        for path in fs.all_file_paths(state.file_system.root, ROOT_PATH):
            match git_store.file_status(state.git, path):
                case FileStatus.STAGED:
                    staged.append(path)
                case FileStatus.UNTRACKED:
                    untracked.append(path)
                case FileStatus.TRACKED_CLEAN:
                    pass

        # Staged paths whose file has since left the tree are still reported
        for path in sorted(state.git.staged_files):
            if path not in staged:
                staged.append(path)

        if staged:
            lines.append("Changes to be committed:")
            lines.extend(f"  new file:   {display_path(p)}" for p in staged)
            lines.append("")

        if untracked:
            lines.append("Untracked files:")
            lines.extend(f"  {display_path(p)}" for p in untracked)
            lines.append("")

        if not staged and not untracked:
            lines.append(git_store.NOTHING_TO_COMMIT_MESSAGE)
        elif not staged:
            lines.append("nothing added to commit but untracked files present")

        return CommandResult(state=state, output="\n".join(lines))


class GitLogCommand(GitCommand):
    @override
    def get_name(self) -> str:
        return "git log"

    @override
    def get_description(self) -> str:
        return "Show the commit history, newest first."

    @override
    def execute_in_repository(self, state: EngineState, args: list[str]) -> CommandResult:
        commits = git_store.log(state.git)
        if not commits:
            return CommandResult(state=state, output=NO_COMMITS_YET)

        entries = [f"commit {c.id}\nMessage: {c.message}" for c in commits]
        return CommandResult(state=state, output="\n\n".join(entries))
