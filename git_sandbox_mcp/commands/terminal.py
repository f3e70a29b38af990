"""Filesystem navigation commands: ls, cd, pwd, cat, touch, mkdir, rm, clear."""

import logging
from typing import override

from git_sandbox_mcp.commands.base import Command
from git_sandbox_mcp.engine import file_system as fs
from git_sandbox_mcp.engine import git_store
from git_sandbox_mcp.models.engine import CommandResult, EngineState
from git_sandbox_mcp.models.errors import AlreadyExists, MissingOperand, PathNotFound, WrongNodeKind
from git_sandbox_mcp.models.file_system import ROOT_PATH, DirectoryNode, FileNode
from git_sandbox_mcp.utils.path_utils import resolve_path

logger = logging.getLogger(__name__)

EMPTY_DIRECTORY = "(empty directory)"
EMPTY_FILE = "(empty file)"


class LsCommand(Command):
    @override
    def get_name(self) -> str:
        return "ls"

    @override
    def get_description(self) -> str:
        return "List the contents of the current directory."

    @override
    def execute(self, state: EngineState, args: list[str]) -> CommandResult:
        entries = fs.list_children(state.file_system, state.file_system.cwd)
        if not entries:
            return CommandResult(state=state, output=EMPTY_DIRECTORY)
        return CommandResult(state=state, output="  ".join(entries))


class CdCommand(Command):
    @override
    def get_name(self) -> str:
        return "cd"

    @override
    def get_description(self) -> str:
        return "Change the current directory. With no argument, return to the root."

    @override
    def execute(self, state: EngineState, args: list[str]) -> CommandResult:
        target = args[0] if args else ROOT_PATH
        resolved = resolve_path(state.file_system.cwd, target)

        match fs.lookup(state.file_system, resolved):
            case None:
                raise PathNotFound(f"cd: no such file or directory: {target}")
            case FileNode():
                raise WrongNodeKind(f"cd: not a directory: {target}")
            case DirectoryNode():
                new_fs = fs.change_directory(state.file_system, resolved)

        return CommandResult(state=state.model_copy(update={"file_system": new_fs}))


class PwdCommand(Command):
    @override
    def get_name(self) -> str:
        return "pwd"

    @override
    def get_description(self) -> str:
        return "Print the current directory."

    @override
    def execute(self, state: EngineState, args: list[str]) -> CommandResult:
        return CommandResult(state=state, output=state.file_system.cwd)


class CatCommand(Command):
    @override
    def get_name(self) -> str:
        return "cat"

    @override
    def get_description(self) -> str:
        return "Show a file. Files in the sandbox have no content."

    @override
    def execute(self, state: EngineState, args: list[str]) -> CommandResult:
        if not args:
            raise MissingOperand("cat: missing operand")

        target = args[0]
        resolved = resolve_path(state.file_system.cwd, target)

        match fs.lookup(state.file_system, resolved):
            case None:
                raise PathNotFound(f"cat: {target}: No such file or directory")
            case DirectoryNode():
                raise WrongNodeKind(f"cat: {target}: Is a directory")
            case FileNode():
                return CommandResult(state=state, output=EMPTY_FILE)


class TouchCommand(Command):
    @override
    def get_name(self) -> str:
        return "touch"

    @override
    def get_description(self) -> str:
        return "Create an empty file."

    @override
    def execute(self, state: EngineState, args: list[str]) -> CommandResult:
        if not args:
            raise MissingOperand("touch: missing file operand")

        target = args[0]
        resolved = resolve_path(state.file_system.cwd, target)
        if fs.lookup(state.file_system, resolved) is not None:
            return CommandResult(state=state)

        new_fs = fs.create_file(state.file_system, resolved)
        if new_fs is state.file_system:
            raise PathNotFound(f"touch: cannot touch '{target}': No such file or directory")
        return CommandResult(state=state.model_copy(update={"file_system": new_fs}))


class MkdirCommand(Command):
    @override
    def get_name(self) -> str:
        return "mkdir"

    @override
    def get_description(self) -> str:
        return "Create a directory."

    @override
    def execute(self, state: EngineState, args: list[str]) -> CommandResult:
        if not args:
            raise MissingOperand("mkdir: missing operand")

        target = args[0]
        resolved = resolve_path(state.file_system.cwd, target)
        if fs.lookup(state.file_system, resolved) is not None:
            raise AlreadyExists(f"mkdir: cannot create directory '{target}': File exists")

        new_fs = fs.create_directory(state.file_system, resolved)
        if new_fs is state.file_system:
            raise PathNotFound(f"mkdir: cannot create directory '{target}': No such file or directory")
        return CommandResult(state=state.model_copy(update={"file_system": new_fs}))


class RmCommand(Command):
    @override
    def get_name(self) -> str:
        return "rm"

    @override
    def get_description(self) -> str:
        return "Remove a file. The file is also dropped from the staging area and tracking."

    @override
    def execute(self, state: EngineState, args: list[str]) -> CommandResult:
        if not args:
            raise MissingOperand("rm: missing operand")

        target = args[0]
        resolved = resolve_path(state.file_system.cwd, target)

        match fs.lookup(state.file_system, resolved):
            case None:
                raise PathNotFound(f"rm: cannot remove '{target}': No such file or directory")
            case DirectoryNode():
                raise WrongNodeKind(f"rm: cannot remove '{target}': Is a directory")
            case FileNode():
                pass

        return CommandResult(
            state=EngineState(
                file_system=fs.remove(state.file_system, resolved),
                git=git_store.unstage_and_untrack(state.git, resolved),
            )
        )


class ClearCommand(Command):
    @override
    def get_name(self) -> str:
        return "clear"

    @override
    def get_description(self) -> str:
        return "Clear the terminal."

    @override
    def execute(self, state: EngineState, args: list[str]) -> CommandResult:
        return CommandResult(state=state, clear_terminal=True)
