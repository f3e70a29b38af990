"""
Operations on the virtual file system.

Every function is total: missing paths and kind mismatches come back as None
or as an unchanged state, never as an exception. Mutations rebuild only the
directories along the changed path; all other subtrees are shared with the
input state, which is never modified.
"""

import logging
from types import MappingProxyType

from git_sandbox_mcp.models.file_system import (
    PATH_SEPARATOR,
    ROOT_PATH,
    DirectoryNode,
    FileNode,
    FileSystemState,
    FSNode,
)
from git_sandbox_mcp.utils.path_utils import normalize_path, split_path

logger = logging.getLogger(__name__)

_ROOT_SEGMENTS = split_path(ROOT_PATH)


def create_file_system(root: DirectoryNode) -> FileSystemState:
    """Builds a file system state from an exercise's initial tree, cwd at the root."""
    return FileSystemState(root=root, cwd=ROOT_PATH)


def _relative_segments(path: str) -> list[str] | None:
    """Returns the segments below the root, or None if the path is outside it."""
    parts = split_path(normalize_path(path))
    if parts[: len(_ROOT_SEGMENTS)] != _ROOT_SEGMENTS:
        return None
    return parts[len(_ROOT_SEGMENTS):]


def lookup(state: FileSystemState, path: str) -> FSNode | None:
    """Walks the tree from the root; None if any segment is missing or not a directory."""
    segments = _relative_segments(path)
    if segments is None:
        return None

    current: FSNode = state.root
    for segment in segments:
        match current:
            case DirectoryNode(children=children):
                child = children.get(segment)
                if child is None:
                    return None
                current = child
            case FileNode():
                return None
    return current


def _replace_child(
    directory: DirectoryNode, segments: list[str], name: str, node: FSNode | None
) -> DirectoryNode | None:
    """
    Returns a copy of `directory` where the entry `name` under `segments` is
    set to `node` (or deleted when node is None). None if the parent is missing.
    """
    if not segments:
        children = dict(directory.children)
        if node is None:
            children.pop(name, None)
        else:
            children[name] = node
        return directory.model_copy(update={"children": MappingProxyType(children)})

    head, rest = segments[0], segments[1:]
    match directory.children.get(head):
        case DirectoryNode() as child:
            updated = _replace_child(child, rest, name, node)
            if updated is None:
                return None
            children = dict(directory.children)
            children[head] = updated
            return directory.model_copy(update={"children": MappingProxyType(children)})
        case _:
            return None


def _insert(state: FileSystemState, path: str, node: FSNode) -> FileSystemState:
    segments = _relative_segments(path)
    if not segments:
        return state
    if lookup(state, path) is not None:
        return state

    new_root = _replace_child(state.root, segments[:-1], segments[-1], node)
    if new_root is None:
        logger.debug("Parent of %s is missing or not a directory", path)
        return state
    return state.model_copy(update={"root": new_root})


def create_file(state: FileSystemState, path: str) -> FileSystemState:
    """Inserts an empty file; no-op if the path exists or the parent is unusable."""
    return _insert(state, path, FileNode())


def create_directory(state: FileSystemState, path: str) -> FileSystemState:
    """Inserts an empty directory; no-op if the path exists or the parent is unusable."""
    return _insert(state, path, DirectoryNode())


def remove(state: FileSystemState, path: str) -> FileSystemState:
    """Deletes the entry at `path` from its parent; no-op if absent."""
    segments = _relative_segments(path)
    if not segments or lookup(state, path) is None:
        return state

    new_root = _replace_child(state.root, segments[:-1], segments[-1], None)
    if new_root is None:
        return state
    return state.model_copy(update={"root": new_root})


def change_directory(state: FileSystemState, path: str) -> FileSystemState:
    """Moves cwd to `path` if it names a directory."""
    if not isinstance(lookup(state, path), DirectoryNode):
        return state
    return state.model_copy(update={"cwd": normalize_path(path)})


def list_children(state: FileSystemState, path: str) -> list[str] | None:
    """
    Lists a directory: directories first (suffixed with the separator),
    then files, each group sorted. None if `path` is not a directory.
    """
    node = lookup(state, path)
    if not isinstance(node, DirectoryNode):
        return None

    directories: list[str] = []
    files: list[str] = []
    for name, child in node.children.items():
        match child:
            case DirectoryNode():
                directories.append(name + PATH_SEPARATOR)
            case FileNode():
                files.append(name)

    return sorted(directories) + sorted(files)


def all_file_paths(directory: DirectoryNode, prefix: str) -> list[str]:
    """Collects the absolute path of every file under `directory`, depth first."""
    result: list[str] = []
    for name, child in directory.children.items():
        child_path = prefix + PATH_SEPARATOR + name
        match child:
            case FileNode():
                result.append(child_path)
            case DirectoryNode():
                result.extend(all_file_paths(child, child_path))
    return result
