from git_sandbox_mcp.models.file_system import PATH_SEPARATOR, ROOT_PATH


def split_path(path: str) -> list[str]:
    """Splits a path into its non-empty segments."""
    return [part for part in path.split(PATH_SEPARATOR) if part]


def normalize_path(path: str) -> str:
    """Collapses repeated separators and drops the trailing one."""
    return PATH_SEPARATOR + PATH_SEPARATOR.join(split_path(path))


def resolve_path(cwd: str, path_str: str) -> str:
    """
    Resolves a user-provided path against the current working directory.

    Args:
        cwd: The absolute working directory, always under ROOT_PATH.
        path_str: The path string typed by the user.

    Returns:
        A normalized absolute path. Resolution never fails; whether the
        path exists is decided later by a lookup.
    """
    if path_str == PATH_SEPARATOR:
        return ROOT_PATH

    if path_str.startswith(PATH_SEPARATOR):
        return normalize_path(path_str)

    parts = split_path(cwd)
    root_depth = len(split_path(ROOT_PATH))

    for part in split_path(path_str):
        if part == "..":
            # ".." never climbs above the root directory
            if len(parts) > root_depth:
                parts.pop()
        elif part != ".":
            parts.append(part)

    return PATH_SEPARATOR + PATH_SEPARATOR.join(parts)


def display_path(path: str) -> str:
    """Strips the root prefix so paths read like they do in a real checkout."""
    prefix = ROOT_PATH + PATH_SEPARATOR
    if path.startswith(prefix):
        return path[len(prefix):]
    return path
