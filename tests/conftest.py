"""
Общие фикстуры для тестов песочницы
"""

import pytest

from git_sandbox_mcp.engine.dispatcher import CommandDispatcher
from git_sandbox_mcp.engine.file_system import create_file_system
from git_sandbox_mcp.models.engine import EngineState
from git_sandbox_mcp.models.file_system import DirectoryNode, FileNode

ALL_COMMANDS = (
    "ls", "cd", "pwd", "cat", "touch", "mkdir", "rm", "clear", "help",
    "git init", "git add", "git commit", "git status", "git log",
)


def _make_state(root: DirectoryNode | None = None) -> EngineState:
    return EngineState(file_system=create_file_system(root or DirectoryNode()))


@pytest.fixture
def project_tree():
    """Создает дерево: /root/a.js, /root/src/index.js, /root/src/lib/util.js"""
    return DirectoryNode(
        children={
            "a.js": FileNode(),
            "src": DirectoryNode(
                children={
                    "index.js": FileNode(),
                    "lib": DirectoryNode(children={"util.js": FileNode()}),
                }
            ),
        }
    )


@pytest.fixture
def project_state(project_tree):
    """Создает EngineState с неинициализированным репозиторием"""
    return _make_state(project_tree)


@pytest.fixture
def dispatcher():
    """Создает CommandDispatcher со стандартным реестром"""
    return CommandDispatcher()


@pytest.fixture
def run(dispatcher):
    """Выполняет последовательность команд и возвращает последний результат"""

    def _run(state, *lines, allowed=ALL_COMMANDS):
        result = None
        for line in lines:
            result = dispatcher.dispatch(state, line, allowed)
            state = result.state
        return result

    return _run


@pytest.fixture
def make_state():
    """Фабрика EngineState из произвольного дерева"""
    return _make_state
