#!/usr/bin/env python3
"""
Unit тесты для dispatcher.py
"""

from unittest.mock import MagicMock

import pytest

from git_sandbox_mcp.commands.terminal import LsCommand
from git_sandbox_mcp.engine.dispatcher import CommandDispatcher, build_default_registry, parse_input
from git_sandbox_mcp.models.engine import CommandResult

NOT_ALLOWED = "This command is not allowed in this exercise."


class TestParseInput:
    """Тесты для parse_input"""

    def test_empty(self):
        assert parse_input("   ") == ("", [])

    def test_single_word(self):
        assert parse_input("cd  src ") == ("cd", ["src"])

    def test_git_two_word_key(self):
        assert parse_input('git commit -m "hello world"') == ("git commit", ["-m", '"hello', 'world"'])

    def test_bare_git(self):
        assert parse_input("git") == ("git", [])


class TestDispatch:
    """Тесты для CommandDispatcher.dispatch"""

    def test_empty_input(self, dispatcher, project_state):
        result = dispatcher.dispatch(project_state, "  ", ["ls"])
        assert result.output == ""
        assert result.state is project_state

    def test_unknown_command(self, dispatcher, project_state):
        result = dispatcher.dispatch(project_state, "foo bar", ["ls"])
        assert result.output == "Unknown command: foo"
        assert result.state is project_state

    def test_unknown_git_subcommand(self, dispatcher, project_state):
        assert dispatcher.dispatch(project_state, "git frobnicate", ["ls"]).output == "Unknown command: git frobnicate"

    @pytest.mark.parametrize("line", ["git branch feature", "git merge dev", "git cherry-pick C1"])
    def test_known_but_unimplemented_git_command(self, dispatcher, project_state, line):
        """Тест: команды реального git без обработчика -> 'not allowed'"""
        assert dispatcher.dispatch(project_state, line, ["git branch", "git merge"]).output == NOT_ALLOWED

    def test_registered_but_not_allowed(self, project_state):
        """Тест: обработчик не вызывается, если команда не разрешена"""
        handler = MagicMock()
        dispatcher = CommandDispatcher(registry={"ls": handler})
        result = dispatcher.dispatch(project_state, "ls", ["pwd"])
        assert result.output == NOT_ALLOWED
        handler.assert_not_called()

    def test_invokes_handler_with_args(self, project_state):
        expected = CommandResult(state=project_state, output="ok")
        handler = MagicMock(return_value=expected)
        dispatcher = CommandDispatcher(registry={"git add": handler})
        result = dispatcher.dispatch(project_state, "git add src a.js", ["git add"])
        handler.assert_called_once_with(project_state, ["src", "a.js"])
        assert result is expected

    def test_allow_list_is_by_key(self, dispatcher, project_state):
        """Тест: 'git add' в списке разрешает и 'git add .'"""
        state = dispatcher.dispatch(project_state, "git init", ["git init", "git add"]).state
        result = dispatcher.dispatch(state, "git add .", ["git init", "git add"])
        assert result.output == "3 files added to staging area."

    def test_help_lists_allowed_commands(self, dispatcher, project_state):
        result = dispatcher.dispatch(project_state, "help", ["ls", "help", "git init"])
        assert result.output == "Available commands:\n\n  ls\n  help\n  git init"
        assert result.state is project_state

    def test_help_not_allowed(self, dispatcher, project_state):
        assert dispatcher.dispatch(project_state, "help", ["ls"]).output == NOT_ALLOWED

    def test_registries_are_independent(self, project_state):
        """Тест: два диспетчера с разными реестрами не влияют друг на друга"""
        only_ls = CommandDispatcher(registry={"ls": LsCommand()})
        full = CommandDispatcher()
        assert only_ls.dispatch(project_state, "pwd", ["pwd"]).output == "Unknown command: pwd"
        assert full.dispatch(project_state, "pwd", ["pwd"]).output == "/root"


class TestDefaultRegistry:
    """Тесты для build_default_registry"""

    def test_keys(self):
        assert set(build_default_registry()) == {
            "ls", "cd", "pwd", "cat", "touch", "mkdir", "rm", "clear",
            "git init", "git add", "git commit", "git status", "git log",
        }

    def test_fresh_instance_each_call(self):
        assert build_default_registry() is not build_default_registry()
