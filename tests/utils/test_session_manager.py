#!/usr/bin/env python3
"""
Unit тесты для session_manager.py и каталога упражнений
"""

import pytest

from git_sandbox_mcp.engine.dispatcher import CommandDispatcher
from git_sandbox_mcp.exercises import get_all_exercises
from git_sandbox_mcp.prompts import build_tutor_prompt, get_all_prompts
from git_sandbox_mcp.utils.config import ServiceConfig
from git_sandbox_mcp.utils.session_manager import SessionManager


@pytest.fixture
def manager():
    """Создает SessionManager с упражнениями по умолчанию"""
    return SessionManager(get_all_exercises(), CommandDispatcher(), default_exercise_id=1)


class TestExercises:
    """Тесты для каталога упражнений"""

    def test_catalog(self):
        exercises = get_all_exercises()
        assert list(exercises) == [1, 2]
        assert exercises[1].title == "Initialize and First Commit"
        assert exercises[2].title == "Multiple Commits"

    def test_fresh_state(self):
        state = get_all_exercises()[2].create_state()
        assert state.file_system.cwd == "/root"
        assert set(state.file_system.root.children) == {"index.js", "app.js", "utils.js"}
        assert not state.git.is_initialized

    def test_success_condition_excluded_from_dump(self):
        dumped = get_all_exercises()[1].model_dump(mode="json")
        assert "success_condition" not in dumped
        assert dumped["allowed_commands"][0] == "ls"


class TestSessionManager:
    """Тесты для SessionManager"""

    def test_new_session_uses_default_exercise(self, manager):
        session = manager.get_session("s1")
        assert session.exercise.id == 1
        assert manager.get_session("s1") is session

    def test_run_command_keeps_state(self, manager):
        manager.run_command("git init", "s1")
        assert manager.get_session("s1").state.git.is_initialized
        assert not manager.get_session("s2").state.git.is_initialized

    def test_exercise_one_completion(self, manager):
        for line in ["git init", "git add .", 'git commit -m "initial commit"']:
            manager.run_command(line, "s1")
        assert manager.get_session("s1").completed

    def test_exercise_one_forbids_touch(self, manager):
        result = manager.run_command("touch x.js", "s1")
        assert result.output == "This command is not allowed in this exercise."

    def test_exercise_two_completion(self, manager):
        manager.start_exercise(2, "s1")
        manager.run_command("git init", "s1")
        for n in range(3):
            assert not manager.get_session("s1").completed
            for line in [f"touch f{n}.js", "git add .", f'git commit -m "c{n}"']:
                manager.run_command(line, "s1")
        assert manager.get_session("s1").completed

    def test_switching_exercise_discards_state(self, manager):
        manager.run_command("git init", "s1")
        session = manager.start_exercise(2, "s1")
        assert session.exercise.id == 2
        assert not session.state.git.is_initialized

    def test_unknown_exercise(self, manager):
        with pytest.raises(ValueError, match="Unknown exercise: 99"):
            manager.start_exercise(99, "s1")

    def test_unknown_default_exercise(self):
        with pytest.raises(ValueError):
            SessionManager(get_all_exercises(), CommandDispatcher(), default_exercise_id=42)


class TestConfigAndPrompts:
    """Тесты конфигурации и промптов"""

    def test_config_from_env(self, monkeypatch):
        monkeypatch.setenv("MCP_PORT", "9001")
        monkeypatch.setenv("DEFAULT_EXERCISE_ID", "2")
        config = ServiceConfig()
        assert config.MCP_PORT == 9001
        assert config.DEFAULT_EXERCISE_ID == 2
        assert config.MCP_TRANSPORT == "stdio"

    def test_tutor_prompt_contains_briefing(self):
        exercise = get_all_exercises()[2]
        prompt = build_tutor_prompt(exercise)
        assert "# Exercise 2: Multiple Commits" in prompt
        assert "- `git commit`" in prompt
        assert "1. Use ls to see files in your working directory." in prompt
        assert set(get_all_prompts()) == {"base", "sandbox-limits"}
