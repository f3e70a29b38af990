#!/usr/bin/env python3
"""
Интеграционные тесты: сценарии обучения через диспетчер
"""

import pytest

from git_sandbox_mcp.engine.file_system import all_file_paths
from git_sandbox_mcp.engine.git_store import file_status
from git_sandbox_mcp.models.file_system import DirectoryNode, FileNode
from git_sandbox_mcp.models.git import FileStatus

NOT_A_REPO = "fatal: not a git repository (or any of the parent directories): .git"


class TestScenarios:
    """Сквозные сценарии"""

    def test_status_before_init(self, run, project_state):
        """Сценарий A: git status до git init"""
        result = run(project_state, "git status")
        assert result.output == NOT_A_REPO
        assert result.state is project_state

    def test_first_commit(self, run, make_state):
        """Сценарий B: init -> touch -> add . -> commit"""
        result = run(make_state(), "git init", "touch a.js", "git add .", 'git commit -m "first"')
        git = result.state.git
        assert git.branches["main"] == "C1"
        assert git.tracked_files == {"/root/a.js"}
        assert result.output.startswith("[main C1] first")

    def test_ls_order(self, run, make_state):
        """Сценарий C: директории перед файлами"""
        state = make_state(DirectoryNode(children={"a.js": FileNode(), "src": DirectoryNode()}))
        assert run(state, "ls").output == "src/  a.js"

    def test_cd_parent_at_root(self, run, project_state):
        """Сценарий D: cd .. в /root"""
        result = run(project_state, "cd ..")
        assert result.state.file_system.cwd == "/root"
        assert result.output == ""

    def test_rm_staged_and_tracked(self, run, make_state):
        """Сценарий E: rm файла, который одновременно staged и tracked"""
        state = run(
            make_state(),
            "git init", "touch a.js", "git add a.js", 'git commit -m "one"',
        ).state
        # Re-stage the tracked path so it sits in both sets
        state = state.model_copy(update={"git": state.git.model_copy(update={"staged_files": frozenset({"/root/a.js"})})})
        assert "/root/a.js" in state.git.tracked_files

        result = run(state, "rm a.js")
        assert run(result.state, "ls").output == "(empty directory)"
        assert "/root/a.js" not in result.state.git.staged_files
        assert "/root/a.js" not in result.state.git.tracked_files

    def test_three_commit_cycles(self, run, make_state):
        """Сценарий F: три цикла touch + add . + commit"""
        state = make_state(DirectoryNode(children={"index.js": FileNode()}))
        state = run(state, "git init").state
        for n in range(3):
            state = run(state, f"touch file{n}.js", "git add .", f'git commit -m "commit {n}"').state

        commits = state.git.commits
        assert [c.id for c in commits] == ["C1", "C2", "C3"]
        assert [c.parents for c in commits] == [(), ("C1",), ("C2",)]
        assert commits[0].snapshot == {"/root/index.js", "/root/file0.js"}
        assert len(commits[2].snapshot) == 4

    def test_nested_navigation_and_add(self, run, project_state):
        result = run(project_state, "git init", "cd src", "mkdir pkg", "cd pkg", "touch mod.js", "cd ../..", "git add src/pkg")
        assert result.output == "1 file added to staging area."
        assert result.state.git.staged_files == {"/root/src/pkg/mod.js"}
        assert result.state.file_system.cwd == "/root"


class TestProperties:
    """Свойства движка"""

    def test_status_completeness(self, run, project_state):
        """Каждый файл в дереве имеет ровно один статус"""
        state = run(project_state, "git init", "git add src/lib", 'git commit -m "lib"', "git add a.js").state
        statuses = {p: file_status(state.git, p) for p in all_file_paths(state.file_system.root, "/root")}
        assert statuses == {
            "/root/a.js": FileStatus.STAGED,
            "/root/src/index.js": FileStatus.UNTRACKED,
            "/root/src/lib/util.js": FileStatus.TRACKED_CLEAN,
        }

    def test_idempotent_add(self, run, project_state):
        state = run(project_state, "git init", "git add .").state
        again = run(state, "git add .")
        assert again.state is state

    @pytest.mark.parametrize(
        "line",
        ["touch b.js", "mkdir docs", "rm a.js", "cd src", "git add .", 'git commit -m "x"', "git init"],
    )
    def test_copy_on_write_isolation(self, run, project_state, line):
        """Выполнение команды не меняет исходное состояние"""
        state = run(project_state, "git init", "git add a.js").state
        before = state.model_dump()
        run(state, line)
        assert state.model_dump() == before

    def test_shared_tree_is_read_only(self, run, project_state):
        """Через новое состояние нельзя изменить поддерево, общее с прежним"""
        new_state = run(project_state, "touch b.js").state
        with pytest.raises(TypeError):
            new_state.file_system.root.children["src"].children["evil.js"] = FileNode()
        assert "/root/src/evil.js" not in all_file_paths(project_state.file_system.root, "/root")

    def test_snapshot_immutability(self, run, make_state):
        state = run(make_state(), "git init", "touch a.js", "git add .", 'git commit -m "one"').state
        first_snapshot = state.git.commits[0].snapshot
        state = run(state, "touch b.js", "git add .", 'git commit -m "two"').state
        assert state.git.commits[0].snapshot == first_snapshot == {"/root/a.js"}

    def test_clear_signal(self, run, project_state):
        result = run(project_state, "clear")
        assert result.clear_terminal is True
