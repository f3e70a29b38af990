"""Projects repository state onto nodes and edges for the commit graph renderer."""

from collections import defaultdict

from git_sandbox_mcp.engine import git_store
from git_sandbox_mcp.models.git import GitState
from git_sandbox_mcp.models.graph import GraphEdge, GraphNode, GraphProjection, NodePosition

NODE_SPACING_X = 160
NODE_Y = 100


def project(state: GitState) -> GraphProjection:
    """
    Lays commits out left to right on a single row, oldest first.

    The tip of the current branch is the active node; an edge is active when
    either of its ends is.
    """
    if not state.is_initialized or not state.commits:
        return GraphProjection()

    branch_labels: dict[str, list[str]] = defaultdict(list)
    for branch_name, commit_id in state.branches.items():
        if commit_id is not None:
            branch_labels[commit_id].append(branch_name)

    head_id = git_store.head_commit_id(state)
    commits = git_store.chronological(state)

    nodes = [
        GraphNode(
            id=commit.id,
            label=commit.id,
            message=commit.message,
            slot=slot,
            position=NodePosition(x=slot * NODE_SPACING_X, y=NODE_Y),
            branches=tuple(branch_labels.get(commit.id, ())),
            is_active=commit.id == head_id,
        )
        for slot, commit in enumerate(commits)
    ]

    edges = [
        GraphEdge(
            id=f"{parent_id}-{commit.id}",
            source=parent_id,
            target=commit.id,
            is_active=head_id is not None and head_id in (parent_id, commit.id),
        )
        for commit in commits
        for parent_id in commit.parents
    ]

    return GraphProjection(nodes=nodes, edges=edges)
