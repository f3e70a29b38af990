"""Aggregates the exercise configurations shipped with the sandbox."""

from git_sandbox_mcp.models.exercise import ExerciseConfig

from .first_commit import EXERCISE as FIRST_COMMIT
from .multiple_commits import EXERCISE as MULTIPLE_COMMITS


def get_all_exercises() -> dict[int, ExerciseConfig]:
    """
    Returns all available exercises keyed by id, in presentation order.
    """
    return {exercise.id: exercise for exercise in (FIRST_COMMIT, MULTIPLE_COMMITS)}
