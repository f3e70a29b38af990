"""Initializes the prompts module and aggregates prompts from all submodules."""

from .system import get_prompts as get_system_prompts
from .system import render_exercise_briefing


def get_all_prompts() -> dict[str, str]:
    """
    Returns a dictionary of all available prompts from all prompt files.
    """
    prompts = {}
    prompts.update(get_system_prompts())
    return prompts


def build_tutor_prompt(exercise) -> str:
    """Combines the tutor prompt components with the briefing for `exercise`."""
    prompts = get_all_prompts()
    return "\n".join([prompts["base"], prompts["sandbox-limits"], render_exercise_briefing(exercise)])
